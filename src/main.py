"""Main entry point for weekly-todo.

Resolves today and the state location, runs the daily check-in, and turns
any TrackerError into a diagnostic on stderr plus a non-zero exit code.
"""
import sys
from typing import Optional

import clock
from cli import CLI, Reader
from config import APP_NAME, Config
from errors import TrackerError
from events import History
from storage import Storage


def main(now: Optional[float] = None, reader: Reader = input) -> int:
    try:
        config = Config.from_env()
        day, on = clock.today(now)
        cli = CLI(Storage(config.state_file), History(config.history_file), reader=reader)
        cli.run(day, on)
    except TrackerError as exc:
        print(f"{APP_NAME}: {exc}", file=sys.stderr)
        return exc.exit_code
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    return 0

if __name__ == "__main__":
    sys.exit(main())
