"""Append-only history log (TODO.log) next to the state file."""
from datetime import datetime, timezone
from pathlib import Path

from errors import StorageError


class History:
    def __init__(self, path: Path):
        self.path = Path(path)

    def log_event(self, message: str) -> None:
        """Append a timestamped event line."""
        timestamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        # Normalize "+00:00" to "Z" for nicer display
        if timestamp.endswith("+00:00"):
            timestamp = timestamp[:-6] + "Z"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(f"{timestamp} {message}\n")
        except OSError as exc:
            raise StorageError(f"Failed appending to {self.path} due to: {exc}") from exc
