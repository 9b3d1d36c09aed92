"""Interactive daily check-in.

Monday starts a new week (task list entered by the user). Every day the
user is asked, task by task, whether it was done; Sunday ends with the
week table. A day that already has marks recorded is refused.
"""
import sys
from datetime import date, timedelta
from typing import Callable, List, Optional, Sequence

from errors import AlreadyRecordedError, FormatError, InputError, StorageError
from events import History
from models import Day, Mark, WeekState
from storage import Storage
from table import render_table

Reader = Callable[[str], str]

TASKS_PROMPT = "Enter this week's tasks (comma separated): "


def parse_answer(line: str) -> Mark:
    """Map one line of console input to a mark.

    Anything longer than one character counts as not done; an empty line
    (just Enter) counts as done.
    """
    answer = line.rstrip('\r\n').strip()
    if len(answer) > 1:
        return Mark.NOT_DONE
    return Mark.DONE if answer in ('', 'Y', 'y') else Mark.NOT_DONE


def parse_task_list(line: str) -> List[str]:
    tasks = [part.strip() for part in line.split(',')]
    tasks = [t for t in tasks if t]
    if not tasks:
        raise InputError("No tasks entered for this week")
    return tasks


def week_start(on: date) -> date:
    """Monday of the week containing `on`."""
    return on - timedelta(days=on.weekday())


def _before_week_of(recorded_on: Optional[str], on: date) -> bool:
    if recorded_on is None:
        return False
    try:
        recorded = date.fromisoformat(recorded_on)
    except ValueError as exc:
        raise FormatError(f"Invalid recorded_on date {recorded_on!r}") from exc
    return recorded < week_start(on)


class CLI:
    def __init__(self, storage: Storage, history: Optional[History] = None, reader: Reader = input):
        self.storage = storage
        self.history = history
        self.reader = reader

    def run(self, today: Day, on: date) -> None:
        """Record today's completion; on Sunday also print the week table."""
        today_iso = on.isoformat()
        carried_over = False
        if today is Day.MON:
            state = self._start_week(today_iso)
        else:
            state = self.storage.load()
            if state.recorded_on == today_iso:
                raise AlreadyRecordedError()
            if _before_week_of(state.recorded_on, on):
                # Monday was skipped; last week's marks must not leak into this one
                state = WeekState(tasks=state.tasks)
                carried_over = True

        state.record(today, self.ask_completion(state.tasks))
        state.recorded_on = today_iso
        self.storage.save(state)

        if today is Day.SUN:
            print(render_table(state))

        if today is Day.MON:
            self._log(f"started week: {', '.join(state.tasks)}")
        elif carried_over:
            self._log(f"started week on {today} with last week's tasks: {', '.join(state.tasks)}")
        self._log(f"recorded {today}: {state.done_count(today)}/{len(state.tasks)} done")

    # -------------------- user-interactive flows --------------------
    def ask_tasks(self) -> List[str]:
        return parse_task_list(self._read(TASKS_PROMPT))

    def ask_completion(self, tasks: Sequence[str]) -> List[Mark]:
        return [parse_answer(self._read(f"{task} (Y/n) ")) for task in tasks]

    def _start_week(self, today_iso: str) -> WeekState:
        try:
            previous = self.storage.recorded_on()
        except FormatError:
            previous = None  # unreadable last week is overwritten below
        if previous == today_iso:
            raise AlreadyRecordedError()
        return WeekState(tasks=self.ask_tasks())

    def _read(self, prompt: str) -> str:
        try:
            return self.reader(prompt)
        except EOFError as exc:
            raise InputError("Failed reading input: end of input") from exc
        except OSError as exc:
            raise InputError(f"Failed reading input due to: {exc}") from exc

    def _log(self, message: str) -> None:
        """Append to the history; the day is already saved, so failures only warn."""
        if self.history is None:
            return
        try:
            self.history.log_event(message)
        except StorageError as exc:
            print(f"warning: {exc}", file=sys.stderr)
