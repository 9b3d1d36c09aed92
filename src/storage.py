"""Persistence helpers (load/save) for the week state.

The state file is pretty-printed JSON:

    {"tasks": [...], "marks": {"Mon": ["Y", "X"], ...}, "recorded_on": "YYYY-MM-DD"}

Day keys that are missing load as empty sequences. Anything else that does
not fit this shape is a FormatError; there is no repair or migration.
"""
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from errors import FormatError, StorageError
from models import Day, Mark, WeekState

StateDict = Dict[str, Any]


class Storage:
    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> WeekState:
        """Read and parse the state file."""
        return state_from_dict(self._read())

    def save(self, state: WeekState) -> None:
        """Persist state, replacing the file only once the new copy is written."""
        payload = json.dumps(state_to_dict(state), indent=4)
        tmp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
                f.write('\n')
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Failed writing {self.path} due to: {exc}") from exc

    def _file_mode(self) -> int:
        """Keep an existing file's permissions; new files follow the umask."""
        if self.path.exists():
            return self.path.stat().st_mode & 0o777
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    def recorded_on(self) -> Optional[str]:
        """Return the stored recorded_on date, or None if there is no file yet."""
        if not self.path.exists():
            return None
        data = self._read()
        if not isinstance(data, dict):
            raise FormatError(f"Failed parsing {self.path}: expected a JSON object")
        value = data.get('recorded_on')
        if value is not None and not isinstance(value, str):
            raise FormatError(f"Failed parsing {self.path}: 'recorded_on' must be a string")
        return value

    def _read(self) -> Any:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                contents = f.read()
        except OSError as exc:
            raise StorageError(f"Failed reading {self.path} due to: {exc}") from exc
        try:
            return json.loads(contents)
        except ValueError as exc:
            raise FormatError(f"Failed parsing {self.path} due to: {exc}") from exc


# -------------------- serialization --------------------
def state_to_dict(state: WeekState) -> StateDict:
    return {
        'tasks': list(state.tasks),
        'marks': {day.value: [mark.value for mark in state.marks.get(day, [])] for day in Day},
        'recorded_on': state.recorded_on,
    }


def state_from_dict(data: Any) -> WeekState:
    if not isinstance(data, dict):
        raise FormatError("State must be a JSON object")
    tasks = data.get('tasks')
    if not isinstance(tasks, list) or not all(isinstance(t, str) for t in tasks):
        raise FormatError("'tasks' must be a list of strings")
    raw_marks = data.get('marks', {})
    if not isinstance(raw_marks, dict):
        raise FormatError("'marks' must be an object keyed by day")
    unknown = set(raw_marks) - {day.value for day in Day}
    if unknown:
        raise FormatError(f"Unknown day key(s) in 'marks': {', '.join(sorted(unknown))}")
    recorded_on = data.get('recorded_on')
    if recorded_on is not None and not isinstance(recorded_on, str):
        raise FormatError("'recorded_on' must be a string")

    state = WeekState(tasks=list(tasks), recorded_on=recorded_on)
    for day in Day:
        state.record(day, _parse_marks(day, raw_marks.get(day.value, [])))
    return state


def _parse_marks(day: Day, raw: Any) -> List[Mark]:
    if not isinstance(raw, list):
        raise FormatError(f"Marks for {day} must be a list")
    marks: List[Mark] = []
    for symbol in raw:
        try:
            marks.append(Mark(symbol))
        except ValueError as exc:
            raise FormatError(f"Invalid mark {symbol!r} for {day}") from exc
    return marks
