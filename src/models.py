"""Data models for the weekly to-do tracker.

A week is a fixed task list plus one sequence of marks per day. Mark
sequences are positional: the n-th mark of a day belongs to the n-th task.
Days that were skipped simply have no entries and display as "?".
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence


class Day(Enum):
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    def __str__(self) -> str:
        return self.value


class Mark(Enum):
    DONE = "Y"
    NOT_DONE = "X"
    UNSET = "?"

    def __str__(self) -> str:
        return self.value


def _empty_marks() -> Dict[Day, List[Mark]]:
    return {day: [] for day in Day}


@dataclass
class WeekState:
    """One week of tracking.

    Fields:
        tasks: Task names in entry order (duplicates allowed, keyed by position).
        marks: Per-day mark sequences; all seven days always present.
        recorded_on: ISO date (UTC) of the last day completion was recorded.
    """
    tasks: List[str] = field(default_factory=list)
    marks: Dict[Day, List[Mark]] = field(default_factory=_empty_marks)
    recorded_on: Optional[str] = None

    def mark_at(self, day: Day, index: int) -> Mark:
        day_marks = self.marks.get(day, [])
        if 0 <= index < len(day_marks):
            return day_marks[index]
        return Mark.UNSET

    def record(self, day: Day, marks: Sequence[Mark]) -> None:
        """Overwrite the mark sequence for a single day."""
        self.marks[day] = list(marks)

    def done_count(self, day: Day) -> int:
        return sum(1 for mark in self.marks.get(day, []) if mark is Mark.DONE)
