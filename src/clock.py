"""Day-of-week resolution from raw Unix time.

No calendar or timezone lookup is involved: the day index is whole UTC days
since the epoch modulo 7, and 1970-01-01 was a Thursday.
"""
import time
from datetime import date, timedelta
from typing import Optional, Tuple

from errors import ClockError
from models import Day

SECONDS_PER_DAY = 24 * 60 * 60
EPOCH_DATE = date(1970, 1, 1)

# index 0 is the epoch day (Thursday)
_EPOCH_ORDER: Tuple[Day, ...] = (
    Day.THU, Day.FRI, Day.SAT, Day.SUN, Day.MON, Day.TUE, Day.WED,
)


def epoch_days(now: Optional[float] = None) -> int:
    seconds = time.time() if now is None else now
    if seconds < 0:
        raise ClockError(f"Failed getting system time: clock reads {seconds}s before the Unix epoch")
    return int(seconds) // SECONDS_PER_DAY


def day_of_week_to_day(day_of_week: int) -> Day:
    if not 0 <= day_of_week < len(_EPOCH_ORDER):
        raise ValueError(f"day of week must be in [0, 6], got {day_of_week}")
    return _EPOCH_ORDER[day_of_week]


def current_day(now: Optional[float] = None) -> Day:
    return day_of_week_to_day(epoch_days(now) % 7)


def epoch_day_to_date(days: int) -> date:
    return EPOCH_DATE + timedelta(days=days)


def today(now: Optional[float] = None) -> Tuple[Day, date]:
    """Weekday and calendar date read from a single clock sample."""
    days = epoch_days(now)
    return current_day(days * SECONDS_PER_DAY), epoch_day_to_date(days)
