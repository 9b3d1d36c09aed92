from datetime import date

import pytest

import clock
from errors import ClockError
from models import Day
from helpers import MONDAY, SUNDAY, utc_timestamp


def test_epoch_anchor_mapping():
    expected = [Day.THU, Day.FRI, Day.SAT, Day.SUN, Day.MON, Day.TUE, Day.WED]
    assert [clock.day_of_week_to_day(d) for d in range(7)] == expected


def test_mapping_is_bijection():
    assert {clock.day_of_week_to_day(d) for d in range(7)} == set(Day)


@pytest.mark.parametrize("bad", [-1, 7, 42])
def test_mapping_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        clock.day_of_week_to_day(bad)


def test_epoch_itself_is_thursday():
    assert clock.current_day(0) is Day.THU
    assert clock.current_day(clock.SECONDS_PER_DAY - 1) is Day.THU
    assert clock.current_day(clock.SECONDS_PER_DAY) is Day.FRI


def test_known_dates():
    assert clock.current_day(MONDAY) is Day.MON
    assert clock.current_day(SUNDAY) is Day.SUN
    # UTC day boundary, no local timezone applied
    assert clock.current_day(utc_timestamp(2026, 10, 12, hour=0)) is Day.MON
    assert clock.current_day(utc_timestamp(2026, 10, 11, hour=23)) is Day.SUN


def test_clock_before_epoch_fails():
    with pytest.raises(ClockError):
        clock.epoch_days(-5)


def test_epoch_day_to_date():
    assert clock.epoch_day_to_date(0) == date(1970, 1, 1)
    assert clock.epoch_day_to_date(clock.epoch_days(MONDAY)) == date(2026, 10, 12)


def test_current_day_uses_system_time(monkeypatch):
    monkeypatch.setattr(clock.time, "time", lambda: SUNDAY)
    assert clock.current_day() is Day.SUN


def test_today_returns_day_and_date():
    assert clock.today(SUNDAY) == (Day.SUN, date(2026, 10, 18))
    assert clock.today(0) == (Day.THU, date(1970, 1, 1))


def test_today_rejects_clock_before_epoch():
    with pytest.raises(ClockError):
        clock.today(-1)
