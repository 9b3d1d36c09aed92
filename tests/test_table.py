from models import Day, Mark, WeekState
from table import render_table


def _cells(line):
    return [cell.strip() for cell in line.strip("│").split("│")]


def test_monday_column_and_unset_days():
    state = WeekState(tasks=["Run", "Read"])
    state.record(Day.MON, [Mark.DONE, Mark.NOT_DONE])
    lines = render_table(state).splitlines()

    assert _cells(lines[1]) == ["", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert _cells(lines[3]) == ["Run", "Y", "?", "?", "?", "?", "?", "?"]
    assert _cells(lines[4]) == ["Read", "X", "?", "?", "?", "?", "?", "?"]


def test_borders_scale_with_longest_task():
    state = WeekState(tasks=["Run", "Meditate"])
    lines = render_table(state).splitlines()

    assert lines[0].startswith("┌" + "─" * (len("Meditate") + 2) + "┬")
    assert lines[-1].startswith("└") and lines[-1].endswith("┘")
    assert len({len(line) for line in lines}) == 1
    assert lines[3].startswith("│ " + "Run".ljust(len("Meditate")) + " │")


def test_short_day_sequence_shows_unset():
    state = WeekState(tasks=["A", "B", "C"])
    state.record(Day.SUN, [Mark.DONE])
    lines = render_table(state).splitlines()
    assert [_cells(line)[-1] for line in lines[3:6]] == ["Y", "?", "?"]


def test_render_does_not_mutate():
    state = WeekState(tasks=["Run"])
    state.record(Day.TUE, [Mark.DONE])
    before = WeekState(tasks=list(state.tasks), marks={d: list(m) for d, m in state.marks.items()})
    render_table(state)
    assert state == before


def test_empty_week():
    lines = render_table(WeekState()).splitlines()
    assert len(lines) == 4
