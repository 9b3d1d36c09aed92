"""Weekly summary table rendering.

Layout (max_length = longest task name):

    ┌──────┬─────┬─────┬ ... ┬─────┐
    │      │ Mon │ Tue │     │ Sun │
    ├──────┼─────┼─────┼ ... ┼─────┤
    │ Run  │  Y  │  ?  │     │  ?  │
    └──────┴─────┴─────┴ ... ┴─────┘
"""
from typing import List, Sequence

from models import Day, WeekState
from theme import color, BORDER_COLOR, HEADER_COLOR, MARK_COLOR

CELL_WIDTH = 5
H, V = "─", "│"


def _border(left: str, mid: str, right: str, label_width: int) -> str:
    line = left + H * (label_width + 2) + ''.join(mid + H * CELL_WIDTH for _ in Day) + right
    return color(line, BORDER_COLOR)


def _row(label: str, label_width: int, cells: Sequence[str]) -> str:
    bar = color(V, BORDER_COLOR)
    return bar + f" {label:<{label_width}} " + bar + bar.join(cells) + bar


def render_table(state: WeekState) -> str:
    """Return the boxed week table; state is not modified."""
    max_length = max((len(task) for task in state.tasks), default=0)
    header_cells = [color(f"{day.value:^{CELL_WIDTH}}", HEADER_COLOR) for day in Day]
    lines: List[str] = [
        _border("┌", "┬", "┐", max_length),
        _row("", max_length, header_cells),
        _border("├", "┼", "┤", max_length),
    ]
    for index, task in enumerate(state.tasks):
        cells = []
        for day in Day:
            symbol = state.mark_at(day, index).value
            cells.append(color(f"{symbol:^{CELL_WIDTH}}", MARK_COLOR[symbol]))
        lines.append(_row(task, max_length, cells))
    lines.append(_border("└", "┴", "┘", max_length))
    return '\n'.join(lines)
