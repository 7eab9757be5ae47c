"""Plain-text tables bordered with ``+``, ``-`` and ``|``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_ALIGNMENTS = ("left", "right")


@dataclass(frozen=True)
class Column:
    """A table column: its header title, its minimum width and its alignment."""

    title: str
    width: int
    align: str = "left"

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError("column width must not be negative")
        if self.align not in _ALIGNMENTS:
            raise ValueError(f"unknown alignment: {self.align!r}")


def _cell(column: Column, value: object) -> str:
    text = str(value)
    if column.align == "right":
        return text.rjust(column.width)
    return text.ljust(column.width)


def rule(columns: Sequence[Column]) -> str:
    """Return a border line such as ``+-----+---+``."""
    return "+" + "+".join("-" * column.width for column in columns) + "+"


def _row(columns: Sequence[Column], values: Sequence[object]) -> str:
    if len(values) != len(columns):
        raise ValueError(
            f"row has {len(values)} cells but the table has {len(columns)} columns"
        )
    return "|" + "|".join(_cell(c, v) for c, v in zip(columns, values)) + "|"


def render_table(
    columns: Sequence[Column],
    rows: Iterable[Sequence[object]],
    separate_rows: bool = True,
) -> str:
    """Render a header and rows; cells wider than their column are not cut."""
    border = rule(columns)
    lines = [border, _row(columns, [c.title for c in columns]), border]
    body = [_row(columns, values) for values in rows]
    if separate_rows:
        for index, line in enumerate(body):
            if index:
                lines.append(border)
            lines.append(line)
    else:
        lines.extend(body)
    lines.append(border)
    return "\n".join(lines) + "\n"