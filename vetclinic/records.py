"""Line-oriented record files: one field per line, a fixed number of lines per record."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _read_lines(path: PathLike) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        content = handle.read()
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_records(path: PathLike, field_count: int) -> list[list[str]]:
    """Read a record file, grouping consecutive lines into records of ``field_count`` fields.

    A trailing incomplete record is padded with empty fields.
    Raises ``FileNotFoundError`` when the file does not exist.
    """
    if field_count < 1:
        raise ValueError("field_count must be at least 1")
    lines = iter(_read_lines(path))
    records: list[list[str]] = []
    while chunk := list(islice(lines, field_count)):
        chunk.extend([""] * (field_count - len(chunk)))
        records.append(chunk)
    return records


def _dump(handle, records: Iterable[Sequence[object]]) -> None:
    for record in records:
        for field in record:
            handle.write(f"{field}\n")


def write_records(path: PathLike, records: Iterable[Sequence[object]]) -> None:
    """Replace the contents of ``path`` with ``records``."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        _dump(handle, records)


def append_records(path: PathLike, records: Iterable[Sequence[object]]) -> None:
    """Append ``records`` to the end of ``path``, creating it if needed."""
    with open(path, "a", encoding="utf-8", newline="\n") as handle:
        _dump(handle, records)


def parse_flag(text: str) -> bool:
    """Decode a deletion flag: only ``"1"`` means deleted."""
    return text == "1"


def format_flag(deleted: bool) -> str:
    """Encode a deletion flag as ``"1"`` or ``"0"``."""
    return "1" if deleted else "0"


def code_number(code: str, prefix: str) -> int:
    """Return the number following ``prefix`` in ``code``, or 0 if there is none.

    Leading whitespace and a sign are accepted, trailing text after the digits
    is ignored, and values outside a 32-bit signed integer give 0.
    """
    if len(code) <= len(prefix) or not code.startswith(prefix):
        return 0
    match = _LEADING_INT.match(code, len(prefix))
    if match is None:
        return 0
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return 0
    return value


def next_code(codes: Iterable[str], prefix: str) -> str:
    """Return a new code one above the highest number used with ``prefix``."""
    highest = max((code_number(code, prefix) for code in codes), default=0)
    return f"{prefix}{max(highest, 0) + 1:03d}"