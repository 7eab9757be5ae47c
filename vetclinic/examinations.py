"""Examination slips: records, storage and ordering."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from .records import (
    PathLike,
    append_records,
    code_number,
    format_flag,
    next_code,
    parse_flag,
    read_records,
    write_records,
)

EXAMINATION_FILE = "PhieuKhamBenh.txt"
EXAMINATION_PREFIX = "PKB"

_FIELD_COUNT = 8

T = TypeVar("T")


@dataclass
class Examination:
    """An examination slip; ``deleted`` marks a soft-deleted entry."""

    number: str = ""
    date: str = ""
    owner_code: str = ""
    medicine_code: str = ""
    quantity: int = 0
    symptoms: str = ""
    diagnosis: str = ""
    deleted: bool = False


def _parse_quantity(text: str, number: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(
            f"invalid medicine quantity {text!r} on slip {number!r}"
        ) from None


def _to_record(exam: Examination) -> list[object]:
    return [
        exam.number,
        exam.date,
        exam.owner_code,
        exam.medicine_code,
        exam.quantity,
        exam.symptoms,
        exam.diagnosis,
        format_flag(exam.deleted),
    ]


def _from_record(fields: Sequence[str]) -> Examination:
    number, date, owner, medicine, quantity, symptoms, diagnosis, flag = fields
    return Examination(
        number,
        date,
        owner,
        medicine,
        _parse_quantity(quantity, number),
        symptoms,
        diagnosis,
        parse_flag(flag),
    )


def load_examinations(path: PathLike = EXAMINATION_FILE) -> list[Examination]:
    """Read all examination slips, deleted ones included.

    Raises ``ValueError`` when a quantity is not an integer.
    """
    return [_from_record(fields) for fields in read_records(path, _FIELD_COUNT)]


def save_examinations(
    examinations: Iterable[Examination], path: PathLike = EXAMINATION_FILE
) -> None:
    """Overwrite the examination file with ``examinations``."""
    write_records(path, (_to_record(exam) for exam in examinations))


def append_examination(
    examination: Examination, path: PathLike = EXAMINATION_FILE
) -> None:
    """Append one slip to the examination file."""
    append_records(path, [_to_record(examination)])


def code_exists(examinations: Iterable[Examination], code: str) -> bool:
    """Whether any slip, deleted or not, already uses ``code``."""
    return any(exam.number == code for exam in examinations)


def examination_code_number(code: str) -> int:
    """The number in a ``PKBxxx`` code, or 0 if the code is malformed."""
    return code_number(code, EXAMINATION_PREFIX)


def next_examination_code(examinations: Iterable[Examination]) -> str:
    """A fresh ``PKBxxx`` code above every code in use."""
    return next_code((exam.number for exam in examinations), EXAMINATION_PREFIX)


def find_active_examination(
    examinations: Iterable[Examination], number: str
) -> Examination | None:
    """The first slip with ``number`` that is not deleted, or None."""
    return next(
        (e for e in examinations if e.number == number and not e.deleted),
        None,
    )


def exchange_sort(items: Iterable[T], key: Callable[[T], str]) -> list[T]:
    """Order items latest key first by pairwise exchange.

    Equal keys are not guaranteed to keep their original order; the exact
    exchange sequence is kept so listings come out in the same order as before.
    """
    result = list(items)
    for i in range(len(result)):
        for j in range(i + 1, len(result)):
            if key(result[i]) < key(result[j]):
                result[i], result[j] = result[j], result[i]
    return result


def sort_by_date(examinations: Iterable[Examination]) -> list[Examination]:
    """A new list of slips ordered from the latest date to the earliest."""
    return exchange_sort(examinations, lambda exam: exam.date)