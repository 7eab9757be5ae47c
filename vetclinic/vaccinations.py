"""Vaccination schedule: records, storage, searches and the schedule table."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .examinations import exchange_sort
from .records import (
    PathLike,
    append_records,
    format_flag,
    parse_flag,
    read_records,
    write_records,
)
from .tables import Column, render_table

VACCINATION_FILE = "LichTiemPhong.txt"
EMPTY_VACCINATION_LIST = "Danh sach lich tiem rong!"

_FIELD_COUNT = 6
_COLUMNS = (
    Column("Ma Chu Nuoi", 12),
    Column("Thong Tin Thu Cung", 30),
    Column("Ngay Tiem", 12),
    Column("Loai Vac Xin", 15),
    Column("Ghi Chu", 50),
)


@dataclass
class Vaccination:
    """A planned vaccination; ``deleted`` marks a soft-deleted entry."""

    owner_code: str = ""
    pet_info: str = ""
    date: str = ""
    vaccine: str = ""
    note: str = ""
    deleted: bool = False


def _to_record(item: Vaccination) -> list[str]:
    return [
        item.owner_code,
        item.pet_info,
        item.date,
        item.vaccine,
        item.note,
        format_flag(item.deleted),
    ]


def _from_record(fields: Sequence[str]) -> Vaccination:
    owner_code, pet_info, date, vaccine, note, flag = fields
    return Vaccination(owner_code, pet_info, date, vaccine, note, parse_flag(flag))


def load_vaccinations(path: PathLike = VACCINATION_FILE) -> list[Vaccination]:
    """Read all vaccinations, deleted ones included."""
    return [_from_record(fields) for fields in read_records(path, _FIELD_COUNT)]


def save_vaccinations(
    vaccinations: Iterable[Vaccination], path: PathLike = VACCINATION_FILE
) -> None:
    """Overwrite the vaccination file with ``vaccinations``."""
    write_records(path, (_to_record(item) for item in vaccinations))


def append_vaccination(
    vaccination: Vaccination, path: PathLike = VACCINATION_FILE
) -> None:
    """Append one vaccination to the vaccination file."""
    append_records(path, [_to_record(vaccination)])


def find_active_vaccination(
    vaccinations: Iterable[Vaccination], owner_code: str, date: str
) -> Vaccination | None:
    """The first active vaccination for ``owner_code`` on ``date``, or None."""
    return next(
        (
            item
            for item in vaccinations
            if item.owner_code == owner_code and item.date == date and not item.deleted
        ),
        None,
    )


def is_duplicate(
    vaccinations: Iterable[Vaccination], owner_code: str, date: str
) -> bool:
    """Whether an active vaccination already exists for this owner and date."""
    return find_active_vaccination(vaccinations, owner_code, date) is not None


def sort_by_date(vaccinations: Iterable[Vaccination]) -> list[Vaccination]:
    """A new list ordered from the latest date to the earliest."""
    return exchange_sort(vaccinations, lambda item: item.date)


def search_by_owner(
    vaccinations: Iterable[Vaccination], owner_code: str
) -> list[Vaccination]:
    """Active vaccinations of ``owner_code``, in their stored order."""
    return [
        item
        for item in vaccinations
        if item.owner_code == owner_code and not item.deleted
    ]


def upcoming(vaccinations: Iterable[Vaccination], today: str) -> list[Vaccination]:
    """Active vaccinations dated ``today`` or later, latest first."""
    due = [item for item in vaccinations if item.date >= today and not item.deleted]
    return sort_by_date(due)


def format_schedule_table(vaccinations: Iterable[Vaccination]) -> str:
    """The active vaccinations in the given order, or a notice when there are none."""
    active = [item for item in vaccinations if not item.deleted]
    if not active:
        return EMPTY_VACCINATION_LIST + "\n"
    rows = [
        [item.owner_code, item.pet_info, item.date, item.vaccine, item.note]
        for item in active
    ]
    return render_table(_COLUMNS, rows, True)