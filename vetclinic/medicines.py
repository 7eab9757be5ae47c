"""Medicines catalogue: records, storage and the medicine table."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

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
from .tables import Column, render_table

MEDICINE_FILE = "DMThuoc.txt"
MEDICINE_PREFIX = "T"
EMPTY_MEDICINE_LIST = "Danh sach thuoc rong!"
MEDICINE_TABLE_TITLE = "======DANH MUC THUOC======"

_FIELD_COUNT = 6
_COLUMNS = (
    Column("Ma Thuoc", 10),
    Column("Ten Thuoc", 45),
    Column("Don Vi Tinh", 15),
    Column("Gia Ban", 9),
    Column("Cong Dung", 70),
)


@dataclass
class Medicine:
    """A catalogue medicine; ``deleted`` marks a soft-deleted entry."""

    code: str = ""
    name: str = ""
    unit: str = ""
    price: int = 0
    usage: str = ""
    deleted: bool = False


def _parse_price(text: str, code: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"invalid price {text!r} for medicine {code!r}") from None


def _to_record(medicine: Medicine) -> list[object]:
    return [
        medicine.code,
        medicine.name,
        medicine.unit,
        medicine.price,
        medicine.usage,
        format_flag(medicine.deleted),
    ]


def _from_record(fields: Sequence[str]) -> Medicine:
    code, name, unit, price, usage, flag = fields
    return Medicine(code, name, unit, _parse_price(price, code), usage, parse_flag(flag))


def load_medicines(path: PathLike = MEDICINE_FILE) -> list[Medicine]:
    """Read all medicines, deleted ones included.

    Raises ``ValueError`` when a price is not an integer.
    """
    return [_from_record(fields) for fields in read_records(path, _FIELD_COUNT)]


def save_medicines(medicines: Iterable[Medicine], path: PathLike = MEDICINE_FILE) -> None:
    """Overwrite the medicine file with ``medicines``."""
    write_records(path, (_to_record(medicine) for medicine in medicines))


def append_medicine(medicine: Medicine, path: PathLike = MEDICINE_FILE) -> None:
    """Append one medicine to the medicine file."""
    append_records(path, [_to_record(medicine)])


def code_exists(medicines: Iterable[Medicine], code: str) -> bool:
    """Whether any medicine, deleted or not, already uses ``code``."""
    return any(medicine.code == code for medicine in medicines)


def medicine_code_number(code: str) -> int:
    """The number in a ``Txxx`` code, or 0 if the code is malformed."""
    return code_number(code, MEDICINE_PREFIX)


def next_medicine_code(medicines: Iterable[Medicine]) -> str:
    """A fresh ``Txxx`` code above every code in use."""
    return next_code((medicine.code for medicine in medicines), MEDICINE_PREFIX)


def find_active_medicine(medicines: Iterable[Medicine], code: str) -> Medicine | None:
    """The first medicine with ``code`` that is not deleted, or None."""
    return next(
        (m for m in medicines if m.code == code and not m.deleted),
        None,
    )


def format_medicine_table(medicines: Iterable[Medicine]) -> str:
    """The titled table of medicines that are not deleted, or a notice when there are none."""
    active = [medicine for medicine in medicines if not medicine.deleted]
    if not active:
        return EMPTY_MEDICINE_LIST + "\n"
    rows = [[m.code, m.name, m.unit, m.price, m.usage] for m in active]
    return MEDICINE_TABLE_TITLE + "\n" + render_table(_COLUMNS, rows, True)