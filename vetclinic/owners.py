"""Pet owners: records, storage and the owner table."""

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

OWNER_FILE = "DMChuNuoi.txt"
OWNER_PREFIX = "CN"
EMPTY_OWNER_LIST = "Danh sach chu nuoi rong!"

_FIELD_COUNT = 6
_COLUMNS = (
    Column("MaKH", 10),
    Column("TenChuNuoi", 25),
    Column("ThongTinThuCung", 30),
    Column("SoDienThoai", 15),
    Column("DiaChi", 75),
)


@dataclass
class Owner:
    """A pet owner; ``deleted`` marks a soft-deleted entry."""

    code: str = ""
    name: str = ""
    address: str = ""
    phone: str = ""
    pet_info: str = ""
    deleted: bool = False


def _to_record(owner: Owner) -> list[str]:
    return [
        owner.code,
        owner.name,
        owner.address,
        owner.phone,
        owner.pet_info,
        format_flag(owner.deleted),
    ]


def _from_record(fields: Sequence[str]) -> Owner:
    code, name, address, phone, pet_info, flag = fields
    return Owner(code, name, address, phone, pet_info, parse_flag(flag))


def load_owners(path: PathLike = OWNER_FILE) -> list[Owner]:
    """Read all owners, deleted ones included."""
    return [_from_record(fields) for fields in read_records(path, _FIELD_COUNT)]


def save_owners(owners: Iterable[Owner], path: PathLike = OWNER_FILE) -> None:
    """Overwrite the owner file with ``owners``."""
    write_records(path, (_to_record(owner) for owner in owners))


def append_owner(owner: Owner, path: PathLike = OWNER_FILE) -> None:
    """Append one owner to the owner file."""
    append_records(path, [_to_record(owner)])


def code_exists(owners: Iterable[Owner], code: str) -> bool:
    """Whether any owner, deleted or not, already uses ``code``."""
    return any(owner.code == code for owner in owners)


def owner_code_number(code: str) -> int:
    """The number in a ``CNxxx`` code, or 0 if the code is malformed."""
    return code_number(code, OWNER_PREFIX)


def next_owner_code(owners: Iterable[Owner]) -> str:
    """A fresh ``CNxxx`` code above every code in use."""
    return next_code((owner.code for owner in owners), OWNER_PREFIX)


def find_active_owner(owners: Iterable[Owner], code: str) -> Owner | None:
    """The first owner with ``code`` that is not deleted, or None."""
    return next(
        (owner for owner in owners if owner.code == code and not owner.deleted),
        None,
    )


def format_owner_table(owners: Iterable[Owner]) -> str:
    """The table of owners that are not deleted, or a notice when there are none."""
    active = [owner for owner in owners if not owner.deleted]
    if not active:
        return EMPTY_OWNER_LIST + "\n"
    rows = [
        [owner.code, owner.name, owner.pet_info, owner.phone, owner.address]
        for owner in active
    ]
    return render_table(_COLUMNS, rows, True)