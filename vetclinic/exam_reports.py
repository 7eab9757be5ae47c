"""Listings, search results and the monthly report for examination slips."""

from __future__ import annotations

from collections.abc import Iterable

from .examinations import Examination, sort_by_date
from .records import PathLike
from .tables import Column, render_table

REPORT_FILE = "BaoCaoKhamBenh.txt"
EMPTY_EXAMINATION_LIST = "Danh sach phieu kham benh rong!"
NOT_FOUND_PREFIX = "Khong tim thay phieu kham benh nao voi so phieu: "
EMPTY_MONTH = "Khong co phieu kham benh nao trong thang!"

_BANNER = "===================================="

_LIST_COLUMNS = (
    Column("So Phieu", 10),
    Column("Ngay Kham", 15),
    Column("Ma Chu Nuoi", 12),
    Column("Ma Thuoc", 10),
    Column("So Luong Thuoc", 15),
    Column("Trieu Chung", 25),
    Column("Chan Doan", 25),
)

_REPORT_COLUMNS = (
    Column("So Phieu", 10),
    Column("Ngay Kham", 15),
    Column("Ma Chu Nuoi", 12),
    Column("Ma Thuoc", 10),
    Column("So Luong Thuoc", 15),
    Column("Trieu Chung", 30),
    Column("Chan Doan", 30),
)


def _row(exam: Examination) -> list[object]:
    return [
        exam.number,
        exam.date,
        exam.owner_code,
        exam.medicine_code,
        exam.quantity,
        exam.symptoms,
        exam.diagnosis,
    ]


def format_examination_table(examinations: Iterable[Examination]) -> str:
    """The slips that are not deleted, latest date first, or a notice when there are none."""
    exams = list(examinations)
    if all(exam.deleted for exam in exams):
        return EMPTY_EXAMINATION_LIST + "\n"
    active = [exam for exam in sort_by_date(exams) if not exam.deleted]
    return render_table(_LIST_COLUMNS, [_row(exam) for exam in active], True)


def format_search_result(examinations: Iterable[Examination], number: str) -> str:
    """The table of active slips with ``number``, or a not-found notice."""
    found = [e for e in examinations if e.number == number and not e.deleted]
    if not found:
        return f"{NOT_FOUND_PREFIX}{number}\n"
    return render_table(_LIST_COLUMNS, [_row(exam) for exam in found], True)


def monthly_report(examinations: Iterable[Examination], month: str) -> str:
    """The text of the report for ``month`` (``YYYY-MM``), with header and footer."""
    header = (
        f"{_BANNER}\n"
        "BAO CAO KHAM BENH THEO THANG\n"
        f"Thang bao cao: {month}\n"
        "Dia diem: Phong Kham Thu Y ERATOO\n"
        f"{_BANNER}\n\n"
    )
    in_month = [e for e in examinations if e.date[:7] == month and not e.deleted]
    if in_month:
        rows = [_row(exam) for exam in sort_by_date(in_month)]
        body = render_table(_REPORT_COLUMNS, rows, True)
    else:
        body = EMPTY_MONTH + "\n"
    footer = (
        f"\n{_BANNER}\n"
        "Nguoi duyet bao cao: \n"
        "Ky xac nhan: \n"
        f"{_BANNER}\n"
    )
    return header + body + footer


def write_monthly_report(
    examinations: Iterable[Examination], month: str, path: PathLike = REPORT_FILE
) -> None:
    """Write the report for ``month`` to ``path``, replacing its contents."""
    text = monthly_report(examinations, month)
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)