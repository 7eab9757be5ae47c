"""Revenue totals and medicine usage figures."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .examinations import Examination, exchange_sort
from .medicines import Medicine
from .tables import Column, render_table

UNKNOWN_MEDICINE = "Không tìm thấy"
TOP_MEDICINE_TITLE = "=== THỐNG KÊ LOẠI THUỐC SỬ DỤNG NHIỀU NHẤT ==="
NO_USAGE_DATA = "Không có dữ liệu để thống kê."

_PERIOD_TITLES = {"NGAY": "Ngay", "THANG": "Thang", "NAM": "Nam"}
_AMOUNT_WIDTH = 25


@dataclass
class Revenue:
    """The revenue total for one day, month or year."""

    period: str
    total: int = 0


@dataclass
class UsageEntry:
    """How much of one medicine the slips prescribe in total."""

    code: str
    name: str
    quantity: int = 0


def medicine_price(medicines: Iterable[Medicine], code: str) -> int:
    """The price of the first medicine with ``code``, or 0."""
    return next((m.price for m in medicines if m.code == code), 0)


def medicine_name(medicines: Iterable[Medicine], code: str) -> str:
    """The name of the first medicine with ``code``, or a not-found marker."""
    return next((m.name for m in medicines if m.code == code), UNKNOWN_MEDICINE)


def _accumulate(totals: dict[str, Revenue], period: str, amount: int) -> None:
    entry = totals.setdefault(period, Revenue(period))
    entry.total += amount


def compute_revenue(
    examinations: Iterable[Examination], medicines: Iterable[Medicine]
) -> tuple[list[Revenue], list[Revenue], list[Revenue]]:
    """Daily, monthly and yearly revenue, each in order of first appearance."""
    catalogue = list(medicines)
    daily: dict[str, Revenue] = {}
    monthly: dict[str, Revenue] = {}
    yearly: dict[str, Revenue] = {}
    for exam in examinations:
        amount = medicine_price(catalogue, exam.medicine_code) * exam.quantity
        _accumulate(daily, exam.date, amount)
        _accumulate(monthly, exam.date[:7], amount)
        _accumulate(yearly, exam.date[:4], amount)
    return list(daily.values()), list(monthly.values()), list(yearly.values())


def _amount_text(total: int) -> str:
    text = f"{total} VND"
    if len(text) > _AMOUNT_WIDTH:
        text = text[: _AMOUNT_WIDTH - 3] + "..."
    return text


def format_revenue_table(entries: Iterable[Revenue], period: str) -> str:
    """A table of positive totals; ``period`` is ``NGAY``, ``THANG`` or ``NAM``."""
    positive = [entry for entry in entries if entry.total > 0]
    if not positive:
        return f"Khong co du lieu doanh thu {period}!\n"
    columns = (
        Column(_PERIOD_TITLES.get(period, ""), 15),
        Column("Tong Doanh Thu", _AMOUNT_WIDTH),
    )
    rows = [[entry.period, _amount_text(entry.total)] for entry in positive]
    return render_table(columns, rows, True)


def medicine_usage(
    examinations: Iterable[Examination], medicines: Iterable[Medicine]
) -> list[UsageEntry]:
    """Total quantity per medicine code, largest first."""
    catalogue = list(medicines)
    usage: dict[str, UsageEntry] = {}
    for exam in examinations:
        entry = usage.get(exam.medicine_code)
        if entry is None:
            name = medicine_name(catalogue, exam.medicine_code)
            usage[exam.medicine_code] = UsageEntry(exam.medicine_code, name, exam.quantity)
        else:
            entry.quantity += exam.quantity
    return exchange_sort(usage.values(), lambda entry: entry.quantity)


def format_top_medicines(
    examinations: Iterable[Examination], medicines: Iterable[Medicine]
) -> str:
    """The medicines sharing the highest total quantity, under a title."""
    usage = medicine_usage(examinations, medicines)
    lines = [TOP_MEDICINE_TITLE]
    if not usage:
        lines.append(NO_USAGE_DATA)
        return "\n".join(lines) + "\n"
    code_w, name_w, qty_w = 10, 35, 10
    border = "-" * (code_w + name_w + qty_w + 4)
    top = usage[0].quantity
    lines.append(border)
    lines.append(
        f"| {'Ma Thuoc':<{code_w}}| {'Ten Thuoc':<{name_w}}| {'So Luong':<{qty_w}}|"
    )
    lines.append(border)
    lines.extend(
        f"| {entry.code:>{code_w}}| {entry.name:<{name_w}}| {entry.quantity:>{qty_w}}|"
        for entry in usage
        if entry.quantity == top
    )
    lines.append(border)
    return "\n".join(lines) + "\n"