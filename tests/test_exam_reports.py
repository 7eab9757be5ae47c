import pytest

from vetclinic.exam_reports import (
    EMPTY_EXAMINATION_LIST,
    EMPTY_MONTH,
    format_examination_table,
    format_search_result,
    monthly_report,
    write_monthly_report,
)
from vetclinic.examinations import Examination


@pytest.fixture
def exams():
    return [
        Examination("PKB001", "2024-01-05", "CN001", "T001", 2, "cough", "cold"),
        Examination("PKB002", "2024-03-10", "CN002", "T002", 1, "itch", "allergy"),
        Examination("PKB003", "2024-01-20", "CN001", "T001", 3, "fever", "flu"),
        Examination("PKB004", "2024-01-25", "CN003", "T002", 1, "gone", "x", True),
    ]


def test_empty_list_notice():
    assert format_examination_table([]) == EMPTY_EXAMINATION_LIST + "\n"


def test_only_deleted_gives_notice(exams):
    assert format_examination_table([exams[3]]) == EMPTY_EXAMINATION_LIST + "\n"


def test_table_latest_first_and_hides_deleted(exams):
    text = format_examination_table(exams)
    assert "PKB004" not in text
    assert text.index("PKB002") < text.index("PKB003") < text.index("PKB001")


def test_table_lines_share_width(exams):
    lines = format_examination_table(exams).splitlines()
    assert len({len(line) for line in lines}) == 1
    assert lines[0].startswith("+") and lines[-1].startswith("+")
    assert lines[1].startswith("|So Phieu")


def test_search_found(exams):
    text = format_search_result(exams, "PKB003")
    assert "fever" in text
    assert "PKB001" not in text


def test_search_not_found_for_deleted(exams):
    text = format_search_result(exams, "PKB004")
    assert text == "Khong tim thay phieu kham benh nao voi so phieu: PKB004\n"


def test_monthly_report_filters_month(exams):
    text = monthly_report(exams, "2024-01")
    assert "Thang bao cao: 2024-01\n" in text
    assert "PKB002" not in text
    assert "PKB004" not in text
    assert text.index("PKB003") < text.index("PKB001")
    assert "|" + "cough".ljust(30) + "|" in text
    assert text.endswith("Ky xac nhan: \n====================================\n")


def test_monthly_report_empty(exams):
    text = monthly_report(exams, "2023-12")
    assert EMPTY_MONTH in text
    assert "PKB" not in text


def test_write_monthly_report(tmp_path, exams):
    path = tmp_path / "report.txt"
    path.write_text("old content", encoding="utf-8")
    write_monthly_report(exams, "2024-03", path)
    assert path.read_text(encoding="utf-8") == monthly_report(exams, "2024-03")