import pytest

from vetclinic.examinations import (
    Examination,
    append_examination,
    code_exists,
    examination_code_number,
    find_active_examination,
    load_examinations,
    next_examination_code,
    save_examinations,
    sort_by_date,
)


@pytest.fixture
def sample():
    return [
        Examination("PKB001", "2024-01-05", "CN001", "T001", 2, "Sot", "Cam"),
        Examination("PKB002", "2024-02-10", "CN002", "T002", 1, "Ho", "Viem", True),
        Examination("PKB003", "2024-01-20", "CN001", "T003", 3, "Ngua", "Nam da"),
    ]


def test_save_and_load_round_trip(tmp_path, sample):
    path = tmp_path / "PhieuKhamBenh.txt"
    save_examinations(sample, path)
    assert load_examinations(path) == sample


def test_saved_file_layout(tmp_path, sample):
    path = tmp_path / "PhieuKhamBenh.txt"
    save_examinations(sample[1:2], path)
    assert path.read_text(encoding="utf-8").split("\n")[:8] == [
        "PKB002", "2024-02-10", "CN002", "T002", "1", "Ho", "Viem", "1",
    ]


def test_append(tmp_path, sample):
    path = tmp_path / "PhieuKhamBenh.txt"
    save_examinations(sample[:1], path)
    append_examination(sample[1], path)
    append_examination(sample[2], path)
    assert load_examinations(path) == sample


def test_load_rejects_bad_quantity(tmp_path):
    path = tmp_path / "PhieuKhamBenh.txt"
    path.write_text("PKB001\n2024-01-01\nCN001\nT001\nx\na\nb\n0\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_examinations(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_examinations(tmp_path / "absent.txt")


def test_code_exists(sample):
    assert code_exists(sample, "PKB002")
    assert not code_exists(sample, "PKB010")


def test_code_number():
    assert examination_code_number("PKB025") == 25
    assert examination_code_number("PKB") == 0
    assert examination_code_number("PK001") == 0


def test_next_code(sample):
    assert next_examination_code([]) == "PKB001"
    new_code = next_examination_code(sample)
    assert not code_exists(sample, new_code)
    assert examination_code_number(new_code) == 4


def test_find_active(sample):
    assert find_active_examination(sample, "PKB002") is None
    assert find_active_examination(sample, "PKB001") is sample[0]


def test_sort_by_date_latest_first(sample):
    ordered = sort_by_date(sample)
    dates = [exam.date for exam in ordered]
    assert dates == sorted(dates, reverse=True)
    assert sorted(e.number for e in ordered) == sorted(e.number for e in sample)
    assert [e.number for e in sample] == ["PKB001", "PKB002", "PKB003"]


def test_sort_by_date_tie_order():
    exams = [
        Examination("a", "2024-01-05"),
        Examination("b", "2024-01-07"),
        Examination("c", "2024-01-05"),
        Examination("d", "2024-01-07"),
    ]
    assert [e.number for e in sort_by_date(exams)] == ["b", "d", "c", "a"]