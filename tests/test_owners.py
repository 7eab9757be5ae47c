import pytest

from vetclinic.owners import (
    Owner,
    append_owner,
    code_exists,
    find_active_owner,
    format_owner_table,
    load_owners,
    next_owner_code,
    owner_code_number,
    save_owners,
)


@pytest.fixture
def owners():
    return [
        Owner("CN001", "Nguyen An", "Ha Noi", "0900000000", "Meo Mun"),
        Owner("CN002", "Tran Binh", "Hue", "0911111111", "Cho Vang", deleted=True),
        Owner("CN010", "Le Chi", "Da Nang", "0922222222", "Tho Trang"),
    ]


def test_save_load_round_trip(tmp_path, owners):
    path = tmp_path / "DMChuNuoi.txt"
    save_owners(owners, path)
    assert load_owners(path) == owners


def test_file_layout(tmp_path):
    path = tmp_path / "owners.txt"
    save_owners([Owner("CN001", "An", "Hue", "01", "Meo", True)], path)
    assert path.read_text(encoding="utf-8").splitlines() == [
        "CN001", "An", "Hue", "01", "Meo", "1",
    ]


def test_append_owner(tmp_path, owners):
    path = tmp_path / "owners.txt"
    save_owners(owners[:1], path)
    append_owner(owners[2], path)
    assert load_owners(path) == [owners[0], owners[2]]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_owners(tmp_path / "none.txt")


def test_code_exists_includes_deleted(owners):
    assert code_exists(owners, "CN002") is True
    assert code_exists(owners, "CN001") is True
    assert code_exists(owners, "CN003") is False


def test_owner_code_number():
    assert owner_code_number("CN025") == 25
    assert owner_code_number("CN") == 0
    assert owner_code_number("T025") == 0


def test_next_owner_code(owners):
    new = next_owner_code(owners)
    assert not code_exists(owners, new)
    assert owner_code_number(new) == owner_code_number("CN010") + 1
    assert next_owner_code([]) == "CN001"


def test_find_active_owner(owners):
    assert find_active_owner(owners, "CN001") is owners[0]
    assert find_active_owner(owners, "CN002") is None
    assert find_active_owner(owners, "CN999") is None


def test_table_lists_only_active(owners):
    table = format_owner_table(owners)
    assert "Nguyen An" in table
    assert "Le Chi" in table
    assert "Tran Binh" not in table
    assert "MaKH" in table


def test_table_lines_share_width(owners):
    lines = format_owner_table(owners).splitlines()
    assert len({len(line) for line in lines}) == 1
    assert lines[0] == lines[-1]


def test_table_column_order(owners):
    lines = format_owner_table(owners[:1]).splitlines()
    cells = [cell.strip() for cell in lines[3].strip("|").split("|")]
    assert cells == ["CN001", "Nguyen An", "Meo Mun", "0900000000", "Ha Noi"]


def test_empty_table_notice(owners):
    assert format_owner_table([]) == "Danh sach chu nuoi rong!\n"
    assert format_owner_table([owners[1]]) == "Danh sach chu nuoi rong!\n"