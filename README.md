# vetclinic

A Python library for keeping the records of a small veterinary clinic in
plain text files, and for turning them into text tables and reports.

It handles:

- **Owners** (`vetclinic.owners.Owner`): code (`CNxxx`), name, address,
  phone number and pet details.
- **Medicines** (`vetclinic.medicines.Medicine`): code (`Txxx`), name,
  unit, price and use.
- **Examinations** (`vetclinic.examinations.Examination`): number
  (`PKBxxx`), date, owner code, medicine code, quantity, symptoms and
  diagnosis.
- **Vaccinations** (`vetclinic.vaccinations.Vaccination`): owner code, pet
  details, date, vaccine and note.

Every record carries a `deleted` flag. Deleted records stay in the file but
are left out of tables, searches and reports.

## Installing

```
pip install .
```

## Data files

Each kind of record lives in its own file; the default names are
`DMChuNuoi.txt`, `DMThuoc.txt`, `PhieuKhamBenh.txt` and
`LichTiemPhong.txt`, relative to the current directory. Each file holds one
field per line, and each record ends with a line holding `1` when the
record is deleted or `0` when it is not.

Every record module offers `load_*`, `save_*` (overwrite) and `append_*`
functions, each taking an optional path. Loading a missing file raises
`FileNotFoundError`; a price or quantity that is not an integer raises
`ValueError`.

## Modules

- `vetclinic.records`: the line-per-field file format (`read_records`,
  `write_records`, `append_records`), the flag encoding (`parse_flag`,
  `format_flag`) and code numbering (`code_number`, `next_code`).
- `vetclinic.tables`: `Column` and `render_table`, which draw tables bordered
  with `+`, `-` and `|`.
- `vetclinic.owners`, `vetclinic.medicines`, `vetclinic.examinations`:
  storage, `code_exists`, the next free code (`next_owner_code`,
  `next_medicine_code`, `next_examination_code`), lookup of active records
  (`find_active_*`) and, for owners and medicines, a table of active
  records. `examinations.sort_by_date` orders slips latest date first.
- `vetclinic.exam_reports`: the examination table, search by slip number,
  and the monthly report (`monthly_report`, `write_monthly_report`, which
  writes to `BaoCaoKhamBenh.txt` by default).
- `vetclinic.statistics`: revenue per day, month and year from medicine
  prices times quantities (`compute_revenue`, `format_revenue_table`), and
  medicine usage totals (`medicine_usage`, `format_top_medicines`).
- `vetclinic.vaccinations`: storage, duplicate checks for an owner and date,
  search by owner, `upcoming` (active entries on or after a given date,
  latest first) and `format_schedule_table`.

A new code is the highest number in use with that prefix plus one, padded
to three digits: `CN007` follows `CN006`.

Dates are strings in `YYYY-MM-DD` form and months in `YYYY-MM` form; they
are compared as text.

## Example

```python
from vetclinic.owners import load_owners, next_owner_code, format_owner_table
from vetclinic.statistics import compute_revenue, format_revenue_table
from vetclinic.examinations import load_examinations
from vetclinic.medicines import load_medicines

owners = load_owners("DMChuNuoi.txt")
print(next_owner_code(owners))
print(format_owner_table(owners), end="")

daily, monthly, yearly = compute_revenue(
    load_examinations("PhieuKhamBenh.txt"), load_medicines("DMThuoc.txt")
)
print(format_revenue_table(monthly, "THANG"), end="")
```

## What it does not do

The package has no interactive program and installs no command. There are
no menus or prompts for adding, editing or deleting records; a program
that wants them builds them on top of the functions above, changing the
record objects and calling the `save_*` or `append_*` functions.

## Tests

```
pip install .[test]
pytest
```