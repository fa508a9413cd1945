import pytest

from restotrees.sales import REPORT_RULE, SalesTree

HEADER = "Date Id Algerian Syrian Indian Chinese European\n"


def _write(tmp_path, body):
    path = tmp_path / "sales.txt"
    path.write_text(HEADER + body, encoding="utf-8")
    return path


def test_cuisine_sales_lookup():
    tree = SalesTree()
    assert tree.insert("2023-03", 5, {"Indian": 120.0, "Chinese": 80.0}) is True
    assert tree.cuisine_sales("2023-03", 5, "Indian") == 120.0
    assert tree.cuisine_sales("2023-03", 5, "Chinese") == 80.0


def test_total_sales_is_sum_of_cuisines():
    data = {"Algerian": 10.25, "Syrian": 3.5, "Indian": 7.0, "Chinese": 1.75, "European": 2.0}
    tree = SalesTree()
    tree.insert("2023-03", 5, data)
    assert tree.total_sales("2023-03", 5) == pytest.approx(sum(data.values()))


def test_missing_entries_give_zero():
    tree = SalesTree()
    tree.insert("2023-03", 5, {"Indian": 120.0})
    assert tree.total_sales("2023-04", 5) == 0.0
    assert tree.total_sales("2023-03", 6) == 0.0
    assert tree.cuisine_sales("2023-03", 5, "Syrian") == 0.0


def test_duplicate_date_is_ignored():
    tree = SalesTree()
    tree.insert("2023-03", 5, {"Indian": 120.0})
    assert tree.insert("2023-03", 5, {"Indian": 999.0}) is False
    assert tree.cuisine_sales("2023-03", 5, "Indian") == 120.0


def test_describe_lines():
    tree = SalesTree()
    tree.insert("2023-03", 5, {"Indian": 120.0})
    assert tree.describe_total_sales(5, "2023-03") == "Total Sales for Restaurant 5 in 2023-03: 120"
    assert (
        tree.describe_cuisine_sales(5, "2023-03", "Indian")
        == "Total Sales for Restaurant 5 in 2023-03 for Cuisine Indian: 120"
    )


def test_monthly_report_layout():
    tree = SalesTree()
    tree.insert("2023-03", 5, {"Indian": 120.0})
    lines = tree.monthly_report(5, "2023-03", "Indian").split("\n")
    assert lines[0] == "Monthly Sales Report for Restaurant 5 in 2023-03 for Cuisine Indian:"
    assert lines[1] == REPORT_RULE
    assert lines[2] == tree.describe_total_sales(5, "2023-03")
    assert lines[3] == tree.describe_cuisine_sales(5, "2023-03", "Indian")
    assert lines[4] == REPORT_RULE
    assert len(lines) == 5


def test_read_file_maps_columns(tmp_path):
    path = _write(tmp_path, "2023-03 5 11 22 33 44 55\n")
    tree = SalesTree()
    tree.read_file(path)
    assert tree.cuisine_sales("2023-03", 5, "Algerian") == 11.0
    assert tree.cuisine_sales("2023-03", 5, "Syrian") == 22.0
    assert tree.cuisine_sales("2023-03", 5, "Indian") == 33.0
    assert tree.cuisine_sales("2023-03", 5, "Chinese") == 44.0
    assert tree.cuisine_sales("2023-03", 5, "European") == 55.0
    assert tree.total_sales("2023-03", 5) == pytest.approx(11 + 22 + 33 + 44 + 55)


def test_read_file_skips_short_lines(tmp_path):
    path = _write(tmp_path, "2023-03 5\n2023-04 6 1 2 3 4 5\n")
    tree = SalesTree()
    tree.read_file(path)
    assert tree.total_sales("2023-03", 5) == 0.0
    assert tree.cuisine_sales("2023-04", 6, "Chinese") == 4.0


def test_read_file_bad_number_raises(tmp_path):
    path = _write(tmp_path, "2023-03 5 x 2 3 4 5\n")
    with pytest.raises(ValueError):
        SalesTree().read_file(path)


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SalesTree().read_file(tmp_path / "absent.txt")