"""Tests for the dataset checker."""

import json

from check_data import check_data, find_problems


def test_shipped_dataset_has_no_problems(data_path):
    with open(data_path, encoding="utf-8") as f:
        raws = json.load(f)
    assert find_problems(raws) == []


def test_unknown_labels_are_reported(make_raw):
    problems = find_problems([make_raw(1, "Odd", climate="Cool, Tropical", body="Huge")])
    assert len(problems) == 2
    assert "unknown climate 'Tropical'" in problems[0]
    assert "unknown body 'Huge'" in problems[1]


def test_unusable_rows_are_reported(make_raw):
    problems = find_problems([{"order": 1, "name": ""}, make_raw(2, "Gamay")])
    assert len(problems) == 1
    assert problems[0].startswith("row 0:")


def test_inconsistent_grape_rows_are_reported(make_raw):
    raws = [
        make_raw(1, "Merlot", acidity="Medium", country="France", region="Pomerol"),
        make_raw(2, "Merlot", acidity="High", country="Chile", region="Central Valley"),
    ]
    problems = find_problems(raws)
    assert problems == ["row 1 (Merlot): acidity differs from row with order 1"]


def test_region_fields_may_differ(make_raw):
    raws = [
        make_raw(1, "Merlot", country="France", region="Pomerol", characteristics="Plush"),
        make_raw(2, "Merlot", country="Chile", region="Central Valley", characteristics="Ripe"),
    ]
    assert find_problems(raws) == []


def test_check_data_cli_output(tmp_path, make_raw, capsys):
    path = tmp_path / "grapes.json"
    path.write_text(json.dumps([make_raw(1, "Gamay", body="Light")]), encoding="utf-8")
    assert check_data(str(path)) is True
    assert "[OK] 1 rows checked" in capsys.readouterr().out

    path.write_text(json.dumps([make_raw(1, "Gamay", body="Heavy")]), encoding="utf-8")
    assert check_data(str(path)) is False
    out = capsys.readouterr().out
    assert "[WARN]" in out
    assert "[ERROR] 1 problem(s)" in out


def test_check_data_missing_file(tmp_path, capsys):
    assert check_data(str(tmp_path / "missing.json")) is False
    assert "[ERROR] Cannot read dataset" in capsys.readouterr().out
