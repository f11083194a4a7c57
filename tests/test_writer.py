from __future__ import annotations

import csv
from pathlib import Path

import pytest

from make_data.column_types import parse_column_types
from make_data.exceptions import OutputFileError
from make_data.generators import ValueGenerator
from make_data.models import ColumnType
from make_data.writer import write_dataset


def read_csv_rows(path: Path) -> list[list[str]]:
    with path.open("r", encoding="utf-8", newline="") as file_obj:
        return list(csv.reader(file_obj))


def test_write_dataset_writes_header_and_rows(tmp_path: Path) -> None:
    output = tmp_path / "output.csv"
    column_types = parse_column_types("int,word")

    report = write_dataset(output, column_types, ValueGenerator(10, seed=1), rows=3)

    lines = output.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 4
    assert lines[0] == "col1_int,col2_word"
    rows = read_csv_rows(output)[1:]
    assert all(len(row) == 2 for row in rows)
    assert all(row[0].isdigit() and int(row[0]) < 10 for row in rows)
    assert report.output_path == str(output)
    assert report.rows == 3
    assert report.myrange == 10
    assert report.column_types == [ColumnType.INT, ColumnType.WORD]


@pytest.mark.parametrize("rows", [0, 1, 25])
def test_write_dataset_line_count_matches_rows(tmp_path: Path, rows: int) -> None:
    output = tmp_path / "output.csv"
    column_types = list(ColumnType)

    write_dataset(output, column_types, ValueGenerator(100, seed=rows), rows=rows)

    parsed = read_csv_rows(output)
    assert len(output.read_text(encoding="utf-8").splitlines()) == rows + 1
    assert all(len(row) == len(column_types) for row in parsed)


def test_write_dataset_never_overwrites_existing_file(tmp_path: Path) -> None:
    output = tmp_path / "output.csv"
    output.write_text("keep me\n", encoding="utf-8")

    with pytest.raises(OutputFileError, match="Cannot create file"):
        write_dataset(output, [ColumnType.INT], ValueGenerator(10), rows=1)

    assert output.read_text(encoding="utf-8") == "keep me\n"


def test_write_dataset_fails_when_directory_is_missing(tmp_path: Path) -> None:
    output = tmp_path / "missing" / "output.csv"

    with pytest.raises(OutputFileError):
        write_dataset(output, [ColumnType.INT], ValueGenerator(10), rows=1)
