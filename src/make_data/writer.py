"""CSV persistence for generated datasets."""

from __future__ import annotations

import csv
from collections.abc import Sequence
from pathlib import Path

from make_data.column_types import header_row
from make_data.exceptions import OutputFileError
from make_data.generators import ValueGenerator
from make_data.models import ColumnType, GenerationReport


def write_dataset(
    output_path: Path,
    column_types: Sequence[ColumnType],
    generator: ValueGenerator,
    rows: int,
) -> GenerationReport:
    """Write header plus ``rows`` generated rows to a new CSV file.

    The file is opened in exclusive-create mode, so an existing file is never
    overwritten.
    """
    try:
        file_obj = output_path.open("x", newline="", encoding="utf-8")
    except OSError as exc:
        raise OutputFileError(f"Cannot create file {output_path}: {exc}") from exc

    with file_obj:
        writer = csv.writer(file_obj, lineterminator="\n")
        try:
            writer.writerow(header_row(column_types))
            writer.writerows(generator.rows(column_types, rows))
            file_obj.flush()
        except OSError as exc:
            raise OutputFileError(f"Failed writing to {output_path}: {exc}") from exc

    return GenerationReport(
        output_path=str(output_path),
        rows=rows,
        myrange=generator.myrange,
        column_types=list(column_types),
    )
