"""Column type parsing and header naming."""

from __future__ import annotations

from collections.abc import Sequence

from make_data.models import ColumnType

_FALLBACK = ColumnType.WORD


def parse_column_types(columns: str) -> list[ColumnType]:
    """Map comma-separated type tokens to column types.

    Parsing is lenient: unknown tokens become word columns instead of raising.
    """
    return [_parse_token(token) for token in columns.split(",")]


def header_row(column_types: Sequence[ColumnType]) -> list[str]:
    """Build header names like ``col1_int`` from column positions and types."""
    return [f"col{idx}_{column_type.value}" for idx, column_type in enumerate(column_types, start=1)]


def _parse_token(token: str) -> ColumnType:
    normalized = token.strip().lower()
    try:
        return ColumnType(normalized)
    except ValueError:
        return _FALLBACK
