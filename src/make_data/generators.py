"""Random and fake value generation per column type."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator, Sequence

from faker import Faker

from make_data.models import ColumnType


class ValueGenerator:
    """Produce string cell values from one seeded randomness source."""

    def __init__(self, myrange: int, seed: int | None = None) -> None:
        if myrange < 1:
            raise ValueError("Range must be at least 1.")
        self.myrange = myrange
        self._rng = random.Random(seed)
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)

    def value(self, column_type: ColumnType) -> str:
        """Generate one rendered value for a column type."""
        if column_type == ColumnType.INT:
            return str(self._rng.randrange(self.myrange))
        if column_type == ColumnType.FLOAT:
            return _format_float(self._rng.random() * self.myrange)
        if column_type == ColumnType.NAME:
            return self._fake.name()
        if column_type == ColumnType.PHONE:
            return self._fake.phone_number()
        return self._fake.word()

    def row(self, column_types: Sequence[ColumnType]) -> list[str]:
        """Generate one row, one value per column."""
        return [self.value(column_type) for column_type in column_types]

    def rows(self, column_types: Sequence[ColumnType], count: int) -> Iterator[list[str]]:
        """Yield ``count`` generated rows."""
        for _ in range(count):
            yield self.row(column_types)


def _format_float(value: float) -> str:
    # Truncate so rendering never rounds up to the exclusive bound.
    return f"{math.floor(value * 1000) / 1000:.3f}"
