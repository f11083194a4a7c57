"""Core typed models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class ColumnType(StrEnum):
    """Supported column classifications."""

    INT = "int"
    FLOAT = "float"
    WORD = "word"
    NAME = "name"
    PHONE = "phone"


DEFAULT_COLUMNS = "int,float,word,name,phone"


class GenerationConfig(BaseModel):
    """Runtime configuration."""

    rows: int = Field(default=10, ge=0)
    columns: str = DEFAULT_COLUMNS
    output: str = "output.csv"
    myrange: int = Field(default=100, ge=1)
    output_dir: str = "0_out"
    seed: int | None = None

    @field_validator("output")
    @classmethod
    def ensure_output_name(cls, value: str) -> str:
        """Reject blank output file names."""
        if not value.strip():
            raise ValueError("Output file name must not be empty.")
        return value.strip()


class GenerationReport(BaseModel):
    """Result of a generation run."""

    output_path: str
    rows: int
    myrange: int
    column_types: list[ColumnType] = Field(default_factory=list)
