"""Output directory preparation and collision-free file naming."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path


def ensure_output_directory(
    directory: Path,
    on_error: Callable[[str], None] | None = None,
) -> bool:
    """Create the output directory if needed.

    Failure is reported through ``on_error`` and is not fatal; writing into a
    missing directory fails later with a clearer error.
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        if on_error is not None:
            on_error(f"Error creating directory {directory}: {exc}")
        return False
    return True


def unique_output_path(
    directory: Path,
    filename: str,
    exists: Callable[[Path], bool] = Path.exists,
) -> Path:
    """Return ``directory/filename``, suffixed ``_1``, ``_2``... if taken."""
    candidate = directory / filename
    if not exists(candidate):
        return candidate

    name = Path(filename)
    stem = name.stem
    suffix = name.suffix
    counter = 1
    while True:
        candidate = directory / f"{stem}_{counter}{suffix}"
        if not exists(candidate):
            return candidate
        counter += 1
