"""Terminal rendering: banner, coloured text and extended help."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

console = Console()

_COLOUR_STYLES: dict[str, str] = {
    "green": "bold bright_green",
    "red": "bold bright_red",
    "cyan": "bold bright_cyan",
    "purple": "bold bright_magenta",
    "blue": "bold bright_blue",
    "yellow": "bold bright_yellow",
}

BANNER = r"""
    ███╗   ███╗       ███╗    ██╗  ██╗   ███████╗
    ████╗ ████║      ████╗    ██║ ██╔╝   ██╔════╝
    ██╔████╔██║     ██╔██╗    █████╔╝    █████╗
    ██║╚██╔╝██║    ██╔╝██╗    ██╔═██╗    ██╔══╝
    ██║ ╚═╝ ██║   ███████╗    ██║  ██╗   ███████╗
    ╚═╝     ╚═╝   ╚══════╝    ╚═╝  ╚═╝   ╚══════╝

    ██████╗        ███╗    ████████╗       ███╗
    ██╔══██╗      ████╗    ╚══██╔══╝      ████╗
    ██║  ██║     ██╔██╗       ██║        ██╔██╗
    ██║  ██║    ██╔╝██╗       ██║       ██╔╝██╗
    ██████╔╝   ███████╗       ██║      ███████╗
    ╚═════╝    ╚══════╝       ╚═╝      ╚══════╝
    Make data for testing, using fake data generator
"""


def colour_style(colour: str) -> str:
    """Return the rich style for a colour name; unknown names fall back to yellow."""
    return _COLOUR_STYLES.get(colour, _COLOUR_STYLES["yellow"])


def colour_print(text: str, colour: str) -> None:
    """Print text in a bold bright colour."""
    console.print(Text(text, style=colour_style(colour)))


def show_banner() -> None:
    colour_print(BANNER, "cyan")


def print_big_help() -> None:
    """Print column types and usage examples."""
    console.print("\tColumn types can be: int, float, word, name, phone")
    console.print("\tUnknown column types are generated as words.")
    console.print("\tRange for random numbers is a single number (e.g., 1000)")
    colour_print(
        "\tmake-data --rows <number> --columns <types> --output <file> --myrange <range>",
        "green",
    )
    console.print("\tExamples:")
    colour_print(
        "\tmake-data --rows 1000 --columns int,float,word,name,phone "
        "--output output.csv --myrange 1000",
        "green",
    )
    colour_print(
        "\tmake-data --rows 10 --columns int,int,int --output output.csv --myrange 10",
        "green",
    )
    colour_print(
        "\tmake-data --rows 5 --columns name,phone --seed 42",
        "green",
    )
