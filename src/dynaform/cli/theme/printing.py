"""
Funciones que imprimen directamente a la consola.
"""

from rich.text import Text

from dynaform.cli.theme.palette import get_console, get_palette
from dynaform.cli.theme.styled import (
    styled_header, styled_success, styled_error, styled_info,
)


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    console = get_console()
    console.print(styled_header(text, subtitle))


def print_section(title: str) -> None:
    """Imprime título de sección."""
    console = get_console()
    p = get_palette()
    console.print()
    console.print(f"-- {title} --", style=f"bold {p.secondary}")
    console.print()


def print_field(label: str, value) -> None:
    """Imprime una etiqueta con su valor."""
    console = get_console()
    p = get_palette()
    text = Text(f"  {label}: ", style=p.muted)
    text.append(str(value), style=f"bold {p.accent}")
    console.print(text)


def print_success(text: str) -> None:
    console = get_console()
    console.print(styled_success(text))


def print_error(text: str) -> None:
    console = get_console()
    console.print(styled_error(text))


def print_info(text: str) -> None:
    console = get_console()
    console.print(styled_info(text))
