"""
Utilidades comunes para los comandos CLI.

Aplicar configuración (tema, iconos, logging, registro de esquemas) y
parsear asignaciones campo=valor.
"""

import logging

import typer
from rich.logging import RichHandler

from dynaform.cli.theme import CLITheme, force_ascii, get_console, print_error
from dynaform.config import AppSettings
from dynaform.errors import DynaformError
from dynaform.registry import SchemaRegistry, set_registry


def configure_logging(verbose: bool) -> None:
    """Con --verbose muestra las transiciones de estado (DEBUG) vía Rich."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=get_console(), show_path=False)],
        force=True,
    )


def apply_settings(settings: AppSettings) -> SchemaRegistry:
    """
    Aplica la configuración y retorna el registro de esquemas activo.

    Un archivo de esquemas inválido termina el comando con código 1.
    """
    CLITheme.set_theme(settings.theme)
    force_ascii(settings.ascii_icons)
    configure_logging(settings.verbose)

    try:
        if settings.schema_file is not None:
            registry = SchemaRegistry.from_json_file(settings.schema_file)
        else:
            registry = SchemaRegistry.default()
    except DynaformError as e:
        print_error(str(e))
        raise typer.Exit(1)

    set_registry(registry)
    return registry


def parse_assignments(values: list[str]) -> list[tuple[str, str]]:
    """
    Convierte ["campo=valor", ...] en pares, respetando el orden.

    El valor puede estar vacío ("campo=") y puede contener "=".
    """
    pairs = []
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            print_error(f"Invalid assignment '{item}' (expected field=value)")
            raise typer.Exit(1)
        pairs.append((name.strip(), value))
    return pairs
