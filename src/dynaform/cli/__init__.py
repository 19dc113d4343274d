"""
CLI de dynaform - Formularios dinámicos en terminal.

Comandos:
- run: visor interactivo (o modo de preguntas con --simple)
- forms: lista los tipos de formulario
- schema: muestra los campos de un tipo
- fill: completa y envía un formulario sin interacción
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from dynaform.config import AppSettings, FieldType, ThemeName

app = typer.Typer(
    name="dynaform",
    help="Formularios dinámicos: selección de tipo, progreso, validación y envíos.",
    no_args_is_help=True,
)

ThemeOption = Annotated[
    Optional[ThemeName],
    typer.Option("--theme", help="Tema de colores (o DYNAFORM_THEME)"),
]
SchemaFileOption = Annotated[
    Optional[Path],
    typer.Option("--schema-file", help="JSON con la tabla de esquemas (o DYNAFORM_SCHEMA_FILE)"),
]
AsciiOption = Annotated[
    Optional[bool],
    typer.Option("--ascii/--unicode", help="Forzar iconos ASCII (o DYNAFORM_ASCII)", show_default=False),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Log de transiciones de estado")]


def _settings(
    theme: Optional[ThemeName],
    schema_file: Optional[Path],
    ascii_icons: Optional[bool] = None,
    verbose: bool = False,
) -> AppSettings:
    """Combina opciones y entorno; una configuración inválida termina con código 1."""
    from pydantic import ValidationError
    from dynaform.cli.theme import print_error

    try:
        return AppSettings.from_env(
            theme=theme.value if theme else None,
            schema_file=schema_file,
            ascii_icons=ascii_icons,
            verbose=verbose,
        )
    except ValidationError as e:
        for err in e.errors():
            where = ".".join(str(part) for part in err["loc"])
            print_error(f"Invalid configuration ({where}): {err['msg']}")
        raise typer.Exit(1)


@app.command()
def run(
    simple: Annotated[bool, typer.Option("--simple", help="Modo de preguntas en lugar del visor")] = False,
    theme: ThemeOption = None,
    schema_file: SchemaFileOption = None,
    ascii_icons: AsciiOption = None,
    verbose: VerboseOption = False,
):
    """
    Abre el formulario dinámico interactivo.

    Ejemplo:
        dynaform run
        dynaform run --simple --theme nord
    """
    from dynaform.cli.common import apply_settings
    from dynaform.cli.theme import print_info

    registry = apply_settings(_settings(theme, schema_file, ascii_icons, verbose))

    if simple:
        from dynaform.cli.prompt import PromptSession
        final = PromptSession(registry).show()
    else:
        from dynaform.cli.viewer import interactive_form
        final = interactive_form(registry)

    n = len(final.submissions)
    print_info(f"{n} entr{'y' if n == 1 else 'ies'} submitted this session (not saved).")


@app.command()
def forms(
    as_json: Annotated[bool, typer.Option("--json", help="Tabla completa en formato de contrato JSON")] = False,
    schema_file: SchemaFileOption = None,
):
    """
    Lista los tipos de formulario disponibles.

    Con --json exporta la tabla completa, apta para --schema-file.
    """
    from rich.table import Table
    from rich import box
    from dynaform.cli.common import apply_settings
    from dynaform.cli.theme import get_console, get_palette

    registry = apply_settings(_settings(None, schema_file))

    if as_json:
        typer.echo(json.dumps(registry.to_mapping(), indent=2))
        return

    p = get_palette()

    table = Table(
        title="Form Types",
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
    )
    table.add_column("Form type")
    table.add_column("Fields", justify="right")
    table.add_column("Required", justify="right")

    for schema in registry:
        table.add_row(schema.name, str(len(schema.fields)), str(len(schema.required_fields)))

    get_console().print(table)


@app.command()
def schema(
    name: Annotated[str, typer.Argument(help="Tipo de formulario")],
    as_json: Annotated[bool, typer.Option("--json", help="Salida en formato de contrato JSON")] = False,
    schema_file: SchemaFileOption = None,
):
    """
    Muestra los campos de un tipo de formulario.

    Ejemplo:
        dynaform schema "User Information"
        dynaform schema "Address Information" --json
    """
    from rich.table import Table
    from rich import box
    from dynaform.cli.common import apply_settings
    from dynaform.cli.theme import get_console, get_palette, print_error
    from dynaform.errors import UnknownFormTypeError

    registry = apply_settings(_settings(None, schema_file))

    try:
        form = registry.get_schema(name)
    except UnknownFormTypeError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps({form.name: form.to_contract()}, indent=2))
        return

    p = get_palette()
    table = Table(
        title=form.name,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
    )
    table.add_column("Name")
    table.add_column("Label")
    table.add_column("Type")
    table.add_column("Required", justify="center")
    table.add_column("Options")

    for fld in form.fields:
        table.add_row(
            fld.name,
            fld.label,
            fld.type.value,
            "yes" if fld.required else "no",
            ", ".join(fld.options),
        )

    get_console().print(table)


@app.command()
def fill(
    name: Annotated[str, typer.Argument(help="Tipo de formulario")],
    assignments: Annotated[
        Optional[list[str]],
        typer.Option("--set", "-s", help="Valor de campo: campo=valor (repetible)"),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Imprimir el registro enviado como JSON")] = False,
    schema_file: SchemaFileOption = None,
    verbose: VerboseOption = False,
):
    """
    Completa y envía un formulario sin interacción.

    Sale con código 1 si faltan campos requeridos.

    Ejemplo:
        dynaform fill "User Information" -s firstName=Ada -s lastName=Lovelace
    """
    from dynaform.cli.common import apply_settings, parse_assignments
    from dynaform.cli.theme import (
        get_console, print_error, print_field, print_success, styled_progress_bar,
    )
    from dynaform.state import AppState, select_form, set_field_value, validate_and_submit

    registry = apply_settings(_settings(None, schema_file, verbose=verbose))

    state = select_form(AppState(), name, registry)
    if state.selection_error:
        print_error(state.selection_error)
        raise typer.Exit(1)

    for field_name, value in parse_assignments(assignments or []):
        if state.get_field(field_name) is None:
            print_error(f"Field '{field_name}' is not part of '{name}'")
            raise typer.Exit(1)
        state = set_field_value(state, field_name, value)

    if not as_json:
        get_console().print(styled_progress_bar(state.progress))

    result = validate_and_submit(state)
    if not result.ok:
        for message in result.errors.values():
            print_error(message)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.record, indent=2))
        return

    hidden = {f.name for f in state.fields if f.type == FieldType.PASSWORD}
    print_success(result.state.notice)
    for key, value in result.record.items():
        print_field(key, "*" * len(value) if key in hidden else value)


__all__ = ["app"]
