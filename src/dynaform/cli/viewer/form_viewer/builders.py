"""
Funciones para construir componentes visuales del formulario.

Todas son funciones puras del ViewerState: no leen teclas ni imprimen.
"""

from rich.console import Group
from rich.table import Table
from rich.text import Text
from rich.panel import Panel
from rich import box

from dynaform.cli.theme import get_palette, get_icons, styled_progress_bar
from dynaform.config import FieldType

from .models import ViewerState, Focus, Mode, SELECT_PLACEHOLDER
from .formatters import control_label, format_field_value, format_input_buffer, EDIT_HINTS


def build_selector_panel(state: ViewerState) -> Panel:
    """Selector de tipo de formulario."""
    p = get_palette()
    icons = get_icons()
    has_focus = state.focus == Focus.SELECTOR and state.mode == Mode.NAVIGATE

    content = Text()
    for idx, name in enumerate(state.selector_choices()):
        is_cursor = idx == state.selector_idx
        is_active = state.selector_value(idx) == state.app.selected_form

        marker = icons.selected if is_active else icons.unselected
        if is_cursor and has_focus:
            content.append(f" {icons.pointer} {marker} {name} ", style=f"bold reverse {p.primary}")
        elif is_active:
            content.append(f"   {marker} {name}", style=f"bold {p.accent}")
        else:
            content.append(f"   {marker} {name}", style="" if idx else p.muted)
        content.append("\n")

    if state.app.selection_error:
        content.append(f"\n {icons.cross} {state.app.selection_error}", style=f"bold {p.error}")

    return Panel(
        content,
        title="Select Form Type",
        title_align="left",
        border_style=p.primary if has_focus else p.border,
        box=box.ROUNDED,
        padding=(0, 1),
    )


def build_form_table(state: ViewerState) -> Table:
    """Tabla de campos del formulario activo."""
    p = get_palette()
    icons = get_icons()
    app = state.app
    has_focus = state.focus == Focus.FORM

    table = Table(
        title=app.selected_form,
        title_style=f"bold {p.primary}",
        border_style=p.primary if has_focus else p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
        expand=False,
    )

    table.add_column("#", justify="right", width=3)
    table.add_column("Field", justify="left", min_width=18)
    table.add_column("Value", justify="left", min_width=24)
    table.add_column("Type", justify="left", width=8)
    table.add_column("", justify="left")  # Estado / error

    for idx, fld in enumerate(app.fields):
        value = app.answers.get(fld.name)
        error = app.errors.get(fld.name, "")
        is_cursor = has_focus and idx == state.field_idx

        label = f"{fld.label} *" if fld.required else fld.label

        if is_cursor and state.mode == Mode.EDIT_TEXT:
            value_text = Text(format_input_buffer(fld, state.input_buffer), style=f"bold {p.input_text}")
            value_text.append("_", style=f"blink bold {p.input_text}")
        else:
            value_text = Text(format_field_value(fld, value), style=f"bold {p.accent}" if value else p.muted)

        if error:
            status = Text(f"{icons.cross} {error}", style=f"bold {p.error}")
        elif value:
            status = Text(icons.check, style=p.success)
        elif fld.required:
            status = Text(icons.warning, style=p.warning)
        else:
            status = Text(icons.info, style=p.muted)

        if is_cursor and state.mode == Mode.NAVIGATE:
            row_style = f"bold reverse {p.primary}"
            table.add_row(
                Text(f">{idx + 1}", style=row_style),
                Text(label, style=row_style),
                Text(value_text.plain, style=row_style),
                Text(control_label(fld), style=row_style),
                status,
            )
        else:
            table.add_row(
                Text(str(idx + 1), style=p.muted),
                Text(label, style="bold" if fld.required else p.muted),
                value_text,
                Text(control_label(fld), style=p.muted),
                status,
            )

    # Fila de envío
    submit_selected = has_focus and state.on_submit_row() and state.mode == Mode.NAVIGATE
    submit_style = f"bold reverse {p.nav_confirm}" if submit_selected else f"bold {p.nav_confirm}"
    table.add_row(Text(""), Text("[ Submit ]", style=submit_style), Text(""), Text(""), Text(""))

    return table


def build_progress_panel(state: ViewerState) -> Panel:
    """Barra de progreso de campos requeridos."""
    p = get_palette()
    progress = state.app.progress
    border = p.success if progress == 100 else p.border
    return Panel(
        styled_progress_bar(progress),
        title="Progress",
        title_align="left",
        border_style=border,
        box=box.ROUNDED,
        padding=(0, 1),
    )


def build_select_options(state: ViewerState) -> Table:
    """Opciones de un dropdown abierto."""
    p = get_palette()
    fld = state.current_field()

    table = Table(
        title=f"Select: {fld.label}",
        title_style=f"bold {p.accent}",
        border_style=p.accent,
        box=box.ROUNDED,
        show_header=False,
        padding=(0, 1),
    )
    table.add_column("", width=2)
    table.add_column("Option", min_width=30)

    current = state.app.answers.get(fld.name, "")
    for idx, value in enumerate(state.dropdown_values()):
        label = value or SELECT_PLACEHOLDER
        if idx == state.select_idx:
            row_style = f"bold reverse {p.primary}"
            table.add_row(Text(">", style=row_style), Text(label, style=row_style))
        elif not value:
            table.add_row(Text(" "), Text(label, style=p.muted))
        else:
            style = f"bold {p.accent}" if value == current else ""
            table.add_row(Text(" "), Text(label, style=style))

    return table


def build_submissions_table(state: ViewerState) -> Table:
    """
    Tabla de envíos.

    El encabezado es la unión de claves de todos los registros, así filas
    de distintos tipos de formulario quedan alineadas (faltantes vacíos).
    """
    p = get_palette()
    store = state.app.submissions
    has_focus = state.focus == Focus.TABLE

    table = Table(
        title="Submitted Data",
        title_style=f"bold {p.primary}",
        border_style=p.primary if has_focus else p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )

    table.add_column("#", justify="right", width=3)
    for col in store.columns():
        table.add_column(Text(col))
    table.add_column("Actions", justify="left")

    for idx, row in enumerate(store.rows()):
        is_cursor = has_focus and idx == state.table_idx
        if is_cursor and state.mode == Mode.CONFIRM_DELETE:
            style = f"bold reverse {p.marked}"
        elif is_cursor:
            style = f"bold reverse {p.selected}"
        else:
            style = ""

        cells = [Text(str(idx + 1), style=style or p.muted)]
        cells.extend(Text(value, style=style) for value in row)
        cells.append(Text("[e] Edit  [d] Delete", style=style or p.muted))
        table.add_row(*cells)

    return table


def build_confirm_panel(state: ViewerState) -> Panel:
    """Confirmación de eliminación o salida."""
    p = get_palette()
    icons = get_icons()

    content = Text()
    if state.mode == Mode.CONFIRM_DELETE:
        content.append(f" {icons.warning} Delete entry #{state.table_idx + 1}? ", style=f"bold {p.warning}")
    else:
        content.append(f" {icons.warning} Quit? Submitted data will be lost. ", style=f"bold {p.warning}")
    content.append("[", style=p.muted)
    content.append("y", style=f"bold {p.nav_confirm}")
    content.append("] Yes  [", style=p.muted)
    content.append("n", style=f"bold {p.nav_cancel}")
    content.append("] No", style=p.muted)

    return Panel(content, border_style=p.warning, box=box.HEAVY, padding=(0, 1))


def _key_hint(nav: Text, key: str, label: str, style: str) -> None:
    p = get_palette()
    nav.append("[", style=p.muted)
    nav.append(key, style=f"bold {style}")
    nav.append(f"] {label}  ", style=p.muted)


def build_nav_text(state: ViewerState) -> Text:
    """Construye el texto de navegación según foco y modo."""
    p = get_palette()
    nav = Text("  ")

    if state.mode == Mode.EDIT_TEXT:
        fld = state.current_field()
        hint = EDIT_HINTS[fld.type]
        nav.append(f"{fld.label}", style=f"bold {p.accent}")
        if hint:
            nav.append(f" ({hint})", style=p.muted)
        nav.append("  ")
        _key_hint(nav, "Enter", "Confirm", p.nav_confirm)
        _key_hint(nav, "Esc", "Cancel", p.nav_cancel)
        return nav

    if state.mode == Mode.EDIT_SELECT:
        _key_hint(nav, "↑↓", "Move", p.nav_key)
        _key_hint(nav, "Enter", "Choose", p.nav_confirm)
        _key_hint(nav, "Esc", "Cancel", p.nav_cancel)
        return nav

    if state.mode in (Mode.CONFIRM_DELETE, Mode.CONFIRM_QUIT):
        _key_hint(nav, "y", "Yes", p.nav_confirm)
        _key_hint(nav, "n", "No", p.nav_cancel)
        return nav

    _key_hint(nav, "↑↓", "Move", p.nav_key)
    if len(state.visible_areas()) > 1:
        _key_hint(nav, "Tab", "Switch area", p.nav_key)

    if state.focus == Focus.SELECTOR:
        _key_hint(nav, "Enter", "Select form", p.nav_confirm)
    elif state.focus == Focus.FORM:
        _key_hint(nav, "Enter", "Edit" if not state.on_submit_row() else "Submit", p.nav_confirm)
        _key_hint(nav, "s", "Submit", p.nav_confirm)
    elif state.focus == Focus.TABLE:
        _key_hint(nav, "e", "Edit", p.nav_key)
        _key_hint(nav, "d", "Delete", p.nav_cancel)

    _key_hint(nav, "q", "Quit", p.nav_cancel)
    return nav


def build_message_text(state: ViewerState) -> Text:
    """Construye el texto de mensaje."""
    p = get_palette()
    if not state.message:
        return Text("")

    lowered = state.message.lower()
    if "required" in lowered or "unknown" in lowered:
        style = f"bold {p.error}"
    elif "successfully" in lowered:
        style = f"bold {p.success}"
    else:
        style = p.info

    return Text(f"  {state.message}", style=style)


def build_display(state: ViewerState) -> Group:
    """Construye el display completo."""
    p = get_palette()
    elements = [
        Text(""),
        Text(f"  {state.title}", style=f"bold {p.primary}"),
        Text(""),
        build_selector_panel(state),
    ]

    if state.app.has_form:
        elements.append(build_form_table(state))
        if state.mode == Mode.EDIT_SELECT and state.current_field() is not None \
                and state.current_field().type == FieldType.DROPDOWN:
            elements.append(build_select_options(state))
        elements.append(build_progress_panel(state))

    if state.app.submissions:
        elements.append(Text(""))
        elements.append(build_submissions_table(state))

    if state.mode in (Mode.CONFIRM_DELETE, Mode.CONFIRM_QUIT):
        elements.append(build_confirm_panel(state))

    msg = build_message_text(state)
    if msg.plain:
        elements.append(msg)

    elements.append(Text(""))
    elements.append(build_nav_text(state))

    return Group(*elements)
