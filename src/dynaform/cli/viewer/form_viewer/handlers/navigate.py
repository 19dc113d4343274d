"""
Handler para el modo de navegación (selector, formulario y tabla).
"""

from typing import Optional

from dynaform.config import FieldType
from dynaform.state import select_form, validate_and_submit, load_for_edit

from ..models import ViewerState, Focus, Mode


def _wants_quit_confirmation(state: ViewerState) -> bool:
    return bool(state.app.submissions) or bool(state.app.answers)


def handle_navigate(key: str, state: ViewerState) -> Optional[dict]:
    """Maneja teclas comunes y delega según el área con foco."""
    command = key.lower() if len(key) == 1 else key

    if command in ('q', 'esc'):
        if not _wants_quit_confirmation(state):
            return {"_quit": True}
        state.mode = Mode.CONFIRM_QUIT
        return None

    if command == 'tab':
        state.cycle_focus()
        state.message = ""
        return None

    if state.focus == Focus.SELECTOR:
        return handle_selector(command, state)
    if state.focus == Focus.FORM:
        return handle_form(command, state)
    if state.focus == Focus.TABLE:
        return handle_table(command, state)
    return None


def handle_selector(key: str, state: ViewerState) -> Optional[dict]:
    """Selector de tipo de formulario."""
    n = len(state.selector_choices())

    if key == 'up':
        state.selector_idx = (state.selector_idx - 1) % n
    elif key == 'down':
        state.selector_idx = (state.selector_idx + 1) % n
    elif key == 'enter':
        name = state.selector_value(state.selector_idx)

        # Reelegir el formulario activo no borra lo ingresado
        if name == state.app.selected_form and state.app.has_form:
            state.focus = Focus.FORM
            return None

        state.app = select_form(state.app, name, state.registry)
        state.field_idx = 0
        state.message = state.app.selection_error
        if state.app.has_form:
            state.focus = Focus.FORM
        state.sync_with_app()

    return None


def submit(state: ViewerState) -> None:
    """Valida y envía, actualizando mensaje y foco."""
    result = validate_and_submit(state.app)
    state.app = result.state

    if result.ok:
        state.message = result.state.notice
        state.field_idx = 0
    else:
        missing = state.app.active_errors()
        n = len(missing)
        state.message = f"{n} required field{'s' if n != 1 else ''} missing."
        # Cursor al primer campo con error
        for idx, fld in enumerate(state.app.fields):
            if fld.name in missing:
                state.field_idx = idx
                break

    state.sync_with_app()


def handle_form(key: str, state: ViewerState) -> Optional[dict]:
    """Campos del formulario y fila de envío."""
    n = state.n_form_rows()

    if key == 'up':
        state.field_idx = (state.field_idx - 1) % n
    elif key == 'down':
        state.field_idx = (state.field_idx + 1) % n
    elif key == 's':
        submit(state)
    elif key == 'enter':
        fld = state.current_field()
        if fld is None:
            submit(state)
            return None

        state.message = ""
        current = state.app.answers.get(fld.name, "")
        if fld.type == FieldType.DROPDOWN:
            state.mode = Mode.EDIT_SELECT
            values = state.dropdown_values()
            state.select_idx = values.index(current) if current in values else 0
        else:
            state.mode = Mode.EDIT_TEXT
            state.input_buffer = current

    return None


def handle_table(key: str, state: ViewerState) -> Optional[dict]:
    """Tabla de envíos: editar o eliminar la fila actual."""
    n = len(state.app.submissions)
    if n == 0:
        return None

    if key == 'up':
        state.table_idx = (state.table_idx - 1) % n
    elif key == 'down':
        state.table_idx = (state.table_idx + 1) % n
    elif key == 'e':
        index = state.table_idx
        state.app = load_for_edit(state.app, index, state.registry, restore_form=True)
        state.message = f"Entry #{index + 1} loaded for editing."
        state.focus = Focus.FORM if state.app.has_form else Focus.SELECTOR
        state.field_idx = 0
        state.sync_with_app()
    elif key == 'd':
        state.mode = Mode.CONFIRM_DELETE

    return None
