"""
Handlers para los modos de edición (texto y selección).
"""

from typing import Optional

from dynaform.state import set_field_value

from ..models import ViewerState, Mode
from ..formatters import accepts_char


def _commit(state: ViewerState, value: str) -> None:
    """Escribe el valor y avanza a la fila siguiente."""
    fld = state.current_field()
    state.app = set_field_value(state.app, fld.name, value)
    state.mode = Mode.NAVIGATE
    state.input_buffer = ""
    state.message = ""
    state.field_idx = min(state.field_idx + 1, state.n_form_rows() - 1)


def handle_edit_text(key: str, state: ViewerState) -> Optional[dict]:
    """Edición de campos text, number, date y password."""
    fld = state.current_field()

    if key == 'enter':
        _commit(state, state.input_buffer)

    elif key == 'esc':
        state.mode = Mode.NAVIGATE
        state.input_buffer = ""

    elif key == 'backspace':
        state.input_buffer = state.input_buffer[:-1]

    else:
        char = ' ' if key == 'space' else key
        if accepts_char(fld, char):
            state.input_buffer += char

    return None


def handle_edit_select(key: str, state: ViewerState) -> Optional[dict]:
    """Selección de una opción de dropdown."""
    values = state.dropdown_values()
    n_options = len(values)

    if key == 'up':
        state.select_idx = (state.select_idx - 1) % n_options
    elif key == 'down':
        state.select_idx = (state.select_idx + 1) % n_options
    elif key == 'enter':
        _commit(state, values[state.select_idx])
    elif key == 'esc':
        state.mode = Mode.NAVIGATE

    return None
