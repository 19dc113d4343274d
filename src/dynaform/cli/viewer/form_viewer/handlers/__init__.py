"""
Handlers de teclas para el formulario interactivo.

Cada módulo maneja un modo específico del visor.
"""

from typing import Optional

from ..models import ViewerState, Mode

from .navigate import handle_navigate
from .edit import handle_edit_text, handle_edit_select
from .confirm import handle_confirm_delete, handle_confirm_quit


_MODE_HANDLERS = {
    Mode.NAVIGATE: handle_navigate,
    Mode.EDIT_TEXT: handle_edit_text,
    Mode.EDIT_SELECT: handle_edit_select,
    Mode.CONFIRM_DELETE: handle_confirm_delete,
    Mode.CONFIRM_QUIT: handle_confirm_quit,
}


def handle_key(key: str, state: ViewerState) -> Optional[dict]:
    """
    Maneja una tecla presionada.

    Returns:
        None si debe continuar el loop
        dict con resultado si debe salir ({"_quit": True})
    """
    handler = _MODE_HANDLERS.get(state.mode)
    if handler is None:
        return None
    return handler(key, state)


__all__ = ["handle_key"]
