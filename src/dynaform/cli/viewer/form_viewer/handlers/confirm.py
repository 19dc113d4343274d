"""
Handlers para los modos de confirmación.
"""

from typing import Optional

from dynaform.state import delete_submission

from ..models import ViewerState, Mode


def handle_confirm_delete(key: str, state: ViewerState) -> Optional[dict]:
    """Confirma la eliminación de la fila actual de la tabla."""
    if key in ('y', 'Y', 's', 'S'):
        state.app = delete_submission(state.app, state.table_idx)
        state.message = state.app.notice
        state.mode = Mode.NAVIGATE
        state.sync_with_app()
    elif key in ('n', 'N', 'esc'):
        state.mode = Mode.NAVIGATE
        state.message = ""
    # Ignorar otras teclas
    return None


def handle_confirm_quit(key: str, state: ViewerState) -> Optional[dict]:
    """Confirma la salida del visor."""
    if key in ('y', 'Y', 's', 'S'):
        return {"_quit": True}
    elif key in ('n', 'N', 'esc'):
        state.mode = Mode.NAVIGATE
        state.message = ""
    return None
