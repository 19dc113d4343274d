"""
Función principal del visor interactivo de formularios.
"""

import shutil
from typing import Callable, Optional

from rich.live import Live

from dynaform.cli.theme import get_console
from dynaform.cli.viewer.terminal import get_key, clear_screen
from dynaform.registry import SchemaRegistry
from dynaform.state import AppState

from .models import ViewerState
from .builders import build_display
from .handlers import handle_key


def interactive_form(
    registry: Optional[SchemaRegistry] = None,
    app: Optional[AppState] = None,
    key_reader: Callable[[], str] = get_key,
) -> AppState:
    """
    Muestra el formulario dinámico hasta que el usuario sale.

    Args:
        registry: Registro de esquemas (por defecto el global)
        app: Estado inicial (por defecto vacío)
        key_reader: Fuente de teclas (reemplazable en tests)

    Returns:
        El AppState final, con los envíos de la sesión
    """
    console = get_console()
    state = ViewerState.create(app=app, registry=registry)

    # Guardar tamaño inicial del terminal para detectar cambios
    last_terminal_size = shutil.get_terminal_size()

    clear_screen()

    with Live(console=console, auto_refresh=False, screen=False) as live:
        live.update(build_display(state), refresh=True)

        while True:
            key = key_reader()

            result = handle_key(key, state)
            if result is not None and result.get("_quit"):
                break

            # Reiniciar Live si cambió el tamaño para no acumular contenido
            current_size = shutil.get_terminal_size()
            if current_size != last_terminal_size:
                live.stop()
                clear_screen()
                last_terminal_size = current_size
                live.start()

            live.update(build_display(state), refresh=True)

    return state.app
