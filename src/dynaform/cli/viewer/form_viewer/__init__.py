"""
Visor interactivo del formulario dinámico.

Selector de tipo, tabla de campos editables, barra de progreso y tabla
de envíos con acciones de edición y eliminación, en una misma vista.
"""

from .models import ViewerState, Focus, Mode, SELECT_PLACEHOLDER
from .main import interactive_form
from .builders import build_display
from .handlers import handle_key

__all__ = [
    "ViewerState",
    "Focus",
    "Mode",
    "SELECT_PLACEHOLDER",
    "interactive_form",
    "build_display",
    "handle_key",
]
