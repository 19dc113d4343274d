"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from typing import Optional, Union

from rich.console import Console
from rich.theme import Theme

from dynaform.config import ThemeName


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Títulos, cursor, barra de progreso en curso
    secondary: str    # Encabezados de tabla
    accent: str       # Valores ingresados

    # Colores semánticos
    success: str      # Envío correcto, barra al 100%
    warning: str      # Campo requerido pendiente
    error: str        # Mensajes de validación
    info: str         # Avisos
    muted: str        # Texto secundario

    # Bordes
    border: str

    # Navegación interactiva
    nav_confirm: str  # Enter
    nav_cancel: str   # Esc
    nav_key: str      # Flechas y atajos
    input_text: str   # Texto en edición

    # Selección
    marked: str       # Fila a eliminar
    selected: str     # Fila bajo el cursor


THEME_DEFAULT = ColorPalette(
    primary="#5f87af",
    secondary="#87afaf",
    accent="#af87af",
    success="#87af87",
    warning="#d7af5f",
    error="#d75f5f",
    info="#5f87af",
    muted="#808080",
    border="#5f5f5f",
    nav_confirm="#87af87",
    nav_cancel="#d75f5f",
    nav_key="#af87af",
    input_text="#ffffff",
    marked="#d75f5f",
    selected="#5f87af",
)

THEME_MONOKAI = ColorPalette(
    primary="#66d9ef",
    secondary="#a6e22e",
    accent="#ae81ff",
    success="#a6e22e",
    warning="#e6db74",
    error="#f92672",
    info="#66d9ef",
    muted="#75715e",
    border="#49483e",
    nav_confirm="#a6e22e",
    nav_cancel="#f92672",
    nav_key="#ae81ff",
    input_text="#f8f8f2",
    marked="#f92672",
    selected="#66d9ef",
)

THEME_NORD = ColorPalette(
    primary="#88c0d0",
    secondary="#81a1c1",
    accent="#b48ead",
    success="#a3be8c",
    warning="#ebcb8b",
    error="#bf616a",
    info="#5e81ac",
    muted="#4c566a",
    border="#3b4252",
    nav_confirm="#a3be8c",
    nav_cancel="#bf616a",
    nav_key="#b48ead",
    input_text="#eceff4",
    marked="#bf616a",
    selected="#88c0d0",
)

# Solo grises y un acento
THEME_MINIMAL = ColorPalette(
    primary="#ffffff",
    secondary="#b0b0b0",
    accent="#5fafff",
    success="#87d787",
    warning="#ffd787",
    error="#ff8787",
    info="#5fafff",
    muted="#606060",
    border="#404040",
    nav_confirm="#87d787",
    nav_cancel="#ff8787",
    nav_key="#5fafff",
    input_text="#ffffff",
    marked="#ff8787",
    selected="#5fafff",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.MONOKAI: THEME_MONOKAI,
    ThemeName.NORD: THEME_NORD,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: Union[ThemeName, str]) -> None:
        """Establece el tema activo (por enum o por nombre)."""
        cls._palette = THEMES.get(ThemeName(theme), THEME_DEFAULT)
        cls._console = None  # Se recrea con el nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "title": f"bold {p.primary}",
                "nav.confirm": f"bold {p.nav_confirm}",
                "nav.cancel": f"bold {p.nav_cancel}",
                "nav.key": f"bold {p.nav_key}",
                "input": f"bold {p.input_text}",
                "marked": p.marked,
                "selected": f"bold {p.selected}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
