"""
Sistema de iconos para la CLI.

Iconos Unicode con fallback a ASCII si el terminal no los soporta
o si se fuerza con DYNAFORM_ASCII / --ascii.
"""

import sys
from dataclasses import dataclass
from typing import Optional


def _detect_unicode_support() -> bool:
    """Detecta si el terminal soporta caracteres Unicode."""
    try:
        encoding = getattr(sys.stdout, 'encoding', None) or 'ascii'
        "❯◉○✓✗█░•".encode(encoding)
        return True
    except (UnicodeEncodeError, LookupError):
        return False


@dataclass
class IconSet:
    """Conjunto de iconos para la interfaz."""
    pointer: str      # Cursor en listas
    selected: str     # Opción elegida
    unselected: str   # Opción no elegida
    check: str        # Campo completo
    cross: str        # Error
    warning: str      # Requerido pendiente
    info: str         # Opcional
    bar_full: str     # Barra de progreso, tramo lleno
    bar_empty: str    # Barra de progreso, tramo vacío
    mask: str         # Carácter para ocultar passwords


ICONS_UNICODE = IconSet(
    pointer="❯",
    selected="◉",
    unselected="○",
    check="✓",
    cross="✗",
    warning="⚠",
    info="ℹ",
    bar_full="█",
    bar_empty="░",
    mask="•",
)

ICONS_ASCII = IconSet(
    pointer=">",
    selected="(*)",
    unselected="( )",
    check="[+]",
    cross="[x]",
    warning="[!]",
    info="[i]",
    bar_full="#",
    bar_empty=".",
    mask="*",
)


_active_icons: Optional[IconSet] = None
_force_ascii: bool = False


def get_icons() -> IconSet:
    """Obtiene el conjunto de iconos apropiado para el terminal."""
    global _active_icons

    if _active_icons is None:
        use_unicode = not _force_ascii and _detect_unicode_support()
        _active_icons = ICONS_UNICODE if use_unicode else ICONS_ASCII

    return _active_icons


def force_ascii(enabled: bool = True) -> None:
    """Fuerza (o libera) el uso de iconos ASCII."""
    global _force_ascii
    _force_ascii = enabled
    reset_icons_cache()


def reset_icons_cache() -> None:
    """Resetea el cache de iconos (útil para tests)."""
    global _active_icons
    _active_icons = None
