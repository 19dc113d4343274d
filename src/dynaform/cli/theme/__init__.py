"""
Sistema de temas para la interfaz CLI de dynaform.

El paquete esta organizado en modulos:
- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- icons: Iconos Unicode/ASCII
- styled: Funciones que retornan objetos Text estilizados
- printing: Funciones que imprimen directamente a consola
"""

from dynaform.cli.theme.palette import (
    ColorPalette,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from dynaform.cli.theme.icons import (
    IconSet,
    get_icons,
    force_ascii,
    reset_icons_cache,
)

from dynaform.cli.theme.styled import (
    styled_header,
    styled_success,
    styled_error,
    styled_info,
    styled_progress_bar,
)

from dynaform.cli.theme.printing import (
    print_header,
    print_section,
    print_field,
    print_success,
    print_error,
    print_info,
)

__all__ = [
    # palette
    "ColorPalette",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # icons
    "IconSet",
    "get_icons",
    "force_ascii",
    "reset_icons_cache",
    # styled
    "styled_header",
    "styled_success",
    "styled_error",
    "styled_info",
    "styled_progress_bar",
    # printing
    "print_header",
    "print_section",
    "print_field",
    "print_success",
    "print_error",
    "print_info",
]
