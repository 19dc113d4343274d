"""
Utilidades de terminal para el visor interactivo.

Funciones para limpiar pantalla y capturar teclas.
"""

import os
import sys

# Secuencias especiales -> nombre de tecla
_WINDOWS_ARROWS = {b'K': 'left', b'M': 'right', b'H': 'up', b'P': 'down'}
_ANSI_ARROWS = {'D': 'left', 'C': 'right', 'A': 'up', 'B': 'down'}
_NAMED_KEYS = {
    ' ': 'space',
    '\r': 'enter',
    '\n': 'enter',
    '\x7f': 'backspace',
    '\x08': 'backspace',
    '\t': 'tab',
}


def clear_screen() -> None:
    """Limpia la pantalla de la terminal."""
    os.system('cls' if os.name == 'nt' else 'clear')


def get_key() -> str:
    """
    Captura una tecla del usuario.

    Returns:
        'up', 'down', 'left', 'right', 'enter', 'esc', 'tab', 'space',
        'backspace', o el caracter tal cual (respetando mayúsculas para
        que el modo de edición reciba el texto literal).
    """
    if os.name == 'nt':
        import msvcrt
        key = msvcrt.getch()

        if key in (b'\xe0', b'\x00'):  # Tecla especial (flechas)
            return _WINDOWS_ARROWS.get(msvcrt.getch(), '')
        if key == b'\x1b':
            return 'esc'

        char = key.decode('utf-8', errors='ignore')
        return _NAMED_KEYS.get(char, char)

    import tty
    import termios

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        key = sys.stdin.read(1)

        if key == '\x1b':  # Secuencia de escape
            key2 = sys.stdin.read(1)
            if key2 == '[':
                return _ANSI_ARROWS.get(sys.stdin.read(1), 'esc')
            return 'esc'
        if key == '\x03':  # Ctrl+C en modo raw
            raise KeyboardInterrupt

        return _NAMED_KEYS.get(key, key)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
