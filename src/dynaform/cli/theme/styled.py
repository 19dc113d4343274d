"""
Funciones para crear objetos Text estilizados (no imprimen directamente).
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from dynaform.cli.theme.palette import get_palette


def styled_header(text: str, subtitle: str = None) -> Panel:
    """Crea un encabezado estilizado."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)

    return Panel(
        content,
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 2),
    )


def styled_success(text: str) -> Text:
    p = get_palette()
    return Text(f"[+] {text}", style=p.success)


def styled_error(text: str) -> Text:
    p = get_palette()
    return Text(f"[x] {text}", style=p.error)


def styled_info(text: str) -> Text:
    p = get_palette()
    return Text(f"[i] {text}", style=p.info)


def styled_progress_bar(progress: int, width: int = 30) -> Text:
    """
    Barra de progreso de ancho fijo.

    Verde (success) al 100%, color primario en otro caso.
    """
    from dynaform.cli.theme.icons import get_icons

    p = get_palette()
    icons = get_icons()

    progress = max(0, min(100, progress))
    filled = round(width * progress / 100)
    color = p.success if progress == 100 else p.primary

    bar = Text()
    bar.append(icons.bar_full * filled, style=color)
    bar.append(icons.bar_empty * (width - filled), style=p.muted)
    bar.append(f"  {progress}%", style=f"bold {color}")
    return bar
