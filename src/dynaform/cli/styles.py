"""
Estilo de questionary derivado del tema activo.
"""

from questionary import Style

from dynaform.cli.theme import get_palette


def get_prompt_style() -> Style:
    """Estilo de questionary basado en la paleta actual."""
    p = get_palette()
    return Style([
        ('qmark', f'fg:{p.accent} bold'),
        ('question', 'bold'),
        ('answer', f'fg:{p.success} bold'),
        ('pointer', f'fg:{p.accent} bold'),
        ('highlighted', f'fg:{p.primary} bold'),
        ('selected', f'fg:{p.success} bold'),
        ('instruction', f'fg:{p.muted} italic'),
        ('text', ''),
        ('disabled', f'fg:{p.muted} italic'),
        ('separator', f'fg:{p.border}'),
    ])
