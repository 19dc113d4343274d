"""Configuración de pytest para tests de dynaform."""

import pytest
from rich.console import Console

from dynaform.cli.theme import CLITheme, force_ascii
from dynaform.config import ThemeName
from dynaform.registry import SchemaRegistry, set_registry
from dynaform.state import AppState, select_form


@pytest.fixture(autouse=True)
def clean_globals():
    """Iconos ASCII deterministas y registro/tema globales limpios por test."""
    force_ascii(True)
    set_registry(None)
    CLITheme.set_theme(ThemeName.DEFAULT)
    yield
    force_ascii(False)
    set_registry(None)
    CLITheme.set_theme(ThemeName.DEFAULT)


@pytest.fixture
def registry():
    """Registro con la tabla integrada."""
    return SchemaRegistry.default()


@pytest.fixture
def user_form(registry):
    """Estado con "User Information" seleccionado."""
    return select_form(AppState(), "User Information", registry)


@pytest.fixture
def eight_required_registry():
    """Registro con un formulario de 8 campos requeridos (redondeo)."""
    return SchemaRegistry.from_mapping({
        "Eight": {
            "fields": [
                {"name": f"f{i}", "type": "text", "label": f"F{i}", "required": True}
                for i in range(8)
            ],
        },
    })


@pytest.fixture
def render():
    """Renderiza a texto plano con una consola de grabación."""
    def _render(renderable, width: int = 160) -> str:
        console = Console(record=True, width=width, color_system=None)
        console.print(renderable)
        return console.export_text()
    return _render
