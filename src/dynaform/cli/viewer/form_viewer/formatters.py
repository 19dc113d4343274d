"""
Formateo de valores y controles según el tipo de campo.
"""

from typing import Optional

from dynaform.cli.theme import get_icons
from dynaform.config import FieldDescriptor, FieldType

from .models import SELECT_PLACEHOLDER

# Control que corresponde a cada tipo (debe cubrir todo FieldType)
CONTROL_LABELS = {
    FieldType.TEXT: "text",
    FieldType.NUMBER: "number",
    FieldType.DATE: "date",
    FieldType.PASSWORD: "password",
    FieldType.DROPDOWN: "select",
}

# Ayuda mostrada al editar
EDIT_HINTS = {
    FieldType.TEXT: "",
    FieldType.NUMBER: "numeric value",
    FieldType.DATE: "YYYY-MM-DD",
    FieldType.PASSWORD: "input is hidden",
    FieldType.DROPDOWN: "",
}


def control_label(fld: FieldDescriptor) -> str:
    return CONTROL_LABELS[fld.type]


def mask(value: str) -> str:
    return get_icons().mask * len(value)


def format_field_value(fld: FieldDescriptor, value: Optional[str]) -> str:
    """Texto a mostrar para el valor de un campo."""
    if fld.type == FieldType.DROPDOWN:
        return value if value else SELECT_PLACEHOLDER
    if not value:
        return "-"
    if fld.type == FieldType.PASSWORD:
        return mask(value)
    return value


def format_input_buffer(fld: FieldDescriptor, buffer: str) -> str:
    """Buffer de edición (oculto para passwords)."""
    if fld.type == FieldType.PASSWORD:
        return mask(buffer)
    return buffer


def accepts_char(fld: FieldDescriptor, char: str) -> bool:
    """
    Filtra teclas por tipo de control, como un input nativo.

    El valor sigue guardándose como texto: esto solo limita lo tipeable.
    """
    if len(char) != 1 or not char.isprintable():
        return False
    if fld.type == FieldType.NUMBER:
        return char.isdigit() or char in ".-+eE"
    if fld.type == FieldType.DATE:
        return char.isdigit() or char == "-"
    return True
