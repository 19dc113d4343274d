"""
Estado del visor interactivo.

ViewerState envuelve el AppState (reglas del formulario) y agrega lo que
solo le importa a la pantalla: foco, cursor, modo y buffer de edición.
"""

from dataclasses import dataclass
from typing import Optional

from dynaform.config import FieldDescriptor
from dynaform.registry import SchemaRegistry, get_registry
from dynaform.state import AppState, NOT_SELECTED

SELECT_PLACEHOLDER = "--Select--"


class Focus:
    """Áreas de la pantalla que reciben teclas."""
    SELECTOR = "selector"
    FORM = "form"
    TABLE = "table"


class Mode:
    """Modos de interacción."""
    NAVIGATE = "navigate"
    EDIT_TEXT = "edit_text"
    EDIT_SELECT = "edit_select"
    CONFIRM_DELETE = "confirm_delete"
    CONFIRM_QUIT = "confirm_quit"


@dataclass
class ViewerState:
    """Estado de la pantalla."""
    app: AppState
    registry: SchemaRegistry
    title: str = "Dynamic Form"
    focus: str = Focus.SELECTOR
    mode: str = Mode.NAVIGATE
    selector_idx: int = 0  # 0 = "--Select--"
    field_idx: int = 0  # len(fields) = fila "Submit"
    table_idx: int = 0
    select_idx: int = 0  # Cursor dentro de un dropdown abierto
    input_buffer: str = ""
    message: str = ""

    @classmethod
    def create(cls, app: Optional[AppState] = None, registry: Optional[SchemaRegistry] = None) -> "ViewerState":
        return cls(app=app or AppState(), registry=get_registry() if registry is None else registry)

    # ========================================================================
    # Consultas
    # ========================================================================

    def selector_choices(self) -> list[str]:
        """Opciones del selector: placeholder + tipos del registro."""
        return [SELECT_PLACEHOLDER] + self.registry.names()

    def selector_value(self, idx: int) -> str:
        return NOT_SELECTED if idx == 0 else self.selector_choices()[idx]

    def visible_areas(self) -> list[str]:
        areas = [Focus.SELECTOR]
        if self.app.has_form:
            areas.append(Focus.FORM)
        if self.app.submissions:
            areas.append(Focus.TABLE)
        return areas

    def n_form_rows(self) -> int:
        """Campos más la fila de envío."""
        return len(self.app.fields) + 1

    def on_submit_row(self) -> bool:
        return self.field_idx >= len(self.app.fields)

    def current_field(self) -> Optional[FieldDescriptor]:
        if self.on_submit_row():
            return None
        return self.app.fields[self.field_idx]

    def dropdown_values(self) -> list[str]:
        """Valores del dropdown abierto: "" (--Select--) seguido de las opciones."""
        fld = self.current_field()
        return [NOT_SELECTED, *fld.options]

    # ========================================================================
    # Mutaciones de pantalla
    # ========================================================================

    def cycle_focus(self) -> None:
        areas = self.visible_areas()
        idx = areas.index(self.focus) if self.focus in areas else -1
        self.focus = areas[(idx + 1) % len(areas)]

    def sync_with_app(self) -> None:
        """
        Ajusta foco y cursores después de una transición del AppState.

        Un envío exitoso vacía el formulario y una eliminación puede
        vaciar la tabla: el foco no puede quedar en un área oculta.
        """
        choices = self.selector_choices()
        if self.app.selected_form in choices:
            self.selector_idx = choices.index(self.app.selected_form)
        elif self.app.selected_form == NOT_SELECTED:
            self.selector_idx = 0

        self.field_idx = min(self.field_idx, self.n_form_rows() - 1)
        if self.app.submissions:
            self.table_idx = min(self.table_idx, len(self.app.submissions) - 1)
        else:
            self.table_idx = 0

        if self.focus not in self.visible_areas():
            self.focus = Focus.SELECTOR
