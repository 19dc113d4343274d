"""
Controlador de estado del formulario.

AppState es un valor inmutable; cada acción del usuario corresponde a una
función de transición que recibe el estado actual y retorna uno nuevo.
Así las reglas se prueban sin interfaz de por medio.

Transiciones:
- select_form: cambia el tipo de formulario y limpia respuestas/errores
- set_field_value: escribe una respuesta y limpia el error de ese campo
- validate_and_submit: valida requeridos y agrega al almacén o retorna errores
- load_for_edit: saca un envío del almacén y lo carga como respuestas
- delete_submission: elimina un envío
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Optional

from dynaform.config import FieldDescriptor
from dynaform.registry import SchemaRegistry, get_registry
from dynaform.store import SubmissionRecord, SubmissionStore

logger = logging.getLogger(__name__)

# Valor del selector sin tipo elegido
NOT_SELECTED = ""

MSG_SUBMITTED = "Form submitted successfully!"
MSG_DELETED = "Entry deleted successfully."


def required_message(fld: FieldDescriptor) -> str:
    return f"{fld.label} is required."


def is_filled(value: Optional[str]) -> bool:
    """Un valor cuenta como completo si existe y no es texto vacío ("0" cuenta)."""
    return bool(value)


def compute_progress(fields: tuple[FieldDescriptor, ...], answers: dict[str, str]) -> int:
    """
    Porcentaje de campos requeridos completos (0-100).

    Redondea la mitad hacia arriba: 1 de 8 -> 13. Sin campos requeridos
    el progreso es 0.
    """
    required = [f for f in fields if f.required]
    if not required:
        return 0
    filled = sum(1 for f in required if is_filled(answers.get(f.name)))
    return int(math.floor(100 * filled / len(required) + 0.5))


@dataclass(frozen=True)
class AppState:
    """Estado completo de la aplicación."""
    selected_form: str = NOT_SELECTED
    fields: tuple[FieldDescriptor, ...] = ()
    answers: dict[str, str] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    submissions: SubmissionStore = field(default_factory=SubmissionStore)
    notice: str = ""  # Confirmación transitoria (envío, eliminación)
    selection_error: str = ""

    @property
    def progress(self) -> int:
        return compute_progress(self.fields, self.answers)

    @property
    def has_form(self) -> bool:
        return bool(self.fields)

    def active_errors(self) -> dict[str, str]:
        """Errores no vacíos."""
        return {k: v for k, v in self.errors.items() if v}

    def get_field(self, name: str) -> Optional[FieldDescriptor]:
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True)
class SubmitResult:
    """Resultado de validate_and_submit: registro XOR errores."""
    ok: bool
    state: AppState
    record: Optional[SubmissionRecord] = None
    errors: dict[str, str] = field(default_factory=dict)


def select_form(
    state: AppState,
    name: str,
    registry: Optional[SchemaRegistry] = None,
) -> AppState:
    """
    Selecciona un tipo de formulario.

    Limpia respuestas y errores. Un nombre que no está en el registro deja
    la lista de campos vacía y queda informado en selection_error.
    """
    if registry is None:
        registry = get_registry()
    fields = registry.lookup(name)

    selection_error = ""
    if name != NOT_SELECTED and name not in registry:
        selection_error = f'Unknown form type: "{name}".'
        logger.debug("Unknown form type selected: %r", name)
    else:
        logger.debug("Form selected: %r (%d fields)", name, len(fields))

    return replace(
        state,
        selected_form=name,
        fields=fields,
        answers={},
        errors={},
        notice="",
        selection_error=selection_error,
    )


def set_field_value(state: AppState, field_name: str, raw_value) -> AppState:
    """Escribe la respuesta como texto, sin conversión de tipo."""
    answers = {**state.answers, field_name: "" if raw_value is None else str(raw_value)}
    errors = state.errors
    if field_name in errors:
        errors = {**errors, field_name: ""}
    return replace(state, answers=answers, errors=errors, notice="")


def validate_and_submit(state: AppState) -> SubmitResult:
    """
    Valida los campos requeridos y envía.

    Si falta alguno, retorna los errores (reemplazando los anteriores) sin
    tocar respuestas ni selección. Si no, agrega una copia de las
    respuestas al almacén y deja el controlador vacío.
    """
    errors = {
        f.name: required_message(f)
        for f in state.fields
        if f.required and not is_filled(state.answers.get(f.name))
    }

    if errors:
        logger.debug("Submit rejected, missing: %s", ", ".join(errors))
        return SubmitResult(
            ok=False,
            state=replace(state, errors=errors, notice=""),
            errors=dict(errors),
        )

    record = dict(state.answers)
    new_state = AppState(
        submissions=state.submissions.append(record),
        notice=MSG_SUBMITTED,
    )
    logger.debug("Submitted record #%d for %r", len(new_state.submissions), state.selected_form)
    return SubmitResult(ok=True, state=new_state, record=record)


def infer_form_type(record: SubmissionRecord, registry: Optional[SchemaRegistry] = None) -> Optional[str]:
    """
    Primer tipo del registro cuyos campos contienen todas las claves del registro.

    Retorna None para registros vacíos o sin coincidencia.
    """
    if not record:
        return None
    if registry is None:
        registry = get_registry()
    for schema in registry:
        names = {f.name for f in schema.fields}
        if set(record) <= names:
            return schema.name
    return None


def load_for_edit(
    state: AppState,
    index: int,
    registry: Optional[SchemaRegistry] = None,
    restore_form: bool = False,
) -> AppState:
    """
    Saca el envío index del almacén y lo carga como respuestas.

    Por defecto no cambia el tipo de formulario ni la lista de campos:
    solo restaura los valores. Con restore_form=True, si no hay formulario
    activo o el activo no contiene las claves del registro, se selecciona
    el tipo inferido con infer_form_type().

    Lanza SubmissionIndexError si index está fuera de rango.
    """
    record, submissions = state.submissions.load_for_edit(index)
    new_state = replace(state, answers=record, submissions=submissions, notice="")

    if restore_form:
        active_names = {f.name for f in state.fields}
        if not state.fields or not set(record) <= active_names:
            form_type = infer_form_type(record, registry)
            if form_type is not None:
                if registry is None:
                    registry = get_registry()
                new_state = replace(
                    new_state,
                    selected_form=form_type,
                    fields=registry.lookup(form_type),
                    errors={},
                    selection_error="",
                )

    logger.debug("Loaded submission %d for edit (form: %r)", index, new_state.selected_form)
    return new_state


def delete_submission(state: AppState, index: int) -> AppState:
    """Elimina el envío index. Lanza SubmissionIndexError si no existe."""
    submissions = state.submissions.delete(index)
    logger.debug("Deleted submission %d", index)
    return replace(state, submissions=submissions, notice=MSG_DELETED)
