"""
Modo de preguntas secuenciales (questionary).

Alternativa al visor de pantalla completa para terminales donde no se
pueden leer teclas en modo raw. Usa las mismas transiciones de estado.
"""

from typing import Optional

import questionary

from dynaform.cli.styles import get_prompt_style
from dynaform.cli.theme import (
    get_console, print_header, print_section, print_error, print_success, print_info,
)
from dynaform.cli.viewer.form_viewer.builders import build_progress_panel, build_submissions_table
from dynaform.cli.viewer.form_viewer.models import ViewerState, SELECT_PLACEHOLDER
from dynaform.config import FieldDescriptor, FieldType
from dynaform.registry import SchemaRegistry, get_registry
from dynaform.state import (
    AppState,
    select_form,
    set_field_value,
    validate_and_submit,
    load_for_edit,
    delete_submission,
)

_QUIT = "__quit__"
_SUBMISSIONS = "__submissions__"


class PromptSession:
    """Sesión de formularios guiada por preguntas."""

    def __init__(self, registry: Optional[SchemaRegistry] = None, app: Optional[AppState] = None):
        self.registry = get_registry() if registry is None else registry
        self.app = app or AppState()
        self.style = get_prompt_style()

    # ========================================================================
    # Salida
    # ========================================================================

    def _view(self) -> ViewerState:
        return ViewerState.create(app=self.app, registry=self.registry)

    def show_progress(self) -> None:
        get_console().print(build_progress_panel(self._view()))

    def show_submissions(self) -> None:
        if not self.app.submissions:
            print_info("No submitted data yet.")
            return
        get_console().print(build_submissions_table(self._view()))

    # ========================================================================
    # Preguntas
    # ========================================================================

    def ask_field(self, fld: FieldDescriptor) -> Optional[str]:
        """Pregunta un campo con el control de su tipo. None si el usuario cancela."""
        current = self.app.answers.get(fld.name, "")
        message = f"{fld.label}{' *' if fld.required else ''}:"

        if fld.type == FieldType.DROPDOWN:
            choices = [questionary.Choice(SELECT_PLACEHOLDER, value="")]
            choices.extend(questionary.Choice(opt, value=opt) for opt in fld.options)
            return questionary.select(
                message,
                choices=choices,
                default=current if current in fld.options else None,
                style=self.style,
            ).ask()

        if fld.type == FieldType.PASSWORD:
            return questionary.password(message, default=current, style=self.style).ask()

        instruction = {FieldType.NUMBER: "(number)", FieldType.DATE: "(YYYY-MM-DD)"}.get(fld.type)
        return questionary.text(
            message,
            default=current,
            instruction=instruction,
            style=self.style,
        ).ask()

    def fill_fields(self, fields: tuple[FieldDescriptor, ...]) -> bool:
        """Pregunta cada campo; False si el usuario cancela."""
        for fld in fields:
            error = self.app.errors.get(fld.name)
            if error:
                print_error(error)
            value = self.ask_field(fld)
            if value is None:
                return False
            self.app = set_field_value(self.app, fld.name, value)
        self.show_progress()
        return True

    def run_form(self, name: str, keep_answers: bool = False) -> None:
        """Completa y envía un formulario; reintenta solo los campos con error."""
        if not keep_answers:
            self.app = select_form(self.app, name, self.registry)
        if self.app.selection_error:
            print_error(self.app.selection_error)
            return

        print_section(name)
        pending = self.app.fields

        while True:
            if not self.fill_fields(pending):
                print_info("Form left unsubmitted.")
                return

            if not questionary.confirm("Submit?", default=True, style=self.style).ask():
                return

            result = validate_and_submit(self.app)
            self.app = result.state
            if result.ok:
                print_success(result.state.notice)
                return

            missing = self.app.active_errors()
            n = len(missing)
            print_error(f"{n} required field{'s' if n != 1 else ''} missing.")
            pending = tuple(f for f in self.app.fields if f.name in missing)

    def manage_submissions(self) -> None:
        """Lista los envíos y ofrece editar o eliminar uno."""
        self.show_submissions()
        if not self.app.submissions:
            return

        choices = [
            questionary.Choice(
                f"#{idx + 1}  " + ", ".join(f"{k}={v}" for k, v in record.items()),
                value=idx,
            )
            for idx, record in enumerate(self.app.submissions)
        ]
        choices.append(questionary.Choice("Back", value=None))

        index = questionary.select("Entry:", choices=choices, style=self.style).ask()
        if index is None:
            return

        action = questionary.select(
            "Action:",
            choices=["Edit", "Delete", "Back"],
            style=self.style,
        ).ask()

        if action == "Edit":
            self.app = load_for_edit(self.app, index, self.registry, restore_form=True)
            if self.app.has_form:
                self.run_form(self.app.selected_form, keep_answers=True)
            else:
                print_error("No form type matches this entry; its values were restored only.")
        elif action == "Delete":
            if questionary.confirm(f"Delete entry #{index + 1}?", default=False, style=self.style).ask():
                self.app = delete_submission(self.app, index)
                print_success(self.app.notice)

    # ========================================================================
    # Loop principal
    # ========================================================================

    def show(self) -> AppState:
        print_header("Dynamic Form", "Select a form type to start")

        while True:
            choices = [questionary.Choice(name, value=name) for name in self.registry.names()]
            choices.append(questionary.Separator())
            if self.app.submissions:
                choices.append(questionary.Choice(
                    f"Submitted data ({len(self.app.submissions)})", value=_SUBMISSIONS,
                ))
            choices.append(questionary.Choice("Quit", value=_QUIT))

            choice = questionary.select("Select Form Type:", choices=choices, style=self.style).ask()

            if choice is None or choice == _QUIT:
                return self.app
            if choice == _SUBMISSIONS:
                self.manage_submissions()
            else:
                self.run_form(choice)
