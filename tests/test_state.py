"""
Tests para state.py - Transiciones del controlador de formulario.
"""

import pytest

from dynaform.errors import SubmissionIndexError
from dynaform.registry import SchemaRegistry
from dynaform.state import (
    AppState,
    MSG_DELETED,
    MSG_SUBMITTED,
    NOT_SELECTED,
    compute_progress,
    delete_submission,
    infer_form_type,
    load_for_edit,
    select_form,
    set_field_value,
    validate_and_submit,
)
from dynaform.store import SubmissionStore


def _fill(state, **values):
    for name, value in values.items():
        state = set_field_value(state, name, value)
    return state


class TestProgress:
    """Tests para compute_progress / AppState.progress."""

    def test_no_selection_is_zero(self):
        assert AppState().progress == 0

    def test_no_required_fields_is_zero(self):
        registry = SchemaRegistry.from_mapping({
            "Optional": {"fields": [{"name": "note", "type": "text", "label": "Note"}]},
        })
        state = select_form(AppState(), "Optional", registry)
        state = set_field_value(state, "note", "hello")
        assert state.progress == 0

    @pytest.mark.parametrize("filled, expected", [(0, 0), (1, 25), (2, 50), (3, 75), (4, 100)])
    def test_payment_progress(self, registry, filled, expected):
        """Payment Information tiene 4 requeridos."""
        state = select_form(AppState(), "Payment Information", registry)
        for fld in state.fields[:filled]:
            state = set_field_value(state, fld.name, "x")
        assert state.progress == expected

    def test_rounds_half_up(self, eight_required_registry):
        """1 de 8 = 12.5% -> 13."""
        state = select_form(AppState(), "Eight", eight_required_registry)
        state = set_field_value(state, "f0", "x")
        assert state.progress == 13

    def test_thirds(self):
        registry = SchemaRegistry.from_mapping({"T": {"fields": [
            {"name": n, "label": n, "required": True} for n in ("a", "b", "c")
        ]}})
        state = select_form(AppState(), "T", registry)
        state = set_field_value(state, "a", "1")
        assert state.progress == 33
        state = set_field_value(state, "b", "1")
        assert state.progress == 67

    def test_optional_fields_do_not_count(self, user_form):
        state = set_field_value(user_form, "age", "36")
        assert state.progress == 0

    def test_zero_string_counts_as_filled(self, user_form):
        """"0" es texto no vacío: cuenta como completo."""
        state = set_field_value(user_form, "firstName", "0")
        assert state.progress == 50

    def test_clearing_a_value_reduces_progress(self, user_form):
        state = _fill(user_form, firstName="Ada", lastName="Lovelace")
        assert state.progress == 100
        state = set_field_value(state, "lastName", "")
        assert state.progress == 50

    def test_compute_progress_function(self, registry):
        fields = registry.lookup("Address Information")
        assert compute_progress(fields, {"street": "a", "zipCode": "1"}) == 33
        assert compute_progress((), {"street": "a"}) == 0


class TestSelectForm:
    """Tests para select_form."""

    def test_loads_fields(self, user_form):
        assert user_form.selected_form == "User Information"
        assert [f.name for f in user_form.fields] == ["firstName", "lastName", "age"]
        assert user_form.answers == {}
        assert user_form.errors == {}
        assert user_form.selection_error == ""

    def test_resets_answers_and_errors(self, registry, user_form):
        state = set_field_value(user_form, "firstName", "Ada")
        state = validate_and_submit(state).state
        assert state.errors

        state = select_form(state, "Address Information", registry)
        assert state.answers == {}
        assert state.errors == {}
        assert state.progress == 0

    def test_keeps_submissions(self, registry):
        state = AppState(submissions=SubmissionStore([{"a": "1"}]))
        state = select_form(state, "User Information", registry)
        assert len(state.submissions) == 1

    def test_unknown_name_surfaces_error(self, registry):
        """Un tipo desconocido deja el formulario vacío e informa el error."""
        state = select_form(AppState(), "Shipping Information", registry)
        assert state.selected_form == "Shipping Information"
        assert state.fields == ()
        assert state.has_form is False
        assert state.selection_error == 'Unknown form type: "Shipping Information".'

    def test_empty_registry_is_respected(self):
        """Un registro vacío explícito no se reemplaza por la tabla integrada."""
        state = select_form(AppState(), "User Information", SchemaRegistry())
        assert state.fields == ()
        assert state.selection_error == 'Unknown form type: "User Information".'

    def test_sentinel_is_not_an_error(self, registry, user_form):
        state = select_form(user_form, NOT_SELECTED, registry)
        assert state.fields == ()
        assert state.selection_error == ""

    def test_valid_selection_clears_previous_error(self, registry):
        state = select_form(AppState(), "Nope", registry)
        state = select_form(state, "User Information", registry)
        assert state.selection_error == ""

    def test_original_state_unchanged(self, registry):
        """Las transiciones no mutan el estado recibido."""
        initial = AppState()
        select_form(initial, "User Information", registry)
        assert initial.fields == ()


class TestSetFieldValue:
    """Tests para set_field_value."""

    def test_stores_text(self, user_form):
        state = set_field_value(user_form, "age", 36)
        assert state.answers["age"] == "36"

    def test_clears_only_that_error(self, user_form):
        """Editar un campo limpia solo su error."""
        failed = validate_and_submit(user_form).state
        assert failed.active_errors() == {
            "firstName": "First Name is required.",
            "lastName": "Last Name is required.",
        }

        state = set_field_value(failed, "firstName", "Ada")
        assert state.errors["firstName"] == ""
        assert state.errors["lastName"] == "Last Name is required."
        assert state.active_errors() == {"lastName": "Last Name is required."}

    def test_no_error_entry_created(self, user_form):
        state = set_field_value(user_form, "age", "3")
        assert "age" not in state.errors

    def test_does_not_mutate_previous_answers(self, user_form):
        first = set_field_value(user_form, "firstName", "Ada")
        set_field_value(first, "firstName", "Grace")
        assert first.answers == {"firstName": "Ada"}


class TestValidateAndSubmit:
    """Tests para validate_and_submit."""

    def test_missing_last_name(self, user_form):
        """Escenario: firstName=Ada, lastName vacío -> 50% y error."""
        state = _fill(user_form, firstName="Ada", lastName="")
        assert state.progress == 50

        result = validate_and_submit(state)
        assert result.ok is False
        assert result.errors == {"lastName": "Last Name is required."}
        assert result.record is None
        assert len(result.state.submissions) == 0
        assert result.state.answers == {"firstName": "Ada", "lastName": ""}
        assert result.state.selected_form == "User Information"

    def test_successful_submit(self, user_form):
        """Escenario: Ada Lovelace -> 100%, un envío, controlador vacío."""
        state = _fill(user_form, firstName="Ada", lastName="Lovelace")
        assert state.progress == 100

        result = validate_and_submit(state)
        assert result.ok is True
        assert result.record == {"firstName": "Ada", "lastName": "Lovelace"}

        new = result.state
        assert len(new.submissions) == 1
        assert new.submissions[0] == {"firstName": "Ada", "lastName": "Lovelace"}
        assert new.selected_form == NOT_SELECTED
        assert new.fields == ()
        assert new.answers == {}
        assert new.errors == {}
        assert new.progress == 0
        assert new.notice == MSG_SUBMITTED

    def test_errors_replace_previous(self, registry):
        """Los errores se recalculan completos, sin mezclar."""
        state = select_form(AppState(), "Payment Information", registry)
        state = validate_and_submit(state).state
        assert len(state.active_errors()) == 4

        state = _fill(state, cardNumber="4111", expiryDate="2030-01-01", cvv="123")
        result = validate_and_submit(state)
        assert result.errors == {"cardholderName": "Cardholder Name is required."}
        assert result.state.errors == {"cardholderName": "Cardholder Name is required."}

    def test_one_error_per_missing_field(self, registry):
        state = select_form(AppState(), "Address Information", registry)
        state = set_field_value(state, "zipCode", "73301")
        result = validate_and_submit(state)
        assert result.errors == {
            "street": "Street is required.",
            "city": "City is required.",
            "state": "State is required.",
        }
        assert result.state.answers == {"zipCode": "73301"}

    def test_store_grows_by_one(self, registry, user_form):
        state = _fill(user_form, firstName="Ada", lastName="Lovelace")
        state = validate_and_submit(state).state
        state = select_form(state, "User Information", registry)
        state = _fill(state, firstName="Alan", lastName="Turing", age="41")
        state = validate_and_submit(state).state
        assert len(state.submissions) == 2
        assert state.submissions[1] == {"firstName": "Alan", "lastName": "Turing", "age": "41"}

    def test_record_is_snapshot(self, user_form):
        state = _fill(user_form, firstName="Ada", lastName="Lovelace")
        result = validate_and_submit(state)
        result.record["firstName"] = "changed"
        assert result.state.submissions[0]["firstName"] == "Ada"


@pytest.fixture
def with_submissions(registry):
    state = AppState()
    for first, last in (("Ada", "Lovelace"), ("Alan", "Turing"), ("Grace", "Hopper")):
        state = select_form(state, "User Information", registry)
        state = _fill(state, firstName=first, lastName=last)
        state = validate_and_submit(state).state
    return state


class TestLoadForEdit:
    """Tests para load_for_edit."""

    def test_removes_record_and_restores_answers(self, with_submissions):
        state = load_for_edit(with_submissions, 1)
        assert state.answers == {"firstName": "Alan", "lastName": "Turing"}
        assert len(state.submissions) == 2
        assert [r["firstName"] for r in state.submissions] == ["Ada", "Grace"]

    def test_does_not_restore_form_by_default(self, with_submissions):
        """Solo se restauran valores: selección y campos no cambian."""
        state = load_for_edit(with_submissions, 0)
        assert state.selected_form == NOT_SELECTED
        assert state.fields == ()
        assert state.progress == 0

    def test_restore_form(self, registry, with_submissions):
        state = load_for_edit(with_submissions, 0, registry, restore_form=True)
        assert state.selected_form == "User Information"
        assert [f.name for f in state.fields] == ["firstName", "lastName", "age"]
        assert state.progress == 100

    def test_restore_form_keeps_matching_selection(self, registry, with_submissions):
        """Si el formulario activo ya contiene las claves, no se cambia."""
        state = select_form(with_submissions, "User Information", registry)
        state = load_for_edit(state, 2, registry, restore_form=True)
        assert state.selected_form == "User Information"
        assert state.answers == {"firstName": "Grace", "lastName": "Hopper"}

    def test_resubmit_after_edit(self, registry, with_submissions):
        state = load_for_edit(with_submissions, 0, registry, restore_form=True)
        state = set_field_value(state, "age", "36")
        result = validate_and_submit(state)
        assert result.ok
        assert len(result.state.submissions) == 3
        assert result.state.submissions[2] == {"firstName": "Ada", "lastName": "Lovelace", "age": "36"}

    def test_out_of_range(self, with_submissions):
        with pytest.raises(SubmissionIndexError):
            load_for_edit(with_submissions, 3)


class TestDeleteSubmission:
    """Tests para delete_submission."""

    def test_delete(self, with_submissions):
        state = delete_submission(with_submissions, 0)
        assert len(state.submissions) == 2
        assert state.submissions[0]["firstName"] == "Alan"
        assert state.notice == MSG_DELETED

    def test_out_of_range(self):
        with pytest.raises(SubmissionIndexError):
            delete_submission(AppState(), 0)


class TestInferFormType:
    """Tests para infer_form_type."""

    def test_matches_by_keys(self, registry):
        assert infer_form_type({"street": "a", "state": "Texas"}, registry) == "Address Information"

    def test_no_match(self, registry):
        assert infer_form_type({"firstName": "a", "city": "b"}, registry) is None

    def test_empty_record(self, registry):
        assert infer_form_type({}, registry) is None

    def test_empty_registry(self):
        assert infer_form_type({"firstName": "Ada"}, SchemaRegistry()) is None
