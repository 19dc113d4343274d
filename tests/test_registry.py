"""
Tests para registry.py - Registro de esquemas.
"""

import json

import pytest

from dynaform.config import FieldType
from dynaform.errors import SchemaLoadError, UnknownFormTypeError
from dynaform.registry import (
    DEFAULT_SCHEMAS,
    SchemaRegistry,
    get_registry,
    set_registry,
)


class TestDefaultRegistry:
    """Tests para la tabla integrada."""

    def test_names_in_definition_order(self, registry):
        """Los tipos aparecen en el orden de definición."""
        assert registry.names() == [
            "User Information",
            "Address Information",
            "Payment Information",
        ]

    def test_lookup_user_information(self, registry):
        """User Information: firstName y lastName requeridos, age opcional numérico."""
        fields = registry.lookup("User Information")
        assert [f.name for f in fields] == ["firstName", "lastName", "age"]
        assert [f.required for f in fields] == [True, True, False]
        assert fields[2].type == FieldType.NUMBER

    def test_lookup_address_dropdown(self, registry):
        """El campo state es un dropdown con tres opciones."""
        state = registry.lookup("Address Information")[2]
        assert state.type == FieldType.DROPDOWN
        assert state.options == ("California", "Texas", "New York")
        assert state.required is True

    def test_payment_all_required(self, registry):
        """Payment Information: todos los campos requeridos."""
        fields = registry.lookup("Payment Information")
        assert all(f.required for f in fields)
        assert [f.type for f in fields] == [
            FieldType.TEXT, FieldType.DATE, FieldType.PASSWORD, FieldType.TEXT,
        ]

    def test_lookup_unknown_is_empty(self, registry):
        """Un nombre desconocido retorna una tupla vacía sin error."""
        assert registry.lookup("Shipping Information") == ()
        assert registry.lookup("") == ()

    def test_get_schema_unknown_raises(self, registry):
        """get_schema es estricto."""
        with pytest.raises(UnknownFormTypeError) as exc_info:
            registry.get_schema("Shipping Information")
        assert str(exc_info.value) == 'Unknown form type: "Shipping Information".'

    def test_contains_and_len(self, registry):
        assert "User Information" in registry
        assert "user information" not in registry
        assert len(registry) == 3

    def test_to_mapping_matches_contract(self, registry):
        """La tabla se vuelve a serializar con la misma forma."""
        assert registry.to_mapping() == DEFAULT_SCHEMAS


class TestFromMapping:
    """Tests para SchemaRegistry.from_mapping."""

    def test_not_a_dict(self):
        with pytest.raises(SchemaLoadError):
            SchemaRegistry.from_mapping([{"fields": []}])

    def test_missing_fields_list(self):
        with pytest.raises(SchemaLoadError, match="'fields' list"):
            SchemaRegistry.from_mapping({"Broken": {"items": []}})

    def test_invalid_field_wrapped(self):
        """Errores de pydantic se reportan como SchemaLoadError."""
        with pytest.raises(SchemaLoadError, match="Invalid schema for 'Broken'"):
            SchemaRegistry.from_mapping({
                "Broken": {"fields": [{"name": "s", "type": "dropdown", "label": "S"}]},
            })

    def test_empty_form_allowed(self):
        """Un tipo sin campos es válido (formulario inerte)."""
        registry = SchemaRegistry.from_mapping({"Empty": {"fields": []}})
        assert "Empty" in registry
        assert registry.lookup("Empty") == ()


class TestFromJsonFile:
    """Tests para SchemaRegistry.from_json_file."""

    def test_valid_file(self, tmp_path):
        path = tmp_path / "forms.json"
        path.write_text(json.dumps({
            "Feedback": {"fields": [
                {"name": "comment", "type": "text", "label": "Comment", "required": True},
            ]},
        }), encoding="utf-8")

        registry = SchemaRegistry.from_json_file(path)
        assert registry.names() == ["Feedback"]
        assert registry.lookup("Feedback")[0].label == "Comment"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "forms.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SchemaLoadError, match="not valid JSON"):
            SchemaRegistry.from_json_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaLoadError, match="Cannot read"):
            SchemaRegistry.from_json_file(tmp_path / "missing.json")


class TestGlobalRegistry:
    """Tests para get_registry / set_registry."""

    def test_default_global(self):
        assert get_registry().names()[0] == "User Information"

    def test_replace_and_reset(self):
        custom = SchemaRegistry.from_mapping({"Only": {"fields": []}})
        set_registry(custom)
        assert get_registry() is custom

        set_registry(None)
        assert "User Information" in get_registry()
