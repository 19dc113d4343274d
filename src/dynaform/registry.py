"""
Registro de esquemas de formulario.

Mapeo estático nombre -> esquema, fijo durante la ejecución. La tabla
integrada reemplaza provisoriamente a una API real; un archivo JSON con
la misma forma puede sustituirla:

    { "<tipo>": { "fields": [ {name, type, label, required, options?} ] } }
"""

import json
import logging
from pathlib import Path
from typing import Iterator, Optional

from pydantic import ValidationError

from dynaform.config import FieldDescriptor, FormSchema
from dynaform.errors import SchemaLoadError, UnknownFormTypeError

logger = logging.getLogger(__name__)


# Respuesta simulada de la API
DEFAULT_SCHEMAS: dict = {
    "User Information": {
        "fields": [
            {"name": "firstName", "type": "text", "label": "First Name", "required": True},
            {"name": "lastName", "type": "text", "label": "Last Name", "required": True},
            {"name": "age", "type": "number", "label": "Age", "required": False},
        ],
    },
    "Address Information": {
        "fields": [
            {"name": "street", "type": "text", "label": "Street", "required": True},
            {"name": "city", "type": "text", "label": "City", "required": True},
            {
                "name": "state",
                "type": "dropdown",
                "label": "State",
                "options": ["California", "Texas", "New York"],
                "required": True,
            },
            {"name": "zipCode", "type": "text", "label": "Zip Code", "required": False},
        ],
    },
    "Payment Information": {
        "fields": [
            {"name": "cardNumber", "type": "text", "label": "Card Number", "required": True},
            {"name": "expiryDate", "type": "date", "label": "Expiry Date", "required": True},
            {"name": "cvv", "type": "password", "label": "CVV", "required": True},
            {"name": "cardholderName", "type": "text", "label": "Cardholder Name", "required": True},
        ],
    },
}


class SchemaRegistry:
    """Registro de solo lectura de esquemas, en orden de definición."""

    def __init__(self, schemas: Optional[list[FormSchema]] = None):
        self._schemas: dict[str, FormSchema] = {}
        for schema in schemas or []:
            if schema.name in self._schemas:
                raise SchemaLoadError(f"Duplicate form type '{schema.name}'")
            self._schemas[schema.name] = schema

    # ========================================================================
    # Construcción
    # ========================================================================

    @classmethod
    def from_mapping(cls, data: dict) -> "SchemaRegistry":
        """Construye el registro desde la forma de contrato."""
        if not isinstance(data, dict):
            raise SchemaLoadError("Schema table must be an object keyed by form type")

        schemas = []
        for name, payload in data.items():
            if not isinstance(payload, dict) or not isinstance(payload.get("fields"), list):
                raise SchemaLoadError(f"Form type '{name}' must have a 'fields' list")
            try:
                schemas.append(FormSchema.from_contract(name, payload))
            except ValidationError as e:
                raise SchemaLoadError(f"Invalid schema for '{name}': {e}") from e
        return cls(schemas)

    @classmethod
    def from_json_file(cls, path: Path) -> "SchemaRegistry":
        """Lee un archivo JSON con la forma de contrato."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise SchemaLoadError(f"Cannot read schema file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"Schema file {path} is not valid JSON: {e}") from e

        registry = cls.from_mapping(data)
        logger.info("Loaded %d form types from %s", len(registry), path)
        return registry

    @classmethod
    def default(cls) -> "SchemaRegistry":
        """Registro con la tabla integrada."""
        return cls.from_mapping(DEFAULT_SCHEMAS)

    # ========================================================================
    # Consultas
    # ========================================================================

    def lookup(self, name: str) -> tuple[FieldDescriptor, ...]:
        """
        Campos del tipo de formulario.

        Un nombre desconocido retorna una tupla vacía, sin error.
        """
        schema = self._schemas.get(name)
        return schema.fields if schema else ()

    def get_schema(self, name: str) -> FormSchema:
        """Variante estricta de lookup()."""
        try:
            return self._schemas[name]
        except KeyError:
            raise UnknownFormTypeError(name) from None

    def names(self) -> list[str]:
        return list(self._schemas)

    def to_mapping(self) -> dict:
        return {name: schema.to_contract() for name, schema in self._schemas.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[FormSchema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)


_registry: Optional[SchemaRegistry] = None


def get_registry() -> SchemaRegistry:
    """Registro global (tabla integrada salvo que se haya configurado otro)."""
    global _registry
    if _registry is None:
        _registry = SchemaRegistry.default()
    return _registry


def set_registry(registry: Optional[SchemaRegistry]) -> None:
    """Reemplaza el registro global; None vuelve a la tabla integrada."""
    global _registry
    _registry = registry
