"""Modelos Pydantic para configuración y definición de esquemas."""

import os
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FieldType(str, Enum):
    """Tipos de campo soportados por el renderizador."""
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    PASSWORD = "password"
    DROPDOWN = "dropdown"


class ThemeName(str, Enum):
    """Temas de color disponibles."""
    DEFAULT = "default"
    MONOKAI = "monokai"
    NORD = "nord"
    MINIMAL = "minimal"


# ============================================================================
# Esquemas de formulario
# ============================================================================

class FieldDescriptor(BaseModel):
    """
    Definición inmutable de un campo.

    Los valores ingresados son siempre texto, sin importar el tipo:
    el tipo solo decide qué control se muestra.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Clave única dentro del esquema")
    type: FieldType = FieldType.TEXT
    label: str = Field(..., min_length=1, description="Texto visible")
    required: bool = False
    options: tuple[str, ...] = Field(default=(), description="Solo para dropdown")

    @model_validator(mode="after")
    def _check_options(self) -> "FieldDescriptor":
        if self.type == FieldType.DROPDOWN and not self.options:
            raise ValueError(f"Dropdown field '{self.name}' needs at least one option")
        if self.type != FieldType.DROPDOWN and self.options:
            raise ValueError(f"Field '{self.name}' of type {self.type.value} cannot have options")
        return self

    def to_contract(self) -> dict:
        """Serializa con la forma {name, type, label, required, options?}."""
        data = {
            "name": self.name,
            "type": self.type.value,
            "label": self.label,
            "required": self.required,
        }
        if self.type == FieldType.DROPDOWN:
            data["options"] = list(self.options)
        return data


class FormSchema(BaseModel):
    """Esquema nombrado: secuencia ordenada de campos."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[FieldDescriptor, ...] = ()

    @field_validator("fields")
    @classmethod
    def _unique_names(cls, fields: tuple[FieldDescriptor, ...]) -> tuple[FieldDescriptor, ...]:
        seen = set()
        for fld in fields:
            if fld.name in seen:
                raise ValueError(f"Duplicate field name '{fld.name}'")
            seen.add(fld.name)
        return fields

    @property
    def required_fields(self) -> tuple[FieldDescriptor, ...]:
        return tuple(f for f in self.fields if f.required)

    @classmethod
    def from_contract(cls, name: str, payload: dict) -> "FormSchema":
        """Construye desde {"fields": [...]} (forma de la respuesta de la API)."""
        return cls(name=name, fields=tuple(payload.get("fields", [])))

    def to_contract(self) -> dict:
        return {"fields": [f.to_contract() for f in self.fields]}


# ============================================================================
# Configuración de la aplicación
# ============================================================================

ENV_THEME = "DYNAFORM_THEME"
ENV_SCHEMA_FILE = "DYNAFORM_SCHEMA_FILE"
ENV_ASCII = "DYNAFORM_ASCII"


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


class AppSettings(BaseModel):
    """Configuración de ejecución (opciones CLI con fallback a entorno)."""

    theme: ThemeName = ThemeName.DEFAULT
    schema_file: Optional[Path] = None
    ascii_icons: bool = False
    verbose: bool = False

    @classmethod
    def from_env(
        cls,
        theme: Optional[str] = None,
        schema_file: Optional[Path] = None,
        ascii_icons: Optional[bool] = None,
        verbose: bool = False,
    ) -> "AppSettings":
        """
        Crea la configuración combinando opciones explícitas y entorno.

        Los argumentos en None se toman de DYNAFORM_THEME,
        DYNAFORM_SCHEMA_FILE y DYNAFORM_ASCII.
        """
        if theme is None:
            theme = os.environ.get(ENV_THEME) or ThemeName.DEFAULT.value
        if schema_file is None and os.environ.get(ENV_SCHEMA_FILE):
            schema_file = Path(os.environ[ENV_SCHEMA_FILE])
        if ascii_icons is None:
            ascii_icons = _env_flag(os.environ.get(ENV_ASCII))

        return cls(
            theme=theme,
            schema_file=schema_file,
            ascii_icons=ascii_icons,
            verbose=verbose,
        )
