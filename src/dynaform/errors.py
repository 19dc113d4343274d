"""
Excepciones de dynaform.

La falta de un campo requerido NO es una excepción: validate_and_submit
retorna un SubmitResult con el mapa de errores.
"""


class DynaformError(Exception):
    """Error base de la aplicación."""


class UnknownFormTypeError(DynaformError, KeyError):
    """Tipo de formulario inexistente en el registro."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Unknown form type: "{name}".')

    def __str__(self) -> str:
        return self.args[0]


class SchemaLoadError(DynaformError):
    """Archivo de esquemas ilegible o con forma inválida."""


class SubmissionIndexError(DynaformError, IndexError):
    """Índice fuera de rango al editar o eliminar un envío."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(
            f"Submission index {index} out of range (store has {length} entries)"
        )
