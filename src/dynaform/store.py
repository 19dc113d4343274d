"""
Almacén de envíos de la sesión.

Secuencia ordenada e inmutable de registros: cada operación retorna un
almacén nuevo. Los registros son copias por valor del mapa de respuestas
al momento del envío y pueden tener claves distintas entre sí.
"""

from typing import Iterator, Optional

from dynaform.errors import SubmissionIndexError

SubmissionRecord = dict[str, str]


class SubmissionStore:
    """Lista de envíos (append / load_for_edit / delete)."""

    __slots__ = ("_records",)

    def __init__(self, records: Optional[list[SubmissionRecord]] = None):
        self._records: tuple[SubmissionRecord, ...] = tuple(dict(r) for r in records or [])

    def _check_index(self, index: int) -> None:
        # Índices negativos tampoco son válidos
        if not 0 <= index < len(self._records):
            raise SubmissionIndexError(index, len(self._records))

    def append(self, record: SubmissionRecord) -> "SubmissionStore":
        """Agrega una copia del registro al final."""
        return SubmissionStore([*self._records, record])

    def load_for_edit(self, index: int) -> tuple[SubmissionRecord, "SubmissionStore"]:
        """
        Extrae el registro para volver a editarlo.

        Returns:
            (registro, almacén sin ese registro). Los índices siguientes
            se corren una posición.
        """
        self._check_index(index)
        record = dict(self._records[index])
        return record, self.delete(index)

    def delete(self, index: int) -> "SubmissionStore":
        """Elimina el registro en index, sin posibilidad de deshacer."""
        self._check_index(index)
        return SubmissionStore([r for i, r in enumerate(self._records) if i != index])

    def columns(self) -> list[str]:
        """Unión de claves de todos los registros, en orden de aparición."""
        cols: list[str] = []
        for record in self._records:
            for key in record:
                if key not in cols:
                    cols.append(key)
        return cols

    def rows(self) -> list[list[str]]:
        """Valores por fila alineados a columns(); faltantes como ""."""
        cols = self.columns()
        return [[record.get(c, "") for c in cols] for record in self._records]

    def __getitem__(self, index: int) -> SubmissionRecord:
        self._check_index(index)
        return dict(self._records[index])

    def __iter__(self) -> Iterator[SubmissionRecord]:
        return (dict(r) for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SubmissionStore):
            return self._records == other._records
        return NotImplemented

    def __repr__(self) -> str:
        return f"SubmissionStore({list(self._records)!r})"
