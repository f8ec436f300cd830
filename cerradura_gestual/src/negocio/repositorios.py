from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .enums import EventoEntrada
from .exceptions import RecursoNoEncontradoError
from .modelos import RegistroIntento


@dataclass
class RepoIntentos:
    # Solo en memoria: se pierde al apagar
    _data: Dict[str, RegistroIntento] = field(default_factory=dict)

    def agregar(self, r: RegistroIntento) -> None:
        self._data[r.id_registro] = r

    def obtener(self, id_registro: str) -> RegistroIntento:
        try:
            return self._data[id_registro]
        except KeyError as ex:
            raise RecursoNoEncontradoError(f"Registro no encontrado: {id_registro}") from ex

    def buscar(self, id_registro: str) -> Optional[RegistroIntento]:
        return self._data.get(id_registro)

    def listar(self) -> List[RegistroIntento]:
        return sorted(self._data.values(), key=lambda r: r.timestamp)

    def listar_por_evento(self, evento: EventoEntrada) -> List[RegistroIntento]:
        return [r for r in self.listar() if r.evento == evento]
