from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

from .enums import EstadoCerradura, EventoEntrada
from .modelos import RegistroIntento, ResultadoComparacion
from .repositorios import RepoIntentos


@dataclass
class ServicioAuditoria:
    repo_intentos: RepoIntentos

    def registrar(
        self,
        *,
        evento: EventoEntrada,
        estado_resultante: EstadoCerradura,
        comparacion: ResultadoComparacion | None = None,
        timestamp: datetime | None = None,
    ) -> RegistroIntento:
        if timestamp is None:
            timestamp = datetime.now()

        r = RegistroIntento(
            id_registro=str(uuid4()),
            timestamp=timestamp,
            evento=evento,
            estado_resultante=estado_resultante,
            resultado=comparacion.resultado if comparacion else None,
            puntaje_normalizado=comparacion.puntaje_normalizado if comparacion else None,
            diferencia_total=comparacion.diferencia_total if comparacion else None,
        )
        self.repo_intentos.agregar(r)
        return r
