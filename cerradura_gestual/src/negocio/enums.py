from __future__ import annotations

from enum import Enum


class EstadoCerradura(str, Enum):
    DESBLOQUEADA = "DESBLOQUEADA"
    BLOQUEADA = "BLOQUEADA"


class EventoEntrada(str, Enum):
    RESET = "RESET"
    GRABAR = "GRABAR"
    VERIFICAR = "VERIFICAR"
    NINGUNO = "NINGUNO"


class ResultadoVerificacion(str, Enum):
    EXITO = "EXITO"
    FALLO = "FALLO"
