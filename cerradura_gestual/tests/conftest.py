from __future__ import annotations

from typing import List, Tuple

import pytest

from infraestructura.acelerometro import MuestreadorSimulado
from infraestructura.indicador_led import IIndicador
from infraestructura.placa_serial import PlacaSerial
from negocio.captura import CapturaMovimiento
from negocio.comparador import ComparadorMovimientos
from negocio.controlador import ControladorCerradura
from negocio.modelos import ColorRGB, Traza
from negocio.repositorios import RepoIntentos
from negocio.servicio_auditoria import ServicioAuditoria


class IndicadorGrabador(IIndicador):
    """Registra cada señal en lugar de encender un LED."""

    def __init__(self) -> None:
        self.llamadas: List[Tuple[ColorRGB, int]] = []
        self.apagados = 0

    def mostrar(self, color: ColorRGB, duracion_ms: int) -> None:
        self.llamadas.append((color, duracion_ms))

    def apagar(self) -> None:
        self.apagados += 1


class PlacaFalsa(PlacaSerial):
    """PlacaSerial sin puerto: respuestas fijas por comando y registro de lo enviado."""

    def __init__(self, respuestas: dict[bytes, str] | None = None) -> None:
        self.respuestas = respuestas or {}
        self.enviados: List[bytes] = []
        self.cerrada = False

    def enviar(self, paquete: bytes) -> None:
        self.enviados.append(paquete)

    def consultar(self, comando: bytes) -> str:
        self.enviados.append(comando)
        return self.respuestas[comando]

    def close(self) -> None:
        self.cerrada = True


def muestras_de(*trazas: Traza) -> List[Tuple[float, float, float]]:
    return [t.muestra(i) for t in trazas for i in range(len(t))]


def sin_espera(_segundos: float) -> None:
    return None


@pytest.fixture
def indicador() -> IndicadorGrabador:
    return IndicadorGrabador()


@pytest.fixture
def repo_intentos() -> RepoIntentos:
    return RepoIntentos()


@pytest.fixture
def fabrica_controlador(indicador, repo_intentos):
    """Controlador cuyas capturas devuelven, en orden, las trazas dadas."""

    def _crear(*trazas: Traza, debug: bool = False) -> ControladorCerradura:
        muestreador = MuestreadorSimulado(muestras_de(*trazas))
        return ControladorCerradura(
            captura=CapturaMovimiento(muestreador=muestreador, dormir=sin_espera),
            comparador=ComparadorMovimientos(),
            indicador=indicador,
            servicio_auditoria=ServicioAuditoria(repo_intentos=repo_intentos),
            debug=debug,
        )

    return _crear
