from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from time import sleep
from typing import Callable

from negocio.exceptions import ValidacionError
from negocio.modelos import ColorRGB


class IIndicador(ABC):
    """Contrato del indicador: muestra un color durante un tiempo (bloqueante) y apaga."""

    @abstractmethod
    def mostrar(self, color: ColorRGB, duracion_ms: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def apagar(self) -> None:
        raise NotImplementedError


@dataclass
class IndicadorSimulado(IIndicador):
    """Simula el pixel RGB en consola"""

    dormir: Callable[[float], None] = field(default=sleep, repr=False)

    def mostrar(self, color: ColorRGB, duracion_ms: int) -> None:
        print(f"[INDICADOR] color=({color.r},{color.g},{color.b}) por {duracion_ms} ms (simulado)")
        self.dormir(duracion_ms / 1000.0)
        self.apagar()

    def apagar(self) -> None:
        pass


class IndicadorSerial(IIndicador):
    """
    Pixel RGB real de la placa, vía PlacaSerial.

    La duración se cumple en el host: se enciende el pixel, se bloquea y se limpia.
    """

    def __init__(self, placa, *, brillo: int = 50, dormir: Callable[[float], None] = sleep) -> None:
        if not (0 <= brillo <= 255):
            raise ValidacionError("Brillo inválido (debe estar entre 0 y 255).")
        self._placa = placa
        self._dormir = dormir
        self._placa.enviar(placa.CMD_BRILLO + bytes([brillo]))
        self.apagar()

    def mostrar(self, color: ColorRGB, duracion_ms: int) -> None:
        self._placa.enviar(self._placa.CMD_PIXEL + color.como_bytes())
        self._dormir(duracion_ms / 1000.0)
        self.apagar()

    def apagar(self) -> None:
        self._placa.enviar(self._placa.CMD_LIMPIAR)


class NullIndicador(IIndicador):
    def mostrar(self, color: ColorRGB, duracion_ms: int) -> None:
        pass

    def apagar(self) -> None:
        pass
