from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ValidacionError
from .modelos import ColorRGB


@dataclass
class Senal:
    color: ColorRGB
    duracion_ms: int

    def __post_init__(self) -> None:
        if not isinstance(self.duracion_ms, int) or self.duracion_ms < 0:
            raise ValidacionError("duracion_ms debe ser un entero >= 0.")


MAGENTA = ColorRGB(128, 0, 128)
VERDE = ColorRGB(0, 255, 0)
AZUL = ColorRGB(0, 0, 255)
AMARILLO = ColorRGB(255, 255, 0)
ROJO = ColorRGB(255, 0, 0)

# Tabla fija de señales del indicador
SENAL_RESET = Senal(MAGENTA, 1500)
SENAL_INICIO_GRABACION = Senal(VERDE, 100)
SENAL_BLOQUEO_CONFIRMADO = Senal(AZUL, 100)
SENAL_INICIO_VERIFICACION = Senal(AMARILLO, 100)
SENAL_EXITO = Senal(VERDE, 3000)
SENAL_FALLO = Senal(ROJO, 3000)
