from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ValidacionError
from .modelos import CANTIDAD_MUESTRAS

# Umbrales calibrados para el acelerómetro de la placa (ruido y 100 ms de muestreo).
# En otro hardware se recalibran por variables de entorno.
TOLERANCIA_ALTA = 7.0
TOLERANCIA_BAJA = 4.0
UMBRAL_EXITO = 0.90
UMBRAL_DIFERENCIA_TOTAL = 110.0
INTERVALO_MUESTREO_S = 0.1


def _leer_float(nombre: str, defecto: float) -> float:
    crudo = os.getenv(nombre)
    if crudo is None or not crudo.strip():
        return defecto
    try:
        return float(crudo)
    except ValueError as ex:
        raise ValidacionError(f"{nombre} inválido (se esperaba un número): {crudo!r}") from ex


def _leer_int(nombre: str, defecto: int) -> int:
    crudo = os.getenv(nombre)
    if crudo is None or not crudo.strip():
        return defecto
    try:
        return int(crudo)
    except ValueError as ex:
        raise ValidacionError(f"{nombre} inválido (se esperaba un entero): {crudo!r}") from ex


@dataclass
class ParametrosCaptura:
    cantidad_muestras: int = CANTIDAD_MUESTRAS
    intervalo_s: float = INTERVALO_MUESTREO_S

    def __post_init__(self) -> None:
        # La ventana centrada de suavizado necesita 5 muestras
        if self.cantidad_muestras < 5:
            raise ValidacionError("cantidad_muestras debe ser >= 5.")
        if self.intervalo_s < 0:
            raise ValidacionError("intervalo_s debe ser >= 0.")


@dataclass
class ParametrosComparacion:
    tolerancia_baja: float = TOLERANCIA_BAJA
    tolerancia_alta: float = TOLERANCIA_ALTA
    umbral_exito: float = UMBRAL_EXITO
    umbral_diferencia_total: float = UMBRAL_DIFERENCIA_TOTAL

    def __post_init__(self) -> None:
        if self.tolerancia_baja < 0:
            raise ValidacionError("tolerancia_baja debe ser >= 0.")
        if self.tolerancia_alta < self.tolerancia_baja:
            raise ValidacionError("tolerancia_alta no puede ser menor que tolerancia_baja.")
        if not (0.0 <= self.umbral_exito <= 1.0):
            raise ValidacionError("umbral_exito debe estar entre 0 y 1.")
        if self.umbral_diferencia_total <= 0:
            raise ValidacionError("umbral_diferencia_total debe ser > 0.")


def cargar_parametros_captura() -> ParametrosCaptura:
    return ParametrosCaptura(
        cantidad_muestras=_leer_int("CAPTURA_MUESTRAS", CANTIDAD_MUESTRAS),
        intervalo_s=_leer_float("CAPTURA_INTERVALO_S", INTERVALO_MUESTREO_S),
    )


def cargar_parametros_comparacion() -> ParametrosComparacion:
    return ParametrosComparacion(
        tolerancia_baja=_leer_float("COMPARACION_TOLERANCIA_BAJA", TOLERANCIA_BAJA),
        tolerancia_alta=_leer_float("COMPARACION_TOLERANCIA_ALTA", TOLERANCIA_ALTA),
        umbral_exito=_leer_float("COMPARACION_UMBRAL_EXITO", UMBRAL_EXITO),
        umbral_diferencia_total=_leer_float("COMPARACION_UMBRAL_DIFERENCIA", UMBRAL_DIFERENCIA_TOTAL),
    )
