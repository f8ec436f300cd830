from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .configuracion import ParametrosComparacion
from .exceptions import ValidacionError
from .modelos import ResultadoComparacion, Traza


def ventana_suavizado(i: int, n: int) -> range:
    """
    Índices que promedia el suavizado en la posición i de una traza de largo n.

    En los bordes la ventana es unilateral (3 muestras en 0 y n-1, 4 en 1 y
    n-2); en el resto es centrada de 5 muestras.
    """
    if n < 5:
        raise ValidacionError(f"El suavizado requiere al menos 5 muestras (n={n}).")
    if not (0 <= i < n):
        raise ValidacionError(f"Índice fuera de rango: {i} (n={n}).")

    if i == 0:
        return range(0, 3)
    if i == 1:
        return range(0, 4)
    if i == n - 2:
        return range(n - 4, n)
    if i == n - 1:
        return range(n - 3, n)
    return range(i - 2, i + 3)


def suavizar(canal: Sequence[float]) -> np.ndarray:
    datos = np.asarray(canal, dtype=float)
    n = len(datos)
    suavizado = np.empty(n, dtype=float)
    for i in range(n):
        ventana = ventana_suavizado(i, n)
        suavizado[i] = datos[ventana.start:ventana.stop].mean()
    return suavizado


def distancias_combinadas(prueba: Traza, llave: Traza) -> np.ndarray:
    # Distancia L1 entre los valores suavizados de los tres ejes, índice a índice
    if len(prueba) != len(llave):
        raise ValidacionError(
            f"Las trazas deben tener la misma longitud (prueba={len(prueba)}, llave={len(llave)})."
        )
    distancias = np.zeros(len(prueba), dtype=float)
    for canal_prueba, canal_llave in zip(prueba.canales, llave.canales):
        distancias += np.abs(suavizar(canal_prueba) - suavizar(canal_llave))
    return distancias


@dataclass
class ComparadorMovimientos:
    parametros: ParametrosComparacion = field(default_factory=ParametrosComparacion)

    def puntaje_bruto(self, distancias: np.ndarray) -> float:
        p = self.parametros
        credito = np.where(
            distancias > p.tolerancia_alta,
            0.0,
            np.where(distancias <= p.tolerancia_baja, 1.0, 0.5),
        )
        return float(credito.sum())

    def es_exito(self, puntaje_normalizado: float, diferencia_total: float) -> bool:
        # Doble umbral: tasa de coincidencia y magnitud acumulada
        p = self.parametros
        return diferencia_total < p.umbral_diferencia_total and puntaje_normalizado > p.umbral_exito

    def comparar(self, prueba: Traza, llave: Traza) -> ResultadoComparacion:
        distancias = distancias_combinadas(prueba, llave)
        diferencia_total = float(distancias.sum())
        puntaje_normalizado = self.puntaje_bruto(distancias) / len(distancias)

        return ResultadoComparacion(
            puntaje_normalizado=puntaje_normalizado,
            diferencia_total=diferencia_total,
            exito=self.es_exito(puntaje_normalizado, diferencia_total),
        )
