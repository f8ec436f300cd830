from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from negocio.exceptions import IntegracionHardwareError, ValidacionError
from negocio.modelos import CANTIDAD_MUESTRAS


class IMuestreadorAceleracion(ABC):
    # Contrato de lectura del acelerómetro: cada llamada es una muestra nueva

    @abstractmethod
    def leer_eje_x(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def leer_eje_y(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def leer_eje_z(self) -> float:
        raise NotImplementedError


class MuestreadorSimulado(IMuestreadorAceleracion):
    """
    Uso si no hay placa.

    Con `muestras` reproduce esa lista (x, y, z) en ciclo, un cursor por eje.
    Sin `muestras` sintetiza un gesto repetible de `periodo` muestras con ruido
    gaussiano, para que grabar y verificar "el mismo gesto" funcione en consola.
    """

    def __init__(
        self,
        muestras: Optional[Sequence[Tuple[float, float, float]]] = None,
        *,
        ruido: float = 0.3,
        periodo: int = CANTIDAD_MUESTRAS,
        semilla: Optional[int] = None,
    ) -> None:
        if muestras is not None and len(muestras) == 0:
            raise ValidacionError("MuestreadorSimulado requiere al menos una muestra.")
        if ruido < 0:
            raise ValidacionError("ruido debe ser >= 0")
        if periodo <= 0:
            raise ValidacionError("periodo debe ser > 0")

        self._muestras: Optional[List[Tuple[float, float, float]]] = list(muestras) if muestras is not None else None
        self.ruido = ruido
        self.periodo = periodo
        self._rng = np.random.default_rng(semilla)
        self._cursor: Dict[int, int] = {0: 0, 1: 0, 2: 0}

    def _gesto(self, eje: int, k: int) -> float:
        fase = 2.0 * np.pi * (k % self.periodo) / self.periodo
        if eje == 0:
            base = 6.0 * np.sin(fase)
        elif eje == 1:
            base = 4.0 * np.cos(2.0 * fase)
        else:
            base = 9.8 + 2.0 * np.sin(3.0 * fase)
        return float(base + self._rng.normal(0.0, self.ruido))

    def _siguiente(self, eje: int) -> float:
        k = self._cursor[eje]
        self._cursor[eje] = k + 1
        if self._muestras is None:
            return self._gesto(eje, k)
        return float(self._muestras[k % len(self._muestras)][eje])

    def leer_eje_x(self) -> float:
        return self._siguiente(0)

    def leer_eje_y(self) -> float:
        return self._siguiente(1)

    def leer_eje_z(self) -> float:
        return self._siguiente(2)


class MuestreadorSerial(IMuestreadorAceleracion):
    """Acelerómetro real de la placa: un comando por eje, una línea float por respuesta."""

    def __init__(self, placa) -> None:
        self._placa = placa

    def _leer(self, comando: bytes) -> float:
        linea = self._placa.consultar(comando)
        try:
            return float(linea)
        except ValueError as ex:
            raise IntegracionHardwareError(f"Lectura de acelerómetro inválida para {comando!r}: {linea!r}") from ex

    def leer_eje_x(self) -> float:
        return self._leer(self._placa.CMD_EJE_X)

    def leer_eje_y(self) -> float:
        return self._leer(self._placa.CMD_EJE_Y)

    def leer_eje_z(self) -> float:
        return self._leer(self._placa.CMD_EJE_Z)
