from __future__ import annotations

from dataclasses import dataclass, field
from time import sleep
from typing import Callable, List

from infraestructura.acelerometro import IMuestreadorAceleracion

from .configuracion import ParametrosCaptura
from .modelos import Traza


@dataclass
class CapturaMovimiento:
    """
    Construye una Traza muestreando el acelerómetro a intervalo fijo.

    Bloquea al llamador durante toda la captura (50 x 100 ms por defecto).
    Sin reintentos: un fallo del muestreador se propaga.
    """

    muestreador: IMuestreadorAceleracion
    parametros: ParametrosCaptura = field(default_factory=ParametrosCaptura)
    dormir: Callable[[float], None] = field(default=sleep, repr=False)

    def capturar(self) -> Traza:
        xs: List[float] = []
        ys: List[float] = []
        zs: List[float] = []

        for _ in range(self.parametros.cantidad_muestras):
            xs.append(self.muestreador.leer_eje_x())
            ys.append(self.muestreador.leer_eje_y())
            zs.append(self.muestreador.leer_eje_z())
            self.dormir(self.parametros.intervalo_s)

        return Traza(x=xs, y=ys, z=zs)
