from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Sequence, Tuple

from .enums import EstadoCerradura, EventoEntrada, ResultadoVerificacion
from .exceptions import ValidacionError

CANTIDAD_MUESTRAS = 50

# Requerimiento y validacion de rangos (int)

def _require_int_range(value: int, field_name: str, min_v: int, max_v: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not (min_v <= value <= max_v):
        raise ValidacionError(f"{field_name} debe estar entre {min_v} y {max_v}.")
    return value

# Canal numérico: solo floats, nunca vacío

def _require_canal(valores: Iterable[float], field_name: str) -> Tuple[float, ...]:
    try:
        canal = tuple(float(v) for v in valores)
    except (TypeError, ValueError) as ex:
        raise ValidacionError(f"Canal {field_name} debe contener solo números: {ex}") from ex
    if not canal:
        raise ValidacionError(f"Canal {field_name} no puede estar vacío.")
    return canal


@dataclass
class ColorRGB:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        self.r = _require_int_range(self.r, "Rojo", 0, 255)
        self.g = _require_int_range(self.g, "Verde", 0, 255)
        self.b = _require_int_range(self.b, "Azul", 0, 255)

    def como_bytes(self) -> bytes:
        return bytes([self.r, self.g, self.b])


@dataclass
class Traza:
    """
    Captura de aceleración en tres ejes.

    Los tres canales tienen la misma longitud y el índice i corresponde al
    mismo instante en x, y, z. Se compara por contenido.
    """

    x: Tuple[float, ...]
    y: Tuple[float, ...]
    z: Tuple[float, ...]

    def __post_init__(self) -> None:
        self.x = _require_canal(self.x, "x")
        self.y = _require_canal(self.y, "y")
        self.z = _require_canal(self.z, "z")
        if not (len(self.x) == len(self.y) == len(self.z)):
            raise ValidacionError(
                f"Los canales deben tener la misma longitud (x={len(self.x)}, y={len(self.y)}, z={len(self.z)})."
            )

    def __len__(self) -> int:
        return len(self.x)

    @property
    def canales(self) -> Tuple[Tuple[float, ...], Tuple[float, ...], Tuple[float, ...]]:
        return self.x, self.y, self.z

    def muestra(self, i: int) -> Tuple[float, float, float]:
        return self.x[i], self.y[i], self.z[i]

    @classmethod
    def desde_muestras(cls, muestras: Sequence[Tuple[float, float, float]]) -> "Traza":
        if not muestras:
            raise ValidacionError("Una traza necesita al menos una muestra.")
        if any(len(m) != 3 for m in muestras):
            raise ValidacionError("Cada muestra debe tener exactamente 3 ejes (x, y, z).")
        xs, ys, zs = zip(*muestras)
        return cls(x=xs, y=ys, z=zs)

    @classmethod
    def constante(cls, x: float, y: float, z: float, cantidad: int = CANTIDAD_MUESTRAS) -> "Traza":
        return cls(x=[x] * cantidad, y=[y] * cantidad, z=[z] * cantidad)


@dataclass
class ResultadoComparacion:
    puntaje_normalizado: float
    diferencia_total: float
    exito: bool

    @property
    def resultado(self) -> ResultadoVerificacion:
        return ResultadoVerificacion.EXITO if self.exito else ResultadoVerificacion.FALLO


@dataclass
class RegistroIntento:
    id_registro: str
    timestamp: datetime
    evento: EventoEntrada
    estado_resultante: EstadoCerradura
    resultado: Optional[ResultadoVerificacion] = None
    puntaje_normalizado: Optional[float] = None
    diferencia_total: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.id_registro, str) or not self.id_registro.strip():
            raise ValidacionError("ID Registro no puede estar vacío.")
        if self.evento == EventoEntrada.NINGUNO:
            raise ValidacionError("No se registran ciclos sin evento.")
