from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Tuple

from negocio.exceptions import IntegracionHardwareError


class IEntradaBotones(ABC):
    """Contrato de entrada: (boton_grabar, boton_verificar), True = presionado."""

    @abstractmethod
    def leer(self) -> Tuple[bool, bool]:
        raise NotImplementedError


@dataclass
class BotonesSimulados(IEntradaBotones):
    # Lecturas guionadas; agotadas, ningún botón presionado
    lecturas: List[Tuple[bool, bool]] = field(default_factory=list)

    def leer(self) -> Tuple[bool, bool]:
        if not self.lecturas:
            return False, False
        grabar, verificar = self.lecturas.pop(0)
        return bool(grabar), bool(verificar)


class BotonesConsola(IEntradaBotones):
    """
    Botones por teclado para probar sin placa.

      g = izquierdo (grabar), v = derecho (verificar), r = ambos (reset),
      Enter = ninguno, q = salir (EOFError, igual que Ctrl-D).
    """

    TECLAS = {
        "": (False, False),
        "g": (True, False),
        "v": (False, True),
        "r": (True, True),
    }

    def leer(self) -> Tuple[bool, bool]:
        while True:
            tecla = input("Botones [g=grabar, v=verificar, r=reset, Enter=nada, q=salir]: ").strip().lower()
            if tecla == "q":
                raise EOFError("Salida solicitada desde consola.")
            if tecla in self.TECLAS:
                return self.TECLAS[tecla]
            print("Opción inválida.")


class BotonesSerial(IEntradaBotones):
    """Botones físicos de la placa. Con `activo_bajo`, nivel 0 = presionado."""

    def __init__(self, placa, *, activo_bajo: bool = True) -> None:
        self._placa = placa
        self.activo_bajo = activo_bajo

    def _a_bool(self, nivel: str) -> bool:
        if nivel not in ("0", "1"):
            raise IntegracionHardwareError(f"Nivel de botón inválido: {nivel!r}")
        alto = nivel == "1"
        return not alto if self.activo_bajo else alto

    def leer(self) -> Tuple[bool, bool]:
        linea = self._placa.consultar(self._placa.CMD_BOTONES)
        partes = [p.strip() for p in linea.split(",")]
        if len(partes) != 2:
            raise IntegracionHardwareError(f"Respuesta de botones inválida: {linea!r}")
        return self._a_bool(partes[0]), self._a_bool(partes[1])
