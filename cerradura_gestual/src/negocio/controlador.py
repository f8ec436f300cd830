from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from infraestructura.botones import IEntradaBotones
from infraestructura.indicador_led import IIndicador

from .captura import CapturaMovimiento
from .comparador import ComparadorMovimientos
from .enums import EstadoCerradura, EventoEntrada
from .exceptions import ValidacionError
from .modelos import ResultadoComparacion, Traza
from .senales import (
    SENAL_BLOQUEO_CONFIRMADO,
    SENAL_EXITO,
    SENAL_FALLO,
    SENAL_INICIO_GRABACION,
    SENAL_INICIO_VERIFICACION,
    SENAL_RESET,
    Senal,
)
from .servicio_auditoria import ServicioAuditoria


@dataclass
class ControladorCerradura:
    """
    Máquina de estados de la cerradura.

    Estados DESBLOQUEADA (inicial) y BLOQUEADA. Único dueño de la traza llave:
    solo la reemplaza un evento GRABAR. Un intento fallido no cambia el estado.
    """

    captura: CapturaMovimiento
    comparador: ComparadorMovimientos
    indicador: IIndicador
    servicio_auditoria: Optional[ServicioAuditoria] = None
    debug: bool = False

    estado: EstadoCerradura = EstadoCerradura.DESBLOQUEADA
    traza_llave: Optional[Traza] = field(default=None, repr=False)

    @staticmethod
    def derivar_evento(boton_grabar: bool, boton_verificar: bool) -> EventoEntrada:
        # Ambos botones tienen prioridad sobre cualquiera solo
        if boton_grabar and boton_verificar:
            return EventoEntrada.RESET
        if boton_grabar:
            return EventoEntrada.GRABAR
        if boton_verificar:
            return EventoEntrada.VERIFICAR
        return EventoEntrada.NINGUNO

    def ejecutar_ciclo(self, botones: IEntradaBotones) -> Optional[ResultadoComparacion]:
        boton_grabar, boton_verificar = botones.leer()
        return self.procesar_entradas(boton_grabar, boton_verificar)

    def procesar_entradas(self, boton_grabar: bool, boton_verificar: bool) -> Optional[ResultadoComparacion]:
        return self.procesar(self.derivar_evento(boton_grabar, boton_verificar))

    def procesar(self, evento: EventoEntrada) -> Optional[ResultadoComparacion]:
        if evento == EventoEntrada.RESET:
            self.reiniciar()
        elif evento == EventoEntrada.GRABAR:
            self.grabar()
        elif evento == EventoEntrada.VERIFICAR and self.estado == EstadoCerradura.BLOQUEADA:
            return self.verificar()
        return None

    def reiniciar(self) -> None:
        self.estado = EstadoCerradura.DESBLOQUEADA
        self._senalizar(SENAL_RESET)
        self._auditar(EventoEntrada.RESET)

    def grabar(self) -> Traza:
        self._senalizar(SENAL_INICIO_GRABACION)
        self.traza_llave = self.captura.capturar()
        self.estado = EstadoCerradura.BLOQUEADA
        self._senalizar(SENAL_BLOQUEO_CONFIRMADO)
        self._auditar(EventoEntrada.GRABAR)
        return self.traza_llave

    def verificar(self) -> ResultadoComparacion:
        if self.estado != EstadoCerradura.BLOQUEADA or self.traza_llave is None:
            raise ValidacionError("verificar() solo aplica con la cerradura bloqueada y una llave grabada.")

        self._senalizar(SENAL_INICIO_VERIFICACION)
        prueba = self.captura.capturar()
        comparacion = self.comparador.comparar(prueba, self.traza_llave)

        if self.debug:
            print(
                f"[DEBUG] diferencia_total={comparacion.diferencia_total:.3f} "
                f"puntaje_normalizado={comparacion.puntaje_normalizado:.3f}"
            )

        self._senalizar(SENAL_EXITO if comparacion.exito else SENAL_FALLO)
        self._auditar(EventoEntrada.VERIFICAR, comparacion)
        return comparacion

    def _senalizar(self, senal: Senal) -> None:
        self.indicador.mostrar(senal.color, senal.duracion_ms)

    def _auditar(self, evento: EventoEntrada, comparacion: Optional[ResultadoComparacion] = None) -> None:
        if self.servicio_auditoria is None:
            return
        self.servicio_auditoria.registrar(
            evento=evento,
            estado_resultante=self.estado,
            comparacion=comparacion,
        )
