from __future__ import annotations

import os
from dataclasses import dataclass
from time import sleep
from typing import Callable, Optional

from infraestructura.acelerometro import IMuestreadorAceleracion, MuestreadorSerial, MuestreadorSimulado
from infraestructura.botones import BotonesConsola, BotonesSerial, IEntradaBotones
from infraestructura.indicador_led import IIndicador, IndicadorSerial, IndicadorSimulado
from infraestructura.placa_serial import PlacaSerial

from negocio.captura import CapturaMovimiento
from negocio.comparador import ComparadorMovimientos
from negocio.configuracion import cargar_parametros_captura, cargar_parametros_comparacion
from negocio.controlador import ControladorCerradura
from negocio.enums import EventoEntrada
from negocio.exceptions import DominioError, IntegracionHardwareError, ValidacionError
from negocio.modelos import CANTIDAD_MUESTRAS
from negocio.repositorios import RepoIntentos
from negocio.servicio_auditoria import ServicioAuditoria


@dataclass
class AppContext:
    placa: Optional[PlacaSerial]
    muestreador: IMuestreadorAceleracion
    indicador: IIndicador
    botones: IEntradaBotones
    repo_intentos: RepoIntentos
    controlador: ControladorCerradura

    def close(self) -> None:
        """Apaga el indicador y cierra el puerto serial si existe."""
        try:
            self.indicador.apagar()
        except DominioError:
            pass
        if self.placa is not None:
            self.placa.close()


# ------------------ Construcción de hardware ------------------

def construir_placa() -> Optional[PlacaSerial]:
    puerto = os.getenv("PLACA_PORT")
    baud = int(os.getenv("PLACA_BAUD", "115200"))

    if not puerto:
        print("[INFO] PLACA_PORT no configurado -> usando hardware simulado.")
        print("       Ejemplo PowerShell: $env:PLACA_PORT='COM5'  |  bash: export PLACA_PORT=/dev/ttyACM0")
        return None

    try:
        placa = PlacaSerial(puerto=puerto, baudrate=baud, timeout=1.0)
        print(f"[INFO] PlacaSerial activa en {puerto} (baud={baud}).")
        return placa
    except IntegracionHardwareError as ex:
        print(f"[AVISO] No se pudo abrir la placa en {puerto}: {ex}")
        print("[AVISO] Usando hardware simulado (acelerómetro, LED y botones por consola).")
        return None


def construir_muestreador(placa: Optional[PlacaSerial], *, periodo: int = CANTIDAD_MUESTRAS) -> IMuestreadorAceleracion:
    if placa is not None:
        return MuestreadorSerial(placa)

    ruido = float(os.getenv("SIM_RUIDO", "0.3"))
    if ruido < 0:
        raise ValidacionError("SIM_RUIDO inválido (debe ser >= 0).")
    # Un gesto simulado por captura: cada captura empieza al inicio del gesto
    return MuestreadorSimulado(ruido=ruido, periodo=periodo)


def construir_indicador(placa: Optional[PlacaSerial]) -> IIndicador:
    if placa is None:
        return IndicadorSimulado()

    try:
        brillo = int(os.getenv("PLACA_BRILLO", "50"))
    except ValueError as ex:
        raise ValidacionError(f"PLACA_BRILLO inválido (se esperaba un entero): {ex}") from ex
    return IndicadorSerial(placa, brillo=brillo)


def construir_botones(placa: Optional[PlacaSerial]) -> IEntradaBotones:
    if placa is None:
        return BotonesConsola()

    activo_bajo = os.getenv("BOTONES_ACTIVO_BAJO", "1") == "1"
    return BotonesSerial(placa, activo_bajo=activo_bajo)


def construir_app() -> AppContext:
    debug = os.getenv("DEBUG", "0") == "1"

    parametros_captura = cargar_parametros_captura()
    parametros_comparacion = cargar_parametros_comparacion()

    placa = construir_placa()
    try:
        muestreador = construir_muestreador(placa, periodo=parametros_captura.cantidad_muestras)
        indicador = construir_indicador(placa)
        botones = construir_botones(placa)
    except Exception:
        # La placa ya está abierta: cerrar puerto y apagar pixeles antes de propagar
        if placa is not None:
            placa.close()
        raise

    repo_intentos = RepoIntentos()
    controlador = ControladorCerradura(
        captura=CapturaMovimiento(muestreador=muestreador, parametros=parametros_captura),
        comparador=ComparadorMovimientos(parametros=parametros_comparacion),
        indicador=indicador,
        servicio_auditoria=ServicioAuditoria(repo_intentos=repo_intentos),
        debug=debug,
    )

    if debug:
        print(
            "[CFG] Cerradura configurada -> "
            f"muestras={parametros_captura.cantidad_muestras}, intervalo_s={parametros_captura.intervalo_s}, "
            f"tolerancias=({parametros_comparacion.tolerancia_baja}, {parametros_comparacion.tolerancia_alta}), "
            f"umbral_exito={parametros_comparacion.umbral_exito}, "
            f"umbral_diferencia={parametros_comparacion.umbral_diferencia_total}"
        )

    return AppContext(
        placa=placa,
        muestreador=muestreador,
        indicador=indicador,
        botones=botones,
        repo_intentos=repo_intentos,
        controlador=controlador,
    )


# ------------------ Bucle ------------------

def bucle_principal(
    ctx: AppContext,
    *,
    intervalo_s: float = 0.1,
    max_ciclos: Optional[int] = None,
    dormir: Callable[[float], None] = sleep,
) -> None:
    # Un ciclo de sondeo cada intervalo_s; captura e indicador bloquean el ciclo
    ciclos = 0
    while max_ciclos is None or ciclos < max_ciclos:
        ctx.controlador.ejecutar_ciclo(ctx.botones)
        dormir(intervalo_s)
        ciclos += 1


def imprimir_resumen(repo: RepoIntentos) -> None:
    regs = repo.listar()
    if not regs:
        print("No hay registros.")
        return
    for r in regs:
        linea = f"[{r.timestamp:%Y-%m-%d %H:%M:%S}] evento={r.evento.value} estado={r.estado_resultante.value}"
        if r.evento == EventoEntrada.VERIFICAR:
            linea += (
                f" resultado={r.resultado.value} puntaje={r.puntaje_normalizado:.2f}"
                f" diferencia={r.diferencia_total:.2f}"
            )
        print(linea)


def main() -> None:
    print("\n--- Cerradura Gestual ---")
    print("Izquierdo = grabar llave | Derecho = verificar | Ambos = reset")

    try:
        intervalo_s = float(os.getenv("BUCLE_INTERVALO_S", "0.1"))
        ctx = construir_app()
    except (DominioError, ValueError) as ex:
        print(f"[ERROR] Configuración inválida: {ex}")
        return

    try:
        bucle_principal(ctx, intervalo_s=intervalo_s)
    except (KeyboardInterrupt, EOFError):
        print("Saliendo...")
    except IntegracionHardwareError as ex:
        print(f"[ERROR] Fallo de hardware: {ex}")
    finally:
        ctx.close()
        print("\nResumen de eventos:")
        imprimir_resumen(ctx.repo_intentos)


if __name__ == "__main__":
    main()
