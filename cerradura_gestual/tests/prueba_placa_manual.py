import os
import time

from infraestructura.acelerometro import MuestreadorSerial
from infraestructura.botones import BotonesSerial
from infraestructura.indicador_led import IndicadorSerial
from infraestructura.placa_serial import PlacaSerial
from negocio import senales

PORT = os.getenv("PLACA_PORT", "COM5")   # cambia o setea env var
BAUD = int(os.getenv("PLACA_BAUD", "115200"))

def main():
    placa = PlacaSerial(puerto=PORT, baudrate=BAUD, timeout=1.0)
    indicador = IndicadorSerial(placa, brillo=50)

    # 1) Todas las señales de la cerradura
    for nombre in ("SENAL_RESET", "SENAL_INICIO_GRABACION", "SENAL_BLOQUEO_CONFIRMADO",
                   "SENAL_INICIO_VERIFICACION", "SENAL_EXITO", "SENAL_FALLO"):
        senal = getattr(senales, nombre)
        print(nombre, senal.color, senal.duracion_ms, "ms")
        indicador.mostrar(senal.color, senal.duracion_ms)
        time.sleep(0.5)

    # 2) Acelerómetro: mueve la placa
    muestreador = MuestreadorSerial(placa)
    for _ in range(20):
        print("x=%.2f y=%.2f z=%.2f" % (muestreador.leer_eje_x(), muestreador.leer_eje_y(), muestreador.leer_eje_z()))
        time.sleep(0.1)

    # 3) Botones: presiona izquierdo / derecho
    botones = BotonesSerial(placa)
    for _ in range(50):
        print("Botones (grabar, verificar):", botones.leer())
        time.sleep(0.1)

    placa.close()
    print("Listo.")

if __name__ == "__main__":
    main()
