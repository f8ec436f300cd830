from __future__ import annotations

from time import sleep

from negocio.exceptions import IntegracionHardwareError


class PlacaSerial:
    """
    Enlace serial (pyserial) con la placa: acelerómetro, pixel RGB y 2 botones.

    Protocolo (comando de 1 byte ASCII, respuestas en una línea ASCII):
      - 'X' / 'Y' / 'Z'  -> aceleración instantánea del eje (float)
      - 'B'              -> niveles crudos de los botones "izq,der" (0/1)
      - 'P' r g b        -> pixel a color (3 bytes 0..255), sin respuesta
      - 'C'              -> apaga los pixeles, sin respuesta
      - 'S' n            -> brillo de los pixeles (1 byte 0..255), sin respuesta
    """

    CMD_EJE_X = b"X"
    CMD_EJE_Y = b"Y"
    CMD_EJE_Z = b"Z"
    CMD_BOTONES = b"B"
    CMD_PIXEL = b"P"
    CMD_LIMPIAR = b"C"
    CMD_BRILLO = b"S"

    def __init__(self, *, puerto: str, baudrate: int = 115200, timeout: float = 1.0) -> None:
        try:
            import serial  # type: ignore
        except Exception as ex:
            raise IntegracionHardwareError(f"pyserial no disponible: {ex}")

        try:
            self._serial = serial.Serial(port=puerto, baudrate=baudrate, timeout=timeout)
        except Exception as ex:
            raise IntegracionHardwareError(f"No se pudo abrir puerto {puerto}: {ex}")

        self.puerto = puerto

        # La placa se reinicia al abrir el puerto
        sleep(2.0)
        self.enviar(self.CMD_LIMPIAR)

    def enviar(self, paquete: bytes) -> None:
        try:
            self._serial.write(paquete)
            self._serial.flush()
        except Exception as ex:
            raise IntegracionHardwareError(f"Fallo enviando datos a la placa: {ex}")

    def consultar(self, comando: bytes) -> str:
        self.enviar(comando)
        try:
            crudo = self._serial.readline()
        except Exception as ex:
            raise IntegracionHardwareError(f"Fallo leyendo respuesta de la placa: {ex}")

        linea = crudo.decode("ascii", "ignore").strip() if isinstance(crudo, bytes) else str(crudo).strip()
        if not linea:
            raise IntegracionHardwareError(f"La placa no respondió al comando {comando!r} (timeout).")
        return linea

    def close(self) -> None:
        # Apagar pixeles al cerrar, para que no se quede el LED prendido
        try:
            self.enviar(self.CMD_LIMPIAR)
        except IntegracionHardwareError:
            pass
        try:
            self._serial.close()
        except Exception:
            pass
