class DominioError(Exception):
    """Error base del dominio de la cerradura."""


class ValidacionError(DominioError):
    """Entrada inválida, trazas inconsistentes o configuración fuera de rango."""


class RecursoNoEncontradoError(DominioError):
    """Registro solicitado no existe en el repositorio."""


class IntegracionHardwareError(DominioError):
    """Fallo al comunicarse con la placa (acelerómetro, LED o botones)."""
