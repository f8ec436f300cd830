from __future__ import annotations

from typing import List

import pytest

from conftest import PlacaFalsa
from infraestructura.acelerometro import MuestreadorSerial, MuestreadorSimulado
from infraestructura.botones import BotonesConsola, BotonesSerial, BotonesSimulados
from infraestructura.indicador_led import IndicadorSerial, IndicadorSimulado
from negocio.captura import CapturaMovimiento
from negocio.comparador import ComparadorMovimientos
from negocio.exceptions import IntegracionHardwareError, ValidacionError
from negocio.senales import VERDE


# Acelerómetro

def test_simulado_reproduce_en_ciclo_por_eje():
    m = MuestreadorSimulado([(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)])
    assert [m.leer_eje_x() for _ in range(3)] == [1.0, 4.0, 1.0]
    assert m.leer_eje_y() == 2.0
    assert m.leer_eje_z() == 3.0


def test_simulado_sin_muestras_es_repetible_con_semilla():
    a = MuestreadorSimulado(semilla=42)
    b = MuestreadorSimulado(semilla=42)
    assert [a.leer_eje_x() for _ in range(5)] == [b.leer_eje_x() for _ in range(5)]


def test_gesto_simulado_se_reconoce_a_si_mismo():
    captura = CapturaMovimiento(MuestreadorSimulado(ruido=0.2, semilla=1), dormir=lambda s: None)
    llave = captura.capturar()
    prueba = captura.capturar()
    assert ComparadorMovimientos().comparar(prueba, llave).exito is True


def test_simulado_sin_ruido_repite_el_periodo():
    captura = CapturaMovimiento(MuestreadorSimulado(ruido=0.0), dormir=lambda s: None)
    assert captura.capturar() == captura.capturar()


@pytest.mark.parametrize("kwargs", [{"muestras": []}, {"ruido": -1.0}, {"periodo": 0}])
def test_simulado_parametros_invalidos(kwargs):
    with pytest.raises(ValidacionError):
        MuestreadorSimulado(**kwargs)


def test_serial_lee_un_eje_por_consulta():
    placa = PlacaFalsa({b"X": "1.5", b"Y": "-0.25", b"Z": "9.81"})
    m = MuestreadorSerial(placa)
    assert (m.leer_eje_x(), m.leer_eje_y(), m.leer_eje_z()) == (1.5, -0.25, 9.81)
    assert placa.enviados == [b"X", b"Y", b"Z"]


def test_serial_respuesta_no_numerica():
    with pytest.raises(IntegracionHardwareError):
        MuestreadorSerial(PlacaFalsa({b"X": "abc"})).leer_eje_x()


# Indicador

def test_indicador_serial_configura_brillo_y_apaga_al_iniciar():
    placa = PlacaFalsa()
    IndicadorSerial(placa, brillo=50, dormir=lambda s: None)
    assert placa.enviados == [b"S" + bytes([50]), b"C"]


def test_indicador_serial_muestra_bloquea_y_limpia():
    placa = PlacaFalsa()
    esperas: List[float] = []
    indicador = IndicadorSerial(placa, dormir=esperas.append)
    placa.enviados.clear()

    indicador.mostrar(VERDE, 3000)

    assert placa.enviados == [b"P" + bytes([0, 255, 0]), b"C"]
    assert esperas == [3.0]


def test_indicador_serial_brillo_invalido():
    with pytest.raises(ValidacionError):
        IndicadorSerial(PlacaFalsa(), brillo=300)


def test_indicador_simulado_imprime_y_espera(capsys):
    esperas: List[float] = []
    IndicadorSimulado(dormir=esperas.append).mostrar(VERDE, 1500)
    assert "[INDICADOR] color=(0,255,0) por 1500 ms" in capsys.readouterr().out
    assert esperas == [1.5]


# Botones

def test_botones_simulados_se_agotan():
    b = BotonesSimulados([(True, False)])
    assert b.leer() == (True, False)
    assert b.leer() == (False, False)


@pytest.mark.parametrize(
    "linea, activo_bajo, esperado",
    [
        ("0,1", True, (True, False)),
        ("1,1", True, (False, False)),
        ("0,0", True, (True, True)),
        ("0,1", False, (False, True)),
    ],
)
def test_botones_serial_niveles(linea, activo_bajo, esperado):
    placa = PlacaFalsa({b"B": linea})
    assert BotonesSerial(placa, activo_bajo=activo_bajo).leer() == esperado


@pytest.mark.parametrize("linea", ["1", "2,0", "1,0,1"])
def test_botones_serial_respuesta_invalida(linea):
    with pytest.raises(IntegracionHardwareError):
        BotonesSerial(PlacaFalsa({b"B": linea})).leer()


def test_botones_consola(monkeypatch, capsys):
    teclas = iter(["x", "R", "g", "", "q"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(teclas))
    b = BotonesConsola()

    assert b.leer() == (True, True)
    assert "Opción inválida." in capsys.readouterr().out
    assert b.leer() == (True, False)
    assert b.leer() == (False, False)
    with pytest.raises(EOFError):
        b.leer()
