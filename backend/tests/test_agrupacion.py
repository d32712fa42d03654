import random
from datetime import date

import pytest

from app.actividades.agrupacion import agrupar
from app.actividades.periodos import ORDEN_PERIODOS, Periodo, SIN_ANIO, clasificar, periodo_actual
from app.actividades.registro import Estado
from app.actividades.estadisticas import calcular_efectividad


@pytest.mark.parametrize('mes, periodo', [
    (1, Periodo.ENERO_ABRIL), (4, Periodo.ENERO_ABRIL),
    (5, Periodo.MAYO_AGOSTO), (8, Periodo.MAYO_AGOSTO),
    (9, Periodo.SEPTIEMBRE_DICIEMBRE), (12, Periodo.SEPTIEMBRE_DICIEMBRE),
])
def test_clasificar_por_mes(mes, periodo):
    assert clasificar(date(2024, mes, 15)) == (2024, periodo)


def test_sin_fecha_cae_en_centinela():
    assert clasificar(None) == (SIN_ANIO, Periodo.SIN_FECHA)


def test_periodo_actual():
    assert periodo_actual(date(2026, 10, 19)) == (2026, Periodo.SEPTIEMBRE_DICIEMBRE)


def test_etiquetas_y_orden():
    assert [p.orden for p in ORDEN_PERIODOS] == [1, 2, 3, 4]
    assert Periodo.MAYO_AGOSTO.etiqueta == 'Mayo - Agosto'


def test_escenario_una_direccion(registro_factory):
    registros = [
        registro_factory(fecha_inicio=date(2024, 2, 10)),
        registro_factory(fecha_inicio=date(2024, 6, 1)),
        registro_factory(fecha_inicio=date(2024, 6, 15), estado=Estado.COMPLETADA),
    ]

    grupos = agrupar(registros)

    assert len(grupos) == 1
    grupo = grupos[0]
    assert grupo.anio == 2024
    assert len(grupo.periodos[Periodo.ENERO_ABRIL]) == 1
    assert len(grupo.periodos[Periodo.MAYO_AGOSTO]) == 2
    assert calcular_efectividad(grupo.periodos[Periodo.MAYO_AGOSTO]) == 50


def test_anios_descendentes_y_centinela_al_final(registro_factory):
    registros = [
        registro_factory(fecha_inicio=None),
        registro_factory(fecha_inicio=date(2022, 1, 5)),
        registro_factory(fecha_inicio=date(2025, 9, 1)),
        registro_factory(fecha_inicio=date(2023, 7, 7)),
    ]

    grupos = agrupar(registros)

    assert [g.anio for g in grupos] == [2025, 2023, 2022, SIN_ANIO]
    assert grupos[-1].es_sin_fecha
    assert grupos[-1].periodos[Periodo.SIN_FECHA] == [registros[0]]


def test_periodos_siempre_en_orden_fijo(registro_factory):
    grupos = agrupar([registro_factory(fecha_inicio=date(2024, 11, 1))])

    assert list(grupos[0].periodos) == list(ORDEN_PERIODOS)
    assert grupos[0].periodos[Periodo.ENERO_ABRIL] == []
    assert [p for p, _ in grupos[0].periodos_con_actividades()] == [Periodo.SEPTIEMBRE_DICIEMBRE]


def test_orden_descendente_y_estable(registro_factory):
    primero = registro_factory(fecha_inicio=date(2024, 3, 1))
    segundo = registro_factory(fecha_inicio=date(2024, 3, 1))
    reciente = registro_factory(fecha_inicio=date(2024, 4, 20))
    antiguo = registro_factory(fecha_inicio=date(2024, 1, 2))

    grupo = agrupar([primero, antiguo, segundo, reciente])[0]

    assert grupo.actividades == [reciente, primero, segundo, antiguo]
    assert grupo.periodos[Periodo.ENERO_ABRIL] == [reciente, primero, segundo, antiguo]


def test_mismos_miembros_sin_importar_orden_de_entrada(registro_factory):
    registros = [registro_factory(fecha_inicio=date(2020 + i % 4, 1 + i % 12, 1 + i)) for i in range(20)]
    mezclados = registros[:]
    random.Random(7).shuffle(mezclados)

    def miembros(grupos):
        return {(g.anio, p): [r.id for r in regs] for g in grupos for p, regs in g.periodos.items()}

    assert miembros(agrupar(registros)) == miembros(agrupar(mezclados))


def test_lista_vacia():
    assert agrupar([]) == []
