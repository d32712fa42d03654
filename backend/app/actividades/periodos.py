from datetime import date, timedelta
from enum import Enum


class Periodo(Enum):
    ENERO_ABRIL = 'enero-abril'
    MAYO_AGOSTO = 'mayo-agosto'
    SEPTIEMBRE_DICIEMBRE = 'septiembre-diciembre'
    SIN_FECHA = 'sin-fecha'

    @property
    def etiqueta(self):
        return ETIQUETAS_PERIODO[self]

    @property
    def orden(self):
        return ORDEN_PERIODOS.index(self) + 1


ORDEN_PERIODOS = (
    Periodo.ENERO_ABRIL,
    Periodo.MAYO_AGOSTO,
    Periodo.SEPTIEMBRE_DICIEMBRE,
    Periodo.SIN_FECHA,
)

ETIQUETAS_PERIODO = {
    Periodo.ENERO_ABRIL: 'Enero - Abril',
    Periodo.MAYO_AGOSTO: 'Mayo - Agosto',
    Periodo.SEPTIEMBRE_DICIEMBRE: 'Septiembre - Diciembre',
    Periodo.SIN_FECHA: 'Sin fecha definida',
}

# Año centinela para registros sin fecha de inicio
SIN_ANIO = None


def periodo_de_mes(mes):
    """Devuelve el período cuatrimestral de un mes 1-12"""
    if 1 <= mes <= 4:
        return Periodo.ENERO_ABRIL
    if 5 <= mes <= 8:
        return Periodo.MAYO_AGOSTO
    if 9 <= mes <= 12:
        return Periodo.SEPTIEMBRE_DICIEMBRE
    raise ValueError(f'Mes fuera de rango: {mes}')


def clasificar(fecha):
    """
    Clasifica una fecha en (año, período).

    Una fecha ausente cae en el grupo centinela (SIN_ANIO, SIN_FECHA).
    """
    if fecha is None:
        return SIN_ANIO, Periodo.SIN_FECHA
    return fecha.year, periodo_de_mes(fecha.month)


def periodo_actual(hoy=None):
    """(año, período) en curso según la fecha de hoy"""
    return clasificar(hoy or date.today())


def ventana_creacion(hoy, dias_atras=14, dias_adelante=365):
    """Límites inclusivos para la fecha de inicio de una actividad nueva"""
    return hoy - timedelta(days=dias_atras), hoy + timedelta(days=dias_adelante)


def fecha_en_ventana(fecha, hoy, dias_atras=14, dias_adelante=365):
    desde, hasta = ventana_creacion(hoy, dias_atras, dias_adelante)
    return desde <= fecha <= hasta
