"""
Agrupación temporal de actividades: año -> período cuatrimestral.

Función pura: el resultado depende solo de la lista recibida y de su orden
(para empates en la fecha de inicio).
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from app.actividades.periodos import ORDEN_PERIODOS, SIN_ANIO, clasificar


@dataclass
class GrupoAnio:
    anio: Optional[int]
    actividades: List = field(default_factory=list)
    periodos: Dict = field(default_factory=lambda: {p: [] for p in ORDEN_PERIODOS})

    @property
    def es_sin_fecha(self):
        return self.anio is SIN_ANIO

    def periodos_con_actividades(self):
        return [(p, regs) for p, regs in self.periodos.items() if regs]


def _clave_fecha(registro):
    return registro.fecha_inicio or date.min


def ordenar_por_fecha(registros):
    """Más reciente primero; los empates conservan el orden de entrada"""
    return sorted(registros, key=_clave_fecha, reverse=True)


def agrupar(registros):
    grupos = {}
    for registro in registros:
        anio, periodo = clasificar(registro.fecha_inicio)
        grupo = grupos.get(anio)
        if grupo is None:
            grupo = grupos[anio] = GrupoAnio(anio=anio)
        grupo.actividades.append(registro)
        grupo.periodos[periodo].append(registro)

    con_anio = sorted((g for a, g in grupos.items() if a is not SIN_ANIO),
                      key=lambda g: g.anio, reverse=True)
    if SIN_ANIO in grupos:
        con_anio.append(grupos[SIN_ANIO])

    for grupo in con_anio:
        grupo.actividades = ordenar_por_fecha(grupo.actividades)
        for periodo in ORDEN_PERIODOS:
            grupo.periodos[periodo] = ordenar_por_fecha(grupo.periodos[periodo])
    return con_anio
