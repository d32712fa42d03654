"""
Estadísticas sobre conjuntos de actividades.

Todas las funciones son puras y se recalculan en cada llamada; reciben el
conjunto de registros ya filtrado por lo que el actor puede ver.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from app.actividades.registro import Estado

BANDA_BUENA = 'buena'
BANDA_ADVERTENCIA = 'advertencia'
BANDA_BAJA = 'baja'


def contar_estados(registros):
    conteo = {estado: 0 for estado in Estado}
    for registro in registros:
        conteo[registro.estado] += 1
    return conteo


def porcentaje(parte, total):
    """round(parte / total * 100) con redondeo half-up; 0 si total es 0"""
    if total == 0:
        return 0
    return (200 * parte + total) // (2 * total)


def calcular_efectividad(registros):
    registros = list(registros)
    completadas = sum(1 for r in registros if r.estado == Estado.COMPLETADA)
    return porcentaje(completadas, len(registros))


def banda_efectividad(efectividad):
    if efectividad >= 70:
        return BANDA_BUENA
    if efectividad >= 40:
        return BANDA_ADVERTENCIA
    return BANDA_BAJA


def creadores_distintos(registros):
    return len({r.creado_por_id for r in registros})


def direcciones_distintas(registros):
    return len({r.id_direccion for r in registros})


def total_imagenes(registros):
    return sum(len(r.imagenes) for r in registros)


def actividad_mas_reciente(registros):
    """Registro con el creado_en más alto (no la fecha de inicio)"""
    con_fecha = [r for r in registros if r.creado_en is not None]
    if not con_fecha:
        return None
    return max(con_fecha, key=lambda r: r.creado_en)


@dataclass
class Resumen:
    total: int
    por_estado: Dict
    efectividad: int
    banda: str
    creadores: int
    direcciones: int
    imagenes: int
    mas_reciente: Optional[object] = None

    def to_dict(self):
        return {
            'total': self.total,
            'por_estado': {estado.value: n for estado, n in self.por_estado.items()},
            'efectividad': self.efectividad,
            'banda': self.banda,
            'creadores': self.creadores,
            'direcciones': self.direcciones,
            'imagenes': self.imagenes,
            'mas_reciente': self.mas_reciente.to_dict() if self.mas_reciente else None,
        }


def resumir(registros):
    registros = list(registros)
    efectividad = calcular_efectividad(registros)
    return Resumen(
        total=len(registros),
        por_estado=contar_estados(registros),
        efectividad=efectividad,
        banda=banda_efectividad(efectividad),
        creadores=creadores_distintos(registros),
        direcciones=direcciones_distintas(registros),
        imagenes=total_imagenes(registros),
        mas_reciente=actividad_mas_reciente(registros),
    )


def agrupar_por(registros, clave):
    """Agrupa conservando el orden de primera aparición de cada clave"""
    grupos = {}
    for registro in registros:
        grupos.setdefault(clave(registro), []).append(registro)
    return grupos


@dataclass
class ResumenCreador:
    creado_por_id: int
    nombre: str
    rol: str
    resumen: Resumen

    def to_dict(self):
        datos = {'creado_por_id': self.creado_por_id, 'nombre': self.nombre, 'rol': self.rol}
        datos.update(self.resumen.to_dict())
        return datos


@dataclass
class ResumenDireccion:
    id_direccion: int
    nombre: Optional[str]
    resumen: Resumen

    def to_dict(self):
        datos = {'id_direccion': self.id_direccion, 'nombre': self.nombre}
        datos.update(self.resumen.to_dict())
        return datos


def resumen_por_creador(registros):
    """Tabla por creador, ordenada por cantidad de actividades (desc) y nombre"""
    filas = []
    for creado_por_id, suyos in agrupar_por(registros, lambda r: r.creado_por_id).items():
        primero = suyos[0]
        filas.append(ResumenCreador(
            creado_por_id=creado_por_id,
            nombre=primero.creado_por_nombre,
            rol=primero.creado_por_tipo.value,
            resumen=resumir(suyos),
        ))
    filas.sort(key=lambda f: (-f.resumen.total, f.nombre or ''))
    return filas


def resumen_por_direccion(registros, direcciones=None):
    """
    Tabla por dirección.

    Si se pasa la lista de direcciones, las que no tienen actividades también
    aparecen (con efectividad 0) y se respeta el orden de esa lista.
    """
    por_direccion = agrupar_por(registros, lambda r: r.id_direccion)
    filas = []
    if direcciones is not None:
        for direccion in direcciones:
            suyos = por_direccion.pop(direccion.id, [])
            filas.append(ResumenDireccion(direccion.id, direccion.nombre, resumir(suyos)))
    for id_direccion, suyos in por_direccion.items():
        filas.append(ResumenDireccion(id_direccion, suyos[0].direccion_nombre, resumir(suyos)))
    return filas


@dataclass
class ResumenPeriodo:
    periodo: object
    es_actual: bool
    resumen: Resumen
    actividades: List = field(default_factory=list)

    def to_dict(self):
        return {
            'periodo': self.periodo.value,
            'etiqueta': self.periodo.etiqueta,
            'orden': self.periodo.orden,
            'es_actual': self.es_actual,
            'resumen': self.resumen.to_dict(),
            'actividades': [r.to_dict() for r in self.actividades],
        }


@dataclass
class ResumenAnio:
    anio: Optional[int]
    es_actual: bool
    resumen: Resumen
    periodos: List = field(default_factory=list)

    def to_dict(self):
        return {
            'anio': self.anio,
            'es_actual': self.es_actual,
            'resumen': self.resumen.to_dict(),
            'periodos': [p.to_dict() for p in self.periodos],
        }


def resumir_grupos(grupos, actual):
    """
    Anota cada año y cada período no vacío con su resumen.

    `actual` es el par (año, período) en curso, usado para marcar es_actual.
    """
    anio_actual, periodo_en_curso = actual
    resultado = []
    for grupo in grupos:
        periodos = [
            ResumenPeriodo(
                periodo=periodo,
                es_actual=grupo.anio == anio_actual and periodo == periodo_en_curso,
                resumen=resumir(suyos),
                actividades=suyos,
            )
            for periodo, suyos in grupo.periodos_con_actividades()
        ]
        resultado.append(ResumenAnio(
            anio=grupo.anio,
            es_actual=grupo.anio == anio_actual,
            resumen=resumir(grupo.actividades),
            periodos=periodos,
        ))
    return resultado
