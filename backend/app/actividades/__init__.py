from .errores import ErrorActividades, ErrorValidacion, ErrorAutorizacion, ErrorNoEncontrado, ErrorInfraestructura
from .registro import (Rol, Estado, Actor, UnidadOrganizacional, ImagenAdjunta, ImagenEntrante,
                       DatosActividad, RegistroActividad, LimitesCreacion, validar_creacion)
from .periodos import Periodo, clasificar, periodo_actual
from .estados import cambiar_estado
from .agrupacion import GrupoAnio, agrupar
from .filtros import FiltroActividades, filtrar


__all__ = [
    'ErrorActividades',
    'ErrorValidacion',
    'ErrorAutorizacion',
    'ErrorNoEncontrado',
    'ErrorInfraestructura',
    'Rol',
    'Estado',
    'Actor',
    'UnidadOrganizacional',
    'ImagenAdjunta',
    'ImagenEntrante',
    'DatosActividad',
    'RegistroActividad',
    'LimitesCreacion',
    'validar_creacion',
    'Periodo',
    'clasificar',
    'periodo_actual',
    'cambiar_estado',
    'GrupoAnio',
    'agrupar',
    'FiltroActividades',
    'filtrar',
]
