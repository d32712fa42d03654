from .actividad_service import ActividadService, PanelActividades, ResultadoEliminacion
from .repositorio import RepositorioActividades

__all__ = [
    'ActividadService',
    'PanelActividades',
    'ResultadoEliminacion',
    'RepositorioActividades'
]
