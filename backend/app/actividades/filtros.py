from dataclasses import dataclass
from datetime import date
from typing import Optional

from app.actividades.registro import Estado, Rol


@dataclass(frozen=True)
class FiltroActividades:
    """Filtros opcionales de la vista de actividades; None significa 'todos'"""
    id_direccion: Optional[int] = None
    creador_tipo: Optional[Rol] = None
    estado: Optional[Estado] = None
    fecha_desde: Optional[date] = None
    fecha_hasta: Optional[date] = None
    tipo_actividad: Optional[str] = None

    def acepta(self, registro):
        if self.id_direccion is not None and registro.id_direccion != self.id_direccion:
            return False
        if self.creador_tipo is not None and registro.creado_por_tipo != self.creador_tipo:
            return False
        if self.estado is not None and registro.estado != self.estado:
            return False
        if self.tipo_actividad is not None and registro.tipo_actividad != self.tipo_actividad:
            return False
        # Con un límite de fechas, los registros sin fecha quedan fuera
        if self.fecha_desde is not None:
            if registro.fecha_inicio is None or registro.fecha_inicio < self.fecha_desde:
                return False
        if self.fecha_hasta is not None:
            if registro.fecha_inicio is None or registro.fecha_inicio > self.fecha_hasta:
                return False
        return True


SIN_FILTRO = FiltroActividades()


def filtrar(registros, filtro=None):
    if filtro is None:
        return list(registros)
    return [r for r in registros if filtro.acepta(r)]
