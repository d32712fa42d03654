"""
Fachada del ciclo de vida de actividades.

Valida y autoriza antes de cualquier mutación; la persistencia y el
almacenamiento de imágenes se delegan en colaboradores inyectados. El actor se
recibe explícitamente en cada llamada.
"""
import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import List, Optional

from app.actividades import estadisticas
from app.actividades.agrupacion import agrupar
from app.actividades.errores import ErrorAutorizacion, ErrorInfraestructura, ErrorNoEncontrado, ErrorValidacion
from app.actividades.estados import cambiar_estado
from app.actividades.filtros import filtrar
from app.actividades.periodos import periodo_actual
from app.actividades.politica import (puede_crear, puede_eliminar, puede_ver,
                                      puede_ver_direccion, puede_administrar)
from app.actividades.registro import LIMITES, Estado, RegistroActividad, validar_creacion

logger = logging.getLogger(__name__)


@dataclass
class ResultadoEliminacion:
    id: int
    imagenes_eliminadas: int


@dataclass
class PanelActividades:
    """Vista de lectura: grupos año/período anotados y tablas de resumen"""
    periodo_actual: tuple
    resumen: object
    grupos: List
    por_creador: List
    por_direccion: List
    total_sin_filtrar: int

    def to_dict(self):
        anio, periodo = self.periodo_actual
        return {
            'periodo_actual': {'anio': anio, 'periodo': periodo.value, 'etiqueta': periodo.etiqueta},
            'total_sin_filtrar': self.total_sin_filtrar,
            'resumen': self.resumen.to_dict(),
            'grupos': [g.to_dict() for g in self.grupos],
            'por_creador': [c.to_dict() for c in self.por_creador],
            'por_direccion': [d.to_dict() for d in self.por_direccion],
        }


class ActividadService:

    def __init__(self, repositorio, almacenamiento, limites=LIMITES, hoy=None, ahora=None):
        self.repositorio = repositorio
        self.almacenamiento = almacenamiento
        self.limites = limites
        self.hoy = hoy or date.today
        self.ahora = ahora or datetime.utcnow

    def crear(self, actor, datos, archivos=()):
        if not puede_crear(actor):
            raise ErrorAutorizacion('crear', ErrorAutorizacion.NO_PERMITIDO,
                                    'Solo personal o directivos con dirección asignada pueden crear actividades')

        direccion = self.repositorio.obtener_direccion(actor.id_direccion)
        if direccion is None:
            raise ErrorValidacion('id_direccion', ErrorValidacion.DIRECCION_INEXISTENTE,
                                  'La dirección del usuario no existe')

        # Metadatos de imágenes tomados de los archivos que se van a guardar
        archivos = list(archivos)
        datos = replace(datos, imagenes=tuple(self.almacenamiento.describir(a) for a in archivos))
        validar_creacion(datos, self.hoy(), self.limites)

        imagenes = self.almacenamiento.guardar(archivos) if archivos else []
        registro = RegistroActividad(
            id=None,
            titulo=datos.titulo.strip(),
            tipo_actividad=datos.tipo_actividad.strip(),
            descripcion=datos.descripcion,
            fecha_inicio=datos.fecha_inicio,
            fecha_fin=datos.fecha_fin,
            id_direccion=direccion.id,
            direccion_nombre=direccion.nombre,
            creado_por_id=actor.id,
            creado_por_nombre=actor.nombre,
            creado_por_tipo=actor.rol,
            estado=Estado.PENDIENTE,
            imagenes=tuple(imagenes),
            creado_en=self.ahora(),
        )
        try:
            guardado = self.repositorio.guardar(registro)
        except ErrorInfraestructura:
            # No dejar archivos huérfanos si el registro no llegó a guardarse
            if imagenes:
                self.almacenamiento.eliminar(imagenes)
            raise

        logger.info(f"Actividad {guardado.id} creada por usuario {actor.id} en dirección {direccion.id}")
        return guardado

    def _cargar(self, id_actividad):
        registro = self.repositorio.obtener(id_actividad)
        if registro is None:
            raise ErrorNoEncontrado(id_actividad)
        return registro

    def actualizar_estado(self, actor, id_actividad, nuevo_estado):
        registro = self._cargar(id_actividad)
        actualizado = cambiar_estado(registro, nuevo_estado, actor)
        guardado = self.repositorio.guardar(actualizado)
        logger.info(f"Actividad {id_actividad}: {registro.estado.value} -> {guardado.estado.value} (usuario {actor.id})")
        return guardado

    def eliminar(self, actor, id_actividad):
        registro = self._cargar(id_actividad)
        if not puede_eliminar(actor, registro):
            raise ErrorAutorizacion('eliminar', ErrorAutorizacion.NO_PERMITIDO,
                                    'Solo el creador o el super administrador pueden eliminar la actividad')

        self.repositorio.eliminar(id_actividad)
        eliminadas = self.almacenamiento.eliminar(registro.imagenes) if registro.imagenes else 0
        logger.info(f"Actividad {id_actividad} eliminada por usuario {actor.id} ({eliminadas} imágenes)")
        return ResultadoEliminacion(id=id_actividad, imagenes_eliminadas=eliminadas)

    def listar_por_direccion(self, actor, id_direccion):
        if not puede_ver_direccion(actor, id_direccion):
            raise ErrorAutorizacion('ver', ErrorAutorizacion.NO_PERMITIDO,
                                    'No tienes acceso a las actividades de esta dirección')
        registros = self.repositorio.obtener_actividades_por_direccion(id_direccion)
        return [r for r in registros if puede_ver(actor, r)]

    def listar_todas(self, actor):
        """Todas las actividades del sistema, dirección por dirección (solo super admin)"""
        if not puede_administrar(actor):
            raise ErrorAutorizacion('ver_todas', ErrorAutorizacion.NO_PERMITIDO,
                                    'Solo el super administrador puede ver todas las actividades')
        registros = []
        for direccion in self.repositorio.obtener_direcciones():
            registros.extend(self.listar_por_direccion(actor, direccion.id))
        return registros

    def panel(self, actor, filtro=None, id_direccion: Optional[int] = None):
        """
        Vista agrupada por año y período con estadísticas.

        Sin id_direccion, el super admin ve todo el sistema y los demás roles
        su propia dirección.
        """
        direcciones = None
        if id_direccion is None and actor.es_superadmin:
            registros = self.listar_todas(actor)
            direcciones = self.repositorio.obtener_direcciones()
            if filtro is not None and filtro.id_direccion is not None:
                direcciones = [d for d in direcciones if d.id == filtro.id_direccion]
        else:
            registros = self.listar_por_direccion(actor, id_direccion or actor.id_direccion)

        filtrados = filtrar(registros, filtro)
        actual = periodo_actual(self.hoy())
        return PanelActividades(
            periodo_actual=actual,
            resumen=estadisticas.resumir(filtrados),
            grupos=estadisticas.resumir_grupos(agrupar(filtrados), actual),
            por_creador=estadisticas.resumen_por_creador(filtrados),
            por_direccion=estadisticas.resumen_por_direccion(filtrados, direcciones),
            total_sin_filtrar=len(registros),
        )
