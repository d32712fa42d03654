import logging
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from app.extensions import db
from app.models import Actividad, Direccion, ImagenActividad
from app.actividades.errores import ErrorInfraestructura, ErrorNoEncontrado

logger = logging.getLogger(__name__)


def errores_de_persistencia(func):
    """Convierte los fallos de SQLAlchemy en ErrorInfraestructura y deshace la sesión"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error de persistencia en {func.__name__}: {str(e)}")
            raise ErrorInfraestructura('Error de acceso a la base de datos', causa=e) from e
    return wrapper


class RepositorioActividades:
    """Colaborador de persistencia: traduce entre modelos SQLAlchemy y registros planos"""

    @errores_de_persistencia
    def obtener_actividades_por_direccion(self, id_direccion):
        actividades = (
            Actividad.query
            .filter_by(id_direccion=id_direccion)
            .order_by(Actividad.creado_en.desc())
            .all()
        )
        return [a.a_registro() for a in actividades]

    @errores_de_persistencia
    def obtener_direcciones(self):
        return [d.a_unidad() for d in Direccion.query.order_by(Direccion.nombre.asc()).all()]

    @errores_de_persistencia
    def obtener_direccion(self, id_direccion):
        direccion = db.session.get(Direccion, id_direccion)
        return direccion.a_unidad() if direccion else None

    @errores_de_persistencia
    def obtener(self, id_actividad):
        actividad = db.session.get(Actividad, id_actividad)
        return actividad.a_registro() if actividad else None

    @errores_de_persistencia
    def guardar(self, registro):
        """Inserta (sin id) o actualiza; devuelve el registro con id y creado_en asignados"""
        if registro.id is not None:
            actividad = db.session.get(Actividad, registro.id)
            if actividad is None:
                # Eliminada entre la lectura y la escritura: no se recrea
                raise ErrorNoEncontrado(registro.id)
        else:
            actividad = Actividad(
                titulo=registro.titulo,
                tipo_actividad=registro.tipo_actividad,
                descripcion=registro.descripcion,
                fecha_inicio=registro.fecha_inicio,
                fecha_fin=registro.fecha_fin,
                id_direccion=registro.id_direccion,
                creado_por_id=registro.creado_por_id,
                creado_por_nombre=registro.creado_por_nombre,
                creado_por_tipo=registro.creado_por_tipo.value,
                creado_en=registro.creado_en,
            )
            actividad.imagenes = [
                ImagenActividad(url=img.url, nombre_original=img.nombre_original, posicion=i)
                for i, img in enumerate(registro.imagenes)
            ]
            db.session.add(actividad)
        # Solo el estado cambia después de la creación
        actividad.estado = registro.estado.value
        db.session.commit()
        return actividad.a_registro()

    @errores_de_persistencia
    def eliminar(self, id_actividad):
        actividad = db.session.get(Actividad, id_actividad)
        if actividad is None:
            return False
        db.session.delete(actividad)
        db.session.commit()
        return True
