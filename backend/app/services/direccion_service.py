import logging

from sqlalchemy.exc import IntegrityError

from app.extensions import db
from app.models import Direccion
from app.actividades.errores import ErrorAutorizacion, ErrorNoEncontrado, ErrorValidacion
from app.actividades.politica import puede_administrar
from app.services.repositorio import errores_de_persistencia

logger = logging.getLogger(__name__)


def _exigir_superadmin(actor, accion):
    if not puede_administrar(actor):
        raise ErrorAutorizacion(accion, ErrorAutorizacion.NO_PERMITIDO,
                                'Acceso denegado: solo el super administrador gestiona direcciones')


def _validar_nombre(nombre, id_excluido=None):
    nombre = (nombre or '').strip()
    if not nombre:
        raise ErrorValidacion('nombre', ErrorValidacion.NOMBRE_VACIO, 'El nombre es requerido')
    query = Direccion.query.filter(Direccion.nombre == nombre)
    if id_excluido is not None:
        query = query.filter(Direccion.id != id_excluido)
    if query.first():
        raise ErrorValidacion('nombre', ErrorValidacion.DIRECCION_DUPLICADA, 'Esta dirección ya existe')
    return nombre


@errores_de_persistencia
def listar_direcciones():
    return [d.a_unidad() for d in Direccion.query.order_by(Direccion.nombre.asc()).all()]


@errores_de_persistencia
def crear_direccion(actor, nombre):
    _exigir_superadmin(actor, 'crear_direccion')
    nombre = _validar_nombre(nombre)

    direccion = Direccion(nombre=nombre)
    db.session.add(direccion)
    try:
        db.session.commit()
    except IntegrityError:
        # Otra petición creó el mismo nombre entre la consulta y el commit
        db.session.rollback()
        raise ErrorValidacion('nombre', ErrorValidacion.DIRECCION_DUPLICADA, 'Esta dirección ya existe')

    logger.info(f"Dirección '{nombre}' creada por usuario {actor.id}")
    return direccion.a_unidad()


@errores_de_persistencia
def renombrar_direccion(actor, id_direccion, nombre):
    """El nombre es lo único que cambia en una dirección ya referenciada"""
    _exigir_superadmin(actor, 'renombrar_direccion')
    direccion = db.session.get(Direccion, id_direccion)
    if direccion is None:
        raise ErrorNoEncontrado(id_direccion, entidad='dirección')
    nombre = _validar_nombre(nombre, id_excluido=id_direccion)

    anterior = direccion.nombre
    direccion.nombre = nombre
    db.session.commit()
    logger.info(f"Dirección {id_direccion} renombrada de '{anterior}' a '{nombre}'")
    return direccion.a_unidad()
