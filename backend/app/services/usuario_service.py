import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from app.extensions import db
from app.models import Actividad, Direccion, Usuario
from app.actividades.errores import ErrorAutorizacion, ErrorValidacion
from app.actividades.politica import puede_administrar
from app.actividades.registro import Rol
from app.services.repositorio import errores_de_persistencia

logger = logging.getLogger(__name__)


def _nuevo_usuario(nombre, rol, id_direccion=None, email=None, cargo=None):
    nombre = (nombre or '').strip()
    if not nombre:
        raise ErrorValidacion('nombre', ErrorValidacion.NOMBRE_VACIO, 'El nombre es requerido')
    try:
        rol = Rol(rol)
    except ValueError:
        raise ErrorValidacion('rol', ErrorValidacion.ROL_INVALIDO, f'Rol desconocido: {rol!r}') from None

    if rol == Rol.SUPERADMIN:
        if id_direccion is not None:
            raise ErrorValidacion('id_direccion', ErrorValidacion.ROL_INVALIDO,
                                  'El super administrador no pertenece a ninguna dirección')
    elif id_direccion is None or db.session.get(Direccion, id_direccion) is None:
        raise ErrorValidacion('id_direccion', ErrorValidacion.DIRECCION_INEXISTENTE,
                              'Directivos y personal requieren una dirección existente')

    usuario = Usuario(nombre=nombre, rol=rol.value, id_direccion=id_direccion,
                      email=email.lower().strip() if email else None, cargo=cargo)
    db.session.add(usuario)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ErrorValidacion('email', ErrorValidacion.EMAIL_DUPLICADO, 'El email ya está registrado')
    return usuario


@errores_de_persistencia
def crear_usuario(actor, nombre, rol, id_direccion=None, email=None, cargo=None):
    if not puede_administrar(actor):
        raise ErrorAutorizacion('crear_usuario', ErrorAutorizacion.NO_PERMITIDO,
                                'Acceso denegado: solo el super administrador crea usuarios')
    usuario = _nuevo_usuario(nombre, rol, id_direccion, email, cargo)
    logger.info(f"Usuario {usuario.id} ({usuario.rol}) creado por usuario {actor.id}")
    return usuario


@errores_de_persistencia
def crear_superadmin(nombre, email=None):
    """Alta inicial del super administrador, sin actor previo"""
    usuario = _nuevo_usuario(nombre, Rol.SUPERADMIN.value, email=email)
    logger.info(f"Super administrador {usuario.id} creado")
    return usuario


@errores_de_persistencia
def listar_usuarios(rol=None, id_direccion=None):
    query = Usuario.query
    if rol:
        query = query.filter_by(rol=rol)
    if id_direccion is not None:
        query = query.filter_by(id_direccion=id_direccion)
    return query.order_by(Usuario.nombre.asc()).all()


@errores_de_persistencia
def estadisticas_sistema():
    """Conteos generales del sistema"""
    por_rol = dict(
        db.session.query(Usuario.rol, func.count(Usuario.id)).group_by(Usuario.rol).all()
    )
    return {
        'superadmins': por_rol.get('superadmin', 0),
        'directivos': por_rol.get('directivo', 0),
        'personal': por_rol.get('personal', 0),
        'direcciones': Direccion.query.count(),
        'actividades': Actividad.query.count(),
    }
