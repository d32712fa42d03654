"""
Política de autorización.

Es la única fuente de verdad sobre quién puede ver o modificar un registro;
las demás capas la consultan antes de exponer o mutar datos.
"""
from app.actividades.registro import Rol


def puede_cambiar_estado(actor, registro):
    """Solo el creador cambia el estado de su actividad"""
    return actor.id == registro.creado_por_id


def puede_eliminar(actor, registro):
    return actor.id == registro.creado_por_id or actor.rol == Rol.SUPERADMIN


def puede_ver(actor, registro):
    if actor.rol == Rol.SUPERADMIN:
        return True
    return actor.id_direccion is not None and actor.id_direccion == registro.id_direccion


def puede_ver_direccion(actor, id_direccion):
    if actor.rol == Rol.SUPERADMIN:
        return True
    return actor.id_direccion is not None and actor.id_direccion == id_direccion


def puede_crear(actor):
    """Personal y directivos crean actividades en su propia dirección"""
    return actor.rol in (Rol.DIRECTIVO, Rol.PERSONAL) and actor.id_direccion is not None


def puede_administrar(actor):
    """Gestión de direcciones y usuarios"""
    return actor.rol == Rol.SUPERADMIN
