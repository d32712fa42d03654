"""
Fixtures de pruebas.

Las pruebas del motor (app.actividades) trabajan con registros planos; las de
la API levantan la aplicación con TestingConfig, sqlite en memoria y una
carpeta de uploads temporal.
"""
from dataclasses import dataclass
from datetime import date, datetime

import pytest

from config import TestingConfig
from app import create_app
from app.extensions import db
from app.models import Direccion, Usuario
from app.actividades.registro import Actor, Estado, ImagenAdjunta, RegistroActividad, Rol


@pytest.fixture
def registro_factory():
    """Crea RegistroActividad con valores por defecto razonables"""
    contador = {'id': 0}

    def _crear(**kwargs):
        contador['id'] += 1
        valores = dict(
            id=contador['id'],
            titulo=f'Actividad {contador["id"]}',
            tipo_actividad='taller',
            fecha_inicio=date(2024, 3, 1),
            id_direccion=1,
            creado_por_id=10,
            creado_por_nombre='Ana Pérez',
            creado_por_tipo=Rol.PERSONAL,
            estado=Estado.PENDIENTE,
            creado_en=datetime(2024, 1, 1, 8, 0),
        )
        if 'imagenes' in kwargs:
            kwargs['imagenes'] = tuple(
                ImagenAdjunta(url=f'/static/uploads/actividades/{n}', nombre_original=n)
                if isinstance(n, str) else n
                for n in kwargs['imagenes']
            )
        valores.update(kwargs)
        return RegistroActividad(**valores)

    return _crear


@pytest.fixture
def actores():
    """Actores de dos direcciones (1 y 2) y un super administrador"""
    return {
        'superadmin': Actor(id=1, nombre='Admin', rol=Rol.SUPERADMIN),
        'directivo': Actor(id=2, nombre='Carlos López', rol=Rol.DIRECTIVO, id_direccion=1),
        'personal_a': Actor(id=10, nombre='Ana Pérez', rol=Rol.PERSONAL, id_direccion=1),
        'personal_b': Actor(id=11, nombre='Beatriz Ruiz', rol=Rol.PERSONAL, id_direccion=1),
        'personal_otra': Actor(id=20, nombre='Diego Mora', rol=Rol.PERSONAL, id_direccion=2),
    }


@pytest.fixture
def app(tmp_path):
    static = tmp_path / 'static'

    class ConfigPrueba(TestingConfig):
        STATIC_PATH = str(static)
        UPLOAD_FOLDER = str(static / 'uploads')

    app = create_app(ConfigPrueba)
    # Cada petición del cliente necesita su propio g; Flask-Login guarda ahí el usuario
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@dataclass
class Datos:
    rectoria: int
    academica: int
    superadmin: int
    directivo: int
    personal_a: int
    personal_b: int
    personal_otra: int


@pytest.fixture
def datos(app):
    """Dos direcciones con un directivo, dos personas de personal y un super admin"""
    with app.app_context():
        rectoria = Direccion(nombre='Rectoría')
        academica = Direccion(nombre='Dirección Académica')
        db.session.add_all([rectoria, academica])
        db.session.flush()

        usuarios = {
            'superadmin': Usuario(nombre='Admin', rol='superadmin'),
            'directivo': Usuario(nombre='Carlos López', rol='directivo', cargo='Director', id_direccion=rectoria.id),
            'personal_a': Usuario(nombre='Ana Pérez', rol='personal', id_direccion=rectoria.id),
            'personal_b': Usuario(nombre='Beatriz Ruiz', rol='personal', id_direccion=rectoria.id),
            'personal_otra': Usuario(nombre='Diego Mora', rol='personal', id_direccion=academica.id),
        }
        db.session.add_all(usuarios.values())
        db.session.commit()

        return Datos(
            rectoria=rectoria.id,
            academica=academica.id,
            **{clave: u.id for clave, u in usuarios.items()}
        )


@pytest.fixture
def como(app):
    """Cabeceras de identidad para actuar como un usuario"""
    def _como(id_usuario):
        return {app.config['IDENTITY_HEADER']: str(id_usuario)}
    return _como
