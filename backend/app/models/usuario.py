from flask_login import UserMixin
from sqlalchemy import Enum
from datetime import datetime
from app.extensions import db

from app.actividades.registro import Actor, Rol


class Usuario(UserMixin, db.Model):
    """
    Identidad de los tres roles (superadmin, directivo, personal) en una sola
    tabla, así los ids de actor no se repiten entre roles.
    """
    __tablename__ = 'usuarios'

    id = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=True)
    rol = db.Column(Enum('superadmin', 'directivo', 'personal', name='usuario_roles'), nullable=False, default='personal')
    cargo = db.Column(db.String(100), nullable=True)  # cargo del directivo o puesto del personal
    id_direccion = db.Column(db.Integer, db.ForeignKey('direcciones.id'), nullable=True)
    creado_en = db.Column(db.DateTime, default=datetime.utcnow)

    direccion = db.relationship('Direccion', back_populates='usuarios')

    def a_actor(self):
        """Convierte el usuario autenticado en el Actor que recibe el servicio"""
        return Actor(
            id=self.id,
            nombre=self.nombre,
            rol=Rol(self.rol),
            id_direccion=None if self.rol == Rol.SUPERADMIN.value else self.id_direccion,
        )

    def to_dict(self):
        return {
            'id': self.id,
            'nombre': self.nombre,
            'email': self.email,
            'rol': self.rol,
            'cargo': self.cargo,
            'id_direccion': self.id_direccion,
            'direccion_nombre': self.direccion.nombre if self.direccion else None,
            'creado_en': self.creado_en.isoformat() if self.creado_en else None,
        }

    def __repr__(self):
        return f'<Usuario {self.nombre} ({self.rol})>'
