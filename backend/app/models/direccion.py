from app.extensions import db
from datetime import datetime
from sqlalchemy.orm import validates

from app.actividades.registro import UnidadOrganizacional


class Direccion(db.Model):
    __tablename__ = 'direcciones'

    id = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.String(150), nullable=False, unique=True)
    creado_en = db.Column(db.DateTime, default=datetime.utcnow)

    # Relaciones
    usuarios = db.relationship('Usuario', back_populates='direccion')
    actividades = db.relationship('Actividad', back_populates='direccion')

    @validates('nombre')
    def validate_nombre(self, key, nombre):
        if not nombre or not nombre.strip():
            raise ValueError("El nombre de la dirección es requerido")
        return nombre.strip()

    def a_unidad(self):
        return UnidadOrganizacional(id=self.id, nombre=self.nombre, creado_en=self.creado_en)

    def __repr__(self):
        return f'<Direccion {self.nombre}>'
