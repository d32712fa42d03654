from sqlalchemy import Enum
from app.extensions import db
from datetime import datetime

from app.actividades.registro import Estado, ImagenAdjunta, RegistroActividad, Rol


class Actividad(db.Model):
    __tablename__ = 'actividades'

    id = db.Column(db.Integer, primary_key=True)
    titulo = db.Column(db.String(255), nullable=False)
    tipo_actividad = db.Column(db.String(100), nullable=False)
    descripcion = db.Column(db.Text, nullable=True)
    fecha_inicio = db.Column(db.Date, nullable=True)
    fecha_fin = db.Column(db.Date, nullable=True)
    id_direccion = db.Column(db.Integer, db.ForeignKey('direcciones.id'), nullable=False)
    creado_por_id = db.Column(db.Integer, db.ForeignKey('usuarios.id'), nullable=False)
    creado_por_nombre = db.Column(db.String(150), nullable=False)
    creado_por_tipo = db.Column(Enum('superadmin', 'directivo', 'personal', name='actividad_creador_tipos'), nullable=False)
    estado = db.Column(Enum('pendiente', 'en_progreso', 'completada', name='actividad_estados'), nullable=False, default='pendiente')
    creado_en = db.Column(db.DateTime, default=datetime.utcnow)

    direccion = db.relationship('Direccion', back_populates='actividades')
    imagenes = db.relationship('ImagenActividad', back_populates='actividad',
                               order_by='ImagenActividad.posicion', cascade='all, delete-orphan')

    def a_registro(self):
        return RegistroActividad(
            id=self.id,
            titulo=self.titulo,
            tipo_actividad=self.tipo_actividad,
            descripcion=self.descripcion,
            fecha_inicio=self.fecha_inicio,
            fecha_fin=self.fecha_fin,
            id_direccion=self.id_direccion,
            direccion_nombre=self.direccion.nombre if self.direccion else None,
            creado_por_id=self.creado_por_id,
            creado_por_nombre=self.creado_por_nombre,
            creado_por_tipo=Rol(self.creado_por_tipo),
            estado=Estado(self.estado),
            imagenes=tuple(img.a_adjunta() for img in self.imagenes),
            creado_en=self.creado_en,
        )

    def __repr__(self):
        return f'<Actividad {self.titulo}>'


class ImagenActividad(db.Model):
    __tablename__ = 'imagenes_actividad'

    id = db.Column(db.Integer, primary_key=True)
    id_actividad = db.Column(db.Integer, db.ForeignKey('actividades.id', ondelete='CASCADE'), nullable=False)
    url = db.Column(db.String(500), nullable=False)
    nombre_original = db.Column(db.String(255), nullable=False)
    posicion = db.Column(db.Integer, nullable=False, default=0)

    actividad = db.relationship('Actividad', back_populates='imagenes')

    def a_adjunta(self):
        return ImagenAdjunta(url=self.url, nombre_original=self.nombre_original)

    def __repr__(self):
        return f'<ImagenActividad {self.nombre_original}>'
