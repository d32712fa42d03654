from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, DateField, MultipleFileField, SelectField, IntegerField
from wtforms.validators import Optional

from app.actividades.filtros import FiltroActividades
from app.actividades.registro import DatosActividad, Estado, Rol


class ActividadForm(FlaskForm):
    """
    Solo interpreta la petición (multipart o JSON). Las reglas de negocio se
    validan después en validar_creacion, en su orden fijo.
    """
    class Meta:
        csrf = False

    titulo = StringField('Título', validators=[Optional()])
    tipo_actividad = StringField('Tipo de actividad', validators=[Optional()])
    descripcion = TextAreaField('Descripción', validators=[Optional()])
    fecha_inicio = DateField('Fecha de inicio', validators=[Optional()])
    fecha_fin = DateField('Fecha de fin', validators=[Optional()])
    imagenes = MultipleFileField('Imágenes', validators=[Optional()])

    def archivos(self):
        return [f for f in (self.imagenes.data or []) if getattr(f, 'filename', None)]

    def a_datos(self):
        return DatosActividad(
            titulo=self.titulo.data or '',
            tipo_actividad=self.tipo_actividad.data or '',
            descripcion=self.descripcion.data or None,
            fecha_inicio=self.fecha_inicio.data,
            fecha_fin=self.fecha_fin.data,
        )


class EstadoForm(FlaskForm):
    class Meta:
        csrf = False

    estado = StringField('Estado', validators=[Optional()])


class FiltroActividadesForm(FlaskForm):
    class Meta:
        csrf = False

    direccion = IntegerField('Dirección', validators=[Optional()])
    creador_tipo = SelectField('Tipo de Creador', choices=[
        ('', 'Todos los Tipos'),
        ('personal', 'Personal'),
        ('directivo', 'Directivo')
    ], validators=[Optional()])
    estado = SelectField('Estado', choices=[
        ('', 'Todos los Estados'),
        ('pendiente', 'Pendiente'),
        ('en_progreso', 'En Progreso'),
        ('completada', 'Completada')
    ], validators=[Optional()])
    fecha_inicio = DateField('Fecha Desde', validators=[Optional()])
    fecha_fin = DateField('Fecha Hasta', validators=[Optional()])
    tipo_actividad = StringField('Tipo de actividad', validators=[Optional()])

    def a_filtro(self):
        return FiltroActividades(
            id_direccion=self.direccion.data,
            creador_tipo=Rol(self.creador_tipo.data) if self.creador_tipo.data else None,
            estado=Estado(self.estado.data) if self.estado.data else None,
            fecha_desde=self.fecha_inicio.data,
            fecha_hasta=self.fecha_fin.data,
            tipo_actividad=self.tipo_actividad.data or None,
        )
