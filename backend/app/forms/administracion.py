from flask_wtf import FlaskForm
from wtforms import StringField, SelectField, IntegerField
from wtforms.validators import DataRequired, Length, Optional, Email


class DireccionForm(FlaskForm):
    class Meta:
        csrf = False

    nombre = StringField('Nombre', validators=[DataRequired(message='El nombre es requerido'), Length(max=150)])


class UsuarioForm(FlaskForm):
    class Meta:
        csrf = False

    nombre = StringField('Nombre completo', validators=[DataRequired(message='El nombre es requerido'), Length(max=150)])
    email = StringField('Email', validators=[Optional(), Email(message='Email inválido'), Length(max=120)])
    rol = SelectField('Rol', choices=[
        ('directivo', 'Directivo'),
        ('personal', 'Personal'),
        ('superadmin', 'Super Administrador')
    ], validators=[DataRequired()])
    cargo = StringField('Cargo / Puesto', validators=[Optional(), Length(max=100)])
    id_direccion = IntegerField('Dirección', validators=[Optional()])
