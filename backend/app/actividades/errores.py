"""Errores del motor de actividades.

Cada rechazo nombra la restricción violada para que la capa de presentación
pueda mostrar un mensaje preciso.
"""


class ErrorActividades(Exception):
    """Base de todos los errores del dominio de actividades"""


class ErrorValidacion(ErrorActividades):

    # motivos
    TITULO_VACIO = 'titulo_vacio'
    TIPO_VACIO = 'tipo_vacio'
    TIPO_DEMASIADO_LARGO = 'tipo_demasiado_largo'
    FECHA_REQUERIDA = 'fecha_requerida'
    FECHA_FUERA_DE_RANGO = 'fecha_fuera_de_rango'
    FECHA_FIN_ANTERIOR = 'fecha_fin_anterior'
    DESCRIPCION_DEMASIADO_LARGA = 'descripcion_demasiado_larga'
    DEMASIADAS_IMAGENES = 'demasiadas_imagenes'
    IMAGEN_DEMASIADO_GRANDE = 'imagen_demasiado_grande'
    TIPO_IMAGEN_INVALIDO = 'tipo_imagen_invalido'
    ESTADO_INVALIDO = 'estado_invalido'
    DIRECCION_INEXISTENTE = 'direccion_inexistente'
    DIRECCION_DUPLICADA = 'direccion_duplicada'
    EMAIL_DUPLICADO = 'email_duplicado'
    NOMBRE_VACIO = 'nombre_vacio'
    ROL_INVALIDO = 'rol_invalido'
    TIPO_DATO_INVALIDO = 'tipo_dato_invalido'

    def __init__(self, campo, motivo, mensaje=None):
        self.campo = campo
        self.motivo = motivo
        self.mensaje = mensaje or f'{campo}: {motivo}'
        super().__init__(self.mensaje)

    def to_dict(self):
        return {'campo': self.campo, 'motivo': self.motivo, 'message': self.mensaje}


class ErrorAutorizacion(ErrorActividades):

    NO_ES_CREADOR = 'no_es_creador'
    NO_PERMITIDO = 'no_permitido'

    def __init__(self, accion, motivo=NO_PERMITIDO, mensaje=None):
        self.accion = accion
        self.motivo = motivo
        self.mensaje = mensaje or f'No autorizado para {accion}'
        super().__init__(self.mensaje)

    def to_dict(self):
        return {'accion': self.accion, 'motivo': self.motivo, 'message': self.mensaje}


class ErrorNoEncontrado(ErrorActividades):

    def __init__(self, id, entidad='actividad'):
        self.id = id
        self.entidad = entidad
        self.mensaje = f'No existe {entidad} con id {id}'
        super().__init__(self.mensaje)

    def to_dict(self):
        return {'id': self.id, 'entidad': self.entidad, 'message': self.mensaje}


class ErrorInfraestructura(ErrorActividades):
    """Fallo de persistencia o almacenamiento; se propaga sin reintentos"""

    def __init__(self, mensaje, causa=None):
        self.mensaje = mensaje
        self.causa = causa
        super().__init__(mensaje)

    def to_dict(self):
        return {'message': self.mensaje}
