"""
Registros planos del motor de actividades y validación de creación.

Los registros son inmutables: las mutaciones (cambio de estado) devuelven una
copia nueva. La persistencia vive fuera de este paquete.
"""
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Optional, Tuple

from app.actividades.errores import ErrorValidacion
from app.actividades.periodos import fecha_en_ventana


class Rol(str, Enum):
    SUPERADMIN = 'superadmin'
    DIRECTIVO = 'directivo'
    PERSONAL = 'personal'


class Estado(str, Enum):
    PENDIENTE = 'pendiente'
    EN_PROGRESO = 'en_progreso'
    COMPLETADA = 'completada'

    @classmethod
    def desde_valor(cls, valor):
        if isinstance(valor, cls):
            return valor
        try:
            return cls(valor)
        except ValueError:
            raise ErrorValidacion('estado', ErrorValidacion.ESTADO_INVALIDO,
                                  f'Estado desconocido: {valor!r}') from None


@dataclass(frozen=True)
class UnidadOrganizacional:
    id: int
    nombre: str
    creado_en: Optional[datetime] = None

    def to_dict(self):
        return {
            'id': self.id,
            'nombre': self.nombre,
            'creado_en': self.creado_en.isoformat() if self.creado_en else None,
        }


@dataclass(frozen=True)
class Actor:
    id: int
    nombre: str
    rol: Rol
    id_direccion: Optional[int] = None

    @property
    def es_superadmin(self):
        return self.rol == Rol.SUPERADMIN


@dataclass(frozen=True)
class ImagenAdjunta:
    url: str
    nombre_original: str

    def to_dict(self):
        return {'url': self.url, 'nombre_original': self.nombre_original}


@dataclass(frozen=True)
class ImagenEntrante:
    """Metadatos de un archivo subido, antes de guardarlo"""
    nombre_archivo: str
    content_type: str
    tamano: int


@dataclass(frozen=True)
class DatosActividad:
    titulo: str
    tipo_actividad: str
    fecha_inicio: Optional[date]
    descripcion: Optional[str] = None
    fecha_fin: Optional[date] = None
    imagenes: Tuple[ImagenEntrante, ...] = ()


@dataclass(frozen=True)
class RegistroActividad:
    id: Optional[int]
    titulo: str
    tipo_actividad: str
    fecha_inicio: Optional[date]
    id_direccion: int
    creado_por_id: int
    creado_por_nombre: str
    creado_por_tipo: Rol
    estado: Estado = Estado.PENDIENTE
    descripcion: Optional[str] = None
    fecha_fin: Optional[date] = None
    imagenes: Tuple[ImagenAdjunta, ...] = ()
    creado_en: Optional[datetime] = None
    direccion_nombre: Optional[str] = None

    def con_estado(self, estado):
        return replace(self, estado=estado)

    def to_dict(self):
        return {
            'id': self.id,
            'titulo': self.titulo,
            'tipo_actividad': self.tipo_actividad,
            'descripcion': self.descripcion,
            'fecha_inicio': self.fecha_inicio.isoformat() if self.fecha_inicio else None,
            'fecha_fin': self.fecha_fin.isoformat() if self.fecha_fin else None,
            'id_direccion': self.id_direccion,
            'direccion_nombre': self.direccion_nombre,
            'creado_por_id': self.creado_por_id,
            'creado_por_nombre': self.creado_por_nombre,
            'creado_por_tipo': self.creado_por_tipo.value,
            'estado': self.estado.value,
            'imagenes': [img.to_dict() for img in self.imagenes],
            'creado_en': self.creado_en.isoformat() if self.creado_en else None,
        }


@dataclass(frozen=True)
class LimitesCreacion:
    max_tipo_actividad: int = 100
    max_palabras_descripcion: int = 200
    max_imagenes: int = 5
    max_tamano_imagen: int = 5 * 1024 * 1024
    dias_atras: int = 14
    dias_adelante: int = 365

    @classmethod
    def desde_config(cls, config):
        """Construye los límites a partir de la configuración de Flask"""
        por_defecto = cls()
        return cls(
            max_tipo_actividad=config.get('MAX_TIPO_ACTIVIDAD', por_defecto.max_tipo_actividad),
            max_palabras_descripcion=config.get('MAX_PALABRAS_DESCRIPCION', por_defecto.max_palabras_descripcion),
            max_imagenes=config.get('MAX_IMAGENES', por_defecto.max_imagenes),
            max_tamano_imagen=config.get('MAX_FILE_SIZE', por_defecto.max_tamano_imagen),
            dias_atras=config.get('DIAS_ATRAS_PERMITIDOS', por_defecto.dias_atras),
            dias_adelante=config.get('DIAS_ADELANTE_PERMITIDOS', por_defecto.dias_adelante),
        )


LIMITES = LimitesCreacion()


def contar_palabras(texto):
    return len(texto.split()) if texto else 0


def validar_creacion(datos, hoy=None, limites=LIMITES):
    """
    Valida los datos de una actividad nueva en un orden fijo.

    El primer chequeo que falla lanza ErrorValidacion con el campo y el motivo;
    si todo es válido devuelve los mismos datos.
    """
    hoy = hoy or date.today()

    # 1. Título
    if not datos.titulo or not datos.titulo.strip():
        raise ErrorValidacion('titulo', ErrorValidacion.TITULO_VACIO, 'El título es requerido')

    # 2. Tipo de actividad (texto libre)
    if not datos.tipo_actividad or not datos.tipo_actividad.strip():
        raise ErrorValidacion('tipo_actividad', ErrorValidacion.TIPO_VACIO,
                              'El tipo de actividad es requerido')
    if len(datos.tipo_actividad) > limites.max_tipo_actividad:
        raise ErrorValidacion('tipo_actividad', ErrorValidacion.TIPO_DEMASIADO_LARGO,
                              f'El tipo de actividad no puede superar {limites.max_tipo_actividad} caracteres')

    # 3. Fecha de inicio dentro de la ventana permitida
    if datos.fecha_inicio is None:
        raise ErrorValidacion('fecha_inicio', ErrorValidacion.FECHA_REQUERIDA,
                              'La fecha de inicio es requerida')
    if not fecha_en_ventana(datos.fecha_inicio, hoy, limites.dias_atras, limites.dias_adelante):
        raise ErrorValidacion('fecha_inicio', ErrorValidacion.FECHA_FUERA_DE_RANGO,
                              f'La fecha de inicio debe estar entre {limites.dias_atras} días atrás '
                              f'y {limites.dias_adelante} días adelante')

    # 4. Fecha de fin
    if datos.fecha_fin is not None and datos.fecha_fin < datos.fecha_inicio:
        raise ErrorValidacion('fecha_fin', ErrorValidacion.FECHA_FIN_ANTERIOR,
                              'La fecha de fin no puede ser anterior a la fecha de inicio')

    # 5. Descripción (en palabras, no caracteres)
    if contar_palabras(datos.descripcion) > limites.max_palabras_descripcion:
        raise ErrorValidacion('descripcion', ErrorValidacion.DESCRIPCION_DEMASIADO_LARGA,
                              f'La descripción no puede superar {limites.max_palabras_descripcion} palabras')

    # 6. Imágenes
    if len(datos.imagenes) > limites.max_imagenes:
        raise ErrorValidacion('imagenes', ErrorValidacion.DEMASIADAS_IMAGENES,
                              f'Máximo {limites.max_imagenes} imágenes por actividad')
    for imagen in datos.imagenes:
        if imagen.tamano > limites.max_tamano_imagen:
            raise ErrorValidacion('imagenes', ErrorValidacion.IMAGEN_DEMASIADO_GRANDE,
                                  f'La imagen {imagen.nombre_archivo} supera el tamaño máximo')
        if not (imagen.content_type or '').lower().startswith('image/'):
            raise ErrorValidacion('imagenes', ErrorValidacion.TIPO_IMAGEN_INVALIDO,
                                  f'El archivo {imagen.nombre_archivo} no es una imagen')

    return datos
