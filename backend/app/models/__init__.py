from .direccion import Direccion
from .usuario import Usuario
from .actividad import Actividad, ImagenActividad


__all__=[
         'Direccion',
         'Usuario',
         'Actividad',
         'ImagenActividad',
         ]
