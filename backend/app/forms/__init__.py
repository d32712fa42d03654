from .actividades import ActividadForm, EstadoForm, FiltroActividadesForm
from .administracion import DireccionForm, UsuarioForm

__all__ = [
    'ActividadForm',
    'EstadoForm',
    'FiltroActividadesForm',
    'DireccionForm',
    'UsuarioForm'
]
