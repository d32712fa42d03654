from app.actividades.errores import ErrorAutorizacion
from app.actividades.politica import puede_cambiar_estado
from app.actividades.registro import Estado


def cambiar_estado(registro, nuevo_estado, actor):
    """
    Transición de estado protegida por la política.

    Los tres estados no tienen orden: cualquier salto está permitido
    (incluido completada -> pendiente) siempre que lo haga el creador.
    """
    if not puede_cambiar_estado(actor, registro):
        raise ErrorAutorizacion('cambiar_estado', ErrorAutorizacion.NO_ES_CREADOR,
                                'Solo el creador puede cambiar el estado de la actividad')
    return registro.con_estado(Estado.desde_valor(nuevo_estado))
