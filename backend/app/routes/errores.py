from flask import jsonify, current_app

from app.extensions import db
from app.actividades.errores import ErrorValidacion, ErrorAutorizacion, ErrorNoEncontrado, ErrorInfraestructura


def register_error_handlers(app):
    """Traduce los errores del dominio a respuestas JSON"""

    @app.errorhandler(ErrorValidacion)
    def validacion(error):
        return jsonify({'status': 'error', **error.to_dict()}), 400

    @app.errorhandler(ErrorAutorizacion)
    def autorizacion(error):
        current_app.logger.warning(f"Acción denegada: {error.accion} ({error.motivo})")
        return jsonify({'status': 'error', **error.to_dict()}), 403

    @app.errorhandler(ErrorNoEncontrado)
    def no_encontrado(error):
        return jsonify({'status': 'error', **error.to_dict()}), 404

    @app.errorhandler(ErrorInfraestructura)
    def infraestructura(error):
        db.session.rollback()
        current_app.logger.error(f"Error de infraestructura: {error.mensaje}", exc_info=error.causa)
        return jsonify({'status': 'error', **error.to_dict()}), 500
