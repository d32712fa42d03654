import logging
from flask import Flask, current_app, jsonify
from app.extensions import db, login_manager, migrate, csrf
from flask_cors import CORS
from config import Config
import pymysql
pymysql.install_as_MySQLdb()
from app.models import Usuario
from app.routes import register_blueprints


def create_app(config_class=Config):

    # Crear aplicación Flask; las imágenes subidas se sirven desde static/uploads
    app = Flask(
        __name__,
        static_folder=config_class.STATIC_PATH
    )

    # Cargar configuración
    app.config.from_object(config_class)
    config_class.init_app(app)
    config_class.verify_paths()

    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Iniciar extensiones
    db.init_app(app)
    migrate.init_app(app, db)

    # Identidad: el proveedor externo ya autenticó al usuario y envía su id en una cabecera
    login_manager.init_app(app)

    @login_manager.request_loader
    def load_user_from_request(req):
        user_id = req.headers.get(current_app.config['IDENTITY_HEADER'])
        if not user_id or not user_id.isdigit():
            return None
        user = db.session.get(Usuario, int(user_id))
        if user:
            current_app.logger.debug(f"DEBUG: request_loader - Usuario {user.id} ({user.rol})")
        else:
            current_app.logger.debug(f"DEBUG: request_loader - Usuario {user_id} no existe.")
        return user

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'status': 'error', 'message': 'Debes identificarte para acceder a este recurso.'}), 401

    # CORS y CSRF
    CORS(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}})
    csrf.init_app(app)

    # Registrar blueprints
    register_blueprints(app)

    # Filtrar logs de acceso para la ruta de prueba
    class NoAccessLogFilter(logging.Filter):
        def filter(self, record):
            return '/api/test' not in record.getMessage()

    werkzeug_logger = logging.getLogger('werkzeug')
    werkzeug_logger.addFilter(NoAccessLogFilter())

    # Manejadores de error
    @app.errorhandler(404)
    def page_not_found(error):
        return jsonify({'status': 'error', 'message': 'Recurso no encontrado'}), 404

    @app.errorhandler(413)
    def request_too_large(error):
        return jsonify({'status': 'error', 'message': 'La petición supera el tamaño máximo permitido'}), 413

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'status': 'error', 'message': 'Error interno del servidor'}), 500

    return app

# Entry point para CLI o ejecución directa
if __name__ == '__main__':
    app = create_app()
    app.run(debug=app.config['DEBUG'])
