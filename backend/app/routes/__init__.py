from .main import main_bp
from .actividades import actividades_bp
from .administracion import administracion_bp
from .errores import register_error_handlers
from app.extensions import csrf


def register_blueprints(app):
    app.register_blueprint(main_bp)
    app.register_blueprint(actividades_bp)
    app.register_blueprint(administracion_bp)

    # La API se identifica por cabecera, no por cookie de sesión
    csrf.exempt(actividades_bp)
    csrf.exempt(administracion_bp)

    register_error_handlers(app)
