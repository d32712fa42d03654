from functools import wraps
from flask import jsonify
from flask_login import current_user


def roles_required(*roles):
    def wrapper(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not current_user.is_authenticated:
                return jsonify({'status': 'error', 'message': 'Debes identificarte para acceder a este recurso.'}), 401

            if current_user.rol not in roles:
                return jsonify({'status': 'error', 'message': 'Acceso denegado: no tienes permisos para acceder a este módulo.'}), 403

            return f(*args, **kwargs)
        return decorated_function
    return wrapper


def actor_actual():
    """Actor del usuario autenticado en la petición en curso"""
    return current_user.a_actor()
