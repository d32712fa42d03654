from datetime import datetime
from flask import Blueprint, jsonify, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.extensions import db

main_bp = Blueprint('main', __name__, url_prefix='/api')


@main_bp.route('/test')
def test():
    """Verifica que la API y la conexión a la base de datos respondan"""
    try:
        resultado = db.session.execute(text('SELECT 1 + 1')).scalar()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error de conexión a la base de datos: {str(e)}")
        return jsonify({'status': 'error', 'message': 'Error de conexión a la base de datos'}), 500
    return jsonify({
        'status': 'success',
        'message': 'API funcionando correctamente',
        'db_test': resultado,
        'timestamp': datetime.utcnow().isoformat()
    }), 200
