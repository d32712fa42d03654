import os
import sys

# El paquete 'app' y config.py viven en backend/
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'backend'))

from app import create_app

# Instancia para Gunicorn: gunicorn wsgi:app
app = create_app()
