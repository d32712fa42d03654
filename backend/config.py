import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

class Config:
    # 1. Configuración de rutas base
    BASE_DIR = Path(__file__).resolve().parent.parent
    FRONTEND_DIR = BASE_DIR / 'frontend'
    BACKEND_DIR = BASE_DIR / 'backend'

    # 2. Configuración de rutas
    STATIC_PATH = str(FRONTEND_DIR / 'static')
    UPLOAD_FOLDER = str(FRONTEND_DIR / 'static' / 'uploads')

    # 3. Configuración esencial
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-key-segura-123")

    # 4. Base de datos
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI", f"sqlite:///{BACKEND_DIR}/app.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = os.getenv("SQLALCHEMY_ECHO", "False").lower() == "true"

    # 5. Configuración de seguridad
    WTF_CSRF_ENABLED = True

    # 6. Configuración CORS
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")

    # 7. Identidad: cabecera con el id del usuario autenticado por el proveedor externo
    IDENTITY_HEADER = os.getenv("IDENTITY_HEADER", "X-Usuario-Id")

    # 8. Configuración de desarrollo
    DEBUG = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # 9. Subcarpetas para uploads
    UPLOAD_SUBFOLDERS = {
        'actividades': 'actividades'
    }

    # 10. Configuración de archivos
    MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB por imagen
    MAX_IMAGENES = 5
    MAX_CONTENT_LENGTH = MAX_IMAGENES * MAX_FILE_SIZE + 1024 * 1024

    # 11. Reglas de creación de actividades
    MAX_TIPO_ACTIVIDAD = 100
    MAX_PALABRAS_DESCRIPCION = 200
    DIAS_ATRAS_PERMITIDOS = int(os.getenv("DIAS_ATRAS_PERMITIDOS", 14))
    DIAS_ADELANTE_PERMITIDOS = int(os.getenv("DIAS_ADELANTE_PERMITIDOS", 365))

    @classmethod
    def init_app(cls, app):
        """Inicialización adicional para la aplicación"""
        os.makedirs(cls.UPLOAD_FOLDER, exist_ok=True)
        for folder in cls.UPLOAD_SUBFOLDERS.values():
            os.makedirs(os.path.join(cls.UPLOAD_FOLDER, folder), exist_ok=True)

    @classmethod
    def verify_paths(cls):
        """Verifica que las rutas críticas existan"""
        required_paths = [
            cls.STATIC_PATH,
            cls.UPLOAD_FOLDER
        ]

        for path in required_paths:
            if not os.path.exists(path):
                raise RuntimeError(f"Ruta crítica no encontrada: {path}")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False
    LOG_LEVEL = "DEBUG"
