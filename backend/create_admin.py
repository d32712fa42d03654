import sys

from app import create_app
from app.extensions import db
from app.models import Usuario
from app.services.usuario_service import crear_superadmin
from app.actividades.errores import ErrorActividades

NOMBRE_SUPERADMIN = "Super Administrador"
EMAIL_SUPERADMIN = "admin@stride.local"

app = create_app()

with app.app_context():
    db.create_all()

    # Verificar si ya existe un super administrador
    if Usuario.query.filter_by(rol='superadmin').first():
        print("El super administrador ya existe.")
        sys.exit(0)

    try:
        admin = crear_superadmin(NOMBRE_SUPERADMIN, email=EMAIL_SUPERADMIN)
    except ErrorActividades as e:
        print(f"Error al crear el super administrador: {str(e)}")
        sys.exit(1)

    print("\n¡Usuario creado exitosamente!")
    print("=================================")
    print("Rol: Super Administrador")
    print(f"ID: {admin.id}")
    print(f"Email: {admin.email}")
    print(f"Envíe la cabecera {app.config['IDENTITY_HEADER']}: {admin.id} en cada petición")
