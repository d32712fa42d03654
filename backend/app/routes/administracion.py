from flask import Blueprint, jsonify, request

from app.forms import DireccionForm, UsuarioForm
from app.routes.actividades import datos_formulario, error_formulario
from app.services import direccion_service, usuario_service
from app.utils.decorators import roles_required, actor_actual

administracion_bp = Blueprint('administracion', __name__, url_prefix='/api')


# ========== DIRECCIONES ==========
@administracion_bp.route('/direcciones')
@roles_required('superadmin', 'directivo', 'personal')
def listar_direcciones():
    direcciones = direccion_service.listar_direcciones()
    return jsonify({'status': 'success', 'data': [d.to_dict() for d in direcciones]}), 200


@administracion_bp.route('/direcciones', methods=['POST'])
@roles_required('superadmin')
def crear_direccion():
    form = DireccionForm(formdata=datos_formulario())
    if not form.validate():
        return error_formulario(form)

    direccion = direccion_service.crear_direccion(actor_actual(), form.nombre.data)
    return jsonify({
        'status': 'success',
        'message': 'Dirección creada exitosamente',
        'data': direccion.to_dict()
    }), 201


@administracion_bp.route('/direcciones/<int:id>', methods=['PUT'])
@roles_required('superadmin')
def renombrar_direccion(id):
    form = DireccionForm(formdata=datos_formulario())
    if not form.validate():
        return error_formulario(form)

    direccion = direccion_service.renombrar_direccion(actor_actual(), id, form.nombre.data)
    return jsonify({
        'status': 'success',
        'message': 'Dirección actualizada',
        'data': direccion.to_dict()
    }), 200


# ========== USUARIOS (DIRECTIVOS Y PERSONAL) ==========
@administracion_bp.route('/usuarios')
@roles_required('superadmin')
def listar_usuarios():
    usuarios = usuario_service.listar_usuarios(
        rol=request.args.get('rol'),
        id_direccion=request.args.get('id_direccion', type=int)
    )
    return jsonify({'status': 'success', 'data': [u.to_dict() for u in usuarios]}), 200


@administracion_bp.route('/usuarios', methods=['POST'])
@roles_required('superadmin')
def crear_usuario():
    form = UsuarioForm(formdata=datos_formulario(numericos=('id_direccion',)))
    if not form.validate():
        return error_formulario(form)

    usuario = usuario_service.crear_usuario(
        actor_actual(),
        nombre=form.nombre.data,
        rol=form.rol.data,
        id_direccion=form.id_direccion.data,
        email=form.email.data or None,
        cargo=form.cargo.data or None
    )
    return jsonify({
        'status': 'success',
        'message': 'Usuario creado exitosamente',
        'data': usuario.to_dict()
    }), 201


# ========== ESTADÍSTICAS BÁSICAS ==========
@administracion_bp.route('/estadisticas')
@roles_required('superadmin')
def estadisticas():
    return jsonify({'status': 'success', 'data': usuario_service.estadisticas_sistema()}), 200
