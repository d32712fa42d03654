from flask import Blueprint, request, jsonify, current_app
from werkzeug.datastructures import CombinedMultiDict, MultiDict

from app.forms import ActividadForm, EstadoForm, FiltroActividadesForm
from app.services.actividad_service import ActividadService
from app.services.repositorio import RepositorioActividades
from app.actividades.errores import ErrorValidacion
from app.actividades.registro import LimitesCreacion
from app.utils.decorators import roles_required, actor_actual
from app.utils.file_uploads import AlmacenamientoImagenes

actividades_bp = Blueprint('actividades', __name__, url_prefix='/api/actividades')


def get_actividad_service():
    return ActividadService(
        RepositorioActividades(),
        AlmacenamientoImagenes(current_app.config['UPLOAD_SUBFOLDERS']['actividades']),
        limites=LimitesCreacion.desde_config(current_app.config),
    )


def datos_formulario(numericos=()):
    """
    Datos del cuerpo como MultiDict, sea multipart o JSON (se ignoran los null).

    En JSON cada valor debe ser texto, salvo los campos de `numericos`, que
    también aceptan enteros.
    """
    if not request.is_json:
        return CombinedMultiDict([request.files, request.form])

    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ErrorValidacion('cuerpo', ErrorValidacion.TIPO_DATO_INVALIDO,
                              'El cuerpo JSON debe ser un objeto')

    datos = MultiDict()
    for campo, valor in payload.items():
        if valor is None:
            continue
        if campo in numericos and isinstance(valor, int) and not isinstance(valor, bool):
            valor = str(valor)
        if not isinstance(valor, str):
            raise ErrorValidacion(campo, ErrorValidacion.TIPO_DATO_INVALIDO,
                                  f'El campo {campo} debe enviarse como texto')
        datos.add(campo, valor)
    return datos


def error_formulario(form):
    return jsonify({
        'status': 'error',
        'message': 'Datos de la petición inválidos',
        'errores': form.errors
    }), 400


@actividades_bp.route('', methods=['POST'])
@roles_required('directivo', 'personal')
def crear_actividad():
    form = ActividadForm(formdata=datos_formulario())
    if not form.validate():
        return error_formulario(form)

    registro = get_actividad_service().crear(actor_actual(), form.a_datos(), form.archivos())
    return jsonify({
        'status': 'success',
        'message': 'Actividad creada exitosamente',
        'data': registro.to_dict()
    }), 201


@actividades_bp.route('/<int:id>/estado', methods=['PUT'])
@roles_required('superadmin', 'directivo', 'personal')
def actualizar_estado(id):
    form = EstadoForm(formdata=datos_formulario())
    registro = get_actividad_service().actualizar_estado(actor_actual(), id, form.estado.data)
    return jsonify({
        'status': 'success',
        'message': 'Estado actualizado',
        'data': registro.to_dict()
    }), 200


@actividades_bp.route('/<int:id>', methods=['DELETE'])
@roles_required('superadmin', 'directivo', 'personal')
def eliminar_actividad(id):
    resultado = get_actividad_service().eliminar(actor_actual(), id)
    return jsonify({
        'status': 'success',
        'message': 'Actividad eliminada permanentemente',
        'id': resultado.id,
        'imagenes_eliminadas': resultado.imagenes_eliminadas
    }), 200


@actividades_bp.route('/direccion/<int:id_direccion>')
@roles_required('superadmin', 'directivo', 'personal')
def listar_por_direccion(id_direccion):
    registros = get_actividad_service().listar_por_direccion(actor_actual(), id_direccion)
    return jsonify({'status': 'success', 'data': [r.to_dict() for r in registros]}), 200


@actividades_bp.route('')
@roles_required('superadmin')
def listar_todas():
    registros = get_actividad_service().listar_todas(actor_actual())
    return jsonify({'status': 'success', 'data': [r.to_dict() for r in registros]}), 200


@actividades_bp.route('/panel')
@roles_required('superadmin', 'directivo', 'personal')
def panel():
    form = FiltroActividadesForm(formdata=request.args)
    if not form.validate():
        return error_formulario(form)

    id_direccion = request.args.get('id_direccion', type=int)
    vista = get_actividad_service().panel(actor_actual(), form.a_filtro(), id_direccion=id_direccion)
    return jsonify({'status': 'success', 'data': vista.to_dict()}), 200
