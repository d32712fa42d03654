from dataclasses import replace
from datetime import date, datetime, timedelta

import pytest

from app.actividades.errores import ErrorAutorizacion, ErrorInfraestructura, ErrorNoEncontrado, ErrorValidacion
from app.actividades.filtros import FiltroActividades
from app.actividades.periodos import Periodo
from app.actividades.registro import (DatosActividad, Estado, ImagenAdjunta, ImagenEntrante, Rol,
                                      UnidadOrganizacional)
from app.services.actividad_service import ActividadService

HOY = date(2024, 6, 10)
AHORA = datetime(2024, 6, 10, 9, 30)


class RepositorioEnMemoria:

    def __init__(self, direcciones):
        self.direcciones = {d.id: d for d in direcciones}
        self.actividades = {}
        self.siguiente_id = 1
        self.fallar_al_guardar = False

    def obtener_actividades_por_direccion(self, id_direccion):
        return [r for r in self.actividades.values() if r.id_direccion == id_direccion]

    def obtener_direcciones(self):
        return list(self.direcciones.values())

    def obtener_direccion(self, id_direccion):
        return self.direcciones.get(id_direccion)

    def obtener(self, id_actividad):
        return self.actividades.get(id_actividad)

    def guardar(self, registro):
        if self.fallar_al_guardar:
            raise ErrorInfraestructura('base de datos caída')
        if registro.id is None:
            registro = replace(registro, id=self.siguiente_id)
            self.siguiente_id += 1
        self.actividades[registro.id] = registro
        return registro

    def eliminar(self, id_actividad):
        return self.actividades.pop(id_actividad, None) is not None


class AlmacenamientoEnMemoria:

    def __init__(self, tamanos=None):
        self.archivos = set()
        self.tamanos = tamanos or {}

    def describir(self, nombre):
        content_type = 'image/png' if nombre.endswith('.png') else 'application/octet-stream'
        return ImagenEntrante(nombre, content_type, self.tamanos.get(nombre, 2048))

    def guardar(self, archivos):
        adjuntas = []
        for nombre in archivos:
            self.archivos.add(nombre)
            adjuntas.append(ImagenAdjunta(url=f'/static/uploads/actividades/{nombre}', nombre_original=nombre))
        return adjuntas

    def eliminar(self, imagenes):
        eliminadas = 0
        for imagen in imagenes:
            if imagen.nombre_original in self.archivos:
                self.archivos.remove(imagen.nombre_original)
                eliminadas += 1
        return eliminadas


@pytest.fixture
def repositorio():
    return RepositorioEnMemoria([UnidadOrganizacional(1, 'Rectoría'), UnidadOrganizacional(2, 'Académica')])


@pytest.fixture
def almacenamiento():
    return AlmacenamientoEnMemoria()


@pytest.fixture
def servicio(repositorio, almacenamiento):
    return ActividadService(repositorio, almacenamiento, hoy=lambda: HOY, ahora=lambda: AHORA)


def datos(fecha_inicio=HOY, **kwargs):
    return DatosActividad(titulo='Feria de ciencias', tipo_actividad='evento',
                          fecha_inicio=fecha_inicio, **kwargs)


def test_crear_sella_identidad_y_estado(servicio, actores):
    registro = servicio.crear(actores['personal_a'], datos(descripcion='Stands por grado'))

    assert registro.id == 1
    assert registro.estado == Estado.PENDIENTE
    assert registro.id_direccion == 1
    assert registro.direccion_nombre == 'Rectoría'
    assert registro.creado_por_id == actores['personal_a'].id
    assert registro.creado_por_nombre == 'Ana Pérez'
    assert registro.creado_por_tipo == Rol.PERSONAL
    assert registro.creado_en == AHORA


def test_superadmin_no_crea(servicio, actores):
    with pytest.raises(ErrorAutorizacion) as exc:
        servicio.crear(actores['superadmin'], datos())
    assert exc.value.motivo == ErrorAutorizacion.NO_PERMITIDO


def test_crear_en_direccion_inexistente(servicio, actores):
    actor = replace(actores['personal_a'], id_direccion=99)
    with pytest.raises(ErrorValidacion) as exc:
        servicio.crear(actor, datos())
    assert exc.value.motivo == ErrorValidacion.DIRECCION_INEXISTENTE


def test_validacion_falla_antes_de_subir_imagenes(servicio, almacenamiento, repositorio, actores):
    with pytest.raises(ErrorValidacion) as exc:
        servicio.crear(actores['personal_a'], datos(fecha_inicio=HOY - timedelta(days=15)), ['a.png'])
    assert exc.value.motivo == ErrorValidacion.FECHA_FUERA_DE_RANGO
    assert almacenamiento.archivos == set()
    assert repositorio.actividades == {}


def test_limites_de_imagenes_sobre_los_archivos_recibidos(servicio, almacenamiento, repositorio, actores):
    # Metadatos declarados vacíos: cuentan los archivos que se van a guardar
    sin_metadatos = datos(imagenes=())

    with pytest.raises(ErrorValidacion) as exc:
        servicio.crear(actores['personal_a'], sin_metadatos, [f'{i}.png' for i in range(9)])
    assert exc.value.motivo == ErrorValidacion.DEMASIADAS_IMAGENES

    with pytest.raises(ErrorValidacion) as exc:
        servicio.crear(actores['personal_a'], sin_metadatos, ['programa.exe'])
    assert exc.value.motivo == ErrorValidacion.TIPO_IMAGEN_INVALIDO

    assert almacenamiento.archivos == set()
    assert repositorio.actividades == {}


def test_imagen_demasiado_grande(repositorio, actores):
    almacenamiento = AlmacenamientoEnMemoria(tamanos={'plano.png': 5 * 1024 * 1024 + 1})
    servicio = ActividadService(repositorio, almacenamiento, hoy=lambda: HOY, ahora=lambda: AHORA)

    with pytest.raises(ErrorValidacion) as exc:
        servicio.crear(actores['personal_a'], datos(), ['plano.png'])
    assert exc.value.motivo == ErrorValidacion.IMAGEN_DEMASIADO_GRANDE


def test_crear_con_imagenes(servicio, almacenamiento, actores):
    registro = servicio.crear(actores['directivo'], datos(), ['a.png', 'b.png'])

    assert [img.nombre_original for img in registro.imagenes] == ['a.png', 'b.png']
    assert almacenamiento.archivos == {'a.png', 'b.png'}


def test_fallo_al_guardar_purga_imagenes(servicio, repositorio, almacenamiento, actores):
    repositorio.fallar_al_guardar = True

    with pytest.raises(ErrorInfraestructura):
        servicio.crear(actores['personal_a'], datos(), ['a.png'])
    assert almacenamiento.archivos == set()


def test_escenario_cambio_de_estado(servicio, actores):
    registro = servicio.crear(actores['personal_a'], datos())

    with pytest.raises(ErrorAutorizacion) as exc:
        servicio.actualizar_estado(actores['directivo'], registro.id, 'completada')
    assert exc.value.motivo == ErrorAutorizacion.NO_ES_CREADOR

    actualizado = servicio.actualizar_estado(actores['personal_a'], registro.id, 'completada')
    assert actualizado.estado == Estado.COMPLETADA


def test_actualizar_estado_inexistente(servicio, actores):
    with pytest.raises(ErrorNoEncontrado):
        servicio.actualizar_estado(actores['personal_a'], 42, 'completada')


def test_superadmin_elimina_y_reporta_imagenes(servicio, repositorio, almacenamiento, actores):
    registro = servicio.crear(actores['personal_b'], datos(), ['x.png', 'y.png'])

    resultado = servicio.eliminar(actores['superadmin'], registro.id)

    assert resultado.imagenes_eliminadas == 2
    assert registro.id not in repositorio.actividades
    assert almacenamiento.archivos == set()


def test_eliminar_sin_permiso_no_modifica_nada(servicio, repositorio, actores):
    registro = servicio.crear(actores['personal_b'], datos())

    with pytest.raises(ErrorAutorizacion):
        servicio.eliminar(actores['directivo'], registro.id)
    assert registro.id in repositorio.actividades

    assert servicio.eliminar(actores['personal_b'], registro.id).imagenes_eliminadas == 0


def test_listados_respetan_la_direccion(servicio, actores):
    servicio.crear(actores['personal_a'], datos())
    servicio.crear(actores['personal_otra'], datos())

    assert len(servicio.listar_por_direccion(actores['directivo'], 1)) == 1
    with pytest.raises(ErrorAutorizacion):
        servicio.listar_por_direccion(actores['directivo'], 2)
    with pytest.raises(ErrorAutorizacion):
        servicio.listar_todas(actores['directivo'])
    assert len(servicio.listar_todas(actores['superadmin'])) == 2


def test_panel_superadmin(servicio, repositorio, actores):
    a = servicio.crear(actores['personal_a'], datos(fecha_inicio=date(2024, 6, 1)))
    servicio.crear(actores['personal_a'], datos(fecha_inicio=date(2024, 6, 15)))
    servicio.crear(actores['personal_otra'], datos(fecha_inicio=date(2024, 6, 20)))
    servicio.actualizar_estado(actores['personal_a'], a.id, 'completada')

    panel = servicio.panel(actores['superadmin'])

    assert panel.periodo_actual == (2024, Periodo.MAYO_AGOSTO)
    assert panel.resumen.total == 3
    assert panel.total_sin_filtrar == 3
    assert [d.resumen.total for d in panel.por_direccion] == [2, 1]
    periodo = panel.grupos[0].periodos[0]
    assert periodo.periodo == Periodo.MAYO_AGOSTO and periodo.es_actual
    assert panel.to_dict()['periodo_actual'] == {'anio': 2024, 'periodo': 'mayo-agosto', 'etiqueta': 'Mayo - Agosto'}


def test_panel_con_filtro_y_rol_de_direccion(servicio, actores):
    a = servicio.crear(actores['personal_a'], datos())
    servicio.crear(actores['personal_b'], datos())
    servicio.crear(actores['personal_otra'], datos())
    servicio.actualizar_estado(actores['personal_a'], a.id, 'completada')

    panel = servicio.panel(actores['directivo'], FiltroActividades(estado=Estado.COMPLETADA))

    assert panel.total_sin_filtrar == 2
    assert panel.resumen.total == 1
    assert panel.resumen.efectividad == 100
    assert [c.nombre for c in panel.por_creador] == ['Ana Pérez']
