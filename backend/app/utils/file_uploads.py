import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app, url_for

from app.actividades.errores import ErrorInfraestructura
from app.actividades.registro import ImagenAdjunta, ImagenEntrante


def get_upload_folder(subfolder='actividades'):
    """Obtiene la ruta completa de la carpeta de uploads según el subfolder"""
    upload_folder = os.path.join(current_app.config['UPLOAD_FOLDER'], subfolder)

    # Crear directorios si no existen
    os.makedirs(upload_folder, exist_ok=True)
    return upload_folder


class AlmacenamientoImagenes:
    """Colaborador de subida: guarda las imágenes de actividades y las purga al eliminar"""

    def __init__(self, subfolder='actividades'):
        self.subfolder = subfolder

    def _url(self, filename):
        return url_for('static', filename=f'uploads/{self.subfolder}/{filename}', _external=False)

    def describir(self, file):
        """Metadatos de un FileStorage (nombre, tipo MIME y tamaño en bytes) sin consumir el stream"""
        stream = file.stream
        posicion = stream.tell()
        stream.seek(0, os.SEEK_END)
        tamano = stream.tell()
        stream.seek(posicion)
        return ImagenEntrante(
            nombre_archivo=file.filename or '',
            content_type=file.mimetype or '',
            tamano=tamano,
        )

    def guardar(self, archivos):
        """Guarda cada archivo con un nombre único y devuelve sus ImagenAdjunta en orden"""
        guardadas = []
        try:
            upload_folder = get_upload_folder(self.subfolder)
            for file in archivos:
                original = file.filename or 'imagen'
                ext = original.rsplit('.', 1)[1].lower() if '.' in original else 'bin'
                unique_id = uuid.uuid4().hex[:8]
                safe_name = secure_filename(original.rsplit('.', 1)[0])[:20] or 'imagen'
                new_filename = f"{safe_name}_{unique_id}.{ext}"

                file.stream.seek(0)
                file.save(os.path.join(upload_folder, new_filename))
                guardadas.append(ImagenAdjunta(url=self._url(new_filename), nombre_original=original))
        except OSError as e:
            current_app.logger.error(f"Error guardando imagen de actividad: {str(e)}")
            self.eliminar(guardadas)
            raise ErrorInfraestructura('No se pudieron guardar las imágenes', causa=e) from e
        return guardadas

    def eliminar(self, imagenes):
        """Elimina los archivos de las imágenes; devuelve cuántos se borraron"""
        # Sin crear la carpeta: si no existe, no hay nada que borrar
        upload_folder = os.path.join(current_app.config['UPLOAD_FOLDER'], self.subfolder)
        eliminadas = 0
        for imagen in imagenes:
            filepath = os.path.join(upload_folder, os.path.basename(imagen.url))
            if not os.path.exists(filepath):
                current_app.logger.warning(f"Imagen no encontrada al eliminar: {filepath}")
                continue
            try:
                os.remove(filepath)
                eliminadas += 1
            except OSError as e:
                current_app.logger.error(f"Error eliminando imagen de actividad: {str(e)}")
        return eliminadas
