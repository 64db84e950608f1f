"""Error catalog for document downloads."""

from __future__ import annotations

from lexwatch.catalogs.common import NETWORK_ERROR_MESSAGE
from lexwatch.core.errors import DescriptorTemplate, ErrorCatalog, ErrorKind

FILES = ErrorCatalog(
    name="files",
    message_to_kind={NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK},
    descriptors={
        ErrorKind.NETWORK: DescriptorTemplate(
            title="Error de conexión",
            message="Error de conexión durante la descarga. Verifique su conexión a internet.",
        ),
        ErrorKind.BAD_REQUEST: DescriptorTemplate(
            title="Solicitud incorrecta",
            message="El enlace de descarga es incorrecto. Recargue la página e intente de nuevo.",
        ),
        ErrorKind.FORBIDDEN: DescriptorTemplate(
            title="Acceso denegado",
            message="El enlace ha expirado o no tienes permisos para descargar el documento. "
            "Intente de nuevo.",
        ),
        ErrorKind.NOT_FOUND: DescriptorTemplate(
            title="Documento no encontrado",
            message="El documento solicitado no existe. Recargue la página e intente de nuevo.",
        ),
        ErrorKind.REQUEST_TIMEOUT: DescriptorTemplate(
            title="Tiempo de espera excedido",
            message="La descarga tardó demasiado en completarse. Intente nuevamente.",
        ),
        ErrorKind.PAYLOAD_TOO_LARGE: DescriptorTemplate(
            title="Documento demasiado grande",
            message="El documento excede el tamaño permitido. "
            "Contacte a los administradores del sistema.",
        ),
        ErrorKind.SERVER: DescriptorTemplate(
            title="Error en el servidor",
            message="Hubo un problema en el servidor. Intente más tarde nuevamente.",
        ),
        ErrorKind.UNEXPECTED: DescriptorTemplate(
            title="Error inesperado",
            message="Ocurrió un error inesperado. Intente nuevamente.",
        ),
    },
    http_fallback={
        400: ErrorKind.BAD_REQUEST,
        403: ErrorKind.FORBIDDEN,
        404: ErrorKind.NOT_FOUND,
        408: ErrorKind.REQUEST_TIMEOUT,
        413: ErrorKind.PAYLOAD_TOO_LARGE,
        500: ErrorKind.SERVER,
    },
    # A download link always points at exactly one document
    not_found_default=ErrorKind.NOT_FOUND,
)
