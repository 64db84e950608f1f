"""Error catalogs for the background job endpoints.

Each job type reports failures through its status payload's ``error`` field
or through the HTTP status of the status request itself. Job endpoints treat
400 as an invalid request and never pluralize 404: an unknown job id means
the job was cancelled earlier.
"""

from __future__ import annotations

from lexwatch.catalogs import common
from lexwatch.catalogs.common import NETWORK_ERROR_MESSAGE
from lexwatch.core.errors import DescriptorTemplate, ErrorCatalog, ErrorKind

_JOB_HTTP_FALLBACK = {
    400: ErrorKind.INVALID_REQUEST,
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.UNAUTHORIZED,
    500: ErrorKind.SERVER,
}

_CLOSE_AND_RETRY = "Si necesita realizar esta operación, cierre esta ventana e intente"


SEND_LEGAL_BASIS = ErrorCatalog(
    name="send_legal_basis",
    message_to_kind={
        NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK,
        "Job not found": ErrorKind.JOB_NOT_FOUND,
        "Unexpected error sending legal basis": ErrorKind.UNEXPECTED,
    },
    descriptors={
        ErrorKind.INVALID_REQUEST: common.INVALID_REQUEST,
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.UNAUTHORIZED: common.JOB_UNAUTHORIZED,
        ErrorKind.JOB_NOT_FOUND: DescriptorTemplate(
            title="Envió de fundamentos legales cancelado anteriormente",
            message="El envió de fundamentos legales fue cancelado anteriormente. "
            f"{_CLOSE_AND_RETRY} nuevamente.",
        ),
        ErrorKind.SERVER: common.SERVER,
        ErrorKind.UNEXPECTED: common.UNEXPECTED,
        ErrorKind.CONFLICT: common.CONFLICT,
    },
    http_fallback={**_JOB_HTTP_FALLBACK, 404: ErrorKind.JOB_NOT_FOUND},
)


EXTRACT_ARTICLES = ErrorCatalog(
    name="extract_articles",
    message_to_kind={
        NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK,
        "Job not found": ErrorKind.JOB_NOT_FOUND,
        "LegalBasis not found": ErrorKind.LEGAL_BASIS_NOT_FOUND,
        "Invalid document: missing buffer or mimetype": ErrorKind.INVALID_DOCUMENT,
        "Document Processing Error": ErrorKind.DOCUMENT_PROCESSING_ERROR,
        "Invalid Classification": ErrorKind.INVALID_CLASSIFICATION,
        "Article Processing Error": ErrorKind.ARTICLE_PROCESSING_ERROR,
        "Failed to insert articles": ErrorKind.FAILED_TO_INSERT_ARTICLES,
        "Job was canceled": ErrorKind.JOB_CANCELED,
        "Unexpected error during article processing": ErrorKind.UNEXPECTED,
    },
    descriptors={
        ErrorKind.INVALID_REQUEST: common.INVALID_REQUEST,
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.UNAUTHORIZED: common.JOB_UNAUTHORIZED,
        ErrorKind.JOB_NOT_FOUND: DescriptorTemplate(
            title="Extracción de artículos cancelada anteriormente",
            message="La extracción de artículos fue cancelada anteriormente. "
            f"{_CLOSE_AND_RETRY} nuevamente.",
        ),
        ErrorKind.LEGAL_BASIS_NOT_FOUND: DescriptorTemplate(
            title="Fundamento legal no encontrado",
            message=f"Fundamento legal no encontrado. {common.RELOAD_HINT}",
        ),
        ErrorKind.SERVER: DescriptorTemplate(
            title="Error interno del servidor",
            message="Hubo un problema en el servidor. Por favor, intente nuevamente más tarde.",
        ),
        ErrorKind.UNEXPECTED: DescriptorTemplate(
            title="Error inesperado",
            message="Se produjo un error inesperado durante la extracción de articulos. "
            "Por favor, intente nuevamente más tarde.",
        ),
        ErrorKind.INVALID_DOCUMENT: DescriptorTemplate(
            title="Documento inválido",
            message="El documento proporcionado no es válido o está incompleto. "
            "Asegúrese de cargar un documento válido.",
        ),
        ErrorKind.DOCUMENT_PROCESSING_ERROR: DescriptorTemplate(
            title="Error al procesar el documento",
            message="Hubo un problema procesando el documento. "
            "Por favor, revise el documento y vuelva a intentarlo.",
        ),
        ErrorKind.INVALID_CLASSIFICATION: DescriptorTemplate(
            title="Clasificación inválida",
            message="La clasificación proporcionada no es válida. "
            "Seleccione una clasificación válida e intente nuevamente.",
        ),
        ErrorKind.ARTICLE_PROCESSING_ERROR: DescriptorTemplate(
            title="Error al procesar los artículos",
            message="No se pudieron extraer los artículos del documento. "
            "Verifique el documento proporcionado e intente nuevamente.",
        ),
        ErrorKind.FAILED_TO_INSERT_ARTICLES: DescriptorTemplate(
            title="Error al guardar los artículos",
            message="Hubo un problema al intentar guardar los artículos extraídos. "
            "Por favor, intente nuevamente.",
        ),
        ErrorKind.JOB_CANCELED: DescriptorTemplate(
            title="Extracción de artículos cancelada",
            message=f"La extracción de artículos fue cancelada. {_CLOSE_AND_RETRY} de nuevo.",
        ),
    },
    http_fallback=_JOB_HTTP_FALLBACK,
)


REQ_IDENTIFY = ErrorCatalog(
    name="req_identify",
    message_to_kind={
        NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK,
        "Job not found": ErrorKind.JOB_NOT_FOUND,
        "Unexpected error identifying requirements": ErrorKind.UNEXPECTED,
    },
    descriptors={
        ErrorKind.INVALID_REQUEST: common.INVALID_REQUEST,
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.UNAUTHORIZED: common.JOB_UNAUTHORIZED,
        ErrorKind.JOB_NOT_FOUND: DescriptorTemplate(
            title="Identificación de requerimientos cancelada",
            message="La identificación de requerimientos fue cancelada anteriormente. "
            "Cierre esta ventana e intente nuevamente.",
        ),
        ErrorKind.SERVER: DescriptorTemplate(
            title="Error del servidor",
            message="Hubo un error interno en el servidor. "
            "Espere un momento e intente nuevamente.",
        ),
        ErrorKind.UNEXPECTED: common.UNEXPECTED,
    },
    http_fallback=_JOB_HTTP_FALLBACK,
)
