"""Error catalog for legal basis management."""

from __future__ import annotations

from lexwatch.catalogs import common
from lexwatch.catalogs.common import NETWORK_ERROR_MESSAGE, RELOAD_HINT
from lexwatch.core.errors import DescriptorTemplate, ErrorCatalog, ErrorKind, pluralized

LEGAL_BASIS = ErrorCatalog(
    name="legal_basis",
    message_to_kind={
        NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK,
        "LegalBasis already exists": ErrorKind.DUPLICATED_NAME,
        "A document must be provided if extractArticles is true": ErrorKind.DOCUMENT_REQUIRED,
        "Cannot provide a document if removeDocument is true": ErrorKind.DOCUMENT_CONFLICT,
        "The document cannot be removed because there are pending jobs for this Legal Basis":
            ErrorKind.REMOVE_DOCUMENT_PENDING_CONFLICT,
        "Articles cannot be extracted because there is already a process that does so":
            ErrorKind.ARTICLES_EXTRACTION_CONFLICT,
        "A new document cannot be uploaded because there are pending jobs for this Legal Basis":
            ErrorKind.NEW_DOCUMENT_PENDING_CONFLICT,
        "Subject not found": ErrorKind.SUBJECT_NOT_FOUND,
        "Aspects not found for IDs": ErrorKind.ASPECTS_NOT_FOUND,
        "Cannot delete LegalBasis with pending jobs": ErrorKind.PENDING_JOBS_CONFLICT,
        "Cannot delete Legal Bases with pending jobs": ErrorKind.MULTIPLE_PENDING_JOBS_CONFLICT,
    },
    descriptors={
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.UNAUTHORIZED: common.UNAUTHORIZED,
        ErrorKind.SERVER: common.SERVER,
        ErrorKind.VALIDATION: common.VALIDATION,
        ErrorKind.CONFLICT: common.CONFLICT,
        ErrorKind.UNEXPECTED: common.UNEXPECTED,
        ErrorKind.SUBJECT_NOT_FOUND: common.SUBJECT_NOT_FOUND,
        ErrorKind.ASPECTS_NOT_FOUND: common.ASPECTS_NOT_FOUND,
        ErrorKind.NOT_FOUND: DescriptorTemplate(
            title="Fundamento legal no encontrado",
            message=f"El fundamento legal no fue encontrado. {RELOAD_HINT}",
        ),
        ErrorKind.NOT_FOUND_MULTIPLE: DescriptorTemplate(
            title="Varios fundamentos legales no encontrados",
            message=f"Uno o más fundamentos legales no fueron encontrados. {RELOAD_HINT}",
        ),
        ErrorKind.DUPLICATED_NAME: DescriptorTemplate(
            title="Nombre duplicado",
            message="Ya existe un fundamento legal con el mismo nombre. Por favor, utiliza otro.",
        ),
        ErrorKind.DOCUMENT_REQUIRED: DescriptorTemplate(
            title="Documento requerido",
            message="Debe proporcionarse un documento si se desea extraer artículos.",
        ),
        ErrorKind.PENDING_JOBS_CONFLICT: DescriptorTemplate(
            title="Conflicto con trabajos pendientes",
            message="El fundamento legal no puede ser eliminado porque en este momento "
            "se están extrayendo artículos de su documento asociado.",
        ),
        ErrorKind.MULTIPLE_PENDING_JOBS_CONFLICT: DescriptorTemplate(
            title="Conflicto con trabajos pendientes",
            message=pluralized(
                one=lambda item: f"El fundamento legal {item} no puede ser eliminado porque "
                "se están extrayendo artículos de su documento asociado.",
                many=lambda items: f"Los fundamentos legales {items} no pueden ser eliminados "
                "porque se están extrayendo artículos de sus documentos asociados.",
                none="Uno o más fundamentos legales no pueden ser eliminados porque "
                "se están extrayendo artículos de sus documentos asociados.",
            ),
        ),
        ErrorKind.ARTICLES_EXTRACTION_CONFLICT: DescriptorTemplate(
            title="Conflicto de extracción de artículos",
            message="No se pueden extraer artículos en este momento porque ya se están "
            "extrayendo artículos de su documento asociado.",
        ),
        ErrorKind.DOCUMENT_CONFLICT: DescriptorTemplate(
            title="Conflicto con el documento",
            message="No se puede proporcionar un documento si desea eliminarlo.",
        ),
        ErrorKind.REMOVE_DOCUMENT_PENDING_CONFLICT: DescriptorTemplate(
            title="Conflicto al eliminar el documento",
            message="El documento no puede ser eliminado porque en este momento "
            "se están extrayendo artículos de su documento asociado.",
        ),
        ErrorKind.NEW_DOCUMENT_PENDING_CONFLICT: DescriptorTemplate(
            title="Conflicto al subir un nuevo documento",
            message="No se puede subir un nuevo documento porque en este momento "
            "se están extrayendo artículos de su documento asociado.",
        ),
    },
)
