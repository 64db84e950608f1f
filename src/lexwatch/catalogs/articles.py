"""Error catalog for article management.

Like aspects, a bare 404 refers to a single article.
"""

from __future__ import annotations

from lexwatch.catalogs import common
from lexwatch.catalogs.common import NETWORK_ERROR_MESSAGE, RELOAD_HINT
from lexwatch.core.errors import DescriptorTemplate, ErrorCatalog, ErrorKind

ARTICLES = ErrorCatalog(
    name="articles",
    message_to_kind={
        NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK,
        "Validation failed": ErrorKind.VALIDATION,
        "Unauthorized": ErrorKind.UNAUTHORIZED,
        "LegalBasis not found": ErrorKind.LEGAL_BASIS_NOT_FOUND,
    },
    descriptors={
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.VALIDATION: common.VALIDATION,
        ErrorKind.UNAUTHORIZED: common.UNAUTHORIZED,
        ErrorKind.SERVER: common.SERVER,
        ErrorKind.UNEXPECTED: common.UNEXPECTED,
        ErrorKind.NOT_FOUND: DescriptorTemplate(
            title="Artículo no encontrado",
            message=f"El artículo no fue encontrado. {RELOAD_HINT}",
        ),
        ErrorKind.NOT_FOUND_MULTIPLE: DescriptorTemplate(
            title="Artículos no encontrados",
            message=f"Uno o más artículos no fueron encontrados. {RELOAD_HINT}",
        ),
        ErrorKind.LEGAL_BASIS_NOT_FOUND: DescriptorTemplate(
            title="Fundamento legal no encontrado",
            message=f"El fundamento legal seleccionado no fue encontrado. {RELOAD_HINT}",
        ),
    },
    not_found_default=ErrorKind.NOT_FOUND,
)
