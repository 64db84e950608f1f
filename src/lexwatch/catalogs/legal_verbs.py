"""Error catalog for legal verb management.

The API reports legal-verb failures with the same phrases and codes as the
other catalog entities; the batch delete names the verbs that could not be
removed, so 404 without names falls back to the plural variant.
"""

from __future__ import annotations

from lexwatch.catalogs import common
from lexwatch.catalogs.common import NETWORK_ERROR_MESSAGE, RELOAD_HINT
from lexwatch.core.errors import DescriptorTemplate, ErrorCatalog, ErrorKind

LEGAL_VERBS = ErrorCatalog(
    name="legal_verbs",
    message_to_kind={
        NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK,
        "Legal verb already exists": ErrorKind.DUPLICATED_NAME,
        "LegalVerb already exists": ErrorKind.DUPLICATED_NAME,
    },
    descriptors={
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.VALIDATION: common.VALIDATION,
        ErrorKind.UNAUTHORIZED: common.UNAUTHORIZED,
        ErrorKind.SERVER: common.SERVER,
        ErrorKind.UNEXPECTED: common.UNEXPECTED,
        ErrorKind.NOT_FOUND: DescriptorTemplate(
            title="No encontrado",
            message=f"Verbo legal no encontrado. {RELOAD_HINT}",
        ),
        ErrorKind.NOT_FOUND_MULTIPLE: DescriptorTemplate(
            title="No encontrado",
            message=f"Uno o más verbos legales no encontrados. {RELOAD_HINT}",
        ),
        ErrorKind.DUPLICATED_NAME: DescriptorTemplate(
            title="Nombre duplicado",
            message="El nombre del verbo legal ya está en uso. Por favor, utilice otro.",
        ),
    },
)
