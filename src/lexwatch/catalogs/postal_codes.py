"""Error catalog for the external postal-code provider.

FETCH_STATES_ERROR and FETCH_MUNICIPALITIES_ERROR are never produced by a
phrase or status code; callers that know which lookup failed request them
directly through ``ErrorClassifier.describe``.
"""

from __future__ import annotations

from lexwatch.catalogs import common
from lexwatch.catalogs.common import NETWORK_ERROR_MESSAGE
from lexwatch.core.errors import DescriptorTemplate, ErrorCatalog, ErrorKind

_CONTACT_ADMINS = "Por favor, comuníquese con los administradores del sistema."

POSTAL_CODES = ErrorCatalog(
    name="postal_codes",
    message_to_kind={NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK},
    descriptors={
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.SERVER: DescriptorTemplate(
            title="Error en el servidor",
            message="Hubo un error en el servidor. Espere un momento e intente nuevamente.",
        ),
        ErrorKind.UNEXPECTED: common.UNEXPECTED,
        ErrorKind.FETCH_STATES_ERROR: DescriptorTemplate(
            title="Error obteniendo estados",
            message=f"Hubo un error al obtener los estados. {_CONTACT_ADMINS}",
        ),
        ErrorKind.FETCH_MUNICIPALITIES_ERROR: DescriptorTemplate(
            title="Error obteniendo municipios",
            message=f"Hubo un error al obtener los municipios del estado. {_CONTACT_ADMINS}",
        ),
        ErrorKind.GENERIC_ERROR: DescriptorTemplate(
            title="Error",
            message=f"Hubo un error al obtener los estados y municipios. {_CONTACT_ADMINS}",
        ),
    },
    http_fallback={
        400: ErrorKind.GENERIC_ERROR,
        500: ErrorKind.SERVER,
        503: ErrorKind.SERVER,
    },
)
