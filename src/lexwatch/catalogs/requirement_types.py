"""Error catalog for requirement type management."""

from __future__ import annotations

from lexwatch.catalogs import common
from lexwatch.catalogs.common import NETWORK_ERROR_MESSAGE, RELOAD_HINT
from lexwatch.core.errors import DescriptorTemplate, ErrorCatalog, ErrorKind, pluralized

REQUIREMENT_TYPES = ErrorCatalog(
    name="requirement_types",
    message_to_kind={
        NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK,
        "Requirement type name already exists": ErrorKind.DUPLICATED_NAME,
        "Requirement Type is associated with one or more requirement identifications":
            ErrorKind.ASSOCIATED_REQ_IDENTIFICATIONS,
        "Some Requirement Types are associated with requirement identifications":
            ErrorKind.MULTIPLE_ASSOCIATED_REQ_IDENTIFICATIONS,
    },
    descriptors={
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.VALIDATION: common.VALIDATION,
        ErrorKind.UNAUTHORIZED: common.UNAUTHORIZED,
        ErrorKind.SERVER: common.SERVER,
        ErrorKind.UNEXPECTED: common.UNEXPECTED,
        ErrorKind.NOT_FOUND: DescriptorTemplate(
            title="No encontrado",
            message=f"Tipo de requerimiento no encontrado. {RELOAD_HINT}",
        ),
        ErrorKind.NOT_FOUND_MULTIPLE: DescriptorTemplate(
            title="No encontrado",
            message=f"Uno o más tipos de requerimiento no encontrados. {RELOAD_HINT}",
        ),
        ErrorKind.ASSOCIATED_REQ_IDENTIFICATIONS: DescriptorTemplate(
            title="Tipo de requerimiento vinculado a una identificación",
            message="El tipo de requerimiento está vinculado a una o más identificaciones "
            "de requerimientos y no puede ser eliminado.",
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_REQ_IDENTIFICATIONS: DescriptorTemplate(
            title="Tipos de requerimiento vinculados a identificaciones",
            message=pluralized(
                one=lambda item: f"El tipo de requerimiento {item} está vinculado a una o más "
                "identificaciones de requerimientos y no puede ser eliminado.",
                many=lambda items: f"Los tipos de requerimiento {items} están vinculados a una "
                "o más identificaciones de requerimientos y no pueden ser eliminados.",
                none="Uno o más tipos de requerimiento están vinculados a identificaciones "
                "de requerimientos y no pueden ser eliminados.",
            ),
        ),
        ErrorKind.DUPLICATED_NAME: DescriptorTemplate(
            title="Nombre duplicado",
            message="El nombre del tipo de requerimiento ya está en uso. Por favor, utilice otro.",
        ),
    },
)
