"""Error catalog for requirement management."""

from __future__ import annotations

from lexwatch.catalogs import common
from lexwatch.catalogs.common import NETWORK_ERROR_MESSAGE, RELOAD_HINT
from lexwatch.core.errors import DescriptorTemplate, ErrorCatalog, ErrorKind, pluralized

_WAIT_FOR_IDENTIFICATION = (
    "Por favor, espere a que se complete la identificación e intente nuevamente."
)

REQUIREMENTS = ErrorCatalog(
    name="requirements",
    message_to_kind={
        NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK,
        "Validation failed": ErrorKind.VALIDATION,
        "Requirement name already exists": ErrorKind.DUPLICATED_NAME,
        "Requirement not found": ErrorKind.NOT_FOUND,
        "Subject not found": ErrorKind.SUBJECT_NOT_FOUND,
        "Aspects not found for IDs": ErrorKind.ASPECTS_NOT_FOUND,
        "The Requirement is associated with one or more requirement identifications":
            ErrorKind.ASSOCIATED_REQ_IDENTIFICATIONS,
        "Some Requirements are associated with requirement identifications":
            ErrorKind.MULTIPLE_ASSOCIATED_REQ_IDENTIFICATIONS,
        "Cannot delete Requirement with pending Requirement Identification jobs":
            ErrorKind.REQ_IDENTIFICATION_JOBS_CONFLICT,
        "Cannot delete Requirements with pending Requirement Identification jobs":
            ErrorKind.MULTIPLE_REQ_IDENTIFICATION_JOBS_CONFLICT,
    },
    descriptors={
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.UNAUTHORIZED: common.UNAUTHORIZED,
        ErrorKind.SERVER: common.SERVER,
        ErrorKind.VALIDATION: common.VALIDATION,
        ErrorKind.UNEXPECTED: common.UNEXPECTED,
        ErrorKind.SUBJECT_NOT_FOUND: common.SUBJECT_NOT_FOUND,
        ErrorKind.ASPECTS_NOT_FOUND: common.ASPECTS_NOT_FOUND,
        ErrorKind.NOT_FOUND: DescriptorTemplate(
            title="Requerimiento no encontrado",
            message=f"El requerimiento no fue encontrado. {RELOAD_HINT}",
        ),
        ErrorKind.NOT_FOUND_MULTIPLE: DescriptorTemplate(
            title="Varios requerimientos legales no encontrados",
            message=f"Uno o más requerimientos no fueron encontrados. {RELOAD_HINT}",
        ),
        ErrorKind.DUPLICATED_NAME: DescriptorTemplate(
            title="Nombre de Requerimiento duplicado",
            message="Ya existe un requerimiento con el mismo nombre. Por favor, utiliza otro.",
        ),
        ErrorKind.ASSOCIATED_REQ_IDENTIFICATIONS: DescriptorTemplate(
            title="Requerimiento vinculado a una identificación",
            message="El requerimiento está vinculado a una o más identificación de "
            "requerimientos y no puede ser eliminado.",
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_REQ_IDENTIFICATIONS: DescriptorTemplate(
            title="Requerimientos vinculados a identificaciones",
            message=pluralized(
                one=lambda item: f"El requerimiento {item} está vinculado a una o más "
                "identificaciones de requerimientos y no puede ser eliminado.",
                many=lambda items: f"Los requerimientos {items} están vinculados a una o más "
                "identificaciones de requerimientos y no pueden ser eliminados.",
                none="Uno o más requerimientos están vinculados a identificaciones "
                "de requerimientos y no pueden ser eliminados.",
            ),
        ),
        ErrorKind.REQ_IDENTIFICATION_JOBS_CONFLICT: DescriptorTemplate(
            title="Conflicto con trabajos pendientes",
            message="Este requerimiento no puede ser eliminado porque actualmente se están "
            f"identificando requerimientos. {_WAIT_FOR_IDENTIFICATION}",
        ),
        ErrorKind.MULTIPLE_REQ_IDENTIFICATION_JOBS_CONFLICT: DescriptorTemplate(
            title="Conflicto con trabajos pendientes",
            message=pluralized(
                one=lambda item: f"El requerimiento {item} no puede ser eliminado porque "
                f"actualmente se están identificando requerimientos. {_WAIT_FOR_IDENTIFICATION}",
                many=lambda items: f"Los requerimientos {items} no pueden ser eliminados porque "
                f"actualmente se están identificando requerimientos. {_WAIT_FOR_IDENTIFICATION}",
                none="Uno o más requerimientos no pueden ser eliminados porque actualmente "
                f"se están identificando requerimientos. {_WAIT_FOR_IDENTIFICATION}",
            ),
        ),
        ErrorKind.CONFLICT: DescriptorTemplate(
            title="Conflicto detectado",
            message="Ocurrió un conflicto con la operación. "
            "Verifique la información e intente nuevamente.",
        ),
    },
)
