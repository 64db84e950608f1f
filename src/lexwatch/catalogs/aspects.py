"""Error catalog for aspect management.

Aspect deletes target a single entity, so a bare 404 renders the singular
NOT_FOUND variant.
"""

from __future__ import annotations

from lexwatch.catalogs import common
from lexwatch.catalogs.common import NETWORK_ERROR_MESSAGE, RELOAD_HINT
from lexwatch.core.errors import DescriptorTemplate, ErrorCatalog, ErrorKind, pluralized

_RECHECK = "Por favor, verifique e intente de nuevo."

ASPECTS = ErrorCatalog(
    name="aspects",
    message_to_kind={
        NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK,
        "Aspect already exists": ErrorKind.DUPLICATED_NAME,
        "The aspect is associated with one or more legal bases": ErrorKind.ASSOCIATED_BASES,
        "The aspect is associated with one or more requirements":
            ErrorKind.ASSOCIATED_REQUIREMENTS,
        "Aspects are associated with legal bases": ErrorKind.MULTIPLE_ASSOCIATED_BASES,
        "Aspects are associated with requirements": ErrorKind.MULTIPLE_ASSOCIATED_REQUIREMENTS,
        "Subject not found": ErrorKind.SUBJECT_NOT_FOUND,
    },
    descriptors={
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.VALIDATION: common.VALIDATION,
        ErrorKind.UNAUTHORIZED: common.UNAUTHORIZED,
        ErrorKind.SERVER: common.SERVER,
        ErrorKind.UNEXPECTED: common.UNEXPECTED,
        ErrorKind.SUBJECT_NOT_FOUND: common.SUBJECT_NOT_FOUND,
        ErrorKind.NOT_FOUND: DescriptorTemplate(
            title="No encontrado",
            message=f"El aspecto no fue encontrado. {RELOAD_HINT}",
        ),
        ErrorKind.NOT_FOUND_MULTIPLE: DescriptorTemplate(
            title="No encontrado",
            message=f"Uno o más aspectos no fueron encontrados. {RELOAD_HINT}",
        ),
        ErrorKind.DUPLICATED_NAME: DescriptorTemplate(
            title="Nombre duplicado",
            message="El nombre ya está en uso. Por favor, utilice otro.",
        ),
        ErrorKind.ASSOCIATED_BASES: DescriptorTemplate(
            title="Asociación con Fundamentos legales",
            message="El aspecto está vinculado a uno o más fundamentos legales "
            f"y no puede ser eliminado. {_RECHECK}",
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_BASES: DescriptorTemplate(
            title="Asociación con Fundamentos legales",
            message=pluralized(
                one=lambda item: f"El aspecto {item} está vinculado a uno o más fundamentos "
                f"legales y no puede ser eliminado. {_RECHECK}",
                many=lambda items: f"Los aspectos {items} están vinculados a uno o más "
                f"fundamentos legales y no pueden ser eliminados. {_RECHECK}",
                none="Uno o más aspectos están vinculados a fundamentos legales "
                f"y no pueden ser eliminados. {_RECHECK}",
            ),
        ),
        ErrorKind.ASSOCIATED_REQUIREMENTS: DescriptorTemplate(
            title="Asociación con Requerimientos",
            message="El aspecto está vinculado a uno o más requerimientos legales "
            f"y no puede ser eliminado. {_RECHECK}",
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_REQUIREMENTS: DescriptorTemplate(
            title="Asociación con Requerimientos",
            message=pluralized(
                one=lambda item: f"El aspecto {item} está vinculado a uno o más requerimientos "
                f"legales y no puede ser eliminado. {_RECHECK}",
                many=lambda items: f"Los aspectos {items} están vinculados a uno o más "
                f"requerimientos legales y no pueden ser eliminados. {_RECHECK}",
                none="Uno o más aspectos están vinculados a requerimientos legales "
                f"y no pueden ser eliminados. {_RECHECK}",
            ),
        ),
    },
    not_found_default=ErrorKind.NOT_FOUND,
)
