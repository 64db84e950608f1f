"""Error catalog for subject (materia) management."""

from __future__ import annotations

from lexwatch.catalogs import common
from lexwatch.catalogs.common import NETWORK_ERROR_MESSAGE, RELOAD_HINT
from lexwatch.core.errors import DescriptorTemplate, ErrorCatalog, ErrorKind, pluralized

_RECHECK = "Por favor, verifique e intente de nuevo."

SUBJECTS = ErrorCatalog(
    name="subjects",
    message_to_kind={
        NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK,
        "Subject already exists": ErrorKind.DUPLICATED_NAME,
        "The subject is associated with one or more legal bases": ErrorKind.ASSOCIATED_BASES,
        "Subjects are associated with legal bases": ErrorKind.MULTIPLE_ASSOCIATED_BASES,
        "The subject is associated with one or more requirements":
            ErrorKind.ASSOCIATED_REQUIREMENTS,
        "Subjects are associated with requirements": ErrorKind.MULTIPLE_ASSOCIATED_REQUIREMENTS,
    },
    descriptors={
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.VALIDATION: common.VALIDATION,
        ErrorKind.UNAUTHORIZED: common.UNAUTHORIZED,
        ErrorKind.SERVER: common.SERVER,
        ErrorKind.UNEXPECTED: common.UNEXPECTED,
        ErrorKind.NOT_FOUND: DescriptorTemplate(
            title="No encontrado",
            message=f"Materia no encontrada. {RELOAD_HINT}",
        ),
        ErrorKind.NOT_FOUND_MULTIPLE: DescriptorTemplate(
            title="No encontrado",
            message=f"Una o más materias no encontradas. {RELOAD_HINT}",
        ),
        ErrorKind.DUPLICATED_NAME: DescriptorTemplate(
            title="Nombre duplicado",
            message="El nombre ya está en uso. Por favor, utilice otro.",
        ),
        ErrorKind.ASSOCIATED_BASES: DescriptorTemplate(
            title="Asociación con Fundamentos legales",
            message="La materia está vinculada a uno o más fundamentos legales "
            f"y no puede ser eliminada. {_RECHECK}",
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_BASES: DescriptorTemplate(
            title="Asociación con Fundamentos legales",
            message=pluralized(
                one=lambda item: f"La materia {item} está vinculada a uno o más fundamentos "
                f"legales y no puede ser eliminada. {_RECHECK}",
                many=lambda items: f"Las materias {items} están vinculadas a uno o más "
                f"fundamentos legales y no pueden ser eliminadas. {_RECHECK}",
                none="Una o más materias están vinculadas a fundamentos legales "
                f"y no pueden ser eliminadas. {_RECHECK}",
            ),
        ),
        ErrorKind.ASSOCIATED_REQUIREMENTS: DescriptorTemplate(
            title="Asociación con Requerimientos",
            message="La materia está vinculada a uno o más requerimientos legales "
            f"y no puede ser eliminada. {_RECHECK}",
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_REQUIREMENTS: DescriptorTemplate(
            title="Asociación con Requerimientos",
            message=pluralized(
                one=lambda item: f"La materia {item} está vinculada a uno o más requerimientos "
                f"legales y no puede ser eliminada. {_RECHECK}",
                many=lambda items: f"Las materias {items} están vinculadas a uno o más "
                f"requerimientos legales y no pueden ser eliminadas. {_RECHECK}",
                none="Una o más materias están vinculadas a requerimientos legales "
                f"y no pueden ser eliminadas. {_RECHECK}",
            ),
        ),
    },
)
