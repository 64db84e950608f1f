"""Descriptors and phrases shared by several catalogs.

Catalogs copy these into their own tables; a domain that words a kind
differently defines its own DescriptorTemplate instead.
"""

from __future__ import annotations

from lexwatch.core.constants import NETWORK_ERROR_MESSAGE
from lexwatch.core.errors import DescriptorTemplate

RELOAD_HINT = "Verifique su existencia recargando la app e intente de nuevo."

NETWORK = DescriptorTemplate(
    title="Error de conexión",
    message="Hubo un problema de red. Verifique su conexión a internet e intente nuevamente.",
)

VALIDATION = DescriptorTemplate(
    title="Error de validación",
    message="Revisa los datos introducidos. Uno o más campos no son válidos.",
)

UNAUTHORIZED = DescriptorTemplate(
    title="Acceso no autorizado",
    message="No tiene permisos para realizar esta acción. Verifique su sesión.",
)

SERVER = DescriptorTemplate(
    title="Error interno del servidor",
    message="Hubo un error en el servidor. Espere un momento e intente nuevamente.",
)

UNEXPECTED = DescriptorTemplate(
    title="Error inesperado",
    message="Ocurrió un error inesperado. Por favor, intente nuevamente más tarde.",
)

CONFLICT = DescriptorTemplate(
    title="Conflicto de datos",
    message="Ocurrió un conflicto con la operación. Verifique la información e intente nuevamente.",
)

SUBJECT_NOT_FOUND = DescriptorTemplate(
    title="Materia no encontrada",
    message=f"La materia seleccionada no fue encontrada. {RELOAD_HINT}",
)

ASPECTS_NOT_FOUND = DescriptorTemplate(
    title="Aspectos no encontrados",
    message=f"Algunos aspectos seleccionados no fueron encontrados. {RELOAD_HINT}",
)

# ─── Job endpoints ──────────────────────────────────────────────────────

INVALID_REQUEST = DescriptorTemplate(
    title="Solicitud inválida",
    message="La solicitud es inválida. Por favor, cierre esta ventana e intente nuevamente.",
)

JOB_UNAUTHORIZED = DescriptorTemplate(
    title="No autorizado",
    message="No tiene autorización para realizar esta acción. "
    "Verifique su sesión e intente nuevamente.",
)

__all__ = [
    "ASPECTS_NOT_FOUND",
    "CONFLICT",
    "INVALID_REQUEST",
    "JOB_UNAUTHORIZED",
    "NETWORK",
    "NETWORK_ERROR_MESSAGE",
    "RELOAD_HINT",
    "SERVER",
    "SUBJECT_NOT_FOUND",
    "UNAUTHORIZED",
    "UNEXPECTED",
    "VALIDATION",
]
