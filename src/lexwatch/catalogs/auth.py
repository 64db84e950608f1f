"""Error catalog for sign-in by emailed verification code.

The identity provider reports cancellation and concurrent sign-in attempts
with snake_case codes, which are matched like any other phrase.
"""

from __future__ import annotations

from lexwatch.catalogs import common
from lexwatch.catalogs.common import NETWORK_ERROR_MESSAGE
from lexwatch.core.errors import (
    DescriptorTemplate,
    ErrorCatalog,
    ErrorKind,
    MessageContext,
    TemplatedMessage,
)


def _send_error_message(ctx: MessageContext) -> str:
    if ctx.is_resend:
        return "Error al reenviar el código de verificación. Intente nuevamente."
    return "Error al enviar el código de verificación. Intente nuevamente."


AUTH = ErrorCatalog(
    name="auth",
    message_to_kind={
        NETWORK_ERROR_MESSAGE: ErrorKind.NETWORK,
        "Invalid or expired code": ErrorKind.INVALID_CODE,
        "user_cancelled": ErrorKind.USER_CANCELLED,
        "interaction_in_progress": ErrorKind.INTERACTION_IN_PROGRESS,
        "Invalid email": ErrorKind.INVALID_EMAIL,
        "Failed to send verification code": ErrorKind.SEND_ERROR,
    },
    descriptors={
        ErrorKind.NETWORK: common.NETWORK,
        ErrorKind.UNEXPECTED: common.UNEXPECTED,
        ErrorKind.INVALID_EMAIL: DescriptorTemplate(
            title="Correo no válido",
            message="Dirección de correo no válida",
        ),
        ErrorKind.INVALID_CODE: DescriptorTemplate(
            title="Código inválido",
            message="Código inválido. Intente nuevamente.",
        ),
        ErrorKind.USER_CANCELLED: DescriptorTemplate(title="Operación cancelada", message=None),
        ErrorKind.INTERACTION_IN_PROGRESS: DescriptorTemplate(
            title="Interacción en progreso",
            message="Ya hay una interacción de inicio de sesión en progreso. Espere un momento.",
        ),
        ErrorKind.SEND_ERROR: DescriptorTemplate(
            title="Error al enviar",
            message=TemplatedMessage(_send_error_message),
        ),
    },
    http_fallback={
        400: ErrorKind.INVALID_CODE,
        401: ErrorKind.INVALID_EMAIL,
        403: ErrorKind.INVALID_EMAIL,
    },
)
