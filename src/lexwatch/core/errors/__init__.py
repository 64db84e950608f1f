"""Error classification.

Re-exports the public classification API.
"""

from lexwatch.core.errors.kinds import RETRYABLE_KINDS, ErrorKind
from lexwatch.core.errors.models import (
    DescriptorTemplate,
    ErrorCatalog,
    ErrorDescriptor,
    Message,
    MessageContext,
    StaticMessage,
    TemplatedMessage,
    TransportOutcome,
    pluralized,
)
from lexwatch.core.errors.classifier import (
    DEFAULT_HTTP_FALLBACK,
    ErrorClassifier,
    classify,
    resolve_kind,
)

__all__ = [
    "DEFAULT_HTTP_FALLBACK",
    "RETRYABLE_KINDS",
    "DescriptorTemplate",
    "ErrorCatalog",
    "ErrorClassifier",
    "ErrorDescriptor",
    "ErrorKind",
    "Message",
    "MessageContext",
    "StaticMessage",
    "TemplatedMessage",
    "TransportOutcome",
    "classify",
    "pluralized",
    "resolve_kind",
]
