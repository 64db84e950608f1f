"""Table-driven error classifier.

Converts a raw TransportOutcome into an ErrorDescriptor using a per-domain
ErrorCatalog. Resolution order, first match wins:

1. ``server_message`` then ``client_message``, by exact phrase.
2. ``http_status_code`` through the catalog's HTTP table (or the default).
   A 404 resolved to NOT_FOUND is pluralized by the number of related items.
3. UNEXPECTED.

Classification is pure: identical input always yields an identical
descriptor, and templated messages are rendered here rather than when the
catalog is built.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from lexwatch.core.errors.kinds import ErrorKind
from lexwatch.core.errors.models import (
    ErrorCatalog,
    ErrorDescriptor,
    MessageContext,
    TransportOutcome,
)
from lexwatch.core.logging import get_logger

if TYPE_CHECKING:
    from lexwatch.core.exceptions import JobRequestError

_logger = get_logger("errors.classifier")

HTTP_NOT_FOUND = 404

DEFAULT_HTTP_FALLBACK: Mapping[int, ErrorKind] = MappingProxyType({
    400: ErrorKind.VALIDATION,
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.UNAUTHORIZED,
    404: ErrorKind.NOT_FOUND,
    409: ErrorKind.CONFLICT,
    500: ErrorKind.SERVER,
})


def _match_phrase(outcome: TransportOutcome, catalog: ErrorCatalog) -> ErrorKind | None:
    for phrase in (outcome.server_message, outcome.client_message):
        if phrase is not None and phrase in catalog.message_to_kind:
            return catalog.message_to_kind[phrase]
    return None


def _match_status(outcome: TransportOutcome, catalog: ErrorCatalog) -> ErrorKind | None:
    code = outcome.http_status_code
    if code is None:
        return None
    table = catalog.http_fallback if catalog.http_fallback is not None else DEFAULT_HTTP_FALLBACK
    kind = table.get(code)
    if kind is ErrorKind.NOT_FOUND and code == HTTP_NOT_FOUND:
        # Batch endpoints report 404 without saying how many entities were missing;
        # with no item names the catalog decides which variant to show.
        count = len(outcome.related_items)
        if count == 1:
            return ErrorKind.NOT_FOUND
        if count > 1:
            return ErrorKind.NOT_FOUND_MULTIPLE
        return catalog.not_found_default
    return kind


def resolve_kind(outcome: TransportOutcome, catalog: ErrorCatalog) -> ErrorKind:
    """Resolve the ErrorKind for an outcome without rendering a descriptor."""
    kind = _match_phrase(outcome, catalog) or _match_status(outcome, catalog)
    if kind is None:
        return ErrorKind.UNEXPECTED
    if catalog.template_for(kind) is None:
        _logger.debug(
            "classifier.kind_without_descriptor",
            catalog=catalog.name,
            kind=kind.value,
        )
        return ErrorKind.UNEXPECTED
    return kind


def classify(
    outcome: TransportOutcome,
    catalog: ErrorCatalog,
    *,
    is_resend: bool = False,
) -> ErrorDescriptor:
    """Classify a transport outcome against a catalog.

    Args:
        outcome: Raw HTTP status, messages and related item names.
        catalog: Domain table to resolve against.
        is_resend: Forwarded to templates that distinguish a resend
            (only the auth catalog uses it).

    Returns:
        The rendered descriptor. Never raises for unknown input; anything
        unmatched becomes UNEXPECTED.
    """
    kind = resolve_kind(outcome, catalog)
    template = catalog.descriptors[kind]
    return template.render(
        kind,
        MessageContext(items=tuple(outcome.related_items), is_resend=is_resend),
    )


class ErrorClassifier:
    """Classifier bound to one catalog.

    Convenience wrapper used where a component classifies repeatedly against
    the same domain (the job monitor, the CLI).
    """

    def __init__(self, catalog: ErrorCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> ErrorCatalog:
        return self._catalog

    def classify(self, outcome: TransportOutcome, *, is_resend: bool = False) -> ErrorDescriptor:
        return classify(outcome, self._catalog, is_resend=is_resend)

    def describe(
        self,
        kind: ErrorKind,
        items: Iterable[str] = (),
        *,
        is_resend: bool = False,
    ) -> ErrorDescriptor:
        """Render the descriptor for a kind chosen by the caller.

        Kinds the catalog cannot render fall back to UNEXPECTED.
        """
        template = self._catalog.template_for(kind)
        if template is None:
            kind = ErrorKind.UNEXPECTED
            template = self._catalog.descriptors[kind]
        return template.render(kind, MessageContext(items=tuple(items), is_resend=is_resend))

    def classify_exception(self, exc: JobRequestError) -> ErrorDescriptor:
        """Classify a failed API round-trip."""
        descriptor = self.classify(exc.to_outcome())
        _logger.debug(
            "classifier.exception_classified",
            catalog=self._catalog.name,
            http_status_code=exc.http_status_code,
            kind=descriptor.kind.value,
        )
        return descriptor

    def classify_phrase(
        self,
        phrase: str,
        items: Iterable[str] = (),
        *,
        http_status_code: int | None = None,
    ) -> ErrorDescriptor:
        """Classify a server-reported phrase, e.g. a job's ``error`` field."""
        return self.classify(
            TransportOutcome(
                http_status_code=http_status_code,
                server_message=phrase,
                related_items=tuple(items),
            )
        )


__all__ = [
    "DEFAULT_HTTP_FALLBACK",
    "ErrorClassifier",
    "classify",
    "resolve_kind",
]
