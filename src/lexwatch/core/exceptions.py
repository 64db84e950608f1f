"""Exception hierarchy for lexwatch.

All errors raised by lexwatch derive from ``LexwatchError`` so callers can
catch the whole family with a single clause. Request failures carry the raw
transport fields the error classifier needs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lexwatch.core.errors.models import TransportOutcome


class LexwatchError(Exception):
    """Base exception for lexwatch errors."""


class ConfigurationError(LexwatchError):
    """Raised when configuration is invalid or incomplete."""


class CatalogError(LexwatchError):
    """Raised for malformed catalogs or unknown catalog/domain names."""


class JobRequestError(LexwatchError):
    """A job API round-trip failed.

    Attributes:
        http_status_code: Response status, or None when no response arrived.
        server_message: The ``message`` field of the error body, if any.
        client_message: Message produced on the client side of the call.
        related_items: Names of entities implicated in a batch failure.
    """

    def __init__(
        self,
        client_message: str,
        *,
        http_status_code: int | None = None,
        server_message: str | None = None,
        related_items: tuple[str, ...] = (),
    ) -> None:
        super().__init__(server_message or client_message)
        self.http_status_code = http_status_code
        self.server_message = server_message
        self.client_message = client_message
        self.related_items = related_items

    def to_outcome(self) -> TransportOutcome:
        """Convert to the classifier's input type."""
        from lexwatch.core.errors.models import TransportOutcome

        return TransportOutcome(
            http_status_code=self.http_status_code,
            server_message=self.server_message,
            client_message=self.client_message,
            related_items=self.related_items,
        )


class JobTransportError(JobRequestError):
    """No usable response: connection refused, DNS failure, timeout."""


class JobPayloadError(JobRequestError):
    """The response arrived but its body could not be understood."""


__all__ = [
    "CatalogError",
    "ConfigurationError",
    "JobPayloadError",
    "JobRequestError",
    "JobTransportError",
    "LexwatchError",
]
