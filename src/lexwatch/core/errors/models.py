"""Data models for error classification.

This module provides:
- TransportOutcome: raw result of a failed network call, the classifier input
- MessageContext: values a templated message may depend on
- StaticMessage / TemplatedMessage: the two shapes a descriptor message takes
- DescriptorTemplate: title plus message, as authored in a catalog
- ErrorDescriptor: the rendered, user-facing classification result
- ErrorCatalog: per-domain table driving the classifier
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lexwatch.core.constants import ITEM_SEPARATOR
from lexwatch.core.errors.kinds import ErrorKind
from lexwatch.core.exceptions import CatalogError


@dataclass(frozen=True)
class TransportOutcome:
    """Raw input to classification.

    Normally exactly one of ``server_message``/``client_message`` is set.
    ``related_items`` names the entities implicated in a batch failure.
    """

    http_status_code: int | None = None
    server_message: str | None = None
    client_message: str | None = None
    related_items: tuple[str, ...] = ()


@dataclass(frozen=True)
class MessageContext:
    """Context passed to templated messages at classification time."""

    items: tuple[str, ...] = ()
    is_resend: bool = False


@dataclass(frozen=True)
class StaticMessage:
    """A fixed message. ``None`` text means the descriptor has no body."""

    text: str | None

    def render(self, ctx: MessageContext) -> str | None:
        return self.text


@dataclass(frozen=True)
class TemplatedMessage:
    """A message computed from a MessageContext."""

    renderer: Callable[[MessageContext], str]

    def render(self, ctx: MessageContext) -> str | None:
        return self.renderer(ctx)


Message = StaticMessage | TemplatedMessage


def pluralized(
    *,
    one: Callable[[str], str],
    many: Callable[[str], str],
    none: str,
) -> TemplatedMessage:
    """Build a list-sensitive message.

    Args:
        one: Renders the singular sentence for exactly one item name.
        many: Renders the plural sentence for the joined item names.
        none: Text used when no items were supplied.
    """

    def _render(ctx: MessageContext) -> str:
        if len(ctx.items) == 1:
            return one(ctx.items[0])
        if ctx.items:
            return many(ITEM_SEPARATOR.join(ctx.items))
        return none

    return TemplatedMessage(_render)


@dataclass(frozen=True)
class DescriptorTemplate:
    """Title and message for one kind, as authored in a catalog.

    A plain string (or None) passed as ``message`` is wrapped into a
    StaticMessage.
    """

    title: str
    message: Message | str | None

    def __post_init__(self) -> None:
        if self.message is None or isinstance(self.message, str):
            object.__setattr__(self, "message", StaticMessage(self.message))

    def render(self, kind: ErrorKind, ctx: MessageContext) -> ErrorDescriptor:
        message = self.message.render(ctx)  # type: ignore[union-attr]
        return ErrorDescriptor(kind=kind, title=self.title, message=message)


@dataclass(frozen=True)
class ErrorDescriptor:
    """Canonical, user-facing classification result."""

    kind: ErrorKind
    title: str
    message: str | None

    @property
    def retryable(self) -> bool:
        """Whether presentation should offer an in-place retry."""
        return self.kind.is_retryable

    def to_dict(self) -> dict[str, str | bool | None]:
        return {
            "kind": self.kind.value,
            "title": self.title,
            "message": self.message,
            "retryable": self.retryable,
        }


@dataclass(frozen=True)
class ErrorCatalog:
    """Per-domain classification table.

    Attributes:
        name: Registry name of the catalog (e.g. "legal_basis").
        message_to_kind: Exact raw phrases mapped to kinds.
        descriptors: Template for every kind the catalog can render.
        http_fallback: Replaces the default status-code table when set.
        not_found_default: Kind used when a 404 carries no related items.
            Batch-style catalogs use NOT_FOUND_MULTIPLE, single-entity
            catalogs use NOT_FOUND.

    Raises:
        CatalogError: If UNEXPECTED has no descriptor, or a phrase maps to a
            kind the catalog cannot render.
    """

    name: str
    message_to_kind: Mapping[str, ErrorKind]
    descriptors: Mapping[ErrorKind, DescriptorTemplate]
    http_fallback: Mapping[int, ErrorKind] | None = None
    not_found_default: ErrorKind = ErrorKind.NOT_FOUND_MULTIPLE

    def __post_init__(self) -> None:
        if ErrorKind.UNEXPECTED not in self.descriptors:
            raise CatalogError(f"Catalog {self.name!r} has no UNEXPECTED descriptor")
        missing = sorted(
            kind.value for kind in set(self.message_to_kind.values())
            if kind not in self.descriptors
        )
        if missing:
            raise CatalogError(
                f"Catalog {self.name!r} maps phrases to kinds without descriptors: "
                + ", ".join(missing)
            )
        object.__setattr__(self, "message_to_kind", MappingProxyType(dict(self.message_to_kind)))
        object.__setattr__(self, "descriptors", MappingProxyType(dict(self.descriptors)))
        if self.http_fallback is not None:
            object.__setattr__(
                self, "http_fallback", MappingProxyType(dict(self.http_fallback))
            )

    def template_for(self, kind: ErrorKind) -> DescriptorTemplate | None:
        return self.descriptors.get(kind)


__all__ = [
    "DescriptorTemplate",
    "ErrorCatalog",
    "ErrorDescriptor",
    "Message",
    "MessageContext",
    "StaticMessage",
    "TemplatedMessage",
    "TransportOutcome",
    "pluralized",
]
