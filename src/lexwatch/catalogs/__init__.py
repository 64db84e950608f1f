"""Per-domain error catalogs and the catalog registry."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from lexwatch.catalogs.articles import ARTICLES
from lexwatch.catalogs.aspects import ASPECTS
from lexwatch.catalogs.auth import AUTH
from lexwatch.catalogs.files import FILES
from lexwatch.catalogs.jobs import EXTRACT_ARTICLES, REQ_IDENTIFY, SEND_LEGAL_BASIS
from lexwatch.catalogs.legal_basis import LEGAL_BASIS
from lexwatch.catalogs.legal_verbs import LEGAL_VERBS
from lexwatch.catalogs.postal_codes import POSTAL_CODES
from lexwatch.catalogs.requirement_types import REQUIREMENT_TYPES
from lexwatch.catalogs.requirements import REQUIREMENTS
from lexwatch.catalogs.subjects import SUBJECTS
from lexwatch.core.errors import ErrorCatalog
from lexwatch.core.exceptions import CatalogError

CATALOGS: Mapping[str, ErrorCatalog] = MappingProxyType({
    catalog.name: catalog
    for catalog in (
        LEGAL_BASIS,
        ASPECTS,
        SUBJECTS,
        REQUIREMENT_TYPES,
        REQUIREMENTS,
        ARTICLES,
        LEGAL_VERBS,
        AUTH,
        FILES,
        POSTAL_CODES,
        SEND_LEGAL_BASIS,
        EXTRACT_ARTICLES,
        REQ_IDENTIFY,
    )
})


def catalog_names() -> list[str]:
    """Registered catalog names, sorted."""
    return sorted(CATALOGS)


def get_catalog(name: str) -> ErrorCatalog:
    """Look up a catalog by name. Hyphens and underscores are interchangeable.

    Raises:
        CatalogError: If no catalog has that name.
    """
    key = name.strip().lower().replace("-", "_")
    try:
        return CATALOGS[key]
    except KeyError:
        raise CatalogError(
            f"Unknown catalog {name!r}. Available: {', '.join(catalog_names())}"
        ) from None


__all__ = [
    "ARTICLES",
    "ASPECTS",
    "AUTH",
    "CATALOGS",
    "EXTRACT_ARTICLES",
    "FILES",
    "LEGAL_BASIS",
    "LEGAL_VERBS",
    "POSTAL_CODES",
    "REQUIREMENTS",
    "REQUIREMENT_TYPES",
    "REQ_IDENTIFY",
    "SEND_LEGAL_BASIS",
    "SUBJECTS",
    "catalog_names",
    "get_catalog",
]
