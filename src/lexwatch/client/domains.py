"""Job domains: which endpoint, status messages and error catalog belong together."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lexwatch.catalogs import EXTRACT_ARTICLES, REQ_IDENTIFY, SEND_LEGAL_BASIS
from lexwatch.core.errors import ErrorCatalog
from lexwatch.core.exceptions import CatalogError
from lexwatch.core.status import (
    EXTRACT_ARTICLES_STATUS,
    REQ_IDENTIFY_STATUS,
    SEND_LEGAL_BASIS_STATUS,
    StatusCatalog,
)


@dataclass(frozen=True)
class JobDomain:
    """A kind of background job the API tracks.

    Attributes:
        name: CLI-facing name, e.g. "extract-articles".
        path: Path segment under ``/jobs/``.
        status_catalog: Localized status messages for this job type.
        error_catalog: Classification table for this job type's failures.
    """

    name: str
    path: str
    status_catalog: StatusCatalog
    error_catalog: ErrorCatalog

    def status_path(self, job_id: str) -> str:
        return f"/jobs/{self.path}/{job_id}"


SEND_LEGAL_BASIS_DOMAIN = JobDomain(
    name="send-legal-basis",
    path="legalBasis",
    status_catalog=SEND_LEGAL_BASIS_STATUS,
    error_catalog=SEND_LEGAL_BASIS,
)

EXTRACT_ARTICLES_DOMAIN = JobDomain(
    name="extract-articles",
    path="articles",
    status_catalog=EXTRACT_ARTICLES_STATUS,
    error_catalog=EXTRACT_ARTICLES,
)

REQ_IDENTIFY_DOMAIN = JobDomain(
    name="req-identify",
    path="reqIdentifications",
    status_catalog=REQ_IDENTIFY_STATUS,
    error_catalog=REQ_IDENTIFY,
)

JOB_DOMAINS: Mapping[str, JobDomain] = MappingProxyType({
    domain.name: domain
    for domain in (SEND_LEGAL_BASIS_DOMAIN, EXTRACT_ARTICLES_DOMAIN, REQ_IDENTIFY_DOMAIN)
})


def get_domain(name: str) -> JobDomain:
    """Look up a job domain by name; underscores are accepted for hyphens.

    Raises:
        CatalogError: If the name is unknown.
    """
    key = name.strip().lower().replace("_", "-")
    try:
        return JOB_DOMAINS[key]
    except KeyError:
        raise CatalogError(
            f"Unknown job domain {name!r}. Available: {', '.join(sorted(JOB_DOMAINS))}"
        ) from None


__all__ = [
    "EXTRACT_ARTICLES_DOMAIN",
    "JOB_DOMAINS",
    "REQ_IDENTIFY_DOMAIN",
    "SEND_LEGAL_BASIS_DOMAIN",
    "JobDomain",
    "get_domain",
]
