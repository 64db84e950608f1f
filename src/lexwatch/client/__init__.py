"""Job API client and job domain registry."""

from lexwatch.client.domains import (
    EXTRACT_ARTICLES_DOMAIN,
    JOB_DOMAINS,
    REQ_IDENTIFY_DOMAIN,
    SEND_LEGAL_BASIS_DOMAIN,
    JobDomain,
    get_domain,
)
from lexwatch.client.http import JobStatusClient
from lexwatch.client.models import JobCreated, JobStatusPayload, PendingJob

__all__ = [
    "EXTRACT_ARTICLES_DOMAIN",
    "JOB_DOMAINS",
    "REQ_IDENTIFY_DOMAIN",
    "SEND_LEGAL_BASIS_DOMAIN",
    "JobCreated",
    "JobDomain",
    "JobStatusClient",
    "JobStatusPayload",
    "PendingJob",
    "get_domain",
]
