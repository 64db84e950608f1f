"""Canonical error kinds.

Error Kind Taxonomy
===================

**Base kinds** (shared by every catalog)

    | Kind | Retryable | Meaning |
    |------|-----------|---------|
    | NETWORK | Yes | No response: connectivity failure or timeout |
    | VALIDATION | No | Input rejected by the server (HTTP 400) |
    | UNAUTHORIZED | No | Session missing or lacking permission (401/403) |
    | NOT_FOUND | No | A single entity no longer exists (404) |
    | NOT_FOUND_MULTIPLE | No | One or more entities of a batch no longer exist |
    | CONFLICT | No | Concurrent state change (409) |
    | SERVER | No | Server failure for this attempt (500) |
    | UNEXPECTED | No | Anything not matched above |

**Domain kinds** layer on top: duplicate names, required documents,
"associated with dependents" cases with singular/plural variants, and the
job-specific failures raised by background processing.

Only NETWORK is retryable: re-polling cannot fix a problem the server has
already reported about the job or its entities.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Stable identifier of a classified error."""

    # ─── Base kinds ─────────────────────────────────────────────────────
    NETWORK = "network"
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    NOT_FOUND_MULTIPLE = "not_found_multiple"
    CONFLICT = "conflict"
    SERVER = "server"
    UNEXPECTED = "unexpected"

    # ─── Request shape ──────────────────────────────────────────────────
    INVALID_REQUEST = "invalid_request"
    """Job endpoints report 400 as an invalid request rather than a form error."""

    # ─── Entity references ──────────────────────────────────────────────
    LEGAL_BASIS_NOT_FOUND = "legal_basis_not_found"
    SUBJECT_NOT_FOUND = "subject_not_found"
    ASPECTS_NOT_FOUND = "aspects_not_found"

    # ─── Entity lifecycle ───────────────────────────────────────────────
    DUPLICATED_NAME = "duplicated_name"
    DOCUMENT_REQUIRED = "document_required"
    DOCUMENT_CONFLICT = "document_conflict"
    ASSOCIATED_BASES = "associated_bases"
    MULTIPLE_ASSOCIATED_BASES = "multiple_associated_bases"
    ASSOCIATED_REQUIREMENTS = "associated_requirements"
    MULTIPLE_ASSOCIATED_REQUIREMENTS = "multiple_associated_requirements"
    ASSOCIATED_REQ_IDENTIFICATIONS = "associated_req_identifications"
    MULTIPLE_ASSOCIATED_REQ_IDENTIFICATIONS = "multiple_associated_req_identifications"

    # ─── Pending background work ────────────────────────────────────────
    PENDING_JOBS_CONFLICT = "pending_jobs_conflict"
    MULTIPLE_PENDING_JOBS_CONFLICT = "multiple_pending_jobs_conflict"
    ARTICLES_EXTRACTION_CONFLICT = "articles_extraction_conflict"
    REMOVE_DOCUMENT_PENDING_CONFLICT = "remove_document_pending_conflict"
    NEW_DOCUMENT_PENDING_CONFLICT = "new_document_pending_conflict"
    REQ_IDENTIFICATION_JOBS_CONFLICT = "req_identification_jobs_conflict"
    MULTIPLE_REQ_IDENTIFICATION_JOBS_CONFLICT = "multiple_req_identification_jobs_conflict"

    # ─── Job failures ───────────────────────────────────────────────────
    JOB_NOT_FOUND = "job_not_found"
    """The job id is unknown to the server, usually because it was cancelled."""
    JOB_CANCELED = "job_canceled"
    INVALID_DOCUMENT = "invalid_document"
    DOCUMENT_PROCESSING_ERROR = "document_processing_error"
    INVALID_CLASSIFICATION = "invalid_classification"
    ARTICLE_PROCESSING_ERROR = "article_processing_error"
    FAILED_TO_INSERT_ARTICLES = "failed_to_insert_articles"

    # ─── Authentication ─────────────────────────────────────────────────
    INVALID_EMAIL = "invalid_email"
    INVALID_CODE = "invalid_code"
    USER_CANCELLED = "user_cancelled"
    INTERACTION_IN_PROGRESS = "interaction_in_progress"
    SEND_ERROR = "send_error"

    # ─── File downloads ─────────────────────────────────────────────────
    BAD_REQUEST = "bad_request"
    FORBIDDEN = "forbidden"
    REQUEST_TIMEOUT = "request_timeout"
    PAYLOAD_TOO_LARGE = "payload_too_large"

    # ─── Postal-code provider ───────────────────────────────────────────
    FETCH_STATES_ERROR = "fetch_states_error"
    FETCH_MUNICIPALITIES_ERROR = "fetch_municipalities_error"
    GENERIC_ERROR = "generic_error"

    @property
    def is_retryable(self) -> bool:
        """Whether an in-place retry can resolve this kind of error."""
        return self in RETRYABLE_KINDS


RETRYABLE_KINDS: frozenset[ErrorKind] = frozenset({ErrorKind.NETWORK})


__all__ = ["RETRYABLE_KINDS", "ErrorKind"]
