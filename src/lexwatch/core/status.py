"""Job status catalog.

Maps the raw status phrases reported by the jobs API to a canonical
JobStatus and the localized progress message for one job type. The phrase
table is shared by every job type; only the messages differ.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from lexwatch.core.exceptions import CatalogError


class JobStatus(str, Enum):
    """Canonical status of a background job."""

    WAITING = "waiting"
    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"
    DELAYED = "delayed"
    PAUSED = "paused"
    STUCK = "stuck"
    UNKNOWN = "unknown"

    @property
    def is_terminal(self) -> bool:
        """COMPLETED and FAILED end polling; everything else expects more ticks."""
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)


STATUS_PHRASES: Mapping[str, JobStatus] = MappingProxyType({
    "The job is waiting to be processed": JobStatus.WAITING,
    "Job is still processing": JobStatus.ACTIVE,
    "Job completed successfully": JobStatus.COMPLETED,
    "Job failed": JobStatus.FAILED,
    "Job is delayed and will be processed later": JobStatus.DELAYED,
    "Job is paused and will be resumed once unpaused": JobStatus.PAUSED,
    "Job is stuck and cannot proceed": JobStatus.STUCK,
    "Job is in an unknown state": JobStatus.UNKNOWN,
})


@dataclass(frozen=True)
class StatusClassification:
    """Result of classifying a raw status phrase."""

    status: JobStatus
    message: str


class StatusCatalog:
    """Status phrase lookup for one job type.

    Args:
        name: Job type name, used in error messages.
        messages: Localized message for every JobStatus.

    Raises:
        CatalogError: If any JobStatus lacks a message.
    """

    def __init__(
        self,
        name: str,
        messages: Mapping[JobStatus, str],
        phrases: Mapping[str, JobStatus] = STATUS_PHRASES,
    ) -> None:
        missing = [status.value for status in JobStatus if status not in messages]
        if missing:
            raise CatalogError(
                f"Status catalog {name!r} is missing messages for: {', '.join(missing)}"
            )
        self.name = name
        self._messages = MappingProxyType(dict(messages))
        self._phrases = phrases

    def classify_status(self, raw_phrase: str) -> StatusClassification:
        """Classify a raw phrase; unrecognized phrases are UNKNOWN."""
        status = self._phrases.get(raw_phrase, JobStatus.UNKNOWN)
        return StatusClassification(status=status, message=self._messages[status])

    def message_for(self, status: JobStatus) -> str:
        return self._messages[status]

    def __repr__(self) -> str:
        return f"StatusCatalog(name={self.name!r})"


# =============================================================================
# Job type message tables
# =============================================================================

SEND_LEGAL_BASIS_STATUS = StatusCatalog(
    "send_legal_basis",
    {
        JobStatus.WAITING: "El envió de fundamentos legales comenzará en un momento.",
        JobStatus.ACTIVE: "El envió de fundamentos legales está en curso...",
        JobStatus.COMPLETED: "El envió de fundamentos legales se completó con éxito.",
        JobStatus.FAILED: "El envió de fundamentos legales falló. "
        "Comuníquese con los administradores del sistema.",
        JobStatus.DELAYED: "El envió de fundamentos legales está retrasado "
        "y se procesará más tarde.",
        JobStatus.PAUSED: "El envió de fundamentos legales está en pausa. "
        "Comuníquese con los administradores del sistema para continuar.",
        JobStatus.STUCK: "El envió de fundamentos legales está atascado y no puede continuar. "
        "Comuníquese con los administradores del sistema.",
        JobStatus.UNKNOWN: "El envió de fundamentos legales está en un estado desconocido. "
        "Comuníquese con los administradores del sistema.",
    },
)

EXTRACT_ARTICLES_STATUS = StatusCatalog(
    "extract_articles",
    {
        JobStatus.WAITING: "El proceso de extracción de artículos comenzará en un momento.",
        JobStatus.ACTIVE: "El proceso de extracción de artículos está en curso...",
        JobStatus.COMPLETED: "El proceso de extracción de artículos se completó con éxito.",
        JobStatus.FAILED: "El proceso de extracción de artículos falló. "
        "Comuníquese con los administradores del sistema.",
        JobStatus.DELAYED: "El proceso de extracción de artículos está retrasado "
        "y se procesará más tarde.",
        JobStatus.PAUSED: "El proceso de extracción de artículos está en pausa. "
        "Comuníquese con los administradores del sistema para continuar.",
        JobStatus.STUCK: "El proceso de extracción de artículos está atascado "
        "y no puede continuar. Comuníquese con los administradores del sistema.",
        JobStatus.UNKNOWN: "El proceso de extracción de artículos está en un estado "
        "desconocido. Comuníquese con los administradores del sistema.",
    },
)

REQ_IDENTIFY_STATUS = StatusCatalog(
    "req_identify",
    {
        JobStatus.WAITING: "La identificación de requerimientos comenzará en un momento.",
        JobStatus.ACTIVE: "La identificación de requerimientos está en curso...",
        JobStatus.COMPLETED: "La identificación de requerimientos se completó con éxito.",
        JobStatus.FAILED: "La identificación de requerimientos falló. "
        "Comuníquese con los administradores del sistema.",
        JobStatus.DELAYED: "La identificación de requerimientos está retrasada "
        "y se procesará más tarde.",
        JobStatus.PAUSED: "La identificación de requerimientos está en pausa. "
        "Comuníquese con los administradores del sistema para continuar.",
        JobStatus.STUCK: "La identificación de requerimientos está atascada "
        "y no puede continuar. Comuníquese con los administradores del sistema.",
        JobStatus.UNKNOWN: "La identificación de requerimientos está en un estado "
        "desconocido. Comuníquese con los administradores del sistema.",
    },
)


__all__ = [
    "EXTRACT_ARTICLES_STATUS",
    "REQ_IDENTIFY_STATUS",
    "SEND_LEGAL_BASIS_STATUS",
    "STATUS_PHRASES",
    "JobStatus",
    "StatusCatalog",
    "StatusClassification",
]
