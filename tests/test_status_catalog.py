"""Tests for lexwatch.core.status."""

from __future__ import annotations

import pytest

from lexwatch.core.exceptions import CatalogError
from lexwatch.core.status import (
    EXTRACT_ARTICLES_STATUS,
    REQ_IDENTIFY_STATUS,
    SEND_LEGAL_BASIS_STATUS,
    STATUS_PHRASES,
    JobStatus,
    StatusCatalog,
)


class TestStatusPhrases:
    @pytest.mark.parametrize(("phrase", "status"), sorted(STATUS_PHRASES.items()))
    def test_shared_phrases(self, phrase: str, status: JobStatus) -> None:
        assert EXTRACT_ARTICLES_STATUS.classify_status(phrase).status is status

    def test_active_message(self) -> None:
        result = EXTRACT_ARTICLES_STATUS.classify_status("Job is still processing")
        assert result.status is JobStatus.ACTIVE
        assert result.message == "El proceso de extracción de artículos está en curso..."

    def test_unrecognized_phrase_is_unknown(self) -> None:
        result = SEND_LEGAL_BASIS_STATUS.classify_status("Job exploded")
        assert result.status is JobStatus.UNKNOWN
        assert result.message == SEND_LEGAL_BASIS_STATUS.message_for(JobStatus.UNKNOWN)

    def test_messages_differ_per_job_type(self) -> None:
        phrase = "Job completed successfully"
        messages = {
            catalog.classify_status(phrase).message
            for catalog in (SEND_LEGAL_BASIS_STATUS, EXTRACT_ARTICLES_STATUS, REQ_IDENTIFY_STATUS)
        }
        assert len(messages) == 3


class TestStatusCatalog:
    def test_missing_message_rejected(self) -> None:
        with pytest.raises(CatalogError, match="stuck"):
            StatusCatalog(
                "partial",
                {status: "x" for status in JobStatus if status is not JobStatus.STUCK},
            )

    def test_terminal_statuses(self) -> None:
        assert {status for status in JobStatus if status.is_terminal} == {
            JobStatus.COMPLETED,
            JobStatus.FAILED,
        }

    def test_repr(self) -> None:
        assert repr(REQ_IDENTIFY_STATUS) == "StatusCatalog(name='req_identify')"
