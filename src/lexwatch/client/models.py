"""Pydantic models for job API response bodies."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobStatusPayload(BaseModel):
    """Body of a successful ``GET /jobs/{domain}/{job_id}``.

    ``message`` is the raw status phrase; ``error``, when present, is the
    raw failure phrase reported by the worker.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    message: str
    job_progress: int | None = Field(default=None, alias="jobProgress", ge=0, le=100)
    error: str | None = None

    @field_validator("job_progress", mode="before")
    @classmethod
    def _round_progress(cls, value: Any) -> Any:
        # Workers report fractional percentages while a page is half processed
        if isinstance(value, float):
            return round(value)
        return value

    @field_validator("error", mode="before")
    @classmethod
    def _blank_error_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PendingJob(BaseModel):
    """Body of ``GET /jobs/articles/legalBasis/{id}``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    has_pending_jobs: bool = Field(alias="hasPendingJobs")
    job_id: str | None = Field(default=None, alias="jobId")

    @field_validator("job_id", mode="before")
    @classmethod
    def _stringify_job_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value


class JobCreated(BaseModel):
    """Body of an accepted job submission."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    job_id: str = Field(alias="jobId")

    @field_validator("job_id", mode="before")
    @classmethod
    def _stringify_job_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value


__all__ = ["JobCreated", "JobStatusPayload", "PendingJob"]
