"""HTTP client for the job endpoints of the administration API.

Every call is a single round-trip authenticated with a bearer token. Failures
are raised as JobRequestError subclasses carrying exactly the fields the error
classifier consumes; nothing here classifies or retries.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import TracebackType
from typing import Any

import httpx
from pydantic import ValidationError

from lexwatch.client.domains import EXTRACT_ARTICLES_DOMAIN, SEND_LEGAL_BASIS_DOMAIN, JobDomain
from lexwatch.client.models import JobCreated, JobStatusPayload, PendingJob
from lexwatch.core.config import ApiConfig
from lexwatch.core.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS, NETWORK_ERROR_MESSAGE
from lexwatch.core.exceptions import JobPayloadError, JobRequestError, JobTransportError
from lexwatch.core.logging import get_logger

_logger = get_logger("client")


def _extract_server_message(body: Any) -> str | None:
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def _extract_related_items(body: Any) -> tuple[str, ...]:
    """Collect entity names from an ``{"errors": {"<entity>": [{"name": ...}]}}`` body.

    Batch endpoints list the entities that blocked the operation; entries
    without a name contribute their id.
    """
    if not isinstance(body, dict):
        return ()
    errors = body.get("errors")
    if not isinstance(errors, dict):
        return ()
    items: list[str] = []
    for entries in errors.values():
        if not isinstance(entries, list):
            continue
        for entry in entries:
            if isinstance(entry, dict):
                label = entry.get("name", entry.get("id"))
                if label is not None:
                    items.append(str(label))
            elif isinstance(entry, str | int):
                items.append(str(entry))
    return tuple(items)


class JobStatusClient:
    """Async client for job submission, status and cancellation.

    Example:
        async with JobStatusClient.from_config(config.api) as client:
            payload = await client.fetch_status(EXTRACT_ARTICLES_DOMAIN, "42")
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root; job paths are appended to it.
            token: Bearer token sent with every request.
            timeout: Total timeout per request in seconds.
            transport: Optional httpx transport, e.g. a MockTransport in tests.
        """
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_config(
        cls,
        api: ApiConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> JobStatusClient:
        """Build a client from config, reading the token from the environment.

        Raises:
            ConfigurationError: If the token variable is not set.
        """
        return cls(
            api.base_url,
            api.resolve_token(),
            timeout=api.timeout_seconds,
            transport=transport,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/json",
                },
                transport=self._transport,
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        *,
        expected_status: int,
        json: Any = None,
    ) -> httpx.Response:
        client = await self._get_client()
        try:
            response = await client.request(method, path, json=json)
        except httpx.TimeoutException as e:
            _logger.warning("client.request_timeout", method=method, path=path)
            raise JobTransportError(NETWORK_ERROR_MESSAGE) from e
        except httpx.RequestError as e:
            _logger.warning(
                "client.request_failed", method=method, path=path, error=str(e)
            )
            raise JobTransportError(NETWORK_ERROR_MESSAGE) from e

        if response.status_code != expected_status:
            raise self._http_error(method, path, response)
        return response

    def _http_error(self, method: str, path: str, response: httpx.Response) -> JobRequestError:
        try:
            body: Any = response.json()
        except ValueError:
            body = None
        error = JobRequestError(
            f"Request failed with status code {response.status_code}",
            http_status_code=response.status_code,
            server_message=_extract_server_message(body),
            related_items=_extract_related_items(body),
        )
        _logger.info(
            "client.unexpected_status",
            method=method,
            path=path,
            status_code=response.status_code,
            server_message=error.server_message,
        )
        return error

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise JobPayloadError(
                "Response body is not valid JSON",
                http_status_code=response.status_code,
            ) from e

    # ─── Job endpoints ──────────────────────────────────────────────────

    async def fetch_status(self, domain: JobDomain, job_id: str) -> JobStatusPayload:
        """One status round-trip for a job.

        Raises:
            JobTransportError: No response (connectivity, timeout).
            JobRequestError: Any status other than 200.
            JobPayloadError: A 200 whose body lacks a status message.
        """
        response = await self._request("GET", domain.status_path(job_id), expected_status=200)
        body = self._parse_json(response)
        try:
            payload = JobStatusPayload.model_validate(body)
        except ValidationError as e:
            raise JobPayloadError(
                f"Malformed job status payload: {e.error_count()} validation error(s)",
                http_status_code=response.status_code,
            ) from e
        _logger.debug(
            "client.status_fetched",
            domain=domain.name,
            job_id=job_id,
            status_message=payload.message,
            progress=payload.job_progress,
            has_error=payload.error is not None,
        )
        return payload

    async def send_legal_basis(self, legal_basis_ids: Iterable[int | str]) -> str:
        """Queue legal bases for sending; returns the id of the created job."""
        ids = list(legal_basis_ids)
        response = await self._request(
            "POST",
            f"/jobs/{SEND_LEGAL_BASIS_DOMAIN.path}/",
            expected_status=201,
            json={"legalBasisIds": ids},
        )
        try:
            created = JobCreated.model_validate(self._parse_json(response))
        except ValidationError as e:
            raise JobPayloadError(
                "Job submission response has no jobId",
                http_status_code=response.status_code,
            ) from e
        _logger.info("client.send_job_created", job_id=created.job_id, count=len(ids))
        return created.job_id

    async def cancel_extraction(self, job_id: str) -> None:
        """Cancel an article extraction job."""
        await self._request(
            "DELETE", EXTRACT_ARTICLES_DOMAIN.status_path(job_id), expected_status=204
        )
        _logger.info("client.extraction_cancelled", job_id=job_id)

    async def get_extraction_status(self, legal_basis_id: int | str) -> PendingJob:
        """Whether a legal basis has an article extraction in progress."""
        response = await self._request(
            "GET",
            f"/jobs/{EXTRACT_ARTICLES_DOMAIN.path}/legalBasis/{legal_basis_id}",
            expected_status=200,
        )
        try:
            return PendingJob.model_validate(self._parse_json(response))
        except ValidationError as e:
            raise JobPayloadError(
                "Malformed pending-job payload",
                http_status_code=response.status_code,
            ) from e

    # ─── Lifecycle ──────────────────────────────────────────────────────

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> JobStatusClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


__all__ = ["JobStatusClient"]
