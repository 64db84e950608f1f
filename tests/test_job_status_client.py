"""Tests for lexwatch.client.http.JobStatusClient using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from lexwatch.client import EXTRACT_ARTICLES_DOMAIN, REQ_IDENTIFY_DOMAIN, JobStatusClient
from lexwatch.client.domains import get_domain
from lexwatch.core.config import ApiConfig
from lexwatch.core.errors import ErrorClassifier, ErrorKind
from lexwatch.core.exceptions import (
    CatalogError,
    ConfigurationError,
    JobPayloadError,
    JobRequestError,
    JobTransportError,
)


# ─── fetch_status ───────────────────────────────────────────────────────


class TestFetchStatus:
    @pytest.mark.asyncio
    async def test_success(self, make_client) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json={"message": "Job is still processing", "jobProgress": 40.4}
            )

        async with make_client(handler) as client:
            payload = await client.fetch_status(EXTRACT_ARTICLES_DOMAIN, "42")

        assert payload.message == "Job is still processing"
        assert payload.job_progress == 40
        assert payload.error is None
        assert seen[0].url.path == "/api/jobs/articles/42"
        assert seen[0].headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blank", ["", "   "])
    async def test_blank_error_reads_as_absent(self, make_client, blank: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"message": "Job is still processing", "jobProgress": 10, "error": blank}
            )

        async with make_client(handler) as client:
            payload = await client.fetch_status(EXTRACT_ARTICLES_DOMAIN, "42")
        assert payload.error is None

    @pytest.mark.asyncio
    async def test_req_identify_path(self, make_client) -> None:
        paths: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.path)
            return httpx.Response(200, json={"message": "Job completed successfully"})

        async with make_client(handler) as client:
            await client.fetch_status(REQ_IDENTIFY_DOMAIN, "9")
        assert paths == ["/api/jobs/reqIdentifications/9"]

    @pytest.mark.asyncio
    async def test_error_status_carries_server_message(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Job not found"})

        async with make_client(handler) as client:
            with pytest.raises(JobRequestError) as exc_info:
                await client.fetch_status(EXTRACT_ARTICLES_DOMAIN, "42")

        exc = exc_info.value
        assert exc.http_status_code == 404
        assert exc.server_message == "Job not found"
        assert exc.client_message == "Request failed with status code 404"
        result = ErrorClassifier(EXTRACT_ARTICLES_DOMAIN.error_catalog).classify_exception(exc)
        assert result.kind is ErrorKind.JOB_NOT_FOUND

    @pytest.mark.asyncio
    async def test_related_items_extracted(self, make_client) -> None:
        body = {
            "message": "Cannot delete Legal Bases with pending jobs",
            "errors": {"legalBases": [{"id": 1, "name": "Ley A"}, {"id": 2}]},
        }

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(409, json=body)

        async with make_client(handler) as client:
            with pytest.raises(JobRequestError) as exc_info:
                await client.fetch_status(EXTRACT_ARTICLES_DOMAIN, "1")
        assert exc_info.value.related_items == ("Ley A", "2")

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="<html>oops</html>")

        async with make_client(handler) as client:
            with pytest.raises(JobRequestError) as exc_info:
                await client.fetch_status(EXTRACT_ARTICLES_DOMAIN, "1")
        assert exc_info.value.server_message is None
        assert exc_info.value.http_status_code == 500

    @pytest.mark.asyncio
    async def test_connect_error_is_network_error(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(JobTransportError) as exc_info:
                await client.fetch_status(EXTRACT_ARTICLES_DOMAIN, "1")
        assert exc_info.value.client_message == "Network Error"
        assert exc_info.value.http_status_code is None

    @pytest.mark.asyncio
    async def test_timeout_is_network_error(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with make_client(handler) as client:
            with pytest.raises(JobTransportError):
                await client.fetch_status(EXTRACT_ARTICLES_DOMAIN, "1")

    @pytest.mark.asyncio
    async def test_malformed_payload(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"jobProgress": 10})

        async with make_client(handler) as client:
            with pytest.raises(JobPayloadError):
                await client.fetch_status(EXTRACT_ARTICLES_DOMAIN, "1")

    @pytest.mark.asyncio
    async def test_invalid_json(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="not json")

        async with make_client(handler) as client:
            with pytest.raises(JobPayloadError):
                await client.fetch_status(EXTRACT_ARTICLES_DOMAIN, "1")


# ─── Other job endpoints ────────────────────────────────────────────────


class TestJobEndpoints:
    @pytest.mark.asyncio
    async def test_send_legal_basis(self, make_client) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"jobId": 77})

        async with make_client(handler) as client:
            job_id = await client.send_legal_basis([1, 2])

        assert job_id == "77"
        assert seen[0].method == "POST"
        assert seen[0].url.path == "/api/jobs/legalBasis/"
        assert json.loads(seen[0].content) == {"legalBasisIds": [1, 2]}

    @pytest.mark.asyncio
    async def test_cancel_extraction(self, make_client) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(204)

        async with make_client(handler) as client:
            await client.cancel_extraction("5")
        assert seen[0].method == "DELETE"
        assert seen[0].url.path == "/api/jobs/articles/5"

    @pytest.mark.asyncio
    async def test_get_extraction_status(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/jobs/articles/legalBasis/3"
            return httpx.Response(200, json={"hasPendingJobs": True, "jobId": 12})

        async with make_client(handler) as client:
            pending = await client.get_extraction_status(3)
        assert pending.has_pending_jobs is True
        assert pending.job_id == "12"

    @pytest.mark.asyncio
    async def test_close_is_safe_twice(self, make_client) -> None:
        client = make_client(lambda request: httpx.Response(204))
        await client.cancel_extraction("1")
        await client.close()
        await client.close()


# ─── Construction ───────────────────────────────────────────────────────


class TestConstruction:
    def test_from_config_requires_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LEXWATCH_TOKEN", raising=False)
        with pytest.raises(ConfigurationError, match="LEXWATCH_TOKEN"):
            JobStatusClient.from_config(ApiConfig())

    def test_from_config_reads_token(self, api_token: str) -> None:
        client = JobStatusClient.from_config(ApiConfig(base_url="https://example.org/api/"))
        assert isinstance(client, JobStatusClient)

    def test_domain_lookup(self) -> None:
        assert get_domain("extract_articles") is EXTRACT_ARTICLES_DOMAIN
        with pytest.raises(CatalogError, match="Unknown job domain"):
            get_domain("bogus")
