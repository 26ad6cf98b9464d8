"""Async client for the SoundTrace scan and job API."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

import httpx

from soundtrace.errors import ScanServiceError
from soundtrace.models.scan import (
    FileUploadResponse,
    ScanJob,
    SnippetScanResult,
    TrackScanLog,
)
from soundtrace.providers.scan.config import ScanServiceConfig
from soundtrace.snippets.models import EncodedSnippet

logger = logging.getLogger("soundtrace.providers.scan")

_JOBS_PATH = "/api/scan-jobs"
_LOGS_PATH = "/api/scan-logs"


class ScanServiceClient:
    """Talks to the SoundTrace backend over HTTP.

    Every job and log call needs a bearer token; a missing token raises
    :class:`ScanServiceError` with status 401 before anything is sent.
    Snippet scans go to the public scan endpoint and only attach the token
    when one is configured.
    """

    def __init__(self, config: ScanServiceConfig | None = None) -> None:
        self._config = config or ScanServiceConfig()
        self._client: httpx.AsyncClient = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
        )

    @property
    def name(self) -> str:
        return "ScanServiceClient"

    async def __aenter__(self) -> ScanServiceClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # -- scanning --------------------------------------------------------------

    async def scan_snippet(self, snippet: EncodedSnippet) -> SnippetScanResult:
        """Submit one snippet for fingerprint identification."""
        headers = self._auth_headers(required=False)
        data = await self._request(
            "POST",
            self._config.scan_path,
            files=self._audio_file(snippet),
            headers=headers,
        )
        result = SnippetScanResult.model_validate(_require_body(data, self._config.scan_path))
        logger.info(
            "Scanned %s: %d match(es)",
            snippet.file_name,
            len(result.matches),
            extra={"scan_id": result.scan_id},
        )
        return result

    # -- jobs ------------------------------------------------------------------

    async def initiate_file_job(self, files: Sequence[tuple[str, int]]) -> ScanJob:
        """Create a file-upload job for ``(file_name, file_size)`` pairs."""
        payload = {"files": [{"fileName": name, "fileSize": size} for name, size in files]}
        path = f"{_JOBS_PATH}/initiate/files"
        data = await self._request("POST", path, json=payload, headers=self._auth_headers())
        return ScanJob.model_validate(_require_body(data, path))

    async def upload_file(
        self,
        job_id: str,
        snippet: EncodedSnippet,
        *,
        file_name: str | None = None,
    ) -> FileUploadResponse | None:
        """Upload a prepared snippet into an existing job.

        Args:
            job_id: Job created by :meth:`initiate_file_job`.
            snippet: Audio to upload.
            file_name: Name the file was registered under in the job.
                Defaults to the snippet's own file name.

        Returns:
            The backend's file and job state, or ``None`` when the upload
            was acknowledged without a body.
        """
        target = file_name or snippet.file_name
        path = f"{_JOBS_PATH}/{job_id}/upload-file/{quote(target, safe='')}"
        data = await self._request(
            "POST",
            path,
            files=self._audio_file(snippet),
            headers=self._auth_headers(),
        )
        if data is None:
            return None
        return FileUploadResponse.model_validate(data)

    async def list_jobs(self) -> list[ScanJob]:
        data = await self._request("GET", _JOBS_PATH, headers=self._auth_headers())
        jobs = data.get("jobs", []) if isinstance(data, dict) else []
        return [ScanJob.model_validate(job) for job in jobs]

    async def get_job(self, job_id: str) -> ScanJob:
        path = f"{_JOBS_PATH}/{job_id}"
        data = await self._request("GET", path, headers=self._auth_headers())
        return ScanJob.model_validate(_require_body(data, path))

    async def list_scan_logs(self) -> list[TrackScanLog]:
        data = await self._request("GET", _LOGS_PATH, headers=self._auth_headers())
        return [TrackScanLog.model_validate(entry) for entry in data or []]

    async def close(self) -> None:
        await self._client.aclose()

    # -- internals -------------------------------------------------------------

    def _auth_headers(self, *, required: bool = True) -> dict[str, str]:
        token = self._config.auth_token
        if token is None or not token.get_secret_value():
            if required:
                raise ScanServiceError("Not authenticated.", status_code=401)
            return {}
        return {"Authorization": f"Bearer {token.get_secret_value()}"}

    @staticmethod
    def _audio_file(snippet: EncodedSnippet) -> dict[str, tuple[str, bytes, str]]:
        return {"audioFile": (snippet.file_name, snippet.data, snippet.media_type)}

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("Request %s %s failed: %s", method, path, exc)
            raise ScanServiceError(str(exc) or "Network error", status_code=0) from exc

        if response.is_error:
            raise ScanServiceError(_error_message(response), status_code=response.status_code)
        if response.status_code == 204:
            return None
        if "application/json" in response.headers.get("content-type", ""):
            return response.json()
        return response.text


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    reason = response.reason_phrase or "Unknown error"
    return f"Request failed: {response.status_code} {reason}"


def _require_body(data: Any, path: str) -> Any:
    if data is None:
        raise ScanServiceError(f"Empty response from {path}", status_code=204)
    return data
