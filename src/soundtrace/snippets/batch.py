"""Sequential batch processing of user-selected uploads."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Coroutine, Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum, unique
from typing import TYPE_CHECKING, Any

from soundtrace.errors import ScanServiceError
from soundtrace.snippets.config import SnippetConfig
from soundtrace.snippets.models import AudioUpload, EncodedSnippet

if TYPE_CHECKING:
    from soundtrace.models.scan import ScanJob
    from soundtrace.providers.scan.client import ScanServiceClient
    from soundtrace.snippets.extractor import SnippetExtractor

logger = logging.getLogger("soundtrace.batch")

Uploader = Callable[[EncodedSnippet, AudioUpload], Awaitable[Any]]
ProgressCallback = Callable[[int, int, "FileProgress"], Coroutine[Any, Any, None] | None]


@unique
class FileStatus(StrEnum):
    """Per-file state within a batch."""

    PENDING = "pending"
    PROCESSING = "processing"
    PREPARED = "prepared"
    UPLOADING = "uploading"
    UPLOADED = "uploaded"
    ERROR_PROCESSING = "error_processing"
    ERROR_UPLOAD = "error_upload"


_TERMINAL_ERRORS = frozenset({FileStatus.ERROR_PROCESSING, FileStatus.ERROR_UPLOAD})


@dataclass
class FileProgress:
    """Progress record for one file in a batch."""

    file_name: str
    file_size: int
    status: FileStatus = FileStatus.PENDING
    error_message: str | None = None
    snippet_name: str | None = None
    response: Any = None

    @property
    def failed(self) -> bool:
        return self.status in _TERMINAL_ERRORS


@dataclass
class UploadSelection:
    """Files accepted for a batch and the names skipped, by reason."""

    accepted: list[AudioUpload] = field(default_factory=list)
    skipped_non_audio: list[str] = field(default_factory=list)
    skipped_too_large: list[str] = field(default_factory=list)
    skipped_duplicates: list[str] = field(default_factory=list)


@dataclass
class BatchReport:
    """Result of a batch run."""

    files: list[FileProgress] = field(default_factory=list)
    aborted: bool = False

    @property
    def succeeded(self) -> list[FileProgress]:
        return [f for f in self.files if f.status in (FileStatus.PREPARED, FileStatus.UPLOADED)]

    @property
    def failed(self) -> list[FileProgress]:
        return [f for f in self.files if f.failed]


def select_uploads(
    uploads: Iterable[AudioUpload],
    config: SnippetConfig | None = None,
    existing: Sequence[AudioUpload] = (),
) -> UploadSelection:
    """Filter a user selection down to audio files within the size ceiling.

    Files are deduplicated by ``(name, size)`` against each other and against
    *existing*, keeping the first occurrence and the user's order.
    """
    cfg = config or SnippetConfig()
    selection = UploadSelection()
    seen = {(u.name, u.size) for u in existing}
    for upload in uploads:
        if not upload.content_type.startswith("audio/"):
            selection.skipped_non_audio.append(upload.name)
            continue
        if upload.size > cfg.max_file_size_bytes:
            logger.info(
                "Skipping %s: %d bytes exceeds the %d byte limit",
                upload.name,
                upload.size,
                cfg.max_file_size_bytes,
            )
            selection.skipped_too_large.append(upload.name)
            continue
        key = (upload.name, upload.size)
        if key in seen:
            selection.skipped_duplicates.append(upload.name)
            continue
        seen.add(key)
        selection.accepted.append(upload)
    return selection


class BatchSnippetProcessor:
    """Prepares (and optionally uploads) snippets one file at a time.

    Files are handled strictly in the given order so progress can always be
    attributed to a single file.  A file that fails is marked and the batch
    moves on; only an authentication failure from the upload service stops
    the run, leaving the remaining files pending.
    """

    def __init__(self, extractor: SnippetExtractor) -> None:
        self._extractor = extractor

    async def run(
        self,
        uploads: Sequence[AudioUpload],
        *,
        uploader: Uploader | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> BatchReport:
        report = BatchReport(files=[FileProgress(u.name, u.size) for u in uploads])
        total = len(uploads)

        for index, (upload, progress) in enumerate(zip(uploads, report.files, strict=True)):
            progress.status = FileStatus.PROCESSING
            await self._notify(on_progress, index, total, progress)

            result = await self._extractor.prepare(upload)
            if result.snippet is None:
                progress.status = FileStatus.ERROR_PROCESSING
                progress.error_message = result.message or "file could not be processed"
                logger.warning("Failed to process %s: %s", upload.name, progress.error_message)
                await self._notify(on_progress, index, total, progress)
                continue

            progress.snippet_name = result.snippet.file_name
            if uploader is None:
                progress.status = FileStatus.PREPARED
                await self._notify(on_progress, index, total, progress)
                continue

            progress.status = FileStatus.UPLOADING
            await self._notify(on_progress, index, total, progress)
            try:
                progress.response = await uploader(result.snippet, upload)
            except Exception as exc:
                progress.status = FileStatus.ERROR_UPLOAD
                progress.error_message = str(exc) or "upload failed"
                logger.warning("Failed to upload %s: %s", upload.name, progress.error_message)
                await self._notify(on_progress, index, total, progress)
                if _is_auth_error(exc):
                    report.aborted = True
                    break
                continue

            progress.status = FileStatus.UPLOADED
            await self._notify(on_progress, index, total, progress)

        logger.info(
            "Batch finished: %d ok, %d failed, %d total",
            len(report.succeeded),
            len(report.failed),
            total,
            extra={"aborted": report.aborted},
        )
        return report

    async def run_job(
        self,
        client: ScanServiceClient,
        uploads: Sequence[AudioUpload],
        *,
        on_progress: ProgressCallback | None = None,
    ) -> tuple[ScanJob, BatchReport]:
        """Create a backend file-upload job and upload each file's snippet into it.

        Each snippet is uploaded under its original file name, the name the
        job was created with.
        """
        job = await client.initiate_file_job([(u.name, u.size) for u in uploads])
        logger.info("Job %s created for %d file(s)", job.id, len(uploads))

        async def upload_into_job(snippet: EncodedSnippet, upload: AudioUpload) -> Any:
            return await client.upload_file(job.id, snippet, file_name=upload.name)

        report = await self.run(uploads, uploader=upload_into_job, on_progress=on_progress)
        return job, report

    @staticmethod
    async def _notify(
        callback: ProgressCallback | None,
        index: int,
        total: int,
        progress: FileProgress,
    ) -> None:
        if callback is None:
            return
        result = callback(index, total, progress)
        if asyncio.iscoroutine(result):
            await result


def _is_auth_error(exc: Exception) -> bool:
    return isinstance(exc, ScanServiceError) and exc.category == "unauthorized"
