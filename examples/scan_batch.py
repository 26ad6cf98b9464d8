"""Upload a folder of beats to a SoundTrace file-upload job.

Filters the folder down to audio files under the 50 MB ceiling, creates a
backend job for them and uploads one snippet per file, printing progress as
it goes. An expired token stops the batch early. Shows:
- select_uploads() for the upload page's selection rules
- BatchSnippetProcessor.run_job() with a ScanServiceClient
- A progress callback

Run with:
    SOUNDTRACE_TOKEN=... uv run python examples/scan_batch.py path/to/folder
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from pathlib import Path

from soundtrace import (
    AudioUpload,
    BatchSnippetProcessor,
    FileProgress,
    OfflineRenderer,
    ScanServiceClient,
    ScanServiceConfig,
    SnippetExtractor,
    SoundFileDecoder,
    select_uploads,
)

logging.basicConfig(level=logging.WARNING)


def on_progress(index: int, total: int, progress: FileProgress) -> None:
    detail = f" - {progress.error_message}" if progress.error_message else ""
    print(f"[{index + 1}/{total}] {progress.file_name}: {progress.status}{detail}")


async def main(folder: Path) -> int:
    uploads = [AudioUpload.from_path(p) for p in sorted(folder.iterdir()) if p.is_file()]
    selection = select_uploads(uploads)
    for name in selection.skipped_non_audio:
        print(f"skipped (not audio): {name}")
    for name in selection.skipped_too_large:
        print(f"skipped (over 50 MB): {name}")
    if not selection.accepted:
        print("Nothing to upload.")
        return 1

    config = ScanServiceConfig(
        base_url=os.environ.get("SOUNDTRACE_API_URL", "https://api.soundtrace.uk"),
        auth_token=os.environ.get("SOUNDTRACE_TOKEN"),
    )
    processor = BatchSnippetProcessor(SnippetExtractor(SoundFileDecoder(), OfflineRenderer()))
    async with ScanServiceClient(config) as client:
        job, report = await processor.run_job(client, selection.accepted, on_progress=on_progress)

    print(f"Job {job.id}: {len(report.succeeded)} uploaded, {len(report.failed)} failed")
    if report.aborted:
        print("Stopped early: the backend rejected the token.")
    return 0 if not report.failed else 1


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(asyncio.run(main(Path(sys.argv[1]))))
