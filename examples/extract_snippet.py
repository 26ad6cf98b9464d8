"""Prepare scan-ready snippets from local audio files.

Decodes each file, cuts the first 21 seconds, converts it to 44.1 kHz
stereo 16-bit WAV and writes the snippet next to the original. Shows:
- SoundFileDecoder and OfflineRenderer wired into a SnippetExtractor
- Typed SnippetResult handling (decode vs. extraction failures)

Run with:
    uv run python examples/extract_snippet.py path/to/beat.mp3 [more files...]
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

from soundtrace import (
    AudioUpload,
    OfflineRenderer,
    SnippetExtractor,
    SnippetFailure,
    SoundFileDecoder,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("extract_snippet")


async def main(paths: list[str]) -> int:
    extractor = SnippetExtractor(SoundFileDecoder(), OfflineRenderer())
    failures = 0
    for raw in paths:
        path = Path(raw)
        result = await extractor.prepare(AudioUpload.from_path(path))
        if result.snippet is None:
            failures += 1
            kind = "not decodable" if result.failure == SnippetFailure.DECODE else "too short"
            logger.error("%s: %s (%s)", path.name, kind, result.message)
            continue
        out = path.with_name(result.snippet.file_name)
        out.write_bytes(result.snippet.data)
        logger.info("Wrote %s (%.1fs, %d bytes)", out, result.snippet.duration, result.snippet.size)
    return 1 if failures else 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(asyncio.run(main(sys.argv[1:])))
