"""File orchestrator: decode an upload and package its first snippet."""

from __future__ import annotations

import logging

from soundtrace.audio.decoder.base import AudioDecoder, DecodingContext
from soundtrace.audio.renderer.base import AudioRenderer
from soundtrace.errors import DecodeFailure
from soundtrace.snippets.config import SnippetConfig
from soundtrace.snippets.models import AudioUpload, SnippetFailure, SnippetResult
from soundtrace.snippets.renderer import SnippetRenderer

logger = logging.getLogger("soundtrace.snippets")

_FIRST_SEGMENT = 1


class SnippetExtractor:
    """Turns one uploaded file into one scan-ready WAV snippet.

    The policy is fixed at one snippet per file, taken from the start of
    the audio.  A file that cannot yield that first segment is reported as
    failed; nothing is retried.

    Every call opens its own decoding context and closes it on every exit
    path.  No exception escapes :meth:`prepare`: failures come back as a
    :class:`SnippetResult` with a :class:`SnippetFailure` kind.

    Args:
        decoder: Decoder used to turn uploads into PCM.
        renderer: Offline renderer, or a ready :class:`SnippetRenderer`.
        config: Snippet policy, used when *renderer* is a bare
            :class:`AudioRenderer`. Must be omitted when *renderer* is a
            :class:`SnippetRenderer`, which carries its own config.
    """

    def __init__(
        self,
        decoder: AudioDecoder,
        renderer: AudioRenderer | SnippetRenderer,
        config: SnippetConfig | None = None,
    ) -> None:
        self._decoder = decoder
        if isinstance(renderer, SnippetRenderer):
            if config is not None:
                raise ValueError("config cannot be combined with a SnippetRenderer; set it there")
            self._snippets = renderer
        else:
            self._snippets = SnippetRenderer(renderer, config)

    @property
    def config(self) -> SnippetConfig:
        return self._snippets.config

    async def prepare(self, upload: AudioUpload) -> SnippetResult:
        ctx = self._decoder.open()
        try:
            try:
                source = await ctx.decode(upload.data)
            except DecodeFailure as exc:
                logger.info("Could not decode %s: %s", upload.name, exc)
                return SnippetResult.failed(upload.name, SnippetFailure.DECODE, str(exc))
            except Exception as exc:
                logger.warning("Decoder error for %s", upload.name, exc_info=True)
                return SnippetResult.failed(upload.name, SnippetFailure.DECODE, str(exc))

            try:
                snippet = await self._snippets.render_snippet(
                    source, 0.0, upload.name, _FIRST_SEGMENT
                )
            except Exception as exc:
                logger.warning("Snippet extraction error for %s", upload.name, exc_info=True)
                return SnippetResult.failed(upload.name, SnippetFailure.EXTRACTION, str(exc))

            if snippet is None:
                return SnippetResult.failed(
                    upload.name,
                    SnippetFailure.EXTRACTION,
                    f"no viable snippet in {upload.name} ({source.duration:.2f}s of audio)",
                )

            logger.info(
                "Prepared %s from %s (%.2fs, %d bytes)",
                snippet.file_name,
                upload.name,
                snippet.duration,
                snippet.size,
                extra={"file_name": upload.name, "snippet": snippet.file_name},
            )
            return SnippetResult.success(upload.name, snippet)
        finally:
            await self._release(ctx)

    @staticmethod
    async def _release(ctx: DecodingContext) -> None:
        # Close failures cannot change an already-produced result.
        if ctx.state == "closed":
            return
        try:
            await ctx.close()
        except Exception:
            logger.debug("Failed to close decoding context", exc_info=True)
