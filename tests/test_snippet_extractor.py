"""End-to-end tests for preparing uploads into snippets."""

from __future__ import annotations

import io
import logging
import wave

import pytest

from soundtrace.audio.decoder import MockAudioDecoder, SoundFileDecoder
from soundtrace.audio.renderer import MockAudioRenderer, OfflineRenderer
from soundtrace.errors import DecodeFailure, ExtractionFailure
from soundtrace.snippets.config import SnippetConfig
from soundtrace.snippets.extractor import SnippetExtractor
from soundtrace.snippets.models import AudioUpload, SnippetFailure
from soundtrace.snippets.renderer import SnippetRenderer


@pytest.fixture
def extractor(fixed_clock) -> SnippetExtractor:
    return SnippetExtractor(
        SoundFileDecoder(),
        SnippetRenderer(OfflineRenderer("kaiser_fast"), clock=fixed_clock),
    )


def _wav_params(data: bytes):
    with wave.open(io.BytesIO(data), "rb") as reader:
        return reader.getparams()


class TestEndToEnd:
    async def test_long_mono_48k(self, extractor, sine, encode):
        upload = AudioUpload("long take.wav", encode(sine(30.0, sample_rate=48000)), "audio/wav")
        result = await extractor.prepare(upload)

        assert result.ok
        snippet = result.unwrap()
        assert snippet.file_name == "long_take_S1_0s_T1700000000000.wav"
        assert snippet.duration == pytest.approx(21.0, abs=1 / 44100)
        params = _wav_params(snippet.data)
        assert params.nchannels == 2
        assert params.framerate == 44100
        assert params.sampwidth == 2
        assert params.nframes == 21 * 44100

    async def test_half_second_clip(self, extractor, sine, encode):
        upload = AudioUpload("blip.wav", encode(sine(0.5)), "audio/wav")
        result = await extractor.prepare(upload)

        assert not result.ok
        assert result.failure == SnippetFailure.EXTRACTION
        assert result.file_name == "blip.wav"
        with pytest.raises(ExtractionFailure):
            result.unwrap()

    async def test_corrupt_mp3(self, extractor):
        upload = AudioUpload("broken.mp3", b"\x00\x01garbage" * 200, "audio/mpeg")
        result = await extractor.prepare(upload)

        assert result.failure == SnippetFailure.DECODE
        assert result.snippet is None
        with pytest.raises(DecodeFailure):
            result.unwrap()

    async def test_exactly_snippet_length(self, extractor, sine, encode):
        upload = AudioUpload("exact.wav", encode(sine(21.0, sample_rate=44100, channels=2)))
        snippet = (await extractor.prepare(upload)).unwrap()
        assert _wav_params(snippet.data).nframes == 21 * 44100

    async def test_slightly_longer_than_snippet(self, extractor, sine, encode):
        upload = AudioUpload("longer.flac", encode(sine(22.0, sample_rate=44100), fmt="FLAC"))
        snippet = (await extractor.prepare(upload)).unwrap()
        assert snippet.duration == pytest.approx(21.0)
        assert _wav_params(snippet.data).nframes == 21 * 44100


class TestContextLifecycle:
    async def test_closed_after_success(self, sine):
        decoder = MockAudioDecoder(sine(5.0, sample_rate=8000))
        result = await SnippetExtractor(decoder, MockAudioRenderer()).prepare(
            AudioUpload("a.wav", b"data")
        )
        assert result.ok
        assert decoder.calls == [b"data"]
        assert decoder.contexts[0].state == "closed"

    async def test_closed_after_decode_failure(self):
        decoder = MockAudioDecoder(error=DecodeFailure("nope"))
        result = await SnippetExtractor(decoder, MockAudioRenderer()).prepare(
            AudioUpload("a.mp3", b"x")
        )
        assert result.failure == SnippetFailure.DECODE
        assert result.message == "nope"
        assert decoder.contexts[0].state == "closed"

    async def test_unexpected_decoder_error_is_a_decode_failure(self):
        decoder = MockAudioDecoder(error=OSError("disk"))
        result = await SnippetExtractor(decoder, MockAudioRenderer()).prepare(
            AudioUpload("a.mp3", b"x")
        )
        assert result.failure == SnippetFailure.DECODE
        assert decoder.contexts[0].state == "closed"

    async def test_closed_after_extraction_failure(self, sine):
        decoder = MockAudioDecoder(sine(0.2))
        result = await SnippetExtractor(decoder, MockAudioRenderer()).prepare(
            AudioUpload("a.wav", b"x")
        )
        assert result.failure == SnippetFailure.EXTRACTION
        assert decoder.contexts[0].state == "closed"

    async def test_render_error_is_an_extraction_failure(self, sine):
        decoder = MockAudioDecoder(sine(5.0))
        renderer = MockAudioRenderer(error=RuntimeError("render"))
        result = await SnippetExtractor(decoder, renderer).prepare(AudioUpload("a.wav", b"x"))
        assert result.failure == SnippetFailure.EXTRACTION
        assert decoder.contexts[0].state == "closed"

    async def test_close_failure_is_swallowed(self, sine, caplog):
        decoder = MockAudioDecoder(sine(5.0), close_error=RuntimeError("already closing"))
        with caplog.at_level(logging.DEBUG, logger="soundtrace.snippets"):
            result = await SnippetExtractor(decoder, MockAudioRenderer()).prepare(
                AudioUpload("a.wav", b"x")
            )
        assert result.ok
        assert decoder.contexts[0].close_calls == 1
        assert "Failed to close decoding context" in caplog.text

    async def test_each_file_gets_its_own_context(self, sine):
        decoder = MockAudioDecoder(sine(5.0))
        extractor = SnippetExtractor(decoder, MockAudioRenderer())
        await extractor.prepare(AudioUpload("a.wav", b"1"))
        await extractor.prepare(AudioUpload("b.wav", b"2"))
        assert len(decoder.contexts) == 2
        assert all(ctx.close_calls == 1 for ctx in decoder.contexts)


class TestConfiguration:
    async def test_bare_renderer_uses_config(self, sine):
        config = SnippetConfig(target_sample_rate=16000, target_channels=1)
        extractor = SnippetExtractor(MockAudioDecoder(sine(30.0)), MockAudioRenderer(), config)
        snippet = (await extractor.prepare(AudioUpload("a.wav", b"x"))).unwrap()
        assert extractor.config is config
        assert snippet.sample_rate == 16000
        assert snippet.channels == 1

    def test_snippet_renderer_keeps_its_own_config(self):
        config = SnippetConfig(target_channels=1)
        extractor = SnippetExtractor(
            MockAudioDecoder(), SnippetRenderer(MockAudioRenderer(), config)
        )
        assert extractor.config is config

    def test_config_with_snippet_renderer_is_rejected(self):
        with pytest.raises(ValueError, match="SnippetRenderer"):
            SnippetExtractor(
                MockAudioDecoder(),
                SnippetRenderer(MockAudioRenderer()),
                SnippetConfig(target_channels=1),
            )
