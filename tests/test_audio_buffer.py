"""Tests for the DecodedAudio data model."""

from __future__ import annotations

import numpy as np
import pytest

from soundtrace.audio.buffer import DecodedAudio


class TestDecodedAudio:
    def test_shape_and_derived_values(self):
        audio = DecodedAudio(samples=np.zeros((2, 48000)), sample_rate=48000)
        assert audio.channels == 2
        assert audio.length == 48000
        assert audio.duration == pytest.approx(1.0)
        assert audio.samples.dtype == np.float32

    def test_one_dimensional_input_is_mono(self):
        audio = DecodedAudio(samples=np.ones(100), sample_rate=100)
        assert audio.channels == 1
        assert audio.length == 100

    def test_samples_are_copied_and_read_only(self):
        source = np.zeros((1, 10), dtype=np.float32)
        audio = DecodedAudio(samples=source, sample_rate=10)
        source[0, 0] = 1.0
        assert audio.samples[0, 0] == 0.0
        with pytest.raises(ValueError):
            audio.samples[0, 0] = 1.0

    def test_zero_length_is_legal(self):
        audio = DecodedAudio(samples=np.zeros((2, 0)), sample_rate=44100)
        assert audio.length == 0
        assert audio.duration == 0.0

    @pytest.mark.parametrize("rate", [0, -44100])
    def test_rejects_non_positive_rate(self, rate):
        with pytest.raises(ValueError, match="sample_rate"):
            DecodedAudio(samples=np.zeros(10), sample_rate=rate)

    def test_rejects_three_dimensional_samples(self):
        with pytest.raises(ValueError, match="1-D or 2-D"):
            DecodedAudio(samples=np.zeros((1, 2, 3)), sample_rate=8000)

    def test_rejects_zero_channels(self):
        with pytest.raises(ValueError, match="at least one channel"):
            DecodedAudio(samples=np.zeros((0, 10)), sample_rate=8000)

    def test_from_interleaved_transposes(self):
        frames = np.array([[0.1, -0.1], [0.2, -0.2], [0.3, -0.3]], dtype=np.float32)
        audio = DecodedAudio.from_interleaved(frames, 8000)
        assert audio.channels == 2
        assert audio.length == 3
        np.testing.assert_allclose(audio.channel_data(0), [0.1, 0.2, 0.3])
        np.testing.assert_allclose(audio.channel_data(1), [-0.1, -0.2, -0.3])

    def test_silence(self):
        audio = DecodedAudio.silence(0.5, 8000, channels=2)
        assert audio.channels == 2
        assert audio.length == 4000
        assert not audio.samples.any()

    def test_channel_data_out_of_range(self):
        audio = DecodedAudio(samples=np.zeros((2, 4)), sample_rate=8000)
        with pytest.raises(IndexError):
            audio.channel_data(2)
        with pytest.raises(IndexError):
            audio.channel_data(-1)
