"""Tests for speaker up/down-mixing."""

from __future__ import annotations

import math

import numpy as np
import pytest

from soundtrace.audio.mixing import mix_channels


def _ch(*rows: list[float]) -> np.ndarray:
    return np.array(rows, dtype=np.float32)


class TestMixChannels:
    def test_same_count_returns_input(self):
        samples = _ch([0.1, 0.2], [0.3, 0.4])
        assert mix_channels(samples, 2) is samples

    def test_mono_to_stereo_copies(self):
        out = mix_channels(_ch([0.1, -0.2, 0.3]), 2)
        assert out.shape == (2, 3)
        np.testing.assert_allclose(out[0], out[1])
        np.testing.assert_allclose(out[0], [0.1, -0.2, 0.3])

    def test_stereo_to_mono_averages(self):
        out = mix_channels(_ch([1.0, 0.0], [0.0, -1.0]), 1)
        np.testing.assert_allclose(out, [[0.5, -0.5]])

    def test_quad_to_stereo(self):
        out = mix_channels(_ch([1.0], [0.5], [0.5], [0.25]), 2)
        np.testing.assert_allclose(out, [[0.75], [0.375]])

    def test_quad_to_mono(self):
        out = mix_channels(_ch([1.0], [1.0], [1.0], [1.0]), 1)
        np.testing.assert_allclose(out, [[1.0]])

    def test_five_one_to_stereo(self):
        # L, R, C, LFE, SL, SR
        out = mix_channels(_ch([0.1], [0.2], [0.4], [0.9], [0.2], [0.0]), 2)
        half = math.sqrt(0.5)
        np.testing.assert_allclose(
            out, [[0.1 + half * 0.6], [0.2 + half * 0.4]], rtol=1e-5
        )

    def test_five_one_drops_lfe_in_mono(self):
        out = mix_channels(_ch([0.0], [0.0], [0.0], [1.0], [0.0], [0.0]), 1)
        np.testing.assert_allclose(out, [[0.0]])

    def test_mono_to_five_one_uses_centre(self):
        out = mix_channels(_ch([0.5, 0.5]), 6)
        assert out.shape == (6, 2)
        np.testing.assert_allclose(out[2], [0.5, 0.5])
        assert not np.delete(out, 2, axis=0).any()

    def test_discrete_fallback_copies_and_zero_fills(self):
        out = mix_channels(_ch([0.1], [0.2], [0.3]), 2)
        np.testing.assert_allclose(out, [[0.1], [0.2]])
        out = mix_channels(_ch([0.1], [0.2], [0.3]), 5)
        np.testing.assert_allclose(out[:, 0], [0.1, 0.2, 0.3, 0.0, 0.0])

    def test_rejects_zero_target(self):
        with pytest.raises(ValueError, match="target_channels"):
            mix_channels(_ch([0.0]), 0)
