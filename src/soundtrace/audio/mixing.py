"""Channel up/down-mixing following the Web Audio "speakers" interpretation."""

from __future__ import annotations

import math

import numpy as np

_SQRT_HALF = math.sqrt(0.5)


def mix_channels(samples: np.ndarray, target_channels: int) -> np.ndarray:
    """Mix ``(channels, frames)`` float samples to *target_channels*.

    Mono, stereo, quad (L, R, SL, SR) and 5.1 (L, R, C, LFE, SL, SR) layouts
    use the standard speaker mixing coefficients.  Any other combination is
    mixed discretely: shared channels are copied and the rest zero-filled.

    Returns the input array unchanged when no mixing is needed.
    """
    if target_channels < 1:
        raise ValueError(f"target_channels must be >= 1, got {target_channels}")
    src_channels = samples.shape[0]
    if src_channels == target_channels:
        return samples

    if src_channels == 1:
        if target_channels == 2:
            return np.vstack([samples[0], samples[0]])
        if target_channels == 4:
            zeros = np.zeros_like(samples[0])
            return np.vstack([samples[0], samples[0], zeros, zeros])
        if target_channels == 6:
            zeros = np.zeros_like(samples[0])
            return np.vstack([zeros, zeros, samples[0], zeros, zeros, zeros])

    if target_channels == 1:
        if src_channels == 2:
            return (0.5 * (samples[0] + samples[1]))[None, :]
        if src_channels == 4:
            return (0.25 * samples[:4].sum(axis=0))[None, :]
        if src_channels == 6:
            left, right, centre, _lfe, s_left, s_right = samples[:6]
            mono = _SQRT_HALF * (left + right) + centre + 0.5 * (s_left + s_right)
            return mono[None, :]

    if target_channels == 2:
        if src_channels == 4:
            left, right, s_left, s_right = samples[:4]
            return np.vstack([0.5 * (left + s_left), 0.5 * (right + s_right)])
        if src_channels == 6:
            left, right, centre, _lfe, s_left, s_right = samples[:6]
            return np.vstack(
                [
                    left + _SQRT_HALF * (centre + s_left),
                    right + _SQRT_HALF * (centre + s_right),
                ]
            )

    # Discrete
    out = np.zeros((target_channels, samples.shape[1]), dtype=samples.dtype)
    shared = min(src_channels, target_channels)
    out[:shared] = samples[:shared]
    return out
