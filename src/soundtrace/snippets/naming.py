"""Snippet file naming."""

from __future__ import annotations

import re

from soundtrace.utils import round_half_up

_SAFE_FILENAME_RE = re.compile(r"[^a-zA-Z0-9_.\-]")


def sanitize_base_name(file_name: str) -> str:
    """Drop the extension and replace unsafe characters with ``_``.

    The base name is everything before the last ``.``; a name with no
    extension (or nothing before the dot) is used whole.
    """
    dot = file_name.rfind(".")
    base = file_name[:dot] if dot > 0 else ""
    return _SAFE_FILENAME_RE.sub("_", base or file_name)


def snippet_file_name(
    original_name: str,
    segment_index: int,
    start_offset: float,
    timestamp_ms: int,
) -> str:
    """Build ``<base>_S<index>_<start>s_T<timestamp>.wav``."""
    base = sanitize_base_name(original_name)
    return f"{base}_S{segment_index}_{round_half_up(start_offset)}s_T{timestamp_ms}.wav"
