"""Snippet extraction for fingerprint scanning."""

from soundtrace.snippets.batch import (
    BatchReport,
    BatchSnippetProcessor,
    FileProgress,
    FileStatus,
    UploadSelection,
    select_uploads,
)
from soundtrace.snippets.config import (
    MAX_FILE_SIZE_BYTES,
    MIN_SNIPPET_SECONDS,
    SNIPPET_DURATION_SECONDS,
    TARGET_CHANNELS,
    TARGET_SAMPLE_RATE,
    SnippetConfig,
)
from soundtrace.snippets.extractor import SnippetExtractor
from soundtrace.snippets.models import (
    AudioUpload,
    EncodedSnippet,
    SnippetFailure,
    SnippetRequest,
    SnippetResult,
)
from soundtrace.snippets.naming import sanitize_base_name, snippet_file_name
from soundtrace.snippets.renderer import SnippetRenderer

__all__ = [
    "MAX_FILE_SIZE_BYTES",
    "MIN_SNIPPET_SECONDS",
    "SNIPPET_DURATION_SECONDS",
    "TARGET_CHANNELS",
    "TARGET_SAMPLE_RATE",
    "AudioUpload",
    "BatchReport",
    "BatchSnippetProcessor",
    "EncodedSnippet",
    "FileProgress",
    "FileStatus",
    "SnippetConfig",
    "SnippetExtractor",
    "SnippetFailure",
    "SnippetRenderer",
    "SnippetRequest",
    "SnippetResult",
    "UploadSelection",
    "sanitize_base_name",
    "select_uploads",
    "snippet_file_name",
]
