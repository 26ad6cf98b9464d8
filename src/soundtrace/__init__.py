"""SoundTrace - prepare audio snippets for fingerprint scanning and analyse the matches."""

from soundtrace._version import __version__
from soundtrace.audio import (
    AudioDecoder,
    AudioRenderer,
    DecodedAudio,
    DecodingContext,
    MockAudioDecoder,
    MockAudioRenderer,
    OfflineRenderer,
    SoundFileDecoder,
    encode_wav,
    mix_channels,
)
from soundtrace.errors import (
    DecodeFailure,
    ExtractionFailure,
    ScanServiceError,
    SnippetError,
    SoundTraceError,
    SpotifyAuthError,
    SpotifyError,
)
from soundtrace.providers import (
    ScanServiceClient,
    ScanServiceConfig,
    SpotifyClient,
    SpotifyConfig,
    TokenCache,
)
from soundtrace.snippets import (
    AudioUpload,
    BatchReport,
    BatchSnippetProcessor,
    EncodedSnippet,
    FileProgress,
    FileStatus,
    SnippetConfig,
    SnippetExtractor,
    SnippetFailure,
    SnippetRenderer,
    SnippetRequest,
    SnippetResult,
    select_uploads,
    snippet_file_name,
)

__all__ = [
    "AudioDecoder",
    "AudioRenderer",
    "AudioUpload",
    "BatchReport",
    "BatchSnippetProcessor",
    "DecodeFailure",
    "DecodedAudio",
    "DecodingContext",
    "EncodedSnippet",
    "ExtractionFailure",
    "FileProgress",
    "FileStatus",
    "MockAudioDecoder",
    "MockAudioRenderer",
    "OfflineRenderer",
    "ScanServiceClient",
    "ScanServiceConfig",
    "ScanServiceError",
    "SnippetConfig",
    "SnippetError",
    "SnippetExtractor",
    "SnippetFailure",
    "SnippetRenderer",
    "SnippetRequest",
    "SnippetResult",
    "SoundFileDecoder",
    "SoundTraceError",
    "SpotifyAuthError",
    "SpotifyClient",
    "SpotifyConfig",
    "SpotifyError",
    "TokenCache",
    "__version__",
    "encode_wav",
    "mix_channels",
    "select_uploads",
    "snippet_file_name",
]
