from .base import (
    TTSOptions,
    TTSMetadata,
    TTSProvider,
    TTSConnection,
    ExplanationResult,
    TranslationOptions,
    TranslationResult,
    ExplanationProvider,
    TranscriptionResult,
    TranslationProvider,
    TranscriptionOptions,
    TranscriptionProvider,
)

__all__ = [
    "ExplanationProvider",
    "ExplanationResult",
    "TTSConnection",
    "TTSMetadata",
    "TTSOptions",
    "TTSProvider",
    "TranscriptionOptions",
    "TranscriptionProvider",
    "TranscriptionResult",
    "TranslationOptions",
    "TranslationProvider",
    "TranslationResult",
]
