"""Provider interfaces and the value types that cross them."""

from __future__ import annotations

from typing import Literal, Protocol
from dataclasses import dataclass

from pydantic import Field, BaseModel, ConfigDict

Slider = float | None
Gender = Literal["male", "female"]


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Transcription
# ---------------------------------------------------------------------------


class TranscribedWord(_Model):
    text: str
    start: int
    end: int
    confidence: float


class TranscriptionResult(_Model):
    text: str
    language: str | None = None
    confidence: float | None = None
    words: list[TranscribedWord] | None = None


class TranscriptionOptions(_Model):
    language_code: str | None = None
    punctuate: bool | None = None
    format_text: bool | None = None


class TranscriptionProvider(Protocol):
    async def transcribe(
        self,
        audio: bytes,
        *,
        content_type: str | None = None,
        options: TranscriptionOptions | None = None,
    ) -> TranscriptionResult: ...


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------


class TranslationOptions(_Model):
    # Sliders run from -1 to 1: casual..formal, concise..detailed, positive..negative.
    tone: Slider = Field(default=None, ge=-1.0, le=1.0)
    detail: Slider = Field(default=None, ge=-1.0, le=1.0)
    emotion: Slider = Field(default=None, ge=-1.0, le=1.0)
    from_gender: Gender | None = Field(default=None, alias="fromGender")
    to_gender: Gender | None = Field(default=None, alias="toGender")


class TranslationResult(_Model):
    text: str
    confidence: float | None = None
    detected_language: str | None = Field(default=None, alias="detectedLanguage")


class TranslationProvider(Protocol):
    async def translate(
        self,
        text: str,
        from_lang: str,
        to_lang: str,
        options: TranslationOptions | None = None,
    ) -> TranslationResult: ...


# ---------------------------------------------------------------------------
# Explanation
# ---------------------------------------------------------------------------


class SegmentExplainer(_Model):
    original_text_string: str = Field(alias="originalTextString")
    translated_text_string: str = Field(alias="translatedTextString")
    additional_details: str = Field(alias="additionalDetails")


class ExplanationResult(_Model):
    accurate: bool
    possible_mistranslations: Literal[False] | list[SegmentExplainer] = Field(alias="possibleMistranslations")
    idioms: Literal[False] | list[SegmentExplainer]
    tone: str


class ExplanationProvider(Protocol):
    async def explain(
        self,
        original_text: str,
        translated_text: str,
        from_lang: str,
        to_lang: str,
    ) -> ExplanationResult: ...


# ---------------------------------------------------------------------------
# Text-to-speech
# ---------------------------------------------------------------------------


class TTSOptions(_Model):
    speed: Slider = Field(default=None, ge=-1.0, le=1.0)
    emotion: Slider = Field(default=None, ge=-1.0, le=1.0)
    sample_rate: int | None = Field(default=None, alias="sampleRate", gt=0, le=192000)


@dataclass(frozen=True, slots=True)
class TTSMetadata:
    format: str
    sample_rate: int


class TTSConnection(Protocol):
    """An open live-synthesis session yielding raw provider messages."""

    async def receive(self) -> str | bytes: ...

    async def close(self) -> None: ...


class TTSProvider(Protocol):
    name: str

    def metadata(self, options: TTSOptions | None = None) -> TTSMetadata: ...

    async def connect(
        self,
        text: str,
        language: str,
        voice_id: str,
        options: TTSOptions | None = None,
    ) -> TTSConnection: ...


__all__ = [
    "ExplanationProvider",
    "ExplanationResult",
    "SegmentExplainer",
    "TTSConnection",
    "TTSMetadata",
    "TTSOptions",
    "TTSProvider",
    "TranscribedWord",
    "TranscriptionOptions",
    "TranscriptionProvider",
    "TranscriptionResult",
    "TranslationOptions",
    "TranslationProvider",
    "TranslationResult",
]
