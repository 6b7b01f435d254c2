"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: One request model shared by all transcription endpoints, and one
response model per endpoint. All fields carry descriptions for /docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Response models mirror the Transcription IR, never extend it
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class TranscribeRequest(BaseModel):
    """Text to transcribe.

    RULES:
    - text may be empty; the API answers with empty IPA / empty markup
    - length is checked against MAX_INPUT_CHARS by the endpoint (413)
    """

    text: str = Field(description="Globasa text in Latin script, any case.")

    model_config = {"json_schema_extra": {
        "examples": [{"text": "Hej, mo amiga."}]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class IPAResponse(BaseModel):
    """Stress-marked IPA for the submitted text."""

    ipa: str = Field(description="IPA transcription with primary stress marks.")


class SSMLResponse(BaseModel):
    """SSML speech markup for the submitted text."""

    ssml: str = Field(description="Markup wrapped in a slow prosody element.")


class WordInfo(BaseModel):
    """Stress placement for one word of the input."""

    start: int = Field(description="Offset of the word in the lower-cased input.")
    end: int = Field(description="Offset just past the word.")
    text: str = Field(description="The word as found in the lower-cased input.")
    stressed: str = Field(description="The word with its stress mark, if any.")
    stress_index: Optional[int] = Field(
        default=None,
        description="Index of the stress mark in 'stressed'; null when unstressed.",
    )


class SentenceInfo(BaseModel):
    """One spoken phrase of the IPA text."""

    text: str = Field(description="Phrase body without its final punctuation.")
    punctuation: str = Field(description="Sentence-final mark, or empty.")
    pause: bool = Field(description="Whether a break follows the phrase.")


class TranscriptionResponse(BaseModel):
    """Every stage of the transcription for the submitted text."""

    source: str = Field(description="The submitted text, unchanged.")
    stressed: str = Field(description="Lower-cased text with stress marks.")
    ipa: str = Field(description="IPA transcription with stress marks.")
    ssml: str = Field(description="SSML speech markup.")
    marker_count: int = Field(description="Number of words that received a stress mark.")
    words: List[WordInfo] = Field(description="Per-word stress placement.")
    sentences: List[SentenceInfo] = Field(description="Spoken phrases of the IPA text.")


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used by the CLI.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-ipa.txt').")
    media_type: str = Field(description="MIME type of the produced content.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
