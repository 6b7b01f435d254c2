"""FastAPI application exposing the transcriber as a JSON API.

WHY: The dictionary site, reader tools and other host applications need
to turn Globasa text into IPA or speech markup without bundling this
package. A small HTTP API with OpenAPI docs is the simplest seam.

HOW: Transcription is fast and pure, so every endpoint answers
synchronously without a job store. Each request builds
the Transcription IR and returns the part the endpoint is about.

RULES:
- All endpoints have OpenAPI descriptions on every response
- Error responses use the ErrorResponse schema
- Unknown formatter keys are rejected with 400
- Texts longer than MAX_INPUT_CHARS are rejected with 413
- Malformed bodies are rejected by pydantic with 422
- This is a JSON tool API, not dictionary page routing
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from globasa_ipa import __version__
from globasa_ipa.config import API_HOST, API_PORT, LOG_LEVEL, MAX_INPUT_CHARS
from globasa_ipa.core.ir import Transcription
from globasa_ipa.core.pipeline import build_transcription
from globasa_ipa.formatters import FORMATTERS
from globasa_ipa.formatters.ssml import render_ssml
from globasa_ipa.formatters.transcription_json import transcription_to_dict
from globasa_ipa.server.models import (
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    IPAResponse,
    SSMLResponse,
    TranscribeRequest,
    TranscriptionResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Globasa IPA API",
    description=(
        "REST API for transcribing Globasa text into stress-marked IPA "
        "and SSML speech markup."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

_TOO_LONG = {413: {"model": ErrorResponse, "description": "Text too long"}}

DOWNLOAD_STEM = "transcription"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _transcribe(request: TranscribeRequest) -> Transcription:
    """Validate the text length and run the pipeline."""
    if len(request.text) > MAX_INPUT_CHARS:
        raise HTTPException(
            status_code=413,
            detail="Text too long ({} chars, max {})".format(
                len(request.text), MAX_INPUT_CHARS
            ),
        )
    transcription = build_transcription(request.text)
    logger.info(
        "Transcribed %d chars, %d words", len(request.text), len(transcription.words)
    )
    return transcription


# ---------------------------------------------------------------------------
# Endpoints: Transcription
# ---------------------------------------------------------------------------


@app.post(
    "/ipa",
    response_model=IPAResponse,
    tags=["transcription"],
    summary="Transcribe text to IPA",
    description="Returns the stress-marked IPA transcription of the text.",
    responses=_TOO_LONG,
)
async def transcribe_ipa(request: TranscribeRequest) -> IPAResponse:
    return IPAResponse(ipa=_transcribe(request).ipa)


@app.post(
    "/ssml",
    response_model=SSMLResponse,
    tags=["transcription"],
    summary="Transcribe text to SSML",
    description=(
        "Returns SSML with one IPA phoneme element per phrase, "
        "wrapped in a slow prosody element."
    ),
    responses=_TOO_LONG,
)
async def transcribe_ssml(request: TranscribeRequest) -> SSMLResponse:
    return SSMLResponse(ssml=render_ssml(_transcribe(request).sentences))


@app.post(
    "/transcriptions",
    response_model=TranscriptionResponse,
    tags=["transcription"],
    summary="Full transcription with per-word stress",
    description=(
        "Returns every stage of the transcription: stressed text, IPA, "
        "SSML, per-word stress positions and spoken phrases."
    ),
    responses=_TOO_LONG,
)
async def create_transcription(request: TranscribeRequest) -> TranscriptionResponse:
    return TranscriptionResponse(**transcription_to_dict(_transcribe(request)))


@app.post(
    "/render/{format_key}",
    tags=["transcription"],
    summary="Render text with one output formatter",
    description=(
        "Runs a single formatter (see GET /formats) and returns its file "
        "content with the formatter's media type, ready to save."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Unknown format"},
        **_TOO_LONG,
    },
)
async def render_format(format_key: str, request: TranscribeRequest) -> Response:
    formatter_cls = FORMATTERS.get(format_key)
    if formatter_cls is None:
        raise HTTPException(
            status_code=400,
            detail="Unknown format '{}'. Available formats: {}".format(
                format_key, ", ".join(sorted(FORMATTERS.keys()))
            ),
        )

    output = formatter_cls().format(_transcribe(request))[0]
    filename = "{}{}".format(DOWNLOAD_STEM, output.suffix)
    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
    description="Returns the formats the CLI can write, with suffixes and media types.",
)
async def list_formats() -> List[FormatInfo]:
    empty = build_transcription("")
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        output = formatter.format(empty)[0]
        result.append(FormatInfo(
            key=key,
            name=formatter.name,
            suffix=output.suffix,
            media_type=output.media_type,
        ))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the globasa-ipa-api console script."""
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run(app, host=API_HOST, port=API_PORT)
