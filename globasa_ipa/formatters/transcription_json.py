"""Transcription JSON formatter.

WHY: Host applications (dictionary pages, reader tools, scripts) want
every stage of the transcription at once, with the per-word stress
positions, without re-running the pipeline or parsing SSML.

HOW: Serializes the Transcription IR to a single JSON object: the source
text, the stressed text, the IPA text, the SSML markup, one record per
word and one per spoken phrase. The structure is documented by
transcription_schema.json next to this module.

RULES:
- Output is validated against transcription_schema.json before
  returning; raise on failure
- Non-ASCII characters are written as-is (ensure_ascii=False)
- Word offsets refer to the lower-cased source text
- stress_index is null for words that take no stress
- Output suffix: "-transcription.json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from globasa_ipa.core.ir import Transcription
from globasa_ipa.formatters.base import BaseFormatter, FormatterOutput
from globasa_ipa.formatters.ssml import render_ssml

SCHEMA_PATH = Path(__file__).resolve().parent / "transcription_schema.json"


def _load_schema() -> Dict[str, Any]:
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def transcription_to_dict(transcription: Transcription) -> Dict[str, Any]:
    """Convert the IR into plain JSON-ready data."""
    return {
        "source": transcription.source,
        "stressed": transcription.stressed,
        "ipa": transcription.ipa,
        "ssml": render_ssml(transcription.sentences),
        "marker_count": transcription.marker_count,
        "words": [
            {
                "start": word.span.start,
                "end": word.span.end,
                "text": word.span.text,
                "stressed": word.stressed,
                "stress_index": word.stress_index,
            }
            for word in transcription.words
        ],
        "sentences": [
            {
                "text": sentence.body,
                "punctuation": sentence.punctuation,
                "pause": sentence.pause,
            }
            for sentence in transcription.sentences
        ],
    }


class TranscriptionJSONFormatter(BaseFormatter):
    """Formatter that dumps the full Transcription IR as JSON."""

    @property
    def name(self) -> str:
        return "Transcription JSON"

    def format(self, transcription: Transcription) -> List[FormatterOutput]:
        """Serialize the IR to JSON.

        Raises:
            jsonschema.ValidationError: If the output does not conform to
                transcription_schema.json.
        """
        output = transcription_to_dict(transcription)
        jsonschema.validate(instance=output, schema=_get_schema())

        content = json.dumps(
            output,
            ensure_ascii=False,
            indent=2,
        )
        return [
            FormatterOutput(
                suffix="-transcription.json",
                content=content + "\n",
                media_type="application/json",
            )
        ]
