"""Globasa IPA: stress placement, IPA transcription and speech markup.

WHY: Globasa is written in a plain Latin alphabet, but dictionary pages,
learners and text-to-speech engines need to know where the stress falls
and how each letter sounds. This package turns orthographic text into
stress-marked IPA and, optionally, into SSML for speech synthesis.

HOW: Tokenize words, place the stress mark in each word,
substitute IPA letters, then (for speech) split into phrases and wrap
them in SSML. The transcription IR feeds pluggable output formatters
used by the CLI and the HTTP API.

RULES:
- transcribe_to_ipa() and transcribe_to_ssml() are the public entry points
- Both are pure functions of their input string
- Adding a new output format = one new formatter module, no core changes
"""

from globasa_ipa.core.pipeline import build_transcription, transcribe_to_ipa
from globasa_ipa.formatters.ssml import transcribe_to_ssml

__version__ = "0.1.0"

__all__ = [
    "build_transcription",
    "transcribe_to_ipa",
    "transcribe_to_ssml",
]
