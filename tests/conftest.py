"""Shared test fixtures for the globasa_ipa test suite.

WHY: Several test modules need the same worked example (a short text
whose stress placement, IPA and SSML have been checked by hand), so
expectations stay consistent across the pipeline, formatter, CLI and
API tests.

HOW: Pytest fixtures provide the raw text, its hand-checked stages, and
the Transcription IR built from it.

RULES:
- "Hej, mo amiga." exercises capitals, a comma, single-vowel words, a
  multi-vowel word and the j/h transliteration rules.
- Expected strings use escapes for the stress mark and IPA ligatures.
"""

import pytest

from globasa_ipa.core.pipeline import build_transcription

MARK = "\u02c8"
DZH = "d\u0361\u0292"

SAMPLE_TEXT = "Hej, mo amiga."
SAMPLE_STRESSED = MARK + "hej, " + MARK + "mo a" + MARK + "miga."
SAMPLE_IPA = MARK + "xe" + DZH + ", " + MARK + "mo a" + MARK + "miga."
SAMPLE_SSML = (
    '<prosody rate="slow">'
    '<phoneme alphabet="ipa" ph="' + MARK + "xe" + DZH + '"></phoneme>;'
    '<phoneme alphabet="ipa" ph="' + MARK + "mo a" + MARK + 'miga"></phoneme>.'
    '<break time="0.25s"/>'
    "</prosody>"
)


@pytest.fixture
def sample_text():
    """Raw input for the worked example."""
    return SAMPLE_TEXT


@pytest.fixture
def sample_expected():
    """Hand-checked stressed text, IPA and SSML for the worked example."""
    return {
        "stressed": SAMPLE_STRESSED,
        "ipa": SAMPLE_IPA,
        "ssml": SAMPLE_SSML,
    }


@pytest.fixture
def sample_transcription():
    """Transcription IR for the worked example."""
    return build_transcription(SAMPLE_TEXT)
