"""Public transcription pipeline: text to stressed text to IPA.

WHY: Callers should not need to know the order in which the stages run
or that the text has to be lower-cased before stress is assigned. This
module is the single place that wires the stages together.

HOW: transcribe_to_ipa() lower-cases the text, stresses every word and
substitutes IPA letters. build_transcription() runs the same stages,
segments the IPA text into sentences, and keeps every intermediate
result in a Transcription IR for the formatters.

RULES:
- Input is any str; nothing here raises for well-formed text.
- The stress stage always sees lower-cased text.
- transcribe_to_ipa(text) == build_transcription(text).ipa.
- Speech markup lives in globasa_ipa.formatters.ssml, which builds on
  these functions; nothing here imports a formatter.
"""

from __future__ import annotations

import logging

from globasa_ipa.core.ir import Transcription
from globasa_ipa.core.segmenter import segment_sentences
from globasa_ipa.core.stress import stress_text, stress_words
from globasa_ipa.core.transliterate import transliterate

logger = logging.getLogger(__name__)


def transcribe_to_ipa(text: str) -> str:
    """Convert Globasa text in Latin script to stress-marked IPA.

    Example:
        transcribe_to_ipa("Mesajo de Globasa") -> "meˈsad͡ʒo de gloˈbasa"
    """
    return transliterate(stress_text(text.lower()))


def build_transcription(text: str) -> Transcription:
    """Run every stage on text and keep all intermediate results.

    Args:
        text: Raw Globasa text, any case, any punctuation.

    Returns:
        Transcription with the source, stressed and IPA text, one
        StressedWord per word, and the IPA text split into sentences.
    """
    lowered = text.lower()
    stressed = stress_text(lowered)
    ipa = transliterate(stressed)
    transcription = Transcription(
        source=text,
        stressed=stressed,
        ipa=ipa,
        words=stress_words(lowered),
        sentences=segment_sentences(ipa),
    )
    logger.debug(
        "Transcribed %d words (%d stressed) into %d sentences",
        len(transcription.words),
        transcription.marker_count,
        len(transcription.sentences),
    )
    return transcription
