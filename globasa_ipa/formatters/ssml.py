"""SSML speech markup formatter.

WHY: Text-to-speech engines that accept SSML can pronounce Globasa
correctly when each phrase is given as IPA in a phoneme element. The
downstream readers match the exact tag vocabulary below, so it must
not drift.

HOW: render_ssml() wraps each Sentence as
``<phoneme alphabet="ipa" ph="BODY"></phoneme>`` followed by its
punctuation mark and, unless the phrase ended with a semicolon, a short
break. The whole run is enclosed once in a slow prosody element.
transcribe_to_ssml() is the one-call entry point from raw Globasa text.

RULES:
- Only these tags are ever produced: <prosody rate="slow">,
  <phoneme alphabet="ipa" ph="...">, </phoneme>, <break time="0.25s"/>,
  </prosody>.
- &, < and > in a phrase body are escaped, so input text can never
  introduce another element. Quotes are already stripped by the segmenter.
- Output suffix: "-speech.ssml"; media type: "application/ssml+xml".
"""

from __future__ import annotations

from typing import List, Sequence
from xml.sax.saxutils import escape

from globasa_ipa.core.ir import Sentence, Transcription
from globasa_ipa.core.pipeline import transcribe_to_ipa
from globasa_ipa.core.segmenter import segment_sentences
from globasa_ipa.formatters.base import BaseFormatter, FormatterOutput

PROSODY_OPEN = '<prosody rate="slow">'
PROSODY_CLOSE = "</prosody>"
PHONEME_TEMPLATE = '<phoneme alphabet="ipa" ph="{body}"></phoneme>'
BREAK = '<break time="0.25s"/>'


def render_ssml(sentences: Sequence[Sentence]) -> str:
    """Wrap already-segmented sentences in the speech markup envelope."""
    parts: List[str] = [PROSODY_OPEN]
    for sentence in sentences:
        parts.append(PHONEME_TEMPLATE.format(body=escape(sentence.body)))
        parts.append(sentence.punctuation)
        if sentence.pause:
            parts.append(BREAK)
    parts.append(PROSODY_CLOSE)
    return "".join(parts)


def ipa_to_ssml(ipa_text: str) -> str:
    """Segment IPA text into phrases and wrap them as SSML.

    Example:
        ipa_to_ssml("ˈxed͡ʒ, ˈmo aˈmiga.") ->
            '<prosody rate="slow">'
            '<phoneme alphabet="ipa" ph="ˈxed͡ʒ"></phoneme>;'
            '<phoneme alphabet="ipa" ph="ˈmo aˈmiga"></phoneme>.'
            '<break time="0.25s"/>'
            '</prosody>'
    """
    return render_ssml(segment_sentences(ipa_text))


def transcribe_to_ssml(text: str) -> str:
    """Convert Globasa text to SSML with one IPA phoneme element per phrase."""
    return ipa_to_ssml(transcribe_to_ipa(text))


class SSMLFormatter(BaseFormatter):
    """Formatter that produces SSML for text-to-speech readers."""

    @property
    def name(self) -> str:
        return "SSML Speech Markup"

    def format(self, transcription: Transcription) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-speech.ssml",
                content=render_ssml(transcription.sentences),
                media_type="application/ssml+xml",
            )
        ]
