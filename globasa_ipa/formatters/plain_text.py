"""Plain text formatters: IPA text and stress-marked orthography.

WHY: Most users just want to read or paste the IPA transcription. The
stress-marked Latin spelling is useful on its own for learners and for
checking the stress rules without the IPA letters getting in the way.

HOW: Both formatters copy one field of the Transcription IR verbatim,
adding a final newline so the file ends cleanly.

RULES:
- Content is never reflowed; line breaks of the input are kept.
- A single trailing newline is added to non-empty content.
- Media type: "text/plain".
"""

from __future__ import annotations

from typing import List

from globasa_ipa.core.ir import Transcription
from globasa_ipa.formatters.base import BaseFormatter, FormatterOutput


def _as_file(text: str) -> str:
    if text and not text.endswith("\n"):
        return text + "\n"
    return text


class IPATextFormatter(BaseFormatter):
    """Formatter that writes the IPA transcription as plain text."""

    @property
    def name(self) -> str:
        return "IPA Text"

    def format(self, transcription: Transcription) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-ipa.txt",
                content=_as_file(transcription.ipa),
                media_type="text/plain",
            )
        ]


class StressedTextFormatter(BaseFormatter):
    """Formatter that writes the lower-cased text with stress marks."""

    @property
    def name(self) -> str:
        return "Stressed Orthography"

    def format(self, transcription: Transcription) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-stressed.txt",
                content=_as_file(transcription.stressed),
                media_type="text/plain",
            )
        ]
