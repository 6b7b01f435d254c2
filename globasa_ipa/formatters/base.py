"""Formatter interface and the output record every formatter returns.

WHY: IPA text, stressed spelling, SSML and JSON are all renderings of
one Transcription. The CLI saves them as files and the HTTP API serves
them as responses; both need to treat every rendering the same way.

HOW: BaseFormatter declares a human-readable ``name`` and a ``format()``
method that turns a Transcription into FormatterOutput records. Each
record knows its file suffix, its text and its MIME type, so callers can
save it next to a source file or send it over HTTP unchanged.

RULES:
- ``format()`` returns a list; every current formatter returns one item
- ``suffix`` starts with a hyphen, e.g. ``"-ipa.txt"``
- Formatters never touch the filesystem; the CLI adds the stem and saves
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from globasa_ipa.core.ir import Transcription


@dataclass
class FormatterOutput:
    """A rendered transcription, ready to save or serve.

    Attributes:
        suffix: Appended to the file stem, so ``"-ipa.txt"`` becomes
                ``"poem-ipa.txt"``.
        content: Rendered text.
        media_type: MIME type, e.g. ``"application/ssml+xml"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Renders a Transcription in one output format.

    New formats subclass this, implement ``name`` and ``format()``, and
    get a key in the FORMATTERS registry in formatters/__init__.py.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name shown in CLI status lines and GET /formats."""

    @abstractmethod
    def format(self, transcription: Transcription) -> list[FormatterOutput]:
        """Render the transcription.

        Args:
            transcription: IR produced by build_transcription().

        Returns:
            One FormatterOutput per file the format produces.
        """
