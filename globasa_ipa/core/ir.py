"""Intermediate representation dataclasses for a transcribed text.

WHY: The CLI, the HTTP API, and every output formatter need the same
facts about a transcription: which words were found, where the stress
went, what the IPA text is, and how it splits into spoken phrases.
A single well-typed IR decouples the transcription pipeline from the
formatters that render it.

HOW: Four dataclasses form a hierarchy:
  WordSpan        one word as found in the (lower-cased) source text
  StressedWord    a WordSpan plus its stressed spelling
  Sentence        one spoken phrase of the IPA text, ready for SSML
  Transcription   the complete result for one input text

RULES:
- Offsets are character offsets into the lower-cased source text.
- A stressed word contains zero or one stress markers.
- Sentence.body never ends with sentence-final punctuation; that
  character lives in Sentence.punctuation.
- IR objects are never mutated after the pipeline builds them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from globasa_ipa.core.alphabet import STRESS_MARKER


@dataclass(frozen=True)
class WordSpan:
    """A maximal word-like run of the source text.

    Attributes:
        start: Offset of the first character in the source text.
        text: The word itself (letters plus internal hyphens/apostrophes).
    """

    start: int
    text: str

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True)
class StressedWord:
    """A word together with its stress-marked spelling."""

    span: WordSpan
    stressed: str

    @property
    def stress_index(self) -> int | None:
        """Index of the marker in ``stressed``, or None for unstressed words."""
        idx = self.stressed.find(STRESS_MARKER)
        return idx if idx >= 0 else None


@dataclass(frozen=True)
class Sentence:
    """One spoken phrase of IPA text.

    Attributes:
        body: Phrase text without its trailing punctuation mark.
        punctuation: The sentence-final mark that ended the phrase, or "".
        pause: True when a break should follow the phrase. Phrases that
               ended with a semicolon run straight into the next one.
    """

    body: str
    punctuation: str = ""
    pause: bool = True


@dataclass
class Transcription:
    """The complete result of transcribing one input text.

    RULES:
    - source: the input exactly as received
    - stressed: lower-cased source with stress markers inserted
    - ipa: stressed text after letter-to-IPA substitution
    - words: one StressedWord per word span, in text order
    - sentences: the IPA text split into spoken phrases
    """

    source: str
    stressed: str
    ipa: str
    words: list[StressedWord] = field(default_factory=list)
    sentences: list[Sentence] = field(default_factory=list)

    @property
    def marker_count(self) -> int:
        return sum(1 for w in self.words if w.stress_index is not None)
