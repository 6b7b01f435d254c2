"""Word tokenizer that keeps every character between words.

WHY: Stress is assigned per word, but the output must keep the input's
punctuation, whitespace and line breaks exactly where they were. The
tokenizer therefore reports words together with their offsets so the
caller can copy the gaps between them verbatim.

HOW: A forward scan with WORD_RE.finditer(). A word is a run of word
characters, optionally followed by more runs joined by hyphens or
apostrophes, so the pattern never matches the empty string.
WordSpans wraps the scan in a restartable iterable, and split_gaps()
pairs each word with the text that precedes it.

RULES:
- Words may contain any number of internal hyphens and apostrophes
  ("bon-ya-kal", "rock'n'roll"). Leading and trailing ones belong to
  the gaps.
- Zero-length matches are never yielded.
- Concatenating the gaps and spans from split_gaps() gives back the input.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Tuple

from globasa_ipa.core.ir import WordSpan

WORD_RE = re.compile(r"\w+(?:[-']+\w+)*")


def scan_words(text: str) -> Iterator[WordSpan]:
    """Yield each non-empty word of text, left to right, with its offset."""
    for match in WORD_RE.finditer(text):
        yield WordSpan(start=match.start(), text=match.group(0))


class WordSpans:
    """Lazy, restartable sequence of the word spans in a text.

    Every call to ``iter()`` starts a fresh scan, so the same instance can
    be walked any number of times.
    """

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[WordSpan]:
        return scan_words(self.text)

    def __repr__(self) -> str:
        return "WordSpans({!r})".format(self.text)


def split_gaps(text: str) -> List[Tuple[str, Optional[WordSpan]]]:
    """Pair every word span with the non-word text in front of it.

    The last pair holds the tail of the text after the final word and
    ``None`` in place of a span. Text with no words yields a single
    ``(text, None)`` pair.

    Example:
        split_gaps("Hej, mo!") ->
            [("", WordSpan(0, "Hej")), (", ", WordSpan(5, "mo")), ("!", None)]
    """
    pieces: List[Tuple[str, Optional[WordSpan]]] = []
    previous_end = 0
    for span in scan_words(text):
        pieces.append((text[previous_end:span.start], span))
        previous_end = span.end
    pieces.append((text[previous_end:], None))
    return pieces
