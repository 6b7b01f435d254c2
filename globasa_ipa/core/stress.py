"""Primary-stress placement for Globasa words.

WHY: Globasa stress is fully predictable from spelling, but the rule
that decides *where* the stress mark goes is layered: a skip list,
a vowel-selection rule, and shift rules that move the mark left over
the consonants that begin the stressed syllable. The IPA output and
the speech markup both depend on getting this exactly right.

HOW: stress_index() runs the rules in order and returns the insertion
point (or None). stress_word() splices the marker in, and stress_text()
applies stress_word() to every word of a text while copying the
characters between words unchanged.

  Skip rule      one-syllable function words get no stress.
  Single vowel   the mark goes in front of the whole word.
  Vowel select   drop the last letter; the last remaining vowel is
                 stressed (second-to-last vowel for vowel-final words).
  Shift          move the mark left of the syllable onset:
                   0  the vowel starts the word, or follows a vowel/hyphen
                  -2  semivowel (y, w) preceded by anything that is not a
                      semivowel, vowel or hyphen (including nothing)
                  -2  liquid (r, l) preceded by an onset consonant
                  -1  otherwise

RULES:
- Input words are expected lower-case; vowels are matched
  case-insensitively, all other classes exactly.
- At most one marker is inserted per word.
- Insertion points before the start of the word clamp to 0.
- Never raises for str input; None yields "".
"""

from __future__ import annotations

import logging
from typing import List, Optional

from globasa_ipa.core.alphabet import (
    STRESS_MARKER,
    is_liquid,
    is_onset_consonant,
    is_semivowel,
    is_shift_blocking,
    is_skip_word,
    is_vowel,
)
from globasa_ipa.core.ir import StressedWord
from globasa_ipa.core.tokenizer import split_gaps

logger = logging.getLogger(__name__)


def _char_at(word: str, index: int) -> Optional[str]:
    """Character at index, or None when index is out of range (no wrap-around)."""
    if 0 <= index < len(word):
        return word[index]
    return None


def _shift(word: str, pos: int) -> int:
    adj1 = _char_at(word, pos - 1)
    adj2 = _char_at(word, pos - 2)

    if pos == 0 or is_shift_blocking(adj1):
        return 0
    if is_semivowel(adj1) and not is_semivowel(adj2) and not is_shift_blocking(adj2):
        return -2
    if is_liquid(adj1) and is_onset_consonant(adj2):
        return -2
    return -1


def stress_index(word: Optional[str]) -> Optional[int]:
    """Return the index where the stress marker goes, or None for no stress.

    The marker is inserted *before* the character at the returned index.
    """
    if word is None or is_skip_word(word):
        return None

    vowel_positions = [i for i, ch in enumerate(word) if is_vowel(ch.lower())]
    if not vowel_positions:
        return None
    if len(vowel_positions) == 1:
        return 0

    # Last vowel of the word with its final letter removed.
    pos = max(i for i in vowel_positions if i < len(word) - 1)
    return max(0, pos + _shift(word, pos))


def stress_word(word: Optional[str]) -> str:
    """Insert the primary-stress marker into a single word.

    Args:
        word: One lower-cased word without surrounding punctuation.

    Returns:
        The word with zero or one STRESS_MARKER inserted. None becomes "".

    Examples:
        stress_word("mesajo") -> "meˈsajo"
        stress_word("de")     -> "de"
        stress_word("yapa")   -> "ˈyapa"
    """
    if word is None:
        return ""
    index = stress_index(word)
    if index is None:
        return word
    return word[:index] + STRESS_MARKER + word[index:]


def stress_words(text: str) -> List[StressedWord]:
    """Stress every word of text, keeping the word spans for reporting."""
    return [
        StressedWord(span=span, stressed=stress_word(span.text))
        for _, span in split_gaps(text)
        if span is not None
    ]


def stress_text(text: str) -> str:
    """Stress every word of text, copying the characters between words.

    Removing every STRESS_MARKER from the result gives back ``text``.
    """
    parts: List[str] = []
    markers = 0
    for gap, span in split_gaps(text):
        parts.append(gap)
        if span is not None:
            stressed = stress_word(span.text)
            if len(stressed) != len(span.text):
                markers += 1
            parts.append(stressed)
    logger.debug("Inserted %d stress markers into %d chars", markers, len(text))
    return "".join(parts)
