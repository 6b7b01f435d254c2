"""Character classes and fixed word lists for Globasa's Latin orthography.

WHY: The stress rules are phrased in terms of letter classes (vowels,
semivowels, liquids, onset consonants) and a short list of unstressed
function words. Keeping them as plain, immutable data makes the rules
easy to read and keeps the stress engine free of magic strings.

HOW: Module-level frozensets built once at import. Small predicate
functions wrap the membership tests so callers never need to know how
a class is represented. classify() maps a character to its CharClass
for debugging and tests.

RULES:
- All sets are frozen; never mutate them at runtime.
- Predicates are exact (case-sensitive). Callers lower-case first.
- None and characters outside the alphabet never satisfy a predicate.
- A vowel is never an onset or coda consonant.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

STRESS_MARKER = "\u02c8"  # ˈ primary stress

VOWELS: frozenset = frozenset("aeiou")

# Stress never shifts past a vowel, and never across a hyphen.
SHIFT_BLOCKING: frozenset = VOWELS | {"-"}

ONSET_CONSONANTS: frozenset = frozenset("bdfgkptv")
CODA_CONSONANTS: frozenset = frozenset("cjlmnrswxyz")

SEMIVOWELS: frozenset = frozenset("yw")
LIQUIDS: frozenset = frozenset("rl")

# One-syllable function words that never take stress. The empty string is
# part of the set so an empty token passes through untouched.
SKIP_WORDS: frozenset = frozenset({
    "ji", "or", "nor", "kam", "mas", "kwas",
    "ki", "hu", "su", "el", "na", "le", "xa", "kom", "di", "ci", "fe",
    "in", "ex", "per", "bax", "of", "cel", "hoy", "pas", "tras", "cis",
    "wey", "fol", "de", "tas", "tem", "pro", "fal", "har", "ton", "yon",
    "por", "dur", "ku", "e", "em", "",
})


class CharClass(str, Enum):
    """Coarse class of a single character, as used by the stress rules."""

    VOWEL = "vowel"
    SEMIVOWEL = "semivowel"
    LIQUID = "liquid"
    ONSET_CONSONANT = "onset_consonant"
    CODA_CONSONANT = "coda_consonant"
    SHIFT_BLOCKING = "shift_blocking"
    OTHER = "other"


def is_vowel(ch: Optional[str]) -> bool:
    return ch in VOWELS


def is_shift_blocking(ch: Optional[str]) -> bool:
    return ch in SHIFT_BLOCKING


def is_onset_consonant(ch: Optional[str]) -> bool:
    return ch in ONSET_CONSONANTS


def is_coda_consonant(ch: Optional[str]) -> bool:
    return ch in CODA_CONSONANTS


def is_semivowel(ch: Optional[str]) -> bool:
    return ch in SEMIVOWELS


def is_liquid(ch: Optional[str]) -> bool:
    return ch in LIQUIDS


def is_skip_word(word: Optional[str]) -> bool:
    """True if word is one of the unstressed one-syllable words."""
    return word in SKIP_WORDS


def classify(ch: Optional[str]) -> CharClass:
    """Return the most specific class of ch.

    Semivowels and liquids are also coda consonants; the narrower class
    wins because that is what the shift rules look at. A hyphen is the
    only non-vowel that is shift-blocking.
    """
    if is_vowel(ch):
        return CharClass.VOWEL
    if is_semivowel(ch):
        return CharClass.SEMIVOWEL
    if is_liquid(ch):
        return CharClass.LIQUID
    if is_onset_consonant(ch):
        return CharClass.ONSET_CONSONANT
    if is_coda_consonant(ch):
        return CharClass.CODA_CONSONANT
    if is_shift_blocking(ch):
        return CharClass.SHIFT_BLOCKING
    return CharClass.OTHER
