"""Unit tests for the character classes and the skip list."""

import pytest

from globasa_ipa.core.alphabet import (
    CODA_CONSONANTS,
    ONSET_CONSONANTS,
    SKIP_WORDS,
    STRESS_MARKER,
    VOWELS,
    CharClass,
    classify,
    is_liquid,
    is_onset_consonant,
    is_semivowel,
    is_shift_blocking,
    is_skip_word,
    is_vowel,
)


class TestCharacterClasses:

    def test_vowels(self):
        assert VOWELS == frozenset("aeiou")

    def test_vowels_are_never_consonants(self):
        assert not (VOWELS & ONSET_CONSONANTS)
        assert not (VOWELS & CODA_CONSONANTS)

    def test_hyphen_is_shift_blocking(self):
        assert is_shift_blocking("-")
        assert not is_vowel("-")

    def test_vowels_are_shift_blocking(self):
        for ch in "aeiou":
            assert is_shift_blocking(ch)

    def test_semivowels_and_liquids(self):
        assert is_semivowel("y") and is_semivowel("w")
        assert is_liquid("r") and is_liquid("l")
        assert not is_semivowel("r")
        assert not is_liquid("y")

    def test_onset_consonants(self):
        for ch in "bdfgkptv":
            assert is_onset_consonant(ch)
        assert not is_onset_consonant("s")

    def test_predicates_are_case_sensitive(self):
        assert not is_vowel("A")
        assert not is_semivowel("Y")

    @pytest.mark.parametrize("ch", [None, "", "7", "\u00e9", " ", STRESS_MARKER])
    def test_other_characters_match_nothing(self, ch):
        assert classify(ch) == CharClass.OTHER
        assert not is_shift_blocking(ch)

    def test_classify_prefers_narrow_class(self):
        assert classify("a") == CharClass.VOWEL
        assert classify("y") == CharClass.SEMIVOWEL
        assert classify("l") == CharClass.LIQUID
        assert classify("t") == CharClass.ONSET_CONSONANT
        assert classify("m") == CharClass.CODA_CONSONANT
        assert classify("-") == CharClass.SHIFT_BLOCKING


class TestSkipWords:

    def test_skip_set_size(self):
        assert len(SKIP_WORDS) == 43

    def test_contains_empty_string(self):
        assert is_skip_word("")

    @pytest.mark.parametrize("word", ["de", "ji", "kwas", "tras", "em", "e"])
    def test_members(self, word):
        assert is_skip_word(word)

    def test_case_sensitive(self):
        assert not is_skip_word("De")

    def test_none_is_not_a_member(self):
        assert not is_skip_word(None)
