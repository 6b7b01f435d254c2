"""Split IPA text into spoken phrases for speech markup.

WHY: Text-to-speech engines read a long IPA string as one breathless
run. Splitting at sentence punctuation lets the markup wrapper give
each phrase its own phoneme element and a short pause between phrases.

HOW: normalize_punctuation() turns commas into semicolons (so they also
end a phrase) and drops quote characters. segment_sentences() then cuts
after every ; : . ? ! that is followed by more speech, moves each
phrase's final mark into Sentence.punctuation, and records whether a
pause should follow.

RULES:
- A split needs a letter or IPA symbol after the mark (optionally
  after whitespace); whitespace at a split point is dropped.
- The mark stays with the phrase it ends.
- A phrase that ended with ";" gets no pause.
- Empty input produces no sentences.
"""

from __future__ import annotations

import re
from typing import List

from globasa_ipa.core.ir import Sentence

QUOTES_RE = re.compile("['\"\u201c\u201d\u2018\u2019]")
SENTENCE_END = ";:.?!"

# Mark, optional whitespace, then a letter, the stress marker, or a
# character of one of the IPA symbols the transliterator produces.
SPLIT_RE = re.compile(
    "([;:.?!])\\s*(?=[a-zA-Z\u02c8t\u0361\u0283d\u0292\u027e])"
)


def normalize_punctuation(text: str) -> str:
    """Replace commas with semicolons and strip all quote characters."""
    return QUOTES_RE.sub("", text.replace(",", ";"))


def split_phrases(text: str) -> List[str]:
    """Cut text after each qualifying sentence mark.

    Returns the raw phrases, marks included. Empty text gives [].
    """
    if not text:
        return []
    phrases: List[str] = []
    previous_end = 0
    for match in SPLIT_RE.finditer(text):
        phrases.append(text[previous_end:match.end(1)])
        previous_end = match.end()
    phrases.append(text[previous_end:])
    return phrases


def segment_sentences(ipa_text: str) -> List[Sentence]:
    """Split IPA text into Sentence records ready for markup.

    Args:
        ipa_text: Transliterated text, e.g. the output of transcribe_to_ipa().

    Returns:
        One Sentence per phrase, in order.
    """
    sentences: List[Sentence] = []
    for phrase in split_phrases(normalize_punctuation(ipa_text)):
        if phrase and phrase[-1] in SENTENCE_END:
            body, punctuation = phrase[:-1], phrase[-1]
        else:
            body, punctuation = phrase, ""
        sentences.append(Sentence(
            body=body,
            punctuation=punctuation,
            pause=not phrase.endswith(";"),
        ))
    return sentences
