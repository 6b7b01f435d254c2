"""Letter-to-IPA substitution for stressed Globasa text.

WHY: Most Globasa letters already are their IPA symbol. Only six need
rewriting, and a plain ordered list of literal replacements is easier
to audit than a per-character lookup table.

HOW: Each TransliterationRule replaces every occurrence of one letter in
the whole text before the next rule runs. The order matters: "y" becomes
"j" only after the "j" rule has already run, and "h" becomes "x" only
after the "x" rule, so neither output is rewritten a second time.

RULES:
- IPA_RULES order is fixed: c, j, r, x, y, h.
- A rule's target must never contain the letter of a later rule;
  check_rule_order() enforces this and runs once on import.
- Characters without a rule (vowels, digits, punctuation, the stress
  marker) pass through unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


class RuleOrderError(ValueError):
    """A transliteration rule would rewrite the output of an earlier rule."""


@dataclass(frozen=True)
class TransliterationRule:
    letter: str
    ipa: str


IPA_RULES: Tuple[TransliterationRule, ...] = (
    TransliterationRule("c", "t\u0361\u0283"),  # t͡ʃ
    TransliterationRule("j", "d\u0361\u0292"),  # d͡ʒ
    TransliterationRule("r", "\u027e"),  # ɾ
    TransliterationRule("x", "\u0283"),  # ʃ
    TransliterationRule("y", "j"),
    TransliterationRule("h", "x"),
)


def check_rule_order(rules: Sequence[TransliterationRule]) -> None:
    """Raise RuleOrderError if any rule's output feeds a later rule.

    Raises:
        RuleOrderError: naming the first offending pair of rules.
    """
    for i, earlier in enumerate(rules):
        for later in rules[i + 1:]:
            if later.letter in earlier.ipa:
                raise RuleOrderError(
                    "Rule {!r}->{!r} produces {!r}, which rule {!r}->{!r} "
                    "would rewrite again".format(
                        earlier.letter, earlier.ipa, later.letter,
                        later.letter, later.ipa,
                    )
                )


check_rule_order(IPA_RULES)


def transliterate(text: str, rules: Sequence[TransliterationRule] = IPA_RULES) -> str:
    """Apply each rule to the whole text, strictly in order."""
    for rule in rules:
        text = text.replace(rule.letter, rule.ipa)
    return text
