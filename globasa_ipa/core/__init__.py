"""Core transcription modules and intermediate representation.

WHY: The core package holds the Globasa language rules
plus the IR dataclasses that every formatter consumes.

HOW: alphabet.py defines the letter classes, tokenizer.py finds words,
stress.py places the stress mark, transliterate.py rewrites letters as
IPA, segmenter.py splits IPA text into phrases, and pipeline.py chains
them into the public transcription functions.

RULES:
- Everything here is pure: no I/O, no global mutable state
- IR dataclasses are the contract; change with care
- Formatter-specific logic belongs in globasa_ipa.formatters, not here
"""
