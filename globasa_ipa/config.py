"""Configuration defaults, environment overrides, and .env loading.

WHY: The CLI and the HTTP API share a handful of tunable values (default
output formats, input size limit, bind address, log level). Keeping them
in one module makes them easy to find and override without touching code.

HOW: python-dotenv loads the .env file on import. Each setting is read
from the environment with a default. parse_format_list() turns a
comma-separated formatter list into validated keys.

RULES:
- All settings can be overridden via environment variables (or .env)
- The language rules themselves are NOT configurable; see globasa_ipa.core
- Invalid numeric settings raise ValueError at import, not at first use
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from globasa_ipa.formatters import FORMATTERS

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Output and service defaults
# ---------------------------------------------------------------------------

DEFAULT_FORMATS = os.getenv("GLOBASA_IPA_DEFAULT_FORMATS", "ipa")
MAX_INPUT_CHARS = int(os.getenv("GLOBASA_IPA_MAX_INPUT_CHARS", "20000"))
"""Longest text the HTTP API accepts in one request."""

API_HOST = os.getenv("GLOBASA_IPA_HOST", "127.0.0.1")
API_PORT = int(os.getenv("GLOBASA_IPA_PORT", "8000"))
LOG_LEVEL = os.getenv("GLOBASA_IPA_LOG_LEVEL", "INFO").upper()


def parse_format_list(value: str) -> list[str]:
    """Split a comma-separated list of formatter keys and validate them.

    RULES:
    - Whitespace around keys is ignored; empty items are dropped
    - Duplicates are removed, first occurrence wins
    - Raises ValueError naming the unknown key and the available ones
    """
    keys: list[str] = []
    for raw in value.split(","):
        key = raw.strip().lower()
        if not key or key in keys:
            continue
        if key not in FORMATTERS:
            raise ValueError(
                "Unknown format '{}'. Available formats: {}".format(
                    key, ", ".join(sorted(FORMATTERS.keys()))
                )
            )
        keys.append(key)
    if not keys:
        raise ValueError("No output formats given")
    return keys
