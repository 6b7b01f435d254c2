"""Output formatter registry and pluggable format hub.

WHY: The CLI and the HTTP API need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["ssml"]()``.

RULES:
- Keys are short snake_case identifiers (used in CLI flags and the API)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from globasa_ipa.formatters.plain_text import IPATextFormatter, StressedTextFormatter
from globasa_ipa.formatters.ssml import SSMLFormatter
from globasa_ipa.formatters.transcription_json import TranscriptionJSONFormatter

if TYPE_CHECKING:
    from globasa_ipa.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "ipa": IPATextFormatter,
    "stressed": StressedTextFormatter,
    "ssml": SSMLFormatter,
    "json": TranscriptionJSONFormatter,
}
