"""Command-line interface for Globasa IPA transcription.

WHY: Users need a simple way to turn Globasa text into IPA, stress-marked
spelling, SSML or JSON from the terminal, whether the text is typed on
the command line, read from a file or piped in from another tool.

HOW: Uses argparse to accept an input file (or ``-`` for stdin) or an
inline ``--text`` string, the output format selection, and an output
directory. Builds the Transcription IR once, runs each selected
formatter, and either saves the outputs next to the source or prints
them to stdout.

RULES:
- Positional argument: input text file path, or ``-`` / omitted for stdin
- --text takes precedence over the positional argument
- --formats: comma-separated formatter keys (default from config)
- File input: output saved as {stem}{suffix}, numeric suffix on
  conflict (-ipa-2.txt), next to the input or in --output-dir
- stdin/--text input: outputs printed to stdout unless --output-dir is
  given (then saved with stem "transcription")
- Status output goes to stderr (not stdout)
- Exit codes: 0 = success, 1 = error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from globasa_ipa.config import DEFAULT_FORMATS, LOG_LEVEL, parse_format_list
from globasa_ipa.core.pipeline import build_transcription
from globasa_ipa.formatters import FORMATTERS
from globasa_ipa.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)

STDIN_STEM = "transcription"


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may run the transcriber several times on the same file.
    Overwriting previous output would lose work.

    HOW: Check if {stem}{suffix} exists. If so, increment a counter
    and insert it before the file extension until a free name is found.

    RULES:
    - First attempt: {stem}{suffix} (e.g. poem-ipa.txt)
    - Conflict: counter inserted before the extension (poem-ipa-2.txt)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # "-ipa.txt" -> ("-ipa", ".txt")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Write one formatter output as UTF-8 and return where it went."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _read_input(args: argparse.Namespace) -> Tuple[str, Optional[Path]]:
    """Return (text, source_path) for the requested input.

    source_path is None when the text came from --text or stdin.
    """
    if args.text is not None:
        return args.text, None

    if args.input_file in (None, "-"):
        return sys.stdin.read(), None

    input_path = Path(args.input_file).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))
    return input_path.read_text(encoding="utf-8"), input_path


def run(args: argparse.Namespace) -> int:
    """Execute the transcription for parsed CLI arguments.

    RULES:
    - Validate formats and output directory before reading any input
    - One Transcription IR is built and shared by all formatters
    - Returns the number of outputs written or printed
    """
    try:
        format_keys = parse_format_list(args.formats)
    except ValueError as e:
        _fail(str(e))

    output_dir: Optional[Path] = None
    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
        if not output_dir.is_dir():
            _fail("Output directory does not exist: {}".format(output_dir))

    text, input_path = _read_input(args)
    if input_path is not None and output_dir is None:
        output_dir = input_path.parent
    stem = input_path.stem if input_path is not None else STDIN_STEM

    transcription = build_transcription(text)
    logger.info(
        "Transcribed %d chars, %d words", len(text), len(transcription.words)
    )

    count = 0
    for key in format_keys:
        formatter = FORMATTERS[key]()
        for output in formatter.format(transcription):
            count += 1
            if output_dir is None:
                sys.stdout.write(output.content)
                if not output.content.endswith("\n"):
                    sys.stdout.write("\n")
            else:
                saved_path = _save_output(output, stem, output_dir)
                _status("Saved {}: {}".format(formatter.name, saved_path.name))
    return count


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: input_file (optional; "-" or omitted means stdin)
    - Optional: --text, --formats (comma-separated), --output-dir
    """
    parser = argparse.ArgumentParser(
        prog="globasa-ipa",
        description="Transcribe Globasa text into stress-marked IPA, "
                    "SSML speech markup, or JSON.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Path to a UTF-8 text file, or '-' to read stdin (default).",
    )

    parser.add_argument(
        "--text",
        default=None,
        help="Transcribe this text instead of reading a file.",
    )

    parser.add_argument(
        "--formats",
        default=DEFAULT_FORMATS,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: %(default)s.".format(
                 ", ".join(sorted(FORMATTERS.keys()))
             ),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: next to the input "
             "file; stdout for --text and stdin).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m globasa_ipa`` and the globasa-ipa script.

    argv=None means use sys.argv; explicit argv is for testing.
    """
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    run(args)


if __name__ == "__main__":
    main()
