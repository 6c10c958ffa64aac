"""
Command-line host for the clipboard actions.

This module stands in for a clipboard tool: it reads text from a file (or
standard input), runs one of the registered actions against the Generative
Language API and writes the resulting string to a file (or standard output).
Like a clipboard host, it always writes *something*: on failure the error
string is written and the exit status is ``1``.

---

# Quick ways to run the script

1. Using a file

>>> gemini-clip improve-writing notes.txt -o notes.fixed.txt

2. Piping data

>>> echo "Bonjour tout le monde" | gemini-clip translate --tolang English

3. Printing the host manifest of an action

>>> gemini-clip translate --manifest

The API key is taken from ``--apikey`` or the ``GEMINI_CLIP_API_KEY``
environment variable.
"""

import argparse
import json
import os
import sys

from gemini_clip_lib.actions import ACTIONS
from gemini_clip_lib.data_models.constants import (
    API_KEY_ENV,
    AVAILABLE_MODELS,
    LOG_LEVEL,
    LOG_LEVELS,
    TARGET_LANGUAGES,
)
from gemini_clip_lib.data_models.options import ExtensionOptions
from gemini_clip_lib.data_models.result import ActionResult
from gemini_clip_lib.exceptions import MissingInputError
from gemini_clip_lib.utils.logger import prepare_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rewrite or translate text with Google Gemini."
    )
    parser.add_argument(
        "action",
        choices=sorted(ACTIONS),
        help="Action to run.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (defaults to STDIN).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=argparse.FileType("w", encoding="utf-8"),
        default=sys.stdout,
        help="Output file (defaults to STDOUT).",
    )
    parser.add_argument(
        "--apikey",
        default=os.environ.get(API_KEY_ENV, ""),
        help=f"API key (defaults to ${API_KEY_ENV}).",
    )
    parser.add_argument(
        "--model",
        choices=AVAILABLE_MODELS,
        default=None,
        help="Model identifier.",
    )
    parser.add_argument(
        "--prompt",
        default=None,
        help="Prompt template with {input} (and {lang}) placeholders.",
    )
    parser.add_argument(
        "--tolang",
        choices=TARGET_LANGUAGES,
        default=None,
        help="Target language (translate only).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=LOG_LEVEL.upper(),
        help="Logging level.",
    )
    parser.add_argument(
        "--manifest",
        action="store_true",
        help="Print the host manifest of the action and exit.",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = prepare_logger("gemini_clip", level=args.log_level)
    action = ACTIONS[args.action](logger=logger)

    try:
        if args.manifest:
            json.dump(action.manifest(), args.output, indent=2, ensure_ascii=False)
            args.output.write("\n")
            return 0

        options = ExtensionOptions(
            apikey=args.apikey,
            model=args.model,
            prompt=args.prompt,
            tolang=args.tolang,
            timeout=args.timeout,
        )
        try:
            text = args.input.read()
        except UnicodeDecodeError as exc:
            logger.error("Cannot decode input: %s", exc)
            result = ActionResult.failure(MissingInputError(str(exc)))
        else:
            result = action.run({"text": text}, options)
        args.output.write(result.display())
        return 1 if result.is_error else 0
    finally:
        for stream in (args.input, args.output):
            if stream not in (sys.stdin, sys.stdout):
                stream.close()


if __name__ == "__main__":
    sys.exit(main())
