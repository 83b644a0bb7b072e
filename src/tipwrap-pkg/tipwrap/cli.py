"""
tipwrap: reflow tooltip text and run the string helpers from a shell.

Usage:
    tipwrap wrap [TEXT] [--width N] [--keep-newlines] [--crlf] [--preview]
    tipwrap number VALUE [--decimals N] [--locale NAME]
    tipwrap decode [TEXT] [--max-iterations N]
    tipwrap case [TEXT] [--style lower-camel|sentence|title]
    tipwrap email [TEXT]
    tipwrap schema

TEXT defaults to standard input when omitted.
"""

import argparse
import json
import sys

from pydantic import ValidationError

from .commands import COMMANDS, WrapArgs, _summarize_text
from .errors import TipwrapError
from .numbers import LOCALES
from .ui import ANSI_CYAN, ANSI_DIM, ANSI_RED, ansi, log, log_preview

EXIT_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tipwrap",
        description="Reflow tooltip text without splitting inline tags.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("wrap", help="Word-wrap text")
    p.add_argument("text", nargs="?", default=None)
    p.add_argument(
        "--width", type=int, default=40,
        help="Keep lines shorter than this many characters (default: 40)",
    )
    p.add_argument(
        "--keep-newlines", action="store_true",
        help="Turn line breaks into forced breaks instead of spaces",
    )
    p.add_argument(
        "--crlf", action="store_true",
        help="Terminate lines with CRLF (default: LF)",
    )
    p.add_argument(
        "--preview", action="store_true",
        help="Print a ruler preview of the result to stderr",
    )

    p = sub.add_parser("number", help="Format a number with fixed decimals")
    p.add_argument("text", metavar="value", nargs="?", default=None)
    p.add_argument(
        "--decimals", type=int, default=2,
        help="Fractional digits (default: 2)",
    )
    p.add_argument(
        "--locale", default="invariant",
        help=f"Locale preset, one of {', '.join(sorted(LOCALES))} (default: invariant)",
    )

    p = sub.add_parser("decode", help="Decode HTML entities to a fixed point")
    p.add_argument("text", nargs="?", default=None)
    p.add_argument(
        "--max-iterations", type=int, default=32,
        help="Give up after this many decode passes (default: 32)",
    )

    p = sub.add_parser("case", help="Convert casing")
    p.add_argument("text", nargs="?", default=None)
    p.add_argument(
        "--style", default="title",
        help="lower-camel, sentence or title (default: title)",
    )

    p = sub.add_parser("email", help="Check whether text looks like an email address")
    p.add_argument("text", nargs="?", default=None)

    sub.add_parser("schema", help="Print the JSON schema of every command")
    return parser


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "schema":
        specs = [fn._command_spec for fn in COMMANDS]
        print(json.dumps(specs, indent=2))
        return 0

    registry = {fn._command_spec["name"]: fn for fn in COMMANDS}
    fn = registry[args.command]

    raw_args = {k: v for k, v in vars(args).items() if k != "command" and v is not None}
    if "text" not in raw_args:
        raw_args["text"] = sys.stdin.read()

    try:
        validated = fn._command_model.model_validate(raw_args).post_process()
    except ValidationError as e:
        log(f"{ansi('error:', ANSI_RED)} invalid arguments for {args.command}\n{e}")
        return EXIT_USAGE

    if isinstance(validated, WrapArgs) and validated.preview:
        log(f"  {ansi('⋯', ANSI_DIM)} wrapping {ansi(_summarize_text(validated.text), ANSI_CYAN)} "
            f"at width {validated.width}")

    try:
        result = fn(validated, log_fn=log)
    except TipwrapError as e:
        log(f"{ansi('error:', ANSI_RED)} {e}")
        return EXIT_ERROR

    if isinstance(validated, WrapArgs):
        sys.stdout.write(result)
        if validated.preview:
            log_preview(result.splitlines(), validated.width)
    else:
        print(result)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
