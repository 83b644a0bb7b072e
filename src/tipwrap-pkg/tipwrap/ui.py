"""ANSI terminal output utilities for tipwrap."""

import sys

ANSI_RESET  = "\033[0m"
ANSI_DIM    = "\033[2m"
ANSI_RED    = "\033[31m"
ANSI_YELLOW = "\033[33m"
ANSI_CYAN   = "\033[36m"


def ansi(text: str, *codes: str) -> str:
    """Wrap text in ANSI escape codes when stderr is a TTY (no-op otherwise)."""
    if not sys.stderr.isatty():
        return text
    return "".join(codes) + text + ANSI_RESET


def log(msg: str) -> None:
    """Print a diagnostic line to stderr, keeping stdout for wrapped output."""
    print(msg, file=sys.stderr)


def log_preview(lines: list[str], width: int) -> None:
    """Print wrapped lines behind a dimmed gutter, with a ruler at `width`."""
    if width > 0:
        log(ansi("      " + "".join(str(i % 10) for i in range(1, width + 1)), ANSI_DIM))
    for n, line in enumerate(lines, 1):
        gutter = ansi(f"{n:>3} │ ", ANSI_DIM)
        if width > 0 and len(line) >= width:
            line = ansi(line, ANSI_YELLOW)
        log(gutter + line)
