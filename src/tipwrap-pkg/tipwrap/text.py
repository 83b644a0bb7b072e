"""Word wrapping that never splits an inline markup tag across lines."""

import os

from .errors import require
from .types import Token, WrapState

# Literal backslash escapes, longest first so "\r\n" is not read as "\r" + "\n".
_ESCAPED_NEWLINES = ("\\r\\n", "\\r", "\\n")

# Characters that get one extra space after them before tokenizing.
_SPACED_PUNCTUATION = (".", ">", ",", ";")


def word_wrap(text: str, max_length: int, remove_new_line: bool = True,
              newline: str = os.linesep, input_newline: str = os.linesep) -> str:
    """Break text into lines shorter than max_length, keeping tag spans whole.

    - Escaped newlines (``\\r\\n``, ``\\r``, ``\\n``) are collapsed to a
      space, or forced breaks when remove_new_line is False
    - A tag span (a token starting with ``<`` through the token containing
      ``>``) always lands on a single line, whatever its length
    - Every line, the last included, ends with newline
    - input_newline is the line break looked for in text; it is independent
      of the output terminator
    """
    if text is not None and not text.strip():
        return ""
    normalized = normalize(text, remove_new_line, input_newline)
    return join_lines(pack(tokenize(normalized), max_length, input_newline), newline)


def normalize(text: str, remove_new_line: bool = True,
              newline: str = os.linesep) -> str:
    """Unescape newlines and pad punctuation so tokenizing splits after it."""
    require(text, "text")
    if not text.strip():
        return text

    for escaped in _ESCAPED_NEWLINES:
        text = text.replace(escaped, newline)

    if remove_new_line:
        text = text.replace(newline, " ")
    else:
        text = text.replace(newline, f" {newline} ")

    text = text.replace("\t", " ")
    for ch in _SPACED_PUNCTUATION:
        text = text.replace(ch, ch + " ")
    return text


def tokenize(text: str) -> list[Token]:
    return [Token(piece) for piece in text.split(" ") if piece]


def pack_state(tokens, max_length: int, newline: str = os.linesep) -> WrapState:
    """Run the greedy packer and return its final state.

    The length test is checked before a token is added, and it is skipped
    entirely inside a tag span. An unterminated span leaves ``in_tag`` set
    and swallows every remaining token into the last line.
    """
    state = WrapState()

    for token in tokens:
        if token.opens_tag:
            state.in_tag = True

        if state.in_tag:
            if state.current_line.endswith("."):
                # Rejoin "name.ext" that normalize() split apart
                state.current_line += token.text
            else:
                state.current_line += _separator(state.current_line) + token.text
            if token.closes_tag:
                state.in_tag = False
            continue

        candidate = state.current_line_length + len(token) + 1
        if (token.text != newline and state.current_line != newline
                and candidate < max_length):
            state.current_line += _separator(state.current_line) + token.text + " "
            state.current_line_length = candidate
        else:
            state.flush()
            state.current_line = token.text + " "
            state.current_line_length = len(token)

    state.flush()
    return state


def pack(tokens, max_length: int, newline: str = os.linesep) -> list[str]:
    return pack_state(tokens, max_length, newline).lines


def join_lines(lines, newline: str = os.linesep) -> str:
    return "".join(f"{line}{newline}" for line in lines)


def _separator(current_line: str) -> str:
    if current_line and not current_line.endswith(" "):
        return " "
    return ""
