"""Small pure string helpers used around tooltip text."""

import html
import os
import re

from .errors import DecodeDidNotConvergeError, InvalidArgumentError, require

_EMAIL_RE = re.compile(
    # local part: "quoted"@ or dotted atoms that start and end alphanumeric
    r"""(?:"[^"]+?"@|[0-9a-zA-Z](?:\.(?!\.)|[-!#$%&'*+/=?^`{}|~\w])*(?<=[0-9a-zA-Z])@)"""
    # domain: [1.2.3.4] or labels ending in a 2-6 letter TLD
    r"""(?:\[(?:\d{1,3}\.){3}\d{1,3}\]|(?:[0-9a-zA-Z][-\w]*[0-9a-zA-Z]\.)+[a-zA-Z]{2,6})"""
)
_CAMEL_BOUNDARY_RE = re.compile(r"\B([A-Z])")
_UNICODE_ESCAPE_RE = re.compile(r"\\u([0-9a-fA-F]{4})")
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def html_decode(text: str, max_iterations: int = 32) -> str:
    """Decode HTML entities until the text stops changing.

    "&amp;lt;b&amp;gt;" takes two passes to become "<b>". Raises
    DecodeDidNotConvergeError if it is still changing after max_iterations
    passes.
    """
    require(text, "text")
    if max_iterations < 1:
        raise InvalidArgumentError(
            "max_iterations", f"max_iterations must be >= 1, got {max_iterations}")
    for _ in range(max_iterations):
        decoded = html.unescape(text)
        if decoded == text:
            return text
        text = decoded
    if html.unescape(text) == text:
        return text
    raise DecodeDidNotConvergeError(max_iterations, text)


def looks_like_email(text: str) -> bool:
    if text is None:
        return False
    return _EMAIL_RE.fullmatch(text) is not None


def to_lower_camel(text: str) -> str:
    """Lower-case the first character: "UpperCamel" becomes "upperCamel"."""
    require(text, "text")
    return text[:1].lower() + text[1:]


def camel_to_sentence(text: str) -> str:
    """Split camel case into words: "UpperCamelCase" becomes "Upper Camel Case"."""
    require(text, "text")
    return _CAMEL_BOUNDARY_RE.sub(r" \1", text.strip())


def to_title_case(text: str) -> str:
    # Runs of spaces are kept as-is
    require(text, "text")
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def new_lines_to_break_lines(text: str, newline: str = os.linesep) -> str:
    """Turn line breaks (real or backslash-escaped) into ``<br>`` tags."""
    require(text, "text")
    if not text.strip():
        return text

    for escaped in ("\\r\\n", "\\r", "\\n"):
        text = text.replace(escaped, newline)

    lines = _LINE_BREAK_RE.split(text)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return "<br>".join(lines)


def decode_unicode_characters(text: str) -> str:
    r"""Replace literal ``\uXXXX`` escapes with the characters they name."""
    require(text, "text")
    return _UNICODE_ESCAPE_RE.sub(lambda m: chr(int(m.group(1), 16)), text)


def contains(source: str, text: str, ignore_case: bool = False) -> bool:
    require(source, "source")
    require(text, "text")
    if not ignore_case:
        return text in source
    return text.casefold() in source.casefold()


def remove_project_local_path(text: str, project: str) -> str:
    r"""Strip a drive-rooted path prefix in front of `project`.

    "C:\Users\dev\src\EVEMon\Common\x.cs" -> "EVEMon\Common\x.cs"
    """
    require(text, "text")
    require(project, "project")
    pattern = r"[a-zA-Z]+:\\.*\\(?=" + re.escape(project) + ")"
    return re.sub(pattern, "", text, flags=re.IGNORECASE)
