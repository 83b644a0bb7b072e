"""tipwrap: tag-aware word wrapping for tooltip text.

Public API re-exports for convenient single-import usage.
"""

__version__ = "0.1.0"

from .config import FormatConfig, WrapConfig
from .errors import DecodeDidNotConvergeError, InvalidArgumentError, TipwrapError
from .formatter import TooltipFormatter
from .numbers import INVARIANT, LOCALES, NumberLocale, format_number, get_locale
from .strings import (
    camel_to_sentence,
    contains,
    decode_unicode_characters,
    html_decode,
    looks_like_email,
    new_lines_to_break_lines,
    remove_project_local_path,
    to_lower_camel,
    to_title_case,
)
from .text import join_lines, normalize, pack, pack_state, tokenize, word_wrap
from .types import Token, WrapState

__all__ = [
    # config
    "FormatConfig",
    "WrapConfig",
    # errors
    "TipwrapError",
    "InvalidArgumentError",
    "DecodeDidNotConvergeError",
    # formatter
    "TooltipFormatter",
    # numbers
    "INVARIANT",
    "LOCALES",
    "NumberLocale",
    "format_number",
    "get_locale",
    # strings
    "camel_to_sentence",
    "contains",
    "decode_unicode_characters",
    "html_decode",
    "looks_like_email",
    "new_lines_to_break_lines",
    "remove_project_local_path",
    "to_lower_camel",
    "to_title_case",
    # text
    "join_lines",
    "normalize",
    "pack",
    "pack_state",
    "tokenize",
    "word_wrap",
    # types
    "Token",
    "WrapState",
]
