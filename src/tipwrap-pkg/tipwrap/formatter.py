"""Configured front end over the wrapping and formatting helpers."""

from typing import Callable

from .config import FormatConfig, WrapConfig
from .numbers import format_number
from .strings import html_decode, looks_like_email
from .text import join_lines, normalize, pack_state, tokenize
from .ui import ANSI_YELLOW, ansi, log


class TooltipFormatter:
    """Holds wrap and format settings so callers never rely on global state."""

    def __init__(self, wrap_config: WrapConfig | None = None,
                 format_config: FormatConfig | None = None,
                 log_fn: Callable[[str], None] | None = None):
        self.wrap_config = wrap_config or WrapConfig()
        self.format_config = format_config or FormatConfig()
        self._log = log_fn if log_fn is not None else log

    def wrap_lines(self, text: str) -> list[str]:
        """Wrap text and return the finished lines without terminators."""
        wc = self.wrap_config
        if text is not None and not text.strip():
            return []

        normalized = normalize(text, wc.remove_new_line, wc.input_newline)
        state = pack_state(tokenize(normalized), wc.max_length, wc.input_newline)
        if state.in_tag:
            self._log(
                f"  {ansi('!', ANSI_YELLOW)} unterminated tag span; "
                f"last line holds {len(state.lines[-1]):,} chars"
            )
        return state.lines

    def wrap(self, text: str) -> str:
        return join_lines(self.wrap_lines(text), self.wrap_config.newline)

    def number(self, value, decimals: int) -> str:
        return format_number(value, decimals, self.format_config.locale)

    def decode(self, text: str) -> str:
        return html_decode(text, self.format_config.decode_max_iterations)

    def is_email(self, text: str) -> bool:
        return looks_like_email(text)
