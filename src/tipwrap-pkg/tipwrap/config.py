"""Configuration dataclasses for tipwrap."""

import os
from dataclasses import dataclass, field

from .numbers import INVARIANT, NumberLocale


@dataclass
class WrapConfig:
    """Line packing settings.

    ``newline`` terminates output lines and ``input_newline`` is the break
    recognised in the input. Both default to the platform terminator; pass
    ``"\\n"`` explicitly when output has to be identical across platforms.
    """
    max_length: int = 40
    remove_new_line: bool = True
    newline: str = os.linesep
    input_newline: str = os.linesep


@dataclass
class FormatConfig:
    """Settings for the numeric and entity-decoding helpers.

    The locale is always explicit; nothing reads the process locale.
    """
    locale: NumberLocale = field(default_factory=lambda: INVARIANT)
    decode_max_iterations: int = 32
