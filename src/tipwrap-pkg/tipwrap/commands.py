"""Command decorator and the argument models behind the tipwrap CLI."""

from decimal import Decimal, InvalidOperation
from typing import Callable, Literal

from pydantic import BaseModel, Field, field_validator

from .config import FormatConfig, WrapConfig
from .formatter import TooltipFormatter
from .numbers import get_locale
from .strings import camel_to_sentence, looks_like_email, to_lower_camel, to_title_case


def command(args_model: type[BaseModel]):
    """Decorator factory. @command(MyArgsModel) attaches CLI metadata to a function."""
    def decorator(fn: Callable) -> Callable:
        spec = {
            "name": fn.__name__.rstrip("_"),
            "description": (fn.__doc__ or "").strip(),
            "parameters": args_model.model_json_schema(),
        }
        fn._command_spec = spec
        fn._command_model = args_model
        return fn
    return decorator


def _summarize_text(text: str, max_len: int = 60) -> str:
    """Return a compact one-line preview of input text for diagnostics."""
    flat = " ".join(text.split())
    if len(flat) <= max_len:
        return flat
    return flat[:max_len - 3] + "..."


class CommandArgs(BaseModel):
    text: str = Field(description="Input text")

    def post_process(self): return self


class WrapArgs(CommandArgs):
    width: int = Field(40, description="Lines are kept shorter than this many characters")
    keep_newlines: bool = Field(
        False, description="Turn line breaks into forced breaks instead of spaces")
    crlf: bool = Field(False, description="Terminate lines with CRLF instead of LF")
    preview: bool = Field(False, description="Also print a ruler preview to stderr")

    def wrap_config(self) -> WrapConfig:
        return WrapConfig(
            max_length=self.width,
            remove_new_line=not self.keep_newlines,
            newline="\r\n" if self.crlf else "\n",
            # stdin and argv arrive with universal newlines
            input_newline="\n",
        )


class NumberArgs(CommandArgs):
    text: str = Field(description="Number to format, e.g. 1234.5")
    decimals: int = Field(2, ge=0, description="Fractional digits to render")
    locale: str = Field("invariant", description="Locale preset, e.g. en-US or de-DE")

    @field_validator("text")
    @classmethod
    def check_number(cls, v: str) -> str:
        try:
            value = Decimal(v.strip())
        except InvalidOperation:
            value = None
        if value is None or not value.is_finite():
            raise ValueError(f"not a finite number: {v!r}")
        return v.strip()

    @field_validator("locale")
    @classmethod
    def check_locale(cls, v: str) -> str:
        return get_locale(v).name


class DecodeArgs(CommandArgs):
    max_iterations: int = Field(32, ge=1, description="Give up after this many decode passes")


class CaseArgs(CommandArgs):
    style: Literal["lower-camel", "sentence", "title"] = Field(
        "title", description="Target casing")


class EmailArgs(CommandArgs):
    pass


@command(WrapArgs)
def wrap(args: WrapArgs, log_fn: Callable[[str], None] | None = None) -> str:
    """Word-wrap text without splitting inline tags."""
    fmt = TooltipFormatter(wrap_config=args.wrap_config(), log_fn=log_fn)
    return fmt.wrap(args.text)


@command(NumberArgs)
def number(args: NumberArgs, log_fn: Callable[[str], None] | None = None) -> str:
    """Format a number with fixed decimals in a locale."""
    fmt = TooltipFormatter(format_config=FormatConfig(locale=get_locale(args.locale)),
                           log_fn=log_fn)
    return fmt.number(Decimal(args.text), args.decimals)


@command(DecodeArgs)
def decode(args: DecodeArgs, log_fn: Callable[[str], None] | None = None) -> str:
    """Decode HTML entities until the text stops changing."""
    fmt = TooltipFormatter(format_config=FormatConfig(decode_max_iterations=args.max_iterations),
                           log_fn=log_fn)
    return fmt.decode(args.text)


_CASE_STYLES: dict[str, Callable[[str], str]] = {
    "lower-camel": to_lower_camel,
    "sentence": camel_to_sentence,
    "title": to_title_case,
}


@command(CaseArgs)
def case(args: CaseArgs, **kwargs) -> str:
    """Convert the casing of text."""
    return _CASE_STYLES[args.style](args.text)


@command(EmailArgs)
def email(args: EmailArgs, **kwargs) -> str:
    """Check whether text is shaped like an email address."""
    return "yes" if looks_like_email(args.text.strip()) else "no"


COMMANDS: tuple[Callable, ...] = (wrap, number, decode, case, email)
