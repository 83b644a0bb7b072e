"""Fixed-decimal number formatting with explicit locale conventions."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class NumberLocale:
    """Digit grouping and decimal point conventions for one locale."""
    name: str
    group_separator: str
    decimal_separator: str
    group_size: int = 3


INVARIANT = NumberLocale("invariant", ",", ".")
EN_US = NumberLocale("en-US", ",", ".")
EN_GB = NumberLocale("en-GB", ",", ".")
DE_DE = NumberLocale("de-DE", ".", ",")
FR_FR = NumberLocale("fr-FR", "\u202f", ",")
ES_ES = NumberLocale("es-ES", ".", ",")
IT_IT = NumberLocale("it-IT", ".", ",")
RU_RU = NumberLocale("ru-RU", "\u00a0", ",")
JA_JP = NumberLocale("ja-JP", ",", ".")

LOCALES: dict[str, NumberLocale] = {
    loc.name.lower(): loc
    for loc in (INVARIANT, EN_US, EN_GB, DE_DE, FR_FR, ES_ES, IT_IT, RU_RU, JA_JP)
}


def get_locale(name: str) -> NumberLocale:
    """Look up a preset by name ("de-DE", "de_de" and "DE-de" all match)."""
    if name is None:
        raise InvalidArgumentError("name")
    try:
        return LOCALES[name.replace("_", "-").lower()]
    except KeyError:
        raise InvalidArgumentError(
            "name", f"unknown locale {name!r}; known: {sorted(LOCALES)}"
        ) from None


def format_number(value, decimals: int, locale: NumberLocale = INVARIANT) -> str:
    """Render value grouped, with exactly `decimals` fractional digits.

    Rounds half away from zero on the exact value of the input, so 0.125
    becomes 0.13 while 2.675 (stored as 2.67499...) becomes 2.67.
    """
    if value is None:
        raise InvalidArgumentError("value")
    if decimals < 0:
        raise InvalidArgumentError("decimals", f"decimals must be >= 0, got {decimals}")

    exact = value if isinstance(value, Decimal) else Decimal(value)
    if not exact.is_finite():
        raise InvalidArgumentError("value", f"cannot format non-finite value {value!r}")
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + decimals + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        digits = f"{abs(rounded):.{decimals}f}"
    whole, _, fraction = digits.partition(".")

    size = locale.group_size
    groups = []
    while len(whole) > size:
        groups.insert(0, whole[-size:])
        whole = whole[:-size]
    groups.insert(0, whole)

    out = sign + locale.group_separator.join(groups)
    if decimals:
        out += locale.decimal_separator + fraction
    return out
