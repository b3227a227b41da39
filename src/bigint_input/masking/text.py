"""Pure string transforms between raw input, masked text and scaled integers.

Every function takes the active :class:`FormattingOptions` explicitly so the
engine never reads locale state on its own.
"""

from __future__ import annotations

import re

from .formatting import FormattingOptions

_GROUP_BOUNDARY = re.compile(r"\B(?=([0-9]{3})+(?![0-9]))")
_DIGITS = re.compile(r"[0-9]*")


class NumericContractError(RuntimeError):
    """Raised when text outside the numeric-string grammar reaches the parser."""

    def __init__(self, message: str, *, text: str | None = None) -> None:
        super().__init__(message)
        self.text = text


def normalize_keyboard_quirk(raw: str, options: FormattingOptions) -> str:
    """Read a trailing thousands separator as the decimal separator.

    Some on-screen keyboards offer the wrong separator for the active locale,
    so the keystroke that was just typed is taken to mean "decimal point".
    """

    if raw.endswith(options.thousands_separator):
        return raw[:-1] + options.decimal_separator
    return raw


def to_numeric_string(raw: str, scale: int, *, options: FormattingOptions) -> str:
    """Reduce ``raw`` to digits plus at most one decimal separator.

    Digits following any extra separator are folded into the fraction, and the
    fraction is truncated (never rounded) to ``scale`` digits. ``raw`` that is
    exactly the decimal separator means "no value yet" and yields ``""``; any
    other input keeps its separator, so a quirk-normalized ``","`` becomes
    ``"."``.
    """

    decimal = options.decimal_separator
    if raw == decimal:
        return ""

    raw = normalize_keyboard_quirk(raw, options)
    kept = re.sub(rf"[^0-9{re.escape(decimal)}]", "", raw)
    whole, *fraction = kept.split(decimal)
    if not fraction:
        return whole

    return whole + decimal + "".join(fraction)[: max(scale, 0)]


def mask(numeric: str, *, options: FormattingOptions) -> str:
    whole, sep, fraction = numeric.partition(options.decimal_separator)
    grouped = _GROUP_BOUNDARY.sub(options.thousands_separator, whole)
    if sep:
        return grouped + options.decimal_separator + fraction
    return grouped


def unmask(masked: str, *, options: FormattingOptions) -> str:
    return masked.replace(options.thousands_separator, "")


def parse_scaled_value(numeric: str, scale: int, *, options: FormattingOptions) -> int:
    """Shift the decimal point of ``numeric`` right by ``scale`` places.

    Empty whole or fraction parts count as zero, so ``""`` and ``"12."`` are
    accepted.
    """

    if scale < 0:
        raise NumericContractError(f"Scale must be non-negative, got {scale}")
    whole, _, fraction = numeric.partition(options.decimal_separator)
    if not (_DIGITS.fullmatch(whole) and _DIGITS.fullmatch(fraction)):
        raise NumericContractError(f"Not a numeric string: {numeric!r}", text=numeric)
    if len(fraction) > scale:
        raise NumericContractError(
            f"{numeric!r} has more than {scale} fractional digits", text=numeric
        )
    return int(whole + fraction.ljust(scale, "0") or "0")


def format_scaled_value(value: int, scale: int, *, options: FormattingOptions) -> str:
    """Render ``value / 10**scale`` without trailing fractional zeros."""

    if value < 0:
        raise NumericContractError(f"Negative values are not supported: {value}")
    if scale < 0:
        raise NumericContractError(f"Scale must be non-negative, got {scale}")

    digits = str(value).rjust(scale, "0")
    split_at = len(digits) - scale
    whole = digits[:split_at] or "0"
    fraction = digits[split_at:].rstrip("0")
    if fraction:
        return whole + options.decimal_separator + fraction
    return whole


def convert_scale(value: int, from_scale: int, to_scale: int) -> int:
    """Re-express ``value`` under another scale, truncating when narrowing."""

    factor = 10 ** abs(to_scale - from_scale)
    if to_scale > from_scale:
        return value * factor
    return value // factor


__all__ = [
    "NumericContractError",
    "convert_scale",
    "format_scaled_value",
    "mask",
    "normalize_keyboard_quirk",
    "parse_scaled_value",
    "to_numeric_string",
    "unmask",
]
