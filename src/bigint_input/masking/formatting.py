"""Separator conventions and their one-time resolution from the runtime locale."""

from __future__ import annotations

import locale
import os
from dataclasses import dataclass
from typing import Optional

from bigint_input.runtime import telemetry

LOCALE_ENV_VAR = "BIGINT_INPUT_LOCALE"


@dataclass(frozen=True, slots=True)
class FormattingOptions:
    """Decimal/thousands separator pair used to mask and parse text.

    Only the two conventions below are legal; any other combination raises.
    """

    decimal_separator: str
    thousands_separator: str

    def __post_init__(self) -> None:
        pair = (self.decimal_separator, self.thousands_separator)
        if pair not in {(".", ","), (",", ".")}:
            raise ValueError(f"Unsupported separator pair {pair!r}")


PERIOD_DECIMAL = FormattingOptions(decimal_separator=".", thousands_separator=",")
COMMA_DECIMAL = FormattingOptions(decimal_separator=",", thousands_separator=".")

_ACTIVE_OPTIONS: Optional[FormattingOptions] = None


def options_for_decimal_separator(separator: str) -> FormattingOptions:
    # Anything that is not a period is treated as the comma convention.
    if separator == ".":
        return PERIOD_DECIMAL
    return COMMA_DECIMAL


def detect_decimal_separator(locale_name: str = "") -> str:
    """Return the decimal point of ``locale_name`` without leaking the switch.

    An empty name means the locale configured in the process environment.
    """

    previous = locale.setlocale(locale.LC_NUMERIC)
    try:
        locale.setlocale(locale.LC_NUMERIC, locale_name)
        return str(locale.localeconv()["decimal_point"]) or "."
    except locale.Error as exc:
        telemetry.record_event(
            "formatting.locale_unavailable",
            level="warning",
            data={"locale": locale_name, "error": str(exc)},
        )
        return "."
    finally:
        locale.setlocale(locale.LC_NUMERIC, previous)


def resolve_formatting_options(locale_name: Optional[str] = None) -> FormattingOptions:
    name = locale_name if locale_name is not None else os.getenv(LOCALE_ENV_VAR, "")
    options = options_for_decimal_separator(detect_decimal_separator(name))
    telemetry.record_event(
        "formatting.resolved",
        level="debug",
        data={
            "locale": name or "<environment>",
            "decimal": options.decimal_separator,
            "thousands": options.thousands_separator,
        },
    )
    return options


def configure_formatting(
    *,
    options: Optional[FormattingOptions] = None,
    locale_name: Optional[str] = None,
) -> FormattingOptions:
    """Preset the process-wide options, or re-resolve them from a locale."""

    global _ACTIVE_OPTIONS
    if options is not None and locale_name is not None:
        raise ValueError("Provide either `options` or `locale_name`, not both.")
    _ACTIVE_OPTIONS = options or resolve_formatting_options(locale_name)
    return _ACTIVE_OPTIONS


def formatting_options() -> FormattingOptions:
    """Return the process-wide options, resolving them on first use."""

    global _ACTIVE_OPTIONS
    if _ACTIVE_OPTIONS is None:
        _ACTIVE_OPTIONS = resolve_formatting_options()
    return _ACTIVE_OPTIONS


__all__ = [
    "COMMA_DECIMAL",
    "FormattingOptions",
    "LOCALE_ENV_VAR",
    "PERIOD_DECIMAL",
    "configure_formatting",
    "detect_decimal_separator",
    "formatting_options",
    "options_for_decimal_separator",
    "resolve_formatting_options",
]
