from __future__ import annotations

import locale

import pytest

from bigint_input.masking import formatting
from bigint_input.masking.formatting import (
    COMMA_DECIMAL,
    PERIOD_DECIMAL,
    FormattingOptions,
    configure_formatting,
    detect_decimal_separator,
    formatting_options,
    options_for_decimal_separator,
)


@pytest.fixture(autouse=True)
def reset_formatting():
    previous = formatting._ACTIVE_OPTIONS
    yield
    formatting._ACTIVE_OPTIONS = previous


def test_only_two_separator_pairs_are_legal() -> None:
    assert PERIOD_DECIMAL == FormattingOptions(".", ",")
    assert COMMA_DECIMAL == FormattingOptions(",", ".")
    with pytest.raises(ValueError):
        FormattingOptions(".", ".")
    with pytest.raises(ValueError):
        FormattingOptions(",", " ")


def test_options_for_decimal_separator() -> None:
    assert options_for_decimal_separator(".") is PERIOD_DECIMAL
    assert options_for_decimal_separator(",") is COMMA_DECIMAL
    assert options_for_decimal_separator("٫") is COMMA_DECIMAL


def test_c_locale_uses_period() -> None:
    assert detect_decimal_separator("C") == "."


def test_unknown_locale_falls_back_to_period_and_restores_setting() -> None:
    before = locale.setlocale(locale.LC_NUMERIC)

    assert detect_decimal_separator("xx_NOT_A_LOCALE.UTF-8") == "."
    assert locale.setlocale(locale.LC_NUMERIC) == before


def test_configure_formatting_presets_options() -> None:
    configure_formatting(options=COMMA_DECIMAL)

    assert formatting_options() is COMMA_DECIMAL


def test_configure_formatting_from_locale_name() -> None:
    assert configure_formatting(locale_name="C") is PERIOD_DECIMAL
    assert formatting_options() is PERIOD_DECIMAL


def test_configure_formatting_rejects_both_arguments() -> None:
    with pytest.raises(ValueError):
        configure_formatting(options=PERIOD_DECIMAL, locale_name="C")


def test_formatting_options_resolved_once(monkeypatch: pytest.MonkeyPatch) -> None:
    formatting._ACTIVE_OPTIONS = None
    monkeypatch.setenv(formatting.LOCALE_ENV_VAR, "C")

    first = formatting_options()
    monkeypatch.setenv(formatting.LOCALE_ENV_VAR, "xx_NOT_A_LOCALE")

    assert formatting_options() is first
