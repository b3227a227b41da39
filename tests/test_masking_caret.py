from __future__ import annotations

import pytest

from bigint_input.masking import (
    COMMA_DECIMAL,
    PERIOD_DECIMAL,
    adjust_cursor_position,
    apply_masked_edit,
    count_separators_before,
    remove_char_at,
)

US = PERIOD_DECIMAL


def backspace(masked: str, cursor: int) -> tuple[str, int]:
    """Simulate the raw field contents right after a backspace at ``cursor``."""

    return masked[: cursor - 1] + masked[cursor:], cursor - 1


def test_adjust_cursor_position() -> None:
    assert adjust_cursor_position("10000", "10,000", 5) == 6
    assert adjust_cursor_position("1,0000", "10,000", 6) == 6
    assert adjust_cursor_position("1,00", "100", 3) == 2
    assert adjust_cursor_position(",00", "00", 0) == 0


def test_count_separators_before() -> None:
    assert count_separators_before("1,000,000", 0, US) == 0
    assert count_separators_before("1,000,000", 2, US) == 1
    assert count_separators_before("1,000,000", 9, US) == 2


def test_remove_char_at() -> None:
    assert remove_char_at("12345", 3) == "1245"
    assert remove_char_at("12345", 5) == "1234"
    assert remove_char_at("12345", 0) == "12345"


def test_typing_digit_advances_over_inserted_separator() -> None:
    edit = apply_masked_edit("10000", 5, "insert", 2, options=US)

    assert edit.masked_value == "10,000"
    assert edit.numeric_value == "10000"
    assert edit.cursor == 6


def test_typing_into_grouped_text_keeps_caret() -> None:
    # "1,000" + "0" typed at the end
    edit = apply_masked_edit("1,0000", 6, "insert", 2, options=US)

    assert edit.masked_value == "10,000"
    assert edit.cursor == 6


def test_deleting_digit_that_drops_separator_retreats_caret() -> None:
    # "1,000" with backspace on the last "0"
    edit = apply_masked_edit("1,00", 4, "delete_backward", 2, options=US)

    assert edit.masked_value == "100"
    assert edit.cursor == 3


def test_backspace_over_separator_removes_digit_and_extra_separator() -> None:
    raw, cursor = backspace("1,000,000,000", 10)

    edit = apply_masked_edit(raw, cursor, "delete_backward", 0, options=US)

    assert edit.masked_value == "100,000,000"
    assert edit.numeric_value == "100000000"
    assert edit.cursor == 7


def test_backspace_over_separator_removes_only_digit() -> None:
    raw, cursor = backspace("10,000,000,000", 11)

    edit = apply_masked_edit(raw, cursor, "delete_backward", 0, options=US)

    assert edit.masked_value == "1,000,000,000"
    assert edit.cursor == 9


@pytest.mark.parametrize(
    ("masked", "cursor", "expected_text", "expected_cursor"),
    [
        ("1,000", 2, "000", 0),
        ("12,345", 3, "1,345", 1),
        ("123,456", 4, "12,456", 2),
        ("1,234,567", 2, "234,567", 0),
        ("1,234,567", 6, "123,567", 3),
        ("12,345,678.9", 7, "1,234,678.9", 5),
    ],
)
def test_backspace_over_every_separator_position(
    masked: str, cursor: int, expected_text: str, expected_cursor: int
) -> None:
    raw, raw_cursor = backspace(masked, cursor)

    edit = apply_masked_edit(raw, raw_cursor, "delete_backward", 2, options=US)

    assert edit.masked_value == expected_text
    assert edit.cursor == expected_cursor


def test_backspace_over_separator_comma_locale() -> None:
    raw, cursor = backspace("1.000.000,5", 6)

    edit = apply_masked_edit(raw, cursor, "delete_backward", 2, options=COMMA_DECIMAL)

    assert edit.masked_value == "100.000,5"
    assert edit.cursor == 3


def test_forward_delete_over_separator_is_not_special_cased() -> None:
    # Known boundary: delete-key on a separator only removes the separator,
    # masking puts it straight back and the caret shifts by one.
    edit = apply_masked_edit("1000", 1, "delete_forward", 2, options=US)

    assert edit.masked_value == "1,000"
    assert edit.numeric_value == "1000"
    assert edit.cursor == 2


def test_missing_cursor_parks_at_end() -> None:
    edit = apply_masked_edit("1234", None, "insert", 2, options=US)

    assert edit.cursor == len("1,234")


def test_decimal_fraction_is_truncated_without_moving_past_end() -> None:
    edit = apply_masked_edit("1.239", 5, "insert", 2, options=US)

    assert edit.masked_value == "1.23"
    assert edit.cursor == 4
