"""Masking engine: separators, numeric text, caret placement and field sync."""

from .caret import (
    adjust_cursor_position,
    apply_masked_edit,
    count_separators_before,
    remove_char_at,
)
from .controller import InputController, InputHooks
from .formatting import (
    COMMA_DECIMAL,
    PERIOD_DECIMAL,
    FormattingOptions,
    configure_formatting,
    formatting_options,
    options_for_decimal_separator,
)
from .state import EditKind, InputState, MaskedEdit
from .text import (
    NumericContractError,
    convert_scale,
    format_scaled_value,
    mask,
    normalize_keyboard_quirk,
    parse_scaled_value,
    to_numeric_string,
    unmask,
)

__all__ = [
    "COMMA_DECIMAL",
    "PERIOD_DECIMAL",
    "EditKind",
    "FormattingOptions",
    "InputController",
    "InputHooks",
    "InputState",
    "MaskedEdit",
    "NumericContractError",
    "adjust_cursor_position",
    "apply_masked_edit",
    "configure_formatting",
    "convert_scale",
    "count_separators_before",
    "format_scaled_value",
    "formatting_options",
    "mask",
    "normalize_keyboard_quirk",
    "options_for_decimal_separator",
    "parse_scaled_value",
    "remove_char_at",
    "to_numeric_string",
    "unmask",
]
