"""Caret placement after masking inserts or removes separator characters."""

from __future__ import annotations

from typing import Optional

from .formatting import FormattingOptions
from .state import EditKind, MaskedEdit
from .text import mask, to_numeric_string


def adjust_cursor_position(before: str, after: str, cursor: int) -> int:
    """Shift ``cursor`` by one when masking grew or shrank the text."""

    if len(after) > len(before):
        cursor += 1
    elif len(after) < len(before):
        cursor -= 1
    return max(cursor, 0)


def count_separators_before(
    masked: str, cursor: int, options: FormattingOptions
) -> int:
    return masked[:cursor].count(options.thousands_separator)


def remove_char_at(text: str, index: int) -> str:
    """Drop the character just before ``index``, as a backspace would."""

    if index <= 0:
        return text
    return text[: index - 1] + text[index:]


def apply_masked_edit(
    raw: str,
    cursor: Optional[int],
    edit_kind: EditKind,
    scale: int,
    *,
    options: FormattingOptions,
) -> MaskedEdit:
    """Mask ``raw`` and place the caret where the user expects it.

    Backspacing over a thousands separator deletes the digit in front of it
    instead: in ``1,000,000,|000`` the ``0`` before the highlighted comma goes.
    Only single-character backward deletion gets this treatment; forward
    deletion and multi-character edits over a separator are masked as-is.
    """

    numeric = to_numeric_string(raw, scale, options=options)
    masked = mask(numeric, options=options)
    if cursor is None:
        # Host has no caret (blurred field); park it at the end.
        cursor = len(masked)

    separator = options.thousands_separator
    if edit_kind == "delete_backward" and masked[cursor : cursor + 1] == separator:
        unmasked_index = cursor - count_separators_before(masked, cursor, options)
        numeric = remove_char_at(numeric, unmasked_index)
        remasked = mask(numeric, options=options)
        # 1,000,000,000 -> 100,000,000 loses a digit and a separator;
        # 10,000,000,000 -> 1,000,000,000 loses only the digit.
        shift = 2 if len(masked) - len(remasked) > 1 else 1
        return MaskedEdit(
            numeric_value=numeric,
            masked_value=remasked,
            cursor=max(cursor - shift, 0),
        )

    return MaskedEdit(
        numeric_value=numeric,
        masked_value=masked,
        cursor=min(adjust_cursor_position(raw, masked, cursor), len(masked)),
    )


__all__ = [
    "adjust_cursor_position",
    "apply_masked_edit",
    "count_separators_before",
    "remove_char_at",
]
