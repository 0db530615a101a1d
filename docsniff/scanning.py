"""Backward scan from a declaration to the nearest significant token."""

from __future__ import annotations

from .skipset import SkipSet
from .tokens import TokenKind, TokenStream

START_OF_STREAM = -1


def find_attribute_opener(tokens: TokenStream, end_index: int) -> int:
    """Return the index of the ``ATTRIBUTE`` opening the block ending at ``end_index``.

    Nested blocks are matched by depth. ``START_OF_STREAM`` is returned when
    the block is never opened.
    """

    if end_index < 0 or end_index >= len(tokens):
        return START_OF_STREAM
    depth = 0
    for index in range(end_index, -1, -1):
        kind = tokens[index].kind
        if kind is TokenKind.ATTRIBUTE_END:
            depth += 1
        elif kind is TokenKind.ATTRIBUTE:
            depth -= 1
            if depth == 0:
                return index
    return START_OF_STREAM


def find_preceding_significant_token(tokens: TokenStream, start_index: int, skip_set: SkipSet) -> int:
    """Walk backwards from ``start_index`` past insignificant tokens.

    Attribute blocks are stepped over in one jump, so nothing inside them can
    stop the scan. Returns the index of the first significant token, or
    ``START_OF_STREAM`` when the beginning of the stream is reached or
    ``start_index`` does not point into the stream.
    """

    if start_index <= 0 or start_index > len(tokens):
        return START_OF_STREAM

    cursor = start_index - 1
    while cursor >= 0:
        kind = tokens[cursor].kind
        if kind is TokenKind.ATTRIBUTE_END:
            opener = find_attribute_opener(tokens, cursor)
            if opener == START_OF_STREAM:
                return START_OF_STREAM
            cursor = opener - 1
        elif skip_set.is_insignificant(kind):
            cursor -= 1
        else:
            return cursor
    return START_OF_STREAM
