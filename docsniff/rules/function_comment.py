"""Require a doc comment on function and method declarations."""

from __future__ import annotations

from docsniff.skipset import SkipSet
from docsniff.tokens import TokenKind

from . import Rule
from .base import DocCommentRule


class FunctionCommentRule(DocCommentRule):
    """Flag functions without a preceding doc comment, whatever their visibility."""

    name = "Commenting.FunctionComment"
    TARGETS = frozenset({TokenKind.FUNCTION})
    SKIP_SET = SkipSet.of(
        TokenKind.PUBLIC,
        TokenKind.PROTECTED,
        TokenKind.PRIVATE,
        TokenKind.STATIC,
        TokenKind.ABSTRACT,
        TokenKind.FINAL,
    )
    CODE = "MissingFunctionComment"
    MESSAGE = "Missing function doc comment."


def get_rule() -> Rule:
    return FunctionCommentRule()
