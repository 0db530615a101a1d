"""Require a doc comment on classes, interfaces, traits and enums."""

from __future__ import annotations

from docsniff.skipset import SkipSet
from docsniff.tokens import TokenKind

from . import Rule
from .base import DocCommentRule


class ClassCommentRule(DocCommentRule):
    """Flag class-like declarations without a preceding doc comment.

    Visibility keywords are not valid on type declarations, so they are not
    skipped: a stray ``public`` before ``class`` ends the scan.
    """

    name = "Commenting.ClassComment"
    TARGETS = frozenset({TokenKind.CLASS, TokenKind.INTERFACE, TokenKind.TRAIT, TokenKind.ENUM})
    SKIP_SET = SkipSet.of(TokenKind.READONLY, TokenKind.ABSTRACT, TokenKind.FINAL)
    CODE = "MissingClassComment"
    MESSAGE = "Missing class doc comment."


def get_rule() -> Rule:
    return ClassCommentRule()
