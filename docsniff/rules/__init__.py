"""Rule registry for docsniff."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, FrozenSet, Protocol, Type

from docsniff.tokens import TokenKind, TokenStream

if TYPE_CHECKING:
    from docsniff.dispatcher import ReportSink


class Rule(Protocol):
    """Protocol implemented by all token rules."""

    name: str
    code: str

    def targets(self) -> FrozenSet[TokenKind]:
        """Return the token kinds this rule wants to be called for."""

    def check(self, tokens: TokenStream, index: int, sink: "ReportSink") -> None:
        """Inspect the token at ``index`` and report violations to ``sink``."""


def _available_rules() -> Dict[str, Type[Rule]]:
    from .class_comment import ClassCommentRule
    from .function_comment import FunctionCommentRule

    return {
        ClassCommentRule.name: ClassCommentRule,
        FunctionCommentRule.name: FunctionCommentRule,
    }


AVAILABLE_RULES: Dict[str, Type[Rule]] = _available_rules()
