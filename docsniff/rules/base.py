"""Shared check for rules requiring a doc comment before a declaration."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, FrozenSet

from docsniff.scanning import START_OF_STREAM, find_preceding_significant_token
from docsniff.skipset import SkipSet
from docsniff.tokens import TokenKind, TokenStream

if TYPE_CHECKING:
    from docsniff.dispatcher import ReportSink


class DocCommentRule:
    """Report declarations whose nearest significant predecessor is not a doc comment.

    Subclasses only declare data: the kinds they target, the kinds to skip
    and the code and message to report. Instances hold no state, so one
    instance serves every file.
    """

    name: ClassVar[str] = ""
    TARGETS: ClassVar[FrozenSet[TokenKind]] = frozenset()
    SKIP_SET: ClassVar[SkipSet] = SkipSet()
    CODE: ClassVar[str] = ""
    MESSAGE: ClassVar[str] = ""

    @property
    def code(self) -> str:
        return self.CODE

    def targets(self) -> FrozenSet[TokenKind]:
        return self.TARGETS

    def has_doc_comment(self, tokens: TokenStream, index: int) -> bool:
        found = find_preceding_significant_token(tokens, index, self.SKIP_SET)
        if found == START_OF_STREAM:
            return False
        return tokens[found].kind is TokenKind.DOC_COMMENT_CLOSE_TAG

    def check(self, tokens: TokenStream, index: int, sink: "ReportSink") -> None:
        if self.has_doc_comment(tokens, index):
            return
        sink.report(index, self.MESSAGE, self.CODE)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
