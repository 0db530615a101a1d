"""Token model shared by the scanner, the rules and the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class TokenKind(Enum):
    """Enumerate the token kinds the engine can tell apart."""

    # Declarations
    CLASS = "class"
    INTERFACE = "interface"
    TRAIT = "trait"
    ENUM = "enum"
    FUNCTION = "function"

    # Modifiers
    ABSTRACT = "abstract"
    FINAL = "final"
    READONLY = "readonly"
    STATIC = "static"
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    # Structure
    WHITESPACE = "whitespace"
    ATTRIBUTE = "attribute"  # #[
    ATTRIBUTE_END = "attribute_end"  # ]
    DOC_COMMENT_OPEN_TAG = "doc_comment_open_tag"
    DOC_COMMENT_STRING = "doc_comment_string"
    DOC_COMMENT_TAG = "doc_comment_tag"
    DOC_COMMENT_CLOSE_TAG = "doc_comment_close_tag"
    COMMENT = "comment"

    # Everything else
    OPEN_TAG = "open_tag"
    NAMESPACE = "namespace"
    USE = "use"
    STRING = "string"
    CONSTANT_ENCAPSED_STRING = "constant_encapsed_string"
    VARIABLE = "variable"
    LNUMBER = "lnumber"
    OPEN_PARENTHESIS = "open_parenthesis"
    CLOSE_PARENTHESIS = "close_parenthesis"
    OPEN_CURLY_BRACKET = "open_curly_bracket"
    CLOSE_CURLY_BRACKET = "close_curly_bracket"
    COMMA = "comma"
    SEMICOLON = "semicolon"
    EQUAL = "equal"
    RETURN = "return"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> "TokenKind":
        """Resolve ``T_CLASS``, ``CLASS`` or ``class`` to a kind.

        Names the engine does not know map to ``OTHER`` rather than failing,
        since host tokenizers emit far more kinds than the rules care about.
        """

        normalized = str(name).strip().lower()
        if normalized.startswith("t_"):
            normalized = normalized[2:]
        try:
            return cls(normalized)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Token:
    """A single token of one tokenized source file."""

    kind: TokenKind
    position: int
    text: str = ""
    line: Optional[int] = None


TokenStream = Sequence[Token]


def build_stream(kinds: Sequence[TokenKind]) -> list[Token]:
    """Build a token stream from bare kinds, numbering positions in order."""

    return [Token(kind=kind, position=index) for index, kind in enumerate(kinds)]
