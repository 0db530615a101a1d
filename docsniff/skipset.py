"""Sets of token kinds that a backward scan steps over."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator

from .tokens import TokenKind


class SkipSet:
    """Immutable set of kinds treated as insignificant before a declaration.

    Whitespace is always a member. Attribute blocks are not listed here; the
    scanner skips them as whole units.
    """

    __slots__ = ("_kinds",)

    def __init__(self, kinds: Iterable[TokenKind] = ()) -> None:
        self._kinds: FrozenSet[TokenKind] = frozenset(kinds) | {TokenKind.WHITESPACE}

    @classmethod
    def of(cls, *kinds: TokenKind) -> "SkipSet":
        return cls(kinds)

    @property
    def kinds(self) -> FrozenSet[TokenKind]:
        return self._kinds

    def is_insignificant(self, kind: TokenKind) -> bool:
        return kind in self._kinds

    def __contains__(self, kind: object) -> bool:
        return kind in self._kinds

    def __iter__(self) -> Iterator[TokenKind]:
        return iter(self._kinds)

    def __len__(self) -> int:
        return len(self._kinds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SkipSet):
            return NotImplemented
        return self._kinds == other._kinds

    def __hash__(self) -> int:
        return hash(self._kinds)

    def __repr__(self) -> str:
        names = ", ".join(sorted(kind.name for kind in self._kinds))
        return f"SkipSet({names})"
