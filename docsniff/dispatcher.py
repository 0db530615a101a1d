"""Route tokens to the rules registered for their kind."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Protocol

from .rules import Rule
from .tokens import TokenKind, TokenStream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Violation:
    """A single failed check at one token position."""

    position: int
    message: str
    code: str


class ReportSink(Protocol):
    """Receiver for violations found during a run."""

    def report(self, position: int, message: str, code: str) -> None:
        """Record one violation."""


@dataclass
class ViolationCollector:
    """Sink that keeps every reported violation in order."""

    violations: List[Violation] = field(default_factory=list)

    def report(self, position: int, message: str, code: str) -> None:
        self.violations.append(Violation(position=position, message=message, code=code))

    @property
    def codes(self) -> List[str]:
        return [violation.code for violation in self.violations]


class RuleDispatcher:
    """Call each registered rule for every token of a kind it targets."""

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._registry: Dict[TokenKind, List[Rule]] = {}
        self._rules: List[Rule] = []
        for rule in rules:
            self.register(rule)

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    def rules_for(self, kind: TokenKind) -> List[Rule]:
        return list(self._registry.get(kind, ()))

    def register(self, rule: Rule) -> None:
        self._rules.append(rule)
        for kind in rule.targets():
            self._registry.setdefault(kind, []).append(rule)
        logger.debug("Registered %s for %s", rule.name, sorted(k.name for k in rule.targets()))

    def run(self, tokens: TokenStream, sink: ReportSink) -> None:
        """Visit each token once, in order, invoking the matching rules."""

        for index, token in enumerate(tokens):
            for rule in self._registry.get(token.kind, ()):
                rule.check(tokens, index, sink)
