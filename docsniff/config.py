"""Rule-set configuration loaded from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .rules import AVAILABLE_RULES
from .severity import Severity
from .utils import read_yaml_file

logger = logging.getLogger(__name__)

DEFAULT_RULESET = ".docsniff.yaml"


class ConfigError(ValueError):
    """Raised when a rule-set file cannot be interpreted."""


@dataclass
class RuleSetConfig:
    """Which rules run, how their codes are graded and which codes are dropped."""

    rules: List[str] = field(default_factory=lambda: list(AVAILABLE_RULES))
    severity: Dict[str, Severity] = field(default_factory=dict)
    exclude: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RuleSetConfig":
        if not isinstance(data, dict):
            raise ConfigError("Rule set must be a mapping")

        rules = data.get("rules")
        if rules is None:
            rules = list(AVAILABLE_RULES)
        elif isinstance(rules, str):
            rules = [rules]
        elif not isinstance(rules, (list, tuple)) or not all(isinstance(name, str) for name in rules):
            raise ConfigError("'rules' must be a list of rule names")
        unknown = [name for name in rules if name not in AVAILABLE_RULES]
        if unknown:
            raise ConfigError(f"Unknown rule(s): {', '.join(map(str, unknown))}")

        levels = data.get("severity") or {}
        if not isinstance(levels, dict):
            raise ConfigError("'severity' must map violation codes to levels")
        severity: Dict[str, Severity] = {}
        for code, level in levels.items():
            try:
                severity[str(code)] = Severity(str(level).upper())
            except ValueError as exc:
                raise ConfigError(f"Invalid severity {level!r} for {code}") from exc

        exclude = data.get("exclude") or []
        if isinstance(exclude, str):
            exclude = [exclude]
        elif not isinstance(exclude, (list, tuple)) or not all(isinstance(code, str) for code in exclude):
            raise ConfigError("'exclude' must be a list of violation codes")

        return cls(rules=list(rules), severity=severity, exclude=list(exclude))


def load_ruleset(path: Path) -> RuleSetConfig:
    """Load a rule set, falling back to every rule when the file is absent."""

    try:
        data = read_yaml_file(path)
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to parse rule set {path}: {exc}") from exc
    if data is None:
        logger.debug("No rule set at %s, running all rules", path)
        return RuleSetConfig()
    return RuleSetConfig.from_dict(data)
