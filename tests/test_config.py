import pytest

from docsniff.config import ConfigError, RuleSetConfig, load_ruleset
from docsniff.severity import Severity


def test_missing_ruleset_runs_every_rule(tmp_path):
    config = load_ruleset(tmp_path / "absent.yaml")

    assert config.rules == ["Commenting.ClassComment", "Commenting.FunctionComment"]
    assert config.severity == {}
    assert config.exclude == []


def test_ruleset_selects_rules_and_severities(tmp_path):
    ruleset = tmp_path / "ruleset.yaml"
    ruleset.write_text(
        """
rules:
  - Commenting.FunctionComment
severity:
  MissingFunctionComment: warning
exclude: MissingClassComment
        """.strip(),
        encoding="utf-8",
    )

    config = load_ruleset(ruleset)

    assert config.rules == ["Commenting.FunctionComment"]
    assert config.severity == {"MissingFunctionComment": Severity.WARNING}
    assert config.exclude == ["MissingClassComment"]


def test_unknown_rule_is_rejected():
    with pytest.raises(ConfigError, match="Unknown rule"):
        RuleSetConfig.from_dict({"rules": ["Commenting.FileComment"]})


def test_invalid_severity_is_rejected():
    with pytest.raises(ConfigError, match="Invalid severity"):
        RuleSetConfig.from_dict({"severity": {"MissingClassComment": "fatal"}})


def test_non_mapping_ruleset_is_rejected(tmp_path):
    ruleset = tmp_path / "ruleset.yaml"
    ruleset.write_text("- Commenting.ClassComment\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_ruleset(ruleset)


def test_unparseable_ruleset_is_rejected(tmp_path):
    ruleset = tmp_path / "ruleset.yaml"
    ruleset.write_text("rules: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_ruleset(ruleset)


@pytest.mark.parametrize(
    "data, message",
    [
        ({"severity": ["MissingClassComment"]}, "'severity' must map"),
        ({"rules": [{"Commenting.ClassComment": "on"}]}, "'rules' must be a list"),
        ({"exclude": 5}, "'exclude' must be a list"),
        ({"exclude": [["MissingClassComment"]]}, "'exclude' must be a list"),
    ],
)
def test_misshapen_fields_are_rejected(data, message):
    with pytest.raises(ConfigError, match=message):
        RuleSetConfig.from_dict(data)


def test_directory_ruleset_runs_every_rule(tmp_path):
    config = load_ruleset(tmp_path)

    assert config.rules == ["Commenting.ClassComment", "Commenting.FunctionComment"]


def test_undecodable_ruleset_is_rejected(tmp_path):
    ruleset = tmp_path / "ruleset.yaml"
    ruleset.write_bytes(b"rules: \xff\xfe\n")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_ruleset(ruleset)
