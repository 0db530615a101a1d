"""Command-line entry point for docsniff."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .config import DEFAULT_RULESET, ConfigError, RuleSetConfig, load_ruleset
from .dispatcher import RuleDispatcher
from .result import ScanResult, format_summary_table
from .rules import AVAILABLE_RULES, Rule
from .utils import TokenDumpError, iter_dump_files, load_token_dump

DEFAULT_SOURCE_DIRS = ("tokens",)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Report declarations that lack a preceding doc comment",
    )
    parser.add_argument(
        "--ruleset",
        default=DEFAULT_RULESET,
        help="YAML rule set selecting rules, severities and excluded codes.",
    )
    parser.add_argument(
        "--source",
        "-s",
        dest="source_paths",
        action="append",
        default=[],
        help="Token dump file or directory of dumps to check (repeatable).",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format for file output (defaults to text).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the report (e.g., artifacts/docsniff.json).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log rule registration and every scanned file.",
    )
    return parser


def load_rules(names: Iterable[str]) -> List[Rule]:
    return [AVAILABLE_RULES[name]() for name in names]


def run_scan(source_paths: Iterable[str], config: RuleSetConfig | None = None) -> ScanResult:
    config = config or RuleSetConfig()
    rules = load_rules(config.rules)
    dispatcher = RuleDispatcher(rules)
    rule_names: Dict[str, str] = {rule.code: rule.name for rule in rules}

    result = ScanResult()
    for path in iter_dump_files(source_paths):
        tokens = load_token_dump(path)
        logger.debug("Scanning %s (%d tokens)", path, len(tokens))
        sink = result.sink_for(
            str(path),
            tokens,
            rule_names=rule_names,
            severities=config.severity,
            excluded=config.exclude,
        )
        dispatcher.run(tokens, sink)
    return result


def write_output(result: ScanResult, output_path: str | None, report_format: str) -> None:
    summary = format_summary_table(result)
    print(summary)

    if report_format == "json":
        payload = json.dumps(result.to_dict(), indent=2)
    else:
        payload = summary
    if output_path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
        print(f"\nReport written to {output_path}")
    elif report_format == "json":
        print("\nJSON Report")
        print(payload)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        config = load_ruleset(Path(args.ruleset))
    except ConfigError as exc:
        raise SystemExit(f"Invalid rule set {args.ruleset}: {exc}") from exc
    sources = args.source_paths or list(DEFAULT_SOURCE_DIRS)
    try:
        result = run_scan(sources, config)
    except TokenDumpError as exc:
        raise SystemExit(f"Invalid token dump: {exc}") from exc
    write_output(result, args.output_path, args.format)
    return result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
