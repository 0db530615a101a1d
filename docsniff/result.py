"""Result data structures collected while scanning token dumps."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .severity import Severity
from .tokens import TokenStream

SEVERITY_ORDER: Sequence[Severity] = (
    Severity.ERROR,
    Severity.WARNING,
)


@dataclass
class Finding:
    """Capture a single violation placed in a file."""

    path: str
    position: int
    line: Optional[int]
    code: str
    message: str
    rule: str
    severity: Severity

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data

    @property
    def location(self) -> str:
        if self.line is not None:
            return f"{self.path}:{self.line}"
        return f"{self.path}@{self.position}"


@dataclass
class Summary:
    """Aggregate finding counts by severity."""

    error: int = 0
    warning: int = 0

    def increment(self, severity: Severity) -> None:
        attr = severity.value.lower()
        setattr(self, attr, getattr(self, attr) + 1)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.value.lower())) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.value.lower()) for severity in SEVERITY_ORDER)


class FileSink:
    """Report sink bound to one file of a ``ScanResult``."""

    def __init__(
        self,
        result: "ScanResult",
        path: str,
        tokens: TokenStream,
        rule_names: Mapping[str, str],
        severities: Mapping[str, Severity],
        excluded: Iterable[str] = (),
    ) -> None:
        self._result = result
        self._path = path
        self._tokens = tokens
        self._rule_names = rule_names
        self._severities = severities
        self._excluded = frozenset(excluded)

    def report(self, position: int, message: str, code: str) -> None:
        if code in self._excluded:
            return
        line = None
        if 0 <= position < len(self._tokens):
            line = self._tokens[position].line
        self._result.add_finding(
            Finding(
                path=self._path,
                position=position,
                line=line,
                code=code,
                message=message,
                rule=self._rule_names.get(code, ""),
                severity=self._severities.get(code, Severity.ERROR),
            )
        )


@dataclass
class ScanResult:
    """Bundle scan summary, findings list and the files that were scanned."""

    summary: Summary = field(default_factory=Summary)
    findings: List[Finding] = field(default_factory=list)
    files: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.summary.error == 0

    def add_finding(self, finding: Finding) -> None:
        self.summary.increment(finding.severity)
        self.findings.append(finding)

    def sink_for(
        self,
        path: str,
        tokens: TokenStream,
        rule_names: Optional[Mapping[str, str]] = None,
        severities: Optional[Mapping[str, Severity]] = None,
        excluded: Iterable[str] = (),
    ) -> FileSink:
        self.files.append(path)
        return FileSink(self, path, tokens, rule_names or {}, severities or {}, excluded)

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary.to_dict(),
            "files": list(self.files),
            "findings": [finding.to_dict() for finding in self.findings],
            "passed": self.passed,
        }

    def exit_code(self) -> int:
        if not self.findings:
            return 0
        return max(finding.severity.exit_priority for finding in self.findings)

    def top_findings(self, limit: int = 10) -> List[Finding]:
        """Return findings ordered by severity, then file and position."""

        severity_rank = {severity: idx for idx, severity in enumerate(SEVERITY_ORDER)}
        ordered = sorted(
            self.findings,
            key=lambda finding: (severity_rank[finding.severity], finding.path, finding.position),
        )
        return ordered[:limit]


def format_summary_table(result: ScanResult, max_findings: int = 10) -> str:
    """Create a human-readable summary table for console output."""

    lines: List[str] = []
    lines.append("Scan Summary")
    lines.append("=" * 40)
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in result.summary.as_rows():
        lines.append(f"{severity:<10} | {count:>5}")
    lines.append("-" * len(header))
    status = "PASS" if result.passed else "FAIL"
    lines.append(f"Status    : {status}")
    lines.append(f"Files     : {len(result.files)}")
    lines.append(f"Findings  : {result.summary.total}")

    findings = result.top_findings(max_findings)
    if findings:
        lines.append("")
        lines.append("Top Findings")
        lines.append("-" * 40)
        for finding in findings:
            lines.append(f"[{finding.severity.value}] {finding.code} {finding.message} ({finding.rule})")
            lines.append(f"  Location: {finding.location}")
    return "\n".join(lines)
