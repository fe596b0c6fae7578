"""
Compliance Findings
===================
A validation run is a sequence of immutable findings. Rules never raise;
they emit a Finding with a severity that drives the score:

    blocking  -50   document cannot proceed
    critical  -20   arithmetic mismatch / malformed id
    warning    -5   manual review
    info       -1   theoretical value substituted
"""

import itertools
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Union

Number = Union[int, float]


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"
    BLOCKING = "blocking"


SEVERITY_PENALTIES = {
    Severity.BLOCKING: 50,
    Severity.CRITICAL: 20,
    Severity.WARNING: 5,
    Severity.INFO: 1,
}


@dataclass(frozen=True)
class AutoCorrection:
    field: str
    value: Union[str, Number]

    def to_dict(self) -> Dict:
        return {"field": self.field, "value": self.value}


@dataclass(frozen=True)
class Finding:
    id: str
    rule: str
    severity: Severity
    message: str
    detail: str
    region: str
    field: Optional[str] = None
    expected: Optional[Union[str, Number]] = None
    actual: Optional[Union[str, Number]] = None
    legal_basis: Optional[str] = None
    auto_correction: Optional[AutoCorrection] = None

    @property
    def is_blocking(self) -> bool:
        return self.severity == Severity.BLOCKING

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "rule": self.rule,
            "severity": self.severity.value,
            "message": self.message,
            "detail": self.detail,
            "field": self.field,
            "expected": self.expected,
            "actual": self.actual,
            "legal_basis": self.legal_basis,
            "auto_correction": self.auto_correction.to_dict() if self.auto_correction else None,
            "region": self.region,
        }


class FindingFactory:
    """Issues sequential ZOD-<n> ids. Share one per validation pipeline."""

    def __init__(self, prefix="ZOD"):
        self.prefix = prefix
        self._counter = itertools.count(1)

    def create(self, rule, severity, message, detail, region, **kwargs) -> Finding:
        return Finding(
            id=f"{self.prefix}-{next(self._counter)}",
            rule=rule,
            severity=Severity(severity),
            message=message,
            detail=detail,
            region=str(getattr(region, "value", region)),
            **kwargs,
        )


def calculate_score(findings: Iterable[Finding]) -> int:
    """100 minus the severity penalties, never below 0."""
    score = 100
    for f in findings:
        score -= SEVERITY_PENALTIES[f.severity]
    return max(0, score)


def count_by_severity(findings: Iterable[Finding]) -> Dict[str, int]:
    counts = {s.value: 0 for s in Severity}
    for f in findings:
        counts[f.severity.value] += 1
    return counts
