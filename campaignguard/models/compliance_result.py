from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .violation import ComplianceViolation, ViolationSeverity


class ComplianceOutcome(str, Enum):
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


@dataclass(frozen=True)
class SafeRewrite:
    original: str
    rewritten: str
    explanation: str

    def to_dict(self) -> dict:
        return {
            "original": self.original,
            "rewritten": self.rewritten,
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class ComplianceResult:
    """
    Outcome of a single lint call.
    Violations are kept in detection order: headline, body, cta, disclosures, media.
    """
    overall: ComplianceOutcome
    score: int
    violations: List[ComplianceViolation] = field(default_factory=list)
    safe_rewrites: List[SafeRewrite] = field(default_factory=list)
    approval_required: bool = False
    recommendations: List[str] = field(default_factory=list)

    def count(self, severity: ViolationSeverity) -> int:
        return sum(1 for v in self.violations if v.severity == severity)

    @property
    def error_count(self) -> int:
        return self.count(ViolationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self.count(ViolationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self.count(ViolationSeverity.INFO)

    def to_dict(self) -> dict:
        return {
            "overall": self.overall.value,
            "score": self.score,
            "violations": [v.to_dict() for v in self.violations],
            "safeRewrites": [r.to_dict() for r in self.safe_rewrites],
            "approvalRequired": self.approval_required,
            "recommendations": list(self.recommendations),
        }
