from dataclasses import dataclass, field
from typing import List

from campaignguard.models.compliance_result import ComplianceResult, SafeRewrite
from campaignguard.models.violation import (
    ComplianceViolation,
    ViolationCategory,
    ViolationSeverity,
)

BASE_REVIEW_MINUTES = 2
MINUTES_PER_ERROR = 3
MINUTES_PER_WARNING = 1
MINUTES_PER_COMPLEX = 2
MAX_REVIEW_MINUTES = 30

# Categories that need a legal or brand check on top of the copy edit.
COMPLEX_CATEGORIES = {
    ViolationCategory.REQUIRED_DISCLOSURES,
    ViolationCategory.TRADEMARK,
}


@dataclass(frozen=True)
class ComplianceSummary:
    overall: str
    score: int
    total_violations: int
    error_count: int
    warning_count: int
    info_count: int


@dataclass(frozen=True)
class ComplianceReport:
    summary: ComplianceSummary
    violations: List[ComplianceViolation]
    recommendations: List[str]
    safe_rewrites: List[SafeRewrite]
    approval_required: bool
    estimated_review_time: int  # minutes
    policy_packs: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "summary": {
                "overall": self.summary.overall,
                "score": self.summary.score,
                "totalViolations": self.summary.total_violations,
                "errorCount": self.summary.error_count,
                "warningCount": self.summary.warning_count,
                "infoCount": self.summary.info_count,
            },
            "violations": [v.to_dict() for v in self.violations],
            "recommendations": list(self.recommendations),
            "safeRewrites": [r.to_dict() for r in self.safe_rewrites],
            "policyPacks": list(self.policy_packs),
            "approvalRequired": self.approval_required,
            "estimatedReviewTime": self.estimated_review_time,
        }


def estimate_review_time(violations: List[ComplianceViolation]) -> int:
    minutes = BASE_REVIEW_MINUTES
    minutes += MINUTES_PER_ERROR * sum(1 for v in violations if v.severity == ViolationSeverity.ERROR)
    minutes += MINUTES_PER_WARNING * sum(1 for v in violations if v.severity == ViolationSeverity.WARNING)
    minutes += MINUTES_PER_COMPLEX * sum(1 for v in violations if v.category in COMPLEX_CATEGORIES)
    return min(minutes, MAX_REVIEW_MINUTES)


def generate_compliance_report(
    result: ComplianceResult, policy_packs: List[str] = None
) -> ComplianceReport:
    return ComplianceReport(
        summary=ComplianceSummary(
            overall=result.overall.value,
            score=result.score,
            total_violations=len(result.violations),
            error_count=result.error_count,
            warning_count=result.warning_count,
            info_count=result.info_count,
        ),
        violations=list(result.violations),
        recommendations=list(result.recommendations),
        safe_rewrites=list(result.safe_rewrites),
        approval_required=result.approval_required,
        estimated_review_time=estimate_review_time(result.violations),
        policy_packs=list(policy_packs or []),
    )
