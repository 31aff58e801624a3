from typing import List

from campaignguard.models.compliance_result import ComplianceOutcome
from campaignguard.models.violation import ComplianceViolation, ViolationSeverity
from campaignguard.scoring.thresholds import ERROR_PENALTY, MAX_SCORE, WARNING_PENALTY


def count_severity(violations: List[ComplianceViolation], severity: ViolationSeverity) -> int:
    return sum(1 for v in violations if v.severity == severity)


def compute_score(error_count: int, warning_count: int) -> int:
    """
    score = max(0, 100 - 20 * errors - 5 * warnings)
    Info-level findings never cost points.
    """
    return max(0, MAX_SCORE - ERROR_PENALTY * error_count - WARNING_PENALTY * warning_count)


def derive_overall(error_count: int, warning_count: int) -> ComplianceOutcome:
    if error_count > 0:
        return ComplianceOutcome.FAIL
    if warning_count > 0:
        return ComplianceOutcome.WARNING
    return ComplianceOutcome.PASS
