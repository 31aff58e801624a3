from typing import List

from campaignguard.models.violation import (
    ComplianceViolation,
    ViolationCategory,
    ViolationSeverity,
)


def build_recommendations(
    violations: List[ComplianceViolation], vertical: str, platform: str
) -> List[str]:
    """
    Ordered advisory strings. The order of the checks below is part of the contract.
    """
    recommendations: List[str] = []

    error_count = sum(1 for v in violations if v.severity == ViolationSeverity.ERROR)
    warning_count = sum(1 for v in violations if v.severity == ViolationSeverity.WARNING)

    if error_count > 0:
        recommendations.append("Address all error-level violations before publishing")
        recommendations.append("Consider using the suggested safe rewrites")

    if warning_count > 0:
        recommendations.append("Review warning-level issues for potential improvements")

    if vertical == "health":
        recommendations.append("Ensure all health claims are substantiated with scientific evidence")
        recommendations.append("Include appropriate FDA disclaimers")

    if platform in ("meta", "all"):
        recommendations.append("Review Facebook Advertising Policies for latest updates")

    if any(v.category == ViolationCategory.TRADEMARK for v in violations):
        recommendations.append("Verify trademark usage rights before publishing")

    if not recommendations:
        recommendations.append("Content appears compliant with current policies")
        recommendations.append("Continue monitoring for policy updates")

    return recommendations
