from dataclasses import dataclass, field
from typing import List

from campaignguard.models.compliance_result import ComplianceResult
from campaignguard.models.violation import ViolationSeverity

# Verticals where any warning already needs a human sign-off.
STRICT_REVIEW_VERTICALS = {"health"}


@dataclass(frozen=True)
class PublishValidation:
    can_publish: bool
    blockers: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "canPublish": self.can_publish,
            "blockers": list(self.blockers),
            "warnings": list(self.warnings),
        }


def is_approval_required(error_count: int, warning_count: int, vertical: str) -> bool:
    if error_count > 0:
        return True
    return vertical in STRICT_REVIEW_VERTICALS and warning_count > 0


def validate_before_publish(result: ComplianceResult) -> PublishValidation:
    """
    Splits a lint result into publish blockers (errors) and review items (warnings).
    """
    blockers: List[str] = []
    warnings: List[str] = []

    for v in result.violations:
        line = f"{v.category.value}: {v.description}"
        if v.is_blocking:
            blockers.append(line)
        elif v.severity == ViolationSeverity.WARNING:
            warnings.append(line)

    return PublishValidation(can_publish=not blockers, blockers=blockers, warnings=warnings)
