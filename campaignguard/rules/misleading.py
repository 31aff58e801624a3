from typing import List

from campaignguard.models.violation import (
    ComplianceViolation,
    ContentElement,
    ViolationCategory,
    ViolationLocation,
    ViolationSeverity,
)
from campaignguard.rules.base import TextRule, first_occurrence_span


class MisleadingLanguageRule(TextRule):

    def rule_name(self) -> str:
        return "misleading_content"

    def evaluate(
        self, text: str, element: str, platform: str, vertical: str
    ) -> List[ComplianceViolation]:
        violations: List[ComplianceViolation] = []

        for index, item in enumerate(self.catalog.misleading_patterns):
            for match in item.pattern.finditer(text):
                violations.append(
                    ComplianceViolation(
                        id=f"misleading_{element}_{index}_{match.start()}",
                        severity=ViolationSeverity.WARNING,
                        platform=platform,
                        rule=self.rule_name(),
                        category=ViolationCategory.MISLEADING,
                        description=item.description,
                        suggestion="Provide specific evidence or remove the claim",
                        location=ViolationLocation(
                            element=ContentElement(element),
                            position=first_occurrence_span(text, match.group(0)),
                        ),
                    )
                )

        return violations
