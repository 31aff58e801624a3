from typing import List

from campaignguard.models.violation import (
    ComplianceViolation,
    ContentElement,
    ViolationCategory,
    ViolationLocation,
    ViolationSeverity,
)
from campaignguard.rules.base import TextRule, first_occurrence_span


class TrademarkRule(TextRule):
    """Whole-word, case-insensitive mentions of well-known brand names."""

    def rule_name(self) -> str:
        return "trademark_usage"

    def evaluate(
        self, text: str, element: str, platform: str, vertical: str
    ) -> List[ComplianceViolation]:
        violations: List[ComplianceViolation] = []

        for index, (_name, pattern) in enumerate(self.catalog.trademarks):
            for match in pattern.finditer(text):
                matched = match.group(0)
                violations.append(
                    ComplianceViolation(
                        id=f"trademark_{element}_{index}_{match.start()}",
                        severity=ViolationSeverity.INFO,
                        platform="all",
                        rule=self.rule_name(),
                        category=ViolationCategory.TRADEMARK,
                        description=f'Potential trademark usage: "{matched}"',
                        suggestion="Verify trademark usage rights or use generic terms",
                        location=ViolationLocation(
                            element=ContentElement(element),
                            position=first_occurrence_span(text, matched),
                        ),
                    )
                )

        return violations
