from typing import List

from campaignguard.models.ad_content import AdContent
from campaignguard.models.violation import (
    ComplianceViolation,
    RegulationRef,
    RegulationType,
    ViolationCategory,
    ViolationSeverity,
)
from campaignguard.rules.base import ContentRule


class RequiredDisclosureRule(ContentRule):
    """
    Every disclosure required for the vertical must appear somewhere in
    headline, body or cta (case-insensitive substring). Unknown verticals
    require nothing.
    """

    def rule_name(self) -> str:
        return "required_disclosures"

    def evaluate(
        self, content: AdContent, platform: str, vertical: str
    ) -> List[ComplianceViolation]:
        violations: List[ComplianceViolation] = []

        full_text = " ".join(text for _, text in content.text_elements()).lower()
        is_health = vertical == "health"

        for index, disclosure in enumerate(self.catalog.disclosures_for(vertical)):
            if disclosure.lower() in full_text:
                continue

            violations.append(
                ComplianceViolation(
                    id=f"missing_disclosure_{vertical}_{index}",
                    severity=ViolationSeverity.ERROR if is_health else ViolationSeverity.WARNING,
                    platform="all",
                    rule=self.rule_name(),
                    category=ViolationCategory.REQUIRED_DISCLOSURES,
                    description=f'Missing required disclosure: "{disclosure}"',
                    suggestion=f'Add this disclosure: "{disclosure}"',
                    regulation=RegulationRef(
                        type=RegulationType.FDA if is_health else RegulationType.FTC,
                        reference=f"{vertical.upper()} compliance requirements",
                    ),
                )
            )

        return violations
