import logging
from typing import List

from campaignguard.models.violation import (
    ComplianceViolation,
    ContentElement,
    RegulationRef,
    RegulationType,
    ViolationCategory,
    ViolationLocation,
    ViolationSeverity,
)
from campaignguard.rules.base import TextRule, first_occurrence_span

logger = logging.getLogger("campaignguard.rules.prohibited_claims")

DEFAULT_SUGGESTION = "Remove or rephrase this claim with substantiated language"


class ProhibitedClaimsRule(TextRule):
    """
    Flags claims that platforms or regulators prohibit outright.

    The active pattern list is the platform's own list followed by the
    baseline (meta) list, which applies to every platform.
    """

    def rule_name(self) -> str:
        return "prohibited_claims"

    def evaluate(
        self, text: str, element: str, platform: str, vertical: str
    ) -> List[ComplianceViolation]:
        violations: List[ComplianceViolation] = []

        for index, pattern in enumerate(self.catalog.claim_patterns_for(platform)):
            for match in pattern.finditer(text):
                matched = match.group(0)
                violations.append(
                    ComplianceViolation(
                        id=f"prohibited_{element}_{index}_{match.start()}",
                        severity=self.severity_for(matched, vertical),
                        platform=platform,
                        rule=self.rule_name(),
                        category=ViolationCategory.PROHIBITED_CLAIMS,
                        description=f'Prohibited claim detected: "{matched}"',
                        suggestion=self.suggestion_for(matched),
                        location=ViolationLocation(
                            element=ContentElement(element),
                            position=first_occurrence_span(text, matched),
                        ),
                        regulation=self.regulation_for(matched, vertical),
                    )
                )

        if violations:
            logger.debug(f"{len(violations)} prohibited claim(s) in {element}")
        return violations

    def severity_for(self, matched: str, vertical: str) -> ViolationSeverity:
        lowered = matched.lower()
        escalations = self.catalog.vertical_escalations.get(vertical, ())
        if any(term in lowered for term in escalations):
            return ViolationSeverity.ERROR
        if any(term in lowered for term in self.catalog.always_error_terms):
            return ViolationSeverity.ERROR
        return ViolationSeverity.WARNING

    def suggestion_for(self, matched: str) -> str:
        hit = self.catalog.safe_rewrite_for(matched)
        if hit:
            return f'Consider using: "{hit[1]}"'
        return DEFAULT_SUGGESTION

    @staticmethod
    def regulation_for(matched: str, vertical: str) -> RegulationRef:
        lowered = matched.lower()

        if "fda" in lowered or vertical == "health":
            return RegulationRef(RegulationType.FDA, "21 CFR 101.93 - Health Claims")

        if "earn" in lowered or "make money" in lowered:
            return RegulationRef(RegulationType.FTC, "FTC Act Section 5 - Deceptive Practices")

        return RegulationRef(RegulationType.FTC, "FTC Truth in Advertising Guidelines")
