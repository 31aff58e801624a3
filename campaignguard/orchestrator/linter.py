import logging
from typing import Any, Dict, List, Optional, Union

from campaignguard.catalog.models import RuleCatalog
from campaignguard.decision.gate import is_approval_required
from campaignguard.explainability.recommendations import build_recommendations
from campaignguard.models.ad_content import AdContent
from campaignguard.models.compliance_result import ComplianceResult
from campaignguard.models.violation import ComplianceViolation, ViolationSeverity
from campaignguard.remediation.safe_rewrites import generate_safe_rewrites
from campaignguard.rules.disclosures import RequiredDisclosureRule
from campaignguard.rules.media import MediaContentRule
from campaignguard.rules.misleading import MisleadingLanguageRule
from campaignguard.rules.prohibited_claims import ProhibitedClaimsRule
from campaignguard.rules.trademarks import TrademarkRule
from campaignguard.scoring.score import compute_score, count_severity, derive_overall

ContentInput = Union[AdContent, Dict[str, Any], None]


class ComplianceLinter:
    """
    Scans ad copy and media metadata against a rule catalog.

    Pure function of its inputs and the catalog: no state is kept between
    calls, so one instance can serve concurrent requests.
    """

    def __init__(self, catalog: RuleCatalog):
        self.catalog = catalog
        self.logger = logging.getLogger("campaignguard.linter")
        self._text_rules = [
            ProhibitedClaimsRule(catalog),
            MisleadingLanguageRule(catalog),
            TrademarkRule(catalog),
        ]
        self._disclosure_rule = RequiredDisclosureRule(catalog)
        self._media_rule = MediaContentRule(catalog)

    def check_text(
        self, text: str, element: str, platform: str, vertical: str
    ) -> List[ComplianceViolation]:
        violations: List[ComplianceViolation] = []
        for rule in self._text_rules:
            violations.extend(rule.evaluate(text, element, platform, vertical))
        return violations

    def lint(
        self,
        content: ContentInput,
        platform: str = "all",
        vertical: str = "general",
        region: str = "US",
    ) -> ComplianceResult:
        # region selects policy packs upstream; the text rules do not vary by it.
        ad = content if isinstance(content, AdContent) else AdContent.from_dict(content)

        violations: List[ComplianceViolation] = []

        for element, text in ad.text_elements():
            violations.extend(self.check_text(text, element, platform, vertical))

        violations.extend(self._disclosure_rule.evaluate(ad, platform, vertical))
        violations.extend(self._media_rule.evaluate(ad, platform, vertical))

        error_count = count_severity(violations, ViolationSeverity.ERROR)
        warning_count = count_severity(violations, ViolationSeverity.WARNING)

        self.logger.debug(
            f"Lint finished: platform={platform} vertical={vertical} region={region} "
            f"violations={len(violations)} errors={error_count} warnings={warning_count}"
        )

        return ComplianceResult(
            overall=derive_overall(error_count, warning_count),
            score=compute_score(error_count, warning_count),
            violations=violations,
            safe_rewrites=generate_safe_rewrites(violations, ad, self.catalog),
            approval_required=is_approval_required(error_count, warning_count, vertical),
            recommendations=build_recommendations(violations, vertical, platform),
        )


_linter_instance: Optional[ComplianceLinter] = None


def get_linter() -> ComplianceLinter:
    """
    Lazy loader for the default linter, built over the default catalog on first use.
    """
    global _linter_instance
    if _linter_instance is None:
        from campaignguard.catalog.loader import get_default_catalog
        _linter_instance = ComplianceLinter(get_default_catalog())
    return _linter_instance


def lint_content(
    content: ContentInput,
    platform: str = "all",
    vertical: str = "general",
    region: str = "US",
) -> ComplianceResult:
    return get_linter().lint(content, platform, vertical, region)


def lint_batch(requests: List[Dict[str, Any]]) -> List[ComplianceResult]:
    """Lint several {content, platform, vertical, region} requests in order."""
    return [
        lint_content(
            r.get("content"),
            r.get("platform") or "all",
            r.get("vertical") or "general",
            r.get("region") or "US",
        )
        for r in requests
    ]
