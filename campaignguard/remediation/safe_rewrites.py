"""
Safe-rewrite suggestions for blocking violations.

Advisory only: the original content is never modified, the caller decides
whether to apply a rewrite.
"""
import re
from typing import List

from campaignguard.catalog.models import RuleCatalog
from campaignguard.models.ad_content import AdContent
from campaignguard.models.compliance_result import SafeRewrite
from campaignguard.models.violation import ComplianceViolation, ViolationSeverity


def generate_safe_rewrites(
    violations: List[ComplianceViolation],
    content: AdContent,
    catalog: RuleCatalog,
) -> List[SafeRewrite]:
    rewrites: List[SafeRewrite] = []

    for violation in violations:
        if violation.severity != ViolationSeverity.ERROR:
            continue
        location = violation.location
        if location is None or location.position is None:
            continue

        original_text = content.element_text(location.element.value)
        if not original_text:
            continue

        flagged = original_text[location.position.start:location.position.end]
        hit = catalog.safe_rewrite_for(flagged)
        if hit is None:
            continue

        phrase, replacement = hit
        # The whole element is rewritten, not only the flagged span.
        rewritten = re.sub(re.escape(phrase), replacement, original_text, flags=re.IGNORECASE)
        rewrites.append(
            SafeRewrite(
                original=original_text,
                rewritten=rewritten,
                explanation=(
                    f'Replaced "{phrase}" with "{replacement}" to comply with platform policies'
                ),
            )
        )

    return rewrites
