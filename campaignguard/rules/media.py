from typing import List

from campaignguard.models.ad_content import AdContent
from campaignguard.models.violation import (
    ComplianceViolation,
    ContentElement,
    ViolationCategory,
    ViolationLocation,
    ViolationSeverity,
)
from campaignguard.rules.base import ContentRule


class MediaContentRule(ContentRule):

    def rule_name(self) -> str:
        return "media_content"

    def evaluate(
        self, content: AdContent, platform: str, vertical: str
    ) -> List[ComplianceViolation]:
        media = content.media
        if media is None:
            return []

        violations: List[ComplianceViolation] = []

        if media.type == "image" and any(
            self.catalog.before_after_tag_pattern.search(tag) for tag in media.tags
        ):
            violations.append(
                ComplianceViolation(
                    id="before_after_image",
                    severity=ViolationSeverity.ERROR,
                    platform=platform,
                    rule="before_after_prohibited",
                    category=ViolationCategory.CONTENT_POLICY,
                    description="Before/after images are prohibited for health and beauty claims",
                    suggestion="Use lifestyle imagery or product shots instead",
                    location=ViolationLocation(element=ContentElement.IMAGE),
                )
            )

        if (
            media.type == "video"
            and media.duration
            and media.duration > self.catalog.max_video_seconds
            and platform == self.catalog.video_length_platform
        ):
            violations.append(
                ComplianceViolation(
                    id="video_length_warning",
                    severity=ViolationSeverity.WARNING,
                    platform=self.catalog.video_length_platform,
                    rule="video_length_optimization",
                    category=ViolationCategory.CONTENT_POLICY,
                    description=(
                        f"Videos longer than {self.catalog.max_video_seconds:g} seconds "
                        "may have reduced reach on Facebook"
                    ),
                    suggestion="Consider creating a shorter version for better performance",
                    location=ViolationLocation(element=ContentElement.VIDEO),
                )
            )

        return violations
