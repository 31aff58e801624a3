from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ViolationSeverity(str, Enum):
    ERROR = "error"      # blocks publishing
    WARNING = "warning"  # requires review
    INFO = "info"        # advisory


class ViolationCategory(str, Enum):
    PROHIBITED_CLAIMS = "prohibited_claims"
    REQUIRED_DISCLOSURES = "required_disclosures"
    CONTENT_POLICY = "content_policy"
    TRADEMARK = "trademark"
    ADULT_CONTENT = "adult_content"
    MISLEADING = "misleading"


class ContentElement(str, Enum):
    HEADLINE = "headline"
    BODY = "body"
    CTA = "cta"
    IMAGE = "image"
    VIDEO = "video"


class RegulationType(str, Enum):
    FDA = "FDA"
    FTC = "FTC"
    GDPR = "GDPR"
    CCPA = "CCPA"
    PLATFORM_POLICY = "Platform Policy"


@dataclass(frozen=True)
class TextSpan:
    start: int
    end: int


@dataclass(frozen=True)
class ViolationLocation:
    element: ContentElement
    position: Optional[TextSpan] = None

    def to_dict(self) -> dict:
        data = {"element": self.element.value}
        if self.position is not None:
            data["position"] = {"start": self.position.start, "end": self.position.end}
        return data


@dataclass(frozen=True)
class RegulationRef:
    type: RegulationType
    reference: str


@dataclass(frozen=True)
class ComplianceViolation:
    id: str
    severity: ViolationSeverity
    # Free-form so that unknown caller platforms are echoed back untouched.
    platform: str
    rule: str
    category: ViolationCategory
    description: str
    suggestion: str
    location: Optional[ViolationLocation] = None
    regulation: Optional[RegulationRef] = None

    @property
    def is_blocking(self) -> bool:
        return self.severity == ViolationSeverity.ERROR

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "severity": self.severity.value,
            "platform": self.platform,
            "rule": self.rule,
            "category": self.category.value,
            "description": self.description,
            "suggestion": self.suggestion,
        }
        if self.location is not None:
            data["location"] = self.location.to_dict()
        if self.regulation is not None:
            data["regulation"] = {
                "type": self.regulation.type.value,
                "reference": self.regulation.reference,
            }
        return data
