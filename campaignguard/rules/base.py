from abc import ABC, abstractmethod
from typing import List, Optional

from campaignguard.catalog.models import RuleCatalog
from campaignguard.models.ad_content import AdContent
from campaignguard.models.violation import ComplianceViolation, TextSpan


class TextRule(ABC):
    """
    Base class for rules that scan one text element (headline, body or cta).
    """

    def __init__(self, catalog: RuleCatalog):
        self.catalog = catalog

    @abstractmethod
    def rule_name(self) -> str:
        """Return the rule identifier attached to emitted violations."""
        pass

    @abstractmethod
    def evaluate(
        self, text: str, element: str, platform: str, vertical: str
    ) -> List[ComplianceViolation]:
        pass


class ContentRule(ABC):
    """
    Base class for rules that look at the whole ad payload.
    """

    def __init__(self, catalog: RuleCatalog):
        self.catalog = catalog

    @abstractmethod
    def rule_name(self) -> str:
        pass

    @abstractmethod
    def evaluate(
        self, content: AdContent, platform: str, vertical: str
    ) -> List[ComplianceViolation]:
        pass


def first_occurrence_span(text: str, matched: str) -> Optional[TextSpan]:
    """
    Span of the first occurrence of `matched` in `text`.
    Repeated identical matches all resolve to this first span.
    """
    start = text.find(matched)
    if start < 0:
        return None
    return TextSpan(start=start, end=start + len(matched))
