import logging
import re
from typing import Iterable, List, Optional, Tuple

from campaignguard.models.policy_pack import PolicyPack

logger = logging.getLogger("campaignguard.policies")


class PolicyPackNotFoundError(LookupError):
    def __init__(self, pack_id: str):
        self.pack_id = pack_id
        super().__init__(f"Policy pack not found: {pack_id}")


# Keyword family -> vertical whose pack is suggested when the text mentions it.
SUGGESTION_KEYWORDS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"health|medicine|supplement|weight|diet|fitness|beauty|skin"), "health"),
    (re.compile(r"invest|money|profit|return|trading|financial|loan|credit"), "finance"),
    (re.compile(r"job|career|hiring|employment|work|salary|benefits"), "employment"),
    (re.compile(r"home|house|property|real estate|apartment|rent|mortgage"), "real_estate"),
]


class PolicyRegistry:
    """
    Read-only lookup over a fixed set of policy packs.
    """

    def __init__(self, packs: Iterable[PolicyPack]):
        self._packs: Tuple[PolicyPack, ...] = tuple(packs)

    def list_packs(self, vertical: Optional[str] = None, region: Optional[str] = None) -> List[PolicyPack]:
        packs = list(self._packs)
        if vertical:
            packs = [p for p in packs if p.vertical == vertical]
        if region:
            packs = [p for p in packs if p.region == region]
        return packs

    def get(self, pack_id: str) -> PolicyPack:
        for pack in self._packs:
            if pack.id == pack_id:
                return pack
        logger.warning(f"Policy pack lookup missed: {pack_id}")
        raise PolicyPackNotFoundError(pack_id)

    def suggest(self, text: str, region: Optional[str] = None) -> List[PolicyPack]:
        lowered = text.lower()
        suggestions: List[PolicyPack] = []

        for pattern, vertical in SUGGESTION_KEYWORDS:
            if not pattern.search(lowered):
                continue
            pack = next((p for p in self._packs if p.vertical == vertical), None)
            if pack is not None:
                suggestions.append(pack)

        if region:
            return [p for p in suggestions if p.region == region]
        return suggestions


_registry_instance: Optional[PolicyRegistry] = None


def get_registry() -> PolicyRegistry:
    global _registry_instance
    if _registry_instance is None:
        from campaignguard.catalog.loader import get_default_policy_packs
        _registry_instance = PolicyRegistry(get_default_policy_packs())
    return _registry_instance


def get_policy_packs(vertical: Optional[str] = None, region: Optional[str] = None) -> List[PolicyPack]:
    return get_registry().list_packs(vertical, region)


def get_policy_pack(pack_id: str) -> PolicyPack:
    """Raises PolicyPackNotFoundError when the id is not in the catalog."""
    return get_registry().get(pack_id)


def suggest_policy_packs(text: str, region: Optional[str] = None) -> List[PolicyPack]:
    return get_registry().suggest(text, region)
