import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Pattern, Tuple


class CatalogError(ValueError):
    """Raised when a rule snapshot is structurally invalid."""


@dataclass(frozen=True)
class MisleadingPattern:
    pattern: Pattern
    description: str


@dataclass(frozen=True)
class RuleCatalog:
    """
    Compiled, read-only view of a rule snapshot.
    Every regex is compiled once with re.IGNORECASE.
    """
    snapshot_version: str
    baseline_platform: str
    prohibited_claims: Mapping[str, Tuple[Pattern, ...]]
    vertical_escalations: Mapping[str, Tuple[str, ...]]
    always_error_terms: Tuple[str, ...]
    misleading_patterns: Tuple[MisleadingPattern, ...]
    trademarks: Tuple[Tuple[str, Pattern], ...]
    required_disclosures: Mapping[str, Tuple[str, ...]]
    safe_rewrites: Tuple[Tuple[str, str], ...]
    before_after_tag_pattern: Pattern
    max_video_seconds: float
    video_length_platform: str

    def claim_patterns_for(self, platform: str) -> List[Pattern]:
        """
        Platform list followed by the baseline list. The baseline always
        applies; it is not repeated when it is the platform's own list.
        """
        own = self.prohibited_claims.get(platform, ())
        baseline = self.prohibited_claims.get(self.baseline_platform, ())
        if platform == self.baseline_platform:
            return list(baseline)
        return list(own) + list(baseline)

    def disclosures_for(self, vertical: str) -> Tuple[str, ...]:
        return self.required_disclosures.get(vertical, ())

    def safe_rewrite_for(self, text: str):
        """First (phrase, replacement) pair whose phrase occurs in text, else None."""
        lowered = text.lower()
        for phrase, replacement in self.safe_rewrites:
            if phrase.lower() in lowered:
                return phrase, replacement
        return None

    @classmethod
    def from_dict(cls, snapshot: Dict[str, Any]) -> "RuleCatalog":
        if "snapshot_version" not in snapshot:
            raise CatalogError("Invalid snapshot: missing snapshot_version")

        baseline = snapshot.get("baseline_platform", "meta")
        claims = snapshot.get("prohibited_claims", {})
        if baseline not in claims:
            raise CatalogError(f"Invalid snapshot: no pattern list for baseline platform '{baseline}'")

        try:
            prohibited = {
                platform: tuple(re.compile(src, re.IGNORECASE) for src in sources)
                for platform, sources in claims.items()
            }
            misleading = tuple(
                MisleadingPattern(re.compile(item["pattern"], re.IGNORECASE), item["description"])
                for item in snapshot.get("misleading_patterns", [])
            )
            trademarks = tuple(
                (name, re.compile(rf"\b{re.escape(name)}\b", re.IGNORECASE))
                for name in snapshot.get("trademarks", [])
            )
            media = snapshot.get("media", {})
            before_after = re.compile(
                media.get("before_after_tag_pattern", "before.*after|comparison|transformation"),
                re.IGNORECASE,
            )
        except re.error as e:
            raise CatalogError(f"Invalid snapshot pattern: {e}") from e

        severity = snapshot.get("claim_severity", {})

        return cls(
            snapshot_version=snapshot["snapshot_version"],
            baseline_platform=baseline,
            prohibited_claims=MappingProxyType(prohibited),
            vertical_escalations=MappingProxyType({
                vertical: tuple(t.lower() for t in terms)
                for vertical, terms in severity.get("vertical_escalations", {}).items()
            }),
            always_error_terms=tuple(t.lower() for t in severity.get("always_error_terms", [])),
            misleading_patterns=misleading,
            trademarks=trademarks,
            required_disclosures=MappingProxyType({
                vertical: tuple(items)
                for vertical, items in snapshot.get("required_disclosures", {}).items()
            }),
            safe_rewrites=tuple((pair[0], pair[1]) for pair in snapshot.get("safe_rewrites", [])),
            before_after_tag_pattern=before_after,
            max_video_seconds=media.get("max_video_seconds", 15),
            video_length_platform=media.get("video_length_platform", "meta"),
        )
