from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class PolicyRule:
    platform: str
    rule: str
    severity: str  # error | warning


@dataclass(frozen=True)
class PolicyExamples:
    compliant: Tuple[str, ...] = ()
    violations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PolicyPack:
    """
    Named bundle of prohibited claims, required disclosures and platform
    rules for one (vertical, region) pair. Loaded once, never mutated.
    """
    id: str
    name: str
    vertical: str
    region: str
    description: str
    last_updated: date
    rules: Tuple[PolicyRule, ...]
    prohibited_claims: Tuple[str, ...]
    required_disclosures: Tuple[str, ...]
    examples: PolicyExamples

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PolicyPack":
        examples = data.get("examples", {})
        return cls(
            id=data["id"],
            name=data["name"],
            vertical=data["vertical"],
            region=data["region"],
            description=data.get("description", ""),
            last_updated=date.fromisoformat(data["lastUpdated"]),
            rules=tuple(PolicyRule(**r) for r in data.get("rules", [])),
            prohibited_claims=tuple(data.get("prohibitedClaims", [])),
            required_disclosures=tuple(data.get("requiredDisclosures", [])),
            examples=PolicyExamples(
                compliant=tuple(examples.get("compliant", [])),
                violations=tuple(examples.get("violations", [])),
            ),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "vertical": self.vertical,
            "region": self.region,
            "description": self.description,
            "lastUpdated": self.last_updated.isoformat(),
            "rules": [
                {"platform": r.platform, "rule": r.rule, "severity": r.severity}
                for r in self.rules
            ],
            "prohibitedClaims": list(self.prohibited_claims),
            "requiredDisclosures": list(self.required_disclosures),
            "examples": {
                "compliant": list(self.examples.compliant),
                "violations": list(self.examples.violations),
            },
        }
