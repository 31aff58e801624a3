from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .experiment import Guardrail


class Recommendation(str, Enum):
    CONTINUE = "continue"
    STOP_WINNER = "stop_winner"
    STOP_LOSER = "stop_loser"
    EXTEND_DURATION = "extend_duration"


@dataclass(frozen=True)
class GuardrailViolation:
    guardrail: Guardrail
    violation: str
    variant: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "guardrail": self.guardrail.to_dict(),
            "violation": self.violation,
            "variant": self.variant,
        }


@dataclass(frozen=True)
class ExperimentAnalysis:
    has_winner: bool
    confidence: float
    significance: float
    recommendation: Recommendation
    reasoning: List[str] = field(default_factory=list)
    next_actions: List[str] = field(default_factory=list)
    winner_variant: Optional[str] = None
    # Breaches behind a stop_loser override; not part of the serialized analysis.
    guardrail_violations: List[GuardrailViolation] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = {
            "hasWinner": self.has_winner,
            "confidence": self.confidence,
            "significance": self.significance,
            "recommendation": self.recommendation.value,
            "reasoning": list(self.reasoning),
            "nextActions": list(self.next_actions),
        }
        if self.winner_variant is not None:
            data["winnerVariant"] = self.winner_variant
        return data
