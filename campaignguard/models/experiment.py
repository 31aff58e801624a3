from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


class GuardrailOperator(str, Enum):
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    BETWEEN = "between"


class GuardrailAction(str, Enum):
    PAUSE = "pause"
    ALERT = "alert"
    PROMOTE = "promote"


@dataclass(frozen=True)
class Guardrail:
    metric: str
    operator: GuardrailOperator
    value: Union[float, Tuple[float, float]]
    action: GuardrailAction

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Guardrail":
        value = data["value"]
        if isinstance(value, list):
            value = tuple(value)
        return cls(
            metric=data["metric"],
            operator=GuardrailOperator(data["operator"]),
            value=value,
            action=GuardrailAction(data["action"]),
        )

    def to_dict(self) -> dict:
        value = list(self.value) if isinstance(self.value, tuple) else self.value
        return {
            "metric": self.metric,
            "operator": self.operator.value,
            "value": value,
            "action": self.action.value,
        }


@dataclass(frozen=True)
class ExperimentDesign:
    type: str = "creative_ab"  # creative_ab | geo_holdout | angle_test
    min_sample_size: int = 0
    power: float = 0.8
    significance_level: float = 0.05
    duration: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperimentDesign":
        return cls(
            type=data.get("type", "creative_ab"),
            min_sample_size=data.get("minSampleSize", 0),
            power=data.get("power", 0.8),
            significance_level=data.get("significanceLevel", 0.05),
            duration=data.get("duration", 0),
        )


@dataclass(frozen=True)
class ExperimentOutcome:
    variant: str
    metrics: Dict[str, float]
    significance: float
    lift: float
    # Informative only; the analyzer forms its own judgment.
    decision: str = "continue"

    def metric(self, name: str) -> Optional[float]:
        return self.metrics.get(name)

    @property
    def conversion_rate(self) -> float:
        clicks = self.metrics.get("clicks", 0)
        return self.metrics.get("conversions", 0) / max(clicks, 1)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperimentOutcome":
        return cls(
            variant=data["variant"],
            metrics=dict(data.get("metrics", {})),
            significance=data.get("significance", 1.0),
            lift=data.get("lift", 0.0),
            decision=data.get("decision", "continue"),
        )


@dataclass(frozen=True)
class Experiment:
    id: str
    design: ExperimentDesign
    outcomes: List[ExperimentOutcome] = field(default_factory=list)
    guardrails: List[Guardrail] = field(default_factory=list)
    variants: List[Any] = field(default_factory=list)
    budgets: List[Dict[str, Any]] = field(default_factory=list)
    project_id: Optional[str] = None
    status: str = "draft"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Experiment":
        return cls(
            id=data.get("id", ""),
            design=ExperimentDesign.from_dict(data.get("design", {})),
            outcomes=[ExperimentOutcome.from_dict(o) for o in data.get("outcomes", [])],
            guardrails=[Guardrail.from_dict(g) for g in data.get("guardrails", [])],
            variants=list(data.get("variants", [])),
            budgets=list(data.get("budgets", [])),
            project_id=data.get("projectId"),
            status=data.get("status", "draft"),
        )


ExperimentInput = Union[Experiment, Dict[str, Any]]


def as_experiment(experiment: ExperimentInput) -> Experiment:
    """Accepts an Experiment or its camelCase dict form."""
    if isinstance(experiment, Experiment):
        return experiment
    return Experiment.from_dict(experiment)
