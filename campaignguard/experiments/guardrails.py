import logging
from numbers import Number
from typing import List, Optional

from campaignguard.models.experiment import (
    ExperimentInput,
    ExperimentOutcome,
    Guardrail,
    GuardrailOperator,
    as_experiment,
)
from campaignguard.models.experiment_analysis import GuardrailViolation

logger = logging.getLogger("campaignguard.experiments.guardrails")


def _fmt(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_number(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def evaluate_guardrail(guardrail: Guardrail, outcome: ExperimentOutcome) -> Optional[str]:
    """
    Returns a violation message, or None when the guardrail holds or cannot
    be evaluated (metric missing, value of the wrong shape).
    """
    value = outcome.metric(guardrail.metric)
    if value is None:
        return None

    metric = guardrail.metric
    threshold = guardrail.value

    if guardrail.operator == GuardrailOperator.GREATER_THAN:
        if _is_number(threshold) and value <= threshold:
            return f"{metric} ({_fmt(value)}) is not greater than {_fmt(threshold)}"

    elif guardrail.operator == GuardrailOperator.LESS_THAN:
        if _is_number(threshold) and value >= threshold:
            return f"{metric} ({_fmt(value)}) is not less than {_fmt(threshold)}"

    elif guardrail.operator == GuardrailOperator.BETWEEN:
        if isinstance(threshold, (tuple, list)) and len(threshold) == 2:
            low, high = threshold
            if value < low or value > high:
                return f"{metric} ({_fmt(value)}) is not between {_fmt(low)} and {_fmt(high)}"

    return None


def check_guardrails(experiment: ExperimentInput) -> List[GuardrailViolation]:
    """
    Evaluates every (guardrail, outcome) pair, guardrail-major order.
    """
    experiment = as_experiment(experiment)
    violations: List[GuardrailViolation] = []

    for guardrail in experiment.guardrails:
        for outcome in experiment.outcomes:
            message = evaluate_guardrail(guardrail, outcome)
            if message is not None:
                violations.append(
                    GuardrailViolation(
                        guardrail=guardrail,
                        violation=message,
                        variant=outcome.variant,
                    )
                )

    if violations:
        logger.info(f"Experiment {experiment.id}: {len(violations)} guardrail breach(es)")
    return violations
