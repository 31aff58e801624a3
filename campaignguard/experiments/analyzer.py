import logging
from typing import List

from campaignguard.experiments.guardrails import check_guardrails
from campaignguard.models.experiment import ExperimentInput, as_experiment
from campaignguard.models.experiment_analysis import ExperimentAnalysis, Recommendation

logger = logging.getLogger("campaignguard.experiments.analyzer")

WINNER_CONFIDENCE = 95.0
TRENDING_CONFIDENCE = 90.0


def insufficient_data_analysis() -> ExperimentAnalysis:
    return ExperimentAnalysis(
        has_winner=False,
        confidence=0,
        significance=1,
        recommendation=Recommendation.CONTINUE,
        reasoning=["Insufficient data to analyze"],
        next_actions=["Wait for more data to collect"],
    )


class ExperimentAnalyzer:
    """
    Ranks variants and turns a caller-supplied significance figure into a
    recommendation. No hypothesis test is run here: `significance` on each
    outcome is trusted as given.
    """

    def analyze(self, experiment: ExperimentInput) -> ExperimentAnalysis:
        experiment = as_experiment(experiment)

        if not experiment.outcomes:
            return insufficient_data_analysis()

        # Stable sort: ties keep their original order.
        ranked = sorted(experiment.outcomes, key=lambda o: o.conversion_rate, reverse=True)
        candidate = ranked[0]

        has_significant_winner = candidate.significance <= experiment.design.significance_level
        confidence = (1 - candidate.significance) * 100

        reasoning: List[str] = []
        next_actions: List[str] = []

        if has_significant_winner and confidence >= WINNER_CONFIDENCE:
            recommendation = Recommendation.STOP_WINNER
            sign = "+" if candidate.lift > 0 else ""
            reasoning.append(f"Winner found with {confidence:.1f}% confidence")
            reasoning.append(f"{sign}{candidate.lift:.1f}% lift vs control")
            next_actions.append("Scale the winning variant")
            next_actions.append("Archive losing variants")
        elif TRENDING_CONFIDENCE <= confidence < WINNER_CONFIDENCE:
            recommendation = Recommendation.EXTEND_DURATION
            reasoning.append(f"Trending winner but needs more data ({confidence:.1f}% confidence)")
            next_actions.append("Extend experiment duration by 3-7 days")
            next_actions.append("Monitor for significance threshold")
        else:
            recommendation = Recommendation.CONTINUE
            reasoning.append(f"Insufficient confidence ({confidence:.1f}%)")
            next_actions.append("Continue collecting data")
            next_actions.append("Check sample size requirements")

        breaches = check_guardrails(experiment)
        if breaches:
            recommendation = Recommendation.STOP_LOSER
            reasoning.append("Guardrail violations detected")
            for breach in breaches:
                reasoning.append(f"Variant {breach.variant}: {breach.violation}")
            next_actions.append("Review and adjust targeting or creative")

        logger.debug(
            f"Experiment {experiment.id}: candidate={candidate.variant} "
            f"confidence={confidence:.1f} recommendation={recommendation.value}"
        )

        return ExperimentAnalysis(
            has_winner=has_significant_winner,
            winner_variant=candidate.variant if has_significant_winner else None,
            confidence=confidence,
            significance=candidate.significance,
            recommendation=recommendation,
            reasoning=reasoning,
            next_actions=next_actions,
            guardrail_violations=breaches,
        )


_analyzer_instance = ExperimentAnalyzer()


def analyze_experiment(experiment: ExperimentInput) -> ExperimentAnalysis:
    return _analyzer_instance.analyze(experiment)
