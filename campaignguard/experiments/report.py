from typing import Any, Dict, List

from campaignguard.experiments.analyzer import analyze_experiment
from campaignguard.models.experiment import Experiment, ExperimentInput, as_experiment


def _total(experiment: Experiment, metric: str) -> float:
    return sum(o.metrics.get(metric, 0) or 0 for o in experiment.outcomes)


def generate_experiment_report(experiment: ExperimentInput) -> Dict[str, Any]:
    experiment = as_experiment(experiment)

    analysis = analyze_experiment(experiment)

    verdict = (
        f"Winner identified: {analysis.winner_variant}"
        if analysis.has_winner
        else "No clear winner yet"
    )
    summary = (
        f'Experiment "{experiment.id}" ran for {experiment.design.duration} days '
        f"with {len(experiment.variants)} variants. {verdict}."
    )

    charts: List[Dict[str, Any]] = [
        {
            "type": "bar",
            "title": "Conversion Rate by Variant",
            "data": [
                {"variant": o.variant, "conversionRate": o.conversion_rate * 100}
                for o in experiment.outcomes
            ],
        },
        {
            "type": "line",
            "title": "CPA Trend",
            "data": [
                {"variant": o.variant, "cpa": o.metrics.get("cpa")}
                for o in experiment.outcomes
            ],
        },
    ]

    return {
        "summary": summary,
        "keyMetrics": {
            "totalImpressions": _total(experiment, "impressions"),
            "totalClicks": _total(experiment, "clicks"),
            "totalConversions": _total(experiment, "conversions"),
            "totalSpend": _total(experiment, "spend"),
            "confidence": analysis.confidence,
            "significance": analysis.significance,
        },
        "recommendations": list(analysis.next_actions),
        "charts": charts,
    }
