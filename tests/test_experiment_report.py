import pytest

from campaignguard.experiments.report import generate_experiment_report


def test_report_totals_and_charts():
    experiment = {
        "id": "exp_42",
        "design": {"type": "creative_ab", "duration": 14},
        "variants": ["A", "B"],
        "outcomes": [
            {
                "variant": "A",
                "metrics": {"impressions": 10000, "clicks": 500, "conversions": 25, "spend": 250, "cpa": 10},
                "significance": 0.4,
                "lift": 0,
            },
            {
                "variant": "B",
                "metrics": {"impressions": 10000, "clicks": 500, "conversions": 50, "spend": 260, "cpa": 5.2},
                "significance": 0.01,
                "lift": 100,
            },
        ],
    }

    report = generate_experiment_report(experiment)

    assert report["summary"] == 'Experiment "exp_42" ran for 14 days with 2 variants. Winner identified: B.'
    assert report["keyMetrics"]["totalImpressions"] == 20000
    assert report["keyMetrics"]["totalConversions"] == 75
    assert report["keyMetrics"]["totalSpend"] == 510
    assert report["keyMetrics"]["confidence"] == pytest.approx(99.0)
    assert report["recommendations"] == ["Scale the winning variant", "Archive losing variants"]
    assert report["charts"][0]["data"][1] == {"variant": "B", "conversionRate": pytest.approx(10.0)}
    assert report["charts"][1]["data"][0] == {"variant": "A", "cpa": 10}


def test_report_without_winner():
    report = generate_experiment_report({"id": "exp_0", "design": {"duration": 7}})

    assert report["summary"] == 'Experiment "exp_0" ran for 7 days with 0 variants. No clear winner yet.'
    assert report["recommendations"] == ["Wait for more data to collect"]
