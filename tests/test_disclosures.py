from campaignguard.catalog.loader import get_default_catalog
from campaignguard.models.ad_content import AdContent
from campaignguard.models.violation import RegulationType, ViolationSeverity
from campaignguard.rules.disclosures import RequiredDisclosureRule


def _rule():
    return RequiredDisclosureRule(get_default_catalog())


def test_health_disclosures_are_errors_citing_fda():
    violations = _rule().evaluate(AdContent(headline="Feel your best"), "meta", "health")

    assert len(violations) == 3
    assert all(v.severity == ViolationSeverity.ERROR for v in violations)
    assert all(v.regulation.type == RegulationType.FDA for v in violations)
    assert violations[0].regulation.reference == "HEALTH compliance requirements"
    assert violations[0].location is None


def test_other_verticals_are_warnings_citing_ftc():
    violations = _rule().evaluate(AdContent(body="Grow your savings"), "meta", "financial")

    assert len(violations) == 3
    assert all(v.severity == ViolationSeverity.WARNING for v in violations)
    assert all(v.regulation.type == RegulationType.FTC for v in violations)


def test_disclosure_match_is_case_insensitive_across_elements():
    content = AdContent(
        headline="Now hiring",
        body="EQUAL OPPORTUNITY EMPLOYER.",
        cta="Apply - background check required",
    )

    assert _rule().evaluate(content, "linkedin", "employment") == []


def test_partial_disclosures_report_only_missing_ones():
    content = AdContent(body="Results not typical. Consult healthcare provider.")
    violations = _rule().evaluate(content, "meta", "weight_loss")

    assert [v.id for v in violations] == ["missing_disclosure_weight_loss_1"]
    assert violations[0].description == 'Missing required disclosure: "Diet and exercise required"'


def test_unknown_vertical_requires_nothing():
    assert _rule().evaluate(AdContent(headline="Hello"), "meta", "gaming") == []
