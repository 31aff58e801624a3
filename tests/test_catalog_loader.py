import pytest

from campaignguard.catalog.loader import (
    get_default_catalog,
    load_policy_packs,
    load_rule_catalog,
    load_snapshot,
)
from campaignguard.catalog.models import CatalogError, RuleCatalog
from campaignguard.orchestrator.linter import ComplianceLinter


def test_default_catalog_loads():
    catalog = get_default_catalog()

    assert catalog.snapshot_version == "rules_v1_2024-01-20"
    assert len(catalog.claim_patterns_for("meta")) == 8
    assert len(catalog.claim_patterns_for("google")) == 14
    assert len(catalog.claim_patterns_for("linkedin")) == 12
    assert len(catalog.trademarks) == 18
    assert catalog.disclosures_for("gaming") == ()


def test_snapshot_name_with_or_without_extension():
    assert load_snapshot("rules_v1_2024-01-20") == load_snapshot("rules_v1_2024-01-20.json")


def test_missing_snapshot_raises():
    with pytest.raises(FileNotFoundError):
        load_rule_catalog("rules_v0_missing")


def test_snapshot_without_version_is_rejected():
    with pytest.raises(CatalogError):
        RuleCatalog.from_dict({"prohibited_claims": {"meta": []}})


def test_snapshot_without_baseline_list_is_rejected():
    with pytest.raises(CatalogError):
        RuleCatalog.from_dict({"snapshot_version": "x", "prohibited_claims": {"google": []}})


def test_invalid_regex_is_rejected():
    with pytest.raises(CatalogError):
        RuleCatalog.from_dict({"snapshot_version": "x", "prohibited_claims": {"meta": ["(unclosed"]}})


def test_catalog_is_read_only():
    catalog = get_default_catalog()

    with pytest.raises(TypeError):
        catalog.required_disclosures["health"] = ()


def test_custom_catalog_drives_the_linter():
    catalog = RuleCatalog.from_dict({
        "snapshot_version": "custom",
        "prohibited_claims": {"meta": [r"free\s+money"]},
        "required_disclosures": {"crypto": ["Not financial advice"]},
    })
    linter = ComplianceLinter(catalog)

    result = linter.lint({"headline": "Free money inside"}, "meta", "crypto", "US")

    assert [v.rule for v in result.violations] == ["prohibited_claims", "required_disclosures"]
    assert result.score == 90


def test_policy_pack_snapshot():
    packs = load_policy_packs("policy_packs_v1_2024-01-20")

    assert [p.id for p in packs] == [
        "health_us", "finance_us", "beauty_us", "employment_us", "tech_gdpr", "real_estate_us",
    ]


def test_rule_snapshot_is_not_a_policy_pack_snapshot():
    with pytest.raises(CatalogError):
        load_policy_packs("rules_v1_2024-01-20")
