from campaignguard.orchestrator.linter import lint_content


def test_rewrite_replaces_every_occurrence_in_element():
    body = "FDA approved! Our FDA Approved formula."
    result = lint_content({"body": body}, "meta", "general", "US")

    expected = (
        "manufactured in FDA-registered facility! "
        "Our manufactured in FDA-registered facility formula."
    )
    # one suggestion per error violation
    assert len(result.safe_rewrites) == 2
    for rewrite in result.safe_rewrites:
        assert rewrite.original == body
        assert rewrite.rewritten == expected
        assert rewrite.explanation == (
            'Replaced "FDA approved" with "manufactured in FDA-registered facility" '
            "to comply with platform policies"
        )


def test_guarantee_rewrite_in_health_headline():
    result = lint_content({"headline": "Guaranteed results in 7 days!"}, "meta", "health", "US")

    assert len(result.safe_rewrites) == 1
    assert result.safe_rewrites[0].rewritten == "potential results in 7 days!"
    assert result.safe_rewrites[0].to_dict()["original"] == "Guaranteed results in 7 days!"


def test_warnings_get_no_rewrite():
    result = lint_content({"cta": "Click here now"}, "google", "general", "US")

    assert result.warning_count == 1
    assert result.safe_rewrites == []


def test_error_without_table_entry_gets_no_rewrite():
    result = lint_content({"body": "Clinically endorsed skincare"}, "meta", "beauty", "US")

    assert result.error_count == 1
    assert result.safe_rewrites == []


def test_original_content_is_untouched():
    content = {"headline": "Doctor recommended"}
    lint_content(content, "meta", "general", "US")

    assert content == {"headline": "Doctor recommended"}
