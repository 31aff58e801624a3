from campaignguard.catalog.loader import get_default_catalog
from campaignguard.orchestrator.linter import lint_content
from campaignguard.policies.registry import get_policy_packs

# ANSI Colors
OK = '\033[92m'
FAIL = '\033[91m'
RESET = '\033[0m'


def audit_platform_coverage():
    catalog = get_default_catalog()
    print(f"\n=== PLATFORM COVERAGE AUDIT ({catalog.snapshot_version}) ===\n")

    # (platform, vertical, known-violating copy, rule expected to fire)
    targets = [
        ("meta", "health", "Miracle cure for everything", "prohibited_claims"),
        ("google", "general", "Click here now", "prohibited_claims"),
        ("linkedin", "employment", "Get rich quick from home", "prohibited_claims"),
        ("all", "general", "As seen on TV", "misleading_content"),
        ("all", "general", "Better than Netflix", "trademark_usage"),
        ("all", "financial", "Grow your savings", "required_disclosures"),
    ]

    passed_count = 0

    for platform, vertical, copy, expected_rule in targets:
        print(f"Checking {platform}/{vertical} -> {expected_rule}...", end=" ")

        result = lint_content({"headline": copy}, platform, vertical, "US")
        found = any(v.rule == expected_rule for v in result.violations)

        if found:
            print(f"{OK}PASS (Enforcing){RESET}")
            passed_count += 1
        else:
            print(f"{FAIL}FAIL (No Rule Active!){RESET}")

    packs = get_policy_packs()
    print(f"\nPolicy packs loaded: {len(packs)}")
    print(f"Status: {passed_count}/{len(targets)} rule families enforcing.")
    if passed_count == len(targets):
        print(f"{OK}SYSTEM INTEGRITY: 100% (READY TO LINT){RESET}")
    else:
        print(f"{FAIL}SYSTEM INCOMPLETE{RESET}")


if __name__ == "__main__":
    audit_platform_coverage()
