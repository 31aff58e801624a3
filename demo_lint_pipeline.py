import shutil

from campaignguard.experiments.analyzer import analyze_experiment
from campaignguard.experiments.sample_size import calculate_sample_size
from campaignguard.orchestrator.linter import lint_content
from campaignguard.policies.registry import get_policy_packs


# --- AUDIT-STYLE UI THEME ---
class Colors:
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'

    HEADER = '\033[1m'
    MUTED = '\033[90m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    BORDER = MUTED
    LABEL = ENDC
    VALUE = BOLD


SEVERITY_COLORS = {
    "error": Colors.FAIL,
    "warning": Colors.WARNING,
    "info": Colors.MUTED,
}

OUTCOME_COLORS = {
    "pass": Colors.OKGREEN,
    "warning": Colors.WARNING,
    "fail": Colors.FAIL,
}


def print_separator(char="-"):
    width = shutil.get_terminal_size().columns
    print(Colors.BORDER + (char * width) + Colors.ENDC)


def print_section(title):
    print("\n")
    print_separator("=")
    print(f"  {Colors.HEADER}{title.upper()}{Colors.ENDC}")
    print_separator("=")


def print_kv(key, value, color=Colors.VALUE):
    print(f"{Colors.LABEL}{key:<25}{Colors.ENDC} : {color}{value}{Colors.ENDC}")


def run_lint_demo():
    print_section("Scenario Initialization")

    platform = "meta"
    vertical = "health"
    content = {
        "headline": "Guaranteed results in 7 days!",
        "body": "Our miracle cure is FDA approved and all natural. Individual results may vary.",
        "cta": "Shop on Amazon",
        "media": {"type": "image", "url": "https://cdn.example.com/hero.jpg", "tags": ["before-after"]},
    }

    print_kv("Platform", platform)
    print_kv("Vertical", vertical)
    print_kv("Headline", content["headline"])
    print_kv("Policy Packs", ", ".join(p.id for p in get_policy_packs(vertical=vertical)))

    print_section("Step 1: Rule Enforcement")
    result = lint_content(content, platform, vertical, "US")

    for idx, v in enumerate(result.violations, 1):
        color = SEVERITY_COLORS[v.severity.value]
        print(f"{idx}. {Colors.BOLD}{v.category.value}{Colors.ENDC} ({v.id})")
        print(f"   ├─ Severity   : {color}{v.severity.value}{Colors.ENDC}")
        print(f"   ├─ Message    : {v.description}")
        print(f"   └─ Suggestion : {v.suggestion}")

    print_section("Step 2: Score & Gate")
    print_kv("Score", result.score, OUTCOME_COLORS[result.overall.value] + Colors.BOLD)
    print_kv("Overall", result.overall.value, OUTCOME_COLORS[result.overall.value])
    print_kv("Approval Required", result.approval_required)

    print_section("Step 3: Safe Rewrites")
    for rewrite in result.safe_rewrites:
        print(f"{Colors.MUTED}-{Colors.ENDC} {rewrite.original}")
        print(f"{Colors.OKGREEN}+{Colors.ENDC} {rewrite.rewritten}")

    print_section("Step 4: Recommendations")
    for line in result.recommendations:
        print(f"  * {line}")


def run_experiment_demo():
    print_section("Experiment Analysis")

    experiment = {
        "id": "exp-headline-01",
        "design": {"type": "creative_ab", "significanceLevel": 0.05, "duration": 7},
        "guardrails": [{"metric": "cpa", "operator": "less_than", "value": 25, "action": "pause"}],
        "outcomes": [
            {"variant": "A", "metrics": {"clicks": 500, "conversions": 50, "cpa": 12}, "significance": 0.02, "lift": 20},
            {"variant": "B", "metrics": {"clicks": 480, "conversions": 31, "cpa": 19}, "significance": 0.40, "lift": 0},
        ],
    }

    analysis = analyze_experiment(experiment)
    print_kv("Recommendation", analysis.recommendation.value)
    print_kv("Winner", analysis.winner_variant or "-")
    print_kv("Confidence", f"{analysis.confidence:.1f}%")
    for line in analysis.reasoning:
        print(f"  * {line}")

    print_kv("Sample Size / Variant", calculate_sample_size(0.05, 0.2))
    print_separator("=")
    print("\n")


if __name__ == "__main__":
    run_lint_demo()
    run_experiment_demo()
