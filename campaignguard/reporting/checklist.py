from typing import Dict, List


def _health(platform: str) -> List[Dict]:
    return [
        {
            "category": "Claims & Substantiation",
            "items": [
                {
                    "check": "No guarantee language",
                    "required": True,
                    "description": 'Avoid "guaranteed results", "100% effective", etc.',
                },
                {
                    "check": "FDA disclaimers present",
                    "required": True,
                    "description": "Include required FDA disclaimers for health products",
                },
                {
                    "check": "Substantiation available",
                    "required": True,
                    "description": "Have evidence for all health claims made",
                },
            ],
        },
        {
            "category": "Visual Content",
            "items": [
                {
                    "check": "No before/after images",
                    "required": platform == "meta",
                    "description": "Meta prohibits before/after transformations",
                },
                {
                    "check": "No misleading imagery",
                    "required": True,
                    "description": "Images must accurately represent the product",
                },
            ],
        },
    ]


def _finance(platform: str) -> List[Dict]:
    return [
        {
            "category": "Investment Claims",
            "items": [
                {
                    "check": "No guaranteed returns",
                    "required": True,
                    "description": "Cannot promise specific investment returns",
                },
                {
                    "check": "Risk disclosures present",
                    "required": True,
                    "description": "Must disclose investment risks clearly",
                },
                {
                    "check": "Past performance disclaimer",
                    "required": True,
                    "description": "Include standard past performance disclaimer",
                },
            ],
        }
    ]


def _general(platform: str) -> List[Dict]:
    return [
        {
            "category": "General Compliance",
            "items": [
                {
                    "check": "Truthful and accurate",
                    "required": True,
                    "description": "All claims must be truthful and substantiated",
                },
                {
                    "check": "Clear and prominent disclosures",
                    "required": True,
                    "description": "Important terms clearly disclosed",
                },
                {
                    "check": "No discriminatory language",
                    "required": True,
                    "description": "Language complies with anti-discrimination laws",
                },
            ],
        }
    ]


CHECKLISTS = {
    "health": _health,
    "finance": _finance,
    "general": _general,
}


def generate_preflight_checklist(vertical: str, platform: str) -> List[Dict]:
    """Manual pre-flight checks for a vertical; unknown verticals get the general list."""
    builder = CHECKLISTS.get(vertical, _general)
    return builder(platform)
