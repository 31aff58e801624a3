import hashlib
import json
import os
from dataclasses import asdict, dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_CATALOG_VERSION = "rules_v1_2024-01-20"
DEFAULT_POLICY_PACKS_VERSION = "policy_packs_v1_2024-01-20"
DEFAULT_LINT_CACHE_TTL = 300.0
DEFAULT_LINT_CACHE_MAX_ENTRIES = 1000


@dataclass(frozen=True)
class Settings:
    catalog_version: str
    policy_packs_version: str
    lint_cache_ttl: float
    audit_log: str
    lint_cache_max_entries: int = DEFAULT_LINT_CACHE_MAX_ENTRIES


def load_settings() -> Settings:
    """Read configuration from the environment (and a local .env, if present)."""
    load_dotenv()

    ttl = os.getenv("CAMPAIGNGUARD_LINT_CACHE_TTL")
    max_entries = os.getenv("CAMPAIGNGUARD_LINT_CACHE_MAX_ENTRIES")

    return Settings(
        catalog_version=os.getenv("CAMPAIGNGUARD_CATALOG_VERSION", DEFAULT_CATALOG_VERSION),
        policy_packs_version=os.getenv(
            "CAMPAIGNGUARD_POLICY_PACKS_VERSION", DEFAULT_POLICY_PACKS_VERSION
        ),
        lint_cache_ttl=float(ttl) if ttl else DEFAULT_LINT_CACHE_TTL,
        audit_log=os.getenv("CAMPAIGNGUARD_AUDIT_LOG", "audit.log"),
        lint_cache_max_entries=int(max_entries) if max_entries else DEFAULT_LINT_CACHE_MAX_ENTRIES,
    )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    return load_settings()


def compute_settings_hash(settings: Settings) -> str:
    """
    Deterministic hash of the configuration that may affect lint outcomes.
    """
    payload = json.dumps(asdict(settings), sort_keys=True).encode("utf-8")
    return hashlib.sha256(payload).hexdigest()
