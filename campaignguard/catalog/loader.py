import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

from campaignguard.catalog.models import CatalogError, RuleCatalog
from campaignguard.models.policy_pack import PolicyPack
from campaignguard.settings import get_settings


SNAPSHOT_DIR = Path(__file__).parent / "snapshots"


def load_snapshot(filename: str) -> Dict:
    """
    Load a versioned catalog snapshot from disk.
    Snapshots are static and reviewable.
    """
    if not filename.endswith(".json"):
        filename = f"{filename}.json"

    snapshot_path = SNAPSHOT_DIR / filename

    if not snapshot_path.exists():
        raise FileNotFoundError(f"Catalog snapshot not found: {filename}")

    with open(snapshot_path, "r", encoding="utf-8") as f:
        snapshot = json.load(f)

    if "snapshot_version" not in snapshot:
        raise CatalogError("Invalid snapshot: missing snapshot_version")

    return snapshot


def load_rule_catalog(version: str) -> RuleCatalog:
    return RuleCatalog.from_dict(load_snapshot(version))


def load_policy_packs(version: str) -> List[PolicyPack]:
    snapshot = load_snapshot(version)
    if "policy_packs" not in snapshot:
        raise CatalogError("Invalid snapshot: missing policy_packs")
    return [PolicyPack.from_dict(p) for p in snapshot["policy_packs"]]


@lru_cache(maxsize=None)
def get_default_catalog() -> RuleCatalog:
    """Process-wide rule catalog, loaded on first use."""
    return load_rule_catalog(get_settings().catalog_version)


@lru_cache(maxsize=None)
def get_default_policy_packs() -> tuple:
    return tuple(load_policy_packs(get_settings().policy_packs_version))
