"""
Caller-side memo for lint results.

lint_content is a pure function of (content, platform, vertical, region),
so its results may be reused for a short TTL. Nothing in the core depends
on this cache being present.
"""
import hashlib
import json
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import asdict
from typing import Any, Callable, Optional, Tuple

from campaignguard.models.ad_content import AdContent
from campaignguard.models.compliance_result import ComplianceResult
from campaignguard.settings import DEFAULT_LINT_CACHE_MAX_ENTRIES

logger = logging.getLogger("campaignguard.cache")


def compute_request_hash(content: Any, platform: str, vertical: str, region: str) -> str:
    """
    Deterministic SHA-256 over a canonical JSON form of the lint request.
    """
    if isinstance(content, AdContent):
        content = asdict(content)

    serialized = json.dumps(
        {
            "content": content or {},
            "platform": platform,
            "vertical": vertical,
            "region": region,
        },
        sort_keys=True,
        separators=(",", ":"),
        default=str,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()


class LintCache:
    """
    TTL memo with a size cap. Entries are kept in insertion order, so both
    expiry and overflow evict from the oldest end.
    """

    def __init__(
        self,
        ttl_seconds: float,
        max_entries: int = DEFAULT_LINT_CACHE_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[float, ComplianceResult]]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def size(self) -> int:
        return len(self._entries)

    def _is_expired(self, stored_at: float, now: float) -> bool:
        return now - stored_at >= self.ttl_seconds

    def _evict_expired(self, now: float) -> None:
        while self._entries:
            oldest_key, (stored_at, _) = next(iter(self._entries.items()))
            if not self._is_expired(stored_at, now):
                break
            del self._entries[oldest_key]

    def get(self, key: str) -> Optional[ComplianceResult]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self.misses += 1
                return None

            stored_at, result = entry
            if self._is_expired(stored_at, self._clock()):
                del self._entries[key]
                self.misses += 1
                return None

            self.hits += 1
            return result

    def put(self, key: str, result: ComplianceResult) -> None:
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            self._entries.pop(key, None)
            self._entries[key] = (now, result)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Lint cache full, evicted {evicted[:12]}")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def lint(
        self,
        lint_fn: Callable[..., ComplianceResult],
        content: Any,
        platform: str,
        vertical: str,
        region: str,
    ) -> Tuple[ComplianceResult, bool]:
        """
        Returns (result, cache_hit). lint_fn is only called on a miss.
        """
        key = compute_request_hash(content, platform, vertical, region)
        cached = self.get(key)
        if cached is not None:
            logger.debug(f"Lint cache hit {key[:12]}")
            return cached, True

        result = lint_fn(content, platform, vertical, region)
        self.put(key, result)
        return result, False
