from unittest.mock import Mock

from campaignguard.cache import LintCache, compute_request_hash
from campaignguard.models.ad_content import AdContent
from campaignguard.orchestrator.linter import lint_content


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_request_hash_is_stable():
    a = compute_request_hash({"headline": "Hi", "body": None}, "meta", "health", "US")
    b = compute_request_hash({"body": None, "headline": "Hi"}, "meta", "health", "US")

    assert a == b
    assert len(a) == 64
    assert a != compute_request_hash({"headline": "Hi", "body": None}, "google", "health", "US")


def test_ad_content_hashes_like_its_dict():
    as_dict = {"headline": "Hi", "body": None, "cta": None, "media": None}

    assert compute_request_hash(AdContent(headline="Hi"), "meta", "general", "US") == \
        compute_request_hash(as_dict, "meta", "general", "US")


def test_second_call_is_served_from_cache():
    cache = LintCache(60, clock=FakeClock())
    lint_fn = Mock(wraps=lint_content)

    first, hit1 = cache.lint(lint_fn, {"headline": "FDA approved"}, "meta", "general", "US")
    second, hit2 = cache.lint(lint_fn, {"headline": "FDA approved"}, "meta", "general", "US")

    assert (hit1, hit2) == (False, True)
    assert first is second
    assert lint_fn.call_count == 1
    assert cache.hits == 1
    assert cache.misses == 1


def test_entries_expire_after_ttl():
    clock = FakeClock()
    cache = LintCache(60, clock=clock)
    lint_fn = Mock(wraps=lint_content)

    cache.lint(lint_fn, {"headline": "Hi"}, "meta", "general", "US")
    clock.now += 60
    _, hit = cache.lint(lint_fn, {"headline": "Hi"}, "meta", "general", "US")

    assert hit is False
    assert lint_fn.call_count == 2


def test_clear_empties_the_cache():
    cache = LintCache(60, clock=FakeClock())
    cache.lint(lint_content, {"headline": "Hi"}, "meta", "general", "US")
    assert cache.size == 1

    cache.clear()
    assert cache.size == 0


def test_expired_entries_are_pruned_on_write():
    clock = FakeClock()
    cache = LintCache(1, clock=clock)

    for i in range(500):
        cache.lint(lint_content, {"headline": f"Headline {i}"}, "meta", "general", "US")
        clock.now += 10

    assert cache.size == 1


def test_oldest_entries_are_evicted_when_full():
    cache = LintCache(600, max_entries=3, clock=FakeClock())

    for i in range(5):
        cache.lint(lint_content, {"headline": f"Headline {i}"}, "meta", "general", "US")

    assert cache.size == 3
    assert cache.get(compute_request_hash({"headline": "Headline 0"}, "meta", "general", "US")) is None
    assert cache.get(compute_request_hash({"headline": "Headline 4"}, "meta", "general", "US")) is not None


def test_rewritten_entry_moves_to_newest():
    cache = LintCache(600, max_entries=2, clock=FakeClock())
    result = lint_content({"headline": "Hi"}, "meta", "general", "US")

    cache.put("a", result)
    cache.put("b", result)
    cache.put("a", result)
    cache.put("c", result)

    assert cache.get("a") is result
    assert cache.get("b") is None
