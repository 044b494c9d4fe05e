"""Tests for the observable cache."""

from speedread.services.storage import ObservableCache


class CountingLoader:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.calls


def test_loader_runs_once():
    loader = CountingLoader()
    cache = ObservableCache(loader)
    assert cache.get() == 1
    assert cache.get() == 1
    assert loader.calls == 1


def test_invalidate_reloads():
    cache = ObservableCache(CountingLoader())
    cache.get()
    cache.invalidate()
    assert cache.get() == 2


def test_prime_skips_loader():
    loader = CountingLoader()
    cache = ObservableCache(loader)
    cache.prime(42)
    assert cache.get() == 42
    assert loader.calls == 0


def test_subscribe_notify_unsubscribe():
    cache = ObservableCache(CountingLoader())
    calls = []
    unsubscribe = cache.subscribe(lambda: calls.append("a"))
    cache.subscribe(lambda: calls.append("b"))
    assert cache.subscriber_count == 2

    cache.notify()
    assert calls == ["a", "b"]

    unsubscribe()
    unsubscribe()
    cache.notify()
    assert calls == ["a", "b", "b"]
    assert cache.subscriber_count == 1
