"""Tests for guarded calls and helper registration across threads."""

import threading
import warnings
from concurrent.futures import ThreadPoolExecutor

from toolbelt import DuplicateHelperCollision, PromotedError
from toolbelt.core.guard import ExecutionGuard
from toolbelt.core.registry import HelperRegistry


WORKERS = 8
CALLS = 40


class CountingHandler:
    def __init__(self, index):
        self.index = index
        self.calls = []
        self._lock = threading.Lock()

    def __call__(self, exc):
        with self._lock:
            self.calls.append(exc)
        return self.index


def warn_and_continue():
    warnings.warn("threaded warning", UserWarning)
    return "finished"


def make_provider(index):
    return type(f"Provider{index}", (), {
        "index": index,
        "shared": staticmethod(lambda: index),
        f"own_{index}": staticmethod(lambda: index),
    })


def test_concurrent_guarded_calls_each_handled_once():
    """Test every thread's warning reaches its own handler exactly once."""
    original = warnings.showwarning
    handlers = [CountingHandler(i) for i in range(CALLS)]
    start = threading.Barrier(WORKERS)

    def guarded(handler):
        if handler.index < WORKERS:
            start.wait()
        return ExecutionGuard(handler).run(warn_and_continue)

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        results = list(pool.map(guarded, handlers))

    assert results == list(range(CALLS))
    for handler in handlers:
        assert len(handler.calls) == 1
        assert isinstance(handler.calls[0], PromotedError)
    assert warnings.showwarning is original


def test_concurrent_successful_calls_skip_handlers():
    """Test threads that finish normally get their own results back."""
    original = warnings.showwarning
    handler = CountingHandler(-1)

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        results = list(pool.map(lambda i: ExecutionGuard(handler).run(lambda: i * 2), range(CALLS)))

    assert results == [i * 2 for i in range(CALLS)]
    assert handler.calls == []
    assert warnings.showwarning is original


def test_concurrent_registration_keeps_one_owner_per_name():
    """Test competing providers leave exactly one owner of a shared name."""
    registry = HelperRegistry()
    providers = [make_provider(i) for i in range(WORKERS)]
    start = threading.Barrier(WORKERS)

    def register(provider):
        start.wait()
        for _ in range(5):
            try:
                registry.register_method(provider, "shared")
            except DuplicateHelperCollision:
                return False
        registry.register_method(provider, f"own_{provider.index}")
        return True

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        outcomes = list(pool.map(register, providers))

    assert outcomes.count(True) == 1
    winner = providers[outcomes.index(True)]
    assert registry.resolve("shared").provider is winner
    assert len(registry) == 2


def test_concurrent_provider_registration_is_complete():
    """Test registering distinct providers from many threads loses nothing."""
    registry = HelperRegistry()
    providers = [type(f"Only{i}", (), {f"only_{i}": staticmethod(lambda: None)}) for i in range(CALLS)]

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        list(pool.map(registry.register_provider, providers))

    assert len(registry) == CALLS
    assert all(f"only_{i}" in registry for i in range(CALLS))
