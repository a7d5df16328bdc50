"""Tests for singleton access."""

import threading

import pytest

from gof_patterns.domain.core.exceptions import SingletonInitializationError
from gof_patterns.infrastructure.patterns import Singleton, SingletonRegistry, get_singleton


class Counter:
    """Plain class that counts how often it is constructed."""

    created = 0

    def __init__(self, start=0):
        Counter.created += 1
        self.value = start


@pytest.mark.unit
class TestSingletonRegistry:
    """Test cases for SingletonRegistry."""

    def setup_method(self):
        Counter.created = 0

    def test_registry_is_itself_shared(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_get_creates_once(self):
        first = get_singleton(Counter, start=5)
        second = get_singleton(Counter, start=10)

        assert first is second
        assert first.value == 5
        assert Counter.created == 1

    def test_reset_single_class(self):
        first = get_singleton(Counter)
        registry = SingletonRegistry.get_instance()

        registry.reset(Counter)

        assert not registry.has_instance(Counter)
        assert get_singleton(Counter) is not first

    def test_reentrant_initialization_is_rejected(self):
        class Recursive:
            def __init__(self):
                get_singleton(Recursive)

        with pytest.raises(SingletonInitializationError) as exc_info:
            get_singleton(Recursive)

        assert exc_info.value.error_code == "SINGLETON_REENTRANT_INIT"
        assert not SingletonRegistry.get_instance().has_instance(Recursive)
        assert not SingletonRegistry.get_instance().is_initializing(Recursive)

    def test_constructor_may_use_other_singletons(self):
        class Dependent:
            def __init__(self):
                self.counter = get_singleton(Counter)

        dependent = get_singleton(Dependent)

        assert dependent.counter is get_singleton(Counter)

    def test_failed_construction_can_be_retried(self):
        attempts = []

        class Flaky:
            def __init__(self):
                attempts.append(1)
                if len(attempts) == 1:
                    raise RuntimeError("first attempt fails")

        with pytest.raises(RuntimeError):
            get_singleton(Flaky)

        assert isinstance(get_singleton(Flaky), Flaky)

    def test_concurrent_first_access_creates_one_instance(self):
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(get_singleton(Counter))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert Counter.created == 1
        assert all(result is results[0] for result in results)


@pytest.mark.unit
class TestSingleton:
    """Test cases for the Singleton class."""

    def test_get_instance_returns_same_object(self):
        assert Singleton.get_instance() is Singleton.get_instance()

    def test_direct_construction_is_rejected(self):
        with pytest.raises(SingletonInitializationError):
            Singleton()

    def test_reset_gives_a_new_instance(self):
        first = Singleton.get_instance()

        SingletonRegistry.get_instance().reset()

        assert Singleton.get_instance() is not first
