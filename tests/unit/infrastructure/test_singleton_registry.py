"""Tests for the singleton registry."""
import threading

import pytest

from design_catalog.domain.core.exceptions import SingletonNotInitializedError
from design_catalog.infrastructure.patterns import SingletonRegistry, get_singleton


class Service:
    """Counts how many times it was constructed."""

    created = 0

    def __init__(self, name="default"):
        type(self).created += 1
        self.name = name


class OtherService:
    pass


class TestSingletonRegistry:
    """Test explicit singleton lifetime management."""

    def setup_method(self):
        Service.created = 0
        self.registry = SingletonRegistry.get_instance()

    def test_get_instance_is_process_wide(self):
        assert SingletonRegistry.get_instance() is self.registry

    def test_get_before_initialize_raises(self):
        with pytest.raises(SingletonNotInitializedError, match="Service"):
            self.registry.get(Service)

    def test_initialize_creates_once(self):
        first = self.registry.initialize(Service, "primary")
        second = self.registry.initialize(Service, "ignored")

        assert first is second
        assert first.name == "primary"
        assert Service.created == 1
        assert self.registry.get(Service) is first

    def test_instances_are_per_class(self):
        service = self.registry.initialize(Service)
        other = self.registry.initialize(OtherService)
        assert self.registry.get(Service) is service
        assert self.registry.get(OtherService) is other

    def test_is_initialized(self):
        assert not self.registry.is_initialized(Service)
        self.registry.initialize(Service)
        assert self.registry.is_initialized(Service)

    def test_reset_one_class(self):
        self.registry.initialize(Service)
        self.registry.initialize(OtherService)

        self.registry.reset(Service)

        assert not self.registry.is_initialized(Service)
        assert self.registry.is_initialized(OtherService)

    def test_reset_unknown_class_is_noop(self):
        self.registry.reset(Service)
        assert not self.registry.is_initialized(Service)

    def test_reset_all(self):
        self.registry.initialize(Service)
        self.registry.initialize(OtherService)
        self.registry.reset()
        assert not self.registry.is_initialized(Service)
        assert not self.registry.is_initialized(OtherService)

    def test_initialize_after_reset_creates_new_instance(self):
        first = self.registry.initialize(Service)
        self.registry.reset(Service)
        second = self.registry.initialize(Service)
        assert first is not second
        assert Service.created == 2

    def test_concurrent_initialize_creates_once(self):
        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(self.registry.initialize(Service))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert Service.created == 1
        assert all(result is results[0] for result in results)

    def test_get_singleton_accessor(self):
        service = self.registry.initialize(Service)
        assert get_singleton(Service) is service
