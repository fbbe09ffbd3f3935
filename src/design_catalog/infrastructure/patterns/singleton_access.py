"""Standard singleton access functions."""

from typing import Type, TypeVar

from design_catalog.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T]) -> T:
    """
    Standard way to get singleton instances.

    The instance must have been created beforehand with
    SingletonRegistry.initialize(); this accessor never creates one.

    Args:
        singleton_class: The class to get an instance of

    Returns:
        The singleton instance

    Raises:
        SingletonNotInitializedError: If the class has not been initialized
    """
    return SingletonRegistry.get_instance().get(singleton_class)
