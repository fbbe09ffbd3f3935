"""Process-wide singleton registry with explicit lifetime management."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from design_catalog.domain.core.exceptions import SingletonNotInitializedError
from design_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class SingletonRegistry:
    """
    Registry holding at most one instance per class.

    Instances are never created on first access. They must be created with
    initialize(), which is guarded by a lock and runs the constructor exactly
    once, and they live until reset() ends their lifetime. This keeps the
    initialization order explicit and testable.
    """

    _instance: Optional["SingletonRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide registry."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def initialize(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Create the instance of a class once.

        Args:
            singleton_class: The class to instantiate
            *args: Constructor arguments, used only by the first call
            **kwargs: Constructor keyword arguments, used only by the first call

        Returns:
            The single instance of the class
        """
        with self._lock:
            if singleton_class in self._instances:
                logger.debug("Singleton already initialized", singleton=singleton_class.__name__)
                return cast(T, self._instances[singleton_class])
            instance = singleton_class(*args, **kwargs)
            self._instances[singleton_class] = instance
            logger.debug("Singleton initialized", singleton=singleton_class.__name__)
            return instance

    def get(self, singleton_class: Type[T]) -> T:
        """
        Get the instance of an initialized class.

        Raises:
            SingletonNotInitializedError: If initialize() has not been called
        """
        with self._lock:
            try:
                return cast(T, self._instances[singleton_class])
            except KeyError:
                raise SingletonNotInitializedError(singleton_class.__name__) from None

    def is_initialized(self, singleton_class: Type) -> bool:
        with self._lock:
            return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """End the lifetime of one instance, or of all instances."""
        with self._lock:
            if singleton_class is None:
                self._instances.clear()
                logger.debug("All singletons reset")
            elif self._instances.pop(singleton_class, None) is not None:
                logger.debug("Singleton reset", singleton=singleton_class.__name__)
