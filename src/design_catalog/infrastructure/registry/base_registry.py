"""Base Registry - thread-safe singleton registry keyed by name.

Subclasses get their own singleton instance and their own registrations.
"""

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from design_catalog.domain.core.exceptions import ConfigurationError, ExampleNotFoundError
from design_catalog.infrastructure.logging.logger import get_logger


class BaseRegistry(ABC):
    """
    Registry of named registrations.

    Thread-safe singleton implementation: every subclass is instantiated
    once per process, and registrations are guarded by a lock.
    """

    _instances: Dict[type, "BaseRegistry"] = {}
    _lock = threading.Lock()

    def __new__(cls, *args: Any, **kwargs: Any) -> "BaseRegistry":
        """Ensure singleton instance per subclass."""
        if cls not in BaseRegistry._instances:
            with BaseRegistry._lock:
                if cls not in BaseRegistry._instances:
                    BaseRegistry._instances[cls] = super().__new__(cls)
        return BaseRegistry._instances[cls]

    def __init__(self):
        """Initialize registry."""
        if hasattr(self, "_initialized"):
            return

        self._registrations: Dict[str, Any] = {}
        self._registry_lock = threading.RLock()
        self.logger = get_logger(type(self).__module__)
        self._initialized = True

        self.logger.debug("Registry initialized", registry=type(self).__name__)

    @abstractmethod
    def register(self, key: str, *args: Any, **kwargs: Any) -> None:
        """Register an entry - implemented by concrete registries."""

    def _add_registration(self, key: str, registration: Any) -> None:
        """
        Store a registration under a unique key.

        Raises:
            ConfigurationError: If the key is already registered
        """
        with self._registry_lock:
            if key in self._registrations:
                raise ConfigurationError(f"'{key}' is already registered")
            self._registrations[key] = registration
        self.logger.debug("Registered entry", key=key)

    def get_registration(self, key: str) -> Any:
        """
        Get the registration stored under a key.

        Raises:
            ExampleNotFoundError: If nothing is registered under the key
        """
        with self._registry_lock:
            try:
                return self._registrations[key]
            except KeyError:
                raise ExampleNotFoundError(key) from None

    def is_registered(self, key: str) -> bool:
        with self._registry_lock:
            return key in self._registrations

    def get_registered_keys(self) -> List[str]:
        """Registered keys in registration order."""
        with self._registry_lock:
            return list(self._registrations)

    def clear_registrations(self) -> None:
        """Remove all registrations (primarily for tests)."""
        with self._registry_lock:
            self._registrations.clear()
        self.logger.debug("Registrations cleared", registry=type(self).__name__)
