"""
Backend Registry - names and lazily instantiates Level-1 backends.

The registry provides:
1. A fixed table of built-in backends ('reference', 'numpy')
2. Registration of additional BLAS1 subclasses by name
3. Lazy, cached instantiation (backends are stateless, one instance each)
"""

import logging
from typing import Dict, List, Optional, Type

from blas1.core.base import BLAS1
from blas1.core.reference import ReferenceBLAS1
from blas1.core.vectorized import NumpyBLAS1
from blas1.validation import BLASError

logger = logging.getLogger(__name__)


class UnknownBackendError(BLASError, KeyError):
    """Raised when a backend name is not registered."""

    def __init__(self, name: str, available: List[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown backend: '{name}'. Available: {', '.join(available)}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class BackendRegistry:
    """
    Registry of available BLAS1 backends.

    Backend classes are registered by name; instances are created on first
    access and reused afterwards.
    """

    def __init__(self):
        self._classes: Dict[str, Type[BLAS1]] = {}
        self._instances: Dict[str, BLAS1] = {}

        self.register('reference', ReferenceBLAS1)
        self.register('numpy', NumpyBLAS1)

    def register(self, name: str, backend_cls: Type[BLAS1]) -> None:
        """Register a backend class under name, replacing any previous entry."""
        if not (isinstance(backend_cls, type) and issubclass(backend_cls, BLAS1)):
            raise TypeError(f"backend for '{name}' must be a BLAS1 subclass")
        self._classes[name] = backend_cls
        self._instances.pop(name, None)

    def list_backends(self) -> List[str]:
        """List all registered backend names."""
        return sorted(self._classes.keys())

    def has_backend(self, name: str) -> bool:
        """Check if a backend is registered."""
        return name in self._classes

    def get(self, name: str) -> BLAS1:
        """
        Get the backend instance registered under name.

        Raises:
            UnknownBackendError: if name is not registered
        """
        if name not in self._classes:
            raise UnknownBackendError(name, self.list_backends())

        if name not in self._instances:
            logger.debug("instantiating backend '%s'", name)
            self._instances[name] = self._classes[name]()
        return self._instances[name]


# Global registry instance (lazy initialized)
_registry: Optional[BackendRegistry] = None


def get_registry() -> BackendRegistry:
    """Get or create global backend registry."""
    global _registry
    if _registry is None:
        _registry = BackendRegistry()
    return _registry


def reset_registry():
    """Reset the global registry (for testing)."""
    global _registry
    _registry = None
