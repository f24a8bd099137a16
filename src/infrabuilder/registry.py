"""
InfraBuilder Registries

This module contains registry classes for dynamic builder discovery.

Dependencies:
- abstractions: For the Builder base class used in discovery
- builders: The package scanned for concrete builders
"""

from typing import Dict, Type, Set, Optional, TypeVar, Generic
from abc import ABC, abstractmethod
import logging

from typing_extensions import override

from . import constants
from .abstractions import Builder
from .exceptions import UnknownResourceKindError
from .utils import discover_classes, extract_builder_kind

logger = logging.getLogger(__name__)

K = TypeVar('K')
V = TypeVar('V')


class Registry(Generic[K, V], ABC):
    """
    An abstract base class for a generic discoverable registry.
    """

    # --- Configuration: To be defined by subclasses ---
    package: Optional[str] = None  # package to scan
    base_class: Optional[Type] = None  # base class to discover

    def __init__(self):
        self._registry: Dict[K, V] = {}

        if self.package is None or self.base_class is None:
            raise NotImplementedError(
                f"{self.__class__.__name__} must define class attributes "
                "'package' and 'base_class'."
            )

        logger.debug(f"Initialized {self.__class__.__name__}")

    def register(self, key: K, value: V):
        self._registry[key] = value
        logger.debug(f"Registered in {self.__class__.__name__}: {key} -> {getattr(value, '__name__', str(value))}")

    def get(self, key: K) -> Optional[V]:
        return self._registry.get(key)

    @property
    def registry(self) -> Dict[K, V]:
        return self._registry

    @abstractmethod
    def _register_item(self, class_name: str, discovered_class: Type[V]):
        """
        Define how a single discovered class is registered.
        """
        raise NotImplementedError

    def discover(self):
        """
        Template method to automatically discover and register classes.
        """
        logger.debug(f"Starting discovery for {self.__class__.__name__} in '{self.package}'...")
        discovered = discover_classes(
            self.package,
            self.base_class,
            exclude_abstract=True,
            exclude_base=True
        )

        for name, obj in discovered.items():
            self._register_item(name, obj)

        logger.debug(f"Discovery for {self.__class__.__name__} finished. Total items: {len(self._registry)}")


class BuilderRegistry(Registry[str, Type[Builder]]):
    """
    Registry of the concrete builders, keyed by snake_case resource kind
    (``ManagedClusterBuilder`` -> ``managed_cluster``).

    Nested builders are not registered: they only exist through a factory on
    their parent builder.
    """
    package = constants.BUILDERS_PACKAGE
    base_class = Builder

    @override
    def _register_item(self, class_name: str, discovered_class: Type[Builder]):
        kind = extract_builder_kind(class_name, constants.BUILDER_SUFFIX)
        if kind:
            self.register(kind, discovered_class)

    def builder(self, kind: str) -> Type[Builder]:
        if not self._registry:
            self.discover()
        found = self.get(kind)
        if found is None:
            raise UnknownResourceKindError(
                f"No builder for resource kind '{kind}'. Supported kinds: {sorted(self.get_supports())}"
            )
        return found

    def get_supports(self) -> Set[str]:
        if not self._registry:
            self.discover()
        return set(self.registry.keys())


# Global registry
builder_registry = BuilderRegistry()
