"""
InfraBuilder Strategies

Naming and tagging are organisation-wide policies applied uniformly by
every builder. This module contains:

- NamingStrategy / TaggingStrategy: abstract bases for strategy plug-ins
- PatternNamingStrategy, StaticTaggingStrategy: bundled strategies
- StrategyContext: the immutable pair of strategies read by every build
- configure_strategies / get_strategies / reset_strategies: the process-wide
  default context, used by builders that were not given one explicitly
"""

from abc import ABC, abstractmethod
from string import Formatter
from typing import Any, Dict, Mapping, Optional, Set
import hashlib
import logging
import threading

from pydantic import BaseModel, ConfigDict

from . import constants
from .exceptions import NamingStrategyError, TaggingStrategyError
from .protocols import NamingStrategyProtocol, TaggingStrategyProtocol

logger = logging.getLogger(__name__)


# ============================================================================
# Strategy Base Classes
# ============================================================================

class NamingStrategy(ABC):
    """
    Abstract class for a naming strategy.
    """

    @abstractmethod
    def generate_name(self, token: str) -> str:
        """
        Derive the physical name of a resource.

        Args:
            token: Logical name token
        Returns:
            The physical name.
        """
        pass


class TaggingStrategy(ABC):
    """
    Abstract class for a tagging strategy.
    """

    @abstractmethod
    def add_tags(self, existing: Mapping[str, str]) -> Dict[str, str]:
        """
        Merge policy tags into the tags a caller already set.

        Args:
            existing: Tags already on the argument record
        Returns:
            The merged tag map.
        """
        pass


# ============================================================================
# Bundled Strategies
# ============================================================================

class PatternNamingStrategy(NamingStrategy):
    """
    Names resources by formatting a pattern such as ``"{name}-{env}-{hash}"``.

    ``{name}`` is the logical token, ``{hash}`` a digest prefix of the seeded
    token, every other field comes from ``variables``. The result depends on
    nothing but the token and the construction arguments.
    """

    def __init__(
        self,
        pattern: str = "{name}",
        variables: Optional[Mapping[str, Any]] = None,
        lowercase: bool = False,
        max_length: Optional[int] = None,
        hash_length: int = constants.DEFAULT_HASH_LENGTH,
        hash_seed: str = "",
    ):
        self.pattern = pattern
        self.variables: Dict[str, Any] = dict(variables or {})
        self.lowercase = lowercase
        self.max_length = max_length
        self.hash_length = hash_length
        self.hash_seed = hash_seed
        self._check_pattern()

    @staticmethod
    def pattern_fields(pattern: str) -> Set[str]:
        """Top-level replacement field names of a format pattern."""
        try:
            return {
                field.split(".", 1)[0].split("[", 1)[0]
                for _, field, _, _ in Formatter().parse(pattern)
                if field is not None
            }
        except ValueError as e:
            raise NamingStrategyError(f"Invalid naming pattern '{pattern}': {e}") from e

    def _check_pattern(self):
        fields = self.pattern_fields(self.pattern)
        if constants.NAME_PLACEHOLDER not in fields:
            raise NamingStrategyError(
                f"Naming pattern '{self.pattern}' must reference '{{{constants.NAME_PLACEHOLDER}}}'."
            )
        reserved = {constants.NAME_PLACEHOLDER, constants.HASH_PLACEHOLDER} & set(self.variables)
        if reserved:
            raise NamingStrategyError(f"Naming variables cannot redefine reserved fields: {sorted(reserved)}")
        undefined = fields - set(self.variables) - {constants.NAME_PLACEHOLDER, constants.HASH_PLACEHOLDER}
        if undefined:
            raise NamingStrategyError(
                f"Naming pattern '{self.pattern}' references undefined variable(s): {sorted(undefined)}"
            )
        if self.hash_length < 1:
            raise NamingStrategyError(f"hash_length must be positive, got {self.hash_length}.")

    def digest(self, token: str) -> str:
        return hashlib.sha256(f"{self.hash_seed}{token}".encode("utf-8")).hexdigest()[: self.hash_length]

    def generate_name(self, token: str) -> str:
        name = self.pattern.format(
            **self.variables,
            **{constants.NAME_PLACEHOLDER: token, constants.HASH_PLACEHOLDER: self.digest(token)},
        )
        if self.lowercase:
            name = name.lower()
        if self.max_length is not None and len(name) > self.max_length:
            raise NamingStrategyError(
                f"Generated name '{name}' for '{token}' exceeds the maximum length of {self.max_length}."
            )
        logger.debug(f"[Naming] '{token}' -> '{name}'")
        return name


class StaticTaggingStrategy(TaggingStrategy):
    """
    Adds a fixed set of policy tags; tags already on the record win.
    """

    def __init__(self, tags: Mapping[str, str]):
        for key, value in tags.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TaggingStrategyError(f"Tag '{key}' must map a string to a string, got {value!r}.")
        self.tags: Dict[str, str] = dict(tags)

    def add_tags(self, existing: Mapping[str, str]) -> Dict[str, str]:
        return {**self.tags, **existing}


# ============================================================================
# Strategy Context
# ============================================================================

class StrategyContext(BaseModel):
    """
    Holds the naming and tagging strategies of one deployment.

    Immutable, so it is safe to read from builders finalized concurrently.
    Either slot may be empty, in which case the matching operation is the
    identity.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    naming: Optional[NamingStrategyProtocol] = None
    tagging: Optional[TaggingStrategyProtocol] = None

    def resolve_name(self, token: str) -> str:
        """Map a logical name token to a physical name."""
        if self.naming is None:
            return token
        name = self.naming.generate_name(token)
        if not isinstance(name, str) or not name:
            raise NamingStrategyError(
                f"{type(self.naming).__name__} returned {name!r} for '{token}', expected a non-empty string."
            )
        return name

    def merge_tags(self, existing: Optional[Mapping[str, str]]) -> Optional[Dict[str, str]]:
        """
        Merge the policy tags into ``existing``.

        Keys of ``existing`` always keep their values, whatever the strategy
        returns.
        """
        if self.tagging is None:
            return None if existing is None else dict(existing)
        current = dict(existing or {})
        merged = self.tagging.add_tags(dict(current))
        if not isinstance(merged, Mapping):
            raise TaggingStrategyError(
                f"{type(self.tagging).__name__} returned {type(merged).__name__}, expected a mapping."
            )
        return {**merged, **current}


# ============================================================================
# Process-wide default
# ============================================================================

_lock = threading.Lock()
_active: Optional[StrategyContext] = None


def configure_strategies(
    naming: Optional[NamingStrategyProtocol] = None,
    tagging: Optional[TaggingStrategyProtocol] = None,
) -> StrategyContext:
    """
    Install the process-wide strategy context.
    This should be called once during deployment bootstrap.
    """
    global _active
    context = StrategyContext(naming=naming, tagging=tagging)
    with _lock:
        if _active is not None and (_active.naming is not None or _active.tagging is not None):
            logger.warning("Replacing the already configured process-wide strategy context.")
        _active = context
    logger.debug(
        f"Configured strategies: naming={type(naming).__name__ if naming else None}, "
        f"tagging={type(tagging).__name__ if tagging else None}"
    )
    return context


def get_strategies() -> StrategyContext:
    """Return the process-wide strategy context, creating an empty one on first use."""
    global _active
    with _lock:
        if _active is None:
            _active = StrategyContext()
        return _active


def reset_strategies() -> None:
    global _active
    with _lock:
        _active = None
