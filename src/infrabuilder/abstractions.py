"""
InfraBuilder Abstract Base Classes

This module contains the abstract base classes of the builder framework.

Dependencies:
- args/: Argument records the builders fill in
- datacls/: Resource options, handles and contexts
- strategies.py: Naming and tagging applied at build time
- engines/: Default engine used when none was injected
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Generic, Iterable, List, Mapping, Optional, Tuple, TypeVar
import logging

from pydantic import ValidationError as PydanticValidationError

from .args.base import ArgsModel
from .datacls import ResourceContext, ResourceHandle, ResourceOptions, ref_name
from .engines import get_default_engine
from .exceptions import (
    BuilderConsumedError,
    ConfigurationError,
    DuplicateFragmentError,
    FragmentAlreadyFoldedError,
    IncompleteFragmentError,
    InvalidValueError,
    MissingFieldError,
    ValidationError,
)
from .protocols import ProvisioningEngineProtocol
from .strategies import StrategyContext, get_strategies
from .utils import extract_builder_kind, fluent
from .utils.decorators import describe_errors
from . import constants

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=ArgsModel)
F = TypeVar("F", bound=ArgsModel)
P = TypeVar("P", bound="Builder")


def is_unset(value: Any) -> bool:
    """None, empty strings and empty collections count as unset."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set)) and len(value) == 0:
        return True
    return False


class ExclusiveChoices:
    """
    Mixin recording mutually exclusive choices (Linux or Windows, allow or
    deny...). The last choice wins; overwriting a different earlier choice
    logs a warning.
    """

    _log_prefix: str = ""

    def _choose(self, group: str, choice: str):
        choices: Dict[str, str] = self.__dict__.setdefault("_choices", {})
        previous = choices.get(group)
        if previous is not None and previous != choice:
            logger.warning(f"{self._log_prefix} '{choice}' overrides the earlier '{previous}' choice for {group}.")
        choices[group] = choice


# ============================================================================
# Top-level Abstract Base Classes
# ============================================================================

class Builder(ExclusiveChoices, ABC, Generic[A]):
    """
    Abstract class describing the builder of one resource.

    A builder owns exactly one argument record, mutated by its fluent
    setters, and is single-use: ``build()`` resolves the physical name,
    merges tags, folds pending fragments, validates the record and hands it
    to the provisioning engine. Afterwards every setter and a second
    ``build()`` raise BuilderConsumedError.
    """

    resource_type: ClassVar[str] = ""
    required_fields: ClassVar[Tuple[str, ...]] = ()

    def __init__(
        self,
        name: str,
        context: Optional[ResourceContext] = None,
        arguments: Optional[A] = None,
        strategies: Optional[StrategyContext] = None,
        engine: Optional[ProvisioningEngineProtocol] = None,
    ):
        if not isinstance(name, str) or not name:
            raise ValidationError(f"{type(self).__name__} needs a non-empty logical name, got {name!r}.")
        self.logical_name = name
        self.context: ResourceContext = context or ResourceContext()
        self.arguments: A = arguments if arguments is not None else self.defaults()
        self._strategies = strategies
        self._engine = engine
        self._built = False
        # Nested builders opened on this builder and not folded yet
        self._open_nested: List["NestedBuilder"] = []
        logger.debug(f"[{self.logical_name}] [{self.kind}] Builder created.")

    @abstractmethod
    def defaults(self) -> A:
        """
        Create the argument record with the resource-specific defaults.

        Returns:
            A fresh argument record.
        """
        pass

    @property
    def kind(self) -> str:
        return extract_builder_kind(type(self).__name__, constants.BUILDER_SUFFIX) or type(self).__name__

    @property
    def _log_prefix(self) -> str:
        return f"[{self.logical_name}] [{self.kind}]"

    @property
    def built(self) -> bool:
        return self._built

    def _ensure_unbuilt(self, operation: str):
        if self._built:
            raise BuilderConsumedError(
                f"Cannot call '{operation}' on {self.kind} '{self.logical_name}': it has already been built."
            )

    # --- Identity and tags ---

    @fluent
    def name(self, physical_name: str) -> "Builder[A]":
        """Set the name token handed to the naming strategy instead of the logical name."""
        if self.arguments.name_field is None:
            raise ConfigurationError(f"{self.kind} records have no name field.")
        setattr(self.arguments, self.arguments.name_field, physical_name)
        return self

    @fluent
    def tag(self, key: str, value: str) -> "Builder[A]":
        self.arguments.put_in(self._tags_field(), key, value)
        return self

    @fluent
    def tags(self, tags: Mapping[str, str]) -> "Builder[A]":
        field = self._tags_field()
        for key, value in tags.items():
            self.arguments.put_in(field, key, value)
        return self

    def _tags_field(self) -> str:
        if self.arguments.tags_field is None:
            raise ConfigurationError(f"{self.kind} '{self.logical_name}' does not support tags.")
        return self.arguments.tags_field

    # --- Resource context ---

    @fluent
    def parent(self, handle: ResourceHandle) -> "Builder[A]":
        self.context = self.context.with_parent(handle)
        return self

    @fluent
    def depends_on(self, *handles: ResourceHandle) -> "Builder[A]":
        self.context = self.context.with_dependency(*handles)
        return self

    @fluent
    def provider(self, provider: Any) -> "Builder[A]":
        self.context = self.context.with_provider(provider)
        return self

    @fluent
    def protect(self, flag: bool = True) -> "Builder[A]":
        self.context = self.context.with_options(ResourceOptions(protect=flag))
        return self

    @fluent
    def retain_on_delete(self, flag: bool = True) -> "Builder[A]":
        self.context = self.context.with_options(ResourceOptions(retain_on_delete=flag))
        return self

    @fluent
    def ignore_changes(self, *properties: str) -> "Builder[A]":
        self.context = self.context.with_options(ResourceOptions(ignore_changes=tuple(properties)))
        return self

    # --- Build ---

    def build(self, options: Optional[ResourceOptions] = None) -> ResourceHandle:
        """
        Finalize the record and hand it to the provisioning engine.

        The builder is consumed as soon as the build starts, whether or not
        it succeeds.

        Args:
            options: Resource options merged over the builder's context.
        Returns:
            The handle returned by the engine.
        """
        self._ensure_unbuilt("build")
        self._built = True
        self._detach_nested()
        strategies = self._strategies if self._strategies is not None else get_strategies()
        engine = self._engine if self._engine is not None else get_default_engine()

        logger.debug(f"[{self.logical_name}] [{self.kind}] Resolving name and tags.")
        self._resolve_name(strategies)
        self._merge_tags(strategies)
        logger.debug(f"[{self.logical_name}] [{self.kind}] Folding pending fragments.")
        self._fold()
        self._validate()

        resource_options = self.context.resource_options(options)
        handle = engine.create_resource(self.resource_type, self.logical_name, self.arguments, resource_options)
        logger.info(f"[{self.logical_name}] [{self.kind}] Built {self.resource_type} as '{handle.name}'.")
        return handle

    def _detach_nested(self):
        """Cut every nested builder still open on this builder loose from it."""
        for nested in self._open_nested:
            logger.warning(f"{self._log_prefix} {nested.kind} '{nested.identity}' was opened but never folded.")
            nested._detach()
        self._open_nested = []

    def _store(self, field: str, value: Any):
        try:
            setattr(self.arguments, field, value)
        except PydanticValidationError as e:
            raise InvalidValueError(self._log_prefix, "build", describe_errors(e)) from e

    def _resolve_name(self, strategies: StrategyContext):
        field = self.arguments.name_field
        if field is None:
            return
        token = getattr(self.arguments, field) or self.logical_name
        self._store(field, strategies.resolve_name(token))

    def _merge_tags(self, strategies: StrategyContext):
        field = self.arguments.tags_field
        if field is None:
            return
        self._store(field, strategies.merge_tags(getattr(self.arguments, field)))

    def _fold(self):
        """Fold pending sub-profiles into the record and check fragment constraints."""
        pass

    def _missing_fields(self) -> List[str]:
        return [f for f in self.required_fields if is_unset(getattr(self.arguments, f))]

    def _validate(self):
        missing = self._missing_fields()
        if missing:
            logger.debug(f"[{self.logical_name}] [{self.kind}] Missing required fields: {missing}")
            raise MissingFieldError(self.logical_name, missing)

    def _ensure_unique(self, fragments: Optional[Iterable[Any]], key: str, what: str):
        seen = set()
        for fragment in fragments or ():
            identity = getattr(fragment, key)
            if identity in seen:
                raise DuplicateFragmentError(
                    f"{self.kind} '{self.logical_name}' has more than one {what} with {key} '{identity}'."
                )
            seen.add(identity)


# ============================================================================
# Mid-level Abstract Base Classes
# ============================================================================

class RegionalBuilder(Builder[A], ABC):
    """
    Abstract class for resources placed in a resource group and a region.
    """

    @fluent
    def location(self, location: str) -> "RegionalBuilder[A]":
        self.arguments.location = location
        return self

    @fluent
    def resource_group(self, group: Any) -> "RegionalBuilder[A]":
        """Accepts a resource group name or the handle of a built resource group."""
        self.arguments.resource_group_name = ref_name(group)
        return self


# ============================================================================
# Nested Builders
# ============================================================================

class NestedBuilder(ExclusiveChoices, ABC, Generic[P, F]):
    """
    Abstract class for builders of a composite fragment.

    A nested builder is only created by a factory on its parent builder. It
    configures its own fragment with the same fluent idiom and its
    ``build()`` appends the fragment to the parent's collection exactly
    once, then returns the parent itself.

    The nested builder holds its parent only while both are open: folding
    it, or building the parent first, drops the reference.
    """

    collection_field: ClassVar[str] = ""
    identity_field: ClassVar[str] = "name"
    required_fields: ClassVar[Tuple[str, ...]] = ("name",)

    def __init__(self, parent: P, fragment: Optional[F] = None):
        parent._ensure_unbuilt(f"open {type(self).__name__}")
        self._parent: Optional[P] = parent
        self.fragment: F = fragment if fragment is not None else self.defaults()
        self._folded = False
        parent._open_nested.append(self)

    @abstractmethod
    def defaults(self) -> F:
        """
        Create the fragment with its defaults.

        Returns:
            A fresh fragment.
        """
        pass

    @property
    def kind(self) -> str:
        return extract_builder_kind(type(self).__name__, constants.BUILDER_SUFFIX) or type(self).__name__

    @property
    def identity(self) -> Any:
        return getattr(self.fragment, self.identity_field)

    @property
    def _log_prefix(self) -> str:
        return f"[{self.identity}] [{self.kind}]"

    @property
    def folded(self) -> bool:
        return self._folded

    @property
    def parent(self) -> Optional[P]:
        """The parent builder, None once folded or once the parent was built."""
        return self._parent

    def _detach(self):
        self._parent = None

    def _ensure_unbuilt(self, operation: str):
        if self._folded:
            raise BuilderConsumedError(
                f"Cannot call '{operation}' on {self.kind} '{self.identity}': it has already been folded."
            )
        if self._parent is None:
            raise BuilderConsumedError(
                f"Cannot call '{operation}' on {self.kind} '{self.identity}': its parent has already been built."
            )

    def _check(self):
        """Check the fragment for conflicting settings before it is folded."""
        pass

    def build(self) -> P:
        """
        Fold the fragment into the parent and return the parent.

        Returns:
            The parent builder instance.
        """
        if self._folded:
            raise FragmentAlreadyFoldedError(f"{self.kind} '{self.identity}' has already been folded into its parent.")
        self._ensure_unbuilt("build")
        parent = self._parent

        missing = [f for f in self.required_fields if is_unset(getattr(self.fragment, f))]
        if missing:
            raise IncompleteFragmentError(
                f"{self.kind} of {parent.kind} '{parent.logical_name}' is missing required field(s): {', '.join(missing)}"
            )
        self._check()

        parent.arguments.append_to(self.collection_field, self.fragment)
        self._folded = True
        parent._open_nested = [n for n in parent._open_nested if n is not self]
        self._detach()
        logger.debug(f"[{parent.logical_name}] [{parent.kind}] Folded {self.kind} '{self.identity}'.")
        return parent
