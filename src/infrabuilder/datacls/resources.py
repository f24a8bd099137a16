"""
InfraBuilder Resource Data Classes

ResourceOptions carries the lifecycle options handed to an engine together
with an argument record; ResourceHandle is what an engine returns for a
materialized resource.
"""

from typing import Any, Dict, Optional, Tuple, Sequence
from pydantic import BaseModel, ConfigDict, Field


def _unique(items: Sequence[Any]) -> Tuple[Any, ...]:
    """Drop repeated entries, by identity for handles and by equality otherwise."""
    kept = []
    for item in items:
        if isinstance(item, ResourceHandle):
            if any(item is seen for seen in kept):
                continue
        elif item in kept:
            continue
        kept.append(item)
    return tuple(kept)


class ResourceOptions(BaseModel):
    """
    Class describing engine-side options of one resource.

    Scalars left as None defer to the engine's defaults.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    parent: Optional["ResourceHandle"] = None
    provider: Optional[Any] = None
    depends_on: Tuple["ResourceHandle", ...] = ()
    protect: Optional[bool] = None
    retain_on_delete: Optional[bool] = None
    delete_before_replace: Optional[bool] = None
    ignore_changes: Tuple[str, ...] = ()
    aliases: Tuple[str, ...] = ()

    def merge(self, other: Optional["ResourceOptions"]) -> "ResourceOptions":
        """
        Overlay ``other`` on these options.

        Non-None scalars of ``other`` win; sequences are concatenated in order
        without repeats.
        """
        if other is None:
            return self
        update: Dict[str, Any] = {}
        for field in ("parent", "provider", "protect", "retain_on_delete", "delete_before_replace"):
            value = getattr(other, field)
            if value is not None:
                update[field] = value
        for field in ("depends_on", "ignore_changes", "aliases"):
            update[field] = _unique(getattr(self, field) + getattr(other, field))
        return self.model_copy(update=update)


class ResourceHandle(BaseModel):
    """
    Class represents a resource handed to a provisioning engine.

    ``id`` and ``outputs`` may hold engine-native deferred values; the core
    never inspects them.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    resource_type: str
    logical_name: str
    name: Optional[str] = None
    id: Optional[Any] = None
    inputs: Dict[str, Any] = Field(default_factory=dict)
    outputs: Dict[str, Any] = Field(default_factory=dict)
    options: ResourceOptions = Field(default_factory=ResourceOptions)
    resource: Optional[Any] = None

    def get(self, key: str, default: Any = None) -> Any:
        """Read an output value, falling back to the input handed to the engine."""
        if key in self.outputs:
            return self.outputs[key]
        return self.inputs.get(key, default)

    def __repr__(self) -> str:
        return f"ResourceHandle({self.resource_type!r}, {self.logical_name!r}, name={self.name!r})"


ResourceOptions.model_rebuild()
ResourceHandle.model_rebuild()


def ref_name(value: Any) -> Any:
    """Resolve a handle to its physical name; other values pass through."""
    if isinstance(value, ResourceHandle):
        return value.name
    return value


def ref_id(value: Any) -> Any:
    """Resolve a handle to its id; other values pass through."""
    if isinstance(value, ResourceHandle):
        return value.id
    return value
