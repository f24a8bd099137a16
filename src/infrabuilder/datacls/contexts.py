"""
InfraBuilder Resource Context

This module contains the ResourceContext data class, the optional
parent/provider/options bundle handed to a builder at construction time.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

from .resources import ResourceHandle, ResourceOptions


class ResourceContext(BaseModel):
    """
    Holds the explicit relationships of one resource: its parent, its
    provider and any resource options.

    Immutable; the ``with_*`` helpers return updated copies.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    parent: Optional[ResourceHandle] = None
    provider: Optional[Any] = None
    options: ResourceOptions = Field(default_factory=ResourceOptions)

    def with_parent(self, parent: ResourceHandle) -> "ResourceContext":
        return self.model_copy(update={"parent": parent})

    def with_provider(self, provider: Any) -> "ResourceContext":
        return self.model_copy(update={"provider": provider})

    def with_options(self, options: ResourceOptions) -> "ResourceContext":
        return self.model_copy(update={"options": self.options.merge(options)})

    def with_dependency(self, *handles: ResourceHandle) -> "ResourceContext":
        return self.with_options(ResourceOptions(depends_on=tuple(handles)))

    def resource_options(self, explicit: Optional[ResourceOptions] = None) -> ResourceOptions:
        """
        Options handed to the engine: parent and provider folded into the
        context options, then build-time options merged on top.
        """
        base = self.options.merge(
            ResourceOptions(parent=self.parent, provider=self.provider)
        )
        return base.merge(explicit)
