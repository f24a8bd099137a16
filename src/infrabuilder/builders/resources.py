import logging

from ..abstractions import Builder
from ..args import ResourceGroupArgs
from ..utils import fluent
from .. import constants

logger = logging.getLogger(__name__)


class ResourceGroupBuilder(Builder[ResourceGroupArgs]):
    """Builder of a resource group."""

    resource_type = constants.RESOURCE_GROUP_TYPE
    required_fields = ("location",)

    def defaults(self) -> ResourceGroupArgs:
        return ResourceGroupArgs()

    @fluent
    def location(self, location: str) -> "ResourceGroupBuilder":
        self.arguments.location = location
        return self

    @fluent
    def managed_by(self, resource_id: str) -> "ResourceGroupBuilder":
        self.arguments.managed_by = resource_id
        return self
