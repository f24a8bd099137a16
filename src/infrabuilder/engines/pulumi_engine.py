import logging
from typing import Any, List, Optional

import pulumi

from ..args.base import ArgsModel
from ..datacls import ResourceHandle, ResourceOptions

logger = logging.getLogger(__name__)


def _native(handle: Optional[ResourceHandle]) -> Any:
    if handle is None:
        return None
    return handle.resource


class PulumiEngine:
    """
    Provisioning engine that registers resources with the Pulumi runtime.

    Records are handed over as generic ``pulumi.CustomResource`` objects
    addressed by their type token, so any provider schema is accepted. The
    returned handle's ``id`` is a ``pulumi.Output``.
    """

    def resource_options(self, options: ResourceOptions) -> pulumi.ResourceOptions:
        depends_on: List[Any] = [_native(h) for h in options.depends_on]
        return pulumi.ResourceOptions(
            parent=_native(options.parent),
            provider=options.provider,
            depends_on=depends_on or None,
            protect=options.protect,
            retain_on_delete=options.retain_on_delete,
            delete_before_replace=options.delete_before_replace,
            ignore_changes=list(options.ignore_changes) or None,
            aliases=list(options.aliases) or None,
        )

    def create_resource(
        self,
        resource_type: str,
        logical_name: str,
        arguments: ArgsModel,
        options: Optional[ResourceOptions] = None,
    ) -> ResourceHandle:
        options = options or ResourceOptions()
        inputs = arguments.to_inputs()
        resource = pulumi.CustomResource(
            resource_type,
            logical_name,
            inputs,
            opts=self.resource_options(options),
        )
        logger.debug(f"[Pulumi] Registered {resource_type} '{logical_name}'")
        return ResourceHandle(
            resource_type=resource_type,
            logical_name=logical_name,
            name=arguments.physical_name(),
            id=resource.id,
            inputs=inputs,
            options=options,
            resource=resource,
        )
