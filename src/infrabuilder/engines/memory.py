import logging
from typing import Any, Dict, List, Optional, Tuple

from .. import constants
from ..args.base import ArgsModel
from ..datacls import ResourceHandle, ResourceOptions
from ..exceptions import ProvisioningError

logger = logging.getLogger(__name__)


class InMemoryEngine:
    """
    Provisioning engine that keeps every resource in memory.

    Outputs mirror the inputs plus ``id`` (``"{logical}_id"``) and ``name``,
    which makes it usable both as a preview of a deployment and as the
    engine of unit tests.
    """

    def __init__(self):
        self._resources: List[ResourceHandle] = []
        self._index: Dict[Tuple[str, str], ResourceHandle] = {}

    @property
    def resources(self) -> List[ResourceHandle]:
        return list(self._resources)

    def of_type(self, resource_type: str) -> List[ResourceHandle]:
        return [r for r in self._resources if r.resource_type == resource_type]

    def get(self, resource_type: str, logical_name: str) -> Optional[ResourceHandle]:
        return self._index.get((resource_type, logical_name))

    def _ensure_known(self, handle: ResourceHandle, role: str, logical_name: str):
        if not any(handle is known for known in self._resources):
            raise ProvisioningError(
                f"Resource '{logical_name}' declares {role} '{handle.logical_name}' which this engine has not created."
            )

    def create_resource(
        self,
        resource_type: str,
        logical_name: str,
        arguments: ArgsModel,
        options: Optional[ResourceOptions] = None,
    ) -> ResourceHandle:
        options = options or ResourceOptions()
        key = (resource_type, logical_name)
        if key in self._index:
            raise ProvisioningError(f"Duplicate resource '{logical_name}' of type {resource_type}.")
        if options.parent is not None:
            self._ensure_known(options.parent, "parent", logical_name)
        for dependency in options.depends_on:
            self._ensure_known(dependency, "dependency", logical_name)

        inputs = arguments.to_inputs()
        resource_id = f"{logical_name}{constants.MOCK_ID_SUFFIX}"
        name = arguments.physical_name()
        outputs: Dict[str, Any] = dict(inputs)
        outputs["id"] = resource_id
        outputs["name"] = name

        handle = ResourceHandle(
            resource_type=resource_type,
            logical_name=logical_name,
            name=name,
            id=resource_id,
            inputs=inputs,
            outputs=outputs,
            options=options,
        )
        self._resources.append(handle)
        self._index[key] = handle
        logger.debug(f"[Memory] Created {resource_type} '{logical_name}' (name='{name}', id='{resource_id}')")
        return handle
