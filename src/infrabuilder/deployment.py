"""
InfraBuilder Deployment

A Deployment closes over one strategy context and one provisioning engine
and hands both to every builder it creates, so that all resources of a
deployment are named and tagged by the same policies.

Usage:
    deployment = Deployment.from_config("infra.yml")
    rg = deployment.resource_group("rg").location("westeurope").build()
    deployment.virtual_network("vnet1").resource_group(rg).location("westeurope") \\
        .address_space("172.16.0.0/24").build()
"""

from typing import Any, List, Optional
import logging

from .abstractions import Builder
from .args.base import ArgsModel
from .builders import (
    ApplicationSecurityGroupBuilder,
    ManagedClusterBuilder,
    NetworkInterfaceBuilder,
    NetworkSecurityGroupBuilder,
    ResourceGroupBuilder,
    SqlDatabaseBuilder,
    SqlServerBuilder,
    SubnetBuilder,
    VirtualNetworkBuilder,
)
from .config import Config
from .datacls import ResourceContext, ResourceHandle, ResourceOptions
from .engines import get_default_engine
from .protocols import ProvisioningEngineProtocol
from .registry import builder_registry
from .strategies import StrategyContext, get_strategies

logger = logging.getLogger(__name__)


class _RecordingEngine:
    """Delegates to the deployment's engine and remembers every handle it returns."""

    def __init__(self, engine: ProvisioningEngineProtocol):
        self.engine = engine
        self.handles: List[ResourceHandle] = []

    def create_resource(
        self,
        resource_type: str,
        logical_name: str,
        arguments: ArgsModel,
        options: Optional[ResourceOptions] = None,
    ) -> ResourceHandle:
        handle = self.engine.create_resource(resource_type, logical_name, arguments, options)
        self.handles.append(handle)
        return handle


class Deployment:
    """
    Factory of builders sharing one strategy context and one engine.

    When either is omitted, the process-wide default in effect at
    construction time is used.
    """

    def __init__(
        self,
        strategies: Optional[StrategyContext] = None,
        engine: Optional[ProvisioningEngineProtocol] = None,
    ):
        self.strategies = strategies if strategies is not None else get_strategies()
        self.engine = engine if engine is not None else get_default_engine()
        self._recorder = _RecordingEngine(self.engine)
        logger.debug(f"Deployment created with engine {type(self.engine).__name__}.")

    @classmethod
    def from_config(cls, config_path: str, apply_logging: bool = False) -> "Deployment":
        """
        Create a deployment from a YAML settings file.

        Args:
            config_path: Path of the settings file.
            apply_logging: Also configure logging from the file's `logging` section.
        """
        config = Config(config_path)
        if apply_logging:
            config.apply_logging()
        return cls(strategies=config.strategies(), engine=config.engine())

    @property
    def resources(self) -> List[ResourceHandle]:
        """Handles built through this deployment, in build order."""
        return list(self._recorder.handles)

    def builder(
        self,
        kind: str,
        name: str,
        context: Optional[ResourceContext] = None,
        arguments: Optional[ArgsModel] = None,
    ) -> Builder:
        """Create a builder for a registered resource kind, e.g. ``"virtual_network"``."""
        return self._create(builder_registry.builder(kind), name, context, arguments)

    def _create(self, builder_class, name: str, context: Optional[ResourceContext], arguments: Any):
        return builder_class(
            name,
            context=context,
            arguments=arguments,
            strategies=self.strategies,
            engine=self._recorder,
        )

    def resource_group(self, name, context=None, arguments=None) -> ResourceGroupBuilder:
        return self._create(ResourceGroupBuilder, name, context, arguments)

    def virtual_network(self, name, context=None, arguments=None) -> VirtualNetworkBuilder:
        return self._create(VirtualNetworkBuilder, name, context, arguments)

    def subnet(self, name, context=None, arguments=None) -> SubnetBuilder:
        return self._create(SubnetBuilder, name, context, arguments)

    def network_interface(self, name, context=None, arguments=None) -> NetworkInterfaceBuilder:
        return self._create(NetworkInterfaceBuilder, name, context, arguments)

    def application_security_group(self, name, context=None, arguments=None) -> ApplicationSecurityGroupBuilder:
        return self._create(ApplicationSecurityGroupBuilder, name, context, arguments)

    def network_security_group(self, name, context=None, arguments=None) -> NetworkSecurityGroupBuilder:
        return self._create(NetworkSecurityGroupBuilder, name, context, arguments)

    def managed_cluster(self, name, context=None, arguments=None) -> ManagedClusterBuilder:
        return self._create(ManagedClusterBuilder, name, context, arguments)

    def sql_server(self, name, context=None, arguments=None) -> SqlServerBuilder:
        return self._create(SqlServerBuilder, name, context, arguments)

    def sql_database(self, name, context=None, arguments=None) -> SqlDatabaseBuilder:
        return self._create(SqlDatabaseBuilder, name, context, arguments)
