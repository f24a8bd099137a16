"""
InfraBuilder Framework

Fluent builders that assemble the desired state of cloud resources and hand
finished argument records to a provisioning engine, with naming and tagging
policies applied uniformly across a deployment.

Main modules:
- abstractions: Builder and NestedBuilder base classes
- builders: Concrete builders per resource kind
- args: Argument records per resource kind
- strategies: Naming and tagging strategies and the strategy context
- datacls: Resource options, handles and contexts
- engines: In-memory and Pulumi provisioning engines
- config: Settings file loading and validation
- deployment: Builder factory bound to one strategy context and one engine
- registry: Dynamic builder discovery

Quick start example:
```python
from infrabuilder import Deployment, PatternNamingStrategy, StrategyContext

deployment = Deployment(strategies=StrategyContext(naming=PatternNamingStrategy("{name}-dev")))
cluster = (
    deployment.managed_cluster("mc1")
    .resource_group("rg1").location("westeurope").dns_prefix("mc1")
    .add_agent_pool("ap1").availability_zones(1, 2, 3).add_node_label("test", "label").build()
    .build()
)
```
"""

from .protocols import NamingStrategyProtocol, TaggingStrategyProtocol, ProvisioningEngineProtocol
from .abstractions import Builder, NestedBuilder, RegionalBuilder
from .strategies import (
    NamingStrategy,
    TaggingStrategy,
    PatternNamingStrategy,
    StaticTaggingStrategy,
    StrategyContext,
    configure_strategies,
    get_strategies,
    reset_strategies,
)
from .datacls import ResourceContext, ResourceHandle, ResourceOptions
from .engines import InMemoryEngine, create_engine, get_default_engine, set_default_engine, reset_default_engine
from .builders import (
    ResourceGroupBuilder,
    VirtualNetworkBuilder,
    SubnetBuilder,
    NetworkInterfaceBuilder,
    IpConfigurationBuilder,
    ApplicationSecurityGroupBuilder,
    NetworkSecurityGroupBuilder,
    SecurityRuleBuilder,
    ManagedClusterBuilder,
    AgentPoolBuilder,
    SqlServerBuilder,
    SqlDatabaseBuilder,
)
from .registry import builder_registry
from .config import Config, ConfigModel
from .deployment import Deployment
from .exceptions import (
    InfraBuilderError,
    ConfigurationError,
    ValidationError,
    MissingFieldError,
    InvalidValueError,
    StrategyError,
    DefinitionError,
    ProvisioningError,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    '__version__',
    # Protocols
    'NamingStrategyProtocol',
    'TaggingStrategyProtocol',
    'ProvisioningEngineProtocol',
    # Abstractions
    'Builder',
    'NestedBuilder',
    'RegionalBuilder',
    # Strategies
    'NamingStrategy',
    'TaggingStrategy',
    'PatternNamingStrategy',
    'StaticTaggingStrategy',
    'StrategyContext',
    'configure_strategies',
    'get_strategies',
    'reset_strategies',
    # Data classes
    'ResourceContext',
    'ResourceHandle',
    'ResourceOptions',
    # Engines
    'InMemoryEngine',
    'create_engine',
    'get_default_engine',
    'set_default_engine',
    'reset_default_engine',
    # Builders
    'ResourceGroupBuilder',
    'VirtualNetworkBuilder',
    'SubnetBuilder',
    'NetworkInterfaceBuilder',
    'IpConfigurationBuilder',
    'ApplicationSecurityGroupBuilder',
    'NetworkSecurityGroupBuilder',
    'SecurityRuleBuilder',
    'ManagedClusterBuilder',
    'AgentPoolBuilder',
    'SqlServerBuilder',
    'SqlDatabaseBuilder',
    # Registry
    'builder_registry',
    # Config
    'Config',
    'ConfigModel',
    # Deployment
    'Deployment',
    # Exceptions
    'InfraBuilderError',
    'ConfigurationError',
    'ValidationError',
    'MissingFieldError',
    'InvalidValueError',
    'StrategyError',
    'DefinitionError',
    'ProvisioningError',
]
