"""
InfraBuilder Builders

Concrete builders, one per resource kind, and the nested builders of their
composite fragments. Every concrete Builder subclass exported here is picked
up by the builder registry.
"""

from .resources import ResourceGroupBuilder
from .network import (
    VirtualNetworkBuilder,
    SubnetBuilder,
    NetworkInterfaceBuilder,
    IpConfigurationBuilder,
    ApplicationSecurityGroupBuilder,
    NetworkSecurityGroupBuilder,
    SecurityRuleBuilder,
)
from .containerservice import ManagedClusterBuilder, AgentPoolBuilder
from .sql import SqlServerBuilder, SqlDatabaseBuilder

__all__ = [
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
]
