"""
InfraBuilder Argument Records

Typed, mutable records of the desired state of each resource kind. Builders
fill them in; engines receive them through ``to_inputs()``.
"""

from .base import ArgsModel, ResourceReference
from .resources import ResourceGroupArgs
from .network import (
    SubResourceArgs,
    AddressSpaceArgs,
    DhcpOptionsArgs,
    VirtualNetworkArgs,
    ServiceEndpointArgs,
    DelegationArgs,
    SubnetArgs,
    NetworkInterfaceDnsSettingsArgs,
    ExtendedLocationArgs,
    NetworkInterfaceIPConfigurationArgs,
    NetworkInterfaceArgs,
    ApplicationSecurityGroupArgs,
    SecurityRuleArgs,
    NetworkSecurityGroupArgs,
)
from .containerservice import (
    AgentPoolUpgradeSettingsArgs,
    ManagedClusterAgentPoolProfileArgs,
    ManagedClusterSKUArgs,
    ManagedClusterServicePrincipalProfileArgs,
    ContainerServiceSshPublicKeyArgs,
    ContainerServiceSshConfigurationArgs,
    ContainerServiceLinuxProfileArgs,
    ManagedOutboundIPsArgs,
    ManagedClusterLoadBalancerProfileArgs,
    ContainerServiceNetworkProfileArgs,
    ManagedClusterAADProfileArgs,
    ManagedClusterAPIServerAccessProfileArgs,
    ManagedClusterAddonProfileArgs,
    ManagedClusterIdentityArgs,
    ManagedClusterArgs,
)
from .sql import SqlServerArgs, SqlSkuArgs, SqlDatabaseArgs

__all__ = [
    'ArgsModel',
    'ResourceReference',
    'ResourceGroupArgs',
    'SubResourceArgs',
    'AddressSpaceArgs',
    'DhcpOptionsArgs',
    'VirtualNetworkArgs',
    'ServiceEndpointArgs',
    'DelegationArgs',
    'SubnetArgs',
    'NetworkInterfaceDnsSettingsArgs',
    'ExtendedLocationArgs',
    'NetworkInterfaceIPConfigurationArgs',
    'NetworkInterfaceArgs',
    'ApplicationSecurityGroupArgs',
    'SecurityRuleArgs',
    'NetworkSecurityGroupArgs',
    'AgentPoolUpgradeSettingsArgs',
    'ManagedClusterAgentPoolProfileArgs',
    'ManagedClusterSKUArgs',
    'ManagedClusterServicePrincipalProfileArgs',
    'ContainerServiceSshPublicKeyArgs',
    'ContainerServiceSshConfigurationArgs',
    'ContainerServiceLinuxProfileArgs',
    'ManagedOutboundIPsArgs',
    'ManagedClusterLoadBalancerProfileArgs',
    'ContainerServiceNetworkProfileArgs',
    'ManagedClusterAADProfileArgs',
    'ManagedClusterAPIServerAccessProfileArgs',
    'ManagedClusterAddonProfileArgs',
    'ManagedClusterIdentityArgs',
    'ManagedClusterArgs',
    'SqlServerArgs',
    'SqlSkuArgs',
    'SqlDatabaseArgs',
]
