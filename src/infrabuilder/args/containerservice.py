"""
Argument records of the managed cluster and its sub-profiles.
"""

from typing import Dict, List, Optional
from pydantic import Field

from .base import ArgsModel, ResourceReference


# ============================================================================
# Agent pools
# ============================================================================

class AgentPoolUpgradeSettingsArgs(ArgsModel):
    max_surge: Optional[str] = None


class ManagedClusterAgentPoolProfileArgs(ArgsModel):
    """One agent pool of a cluster; ``name`` identifies it within the cluster."""

    name: Optional[str] = None
    count: Optional[int] = None
    vm_size: Optional[str] = None
    mode: Optional[str] = None
    type: Optional[str] = None
    availability_zones: Optional[List[str]] = None
    enable_auto_scaling: Optional[bool] = None
    min_count: Optional[int] = None
    max_count: Optional[int] = None
    max_pods: Optional[int] = None
    os_type: Optional[str] = None
    os_sku: Optional[str] = Field(default=None, alias="osSKU")
    os_disk_type: Optional[str] = None
    os_disk_size_gb: Optional[int] = Field(default=None, alias="osDiskSizeGB")
    kubelet_disk_type: Optional[str] = None
    enable_encryption_at_host: Optional[bool] = None
    enable_fips: Optional[bool] = Field(default=None, alias="enableFIPS")
    enable_node_public_ip: Optional[bool] = Field(default=None, alias="enableNodePublicIP")
    node_public_ip_prefix_id: Optional[ResourceReference] = Field(default=None, alias="nodePublicIPPrefixID")
    gpu_instance_profile: Optional[str] = None
    node_labels: Optional[Dict[str, str]] = None
    node_taints: Optional[List[str]] = None
    orchestrator_version: Optional[str] = None
    vnet_subnet_id: Optional[ResourceReference] = Field(default=None, alias="vnetSubnetID")
    pod_subnet_id: Optional[ResourceReference] = Field(default=None, alias="podSubnetID")
    proximity_placement_group_id: Optional[ResourceReference] = Field(default=None, alias="proximityPlacementGroupID")
    scale_set_eviction_policy: Optional[str] = None
    scale_set_priority: Optional[str] = None
    spot_max_price: Optional[float] = None
    upgrade_settings: Optional[AgentPoolUpgradeSettingsArgs] = None


# ============================================================================
# Cluster sub-profiles
# ============================================================================

class ManagedClusterSKUArgs(ArgsModel):
    name: Optional[str] = None
    tier: Optional[str] = None


class ManagedClusterServicePrincipalProfileArgs(ArgsModel):
    client_id: Optional[str] = None
    secret: Optional[str] = None


class ContainerServiceSshPublicKeyArgs(ArgsModel):
    key_data: Optional[str] = None


class ContainerServiceSshConfigurationArgs(ArgsModel):
    public_keys: Optional[List[ContainerServiceSshPublicKeyArgs]] = None


class ContainerServiceLinuxProfileArgs(ArgsModel):
    admin_username: Optional[str] = None
    ssh: Optional[ContainerServiceSshConfigurationArgs] = None


class ManagedOutboundIPsArgs(ArgsModel):
    count: Optional[int] = None


class ManagedClusterLoadBalancerProfileArgs(ArgsModel):
    managed_outbound_ips: Optional[ManagedOutboundIPsArgs] = Field(default=None, alias="managedOutboundIPs")
    allocated_outbound_ports: Optional[int] = None
    idle_timeout_in_minutes: Optional[int] = None


class ContainerServiceNetworkProfileArgs(ArgsModel):
    network_plugin: Optional[str] = None
    network_policy: Optional[str] = None
    pod_cidr: Optional[str] = None
    service_cidr: Optional[str] = None
    dns_service_ip: Optional[str] = Field(default=None, alias="dnsServiceIP")
    docker_bridge_cidr: Optional[str] = None
    load_balancer_sku: Optional[str] = None
    load_balancer_profile: Optional[ManagedClusterLoadBalancerProfileArgs] = None


class ManagedClusterAADProfileArgs(ArgsModel):
    managed: Optional[bool] = None
    enable_azure_rbac: Optional[bool] = Field(default=None, alias="enableAzureRBAC")
    admin_group_object_ids: Optional[List[str]] = Field(default=None, alias="adminGroupObjectIDs")
    tenant_id: Optional[str] = Field(default=None, alias="tenantID")


class ManagedClusterAPIServerAccessProfileArgs(ArgsModel):
    authorized_ip_ranges: Optional[List[str]] = Field(default=None, alias="authorizedIPRanges")
    enable_private_cluster: Optional[bool] = None
    private_dns_zone: Optional[str] = None


class ManagedClusterAddonProfileArgs(ArgsModel):
    enabled: Optional[bool] = None
    config: Optional[Dict[str, str]] = None


class ManagedClusterIdentityArgs(ArgsModel):
    type: Optional[str] = None


# ============================================================================
# Cluster
# ============================================================================

class ManagedClusterArgs(ArgsModel):
    name_field = "resource_name"
    tags_field = "tags"

    resource_name: Optional[str] = None
    resource_group_name: Optional[str] = None
    location: Optional[str] = None
    dns_prefix: Optional[str] = None
    kubernetes_version: Optional[str] = None
    enable_rbac: Optional[bool] = Field(default=None, alias="enableRBAC")
    node_resource_group: Optional[str] = None
    sku: Optional[ManagedClusterSKUArgs] = None
    identity: Optional[ManagedClusterIdentityArgs] = None
    service_principal_profile: Optional[ManagedClusterServicePrincipalProfileArgs] = None
    linux_profile: Optional[ContainerServiceLinuxProfileArgs] = None
    agent_pool_profiles: Optional[List[ManagedClusterAgentPoolProfileArgs]] = None
    network_profile: Optional[ContainerServiceNetworkProfileArgs] = None
    aad_profile: Optional[ManagedClusterAADProfileArgs] = None
    api_server_access_profile: Optional[ManagedClusterAPIServerAccessProfileArgs] = None
    addon_profiles: Optional[Dict[str, ManagedClusterAddonProfileArgs]] = None
    auto_scaler_profile: Optional[Dict[str, str]] = None
    tags: Optional[Dict[str, str]] = None
