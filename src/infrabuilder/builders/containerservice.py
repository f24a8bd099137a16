"""
Builders of a managed Kubernetes cluster.

ManagedClusterBuilder keeps its sub-profiles (network, load balancer, AAD,
API server access, addons, auto-scaler) pending on the builder and folds
them into the record when it is built; sub-profiles left empty stay unset.
Agent pools are configured through the nested AgentPoolBuilder.
"""

from typing import Any, Dict, Optional, Type, TypeVar
import logging

from ..abstractions import NestedBuilder, RegionalBuilder
from ..args import (
    AgentPoolUpgradeSettingsArgs,
    ArgsModel,
    ContainerServiceLinuxProfileArgs,
    ContainerServiceNetworkProfileArgs,
    ContainerServiceSshConfigurationArgs,
    ContainerServiceSshPublicKeyArgs,
    ManagedClusterAADProfileArgs,
    ManagedClusterAddonProfileArgs,
    ManagedClusterAgentPoolProfileArgs,
    ManagedClusterAPIServerAccessProfileArgs,
    ManagedClusterArgs,
    ManagedClusterIdentityArgs,
    ManagedClusterLoadBalancerProfileArgs,
    ManagedClusterServicePrincipalProfileArgs,
    ManagedClusterSKUArgs,
    ManagedOutboundIPsArgs,
)
from ..datacls import ref_id
from ..exceptions import ConflictingSettingsError
from ..utils import fluent, value_of
from .. import constants
from ..constants import (
    AgentPoolMode,
    AgentPoolType,
    GPUInstanceProfile,
    KubeletDiskType,
    LoadBalancerSku,
    ManagedClusterSKUName,
    ManagedClusterSKUTier,
    NetworkPlugin,
    NetworkPolicy,
    OSDiskType,
    OSSKU,
    OSType,
    ResourceIdentityType,
    ScaleSetEvictionPolicy,
    ScaleSetPriority,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=ArgsModel)


def _or_new(value: Optional[M], cls: Type[M]) -> M:
    return value if value is not None else cls()


def _unless_empty(profile: Optional[M]) -> Optional[M]:
    if profile is None or profile.is_empty():
        return None
    return profile


# ============================================================================
# Agent pools
# ============================================================================

class AgentPoolBuilder(NestedBuilder["ManagedClusterBuilder", ManagedClusterAgentPoolProfileArgs]):
    """
    One agent pool of a managed cluster.

    Starts from the default pool (three ``Standard_DS2_v2`` Linux nodes in
    System mode) and folds into the cluster's ``agent_pool_profiles``.
    """

    collection_field = "agent_pool_profiles"

    def defaults(self) -> ManagedClusterAgentPoolProfileArgs:
        return ManagedClusterAgentPoolProfileArgs(**constants.AGENT_POOL_DEFAULTS)

    @fluent
    def name(self, name: str) -> "AgentPoolBuilder":
        self.fragment.name = name
        return self

    @fluent
    def availability_zones(self, *zones: Any) -> "AgentPoolBuilder":
        if not zones:
            return self
        self.fragment.append_to("availability_zones", *[str(z) for z in zones])
        return self

    @fluent
    def node_count(self, count: int) -> "AgentPoolBuilder":
        self.fragment.count = count
        return self

    @fluent
    def enable_auto_scaling(self, flag: bool = True) -> "AgentPoolBuilder":
        self.fragment.enable_auto_scaling = flag
        return self

    @fluent
    def min_count(self, count: int) -> "AgentPoolBuilder":
        self.fragment.min_count = count
        return self

    @fluent
    def max_count(self, count: int) -> "AgentPoolBuilder":
        self.fragment.max_count = count
        return self

    @fluent
    def enable_node_public_ip(self, prefix_id: Any = None) -> "AgentPoolBuilder":
        self.fragment.enable_node_public_ip = True
        if prefix_id is not None:
            self.fragment.node_public_ip_prefix_id = ref_id(prefix_id)
        return self

    @fluent
    def max_pods(self, count: int) -> "AgentPoolBuilder":
        self.fragment.max_pods = count
        return self

    @fluent
    def mode(self, mode: AgentPoolMode) -> "AgentPoolBuilder":
        self.fragment.mode = value_of(mode)
        return self

    @fluent
    def os_disk_size(self, size_gb: int) -> "AgentPoolBuilder":
        self.fragment.os_disk_size_gb = size_gb
        return self

    @fluent
    def os_disk_type(self, disk_type: OSDiskType) -> "AgentPoolBuilder":
        self.fragment.os_disk_type = value_of(disk_type)
        return self

    @fluent
    def with_linux(self, os_sku: Optional[OSSKU] = None) -> "AgentPoolBuilder":
        self._choose("operating system", OSType.LINUX.value)
        self.fragment.os_type = OSType.LINUX.value
        self.fragment.os_sku = value_of(os_sku)
        return self

    @fluent
    def with_windows(self) -> "AgentPoolBuilder":
        self._choose("operating system", OSType.WINDOWS.value)
        self.fragment.os_type = OSType.WINDOWS.value
        self.fragment.os_sku = None
        return self

    @fluent
    def type(self, pool_type: AgentPoolType) -> "AgentPoolBuilder":
        self.fragment.type = value_of(pool_type)
        return self

    @fluent
    def vm_size(self, size: str) -> "AgentPoolBuilder":
        self.fragment.vm_size = size
        return self

    def _encryption_at_host(self, flag: bool) -> "AgentPoolBuilder":
        self._choose("encryption at host", "enabled" if flag else "disabled")
        self.fragment.enable_encryption_at_host = flag
        return self

    @fluent
    def enable_encryption_at_host(self) -> "AgentPoolBuilder":
        return self._encryption_at_host(True)

    @fluent
    def disable_encryption_at_host(self) -> "AgentPoolBuilder":
        return self._encryption_at_host(False)

    def _fips(self, flag: bool) -> "AgentPoolBuilder":
        self._choose("FIPS", "enabled" if flag else "disabled")
        self.fragment.enable_fips = flag
        return self

    @fluent
    def enable_fips(self) -> "AgentPoolBuilder":
        return self._fips(True)

    @fluent
    def disable_fips(self) -> "AgentPoolBuilder":
        return self._fips(False)

    @fluent
    def gpu_instance_profile(self, profile: GPUInstanceProfile) -> "AgentPoolBuilder":
        self.fragment.gpu_instance_profile = value_of(profile)
        return self

    @fluent
    def kubelet_disk_type(self, disk_type: KubeletDiskType) -> "AgentPoolBuilder":
        self.fragment.kubelet_disk_type = value_of(disk_type)
        return self

    @fluent
    def add_node_label(self, key: str, value: str) -> "AgentPoolBuilder":
        self.fragment.put_in("node_labels", key, value)
        return self

    @fluent
    def add_node_taint(self, *taints: str) -> "AgentPoolBuilder":
        self.fragment.append_to("node_taints", *taints)
        return self

    @fluent
    def orchestrator_version(self, version: str) -> "AgentPoolBuilder":
        self.fragment.orchestrator_version = version
        return self

    @fluent
    def pod_subnet_id(self, subnet: Any) -> "AgentPoolBuilder":
        self.fragment.pod_subnet_id = ref_id(subnet)
        return self

    @fluent
    def proximity_placement_group_id(self, group: Any) -> "AgentPoolBuilder":
        self.fragment.proximity_placement_group_id = ref_id(group)
        return self

    @fluent
    def scale_set_eviction_policy(self, policy: ScaleSetEvictionPolicy) -> "AgentPoolBuilder":
        self.fragment.scale_set_eviction_policy = value_of(policy)
        return self

    @fluent
    def scale_set_priority(self, priority: ScaleSetPriority) -> "AgentPoolBuilder":
        self.fragment.scale_set_priority = value_of(priority)
        return self

    @fluent
    def spot_max_price(self, price: float) -> "AgentPoolBuilder":
        self.fragment.spot_max_price = price
        return self

    @fluent
    def nodes_added_on_upgrade(self, max_surge: Any) -> "AgentPoolBuilder":
        """Surge during upgrades, as a node count or a percentage such as ``"33%"``."""
        self.fragment.upgrade_settings = AgentPoolUpgradeSettingsArgs(max_surge=str(max_surge))
        return self

    @fluent
    def subnet_id(self, subnet: Any) -> "AgentPoolBuilder":
        self.fragment.vnet_subnet_id = ref_id(subnet)
        return self

    def _check(self):
        pool = self.fragment
        if not pool.enable_auto_scaling:
            return
        if pool.min_count is None or pool.max_count is None:
            raise ConflictingSettingsError(
                f"Agent pool '{pool.name}' enables auto-scaling without both min_count and max_count."
            )
        if pool.min_count > pool.max_count:
            raise ConflictingSettingsError(
                f"Agent pool '{pool.name}' has min_count {pool.min_count} above max_count {pool.max_count}."
            )
        if pool.count is not None and not pool.min_count <= pool.count <= pool.max_count:
            raise ConflictingSettingsError(
                f"Agent pool '{pool.name}' has count {pool.count} outside [{pool.min_count}, {pool.max_count}]."
            )


# ============================================================================
# Cluster
# ============================================================================

class ManagedClusterBuilder(RegionalBuilder[ManagedClusterArgs]):
    """
    Builder of a managed Kubernetes cluster.

    Defaults to Kubernetes 1.19.9 with RBAC and the kubenet network plugin.
    At least one agent pool must run in System mode.
    """

    resource_type = constants.MANAGED_CLUSTER_TYPE
    required_fields = ("resource_group_name", "location", "dns_prefix", "agent_pool_profiles")

    def __init__(self, name, context=None, arguments=None, strategies=None, engine=None):
        super().__init__(name, context=context, arguments=arguments, strategies=strategies, engine=engine)
        args = self.arguments
        self._network_profile = _or_new(args.network_profile, ContainerServiceNetworkProfileArgs)
        self._load_balancer_profile = _or_new(
            self._network_profile.load_balancer_profile, ManagedClusterLoadBalancerProfileArgs
        )
        self._aad_profile = _or_new(args.aad_profile, ManagedClusterAADProfileArgs)
        self._api_server_access_profile = _or_new(
            args.api_server_access_profile, ManagedClusterAPIServerAccessProfileArgs
        )
        self._addon_profiles: Dict[str, ManagedClusterAddonProfileArgs] = dict(args.addon_profiles or {})
        self._auto_scaler_profile: Dict[str, str] = dict(args.auto_scaler_profile or {})

    def defaults(self) -> ManagedClusterArgs:
        return ManagedClusterArgs(
            kubernetes_version=constants.DEFAULT_KUBERNETES_VERSION,
            enable_rbac=True,
            network_profile=ContainerServiceNetworkProfileArgs(network_plugin=NetworkPlugin.KUBENET.value),
        )

    # --- Cluster properties ---

    @fluent
    def dns_prefix(self, prefix: str) -> "ManagedClusterBuilder":
        self.arguments.dns_prefix = prefix
        return self

    @fluent
    def kubernetes_version(self, version: str) -> "ManagedClusterBuilder":
        self.arguments.kubernetes_version = version
        return self

    @fluent
    def cluster_sku(self, name: ManagedClusterSKUName, tier: ManagedClusterSKUTier) -> "ManagedClusterBuilder":
        self.arguments.sku = ManagedClusterSKUArgs(name=value_of(name), tier=value_of(tier))
        return self

    @fluent
    def enable_rbac(self, flag: bool = True) -> "ManagedClusterBuilder":
        self.arguments.enable_rbac = flag
        return self

    @fluent
    def node_resource_group(self, group: str) -> "ManagedClusterBuilder":
        self.arguments.node_resource_group = group
        return self

    # --- Identity ---

    @fluent
    def with_existing_service_principal(self, client_id: str, secret: str) -> "ManagedClusterBuilder":
        self._choose("identity", "service principal")
        self.arguments.service_principal_profile = ManagedClusterServicePrincipalProfileArgs(
            client_id=client_id, secret=secret
        )
        self.arguments.identity = None
        return self

    @fluent
    def with_system_assigned_identity(self) -> "ManagedClusterBuilder":
        self._choose("identity", "system assigned")
        self.arguments.identity = ManagedClusterIdentityArgs(type=ResourceIdentityType.SYSTEM_ASSIGNED.value)
        self.arguments.service_principal_profile = None
        return self

    @fluent
    def with_linux_profile(self, admin_username: str, *ssh_public_keys: str) -> "ManagedClusterBuilder":
        self.arguments.linux_profile = ContainerServiceLinuxProfileArgs(
            admin_username=admin_username or constants.DEFAULT_ADMIN_USERNAME,
            ssh=ContainerServiceSshConfigurationArgs(
                public_keys=[ContainerServiceSshPublicKeyArgs(key_data=key) for key in ssh_public_keys]
            ),
        )
        return self

    # --- Agent pools ---

    @fluent
    def add_agent_pool(self, name: Optional[str] = None) -> AgentPoolBuilder:
        """Open a nested builder; its ``build()`` returns this cluster builder."""
        nested = AgentPoolBuilder(self)
        if name is not None:
            nested.name(name)
        return nested

    @fluent
    def with_default_agent_pool(self) -> "ManagedClusterBuilder":
        return self.add_agent_pool().build()

    # --- Network profile ---

    @fluent
    def network_plugin_type(self, plugin: NetworkPlugin) -> "ManagedClusterBuilder":
        self._network_profile.network_plugin = value_of(plugin)
        return self

    @fluent
    def network_policy(self, policy: NetworkPolicy) -> "ManagedClusterBuilder":
        self._network_profile.network_policy = value_of(policy)
        return self

    @fluent
    def pod_cidr(self, cidr: str) -> "ManagedClusterBuilder":
        self._network_profile.pod_cidr = cidr
        return self

    @fluent
    def service_cidr(self, cidr: str) -> "ManagedClusterBuilder":
        self._network_profile.service_cidr = cidr
        return self

    @fluent
    def dns_service_ip(self, address: str) -> "ManagedClusterBuilder":
        self._network_profile.dns_service_ip = address
        return self

    @fluent
    def docker_bridge_cidr(self, cidr: str) -> "ManagedClusterBuilder":
        self._network_profile.docker_bridge_cidr = cidr
        return self

    @fluent
    def load_balancer_sku(self, sku: LoadBalancerSku) -> "ManagedClusterBuilder":
        self._network_profile.load_balancer_sku = value_of(sku)
        return self

    @fluent
    def managed_outbound_ip_count(self, count: int) -> "ManagedClusterBuilder":
        self._load_balancer_profile.managed_outbound_ips = ManagedOutboundIPsArgs(count=count)
        return self

    @fluent
    def allocated_outbound_ports(self, ports: int) -> "ManagedClusterBuilder":
        self._load_balancer_profile.allocated_outbound_ports = ports
        return self

    @fluent
    def outbound_idle_timeout(self, minutes: int) -> "ManagedClusterBuilder":
        self._load_balancer_profile.idle_timeout_in_minutes = minutes
        return self

    # --- Security ---

    @fluent
    def enable_managed_aad(
        self, *admin_group_ids: str, azure_rbac: bool = False, tenant_id: Optional[str] = None
    ) -> "ManagedClusterBuilder":
        self._aad_profile.managed = True
        self._aad_profile.enable_azure_rbac = azure_rbac
        if admin_group_ids:
            self._aad_profile.append_to("admin_group_object_ids", *admin_group_ids)
        if tenant_id is not None:
            self._aad_profile.tenant_id = tenant_id
        return self

    @fluent
    def add_authorized_ip_range(self, *ranges: str) -> "ManagedClusterBuilder":
        self._api_server_access_profile.append_to("authorized_ip_ranges", *ranges)
        return self

    @fluent
    def enable_private_cluster(self, private_dns_zone: Optional[str] = None) -> "ManagedClusterBuilder":
        self._api_server_access_profile.enable_private_cluster = True
        if private_dns_zone is not None:
            self._api_server_access_profile.private_dns_zone = private_dns_zone
        return self

    # --- Addons and auto-scaler ---

    @fluent
    def add_addon(self, name: str, enabled: bool = True, **config: Any) -> "ManagedClusterBuilder":
        self._addon_profiles[name] = ManagedClusterAddonProfileArgs(
            enabled=enabled,
            config={key: str(value) for key, value in config.items()} or None,
        )
        return self

    @fluent
    def auto_scaler_setting(self, **settings: Any) -> "ManagedClusterBuilder":
        """Cluster auto-scaler settings, e.g. ``scan_interval="20s"`` (sent as ``scan-interval``)."""
        for key, value in settings.items():
            self._auto_scaler_profile[key.replace("_", "-")] = str(value)
        return self

    # --- Build ---

    def _fold(self):
        args = self.arguments
        self._network_profile.load_balancer_profile = _unless_empty(self._load_balancer_profile)
        args.network_profile = _unless_empty(self._network_profile)
        args.aad_profile = _unless_empty(self._aad_profile)
        args.api_server_access_profile = _unless_empty(self._api_server_access_profile)
        args.addon_profiles = self._addon_profiles or None
        args.auto_scaler_profile = self._auto_scaler_profile or None

        pools = args.agent_pool_profiles or []
        self._ensure_unique(pools, "name", "agent pool")
        if pools and not any(p.mode == AgentPoolMode.SYSTEM.value for p in pools):
            raise ConflictingSettingsError(
                f"Managed cluster '{self.logical_name}' needs at least one agent pool in System mode."
            )
