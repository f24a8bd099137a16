"""
Builders of the network resource kinds.

- VirtualNetworkBuilder, SubnetBuilder
- NetworkInterfaceBuilder with its nested IpConfigurationBuilder
- ApplicationSecurityGroupBuilder
- NetworkSecurityGroupBuilder with its nested SecurityRuleBuilder
"""

from typing import Any, List, Optional
import logging

from ..abstractions import Builder, NestedBuilder, RegionalBuilder, is_unset
from ..args import (
    AddressSpaceArgs,
    ApplicationSecurityGroupArgs,
    DelegationArgs,
    DhcpOptionsArgs,
    ExtendedLocationArgs,
    NetworkInterfaceArgs,
    NetworkInterfaceDnsSettingsArgs,
    NetworkInterfaceIPConfigurationArgs,
    NetworkSecurityGroupArgs,
    SecurityRuleArgs,
    ServiceEndpointArgs,
    SubnetArgs,
    SubResourceArgs,
    VirtualNetworkArgs,
)
from ..datacls import ResourceHandle, ref_id, ref_name
from ..exceptions import ConflictingSettingsError, DuplicateFragmentError
from ..utils import fluent, value_of
from .. import constants
from ..constants import (
    IPAllocationMethod,
    IPVersion,
    NetworkPolicyState,
    SecurityRuleAccess,
    SecurityRuleDirection,
    SecurityRuleProtocol,
)

logger = logging.getLogger(__name__)

# Valid range of user-defined security rule priorities
MIN_RULE_PRIORITY = 100
MAX_RULE_PRIORITY = 4096


def _sub_resource(value: Any) -> SubResourceArgs:
    return SubResourceArgs(id=ref_id(value))


# ============================================================================
# Virtual networks and subnets
# ============================================================================

class VirtualNetworkBuilder(RegionalBuilder[VirtualNetworkArgs]):
    """Builder of a virtual network."""

    resource_type = constants.VIRTUAL_NETWORK_TYPE
    required_fields = ("resource_group_name", "location", "address_space")

    def defaults(self) -> VirtualNetworkArgs:
        return VirtualNetworkArgs()

    @fluent
    def address_space(self, *prefixes: str) -> "VirtualNetworkBuilder":
        if self.arguments.address_space is None:
            self.arguments.address_space = AddressSpaceArgs()
        self.arguments.address_space.append_to("address_prefixes", *prefixes)
        return self

    @fluent
    def dns_server(self, *servers: str) -> "VirtualNetworkBuilder":
        if self.arguments.dhcp_options is None:
            self.arguments.dhcp_options = DhcpOptionsArgs()
        self.arguments.dhcp_options.append_to("dns_servers", *servers)
        return self

    @fluent
    def enable_ddos_protection(self, flag: bool = True) -> "VirtualNetworkBuilder":
        self.arguments.enable_ddos_protection = flag
        return self

    @fluent
    def enable_vm_protection(self, flag: bool = True) -> "VirtualNetworkBuilder":
        self.arguments.enable_vm_protection = flag
        return self

    def _missing_fields(self) -> List[str]:
        missing = super()._missing_fields()
        space = self.arguments.address_space
        if space is not None and is_unset(space.address_prefixes):
            missing.append("address_space")
        return missing


class SubnetBuilder(Builder[SubnetArgs]):
    """
    Builder of a subnet inside an existing virtual network.

    Subnets carry no tags. Either ``address_prefix`` or ``address_prefixes``
    must be set.
    """

    resource_type = constants.SUBNET_TYPE
    required_fields = ("resource_group_name", "virtual_network_name")

    def defaults(self) -> SubnetArgs:
        return SubnetArgs(
            private_endpoint_network_policies=NetworkPolicyState.ENABLED.value,
            private_link_service_network_policies=NetworkPolicyState.ENABLED.value,
        )

    @fluent
    def resource_group(self, group: Any) -> "SubnetBuilder":
        self.arguments.resource_group_name = ref_name(group)
        return self

    @fluent
    def in_vnet(self, vnet: Any) -> "SubnetBuilder":
        """
        Place the subnet in a virtual network.

        A built network handle also supplies the resource group when none
        was set yet.
        """
        self.arguments.virtual_network_name = ref_name(vnet)
        if isinstance(vnet, ResourceHandle) and self.arguments.resource_group_name is None:
            self.arguments.resource_group_name = vnet.get("resourceGroupName")
        return self

    @fluent
    def address_prefix(self, prefix: str) -> "SubnetBuilder":
        self.arguments.address_prefix = prefix
        return self

    @fluent
    def address_prefixes(self, *prefixes: str) -> "SubnetBuilder":
        self.arguments.append_to("address_prefixes", *prefixes)
        return self

    @fluent
    def network_security_group(self, nsg: Any) -> "SubnetBuilder":
        self.arguments.network_security_group = _sub_resource(nsg)
        return self

    @fluent
    def route_table(self, route_table: Any) -> "SubnetBuilder":
        self.arguments.route_table = _sub_resource(route_table)
        return self

    @fluent
    def service_endpoint(self, service: str, *locations: str) -> "SubnetBuilder":
        endpoint = ServiceEndpointArgs(service=service, locations=list(locations) or None)
        self.arguments.append_to("service_endpoints", endpoint)
        return self

    @fluent
    def delegate_to(self, name: str, service: str) -> "SubnetBuilder":
        self.arguments.append_to("delegations", DelegationArgs(name=name, service_name=service))
        return self

    def _endpoint_policies(self, state: NetworkPolicyState) -> "SubnetBuilder":
        self._choose("private endpoint policies", state.value)
        self.arguments.private_endpoint_network_policies = state.value
        return self

    def _link_service_policies(self, state: NetworkPolicyState) -> "SubnetBuilder":
        self._choose("private link service policies", state.value)
        self.arguments.private_link_service_network_policies = state.value
        return self

    @fluent
    def enable_private_endpoint_policies(self) -> "SubnetBuilder":
        return self._endpoint_policies(NetworkPolicyState.ENABLED)

    @fluent
    def disable_private_endpoint_policies(self) -> "SubnetBuilder":
        return self._endpoint_policies(NetworkPolicyState.DISABLED)

    @fluent
    def enable_private_link_service_policies(self) -> "SubnetBuilder":
        return self._link_service_policies(NetworkPolicyState.ENABLED)

    @fluent
    def disable_private_link_service_policies(self) -> "SubnetBuilder":
        return self._link_service_policies(NetworkPolicyState.DISABLED)

    def _missing_fields(self) -> List[str]:
        missing = super()._missing_fields()
        if is_unset(self.arguments.address_prefix) and is_unset(self.arguments.address_prefixes):
            missing.append("address_prefix")
        return missing


# ============================================================================
# Network interfaces
# ============================================================================

class IpConfigurationBuilder(NestedBuilder["NetworkInterfaceBuilder", NetworkInterfaceIPConfigurationArgs]):
    """One IP configuration of a network interface."""

    collection_field = "ip_configurations"

    def defaults(self) -> NetworkInterfaceIPConfigurationArgs:
        return NetworkInterfaceIPConfigurationArgs(
            name=constants.DEFAULT_IP_CONFIGURATION_NAME,
            private_ip_allocation_method=IPAllocationMethod.DYNAMIC.value,
        )

    @fluent
    def name(self, name: str) -> "IpConfigurationBuilder":
        self.fragment.name = name
        return self

    @fluent
    def subnet(self, subnet: Any) -> "IpConfigurationBuilder":
        self.fragment.subnet = _sub_resource(subnet)
        return self

    @fluent
    def private_ip_address(self, address: str) -> "IpConfigurationBuilder":
        """Pin a private address; this switches allocation to Static."""
        self._choose("allocation", IPAllocationMethod.STATIC.value)
        self.fragment.private_ip_address = address
        self.fragment.private_ip_allocation_method = IPAllocationMethod.STATIC.value
        return self

    @fluent
    def dynamic_allocation(self) -> "IpConfigurationBuilder":
        self._choose("allocation", IPAllocationMethod.DYNAMIC.value)
        self.fragment.private_ip_address = None
        self.fragment.private_ip_allocation_method = IPAllocationMethod.DYNAMIC.value
        return self

    @fluent
    def address_version(self, version: IPVersion) -> "IpConfigurationBuilder":
        self.fragment.private_ip_address_version = value_of(version)
        return self

    @fluent
    def primary(self, flag: bool = True) -> "IpConfigurationBuilder":
        self.fragment.primary = flag
        return self

    @fluent
    def public_ip_address(self, public_ip: Any) -> "IpConfigurationBuilder":
        self.fragment.public_ip_address = _sub_resource(public_ip)
        return self

    @fluent
    def application_security_group(self, *groups: Any) -> "IpConfigurationBuilder":
        self.fragment.append_to("application_security_groups", *[_sub_resource(g) for g in groups])
        return self


class NetworkInterfaceBuilder(RegionalBuilder[NetworkInterfaceArgs]):
    """Builder of a network interface and its IP configurations."""

    resource_type = constants.NETWORK_INTERFACE_TYPE
    required_fields = ("resource_group_name", "location", "ip_configurations")

    def defaults(self) -> NetworkInterfaceArgs:
        return NetworkInterfaceArgs()

    def _dns_settings(self) -> NetworkInterfaceDnsSettingsArgs:
        if self.arguments.dns_settings is None:
            self.arguments.dns_settings = NetworkInterfaceDnsSettingsArgs()
        return self.arguments.dns_settings

    @fluent
    def dns_label(self, label: str) -> "NetworkInterfaceBuilder":
        self._dns_settings().internal_dns_name_label = label
        return self

    @fluent
    def dns_server(self, *servers: str) -> "NetworkInterfaceBuilder":
        self._dns_settings().append_to("dns_servers", *servers)
        return self

    @fluent
    def enable_accelerated_networking(self, flag: bool = True) -> "NetworkInterfaceBuilder":
        self.arguments.enable_accelerated_networking = flag
        return self

    @fluent
    def enable_ip_forwarding(self, flag: bool = True) -> "NetworkInterfaceBuilder":
        self.arguments.enable_ip_forwarding = flag
        return self

    @fluent
    def extended_location(self, name: str) -> "NetworkInterfaceBuilder":
        self.arguments.extended_location = ExtendedLocationArgs(
            name=name, type=constants.DEFAULT_EXTENDED_LOCATION_TYPE
        )
        return self

    @fluent
    def network_security_group(self, nsg: Any) -> "NetworkInterfaceBuilder":
        self.arguments.network_security_group = _sub_resource(nsg)
        return self

    @fluent
    def add_ip_configuration(self, name: Optional[str] = None) -> IpConfigurationBuilder:
        """Open a nested builder; its ``build()`` returns this interface builder."""
        nested = IpConfigurationBuilder(self)
        if name is not None:
            nested.name(name)
        return nested

    def _fold(self):
        configurations = self.arguments.ip_configurations or []
        self._ensure_unique(configurations, "name", "IP configuration")
        primaries = [c.name for c in configurations if c.primary]
        if len(primaries) > 1:
            raise ConflictingSettingsError(
                f"Network interface '{self.logical_name}' has more than one primary IP configuration: {primaries}"
            )


# ============================================================================
# Security groups
# ============================================================================

class ApplicationSecurityGroupBuilder(RegionalBuilder[ApplicationSecurityGroupArgs]):
    """Builder of an application security group."""

    resource_type = constants.APPLICATION_SECURITY_GROUP_TYPE
    required_fields = ("resource_group_name", "location")

    def defaults(self) -> ApplicationSecurityGroupArgs:
        return ApplicationSecurityGroupArgs()


class SecurityRuleBuilder(NestedBuilder["NetworkSecurityGroupBuilder", SecurityRuleArgs]):
    """
    One security rule of a network security group.

    Address prefixes and ports default to ``*``; the direction and the
    access must be chosen explicitly.
    """

    collection_field = "security_rules"
    required_fields = ("name", "priority", "direction", "access")

    def defaults(self) -> SecurityRuleArgs:
        return SecurityRuleArgs(
            protocol=SecurityRuleProtocol.ANY.value,
            source_address_prefix="*",
            source_port_range="*",
            destination_address_prefix="*",
            destination_port_range="*",
        )

    @fluent
    def name(self, name: str) -> "SecurityRuleBuilder":
        self.fragment.name = name
        return self

    @fluent
    def priority(self, priority: int) -> "SecurityRuleBuilder":
        self.fragment.priority = priority
        return self

    def _direction(self, direction: SecurityRuleDirection) -> "SecurityRuleBuilder":
        self._choose("direction", direction.value)
        self.fragment.direction = direction.value
        return self

    def _access(self, access: SecurityRuleAccess) -> "SecurityRuleBuilder":
        self._choose("access", access.value)
        self.fragment.access = access.value
        return self

    @fluent
    def inbound(self) -> "SecurityRuleBuilder":
        return self._direction(SecurityRuleDirection.INBOUND)

    @fluent
    def outbound(self) -> "SecurityRuleBuilder":
        return self._direction(SecurityRuleDirection.OUTBOUND)

    @fluent
    def allow(self) -> "SecurityRuleBuilder":
        return self._access(SecurityRuleAccess.ALLOW)

    @fluent
    def deny(self) -> "SecurityRuleBuilder":
        return self._access(SecurityRuleAccess.DENY)

    @fluent
    def protocol(self, protocol: SecurityRuleProtocol) -> "SecurityRuleBuilder":
        self.fragment.protocol = value_of(protocol)
        return self

    @fluent
    def source(self, prefix: str) -> "SecurityRuleBuilder":
        self.fragment.source_address_prefix = prefix
        return self

    @fluent
    def source_port(self, port_range: str) -> "SecurityRuleBuilder":
        self.fragment.source_port_range = port_range
        return self

    @fluent
    def destination(self, prefix: str) -> "SecurityRuleBuilder":
        self.fragment.destination_address_prefix = prefix
        return self

    @fluent
    def destination_port(self, port_range: str) -> "SecurityRuleBuilder":
        self.fragment.destination_port_range = port_range
        self.fragment.destination_port_ranges = None
        return self

    @fluent
    def destination_ports(self, *port_ranges: str) -> "SecurityRuleBuilder":
        # A single range and a list of ranges are mutually exclusive on the wire
        self.fragment.destination_port_range = None
        self.fragment.append_to("destination_port_ranges", *port_ranges)
        return self

    @fluent
    def description(self, description: str) -> "SecurityRuleBuilder":
        self.fragment.description = description
        return self

    def _check(self):
        priority = self.fragment.priority
        if not MIN_RULE_PRIORITY <= priority <= MAX_RULE_PRIORITY:
            raise ConflictingSettingsError(
                f"Security rule '{self.fragment.name}' has priority {priority}, "
                f"expected a value between {MIN_RULE_PRIORITY} and {MAX_RULE_PRIORITY}."
            )


class NetworkSecurityGroupBuilder(RegionalBuilder[NetworkSecurityGroupArgs]):
    """Builder of a network security group and its rules."""

    resource_type = constants.NETWORK_SECURITY_GROUP_TYPE
    required_fields = ("resource_group_name", "location")

    def defaults(self) -> NetworkSecurityGroupArgs:
        return NetworkSecurityGroupArgs()

    @fluent
    def add_security_rule(self, name: Optional[str] = None) -> SecurityRuleBuilder:
        """Open a nested builder; its ``build()`` returns this group builder."""
        nested = SecurityRuleBuilder(self)
        if name is not None:
            nested.name(name)
        return nested

    def _fold(self):
        rules = self.arguments.security_rules or []
        self._ensure_unique(rules, "name", "security rule")
        taken = {}
        for rule in rules:
            key = (rule.direction, rule.priority)
            if rule.priority is not None and key in taken:
                raise DuplicateFragmentError(
                    f"Security rules '{taken[key]}' and '{rule.name}' of '{self.logical_name}' "
                    f"share the {rule.direction} priority {rule.priority}."
                )
            taken[key] = rule.name
