"""
Argument records of the network resource kinds.

Sub-records (address space, IP configurations, security rules...) are
plain records without a name field of their own; they only exist inside
the record of a top-level resource.
"""

from typing import Dict, List, Optional
from pydantic import Field

from .base import ArgsModel, ResourceReference


class SubResourceArgs(ArgsModel):
    """Reference to another resource by id."""
    id: Optional[ResourceReference] = None


class AddressSpaceArgs(ArgsModel):
    address_prefixes: Optional[List[str]] = None


class DhcpOptionsArgs(ArgsModel):
    dns_servers: Optional[List[str]] = None


class VirtualNetworkArgs(ArgsModel):
    name_field = "virtual_network_name"
    tags_field = "tags"

    virtual_network_name: Optional[str] = None
    resource_group_name: Optional[str] = None
    location: Optional[str] = None
    address_space: Optional[AddressSpaceArgs] = None
    dhcp_options: Optional[DhcpOptionsArgs] = None
    enable_ddos_protection: Optional[bool] = None
    enable_vm_protection: Optional[bool] = None
    tags: Optional[Dict[str, str]] = None


class ServiceEndpointArgs(ArgsModel):
    service: Optional[str] = None
    locations: Optional[List[str]] = None


class DelegationArgs(ArgsModel):
    name: Optional[str] = None
    service_name: Optional[str] = None


class SubnetArgs(ArgsModel):
    name_field = "subnet_name"

    subnet_name: Optional[str] = None
    resource_group_name: Optional[str] = None
    virtual_network_name: Optional[str] = None
    address_prefix: Optional[str] = None
    address_prefixes: Optional[List[str]] = None
    network_security_group: Optional[SubResourceArgs] = None
    route_table: Optional[SubResourceArgs] = None
    service_endpoints: Optional[List[ServiceEndpointArgs]] = None
    delegations: Optional[List[DelegationArgs]] = None
    private_endpoint_network_policies: Optional[str] = None
    private_link_service_network_policies: Optional[str] = None


class NetworkInterfaceDnsSettingsArgs(ArgsModel):
    dns_servers: Optional[List[str]] = None
    internal_dns_name_label: Optional[str] = None


class ExtendedLocationArgs(ArgsModel):
    name: Optional[str] = None
    type: Optional[str] = None


class NetworkInterfaceIPConfigurationArgs(ArgsModel):
    name: Optional[str] = None
    subnet: Optional[SubResourceArgs] = None
    primary: Optional[bool] = None
    private_ip_address: Optional[str] = Field(default=None, alias="privateIPAddress")
    private_ip_address_version: Optional[str] = Field(default=None, alias="privateIPAddressVersion")
    private_ip_allocation_method: Optional[str] = Field(default=None, alias="privateIPAllocationMethod")
    public_ip_address: Optional[SubResourceArgs] = Field(default=None, alias="publicIPAddress")
    application_security_groups: Optional[List[SubResourceArgs]] = None


class NetworkInterfaceArgs(ArgsModel):
    name_field = "network_interface_name"
    tags_field = "tags"

    network_interface_name: Optional[str] = None
    resource_group_name: Optional[str] = None
    location: Optional[str] = None
    ip_configurations: Optional[List[NetworkInterfaceIPConfigurationArgs]] = None
    dns_settings: Optional[NetworkInterfaceDnsSettingsArgs] = None
    enable_accelerated_networking: Optional[bool] = None
    enable_ip_forwarding: Optional[bool] = Field(default=None, alias="enableIPForwarding")
    extended_location: Optional[ExtendedLocationArgs] = None
    network_security_group: Optional[SubResourceArgs] = None
    tags: Optional[Dict[str, str]] = None


class ApplicationSecurityGroupArgs(ArgsModel):
    name_field = "application_security_group_name"
    tags_field = "tags"

    application_security_group_name: Optional[str] = None
    resource_group_name: Optional[str] = None
    location: Optional[str] = None
    tags: Optional[Dict[str, str]] = None


class SecurityRuleArgs(ArgsModel):
    name: Optional[str] = None
    priority: Optional[int] = None
    direction: Optional[str] = None
    access: Optional[str] = None
    protocol: Optional[str] = None
    description: Optional[str] = None
    source_address_prefix: Optional[str] = None
    source_port_range: Optional[str] = None
    destination_address_prefix: Optional[str] = None
    destination_port_range: Optional[str] = None
    destination_port_ranges: Optional[List[str]] = None


class NetworkSecurityGroupArgs(ArgsModel):
    name_field = "network_security_group_name"
    tags_field = "tags"

    network_security_group_name: Optional[str] = None
    resource_group_name: Optional[str] = None
    location: Optional[str] = None
    security_rules: Optional[List[SecurityRuleArgs]] = None
    tags: Optional[Dict[str, str]] = None
