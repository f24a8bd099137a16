import pytest

from infrabuilder.builders import (
    ApplicationSecurityGroupBuilder,
    NetworkInterfaceBuilder,
    NetworkSecurityGroupBuilder,
    ResourceGroupBuilder,
    SubnetBuilder,
    VirtualNetworkBuilder,
)
from infrabuilder.constants import IPVersion, SecurityRuleProtocol
from infrabuilder.exceptions import (
    BuilderConsumedError,
    ConflictingSettingsError,
    DuplicateFragmentError,
    IncompleteFragmentError,
    InvalidValueError,
    MissingFieldError,
)


@pytest.fixture
def rg(engine):
    return ResourceGroupBuilder("rg1", engine=engine).location("westeurope").build()


@pytest.fixture
def vnet(engine, rg):
    return (
        VirtualNetworkBuilder("vnet1", engine=engine)
        .resource_group(rg)
        .location("westeurope")
        .address_space("172.16.0.0/24")
        .build()
    )


class TestVirtualNetwork:
    """Tests for virtual network builders."""

    def test_references_accept_handles(self, vnet):
        assert vnet.inputs["resourceGroupName"] == "rg1"

    def test_address_space_accumulates(self, engine):
        handle = (
            VirtualNetworkBuilder("vnet2", engine=engine)
            .resource_group("rg1")
            .location("westeurope")
            .address_space("10.0.0.0/16")
            .address_space("10.1.0.0/16", "10.2.0.0/16")
            .dns_server("10.0.0.4")
            .enable_ddos_protection()
            .build()
        )

        assert handle.get("addressSpace") == {"addressPrefixes": ["10.0.0.0/16", "10.1.0.0/16", "10.2.0.0/16"]}
        assert handle.inputs["dhcpOptions"] == {"dnsServers": ["10.0.0.4"]}
        assert handle.inputs["enableDdosProtection"] is True


class TestSubnet:
    """Tests for subnet builders."""

    def test_subnet_from_vnet_handle(self, engine, vnet):
        handle = SubnetBuilder("snet1", engine=engine).in_vnet(vnet).address_prefix("172.16.0.0/26").build()

        assert handle.inputs["virtualNetworkName"] == "vnet1"
        assert handle.inputs["resourceGroupName"] == "rg1"
        assert handle.inputs["subnetName"] == "snet1"
        assert handle.inputs["privateEndpointNetworkPolicies"] == "Enabled"
        assert handle.inputs["privateLinkServiceNetworkPolicies"] == "Enabled"
        assert "tags" not in handle.inputs

    def test_subnet_needs_an_address_prefix(self, engine):
        with pytest.raises(MissingFieldError) as excinfo:
            SubnetBuilder("snet1", engine=engine).resource_group("rg1").in_vnet("vnet1").build()
        assert excinfo.value.fields == ["address_prefix"]

    def test_address_prefixes_satisfy_requirement(self, engine):
        handle = (
            SubnetBuilder("snet1", engine=engine)
            .resource_group("rg1")
            .in_vnet("vnet1")
            .address_prefixes("172.16.0.0/27", "172.16.0.32/27")
            .build()
        )
        assert handle.inputs["addressPrefixes"] == ["172.16.0.0/27", "172.16.0.32/27"]

    def test_endpoints_and_delegations(self, engine):
        handle = (
            SubnetBuilder("snet1", engine=engine)
            .resource_group("rg1")
            .in_vnet("vnet1")
            .address_prefix("172.16.0.0/26")
            .service_endpoint("Microsoft.Sql", "westeurope")
            .service_endpoint("Microsoft.Storage")
            .delegate_to("aci", "Microsoft.ContainerInstance/containerGroups")
            .disable_private_link_service_policies()
            .network_security_group("/subscriptions/s/nsg/nsg1")
            .build()
        )

        assert handle.inputs["serviceEndpoints"] == [
            {"service": "Microsoft.Sql", "locations": ["westeurope"]},
            {"service": "Microsoft.Storage"},
        ]
        assert handle.inputs["delegations"] == [
            {"name": "aci", "serviceName": "Microsoft.ContainerInstance/containerGroups"}
        ]
        assert handle.inputs["privateLinkServiceNetworkPolicies"] == "Disabled"
        assert handle.inputs["networkSecurityGroup"] == {"id": "/subscriptions/s/nsg/nsg1"}


class TestNetworkInterface:
    """Tests for network interfaces and their nested IP configurations."""

    @pytest.fixture
    def nic(self, engine):
        return NetworkInterfaceBuilder("nic1", engine=engine).resource_group("rg1").location("westeurope")

    def test_ip_configuration_folds_into_interface(self, nic, engine, vnet):
        subnet = SubnetBuilder("snet1", engine=engine).in_vnet(vnet).address_prefix("172.16.0.0/26").build()

        returned = nic.add_ip_configuration().subnet(subnet).primary().build()
        assert returned is nic

        handle = nic.dns_label("nic1").enable_accelerated_networking().build()
        assert handle.inputs["ipConfigurations"] == [
            {
                "name": "ipconfig1",
                "subnet": {"id": "snet1_id"},
                "primary": True,
                "privateIPAllocationMethod": "Dynamic",
            }
        ]
        assert handle.inputs["dnsSettings"] == {"internalDnsNameLabel": "nic1"}
        assert handle.inputs["enableAcceleratedNetworking"] is True

    def test_static_address_switches_allocation(self, nic):
        nic.add_ip_configuration("static").private_ip_address("172.16.0.10").address_version(IPVersion.IPV4).build()
        configuration = nic.arguments.ip_configurations[0]

        assert configuration.private_ip_allocation_method == "Static"
        assert configuration.to_inputs()["privateIPAddress"] == "172.16.0.10"
        assert configuration.to_inputs()["privateIPAddressVersion"] == "IPv4"

    def test_dynamic_allocation_clears_address(self, nic):
        nic.add_ip_configuration().private_ip_address("172.16.0.10").dynamic_allocation().build()
        configuration = nic.arguments.ip_configurations[0]

        assert configuration.private_ip_address is None
        assert configuration.private_ip_allocation_method == "Dynamic"

    def test_duplicate_configuration_names_fail(self, nic):
        nic.add_ip_configuration().build()
        nic.add_ip_configuration().build()

        with pytest.raises(DuplicateFragmentError, match="ipconfig1"):
            nic.build()

    def test_two_primary_configurations_fail(self, nic):
        nic.add_ip_configuration("a").primary().build()
        nic.add_ip_configuration("b").primary().build()

        with pytest.raises(ConflictingSettingsError, match="more than one primary"):
            nic.build()

    def test_interface_without_configuration_fails(self, nic):
        with pytest.raises(MissingFieldError) as excinfo:
            nic.build()
        assert excinfo.value.fields == ["ip_configurations"]

    def test_unfolded_configuration_is_detached_by_failed_build(self, nic):
        dangling = nic.add_ip_configuration("ipconfig1").primary()
        with pytest.raises(MissingFieldError):
            nic.build()

        assert dangling.parent is None
        with pytest.raises(BuilderConsumedError):
            dangling.build()

    def test_extended_location(self, nic):
        handle = nic.add_ip_configuration().build().extended_location("microsoftlosangeles1").build()
        assert handle.inputs["extendedLocation"] == {"name": "microsoftlosangeles1", "type": "EdgeZone"}

    def test_application_security_groups(self, nic, engine):
        asg = (
            ApplicationSecurityGroupBuilder("asg1", engine=engine)
            .resource_group("rg1")
            .location("westeurope")
            .build()
        )
        nic.add_ip_configuration().application_security_group(asg, "/subscriptions/s/asg/asg2").build()

        assert nic.arguments.ip_configurations[0].to_inputs()["applicationSecurityGroups"] == [
            {"id": "asg1_id"},
            {"id": "/subscriptions/s/asg/asg2"},
        ]


class TestNetworkSecurityGroup:
    """Tests for security groups and their nested rules."""

    @pytest.fixture
    def nsg(self, engine):
        return NetworkSecurityGroupBuilder("nsg1", engine=engine).resource_group("rg1").location("westeurope")

    def test_rules_fold_in_order(self, nsg):
        handle = (
            nsg.add_security_rule("allow-https")
            .priority(100).inbound().allow().protocol(SecurityRuleProtocol.TCP).destination_port("443")
            .build()
            .add_security_rule("deny-all")
            .priority(4096).inbound().deny().description("Deny everything else")
            .build()
            .build()
        )
        rules = handle.inputs["securityRules"]

        assert [r["name"] for r in rules] == ["allow-https", "deny-all"]
        assert rules[0]["protocol"] == "Tcp"
        assert rules[0]["destinationPortRange"] == "443"
        assert rules[1]["access"] == "Deny"
        assert rules[1]["sourceAddressPrefix"] == "*"

    def test_port_list_replaces_single_port(self, nsg):
        nsg.add_security_rule("web").priority(110).inbound().allow().destination_ports("80", "443").build()
        rule = nsg.arguments.security_rules[0]

        assert rule.destination_port_range is None
        assert rule.destination_port_ranges == ["80", "443"]

    def test_rule_needs_direction_and_access(self, nsg):
        with pytest.raises(IncompleteFragmentError, match="direction, access"):
            nsg.add_security_rule("r").priority(100).build()

    def test_priority_out_of_range_fails(self, nsg):
        with pytest.raises(ConflictingSettingsError, match="between 100 and 4096"):
            nsg.add_security_rule("r").priority(50).inbound().allow().build()

    def test_non_integer_priority_raises_error(self, nsg):
        rule = nsg.add_security_rule("r1")
        with pytest.raises(InvalidValueError, match="priority"):
            rule.priority("high")

        assert rule.fragment.priority is None
        with pytest.raises(IncompleteFragmentError, match="priority"):
            rule.inbound().allow().build()

    def test_numeric_string_priority_is_coerced(self, nsg):
        nsg.add_security_rule("r1").priority("200").inbound().allow().build()
        assert nsg.arguments.security_rules[0].priority == 200

    def test_building_group_detaches_unfolded_rule(self, nsg):
        nsg.add_security_rule("kept").priority(100).inbound().allow().build()
        dangling = nsg.add_security_rule("forgotten").priority(200).inbound().deny()
        handle = nsg.build()

        assert dangling.parent is None
        assert [r["name"] for r in handle.inputs["securityRules"]] == ["kept"]
        with pytest.raises(BuilderConsumedError):
            dangling.build()

    def test_duplicate_rule_names_fail(self, nsg):
        nsg.add_security_rule("r").priority(100).inbound().allow().build()
        nsg.add_security_rule("r").priority(200).inbound().allow().build()

        with pytest.raises(DuplicateFragmentError, match="name 'r'"):
            nsg.build()

    def test_duplicate_priority_in_same_direction_fails(self, nsg):
        nsg.add_security_rule("a").priority(100).inbound().allow().build()
        nsg.add_security_rule("b").priority(100).inbound().deny().build()

        with pytest.raises(DuplicateFragmentError, match="priority 100"):
            nsg.build()

    def test_same_priority_in_other_direction_is_allowed(self, nsg):
        nsg.add_security_rule("in").priority(100).inbound().allow().build()
        nsg.add_security_rule("out").priority(100).outbound().allow().build()

        handle = nsg.build()
        assert len(handle.inputs["securityRules"]) == 2
