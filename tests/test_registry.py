import pytest

from infrabuilder.builders import ManagedClusterBuilder, VirtualNetworkBuilder
from infrabuilder.exceptions import DefinitionError, UnknownResourceKindError
from infrabuilder.registry import BuilderRegistry, builder_registry
from infrabuilder.utils import builder_info


class TestBuilderRegistry:
    """Tests for reflection-based builder discovery."""

    def test_discovers_every_resource_kind(self):
        assert builder_registry.get_supports() == {
            "resource_group",
            "virtual_network",
            "subnet",
            "network_interface",
            "application_security_group",
            "network_security_group",
            "managed_cluster",
            "sql_server",
            "sql_database",
        }

    def test_nested_builders_are_not_registered(self):
        supports = BuilderRegistry().get_supports()
        assert "agent_pool" not in supports
        assert "ip_configuration" not in supports
        assert "security_rule" not in supports

    def test_lookup_by_kind(self):
        assert builder_registry.builder("managed_cluster") is ManagedClusterBuilder
        assert builder_registry.builder("virtual_network") is VirtualNetworkBuilder

    def test_unknown_kind_raises_error(self):
        with pytest.raises(UnknownResourceKindError, match="storage_account"):
            builder_registry.builder("storage_account")

    def test_unknown_kind_is_a_definition_error(self):
        with pytest.raises(DefinitionError):
            BuilderRegistry().builder("nope")


class TestBuilderInfo:
    """Tests for builder introspection."""

    def test_builder_info(self):
        info = builder_info(VirtualNetworkBuilder)

        assert info["class_name"] == "VirtualNetworkBuilder"
        assert info["resource_type"] == "azure-native:network:VirtualNetwork"
        assert info["required_fields"] == ["resource_group_name", "location", "address_space"]
        assert "address_space" in info["setters"]
        assert "location" in info["setters"]
        assert "build" not in info["setters"]
