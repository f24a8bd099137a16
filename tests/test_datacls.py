import pytest
from pydantic import ValidationError

from infrabuilder.args import ManagedClusterAgentPoolProfileArgs, VirtualNetworkArgs
from infrabuilder.datacls import ResourceContext, ResourceHandle, ResourceOptions, ref_id, ref_name
from infrabuilder.engines import InMemoryEngine, create_engine
from infrabuilder.exceptions import DefinitionError


def handle(name: str) -> ResourceHandle:
    return ResourceHandle(resource_type="t", logical_name=name, name=f"{name}-phys", id=f"{name}_id")


class TestResourceOptions:
    """Tests for option merging."""

    def test_scalars_of_other_win_when_set(self):
        merged = ResourceOptions(protect=True, retain_on_delete=True).merge(ResourceOptions(protect=False))
        assert merged.protect is False
        assert merged.retain_on_delete is True

    def test_sequences_concatenate_without_repeats(self):
        a, b = handle("a"), handle("b")
        merged = ResourceOptions(depends_on=(a,), aliases=("x",)).merge(
            ResourceOptions(depends_on=(a, b), aliases=("x", "y"))
        )

        assert merged.depends_on == (a, b)
        assert merged.depends_on[0] is a
        assert merged.aliases == ("x", "y")

    def test_merge_with_none_is_identity(self):
        options = ResourceOptions(protect=True)
        assert options.merge(None) is options


class TestResourceContext:
    """Tests for the immutable resource context."""

    def test_with_helpers_return_copies(self):
        parent = handle("p")
        context = ResourceContext()
        updated = context.with_parent(parent).with_dependency(handle("d"))

        assert context.parent is None
        assert updated.parent is parent
        assert len(updated.options.depends_on) == 1

    def test_resource_options_folds_parent_and_provider(self):
        parent = handle("p")
        provider = object()
        context = ResourceContext(parent=parent, provider=provider, options=ResourceOptions(protect=True))

        options = context.resource_options(ResourceOptions(retain_on_delete=True))

        assert options.parent is parent
        assert options.provider is provider
        assert options.protect is True
        assert options.retain_on_delete is True


class TestReferences:
    """Tests for handle references."""

    def test_ref_helpers(self):
        h = handle("rg")
        assert ref_name(h) == "rg-phys"
        assert ref_id(h) == "rg_id"
        assert ref_name("plain") == "plain"

    def test_handle_get_prefers_outputs(self):
        h = ResourceHandle(resource_type="t", logical_name="x", inputs={"a": 1, "b": 2}, outputs={"a": 3})
        assert h.get("a") == 3
        assert h.get("b") == 2
        assert h.get("c", "default") == "default"


class TestArgumentRecords:
    """Tests for argument record wire forms."""

    def test_wire_form_uses_aliases_and_drops_unset(self):
        args = ManagedClusterAgentPoolProfileArgs(name="ap1", os_disk_size_gb=64, enable_fips=True)
        assert args.to_inputs() == {"name": "ap1", "osDiskSizeGB": 64, "enableFIPS": True}

    def test_records_accept_wire_names(self):
        args = VirtualNetworkArgs(virtualNetworkName="vnet1", location="westeurope")
        assert args.virtual_network_name == "vnet1"
        assert args.physical_name() == "vnet1"

    def test_unknown_fields_are_rejected(self):
        with pytest.raises(ValidationError):
            VirtualNetworkArgs(colour="blue")

    def test_is_empty(self):
        assert ManagedClusterAgentPoolProfileArgs().is_empty()
        assert not ManagedClusterAgentPoolProfileArgs(name="x").is_empty()


class TestEngines:
    """Tests for engine selection."""

    def test_create_memory_engine(self):
        assert isinstance(create_engine("memory"), InMemoryEngine)

    def test_unknown_engine_raises_error(self):
        with pytest.raises(DefinitionError, match="Unknown engine"):
            create_engine("terraform")
