import pytest

pulumi = pytest.importorskip("pulumi")

from infrabuilder.datacls import ResourceHandle, ResourceOptions
from infrabuilder.engines.pulumi_engine import PulumiEngine


class TestPulumiEngine:
    """Tests for translating resource options to Pulumi options."""

    def test_resource_options_translation(self):
        native_parent = object()
        parent = ResourceHandle(resource_type="t", logical_name="p", resource=native_parent)
        options = ResourceOptions(parent=parent, protect=True, ignore_changes=("tags",))

        translated = PulumiEngine().resource_options(options)

        assert isinstance(translated, pulumi.ResourceOptions)
        assert translated.parent is native_parent
        assert translated.protect is True
        assert translated.ignore_changes == ["tags"]

    def test_empty_options(self):
        translated = PulumiEngine().resource_options(ResourceOptions())
        assert translated.parent is None
        assert not translated.depends_on
