import logging

import pytest

from infrabuilder.constants import OSType
from infrabuilder.exceptions import DefinitionError
from infrabuilder.utils import (
    extract_builder_kind,
    parse_module_levels,
    to_camel,
    to_snake,
    value_of,
)
from infrabuilder.utils.logger import _apply_module_levels, _normalize_module_name


class TestNameConversion:
    """Tests for name conversion helpers."""

    @pytest.mark.parametrize(
        "name, expected",
        [("VirtualNetwork", "virtual_network"), ("managedCluster", "managed_cluster"), ("Subnet", "subnet")],
    )
    def test_to_snake(self, name, expected):
        assert to_snake(name) == expected

    def test_to_camel(self):
        assert to_camel("resource_group_name") == "resourceGroupName"
        assert to_camel("location") == "location"

    def test_invalid_names_raise_error(self):
        with pytest.raises(DefinitionError):
            to_snake("not_pascal")
        with pytest.raises(DefinitionError):
            to_camel("NotSnake")

    def test_extract_builder_kind(self):
        assert extract_builder_kind("ManagedClusterBuilder") == "managed_cluster"
        assert extract_builder_kind("Builder") is None
        assert extract_builder_kind("ManagedCluster") is None

    def test_value_of(self):
        assert value_of(OSType.WINDOWS) == "Windows"
        assert value_of("Linux") == "Linux"
        assert value_of(None) is None


class TestLoggerHelpers:
    """Tests for per-module log level handling."""

    def test_parse_module_levels(self):
        assert parse_module_levels("bld=debug, stg=INFO,broken,") == {"bld": "DEBUG", "stg": "INFO"}

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("aks", "infrabuilder.builders.containerservice"),
            ("builders.network", "infrabuilder.builders.network"),
            ("strategies.*", "infrabuilder.strategies"),
            ("pulumi", "pulumi"),
        ],
    )
    def test_normalize_module_name(self, name, expected):
        assert _normalize_module_name(name) == expected

    def test_env_var_levels(self, monkeypatch):
        monkeypatch.setenv("INFRAB_LOG_LEVELS", "sql=ERROR")
        target = logging.getLogger("infrabuilder.builders.sql")
        previous = target.level
        try:
            _apply_module_levels(None)
            assert target.level == logging.ERROR
        finally:
            target.setLevel(previous)
