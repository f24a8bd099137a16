import pytest
import copy

from infrabuilder.config import Config
from infrabuilder.deployment import Deployment
from infrabuilder.engines import InMemoryEngine
from infrabuilder.exceptions import (
    ConfigurationError,
    ConfigFileMissingError,
    ConfigParsingError,
    ConfigValidationError,
)
from infrabuilder.strategies import PatternNamingStrategy, StaticTaggingStrategy

BASE_CONFIG = {
    'naming': {
        'pattern': '{name}-{env}',
        'variables': {'env': 'dev'},
    },
    'tagging': {
        'tags': {'env': 'dev', 'owner': 'platform'},
    },
    'engine': 'memory',
}


class TestConfigLoading:
    """Tests for basic loading and validation success/failure."""

    def test_load_valid_config_successfully(self, create_config_file):
        """Should load a well-formed settings file without raising exceptions."""
        config_path = create_config_file(BASE_CONFIG)
        try:
            config = Config(str(config_path))
            assert config.naming.pattern == '{name}-{env}'
            assert config.tagging.tags == {'env': 'dev', 'owner': 'platform'}
            assert config.engine_name == 'memory'
        except Exception as e:
            pytest.fail(f"Valid config failed to load: {e}")

    def test_empty_sections_use_defaults(self, create_config_file):
        """Should accept a document that only picks the engine."""
        config = Config(str(create_config_file({'engine': 'memory'})))
        assert config.naming is None
        assert config.tagging is None
        assert config.model.logging.debug is False

    def test_file_not_found_raises_error(self):
        """Should raise ConfigFileMissingError for a non-existent file."""
        with pytest.raises(ConfigFileMissingError, match="not found"):
            Config("non_existent_file.yml")

    def test_invalid_yaml_raises_error(self, tmp_path):
        """Should raise ConfigParsingError for malformed YAML."""
        config_file = tmp_path / "invalid.yml"
        config_file.write_text("key: value: another")  # Invalid YAML

        with pytest.raises(ConfigParsingError, match="Error parsing YAML file"):
            Config(str(config_file))

    def test_non_mapping_document_raises_error(self, tmp_path):
        """Should raise ConfigParsingError when the document is not a mapping."""
        config_file = tmp_path / "list.yml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigParsingError, match="containing a dictionary"):
            Config(str(config_file))

    def test_config_errors_are_configuration_errors(self):
        """Settings file problems belong to the ConfigurationError family."""
        with pytest.raises(ConfigurationError):
            Config("non_existent_file.yml")


class TestConfigValidationLogic:
    """Tests for schema validation of the settings."""

    def test_unknown_key_raises_error(self, create_config_file):
        invalid_config = copy.deepcopy(BASE_CONFIG)
        invalid_config['unexpected'] = True

        with pytest.raises(ConfigValidationError, match="unexpected"):
            Config(str(create_config_file(invalid_config)))

    def test_unknown_engine_raises_error(self, create_config_file):
        invalid_config = copy.deepcopy(BASE_CONFIG)
        invalid_config['engine'] = 'terraform'

        with pytest.raises(ConfigValidationError, match="Invalid engine: terraform"):
            Config(str(create_config_file(invalid_config)))

    def test_pattern_without_name_raises_error(self, create_config_file):
        invalid_config = copy.deepcopy(BASE_CONFIG)
        invalid_config['naming']['pattern'] = 'static-{env}'

        with pytest.raises(ConfigValidationError, match="must reference"):
            Config(str(create_config_file(invalid_config)))

    def test_pattern_with_undefined_variable_raises_error(self, create_config_file):
        invalid_config = copy.deepcopy(BASE_CONFIG)
        invalid_config['naming']['pattern'] = '{name}-{region}'

        with pytest.raises(ConfigValidationError, match="region"):
            Config(str(create_config_file(invalid_config)))

    def test_reserved_variable_raises_error(self, create_config_file):
        invalid_config = copy.deepcopy(BASE_CONFIG)
        invalid_config['naming']['variables']['hash'] = 'x'

        with pytest.raises(ConfigValidationError, match="reserved"):
            Config(str(create_config_file(invalid_config)))

    def test_malformed_pattern_reports_strategy_error(self, create_config_file):
        invalid_config = copy.deepcopy(BASE_CONFIG)
        invalid_config['naming']['pattern'] = '{name'

        with pytest.raises(ConfigValidationError, match="Invalid naming pattern"):
            Config(str(create_config_file(invalid_config)))

    def test_non_positive_hash_length_raises_error(self, create_config_file):
        invalid_config = copy.deepcopy(BASE_CONFIG)
        invalid_config['naming']['hash_length'] = 0

        with pytest.raises(ConfigValidationError):
            Config(str(create_config_file(invalid_config)))


class TestConfigProducts:
    """Tests for the objects built from validated settings."""

    def test_strategies_follow_settings(self, create_config_file):
        config = Config(str(create_config_file(BASE_CONFIG)))
        strategies = config.strategies()

        assert isinstance(strategies.naming, PatternNamingStrategy)
        assert isinstance(strategies.tagging, StaticTaggingStrategy)
        assert strategies.resolve_name('vnet1') == 'vnet1-dev'
        assert strategies.merge_tags({'owner': 'me'}) == {'env': 'dev', 'owner': 'me'}

    def test_engine_follows_settings(self, create_config_file):
        config = Config(str(create_config_file(BASE_CONFIG)))
        assert isinstance(config.engine(), InMemoryEngine)

    def test_deployment_from_config(self, create_config_file):
        deployment = Deployment.from_config(str(create_config_file(BASE_CONFIG)))

        handle = (
            deployment.resource_group('rg')
            .location('westeurope')
            .build()
        )

        assert handle.name == 'rg-dev'
        assert handle.inputs['tags'] == {'env': 'dev', 'owner': 'platform'}
        assert deployment.resources == [handle]
