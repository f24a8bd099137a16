import pytest
import yaml
from pathlib import Path

from infrabuilder.deployment import Deployment
from infrabuilder.engines import InMemoryEngine, reset_default_engine
from infrabuilder.strategies import StrategyContext, reset_strategies


@pytest.fixture(autouse=True)
def reset_process_defaults():
    """Keep the process-wide strategy context and engine from leaking between tests."""
    reset_strategies()
    reset_default_engine()
    yield
    reset_strategies()
    reset_default_engine()


@pytest.fixture
def engine() -> InMemoryEngine:
    return InMemoryEngine()


@pytest.fixture
def deployment(engine) -> Deployment:
    """A deployment without naming or tagging policies."""
    return Deployment(strategies=StrategyContext(), engine=engine)


@pytest.fixture
def create_config_file(tmp_path: Path):
    """A pytest fixture to create a temporary settings file."""
    def _create_file(config_data: dict) -> Path:
        config_file = tmp_path / "infra.yml"
        with open(config_file, 'w') as f:
            yaml.dump(config_data, f)
        return config_file
    return _create_file
