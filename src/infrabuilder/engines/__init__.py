"""
InfraBuilder Engines Module

- InMemoryEngine: Records resources in memory (preview and tests)
- PulumiEngine: Registers resources with the Pulumi runtime (optional extra)

Usage:
    from infrabuilder.engines import InMemoryEngine, create_engine

    engine = create_engine("memory")
"""

import logging
import threading
from typing import Optional

from .. import constants
from ..exceptions import DefinitionError
from ..protocols import ProvisioningEngineProtocol
from .memory import InMemoryEngine

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_default: Optional[ProvisioningEngineProtocol] = None


def create_engine(kind: str) -> ProvisioningEngineProtocol:
    """Instantiate a bundled engine by name."""
    if kind == constants.ENGINE_MEMORY:
        return InMemoryEngine()
    if kind == constants.ENGINE_PULUMI:
        # Deferred so pulumi is only needed by deployments that use it
        from .pulumi_engine import PulumiEngine
        return PulumiEngine()
    raise DefinitionError(f"Unknown engine '{kind}'. Supported engines: {list(constants.SUPPORTED_ENGINES)}")


def get_default_engine() -> ProvisioningEngineProtocol:
    """Return the process-wide engine, creating an in-memory one on first use."""
    global _default
    with _lock:
        if _default is None:
            _default = InMemoryEngine()
            logger.debug("No engine configured, using a process-wide InMemoryEngine.")
        return _default


def set_default_engine(engine: ProvisioningEngineProtocol) -> None:
    global _default
    with _lock:
        _default = engine


def reset_default_engine() -> None:
    global _default
    with _lock:
        _default = None


__all__ = [
    'InMemoryEngine',
    'create_engine',
    'get_default_engine',
    'set_default_engine',
    'reset_default_engine',
]
