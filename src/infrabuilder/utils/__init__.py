"""
InfraBuilder Utils Module

- logger: Logging setup and configuration
- util: Name conversion and choice unwrapping
- reflection: Class discovery and reflection utilities
- decorators: Fluent-setter guard

Usage:
    from infrabuilder.utils import setup_logger, to_camel, fluent
"""

from .logger import setup_logger, parse_module_levels
from .util import to_snake, to_camel, value_of
from .decorators import fluent
from .reflection import (
    discover_classes,
    extract_builder_kind,
    builder_info,
)

__all__ = [
    'setup_logger',
    'parse_module_levels',
    'fluent',
    # Reflection utilities
    'discover_classes',
    'extract_builder_kind',
    'builder_info',
    'to_snake',
    'to_camel',
    'value_of',
]
