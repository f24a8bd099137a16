"""
Some utils for InfraBuilder
"""

from enum import Enum
from typing import Any
from ..exceptions import DefinitionError
import re

# ----------------------
#
#  Name Converting
#
# ----------------------

s_pattern = re.compile(r'^[a-z0-9]+(_[a-z0-9]+)*$')
cpn = re.compile(r'(?<!^)(?=[A-Z])')
cp_pattern = re.compile(r'^[a-zA-Z][a-zA-Z0-9]*$')

def to_snake(name: str) -> str:
    """
    Convert camelCase or PascalCase to snake_case
    """
    if not cp_pattern.fullmatch(name):
        raise DefinitionError(f"Only PascalCase and camelCase can use to_snake, but '{name}' got.")
    return cpn.sub('_', name).lower()


def to_camel(name: str) -> str:
    """
    Convert snake_case to camelCase, used as the wire alias of argument fields
    """
    if not s_pattern.fullmatch(name):
        raise DefinitionError(f"Only snake_case can use to_camel, but '{name}' got.")
    return "".join([_s.capitalize() if i != 0 else _s for i, _s in enumerate(name.split('_'))])


# ----------------------
#
#  Choice Values
#
# ----------------------

def value_of(choice: Any) -> Any:
    """
    Unwrap an Enum member to its plain value so argument records only hold wire values
    """
    if isinstance(choice, Enum):
        return choice.value
    return choice
