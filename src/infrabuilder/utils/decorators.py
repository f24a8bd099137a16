"""
Builder decorators.

- Reject mutation of a builder once it has been built (fluent)
- Report values that do not fit the argument record as InvalidValueError (fluent)
"""

import functools
import logging

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import InvalidValueError

logger = logging.getLogger(__name__)


def describe_errors(error: PydanticValidationError) -> list:
    """One line per failed field: ``field: message (got value)``."""
    return [
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']} (got {item['input']!r})"
        for item in error.errors()
    ]


def fluent(func):
    """
    Decorator for chainable setters.

    The wrapped builder must expose ``_ensure_unbuilt(operation)`` and
    ``_log_prefix``; the setter is refused with BuilderConsumedError once the
    builder has been built, and a value rejected by the argument record is
    raised as InvalidValueError.
    """

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        self._ensure_unbuilt(func.__name__)
        try:
            return func(self, *args, **kwargs)
        except PydanticValidationError as e:
            logger.debug(f"{self._log_prefix} '{func.__name__}' rejected: {e}")
            raise InvalidValueError(self._log_prefix, func.__name__, describe_errors(e)) from e

    return wrapper
