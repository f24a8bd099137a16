from typing import Iterable


class InfraBuilderError(Exception):
    """Base exception for all application-specific errors."""

    pass


# --- 1. Errors related to conflicting settings and the settings file ---
class ConfigurationError(InfraBuilderError):
    """Base class for conflicting or uniqueness-violating settings, and settings-file problems."""

    pass


class ConfigFileMissingError(ConfigurationError):
    """Raised when the settings file cannot be found."""

    pass


class ConfigParsingError(ConfigurationError):
    """Raised when a YAML settings file is syntactically incorrect."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when the settings fail structural validation (e.g., Pydantic)."""

    pass


class DuplicateFragmentError(ConfigurationError):
    """Raised when two composite fragments share an identity, like two agent pools named alike."""

    pass


class ConflictingSettingsError(ConfigurationError):
    """Raised for an incompatible combination of settings on one builder or fragment."""

    pass


class IncompleteFragmentError(ConfigurationError):
    """Raised when a nested builder is folded while its required fields are unset."""

    pass


class FragmentAlreadyFoldedError(ConfigurationError):
    """Raised when a nested builder's fragment is folded into its parent a second time."""

    pass


class BuilderConsumedError(ConfigurationError):
    """Raised when a builder is mutated or built again after build() was called."""

    pass


# --- 2. Errors related to the completeness and contents of argument records ---
class ValidationError(InfraBuilderError):
    """Base class for argument records that are incomplete or hold values of the wrong type."""

    pass


class MissingFieldError(ValidationError):
    """Raised when required argument fields remain unset at build time."""

    def __init__(self, resource: str, fields: Iterable[str]):
        self.resource = resource
        self.fields = list(fields)
        super().__init__(
            f"Resource '{resource}' is missing required field(s): {', '.join(self.fields)}"
        )


class InvalidValueError(ValidationError):
    """Raised when a setter assigns a value that does not fit the argument field."""

    def __init__(self, owner: str, operation: str, problems: Iterable[str]):
        self.owner = owner
        self.operation = operation
        self.problems = list(problems)
        super().__init__(
            f"{owner} Invalid value passed to '{operation}': {'; '.join(self.problems)}"
        )


# --- 3. Errors raised by the bundled naming and tagging strategies ---
class StrategyError(InfraBuilderError):
    """Base class for naming and tagging strategy failures."""

    pass


class NamingStrategyError(StrategyError):
    """Raised when a naming pattern is invalid or produces an unusable name."""

    pass


class TaggingStrategyError(StrategyError):
    """Raised when a tagging strategy is misconfigured or returns an invalid tag map."""

    pass


# --- 4. Errors related to builder kinds ---
class DefinitionError(InfraBuilderError):
    """Base class for errors in looking up builder definitions."""

    pass


class UnknownResourceKindError(DefinitionError):
    """Raised when no builder is registered for a requested resource kind."""

    pass


# --- 5. Errors raised by the bundled provisioning engines ---
class ProvisioningError(InfraBuilderError):
    """Raised when an engine refuses a finished argument record."""

    pass
