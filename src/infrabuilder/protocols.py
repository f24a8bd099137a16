"""
InfraBuilder Protocol Definitions

This module contains all Protocol definitions for the InfraBuilder framework.

Protocols are the foundation layer; strategies and engines supplied from
outside the package only need to satisfy these structurally.
"""

from typing import Protocol, Dict, Any, Mapping, runtime_checkable


# ============================================================================
# Strategy Protocols
# ============================================================================

@runtime_checkable
class NamingStrategyProtocol(Protocol):
    """
    Protocol for naming strategies.

    A naming strategy maps a logical name token to the physical name of the
    resource in the cloud.
    """

    def generate_name(self, token: str) -> str:
        """
        Derive the physical name for a logical name token.

        Args:
            token: Logical name token (or the name explicitly set on the record)

        Returns:
            Physical resource name
        """
        ...


@runtime_checkable
class TaggingStrategyProtocol(Protocol):
    """
    Protocol for tagging strategies.

    A tagging strategy supplies the base tag set merged into every resource.
    """

    def add_tags(self, existing: Mapping[str, str]) -> Dict[str, str]:
        """
        Merge the strategy's tags with the tags a caller already set.

        Args:
            existing: Tags already present on the argument record

        Returns:
            The merged tag map
        """
        ...


# ============================================================================
# Engine Protocols
# ============================================================================

@runtime_checkable
class ProvisioningEngineProtocol(Protocol):
    """
    Protocol for provisioning engines.

    An engine turns a finished argument record into a live resource. The
    core hands records over and never inspects what the engine resolves
    asynchronously afterwards.
    """

    def create_resource(
        self,
        resource_type: str,
        logical_name: str,
        arguments: Any,
        options: Any,
    ) -> Any:
        """
        Materialize one resource.

        Args:
            resource_type: Engine type token (e.g., "azure-native:network:VirtualNetwork")
            logical_name: Logical name of the resource within the deployment
            arguments: Finished argument record (an ArgsModel)
            options: ResourceOptions for the resource

        Returns:
            ResourceHandle for the resource
        """
        ...
