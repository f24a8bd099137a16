"""
InfraBuilder Data Classes

- ResourceOptions: Engine-side lifecycle options of a resource
- ResourceHandle: A resource returned by a provisioning engine
- ResourceContext: Parent/provider/options bundle passed to a builder
"""

from .resources import ResourceOptions, ResourceHandle, ref_name, ref_id
from .contexts import ResourceContext

__all__ = [
    'ResourceOptions',
    'ResourceHandle',
    'ResourceContext',
    'ref_name',
    'ref_id',
]
