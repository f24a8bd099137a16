import inspect
import importlib
from .util import to_snake
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


# ============================================================================
# GENERIC REFLECTION UTILITIES
# ============================================================================

def discover_classes(
    pkg_name: str,
    base_cls: type,
    exclude_abstract: bool = True,
    exclude_base: bool = True
) -> Dict[str, type]:
    """
    Discover classes extends base from pkg
    
    Args:
        pkg_name: package name (e.g. 'infrabuilder.builders')
        base_cls: base class (e.g. Builder)
        exclude_abstract: whether to exclude abstract classes
        exclude_base: whether to exclude base class itself
        
    Returns:
        dictionary {class name: class object}
    """
    discovered = {}
    
    try:
        module = importlib.import_module(pkg_name)
        
        for name, obj in inspect.getmembers(module, inspect.isclass):
            if exclude_base and obj == base_cls:
                continue
            
            if not issubclass(obj, base_cls):
                continue
            
            if exclude_abstract and inspect.isabstract(obj):
                continue
            
            discovered[name] = obj
            
    except ImportError as e:
        logger.warning(f"Could not import {pkg_name}: {e}")
    
    return discovered


def extract_builder_kind(cls_name: str, suffix: str = "Builder") -> Optional[str]:
    """
    Extract resource kind from class name
    
    Args:
        cls_name: class name (e.g. 'ManagedClusterBuilder')
        suffix: class name suffix to strip
        
    Returns:
        snake_case kind (e.g. 'managed_cluster') or None
    """
    if not cls_name.endswith(suffix):
        return None
    
    base_name = cls_name[:-len(suffix)]
    
    return to_snake(base_name) if base_name else None


def builder_info(builder_class: type) -> Dict[str, Any]:
    """
    Get detailed information about a builder class.
    
    Args:
        builder_class: a concrete Builder subclass
        
    Returns:
        Dictionary with class information
    """
    return {
        'class_name': builder_class.__name__,
        'module': builder_class.__module__,
        'docstring': inspect.getdoc(builder_class),
        'resource_type': getattr(builder_class, 'resource_type', None),
        'required_fields': list(getattr(builder_class, 'required_fields', ())),
        'setters': sorted(
            name for name, member in inspect.getmembers(builder_class, inspect.isfunction)
            if not name.startswith('_') and name not in ('build', 'defaults')
        ),
    }
