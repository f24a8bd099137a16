from typing import Dict, Optional

from .base import ArgsModel


class ResourceGroupArgs(ArgsModel):
    name_field = "resource_group_name"
    tags_field = "tags"

    resource_group_name: Optional[str] = None
    location: Optional[str] = None
    managed_by: Optional[str] = None
    tags: Optional[Dict[str, str]] = None
