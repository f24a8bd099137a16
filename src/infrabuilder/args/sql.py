from typing import Dict, Optional

from .base import ArgsModel


class SqlServerArgs(ArgsModel):
    name_field = "server_name"
    tags_field = "tags"

    server_name: Optional[str] = None
    resource_group_name: Optional[str] = None
    location: Optional[str] = None
    administrator_login: Optional[str] = None
    administrator_login_password: Optional[str] = None
    version: Optional[str] = None
    minimal_tls_version: Optional[str] = None
    public_network_access: Optional[str] = None
    tags: Optional[Dict[str, str]] = None


class SqlSkuArgs(ArgsModel):
    name: Optional[str] = None
    tier: Optional[str] = None
    capacity: Optional[int] = None


class SqlDatabaseArgs(ArgsModel):
    name_field = "database_name"
    tags_field = "tags"

    database_name: Optional[str] = None
    resource_group_name: Optional[str] = None
    server_name: Optional[str] = None
    location: Optional[str] = None
    sku: Optional[SqlSkuArgs] = None
    max_size_bytes: Optional[int] = None
    collation: Optional[str] = None
    zone_redundant: Optional[bool] = None
    tags: Optional[Dict[str, str]] = None
