from typing import Any
import logging

from ..abstractions import RegionalBuilder
from ..args import SqlDatabaseArgs, SqlServerArgs, SqlSkuArgs
from ..datacls import ResourceHandle, ref_name
from ..utils import fluent
from .. import constants
from ..constants import PublicNetworkAccess

logger = logging.getLogger(__name__)


class SqlServerBuilder(RegionalBuilder[SqlServerArgs]):
    """Builder of a logical SQL server."""

    resource_type = constants.SQL_SERVER_TYPE
    required_fields = ("resource_group_name", "location", "administrator_login", "administrator_login_password")

    def defaults(self) -> SqlServerArgs:
        return SqlServerArgs(
            version=constants.DEFAULT_SQL_SERVER_VERSION,
            minimal_tls_version=constants.DEFAULT_MINIMAL_TLS_VERSION,
            public_network_access=PublicNetworkAccess.ENABLED.value,
        )

    @fluent
    def administrator_login(self, login: str) -> "SqlServerBuilder":
        self.arguments.administrator_login = login
        return self

    @fluent
    def administrator_password(self, password: str) -> "SqlServerBuilder":
        self.arguments.administrator_login_password = password
        return self

    @fluent
    def version(self, version: str) -> "SqlServerBuilder":
        self.arguments.version = version
        return self

    @fluent
    def minimal_tls_version(self, version: str) -> "SqlServerBuilder":
        self.arguments.minimal_tls_version = version
        return self

    def _public_access(self, access: PublicNetworkAccess) -> "SqlServerBuilder":
        self._choose("public network access", access.value)
        self.arguments.public_network_access = access.value
        return self

    @fluent
    def enable_public_network_access(self) -> "SqlServerBuilder":
        return self._public_access(PublicNetworkAccess.ENABLED)

    @fluent
    def disable_public_network_access(self) -> "SqlServerBuilder":
        return self._public_access(PublicNetworkAccess.DISABLED)


class SqlDatabaseBuilder(RegionalBuilder[SqlDatabaseArgs]):
    """Builder of a database on a logical SQL server."""

    resource_type = constants.SQL_DATABASE_TYPE
    required_fields = ("resource_group_name", "server_name", "location")

    def defaults(self) -> SqlDatabaseArgs:
        return SqlDatabaseArgs()

    def _sku(self) -> SqlSkuArgs:
        if self.arguments.sku is None:
            self.arguments.sku = SqlSkuArgs()
        return self.arguments.sku

    @fluent
    def server(self, server: Any) -> "SqlDatabaseBuilder":
        """
        Place the database on a server.

        A built server handle also supplies the resource group and location
        when they were not set yet.
        """
        self.arguments.server_name = ref_name(server)
        if isinstance(server, ResourceHandle):
            if self.arguments.resource_group_name is None:
                self.arguments.resource_group_name = server.get("resourceGroupName")
            if self.arguments.location is None:
                self.arguments.location = server.get("location")
        return self

    @fluent
    def sku_tier(self, tier: str) -> "SqlDatabaseBuilder":
        self._sku().tier = tier
        return self

    @fluent
    def sku_service_objective_name(self, name: str) -> "SqlDatabaseBuilder":
        self._sku().name = name
        return self

    @fluent
    def sku_capacity(self, capacity: int) -> "SqlDatabaseBuilder":
        self._sku().capacity = capacity
        return self

    @fluent
    def max_size_bytes(self, size: int) -> "SqlDatabaseBuilder":
        self.arguments.max_size_bytes = size
        return self

    @fluent
    def collation(self, collation: str) -> "SqlDatabaseBuilder":
        self.arguments.collation = collation
        return self

    @fluent
    def zone_redundant(self, flag: bool = True) -> "SqlDatabaseBuilder":
        self.arguments.zone_redundant = flag
        return self
