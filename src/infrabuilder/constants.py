from enum import Enum

# --- Log and Debug ---
# Short aliases for module names to keep env vars concise
LOG_ALIAS_MAP = {
    "bld": "infrabuilder.builders",
    "net": "infrabuilder.builders.network",
    "aks": "infrabuilder.builders.containerservice",
    "mc": "infrabuilder.builders.containerservice",
    "sql": "infrabuilder.builders.sql",
    "rg": "infrabuilder.builders.resources",
    "base": "infrabuilder.abstractions",
    "stg": "infrabuilder.strategies",
    "eng": "infrabuilder.engines",
    "mem": "infrabuilder.engines.memory",
    "conf": "infrabuilder.config",
    "dep": "infrabuilder.deployment",
    "rty": "infrabuilder.registry",
}

# Top-level modules within infrabuilder for auto-prefixing
KNOWN_TOP_MODULES = {
    "abstractions",
    "args",
    "builders",
    "config",
    "datacls",
    "deployment",
    "engines",
    "exceptions",
    "registry",
    "strategies",
    "utils",
}

LOG_LEVELS_ENV = "INFRAB_LOG_LEVELS"

# --- Registry ---
BUILDERS_PACKAGE = "infrabuilder.builders"
BUILDER_SUFFIX = "Builder"

# --- Engines ---
ENGINE_MEMORY = "memory"
ENGINE_PULUMI = "pulumi"
SUPPORTED_ENGINES = (ENGINE_MEMORY, ENGINE_PULUMI)
MOCK_ID_SUFFIX = "_id"

# --- Resource type tokens ---
RESOURCE_GROUP_TYPE = "azure-native:resources:ResourceGroup"
VIRTUAL_NETWORK_TYPE = "azure-native:network:VirtualNetwork"
SUBNET_TYPE = "azure-native:network:Subnet"
NETWORK_INTERFACE_TYPE = "azure-native:network:NetworkInterface"
APPLICATION_SECURITY_GROUP_TYPE = "azure-native:network:ApplicationSecurityGroup"
NETWORK_SECURITY_GROUP_TYPE = "azure-native:network:NetworkSecurityGroup"
MANAGED_CLUSTER_TYPE = "azure-native:containerservice:ManagedCluster"
SQL_SERVER_TYPE = "azure-native:sql:Server"
SQL_DATABASE_TYPE = "azure-native:sql:Database"

# --- Naming ---
NAME_PLACEHOLDER = "name"
HASH_PLACEHOLDER = "hash"
DEFAULT_HASH_LENGTH = 6


# --- Choice-valued properties ---
class OSType(str, Enum):
    LINUX = "Linux"
    WINDOWS = "Windows"


class OSSKU(str, Enum):
    UBUNTU = "Ubuntu"
    CBL_MARINER = "CBLMariner"


class OSDiskType(str, Enum):
    MANAGED = "Managed"
    EPHEMERAL = "Ephemeral"


class KubeletDiskType(str, Enum):
    OS = "OS"


class AgentPoolMode(str, Enum):
    SYSTEM = "System"
    USER = "User"


class AgentPoolType(str, Enum):
    VIRTUAL_MACHINE_SCALE_SETS = "VirtualMachineScaleSets"
    AVAILABILITY_SET = "AvailabilitySet"


class ScaleSetPriority(str, Enum):
    REGULAR = "Regular"
    SPOT = "Spot"


class ScaleSetEvictionPolicy(str, Enum):
    DEALLOCATE = "Deallocate"
    DELETE = "Delete"


class GPUInstanceProfile(str, Enum):
    MIG1G = "MIG1g"
    MIG2G = "MIG2g"
    MIG3G = "MIG3g"
    MIG4G = "MIG4g"
    MIG7G = "MIG7g"


class NetworkPlugin(str, Enum):
    KUBENET = "kubenet"
    AZURE = "azure"


class NetworkPolicy(str, Enum):
    CALICO = "calico"
    AZURE = "azure"


class LoadBalancerSku(str, Enum):
    STANDARD = "standard"
    BASIC = "basic"


class ManagedClusterSKUName(str, Enum):
    BASIC = "Basic"


class ManagedClusterSKUTier(str, Enum):
    FREE = "Free"
    PAID = "Paid"


class ResourceIdentityType(str, Enum):
    SYSTEM_ASSIGNED = "SystemAssigned"
    NONE = "None"


class IPVersion(str, Enum):
    IPV4 = "IPv4"
    IPV6 = "IPv6"


class IPAllocationMethod(str, Enum):
    STATIC = "Static"
    DYNAMIC = "Dynamic"


class NetworkPolicyState(str, Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class SecurityRuleAccess(str, Enum):
    ALLOW = "Allow"
    DENY = "Deny"


class SecurityRuleDirection(str, Enum):
    INBOUND = "Inbound"
    OUTBOUND = "Outbound"


class SecurityRuleProtocol(str, Enum):
    TCP = "Tcp"
    UDP = "Udp"
    ICMP = "Icmp"
    ANY = "*"


class PublicNetworkAccess(str, Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


# --- Per-kind defaults ---
AGENT_POOL_DEFAULTS = {
    "name": "agentpool",
    "vm_size": "Standard_DS2_v2",
    "count": 3,
    "mode": AgentPoolMode.SYSTEM.value,
    "max_pods": 110,
    "os_disk_type": OSDiskType.MANAGED.value,
    "os_disk_size_gb": 128,
    "os_type": OSType.LINUX.value,
    "type": AgentPoolType.VIRTUAL_MACHINE_SCALE_SETS.value,
}

DEFAULT_KUBERNETES_VERSION = "1.19.9"
DEFAULT_IP_CONFIGURATION_NAME = "ipconfig1"
DEFAULT_SQL_SERVER_VERSION = "12.0"
DEFAULT_MINIMAL_TLS_VERSION = "1.2"
DEFAULT_EXTENDED_LOCATION_TYPE = "EdgeZone"
DEFAULT_ADMIN_USERNAME = "azureuser"
