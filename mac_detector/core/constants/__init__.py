"""
Константы и утилиты нормализации.

Реэкспорт для обратной совместимости:
    from mac_detector.core.constants import normalize_mac, NET_INTERFACES_GLOB
"""

from .mac import (
    trim_value,
    parse_mac,
    hyphen_to_colon,
    colon_to_hyphen,
    normalize_mac_raw,
    normalize_mac,
)
from .platforms import (
    SYS_CLASS_NET,
    NET_INTERFACES_GLOB,
    ADDRESS_FILE,
    DEVICE_ENTRY,
    IFALIAS_FILE,
    MANAGED_ALIAS_PREFIX,
    ADAPTER_QUERY_COMMAND,
    ADAPTER_NAME_KEY,
    ADAPTER_MAC_KEY,
    managed_alias,
)

__all__ = [
    # MAC
    "trim_value",
    "parse_mac",
    "hyphen_to_colon",
    "colon_to_hyphen",
    "normalize_mac_raw",
    "normalize_mac",
    # Platforms
    "SYS_CLASS_NET",
    "NET_INTERFACES_GLOB",
    "ADDRESS_FILE",
    "DEVICE_ENTRY",
    "IFALIAS_FILE",
    "MANAGED_ALIAS_PREFIX",
    "ADAPTER_QUERY_COMMAND",
    "ADAPTER_NAME_KEY",
    "ADAPTER_MAC_KEY",
    "managed_alias",
]
