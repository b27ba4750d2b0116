"""
Фиксированные пути и команды платформ.

Linux: sysfs (/sys/class/net/<iface>/{address,device,ifalias}).
Windows: запрос Get-NetAdapter через PowerShell с выводом в JSON.
"""

from typing import List

# Linux sysfs
SYS_CLASS_NET = "/sys/class/net"
NET_INTERFACES_GLOB = f"{SYS_CLASS_NET}/*"
ADDRESS_FILE = "address"
DEVICE_ENTRY = "device"
IFALIAS_FILE = "ifalias"

# Виртуальные интерфейсы, созданные агентом, помечаются ifalias = <префикс><имя>
MANAGED_ALIAS_PREFIX = "bosh-interface-"

# Windows
ADAPTER_QUERY_COMMAND: List[str] = [
    "powershell",
    "-Command",
    "Get-NetAdapter | Select MacAddress,Name | ConvertTo-Json",
]
ADAPTER_NAME_KEY = "Name"
ADAPTER_MAC_KEY = "MacAddress"


def managed_alias(interface: str, prefix: str = MANAGED_ALIAS_PREFIX) -> str:
    """Ожидаемый ifalias для управляемого агентом интерфейса."""
    return f"{prefix}{interface}"
