"""
Data Models для MAC Detector.

Все модели живут в пределах одного вызова детектора и нигде не сохраняются.

Использование:
    from mac_detector.core.models import InterfaceRecord, AdapterRecord

    record = InterfaceRecord(name="eth0", mac_address="aa:bb:cc:dd:ee:ff", is_physical=True)
    adapter = AdapterRecord.from_dict({"Name": "Ethernet0", "MacAddress": "12-34-56-78-9A-BC"})
    adapter.mac_address  # "12:34:56:78:9a:bc"
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict
from enum import Enum

from .constants import ADAPTER_MAC_KEY, ADAPTER_NAME_KEY, hyphen_to_colon
from .exceptions import AdapterQueryParseError


class Platform(str, Enum):
    """Платформа, для которой строится детектор."""
    LINUX = "linux"
    WINDOWS = "windows"


@dataclass
class InterfaceRecord:
    """
    Сетевой интерфейс Linux, прочитанный из sysfs.

    Attributes:
        name: Имя интерфейса (eth0, veth2)
        mac_address: MAC как в sysfs (aa:bb:cc:dd:ee:ff), "" если не прочитан
        is_physical: Есть ли у интерфейса запись device
        alias: ifalias ("" если нет или не прочитан)
    """
    name: str
    mac_address: str = ""
    is_physical: bool = False
    alias: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Конвертирует в словарь."""
        return asdict(self)


@dataclass
class NativeInterface:
    """
    Интерфейс из нативного перечисления ОС.

    Attributes:
        name: Имя интерфейса ("vEthernet (Ethernet0)")
        hardware_address: MAC в формате ieee, "" если у интерфейса нет link-адреса
    """
    name: str
    hardware_address: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Конвертирует в словарь."""
        return asdict(self)


@dataclass
class AdapterRecord:
    """
    Адаптер из вывода Get-NetAdapter.

    Attributes:
        name: Имя адаптера
        mac_address: MAC в формате ieee (aa:bb:cc:dd:ee:ff)
    """
    name: str
    mac_address: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdapterRecord":
        """
        Создаёт запись из JSON-объекта PowerShell.

        Args:
            data: {"MacAddress": "12-34-56-78-9A-BC", "Name": "Ethernet0"}

        Returns:
            AdapterRecord: MAC приведён к aa:bb:cc:dd:ee:ff

        Raises:
            AdapterQueryParseError: Объект не содержит имени или MAC
            MACFormatError: MAC не разбирается
        """
        if not isinstance(data, dict):
            raise AdapterQueryParseError(
                f"Ожидался JSON-объект адаптера, получено: {type(data).__name__}",
                output=str(data),
            )

        name = data.get(ADAPTER_NAME_KEY)
        mac = data.get(ADAPTER_MAC_KEY)
        if not isinstance(name, str) or not name:
            raise AdapterQueryParseError(
                f"У адаптера нет поля {ADAPTER_NAME_KEY}",
                output=str(data),
            )
        if mac is None:
            raise AdapterQueryParseError(
                f"У адаптера {name!r} нет поля {ADAPTER_MAC_KEY}",
                output=str(data),
            )

        return cls(name=name, mac_address=hyphen_to_colon(mac))

    def to_dict(self) -> Dict[str, Any]:
        """Конвертирует в словарь."""
        return asdict(self)
