"""
Детектор MAC-адресов для Linux.

Источник - sysfs:
    /sys/class/net/<iface>/address   MAC (aa:bb:cc:dd:ee:ff\\n)
    /sys/class/net/<iface>/device    есть только у физических интерфейсов
    /sys/class/net/<iface>/ifalias   alias интерфейса

Политика включения:
- физический интерфейс включается всегда;
- виртуальный включается только если его ifalias == "bosh-interface-<iface>"
  (интерфейс создан агентом). Остальные виртуальные (docker0, veth, lo, мосты)
  к сетевой спецификации отношения не имеют.

Интерфейсы обходятся в отсортированном порядке путей. При совпадении MAC у
двух включённых интерфейсов в результате остаётся последний по этому порядку.
"""

import posixpath
from typing import Dict, List

from ..core.constants import (
    ADDRESS_FILE,
    DEVICE_ENTRY,
    IFALIAS_FILE,
    MANAGED_ALIAS_PREFIX,
    NET_INTERFACES_GLOB,
    managed_alias,
    trim_value,
)
from ..core.exceptions import GlobError, MacDetectorError
from ..core.logging import get_logger
from ..core.models import InterfaceRecord
from ..core.system import FileSystem

logger = get_logger(__name__).bind(platform="linux")


class LinuxMACAddressDetector:
    """
    Сканер интерфейсов Linux через sysfs.

    Example:
        detector = LinuxMACAddressDetector(OSFileSystem())
        detector.detect_mac_addresses()
        # {"aa:bb:cc:dd:ee:ff": "eth0", "33:44:55:66:77:88": "veth2"}
    """

    def __init__(
        self,
        fs: FileSystem,
        net_glob: str = NET_INTERFACES_GLOB,
        alias_prefix: str = MANAGED_ALIAS_PREFIX,
    ):
        """
        Args:
            fs: Доступ к файловой системе
            net_glob: Шаблон записей интерфейсов в sysfs
            alias_prefix: Префикс ifalias управляемых агентом интерфейсов
        """
        self.fs = fs
        self.net_glob = net_glob
        self.alias_prefix = alias_prefix

    def detect_mac_addresses(self) -> Dict[str, str]:
        """
        Строит отображение MAC -> имя интерфейса.

        Returns:
            Dict[str, str]: MAC как в sysfs -> имя интерфейса

        Raises:
            GlobError: Не удалось получить список интерфейсов
        """
        result: Dict[str, str] = {}

        for record in self.scan_interfaces():
            if not self.is_included(record):
                continue
            if record.mac_address in result:
                logger.warning(
                    f"MAC {record.mac_address} уже занят {result[record.mac_address]}, "
                    f"перезаписываем на {record.name}",
                    interface=record.name,
                    mac=record.mac_address,
                )
            result[record.mac_address] = record.name

        logger.info(f"Найдено интерфейсов: {len(result)}")
        return result

    def scan_interfaces(self) -> List[InterfaceRecord]:
        """
        Читает все интерфейсы sysfs.

        Returns:
            List[InterfaceRecord]: Интерфейсы в порядке обхода

        Raises:
            GlobError: Не удалось получить список интерфейсов
        """
        try:
            paths = self.fs.glob(self.net_glob)
        except MacDetectorError:
            raise
        except Exception as e:
            raise GlobError(
                f"Ошибка получения списка интерфейсов: {e}",
                pattern=self.net_glob,
            ) from e

        return [self._read_interface(path) for path in sorted(paths)]

    def is_included(self, record: InterfaceRecord) -> bool:
        """
        Проверяет политику включения интерфейса.

        Args:
            record: Интерфейс

        Returns:
            bool: True если интерфейс попадает в результат
        """
        if not record.mac_address:
            logger.debug("Интерфейс без MAC исключён", interface=record.name)
            return False

        if record.is_physical:
            logger.debug("Физический интерфейс", interface=record.name, mac=record.mac_address)
            return True

        if record.alias == managed_alias(record.name, self.alias_prefix):
            logger.debug(
                "Виртуальный интерфейс агента",
                interface=record.name,
                mac=record.mac_address,
                alias=record.alias,
            )
            return True

        logger.debug("Виртуальный интерфейс исключён", interface=record.name, alias=record.alias)
        return False

    def _read_interface(self, path: str) -> InterfaceRecord:
        """Собирает InterfaceRecord по пути /sys/class/net/<iface>."""
        name = posixpath.basename(path.rstrip("/"))
        is_physical = self.fs.exists(posixpath.join(path, DEVICE_ENTRY))
        mac_address = self._read_optional(posixpath.join(path, ADDRESS_FILE), name)

        alias = ""
        if not is_physical:
            alias = self._read_optional(posixpath.join(path, IFALIAS_FILE), name)

        return InterfaceRecord(
            name=name,
            mac_address=mac_address,
            is_physical=is_physical,
            alias=alias,
        )

    def _read_optional(self, path: str, interface: str) -> str:
        """Читает файл sysfs; отсутствующий или нечитаемый файл даёт ""."""
        try:
            return trim_value(self.fs.read_file(path))
        except (OSError, ValueError) as e:
            logger.debug(f"Не удалось прочитать {path}: {e}", interface=interface)
            return ""
