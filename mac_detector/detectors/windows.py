"""
Детектор MAC-адресов для Windows.

Два источника, ни одному из которых нельзя верить по отдельности:
- нативный список интерфейсов ОС (psutil) - что реально присутствует сейчас;
- Get-NetAdapter через PowerShell - точные MAC и известные адаптеры.

При привязке виртуального коммутатора Hyper-V физический адаптер
"Ethernet0" заменяется на "vEthernet (Ethernet0)", но Get-NetAdapter ещё
может показывать старое имя, а ОС - скрытые vEthernet с тем же MAC.
Поэтому источники соединяются по имени: в результат попадает только
интерфейс, присутствующий в обоих списках.

Вывод Get-NetAdapter | ConvertTo-Json:
    один адаптер:   {"MacAddress": "12-34-56-78-9A-BC", "Name": "Ethernet0"}
    несколько:      [{...}, {...}]
"""

import json
from typing import Dict, List, Optional, Sequence

from ..core.constants import ADAPTER_QUERY_COMMAND, normalize_mac_raw, trim_value
from ..core.exceptions import (
    AdapterQueryParseError,
    CommandError,
    InterfaceListError,
    MacDetectorError,
)
from ..core.logging import get_logger
from ..core.models import AdapterRecord, NativeInterface
from ..core.system import CmdRunner, InterfaceLister

logger = get_logger(__name__).bind(platform="windows")


def parse_adapter_query(output: str) -> List[AdapterRecord]:
    """
    Разбирает JSON-вывод Get-NetAdapter.

    Args:
        output: stdout команды (объект, массив или пустая строка)

    Returns:
        List[AdapterRecord]: Адаптеры с MAC в формате aa:bb:cc:dd:ee:ff

    Raises:
        AdapterQueryParseError: Вывод не JSON или неожиданной структуры
        MACFormatError: MAC адаптера не разбирается
    """
    text = trim_value(output)
    if not text:
        # ConvertTo-Json ничего не печатает, если адаптеров нет
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AdapterQueryParseError(
            f"Вывод запроса адаптеров не является JSON: {e}",
            output=text,
        ) from e

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise AdapterQueryParseError(
            f"Ожидался JSON-объект или массив, получено: {type(data).__name__}",
            output=text,
        )

    return [AdapterRecord.from_dict(item) for item in data]


class WindowsMACAddressDetector:
    """
    Сверка нативного списка интерфейсов с Get-NetAdapter.

    Example:
        detector = WindowsMACAddressDetector(SubprocessRunner(), psutil_interfaces)
        detector.detect_mac_addresses()
        # {"12:34:56:78:9a:bc": "vEthernet (Ethernet0)"}
    """

    def __init__(
        self,
        runner: CmdRunner,
        list_interfaces: InterfaceLister,
        adapter_query: Optional[Sequence[str]] = None,
    ):
        """
        Args:
            runner: Запуск внешних команд
            list_interfaces: Нативный список интерфейсов ОС
            adapter_query: Команда запроса адаптеров (по умолчанию PowerShell Get-NetAdapter)
        """
        self.runner = runner
        self.list_interfaces = list_interfaces
        self.adapter_query = list(adapter_query or ADAPTER_QUERY_COMMAND)

    def detect_mac_addresses(self) -> Dict[str, str]:
        """
        Строит отображение MAC -> имя интерфейса.

        Returns:
            Dict[str, str]: MAC (aa:bb:cc:dd:ee:ff) -> имя интерфейса

        Raises:
            InterfaceListError: Нативный список интерфейсов недоступен
            CommandError: Запрос адаптеров завершился ошибкой
            AdapterQueryParseError: Вывод запроса не разобран
            MACFormatError: В выводе запроса некорректный MAC
        """
        native = self._native_interfaces()
        adapters = self.query_adapters()
        return self.reconcile(native, adapters)

    def query_adapters(self) -> List[AdapterRecord]:
        """
        Выполняет запрос адаптеров и разбирает вывод.

        Raises:
            CommandError: Команда не выполнилась
            AdapterQueryParseError: Вывод не разобран
            MACFormatError: Некорректный MAC в выводе
        """
        command_str = " ".join(self.adapter_query)
        try:
            output = self.runner.run(self.adapter_query)
        except MacDetectorError:
            raise
        except Exception as e:
            raise CommandError(
                f"Ошибка выполнения запроса адаптеров: {e}",
                command=command_str,
            ) from e

        adapters = parse_adapter_query(output)
        logger.debug(f"Get-NetAdapter вернул адаптеров: {len(adapters)}")
        return adapters

    def reconcile(
        self,
        native: List[NativeInterface],
        adapters: List[AdapterRecord],
    ) -> Dict[str, str]:
        """
        Соединяет два источника по имени интерфейса.

        Интерфейс, которого нет в одном из списков, отбрасывается.
        MAC берётся из запроса адаптеров.

        Args:
            native: Нативные интерфейсы (что присутствует сейчас)
            adapters: Адаптеры из Get-NetAdapter (что подтверждено)

        Returns:
            Dict[str, str]: MAC -> имя интерфейса
        """
        adapters_by_name = {adapter.name: adapter for adapter in adapters}
        result: Dict[str, str] = {}

        for interface in native:
            adapter = adapters_by_name.get(interface.name)
            if adapter is None:
                logger.debug("Интерфейс не подтверждён Get-NetAdapter", interface=interface.name)
                continue

            if (
                interface.hardware_address
                and normalize_mac_raw(interface.hardware_address)
                != normalize_mac_raw(adapter.mac_address)
            ):
                logger.warning(
                    f"MAC расходится: ОС {interface.hardware_address}, "
                    f"Get-NetAdapter {adapter.mac_address}",
                    interface=interface.name,
                )

            logger.debug("Интерфейс подтверждён", interface=interface.name, mac=adapter.mac_address)
            result[adapter.mac_address] = interface.name

        logger.info(f"Найдено интерфейсов: {len(result)}")
        return result

    def _native_interfaces(self) -> List[NativeInterface]:
        try:
            return list(self.list_interfaces())
        except MacDetectorError:
            raise
        except Exception as e:
            raise InterfaceListError(f"Ошибка получения списка интерфейсов ОС: {e}") from e
