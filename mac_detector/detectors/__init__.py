"""
Детекторы MAC-адресов по платформам.

Реализация выбирается один раз хост-процессом:
    detector = create_detector()            # по platform.system()
    detector = create_detector("windows")   # явно
    mapping = detector.detect_mac_addresses()
"""

import platform as _platform
from typing import Optional, Union

from ..core.config_schema import AppConfig
from ..core.exceptions import UnsupportedPlatformError
from ..core.models import Platform
from ..core.system import OSFileSystem, SubprocessRunner, psutil_interfaces
from .base import MACAddressDetector
from .linux import LinuxMACAddressDetector
from .windows import WindowsMACAddressDetector, parse_adapter_query


def resolve_platform(platform: Optional[Union[str, Platform]] = None) -> Platform:
    """
    Определяет платформу.

    Args:
        platform: "linux", "windows", "auto" или None (= текущая ОС)

    Returns:
        Platform: Платформа детектора

    Raises:
        UnsupportedPlatformError: Для платформы нет детектора
    """
    if platform is None or platform == "auto":
        platform = _platform.system()

    value = platform.value if isinstance(platform, Platform) else str(platform).lower()
    try:
        return Platform(value)
    except ValueError:
        raise UnsupportedPlatformError(
            f"Детектор MAC-адресов для платформы {platform!r} не реализован",
            platform=str(platform),
        ) from None


def create_detector(
    platform: Optional[Union[str, Platform]] = None,
    config: Optional[AppConfig] = None,
) -> MACAddressDetector:
    """
    Создаёт детектор для платформы с реализациями возможностей по умолчанию.

    Args:
        platform: Платформа (None = config.platform, затем текущая ОС)
        config: Конфигурация (None = значения по умолчанию)

    Returns:
        MACAddressDetector: Linux или Windows детектор
    """
    config = config or AppConfig()
    target = resolve_platform(platform or config.platform)

    if target == Platform.WINDOWS:
        return WindowsMACAddressDetector(
            runner=SubprocessRunner(
                timeout=config.windows.command_timeout,
                encoding=config.windows.output_encoding,
            ),
            list_interfaces=psutil_interfaces,
            adapter_query=config.windows.adapter_query,
        )

    return LinuxMACAddressDetector(
        fs=OSFileSystem(),
        net_glob=config.linux.net_glob,
        alias_prefix=config.linux.alias_prefix,
    )


__all__ = [
    "MACAddressDetector",
    "LinuxMACAddressDetector",
    "WindowsMACAddressDetector",
    "parse_adapter_query",
    "resolve_platform",
    "create_detector",
]
