"""
MAC Detector - отображение MAC-адресов на имена сетевых интерфейсов ОС.

Используется логикой сетевой конфигурации агента: сетевая спецификация
развёртывания указывает NIC по MAC, а для применения IP/маршрутов нужно
имя интерфейса в ОС.

Платформы:
- Linux: sysfs, физические интерфейсы + виртуальные с ifalias агента
- Windows: нативный список интерфейсов, сверенный с Get-NetAdapter

Примеры использования:
    # CLI
    python -m mac_detector --format table

    # Python API
    from mac_detector import create_detector

    detector = create_detector()
    mapping = detector.detect_mac_addresses()
    mapping["aa:bb:cc:dd:ee:ff"]  # "eth0"
"""

__version__ = "1.0.0"

from .core.exceptions import (
    MacDetectorError,
    DetectionError,
    GlobError,
    CommandError,
    InterfaceListError,
    ParseError,
    AdapterQueryParseError,
    MACFormatError,
    UnsupportedPlatformError,
    ConfigError,
)
from .core.models import InterfaceRecord, NativeInterface, AdapterRecord, Platform
from .detectors import (
    MACAddressDetector,
    LinuxMACAddressDetector,
    WindowsMACAddressDetector,
    create_detector,
)

__all__ = [
    "__version__",
    # Detectors
    "MACAddressDetector",
    "LinuxMACAddressDetector",
    "WindowsMACAddressDetector",
    "create_detector",
    # Models
    "InterfaceRecord",
    "NativeInterface",
    "AdapterRecord",
    "Platform",
    # Errors
    "MacDetectorError",
    "DetectionError",
    "GlobError",
    "CommandError",
    "InterfaceListError",
    "ParseError",
    "AdapterQueryParseError",
    "MACFormatError",
    "UnsupportedPlatformError",
    "ConfigError",
]
