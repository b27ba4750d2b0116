"""
Нормализация MAC-адресов.

Два основных формата:
- ieee:    aa:bb:cc:dd:ee:ff (Linux sysfs, ключи результата детектора)
- windows: AA-BB-CC-DD-EE-FF (Get-NetAdapter, psutil на Windows)

Строгие функции (parse_mac, hyphen_to_colon, colon_to_hyphen) выбрасывают
MACFormatError. normalize_mac() мягкая: возвращает "" для мусора.
"""

import re

from ..exceptions import MACFormatError

# Шесть октетов с одинаковым разделителем, либо Cisco-формат, либо без разделителей
_MAC_PATTERNS = (
    re.compile(r"^[0-9a-f]{2}(:[0-9a-f]{2}){5}$"),
    re.compile(r"^[0-9a-f]{2}(-[0-9a-f]{2}){5}$"),
    re.compile(r"^[0-9a-f]{4}(\.[0-9a-f]{4}){2}$"),
    re.compile(r"^[0-9a-f]{12}$"),
)


def trim_value(text: str) -> str:
    """Убирает пробелы и переводы строк по краям (вывод sysfs, PowerShell)."""
    if not text:
        return ""
    return text.strip()


def parse_mac(mac: str) -> str:
    """
    Проверяет MAC-адрес и возвращает сырой формат.

    Args:
        mac: MAC в формате aa:bb:.., AA-BB-.., aabb.ccdd.eeff или aabbccddeeff

    Returns:
        str: 12 hex-символов в нижнем регистре

    Raises:
        MACFormatError: Значение не является 6-октетным MAC
    """
    if not isinstance(mac, str):
        raise MACFormatError("MAC-адрес должен быть строкой", value=mac)

    candidate = mac.strip().lower()
    if not any(pattern.match(candidate) for pattern in _MAC_PATTERNS):
        raise MACFormatError(f"Некорректный MAC-адрес: {mac!r}", value=mac)

    for char in (":", "-", "."):
        candidate = candidate.replace(char, "")
    return candidate


def hyphen_to_colon(mac: str) -> str:
    """
    12-34-56-78-9A-BC -> 12:34:56:78:9a:bc.

    Raises:
        MACFormatError: Некорректный MAC
    """
    clean = parse_mac(mac)
    return ":".join(clean[i : i + 2] for i in range(0, 12, 2))


def colon_to_hyphen(mac: str) -> str:
    """
    12:34:56:78:9a:bc -> 12-34-56-78-9A-BC.

    Raises:
        MACFormatError: Некорректный MAC
    """
    clean = parse_mac(mac)
    return "-".join(clean[i : i + 2].upper() for i in range(0, 12, 2))


def normalize_mac_raw(mac: str) -> str:
    """
    Нормализует MAC-адрес в сырой формат (12 символов, нижний регистр).

    Используется для сравнения MAC-адресов из разных источников.

    Args:
        mac: MAC-адрес в любом формате

    Returns:
        str: 12 символов в нижнем регистре (aabbccddeeff) или ""
    """
    if not mac:
        return ""
    mac_clean = mac.strip().lower()
    for char in [":", "-", ".", " "]:
        mac_clean = mac_clean.replace(char, "")
    if len(mac_clean) != 12 or not re.fullmatch(r"[0-9a-f]{12}", mac_clean):
        return ""
    return mac_clean


def normalize_mac(mac: str, format: str = "ieee") -> str:
    """
    Нормализует MAC-адрес в указанный формат.

    Args:
        mac: MAC-адрес в любом формате
        format: Формат вывода:
            - "raw": aabbccddeeff
            - "ieee": aa:bb:cc:dd:ee:ff
            - "windows": AA-BB-CC-DD-EE-FF
            - "cisco": aabb.ccdd.eeff

    Returns:
        str: MAC в указанном формате (или пустая строка)
    """
    clean = normalize_mac_raw(mac)
    if not clean:
        return ""

    if format == "raw":
        return clean
    elif format == "cisco":
        return f"{clean[0:4]}.{clean[4:8]}.{clean[8:12]}"
    elif format == "windows":
        return "-".join(clean[i : i + 2].upper() for i in range(0, 12, 2))
    else:  # ieee (default)
        return ":".join(clean[i : i + 2] for i in range(0, 12, 2))
