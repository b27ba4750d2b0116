"""
Контракт детектора MAC-адресов.

Вызывающий код зависит только от MACAddressDetector, не от конкретной
платформенной реализации. Каждый вызов - свежий синхронный снимок:
детекторы не хранят состояние между вызовами.
"""

from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class MACAddressDetector(Protocol):
    """
    Отображение MAC -> имя интерфейса ОС.

    detect_mac_addresses() возвращает словарь с ключами в формате
    aa:bb:cc:dd:ee:ff. При сбое перечисления выбрасывает DetectionError
    (или ParseError) и не возвращает частичный результат.
    """

    def detect_mac_addresses(self) -> Dict[str, str]:
        ...
