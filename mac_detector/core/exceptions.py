"""
Типизированные исключения для MAC Detector.

Иерархия:
    MacDetectorError (базовый)
    ├── DetectionError (сбой перечисления интерфейсов, фатально)
    │   ├── GlobError (поиск в sysfs)
    │   ├── CommandError (запуск внешней команды)
    │   └── InterfaceListError (нативный список интерфейсов ОС)
    ├── ParseError (некорректные внешние данные, фатально)
    │   ├── AdapterQueryParseError (вывод Get-NetAdapter)
    │   └── MACFormatError (строка MAC-адреса)
    ├── UnsupportedPlatformError (нет детектора для платформы)
    └── ConfigError (конфигурация)

Сообщение обёрнутой ошибки всегда содержит текст исходной причины,
сама причина доступна через __cause__.

Пример использования:
    from mac_detector.core.exceptions import DetectionError

    try:
        mapping = detector.detect_mac_addresses()
    except DetectionError as e:
        logger.error(f"Не удалось получить интерфейсы: {e}")
"""

from typing import Optional, Any


class MacDetectorError(Exception):
    """
    Базовое исключение для всех ошибок MAC Detector.

    Attributes:
        message: Описание ошибки
        details: Дополнительные детали (dict)
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def to_dict(self) -> dict:
        """Сериализация для логов/отчётов."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# === Detection Errors ===

class DetectionError(MacDetectorError):
    """
    Сбой механизма перечисления интерфейсов.

    Всегда фатален для текущего вызова: частичный результат не возвращается.
    """
    pass


class GlobError(DetectionError):
    """
    Ошибка поиска интерфейсов по glob-шаблону.

    Пример:
        raise GlobError("Permission denied", pattern="/sys/class/net/*")
    """

    def __init__(
        self,
        message: str,
        pattern: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.pattern = pattern
        details = details or {}
        if pattern:
            details["pattern"] = pattern
        super().__init__(message, details)


class CommandError(DetectionError):
    """
    Ошибка выполнения внешней команды.

    Attributes:
        command: Команда которая вызвала ошибку
        exit_code: Код возврата (None если процесс не запустился)
        output: stderr процесса (если есть)

    Пример:
        raise CommandError("exit status 1", command="powershell ...", exit_code=1)
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        exit_code: Optional[int] = None,
        output: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.command = command
        self.exit_code = exit_code
        self.output = output
        details = details or {}
        if command:
            details["command"] = command
        if exit_code is not None:
            details["exit_code"] = exit_code
        if output:
            details["output"] = output[:200]  # Ограничиваем размер
        super().__init__(message, details)


class InterfaceListError(DetectionError):
    """Ошибка нативного перечисления интерфейсов ОС."""
    pass


# === Parse Errors ===

class ParseError(MacDetectorError):
    """Некорректные данные от внешнего источника."""
    pass


class AdapterQueryParseError(ParseError):
    """
    Вывод запроса адаптеров не удалось разобрать.

    Attributes:
        output: Фрагмент вывода команды
    """

    def __init__(
        self,
        message: str,
        output: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.output = output
        details = details or {}
        if output:
            details["output"] = output[:200]
        super().__init__(message, details)


class MACFormatError(ParseError):
    """
    Строка не является корректным 6-октетным MAC-адресом.

    Пример:
        raise MACFormatError("Некорректный MAC", value="12-34-ZZ")
    """

    def __init__(
        self,
        message: str,
        value: Optional[Any] = None,
        details: Optional[dict] = None,
    ):
        self.value = value
        details = details or {}
        if value is not None:
            details["value"] = str(value)[:100]
        super().__init__(message, details)


# === Platform / Config Errors ===

class UnsupportedPlatformError(MacDetectorError):
    """Для платформы нет реализации детектора."""

    def __init__(
        self,
        message: str,
        platform: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.platform = platform
        details = details or {}
        if platform:
            details["platform"] = platform
        super().__init__(message, details)


class ConfigError(MacDetectorError):
    """
    Ошибка конфигурации.

    Attributes:
        config_file: Путь к файлу конфигурации
        key: Ключ конфигурации с ошибкой

    Пример:
        raise ConfigError("Invalid value", config_file="mac_detector.yaml", key="platform")
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        key: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.config_file = config_file
        self.key = key
        details = details or {}
        if config_file:
            details["config_file"] = config_file
        if key:
            details["key"] = key
        super().__init__(message, details)


# === Utility Functions ===

def format_error_for_log(error: Exception) -> str:
    """
    Форматирует ошибку для вывода в лог.

    Args:
        error: Исключение

    Returns:
        str: Отформатированная строка ошибки
    """
    if isinstance(error, MacDetectorError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
