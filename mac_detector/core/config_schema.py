"""
Pydantic схемы для валидации конфигурации.

Ошибки валидации выбрасывают ConfigError.

Пример использования:
    from mac_detector.core.config_schema import validate_config

    config_dict = yaml.safe_load(open("mac_detector.yaml"))
    validated = validate_config(config_dict)  # raises ConfigError on failure
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .constants import ADAPTER_QUERY_COMMAND, MANAGED_ALIAS_PREFIX, NET_INTERFACES_GLOB
from .exceptions import ConfigError


class LinuxConfig(BaseModel):
    """Настройки детектора Linux."""
    net_glob: str = NET_INTERFACES_GLOB
    alias_prefix: str = Field(default=MANAGED_ALIAS_PREFIX, min_length=1)

    @field_validator("net_glob")
    @classmethod
    def validate_net_glob(cls, v: str) -> str:
        """Шаблон должен выбирать записи интерфейсов."""
        if "*" not in v:
            raise PydanticCustomError(
                "invalid_glob",
                "net_glob должен содержать '*'",
            )
        return v


class WindowsConfig(BaseModel):
    """Настройки детектора Windows."""
    adapter_query: List[str] = Field(
        default_factory=lambda: list(ADAPTER_QUERY_COMMAND),
        min_length=1,
    )
    command_timeout: Optional[float] = Field(default=None, gt=0, le=600)
    # PowerShell 5.1 пишет перенаправленный вывод в OEM-кодировке
    output_encoding: str = Field(default="oem", min_length=1)


class LoggingConfig(BaseModel):
    """Настройки логирования."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    json_format: bool = False
    console: bool = True
    file_path: Optional[str] = None
    rotation: str = Field(default="size", pattern="^(size|time|none)$")
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)  # min 1KB
    backup_count: int = Field(default=5, ge=1, le=100)
    when: str = "midnight"
    interval: int = Field(default=1, ge=1)


class AppConfig(BaseModel):
    """Полная конфигурация приложения."""
    platform: str = Field(default="auto", pattern="^(auto|linux|windows)$")
    linux: LinuxConfig = Field(default_factory=LinuxConfig)
    windows: WindowsConfig = Field(default_factory=WindowsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def validate_config(config_dict: dict, config_file: Optional[str] = None) -> AppConfig:
    """
    Валидирует словарь конфигурации.

    Args:
        config_dict: Словарь из YAML
        config_file: Файл, из которого загружен словарь (для сообщения)

    Returns:
        AppConfig: Валидированная конфигурация

    Raises:
        ConfigError: При ошибке валидации
    """
    try:
        return AppConfig(**config_dict)
    except ValidationError as e:
        key = None
        error_msg = str(e)
        errors = e.errors()
        if errors:
            first_error = errors[0]
            key = ".".join(str(x) for x in first_error.get("loc", []))
            msg = first_error.get("msg", "Unknown error")
            error_msg = f"{key}: {msg}"

        raise ConfigError(
            message=f"Ошибка валидации конфигурации: {error_msg}",
            config_file=config_file,
            key=key,
        ) from e


def get_default_config() -> AppConfig:
    """Возвращает конфигурацию по умолчанию."""
    return AppConfig()
