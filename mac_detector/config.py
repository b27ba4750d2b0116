"""
Загрузчик конфигурации из YAML.

Порядок: значения по умолчанию -> YAML файл -> переменные окружения,
затем валидация через pydantic (core/config_schema.py).

    config = load_config("mac_detector.yaml")
    config.linux.alias_prefix   # "bosh-interface-"
    config.windows.adapter_query
"""

import os
import logging
from typing import Any, Optional

import yaml

from .core.config_schema import AppConfig, validate_config
from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Путь к файлу конфигурации рядом с пакетом
CONFIG_FILE = os.path.join(os.path.dirname(__file__), "mac_detector.yaml")

SEARCH_PATHS = [
    CONFIG_FILE,
    "mac_detector.yaml",
    "config.yaml",
    ".mac_detector.yaml",
]

ENV_PLATFORM = "MAC_DETECTOR_PLATFORM"
ENV_LOG_LEVEL = "MAC_DETECTOR_LOG_LEVEL"


def _get_defaults() -> dict:
    """Значения по умолчанию."""
    return AppConfig().model_dump()


def _find_config_file() -> Optional[str]:
    """Ищет файл конфигурации в стандартных местах."""
    for path in SEARCH_PATHS:
        if os.path.exists(path):
            return path
    return None


def _load_yaml(config_file: str) -> dict:
    """
    Читает YAML файл.

    Raises:
        ConfigError: Файл не читается или содержит не словарь
    """
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Не удалось прочитать {config_file}: {e}", config_file=config_file) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Некорректный YAML в {config_file}: {e}", config_file=config_file) from e

    if not isinstance(data, dict):
        raise ConfigError(
            "Корень конфигурации должен быть словарём",
            config_file=config_file,
        )

    logger.debug(f"Конфигурация загружена из {config_file}")
    return data


def _load_env(data: dict) -> None:
    """Загружает настройки из переменных окружения."""
    if os.getenv(ENV_PLATFORM):
        data["platform"] = os.getenv(ENV_PLATFORM).strip().lower()
    if os.getenv(ENV_LOG_LEVEL):
        if not isinstance(data.get("logging"), dict):
            # "logging:" без значения в YAML даёт None
            data["logging"] = {}
        data["logging"]["level"] = os.getenv(ENV_LOG_LEVEL).strip().upper()


def _merge_dict(base: dict, override: dict) -> None:
    """Рекурсивно мержит словари."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_dict(base[key], value)
        else:
            base[key] = value


def load_config(config_file: Optional[str] = None, **overrides: Any) -> AppConfig:
    """
    Загружает и валидирует конфигурацию.

    Args:
        config_file: Путь к YAML файлу (опционально, иначе поиск по SEARCH_PATHS)
        **overrides: Значения верхнего уровня поверх файла и окружения (например, platform)

    Returns:
        AppConfig: Валидированная конфигурация

    Raises:
        ConfigError: Файл не найден, не читается или не проходит валидацию
    """
    if config_file and not os.path.exists(config_file):
        raise ConfigError("Файл конфигурации не найден", config_file=config_file)

    path = config_file or _find_config_file()

    data = _get_defaults()
    if path:
        _merge_dict(data, _load_yaml(path))
    _load_env(data)
    _merge_dict(data, {k: v for k, v in overrides.items() if v is not None})

    return validate_config(data, config_file=path)
