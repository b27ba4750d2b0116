"""
CLI модуль mac_detector.

Один снимок отображения MAC -> интерфейс для отладки на хосте.

Примеры использования:
    python -m mac_detector
    python -m mac_detector --format table
    python -m mac_detector --platform windows -v
    python -m mac_detector -c /etc/agent/mac_detector.yaml --json-logs
"""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from .config import load_config
from .core.exceptions import MacDetectorError, format_error_for_log
from .core.logging import LogConfig, setup_logging, setup_logging_from_config
from .detectors import create_detector

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """
    Создаёт парсер аргументов командной строки.

    Returns:
        ArgumentParser: Настроенный парсер
    """
    parser = argparse.ArgumentParser(
        prog="mac_detector",
        description="Отображение MAC-адресов на имена сетевых интерфейсов ОС",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  %(prog)s
  %(prog)s --format table
  %(prog)s --platform linux -v
        """,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Подробный вывод (DEBUG)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Логи в формате JSON",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Путь к YAML конфигурации",
    )
    parser.add_argument(
        "--platform",
        choices=["auto", "linux", "windows"],
        default=None,
        help="Платформа детектора (по умолчанию из конфигурации / текущая ОС)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "table"],
        default="json",
        help="Формат вывода (по умолчанию json)",
    )
    return parser


def format_table(mapping: Dict[str, str]) -> str:
    """
    Таблица MAC / интерфейс, отсортированная по MAC.

    Args:
        mapping: MAC -> имя интерфейса

    Returns:
        str: Текст таблицы
    """
    header = ("MAC", "INTERFACE")
    width = max([len(header[0])] + [len(mac) for mac in mapping])
    lines = [f"{header[0].ljust(width)}  {header[1]}"]
    for mac in sorted(mapping):
        lines.append(f"{mac.ljust(width)}  {mapping[mac]}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, platform=args.platform)
    except MacDetectorError as e:
        setup_logging(json_format=args.json_logs)
        logger.error(format_error_for_log(e))
        return 1

    log_config = LogConfig.from_dict(config.logging.model_dump())
    if args.verbose:
        log_config.level = logging.DEBUG
    if args.json_logs:
        log_config.json_format = True
    setup_logging_from_config(log_config)

    try:
        mapping = create_detector(config=config).detect_mac_addresses()
    except MacDetectorError as e:
        logger.error(format_error_for_log(e))
        return 1

    if args.format == "table":
        print(format_table(mapping))
    else:
        print(json.dumps(mapping, indent=2, sort_keys=True, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
