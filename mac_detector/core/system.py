"""
Внешние возможности, которые потребляют детекторы.

Контракты (Protocol) позволяют подменять файловую систему, запуск команд и
нативный список интерфейсов в тестах. Реализации по умолчанию тонкие:
- OSFileSystem: glob + pathlib
- SubprocessRunner: subprocess.run
- psutil_interfaces: psutil.net_if_addrs()
"""

import glob
import logging
import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Sequence

import psutil

from .constants import normalize_mac
from .exceptions import CommandError, InterfaceListError
from .models import NativeInterface

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Доступ к файловой системе (sysfs)."""

    def glob(self, pattern: str) -> List[str]:
        ...

    def read_file(self, path: str) -> str:
        ...

    def exists(self, path: str) -> bool:
        ...


class CmdRunner(Protocol):
    """Запуск внешней команды, возвращает stdout."""

    def run(self, command: Sequence[str]) -> str:
        ...


InterfaceLister = Callable[[], List[NativeInterface]]


class OSFileSystem:
    """Реальная файловая система."""

    def glob(self, pattern: str) -> List[str]:
        # Сортировка фиксирует порядок обхода интерфейсов
        return sorted(glob.glob(pattern))

    def read_file(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")

    def exists(self, path: str) -> bool:
        # device в sysfs это симлинк, битый симлинк тоже считается
        p = Path(path)
        return p.exists() or p.is_symlink()


class SubprocessRunner:
    """
    Запуск команд через subprocess.

    Ненулевой код возврата, отсутствующий исполняемый файл и таймаут
    превращаются в CommandError.
    """

    def __init__(self, timeout: Optional[float] = None, encoding: Optional[str] = None):
        """
        Args:
            timeout: Таймаут в секундах (None = без ограничения)
            encoding: Кодировка вывода (None = кодировка локали).
                PowerShell 5.1 пишет перенаправленный вывод в OEM-кодировке,
                для него нужен "oem"
        """
        self.timeout = timeout
        self.encoding = encoding

    def run(self, command: Sequence[str]) -> str:
        """
        Выполняет команду.

        Args:
            command: Аргументы команды

        Returns:
            str: stdout процесса

        Raises:
            CommandError: Команда не запустилась или завершилась с ошибкой
        """
        command_str = " ".join(command)
        logger.debug(f"Выполнение команды: {command_str}")

        try:
            result = subprocess.run(
                list(command),
                capture_output=True,
                text=True,
                encoding=self.encoding,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise CommandError(
                f"Таймаут выполнения команды: {e}",
                command=command_str,
            ) from e
        except OSError as e:
            raise CommandError(
                f"Не удалось запустить команду: {e}",
                command=command_str,
            ) from e
        except (UnicodeDecodeError, LookupError) as e:
            raise CommandError(
                f"Не удалось декодировать вывод команды ({self.encoding}): {e}",
                command=command_str,
            ) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise CommandError(
                f"Команда завершилась с кодом {result.returncode}: {stderr}",
                command=command_str,
                exit_code=result.returncode,
                output=stderr,
            )

        return result.stdout


def psutil_interfaces() -> List[NativeInterface]:
    """
    Нативный список интерфейсов через psutil.

    Returns:
        List[NativeInterface]: Интерфейсы в порядке psutil, MAC в формате ieee

    Raises:
        InterfaceListError: psutil не смог получить список
    """
    try:
        addrs = psutil.net_if_addrs()
    except (OSError, psutil.Error) as e:
        raise InterfaceListError(f"Не удалось получить список интерфейсов: {e}") from e

    interfaces = []
    for name, addr_list in addrs.items():
        hardware_address = ""
        for addr in addr_list:
            if addr.family == psutil.AF_LINK:
                hardware_address = normalize_mac(addr.address)
                break
        interfaces.append(NativeInterface(name=name, hardware_address=hardware_address))

    return interfaces
