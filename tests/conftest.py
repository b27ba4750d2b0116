"""
Pytest configuration и общие fixtures для тестов.

Предоставляет переиспользуемые fixtures:
- fake_fs: In-memory файловая система
- fake_runner: Fake запуска команд с заранее заданным выводом
- adapter_query: Команда Get-NetAdapter по умолчанию
"""

from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from mac_detector.core.constants import ADAPTER_QUERY_COMMAND


class FakeFileSystem:
    """
    In-memory реализация FileSystem.

    Attributes:
        files: Путь -> содержимое
        globs: Шаблон -> список путей
        glob_error: Исключение, которое выбросит glob()
        read_errors: Путь -> исключение при чтении
    """

    def __init__(self):
        self.files: Dict[str, str] = {}
        self.globs: Dict[str, List[str]] = {}
        self.glob_error: Optional[Exception] = None
        self.read_errors: Dict[str, Exception] = {}
        self.glob_calls: List[str] = []

    def write_file(self, path: str, content: str = "") -> None:
        self.files[path] = content

    def set_glob(self, pattern: str, paths: List[str]) -> None:
        self.globs[pattern] = list(paths)

    def glob(self, pattern: str) -> List[str]:
        self.glob_calls.append(pattern)
        if self.glob_error is not None:
            raise self.glob_error
        return list(self.globs.get(pattern, []))

    def read_file(self, path: str) -> str:
        if path in self.read_errors:
            raise self.read_errors[path]
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def exists(self, path: str) -> bool:
        return path in self.files


class FakeCmdRunner:
    """Fake CmdRunner: команда -> stdout или исключение."""

    def __init__(self):
        self.results: Dict[Tuple[str, ...], str] = {}
        self.errors: Dict[Tuple[str, ...], Exception] = {}
        self.calls: List[Tuple[str, ...]] = []

    def add_result(self, command: Sequence[str], stdout: str) -> None:
        self.results[tuple(command)] = stdout

    def add_error(self, command: Sequence[str], error: Exception) -> None:
        self.errors[tuple(command)] = error

    def run(self, command: Sequence[str]) -> str:
        key = tuple(command)
        self.calls.append(key)
        if key in self.errors:
            raise self.errors[key]
        if key not in self.results:
            raise AssertionError(f"Неожиданная команда: {' '.join(command)}")
        return self.results[key]


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Пустая in-memory файловая система."""
    return FakeFileSystem()


@pytest.fixture
def fake_runner() -> FakeCmdRunner:
    """Fake запуска команд."""
    return FakeCmdRunner()


@pytest.fixture
def adapter_query() -> List[str]:
    """Команда Get-NetAdapter по умолчанию."""
    return list(ADAPTER_QUERY_COMMAND)
