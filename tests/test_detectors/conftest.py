"""
Fixtures для тестов детекторов: построение sysfs-дерева в FakeFileSystem.
"""

from typing import Dict, List, Optional

import pytest

MANAGED_PREFIX = "bosh-interface-"


def write_network_device(fs, iface: str, mac: str, is_physical: bool, ifalias: str = "") -> str:
    """Создаёт /sys/class/net/<iface> с address, ifalias и (для физических) device."""
    interface_path = f"/sys/class/net/{iface}"
    fs.write_file(interface_path)
    if is_physical:
        fs.write_file(f"{interface_path}/device")
    fs.write_file(f"{interface_path}/address", f"{mac}\n")
    fs.write_file(f"{interface_path}/ifalias", f"{ifalias}\n")
    return interface_path


@pytest.fixture
def stub_interfaces(fake_fs):
    """
    Заполняет fake_fs интерфейсами и настраивает glob /sys/class/net/*.

    Usage:
        stub_interfaces(
            physical={"aa:bb": "eth0"},
            virtual={"11:22": "veth0"},
            managed={"33:44": "veth2"},
        )
    """
    def _stub(
        physical: Optional[Dict[str, str]] = None,
        virtual: Optional[Dict[str, str]] = None,
        managed: Optional[Dict[str, str]] = None,
    ) -> List[str]:
        paths = []
        for mac, iface in (physical or {}).items():
            paths.append(write_network_device(fake_fs, iface, mac, True))
        for mac, iface in (virtual or {}).items():
            paths.append(write_network_device(fake_fs, iface, mac, False))
        for mac, iface in (managed or {}).items():
            paths.append(write_network_device(fake_fs, iface, mac, False, f"{MANAGED_PREFIX}{iface}"))
        fake_fs.set_glob("/sys/class/net/*", paths)
        return paths
    return _stub
