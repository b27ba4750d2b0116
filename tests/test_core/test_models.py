"""
Тесты моделей данных.
"""

import pytest

from mac_detector.core.exceptions import AdapterQueryParseError, MACFormatError
from mac_detector.core.models import AdapterRecord, InterfaceRecord, NativeInterface, Platform


@pytest.mark.unit
class TestAdapterRecord:

    def test_from_dict(self):
        record = AdapterRecord.from_dict({"MacAddress": "12-34-56-78-9A-BC", "Name": "Ethernet0"})

        assert record == AdapterRecord(name="Ethernet0", mac_address="12:34:56:78:9a:bc")

    def test_extra_keys_ignored(self):
        record = AdapterRecord.from_dict({
            "MacAddress": "12-34-56-78-9A-BC",
            "Name": "Ethernet0",
            "Status": "Up",
        })

        assert record.name == "Ethernet0"

    @pytest.mark.parametrize("data", [
        {"MacAddress": "12-34-56-78-9A-BC"},
        {"MacAddress": "12-34-56-78-9A-BC", "Name": ""},
        {"MacAddress": "12-34-56-78-9A-BC", "Name": 5},
        {"Name": "Ethernet0"},
        ["Ethernet0"],
    ])
    def test_incomplete(self, data):
        with pytest.raises(AdapterQueryParseError):
            AdapterRecord.from_dict(data)

    @pytest.mark.parametrize("mac", ["", "12-34-56", 123456])
    def test_bad_mac(self, mac):
        with pytest.raises(MACFormatError):
            AdapterRecord.from_dict({"MacAddress": mac, "Name": "Ethernet0"})


@pytest.mark.unit
class TestRecords:

    def test_interface_record_defaults(self):
        record = InterfaceRecord(name="veth0")

        assert record.to_dict() == {
            "name": "veth0",
            "mac_address": "",
            "is_physical": False,
            "alias": "",
        }

    def test_native_interface_to_dict(self):
        assert NativeInterface("Ethernet0").to_dict() == {
            "name": "Ethernet0",
            "hardware_address": "",
        }

    def test_platform_values(self):
        assert Platform("linux") is Platform.LINUX
        assert Platform.WINDOWS == "windows"
