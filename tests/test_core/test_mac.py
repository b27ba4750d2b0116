"""
Тесты нормализации MAC-адресов.
"""

import pytest

from mac_detector.core.constants import (
    colon_to_hyphen,
    hyphen_to_colon,
    normalize_mac,
    normalize_mac_raw,
    parse_mac,
    trim_value,
)
from mac_detector.core.exceptions import MACFormatError, ParseError


@pytest.mark.unit
class TestConversions:
    """Преобразование между форматами Windows и IEEE."""

    def test_hyphen_to_colon(self):
        assert hyphen_to_colon("12-34-56-78-9A-BC") == "12:34:56:78:9a:bc"

    def test_colon_to_hyphen(self):
        assert colon_to_hyphen("12:34:56:78:9a:bc") == "12-34-56-78-9A-BC"

    def test_surrounding_whitespace_ignored(self):
        assert hyphen_to_colon("  12-34-56-78-9A-BC\r\n") == "12:34:56:78:9a:bc"

    @pytest.mark.parametrize("mac", [
        "00-00-00-00-00-00",
        "FF-FF-FF-FF-FF-FF",
        "00-15-5D-01-02-0A",
        "A0-B1-C2-D3-E4-F5",
    ])
    def test_round_trip(self, mac):
        """Windows -> IEEE -> Windows без потерь."""
        assert colon_to_hyphen(hyphen_to_colon(mac)) == mac

    @pytest.mark.parametrize("mac", [
        "12-34-56-78-9A",
        "12-34-56-78-9A-BC-DE",
        "12-34-56-78-9A-XX",
        "12:34-56:78-9A:BC",
        "123-45-67-89-AB-C",
        "",
    ])
    def test_invalid_mac(self, mac):
        with pytest.raises(MACFormatError) as exc_info:
            hyphen_to_colon(mac)

        assert isinstance(exc_info.value, ParseError)

    def test_non_string(self):
        with pytest.raises(MACFormatError):
            parse_mac(None)


@pytest.mark.unit
class TestParseMac:
    """Строгий разбор MAC."""

    @pytest.mark.parametrize("mac", [
        "aa:bb:cc:dd:ee:ff",
        "AA-BB-CC-DD-EE-FF",
        "aabb.ccdd.eeff",
        "AABBCCDDEEFF",
    ])
    def test_supported_formats(self, mac):
        assert parse_mac(mac) == "aabbccddeeff"


@pytest.mark.unit
class TestNormalizeMac:
    """Мягкая нормализация (пустая строка вместо ошибки)."""

    @pytest.mark.parametrize("format, expected", [
        ("raw", "001122334455"),
        ("ieee", "00:11:22:33:44:55"),
        ("windows", "00-11-22-33-44-55"),
        ("cisco", "0011.2233.4455"),
    ])
    def test_formats(self, format, expected):
        assert normalize_mac("00-11-22-33-44-55", format=format) == expected

    @pytest.mark.parametrize("mac", ["", "not-a-mac", "00:11:22:33:44", "gg:11:22:33:44:55"])
    def test_invalid_returns_empty(self, mac):
        assert normalize_mac(mac) == ""
        assert normalize_mac_raw(mac) == ""


@pytest.mark.unit
class TestTrimValue:

    @pytest.mark.parametrize("text, expected", [
        ("aa:bb:cc:dd:ee:ff\n", "aa:bb:cc:dd:ee:ff"),
        ("  bosh-interface-veth2 \r\n", "bosh-interface-veth2"),
        ("\n", ""),
        ("", ""),
    ])
    def test_trim(self, text, expected):
        assert trim_value(text) == expected
