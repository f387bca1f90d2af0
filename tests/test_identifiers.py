"""Tests for package, object and coin scanners."""

from guardians import Action, ObjectBlocklist, scan_coin, scan_object, scan_package

PACKAGE = "0x2c8d603bc51326b8c13cef9dd07031a408a48dddb541963357661df5d3204809"


class TestScanPackage:
    def test_empty_list(self):
        assert scan_package([], "0xabc") == Action.NONE

    def test_listed_address(self):
        assert scan_package(["0xabc"], "0xabc") == Action.BLOCK
        assert scan_package(frozenset({PACKAGE}), PACKAGE) == Action.BLOCK

    def test_compared_verbatim(self):
        assert scan_package(["0xABC"], "0xabc") == Action.NONE
        assert scan_package(["0xabc"], " 0xabc") == Action.NONE


class TestScanObject:
    def test_allowlist_wins(self):
        objects = ObjectBlocklist(allowlist=frozenset({"0x1"}), blocklist=frozenset({"0x1"}))
        assert scan_object(objects, "0x1") == Action.NONE

    def test_blocklisted(self):
        objects = ObjectBlocklist(blocklist=frozenset({"0x2"}))
        assert scan_object(objects, "0x2") == Action.BLOCK

    def test_unknown(self):
        assert scan_object(ObjectBlocklist(), "0x3") == Action.NONE


class TestScanCoin:
    def test_listed_coin(self):
        coin = f"{PACKAGE}::scam::SCAM"
        assert scan_coin([coin], coin) == Action.BLOCK

    def test_unlisted_coin(self):
        assert scan_coin([], "0x2::sui::SUI") == Action.NONE


def test_action_values():
    assert Action.BLOCK == "BLOCK"
    assert str(Action.NONE) == "NONE"
