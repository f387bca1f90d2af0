"""Tests for list payload parsing."""

import pytest

from guardians.exceptions import BlocklistFetchError, BlocklistPayloadError
from guardians.models import DomainBlocklist, ObjectBlocklist, identifier_set_from_payload


def test_domain_payload():
    blocklist = DomainBlocklist.from_payload(
        {"allowlist": ["Good.io"], "blocklist": ["bad.io", "worse.io"]}
    )
    assert blocklist.allowlist == frozenset({"good.io"})
    assert blocklist.blocklist == frozenset({"bad.io", "worse.io"})


def test_missing_keys_default_to_empty():
    blocklist = DomainBlocklist.from_payload({"blocklist": ["bad.io"]})
    assert blocklist.allowlist == frozenset()
    objects = ObjectBlocklist.from_payload({})
    assert objects.allowlist == frozenset()
    assert objects.blocklist == frozenset()


def test_object_ids_are_not_lowercased():
    objects = ObjectBlocklist.from_payload({"blocklist": ["0xABC"]})
    assert "0xABC" in objects.blocklist


@pytest.mark.parametrize(
    "payload",
    [
        ["bad.io"],
        "bad.io",
        {"blocklist": "bad.io"},
        {"blocklist": ["bad.io", 42]},
    ],
)
def test_bad_domain_payloads(payload):
    with pytest.raises(BlocklistPayloadError) as excinfo:
        DomainBlocklist.from_payload(payload, url="https://lists.test/domain.json")
    assert excinfo.value.url == "https://lists.test/domain.json"
    assert isinstance(excinfo.value, BlocklistFetchError)


def test_identifier_payload():
    assert identifier_set_from_payload(["0x1", "0x2", "0x1"]) == frozenset({"0x1", "0x2"})


def test_identifier_payload_must_be_array():
    with pytest.raises(BlocklistPayloadError):
        identifier_set_from_payload({"packages": ["0x1"]}, name="package list")


def test_lists_are_immutable():
    blocklist = DomainBlocklist(blocklist=["bad.io"])
    assert isinstance(blocklist.blocklist, frozenset)
    with pytest.raises(AttributeError):
        blocklist.blocklist = frozenset()  # type: ignore[misc]
