import pytest

from flowcheck.quic import QUIC


@pytest.fixture
def quic():
    return QUIC()


def test_empty_is_not_quic(quic):
    assert quic.is_packet(b"") is False


def test_long_header_with_version(quic):
    assert quic.is_packet(b"\x40\x00\x00\x00\x01rest") is True


def test_long_header_with_zero_version_rejected(quic):
    assert quic.is_packet(b"\x40\x00\x00\x00\x00rest") is False


def test_long_header_needs_version_bytes(quic):
    assert quic.is_packet(b"\x40\x00\x01") is False


@pytest.mark.parametrize("first", [0x00, 0x01, 0x3F])
def test_short_header(quic, first):
    assert quic.is_packet(bytes([first])) is True


@pytest.mark.parametrize("first", [0x80, 0xC0, 0xFF])
def test_high_bit_forms_rejected(quic, first):
    assert quic.is_packet(bytes([first, 0, 0, 0, 1])) is False


def test_standard_ports():
    assert QUIC.matches_standard_port(443) is True
    assert QUIC.matches_standard_port(8443) is True
    assert QUIC.matches_standard_port(80) is False