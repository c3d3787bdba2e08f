import pytest

from flowcheck.tftp import TFTP


@pytest.fixture
def tftp():
    return TFTP()


def test_read_request(tftp):
    assert tftp.is_message(b"\x00\x01file.txt\x00octet\x00") is True


@pytest.mark.parametrize("opcode", [1, 2, 3, 4, 5, 6])
def test_valid_opcodes(tftp, opcode):
    assert tftp.is_message(opcode.to_bytes(2, "big")) is True


@pytest.mark.parametrize("opcode", [0, 7, 256, 0xFFFF])
def test_invalid_opcodes(tftp, opcode):
    assert tftp.is_message(opcode.to_bytes(2, "big") + b"payload") is False


def test_too_short(tftp):
    assert tftp.is_message(b"\x00") is False
    assert tftp.is_message(b"") is False


def test_standard_port():
    assert TFTP.matches_standard_port(69) is True
    assert TFTP.matches_standard_port(70) is False