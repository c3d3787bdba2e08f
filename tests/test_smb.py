import pytest

from flowcheck.smb import SMB


@pytest.fixture
def smb():
    return SMB()


@pytest.mark.parametrize(
    "payload",
    [
        b"\x00\x00\x00\x45\xffSMB",
        b"\x00\x00\x00\x00",
        b"\xffSMB",
        b"\xffSMBr\x00\x00\x00",
    ],
)
def test_recognised_messages(smb, payload):
    assert smb.is_message(payload) is True


@pytest.mark.parametrize(
    "payload",
    [
        b"\x00\x00",
        b"\xffSM",
        b"\x00\x00\x01\x00",
        b"\xfeSMB",
        b"SMB\xff",
    ],
)
def test_rejected_payloads(smb, payload):
    assert smb.is_message(payload) is False


def test_standard_ports():
    assert SMB.matches_standard_port(445) is True
    assert SMB.matches_standard_port(139) is True
    assert SMB.matches_standard_port(137) is False