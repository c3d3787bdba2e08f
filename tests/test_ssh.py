import pytest

from flowcheck.ssh import SSH


@pytest.fixture
def ssh():
    return SSH()


def test_version_banner_2_0(ssh):
    assert ssh.is_message(b"SSH-2.0-OpenSSH_9.0\r\n") is True


def test_version_banner_1_99(ssh):
    assert ssh.is_message(b"SSH-1.99-server\r\n") is True


def test_unknown_version_falls_back_to_binary_check(ssh):
    assert ssh.is_message(b"SSH-3.0-server\r\n") is False


def test_too_short(ssh):
    assert ssh.is_message(b"SSH") is False


def test_binary_packet(ssh):
    data = (28).to_bytes(4, "big") + bytes([4]) + b"\x00" * 27
    assert ssh.is_message(data) is True


def test_binary_packet_small_padding(ssh):
    data = (28).to_bytes(4, "big") + bytes([3]) + b"\x00" * 27
    assert ssh.is_message(data) is False


def test_binary_packet_too_long(ssh):
    data = (35001).to_bytes(4, "big") + bytes([4, 0])
    assert ssh.is_message(data) is False


def test_binary_packet_length_below_padding(ssh):
    data = (4).to_bytes(4, "big") + bytes([4, 0])
    assert ssh.is_message(data) is False


def test_binary_packet_needs_six_bytes(ssh):
    data = (28).to_bytes(4, "big") + bytes([4])
    assert ssh.is_message(data) is False


def test_scp_command(ssh):
    assert ssh.is_scp_packet(b"scp -t /tmp/file") is True
    assert ssh.is_scp_packet(b"scp\t-f file") is True


def test_scp_rejects_other_text(ssh):
    assert ssh.is_scp_packet(b"scpx file") is False
    assert ssh.is_scp_packet(b"scp") is False
    assert ssh.is_scp_packet(b"ssh -t") is False


def test_sftp_never_detected(ssh):
    data = (28).to_bytes(4, "big") + bytes([4]) + b"\x00" * 27
    assert ssh.is_sftp_packet(data) is False
    assert ssh.is_message(data) is True


@pytest.mark.parametrize("port,expected", [(22, True), (2222, True), (23, False)])
def test_matches_standard_port(port, expected):
    assert SSH.matches_standard_port(port) is expected