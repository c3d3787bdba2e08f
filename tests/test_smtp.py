import pytest

from flowcheck.smtp import SMTP


@pytest.fixture
def smtp():
    return SMTP()


@pytest.mark.parametrize(
    "payload",
    [
        b"220 smtp.example.com ESMTP\r\n",
        b"250-SIZE 10240000\r\n",
        b"ehlo example.com\r\n",
        b"MAIL FROM:<someone@example.com>\r\n",
        b"STARTTLS\r\n",
        b"QUIT",
    ],
)
def test_recognised_messages(smtp, payload):
    assert smtp.is_message(payload) is True


@pytest.mark.parametrize(
    "payload",
    [
        b"220",
        b"1234",
        b"MAILX",
        b"HELLO there",
        b"#QUIT",
        b"",
    ],
)
def test_rejected_payloads(smtp, payload):
    assert smtp.is_message(payload) is False


def test_standard_ports():
    assert SMTP.matches_standard_port(25) is True
    assert SMTP.matches_standard_port(587) is True
    assert SMTP.matches_standard_port(465) is False