"""Detection of SMTP messages."""

__all__ = ["SMTP"]

_DIGITS = frozenset(b"0123456789")
_LETTERS = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

# RFC 5321 commands plus common extensions.
_COMMANDS = (
    b"HELO", b"EHLO", b"MAIL", b"RCPT", b"DATA", b"RSET",
    b"NOOP", b"QUIT", b"VRFY", b"EXPN", b"HELP", b"SEND",
    b"SOML", b"SAML", b"TURN",
    b"AUTH", b"STARTTLS",
)


class SMTP:
    """Recognises SMTP replies and commands."""

    def is_message(self, data: bytes) -> bool:
        """Return True if the payload looks like an SMTP reply or command."""
        data = bytes(data)
        if len(data) < 4:
            return False
        return self._is_response(data) or self._is_command(data)

    @staticmethod
    def matches_standard_port(port: int) -> bool:
        """Return True for the SMTP and submission ports."""
        return port in (25, 587)

    @staticmethod
    def _is_response(data: bytes) -> bool:
        return all(b in _DIGITS for b in data[:3]) and data[3:4] in (b" ", b"-")

    @staticmethod
    def _is_command(data: bytes) -> bool:
        if data[0] not in _LETTERS:
            return False
        upper = data.upper()
        return any(
            upper.startswith(command)
            and (len(data) == len(command) or data[len(command):len(command) + 1] in (b" ", b"\r"))
            for command in _COMMANDS
        )