"""Detection of POP3 messages."""

__all__ = ["POP3"]

_LETTERS = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

# RFC 1939 commands and common extensions.
_COMMANDS = (
    b"USER", b"PASS", b"APOP", b"STAT", b"LIST", b"RETR", b"DELE",
    b"NOOP", b"RSET", b"TOP", b"UIDL", b"QUIT", b"CAPA", b"AUTH",
    b"STLS",
)


class POP3:
    """Recognises POP3 status replies and commands."""

    def is_message(self, data: bytes) -> bool:
        """Return True if the payload looks like a POP3 reply or command."""
        data = bytes(data)
        if len(data) < 3:
            return False
        return self._is_response(data) or self._is_command(data)

    @staticmethod
    def matches_standard_port(port: int) -> bool:
        """Return True for the POP3 and POP3S ports."""
        return port in (110, 995)

    @staticmethod
    def _is_response(data: bytes) -> bool:
        return data.startswith(b"+OK") or data.startswith(b"-ERR")

    @staticmethod
    def _is_command(data: bytes) -> bool:
        if len(data) < 4 or data[0] not in _LETTERS:
            return False
        return any(
            data.startswith(command)
            and (len(data) == len(command) or data[len(command):len(command) + 1] in (b" ", b"\r"))
            for command in _COMMANDS
        )