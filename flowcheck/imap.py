"""Detection of IMAP messages."""

__all__ = ["IMAP"]

_ALNUM = frozenset(b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

# RFC 3501 commands.
_COMMANDS = (
    b"LOGIN", b"LOGOUT", b"SELECT", b"EXAMINE", b"LIST", b"LSUB",
    b"STATUS", b"SEARCH", b"FETCH", b"STORE", b"COPY", b"UID",
    b"NOOP", b"CHECK", b"CLOSE", b"EXPUNGE", b"CREATE", b"DELETE",
    b"RENAME", b"SUBSCRIBE", b"UNSUBSCRIBE", b"AUTHENTICATE",
    b"STARTTLS", b"IDLE", b"ID", b"UNSELECT",
)


class IMAP:
    """Recognises IMAP untagged responses and commands."""

    def is_message(self, data: bytes) -> bool:
        """Return True if the payload looks like an IMAP response or command."""
        data = bytes(data)
        if len(data) < 3:
            return False
        return self._is_response(data) or self._is_command(data)

    @staticmethod
    def matches_standard_port(port: int) -> bool:
        """Return True for the IMAP and IMAPS ports."""
        return port in (143, 993)

    @staticmethod
    def _is_response(data: bytes) -> bool:
        return data[:1] == b"*"

    @staticmethod
    def _is_command(data: bytes) -> bool:
        if len(data) < 6 or data[0] not in _ALNUM:
            return False
        upper = data.upper()
        return any(
            upper.startswith(command) and data[len(command):len(command) + 1] in (b" ", b"\t")
            for command in _COMMANDS
        )