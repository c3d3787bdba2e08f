"""Detection of FTP control-connection messages."""

__all__ = ["FTP"]

_DIGITS = frozenset(b"0123456789")
_LETTERS = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

# RFC 959 commands. Matching compares exactly four bytes, so the three-letter
# entries can never match a line whose first four bytes are letters.
_COMMANDS = (
    b"USER", b"PASS", b"ACCT", b"CWD", b"CDUP", b"SMNT", b"QUIT", b"REIN",
    b"PORT", b"PASV", b"TYPE", b"STRU", b"MODE", b"RETR", b"STOR", b"APPE",
    b"ALLO", b"REST", b"RNFR", b"RNTO", b"ABOR", b"DELE", b"RMD", b"MKD",
    b"PWD", b"LIST", b"NLST", b"SITE", b"SYST", b"STAT", b"HELP", b"NOOP",
)


class FTP:
    """Recognises FTP replies and commands."""

    def is_message(self, data: bytes) -> bool:
        """Return True if the payload looks like an FTP reply or command."""
        data = bytes(data)
        if len(data) < 5:
            return False
        return self._is_response(data) or self._is_command(data)

    @staticmethod
    def matches_standard_port(port: int) -> bool:
        """Return True for the FTP control port."""
        return port == 21

    @staticmethod
    def _is_response(data: bytes) -> bool:
        # Three-digit code followed by a space or a hyphen.
        return all(b in _DIGITS for b in data[:3]) and data[3:4] in (b" ", b"-")

    @staticmethod
    def _is_command(data: bytes) -> bool:
        # Four letters followed by a space, naming a known command.
        if not all(b in _LETTERS for b in data[:4]):
            return False
        if data[4:5] != b" ":
            return False
        return data[:4] in _COMMANDS