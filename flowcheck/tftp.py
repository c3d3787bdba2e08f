"""Detection of TFTP messages."""

__all__ = ["TFTP"]

# RFC 1350 opcodes plus OACK: RRQ, WRQ, DATA, ACK, ERROR, OACK.
_VALID_OPCODES = range(1, 7)


class TFTP:
    """Recognises TFTP packets by their opcode."""

    def is_message(self, data: bytes) -> bool:
        """Return True if the payload starts with a valid TFTP opcode."""
        data = bytes(data)
        if len(data) < 2:
            return False
        opcode = int.from_bytes(data[:2], "big")
        return opcode in _VALID_OPCODES

    @staticmethod
    def matches_standard_port(port: int) -> bool:
        """Return True for the TFTP port."""
        return port == 69