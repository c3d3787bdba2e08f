"""Detection of QUIC packets."""

__all__ = ["QUIC"]


class QUIC:
    """Recognises QUIC packets from the header form bits of the first byte."""

    def is_packet(self, data: bytes) -> bool:
        """Return True if the payload has a QUIC long or short header."""
        data = bytes(data)
        if not data:
            return False
        return self._is_long_header(data) or self._is_short_header(data)

    @staticmethod
    def matches_standard_port(port: int) -> bool:
        """Return True for the usual QUIC ports."""
        return port in (443, 8443)

    @staticmethod
    def _is_long_header(data: bytes) -> bool:
        # Top two bits 0b01 and a non-zero (non-reserved) version field.
        if len(data) < 5:
            return False
        return data[0] >> 6 == 0x01 and any(data[1:5])

    @staticmethod
    def _is_short_header(data: bytes) -> bool:
        return data[0] >> 6 == 0x00