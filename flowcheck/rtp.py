"""Detection of RTP and RTCP packets."""

__all__ = ["RTP"]

_RTP_VERSION = 2
_RTCP_PAYLOAD_TYPES = range(192, 208)


class RTP:
    """Recognises RTP and RTCP packets from their common header."""

    def is_rtp_packet(self, data: bytes) -> bool:
        """Return True if the payload carries a version-2 RTP header."""
        data = bytes(data)
        if len(data) < 12:
            return False
        if self._version(data) != _RTP_VERSION:
            return False
        return self._payload_type(data) not in _RTCP_PAYLOAD_TYPES

    def is_rtcp_packet(self, data: bytes) -> bool:
        """Return True if the payload carries a version-2 RTCP header."""
        data = bytes(data)
        if len(data) < 8:
            return False
        if self._version(data) != _RTP_VERSION:
            return False
        return self._payload_type(data) in _RTCP_PAYLOAD_TYPES

    @staticmethod
    def _version(data: bytes) -> int:
        return data[0] >> 6

    @staticmethod
    def _payload_type(data: bytes) -> int:
        # The marker bit is masked off, leaving seven bits.
        return data[1] & 0x7F