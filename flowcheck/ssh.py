"""Detection of SSH traffic."""

__all__ = ["SSH"]

_MAX_PACKET_LENGTH = 35000
_MIN_PADDING = 4

# SFTP rides inside encrypted SSH binary packets; telling it apart needs
# session state that a single packet does not carry.
_SFTP_IDENTIFIABLE_WITHOUT_SESSION = False


class SSH:
    """Recognises SSH version strings and binary packets."""

    def is_message(self, data: bytes) -> bool:
        """Return True for an SSH version banner or a plausible binary packet."""
        data = bytes(data)
        if len(data) < 4:
            return False
        if data.startswith(b"SSH-") and len(data) >= 8 and data[4:8] in (b"2.0-", b"1.99"):
            return True
        return self._is_binary_packet(data)

    def is_sftp_packet(self, data: bytes) -> bool:
        """Return whether the packet can be identified as SFTP.

        The packet must be framed as an SSH binary packet; beyond that a
        single packet cannot be attributed to SFTP, so this is always False.
        """
        payload = bytes(data)
        return self._is_binary_packet(payload) and _SFTP_IDENTIFIABLE_WITHOUT_SESSION

    def is_scp_packet(self, data: bytes) -> bool:
        """Return True if the payload starts with an scp command line."""
        data = bytes(data)
        if len(data) < 4:
            return False
        return data.startswith(b"scp") and data[3:4] in (b" ", b"\t")

    @staticmethod
    def matches_standard_port(port: int) -> bool:
        """Return True for the usual SSH ports."""
        return port in (22, 2222)

    @staticmethod
    def _is_binary_packet(data: bytes) -> bool:
        # Four-byte length prefix followed by the padding length.
        if len(data) < 6:
            return False
        packet_length = int.from_bytes(data[:4], "big")
        padding_length = data[4]
        if packet_length > _MAX_PACKET_LENGTH or packet_length < padding_length + 1:
            return False
        return padding_length >= _MIN_PADDING