"""Detection of SMB messages."""

__all__ = ["SMB"]

_SMB_MAGIC = b"\xffSMB"
_NETBIOS_PREFIX = b"\x00\x00\x00"


class SMB:
    """Recognises SMB traffic by its NetBIOS session header or magic."""

    def is_message(self, data: bytes) -> bool:
        """Return True if the payload starts with a NetBIOS header or SMB magic."""
        data = bytes(data)
        if len(data) < 4:
            return False
        return data.startswith(_NETBIOS_PREFIX) or data.startswith(_SMB_MAGIC)

    @staticmethod
    def matches_standard_port(port: int) -> bool:
        """Return True for the SMB and NetBIOS session ports."""
        return port in (445, 139)