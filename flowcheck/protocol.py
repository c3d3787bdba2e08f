"""Application protocols that flow detection can assign to a flow."""

from enum import IntEnum

__all__ = ["ProtocolType"]


class ProtocolType(IntEnum):
    """Protocol a flow has been identified as."""

    UNKNOWN = 0

    # Base protocols
    DNS = 1
    HTTP = 2
    HTTPS = 3
    TLS = 4
    TCP = 5
    UDP = 6

    # Core protocols
    FTP = 7
    SSH = 8
    SMTP = 9

    # Mail protocols
    IMAP = 10
    POP3 = 11

    # File transfer protocols
    SFTP = 12
    SCP = 13
    SMB = 14
    TFTP = 15

    # Real-time protocols
    QUIC = 16
    RTP = 17
    RTCP = 18