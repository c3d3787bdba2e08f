"""Protocol detection and hostname extraction for raw packet payloads."""

__version__ = "1.0.0"

__all__ = [
    "ftp",
    "http",
    "imap",
    "pop3",
    "protocol",
    "quic",
    "rtp",
    "smb",
    "smtp",
    "ssh",
    "tftp",
    "tls",
]