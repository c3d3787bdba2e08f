"""Detection of TLS records and extraction of the SNI host name."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["TLSContentType", "TLSHandshakeType", "TLS"]

_EXTENSION_SERVER_NAME = 0x0000
_NAME_TYPE_HOST = 0
_MAX_RECORD_LENGTH = 16384
_VALID_CONTENT_TYPES = range(20, 26)
_HOST_CHARS = frozenset(b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-.")


class TLSContentType(IntEnum):
    """TLS record content types."""

    CHANGE_CIPHER_SPEC = 20
    ALERT = 21
    HANDSHAKE = 22
    APPLICATION_DATA = 23


class TLSHandshakeType(IntEnum):
    """TLS handshake message types."""

    CLIENT_HELLO = 1
    SERVER_HELLO = 2
    CERTIFICATE = 11


def _read16(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 2], "big")


def _read24(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 3], "big")


class TLS:
    """Recognises TLS records and reads the server name from a ClientHello."""

    def is_record(self, data: bytes) -> bool:
        """Return True if the payload holds one complete, plausible TLS record."""
        return self._record_length(bytes(data)) is not None

    def is_client_hello(self, data: bytes) -> bool:
        """Return True if the payload is a handshake record carrying a ClientHello."""
        data = bytes(data)
        record_length = self._record_length(data)
        if record_length is None or data[0] != TLSContentType.HANDSHAKE:
            return False
        if record_length < 4:
            return False
        message_length = _read24(data, 6)
        if 4 + message_length > record_length:
            return False
        return data[5] == TLSHandshakeType.CLIENT_HELLO

    def parse_sni(self, data: bytes) -> str | None:
        """Return the lower-cased SNI host name of a ClientHello, or None."""
        data = bytes(data)
        if not self.is_client_hello(data):
            return None

        handshake_length = _read24(data, 6)
        body = data[9:9 + handshake_length]
        body_length = handshake_length

        # Client version (2) and random (32).
        if body_length < 34:
            return None
        offset = 34

        if offset + 1 > body_length:
            return None
        offset += 1 + body[offset]
        if offset > body_length:
            return None

        if offset + 2 > body_length:
            return None
        offset += 2 + _read16(body, offset)
        if offset > body_length:
            return None

        if offset + 1 > body_length:
            return None
        offset += 1 + body[offset]
        if offset >= body_length:
            return None

        if offset + 2 > body_length:
            return None
        extensions_length = _read16(body, offset)
        offset += 2
        if offset + extensions_length > body_length:
            return None

        extensions = body[offset:offset + extensions_length]
        pos = 0
        while len(extensions) - pos >= 4:
            ext_type = _read16(extensions, pos)
            ext_length = _read16(extensions, pos + 2)
            pos += 4
            if ext_length > len(extensions) - pos:
                break
            if ext_type == _EXTENSION_SERVER_NAME:
                name = self._parse_sni_extension(extensions[pos:pos + ext_length])
                if name:
                    return name
            pos += ext_length
        return None

    @staticmethod
    def matches_standard_port(port: int) -> bool:
        """Return True for the usual TLS ports."""
        return port in (443, 8443)

    @staticmethod
    def _record_length(data: bytes) -> int | None:
        # Validates the five-byte record header; returns the record length.
        if len(data) < 5:
            return None
        content_type, major, minor = data[0], data[1], data[2]
        record_length = _read16(data, 3)
        if content_type not in _VALID_CONTENT_TYPES:
            return None
        if major != 3 or minor > 4:
            return None
        if record_length == 0 or record_length > _MAX_RECORD_LENGTH:
            return None
        if len(data) < 5 + record_length:
            return None
        return record_length

    @staticmethod
    def _parse_sni_extension(extension: bytes) -> str | None:
        length = len(extension)
        if length < 2:
            return None
        list_length = _read16(extension, 0)
        offset = 2
        if offset + list_length > length:
            return None

        while offset + 3 <= length and offset < 2 + list_length:
            name_type = extension[offset]
            name_length = _read16(extension, offset + 1)
            offset += 3
            if name_type == _NAME_TYPE_HOST:
                if offset + name_length > length:
                    return None
                name = extension[offset:offset + name_length]
                if name and all(b in _HOST_CHARS for b in name):
                    return name.lower().decode("ascii")
            offset += name_length
        return None