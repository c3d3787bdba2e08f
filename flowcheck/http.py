"""Detection of HTTP/1.x messages and extraction of the Host header."""

from __future__ import annotations

import re

__all__ = ["HTTP"]

_MAX_HEADER_SIZE = 8192
_MAX_HOST_NAME = 256
_MAX_REQUEST_LINE = 2048

_METHODS = (
    b"GET ", b"POST ", b"PUT ", b"HEAD ", b"DELETE ",
    b"OPTIONS ", b"PATCH ", b"CONNECT ", b"TRACE ",
)
_REQUEST_VERSIONS = (b"HTTP/1.0", b"HTTP/1.1", b"HTTP/2.0")
_DIGITS = frozenset(b"0123456789")

# The whitespace set of the C locale.
_WHITESPACE = b" \t\n\r\x0b\x0c"
_LEADING_WHITESPACE = re.compile(rb"[ \t\n\r\x0b\x0c]*")
_LINE_BREAK = re.compile(rb"[\r\n]")


class HTTP:
    """Recognises HTTP requests and responses and reads the Host header."""

    def is_request(self, data: bytes) -> bool:
        """Return True if the payload starts with an HTTP request line."""
        data = bytes(data)
        if len(data) < 16:
            return False
        if not data.startswith(_METHODS):
            return False

        line_end = data.find(b"\r", 0, min(len(data), _MAX_REQUEST_LINE))
        if line_end == -1 or line_end + 1 >= len(data) or data[line_end + 1] != ord("\n"):
            return False

        return line_end >= 8 and data[line_end - 8:line_end] in _REQUEST_VERSIONS

    def is_response(self, data: bytes) -> bool:
        """Return True if the payload starts with an HTTP/1.x status line."""
        data = bytes(data)
        if len(data) < 12:
            return False
        if not data.startswith(b"HTTP/1."):
            return False
        if data[7:8] not in (b"0", b"1"):
            return False
        if data[8:9] != b" ":
            return False
        return all(b in _DIGITS for b in data[9:12])

    def parse_host(self, data: bytes) -> str | None:
        """Return the normalised Host header of a request, or None."""
        data = bytes(data)
        if len(data) > _MAX_HEADER_SIZE:
            return None
        if not self.is_request(data):
            return None

        headers_end = self._find_headers_end(data)
        if headers_end is None:
            return None

        host = self._extract_host_header(data[:headers_end])
        return host or None

    @staticmethod
    def matches_standard_port(port: int) -> bool:
        """Return True for ports commonly used by plain HTTP."""
        return port in (80, 8080, 8000, 3000, 8888)

    @staticmethod
    def _find_headers_end(data: bytes) -> int | None:
        # Position of the first blank line: CRLF CRLF or LF LF.
        candidates = [
            data.find(b"\r\n\r\n"),
            data.find(b"\n\n", 0, max(len(data) - 2, 0)),
        ]
        found = [pos for pos in candidates if pos != -1]
        return min(found) if found else None

    def _extract_host_header(self, headers: bytes) -> str | None:
        length = len(headers)
        pos = headers.find(b"\n")
        while pos != -1 and pos + 6 < length:
            name_start = pos + 1
            if (
                headers[name_start:name_start + 4].lower() == b"host"
                and headers[name_start + 4:name_start + 5] == b":"
            ):
                value_start = _LEADING_WHITESPACE.match(headers, name_start + 5).end()
                brk = _LINE_BREAK.search(headers, value_start)
                value_end = brk.start() if brk else length
                if value_start < value_end and value_end - value_start <= _MAX_HOST_NAME:
                    return self._normalize_host(headers[value_start:value_end])
            pos = headers.find(b"\n", pos + 1)
        return None

    @staticmethod
    def _normalize_host(host: bytes) -> str:
        host = host.strip(_WHITESPACE)
        colon = host.rfind(b":")
        if colon != -1 and all(b in _DIGITS for b in host[colon + 1:]):
            host = host[:colon]
        return host.lower().decode("latin-1")