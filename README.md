# flowcheck

Small, dependency-free heuristics for recognising application protocols in
raw packet payloads, and for pulling hostnames out of them.

Each detector takes a `bytes`-like payload and answers a yes/no question
cheaply, without keeping any connection state.

## Supported protocols

| Module              | Class   | Checks                                        | Standard ports             |
|---------------------|---------|-----------------------------------------------|----------------------------|
| `flowcheck.http`    | `HTTP`  | requests, responses, `Host` header extraction | 80, 8080, 8000, 3000, 8888 |
| `flowcheck.tls`     | `TLS`   | records, ClientHello, SNI extraction          | 443, 8443                  |
| `flowcheck.ssh`     | `SSH`   | version banner, binary packets, `scp` command | 22, 2222                   |
| `flowcheck.ftp`     | `FTP`   | replies and RFC 959 commands                  | 21                         |
| `flowcheck.smtp`    | `SMTP`  | replies and commands                          | 25, 587                    |
| `flowcheck.imap`    | `IMAP`  | untagged responses and tagged commands        | 143, 993                   |
| `flowcheck.pop3`    | `POP3`  | `+OK` / `-ERR` and commands                   | 110, 995                   |
| `flowcheck.smb`     | `SMB`   | NetBIOS session header, SMB magic             | 139, 445                   |
| `flowcheck.tftp`    | `TFTP`  | opcodes 1–6                                   | 69                         |
| `flowcheck.quic`    | `QUIC`  | long and short headers                        | 443, 8443                  |
| `flowcheck.rtp`     | `RTP`   | RTP and RTCP packets                          | —                          |

`flowcheck.protocol.ProtocolType` is an `IntEnum` naming every protocol kind
the package knows about, including transport-level ones such as `TCP` and
`UDP`. `flowcheck.tls` also provides the `TLSContentType` and
`TLSHandshakeType` enums.

## Usage

Extract the hostname from a plain HTTP request:

```python
from flowcheck.http import HTTP

http = HTTP()
request = b"GET / HTTP/1.1\r\nHost: Example.COM:8080\r\n\r\n"

http.is_request(request)     # True
http.parse_host(request)     # "example.com"
```

`parse_host` returns the host as a string, or `None` when the payload is not
a request, is larger than 8192 bytes, has no blank line ending the headers,
or has no usable `Host` header. Surrounding whitespace and a numeric port are
removed, and the name is lower-cased.

Extract the SNI from a TLS ClientHello:

```python
from flowcheck.tls import TLS

tls = TLS()
if tls.is_client_hello(payload):
    sni = tls.parse_sni(payload)
    if sni is not None:
        print(sni)
```

`parse_sni` returns the first host name whose characters are all letters,
digits, `-` or `.`, lower-cased, or `None`.

Classify a payload by trying a few detectors:

```python
from flowcheck.ftp import FTP
from flowcheck.ssh import SSH

payload = b"SSH-2.0-OpenSSH_9.0\r\n"

SSH().is_message(payload)         # True
FTP().is_message(payload)         # False
SSH.matches_standard_port(22)     # True
```

`matches_standard_port` is a static method on every class except `RTP`, so
it can be called without creating an instance.

## Caveats

These are heuristics, and some of them are deliberately loose:

- `QUIC.is_packet` accepts any payload whose first byte has its two top bits
  clear, and any payload of at least five bytes whose top two bits are `01`
  followed by a non-zero four-byte version.
- `SMB.is_message` accepts any payload that starts with three zero bytes.
- `TFTP.is_message` accepts any payload whose first two bytes form an opcode
  from 1 to 6.
- `IMAP.is_message` accepts any payload of three or more bytes starting with `*`.
- `SSH.is_message` accepts any payload whose first four bytes, read as a
  length of at most 35000, are consistent with a padding length of at least 4
  in the fifth byte.

Combine the detectors with the port checks and the transport type to get
reliable results.

`SSH.is_sftp_packet` always returns `False`: SFTP cannot be told apart from a
single SSH packet.

## What it does not do

flowcheck is a library only. It has no command-line tool, does not read
capture files, does not reassemble TCP streams or track sessions, and does
not parse DNS messages. You pass it one payload at a time.