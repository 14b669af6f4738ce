# tlswire

Reading and writing TLS 1.3 wire structures: alerts, record content
types, cipher suite codes, ChangeCipherSpec and the payloads of several
handshake extensions.

The package works on byte buffers alone. It does no networking and no
cryptography.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Buffers

`tlswire.buffer.CryptoBuffer` writes big-endian integers into a
fixed-size `bytearray`. When there is no room left it raises
`InsufficientSpaceError`. Length-prefixed blocks are written inside the
`u8_length`, `u16_length` and `u24_length` context managers. Each one
fills in its length prefix when the block closes.

```python
from tlswire.buffer import CryptoBuffer, ParseBuffer

buf = CryptoBuffer(bytearray(16))
with buf.u16_length():
    buf.extend_from_slice(b"\xaa\xbb")
assert bytes(buf) == b"\x00\x02\xaa\xbb"

reader = ParseBuffer(bytes(buf))
length = reader.read_u16()
assert reader.slice(length).as_bytes() == b"\xaa\xbb"
```

`ParseBuffer` reads the same fields back. When the input runs out it
raises `ParseError`, whose `kind` tells what went wrong. `read_list`
parses items from a length-delimited region and can be given a
`capacity`; more items than that raise `ParseError`.

All errors derive from `tlswire.buffer.TlsError`.

## Alerts

```python
from tlswire.alert import Alert, AlertDescription, AlertLevel
from tlswire.buffer import ParseBuffer

alert = Alert.parse(ParseBuffer(b"\x02\x28"))
assert alert.level is AlertLevel.FATAL
assert alert.description is AlertDescription.HANDSHAKE_FAILURE
```

An unknown level or description raises `DecodeError`.
`tlswire.alert.AbortHandshake` is an exception that carries an alert
level and description.

## Record codes

`tlswire.codes` holds `ContentType`, `CipherSuite` (with `parse`) and
`ChangeCipherSpec`, which encodes as the single byte `1`.

## Extension payloads

Each payload class has a `parse` class method and an `encode` method.
List-valued payloads take an optional `capacity` when parsing.

| Module | Classes |
| --- | --- |
| `tlswire.extensions.supported_groups` | `NamedGroup`, `SupportedGroups` |
| `tlswire.extensions.key_share` | `KeyShareEntry`, `KeyShareClientHello`, `KeyShareServerHello`, `KeyShareHelloRetryRequest` |
| `tlswire.extensions.max_fragment_length` | `MaxFragmentLength` |
| `tlswire.extensions.pre_shared_key` | `PreSharedKeyClientHello` (encode only), `PreSharedKeyServerHello` |
| `tlswire.extensions.psk_key_exchange_modes` | `PskKeyExchangeMode`, `PskKeyExchangeModes` |
| `tlswire.extensions.supported_versions` | `ProtocolVersion`, `TLS13`, `SupportedVersionsClientHello`, `SupportedVersionsServerHello` |
| `tlswire.extensions.unimplemented` | `Unimplemented`, which keeps the raw bytes |

```python
from tlswire.buffer import CryptoBuffer
from tlswire.extensions.key_share import KeyShareEntry
from tlswire.extensions.supported_groups import NamedGroup
from tlswire.extensions.supported_versions import TLS13, SupportedVersionsClientHello

out = CryptoBuffer(bytearray(32))
KeyShareEntry(NamedGroup.X25519, b"\x01\x02").encode(out)
SupportedVersionsClientHello([TLS13]).encode(out)
assert bytes(out) == b"\x00\x1d\x00\x02\x01\x02\x02\x03\x04"
```

`PreSharedKeyClientHello` writes its binders as zero bytes of the right
size, to be filled in later by the caller.

## What it does not do

The package handles extension payloads only. It does not read or write
the extension type and length header around a payload, and it does not
parse or build whole extension lists for a handshake message. It has no
classes for the server name or signature algorithms extensions. It does
not build handshake messages or records, run a handshake, or encrypt
anything.