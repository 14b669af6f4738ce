import pytest

from tlswire.buffer import CryptoBuffer, EncodeError, ParseBuffer, ParseError
from tlswire.extensions.pre_shared_key import (
    PreSharedKeyClientHello,
    PreSharedKeyServerHello,
)


def _encoded(obj, size=128):
    buf = CryptoBuffer(size)
    obj.encode(buf)
    return bytes(buf)


def test_client_hello_identity_and_zero_ticket_age():
    data = _encoded(PreSharedKeyClientHello([b"vader"], hash_size=32))
    pb = ParseBuffer(data)
    identities = pb.slice(pb.read_u16())
    identity = identities.slice(identities.read_u16())
    assert identity.as_bytes() == b"vader"
    assert identities.read_u32() == 0
    assert identities.is_empty()


def test_client_hello_binder_placeholder():
    data = _encoded(PreSharedKeyClientHello([b"vader"], hash_size=32))
    pb = ParseBuffer(data)
    pb.slice(pb.read_u16())
    binders_len = pb.read_u16()
    assert binders_len == 33
    assert pb.as_bytes() == bytes(binders_len)


def test_binders_one_byte_per_identity_without_hash():
    ids = [b"one", b"two"]
    data = _encoded(PreSharedKeyClientHello(ids, hash_size=0))
    pb = ParseBuffer(data)
    pb.slice(pb.read_u16())
    assert pb.read_u16() == len(ids)
    assert pb.remaining() == len(ids)


def test_no_identities():
    assert _encoded(PreSharedKeyClientHello([], hash_size=32)) == b"\x00\x00\x00\x00"


def test_no_room_for_identity():
    with pytest.raises(EncodeError):
        PreSharedKeyClientHello([b"vader"], hash_size=32).encode(CryptoBuffer(8))


def test_no_room_for_binders():
    with pytest.raises(EncodeError):
        PreSharedKeyClientHello([b"vader"], hash_size=32).encode(CryptoBuffer(15))


def test_server_hello_round_trip():
    wire = b"\x00\x02"
    hello = PreSharedKeyServerHello.parse(ParseBuffer(wire))
    assert hello.selected_identity == 2
    assert _encoded(hello) == wire


def test_server_hello_truncated():
    with pytest.raises(ParseError):
        PreSharedKeyServerHello.parse(ParseBuffer(b"\x00"))


def test_server_hello_no_room():
    with pytest.raises(EncodeError):
        PreSharedKeyServerHello(1).encode(CryptoBuffer(1))