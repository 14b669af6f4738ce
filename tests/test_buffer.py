import pytest

from tlswire.buffer import (
    CryptoBuffer,
    DecodeError,
    InsufficientSpaceError,
    ParseBuffer,
    ParseError,
    TlsError,
)


def test_encode():
    buf1 = bytearray(4)
    c = CryptoBuffer(buf1)
    c.push_u24(1027)

    buf2 = bytearray(4)
    c = CryptoBuffer(buf2)
    c.push_u24(0)
    c.set_u24(0, 1027)

    assert buf1 == buf2
    decoded = int.from_bytes(bytes([0, buf1[0], buf1[1], buf1[2]]), "big")
    assert decoded == 1027


def test_offset_calc():
    c = CryptoBuffer(bytearray(8))
    c.push(1)
    c.push(2)
    c.push(3)
    assert bytes(c) == bytes([1, 2, 3])

    c = c.offset(len(c))
    c.push(4)
    c.push(5)
    c.push(6)
    assert bytes(c) == bytes([4, 5, 6])

    c = c.offset(0)
    c.push(7)
    c.push(8)
    assert bytes(c) == bytes([1, 2, 3, 4, 5, 6, 7, 8])

    c = c.offset(6)
    c.set(0, 14)
    c.set(1, 15)

    c = c.offset(0)
    assert bytes(c) == bytes([1, 2, 3, 4, 5, 6, 14, 15])

    c = c.offset(4)
    c.truncate(0)
    c.extend_from_slice(bytes([10, 11, 12, 13]))
    assert bytes(c) == bytes([10, 11, 12, 13])

    c = c.offset(0)
    assert bytes(c) == bytes([1, 2, 3, 4, 10, 11, 12, 13])


def test_push_beyond_capacity_raises():
    c = CryptoBuffer(bytearray(1))
    c.push(9)
    with pytest.raises(InsufficientSpaceError):
        c.push(10)
    assert bytes(c) == b"\x09"


def test_extend_is_all_or_nothing():
    c = CryptoBuffer(bytearray(3))
    c.push(1)
    with pytest.raises(InsufficientSpaceError):
        c.extend_from_slice(b"abc")
    assert len(c) == 1


def test_set_outside_written_range_raises():
    c = CryptoBuffer(bytearray(4))
    c.push(1)
    with pytest.raises(InsufficientSpaceError):
        c.set(1, 5)


def test_integer_pushes_are_big_endian():
    c = CryptoBuffer(bytearray(9))
    c.push_u16(0x0102)
    c.push_u24(0x030405)
    c.push_u32(0x06070809)
    assert bytes(c) == bytes(range(1, 10))


def test_u16_length_prefix():
    c = CryptoBuffer(bytearray(8))
    with c.u16_length():
        c.extend_from_slice(b"abc")
    assert bytes(c) == b"\x00\x03abc"


def test_nested_length_prefixes():
    c = CryptoBuffer(bytearray(16))
    with c.u24_length():
        with c.u8_length():
            c.push(7)
    assert bytes(c) == b"\x00\x00\x02\x01\x07"


def test_length_prefix_without_room_raises():
    c = CryptoBuffer(bytearray(1))
    with pytest.raises(InsufficientSpaceError):
        with c.u16_length():
            pass


def test_wrap_with_position_and_rewind():
    storage = bytearray(b"xyz\x00")
    c = CryptoBuffer(storage, 3)
    assert bytes(c) == b"xyz"
    moved = c.forward()
    assert len(moved.rewind()) == 3
    assert c.capacity() == 4


def test_truncate_past_storage_is_ignored():
    c = CryptoBuffer(bytearray(2))
    c.push(1)
    c.truncate(5)
    assert len(c) == 1


def test_parse_reads_integers():
    buf = ParseBuffer(bytes(range(1, 11)))
    assert buf.read_u8() == 1
    assert buf.read_u16() == 0x0203
    assert buf.read_u24() == 0x040506
    assert buf.read_u32() == 0x0708090A
    assert buf.is_empty()


def test_parse_unexpected_end():
    buf = ParseBuffer(b"\x01")
    with pytest.raises(ParseError) as info:
        buf.read_u16()
    assert info.value.kind == ParseError.UNEXPECTED_END


def test_parse_error_is_decode_error():
    with pytest.raises(DecodeError):
        ParseBuffer(b"").read_u8()
    assert issubclass(ParseError, TlsError)


def test_slice_consumes_bytes():
    buf = ParseBuffer(b"abcdef")
    sub = buf.slice(4)
    assert sub.as_bytes() == b"abcd"
    assert buf.remaining() == 2
    assert buf.as_bytes() == b"ef"


def test_read_list():
    buf = ParseBuffer(b"\x00\x01\x00\x02\xff")
    items = buf.read_list(4, ParseBuffer.read_u16)
    assert items == [1, 2]
    assert buf.as_bytes() == b"\xff"


def test_read_list_over_capacity():
    buf = ParseBuffer(b"\x01\x02\x03")
    with pytest.raises(ParseError) as info:
        buf.read_list(3, ParseBuffer.read_u8, 2)
    assert info.value.kind == ParseError.INSUFFICIENT_SPACE