"""Byte buffers for encoding and decoding TLS wire structures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TlsError(Exception):
    """Base class for every error raised by this package."""


class DecodeError(TlsError):
    """Received data could not be decoded."""


class EncodeError(TlsError):
    """A structure could not be encoded."""


class InsufficientSpaceError(TlsError):
    """A buffer has no room for the requested operation."""


class ParseError(DecodeError):
    """Low-level failure while reading from a :class:`ParseBuffer`.

    ``kind`` tells what went wrong: one of ``INVALID_DATA``,
    ``UNEXPECTED_END`` or ``INSUFFICIENT_SPACE``.
    """

    INVALID_DATA = "invalid_data"
    UNEXPECTED_END = "unexpected_end"
    INSUFFICIENT_SPACE = "insufficient_space"

    def __init__(self, kind: str, message: str | None = None) -> None:
        super().__init__(message or kind.replace("_", " "))
        self.kind = kind


class CryptoBuffer:
    """A fixed-capacity write window over a shared ``bytearray``.

    The window starts at an offset into the backing storage and holds
    ``len(self)`` bytes. Several windows may share one backing array.
    """

    def __init__(self, buf: bytearray | int, pos: int = 0) -> None:
        if isinstance(buf, int):
            buf = bytearray(buf)
        if not 0 <= pos <= len(buf):
            raise ValueError(f"position {pos} outside buffer of {len(buf)} bytes")
        self._buf = buf
        self._offset = 0
        self._len = pos

    def _space(self) -> int:
        return self.capacity() - (self._offset + self._len)

    def push(self, b: int) -> None:
        """Append a single byte."""
        if self._space() <= 0:
            logger.error("Failed to push byte")
            raise InsufficientSpaceError("no space to push byte")
        self._buf[self._offset + self._len] = b
        self._len += 1

    def push_u16(self, num: int) -> None:
        self.extend_from_slice(num.to_bytes(2, "big"))

    def push_u24(self, num: int) -> None:
        self.extend_from_slice((num & 0xFFFFFF).to_bytes(3, "big"))

    def push_u32(self, num: int) -> None:
        self.extend_from_slice(num.to_bytes(4, "big"))

    def set(self, idx: int, val: int) -> None:
        """Overwrite an already written byte at ``idx`` within the window."""
        if not 0 <= idx < self._len:
            logger.error(
                "Failed to set byte: index %d is out of range for %d elements",
                idx,
                self._len,
            )
            raise InsufficientSpaceError(
                f"index {idx} out of range for {self._len} elements"
            )
        self._buf[self._offset + idx] = val

    def set_u16(self, idx: int, val: int) -> None:
        upper, lower = val.to_bytes(2, "big")
        self.set(idx, upper)
        self.set(idx + 1, lower)

    def set_u24(self, idx: int, val: int) -> None:
        upper, mid, lower = (val & 0xFFFFFF).to_bytes(3, "big")
        self.set(idx, upper)
        self.set(idx + 1, mid)
        self.set(idx + 2, lower)

    def extend_from_slice(self, data: bytes | bytearray | memoryview) -> None:
        """Append ``data`` as a whole, or nothing if it does not fit."""
        size = len(data)
        if self._space() < size:
            logger.error(
                "Failed to extend buffer. Space: %d required: %d", self._space(), size
            )
            raise InsufficientSpaceError(
                f"need {size} bytes, only {self._space()} available"
            )
        start = self._offset + self._len
        self._buf[start : start + size] = data
        self._len += size

    def truncate(self, length: int) -> None:
        """Set the window length; ignored if it would pass the end of storage."""
        if length <= self.capacity() - self._offset:
            self._len = length

    def capacity(self) -> int:
        """Size of the whole backing storage."""
        return len(self._buf)

    def __len__(self) -> int:
        return self._len

    def __bytes__(self) -> bytes:
        return bytes(self._buf[self._offset : self._offset + self._len])

    def __repr__(self) -> str:
        return f"CryptoBuffer(offset={self._offset}, len={self._len}, capacity={self.capacity()})"

    def offset(self, offset: int) -> CryptoBuffer:
        """Return a window over the same storage starting at ``offset``.

        The end of the window stays where it was.
        """
        new_len = self._len + self._offset - offset
        if new_len < 0 or offset < 0:
            raise ValueError(f"offset {offset} lies past the end of the data")
        moved = CryptoBuffer(self._buf)
        moved._offset = offset
        moved._len = new_len
        return moved

    def forward(self) -> CryptoBuffer:
        return self.offset(self._len)

    def rewind(self) -> CryptoBuffer:
        return self.offset(0)

    @contextmanager
    def _length_prefix(self, width: int, setter: Callable[[int, int], None]) -> Iterator[CryptoBuffer]:
        len_pos = self._len
        self.extend_from_slice(bytes(width))
        start = self._len
        yield self
        length = (self._len - start) & ((1 << (8 * width)) - 1)
        setter(len_pos, length)

    def u8_length(self):
        """Context manager writing a one-byte length before its contents."""
        return self._length_prefix(1, self.set)

    def u16_length(self):
        """Context manager writing a two-byte length before its contents."""
        return self._length_prefix(2, self.set_u16)

    def u24_length(self):
        """Context manager writing a three-byte length before its contents."""
        return self._length_prefix(3, self.set_u24)


class ParseBuffer:
    """A read cursor over received bytes."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    def _take(self, count: int) -> bytes:
        if count < 0 or self.remaining() < count:
            raise ParseError(
                ParseError.UNEXPECTED_END,
                f"need {count} bytes, {self.remaining()} remaining",
            )
        chunk = self._data[self._pos : self._pos + count]
        self._pos += count
        return chunk

    def read_u8(self) -> int:
        return self._take(1)[0]

    def read_u16(self) -> int:
        return int.from_bytes(self._take(2), "big")

    def read_u24(self) -> int:
        return int.from_bytes(self._take(3), "big")

    def read_u32(self) -> int:
        return int.from_bytes(self._take(4), "big")

    def slice(self, length: int) -> ParseBuffer:
        """Consume ``length`` bytes and return them as a new buffer."""
        return ParseBuffer(self._take(length))

    def read_list(
        self,
        length: int,
        parser: Callable[[ParseBuffer], T],
        capacity: int | None = None,
    ) -> list[T]:
        """Parse items from the next ``length`` bytes until they are used up."""
        sub = self.slice(length)
        items: list[T] = []
        while not sub.is_empty():
            item = parser(sub)
            if capacity is not None and len(items) >= capacity:
                raise ParseError(
                    ParseError.INSUFFICIENT_SPACE,
                    f"list holds more than {capacity} items",
                )
            items.append(item)
        return items

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def is_empty(self) -> bool:
        return self.remaining() == 0

    def as_bytes(self) -> bytes:
        """The bytes not yet consumed."""
        return self._data[self._pos :]