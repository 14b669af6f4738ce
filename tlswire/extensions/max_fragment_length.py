"""The max_fragment_length extension."""

from __future__ import annotations

import logging
from enum import IntEnum

from tlswire.buffer import (
    CryptoBuffer,
    EncodeError,
    InsufficientSpaceError,
    ParseBuffer,
    ParseError,
)

logger = logging.getLogger(__name__)


class MaxFragmentLength(IntEnum):
    """Negotiated maximum plaintext fragment length.

    Without this extension the maximum is 2^14 bytes; constrained clients
    may ask for less.
    """

    BITS_9 = 1  # 512 bytes
    BITS_10 = 2  # 1024 bytes
    BITS_11 = 3  # 2048 bytes
    BITS_12 = 4  # 4096 bytes

    @classmethod
    def parse(cls, buf: ParseBuffer) -> MaxFragmentLength:
        value = buf.read_u8()
        try:
            return cls(value)
        except ValueError:
            logger.warning("Read unknown MaxFragmentLength: %d", value)
            raise ParseError(
                ParseError.INVALID_DATA, f"unknown max fragment length {value}"
            ) from None

    def encode(self, buf: CryptoBuffer) -> None:
        try:
            buf.push(int(self))
        except InsufficientSpaceError as exc:
            raise EncodeError("no room for max fragment length") from exc