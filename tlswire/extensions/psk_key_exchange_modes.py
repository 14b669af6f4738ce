"""The psk_key_exchange_modes extension."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum

from tlswire.buffer import (
    CryptoBuffer,
    EncodeError,
    InsufficientSpaceError,
    ParseBuffer,
    ParseError,
)

logger = logging.getLogger(__name__)


class PskKeyExchangeMode(IntEnum):
    PSK_KE = 0
    PSK_DHE_KE = 1

    @classmethod
    def parse(cls, buf: ParseBuffer) -> PskKeyExchangeMode:
        value = buf.read_u8()
        try:
            return cls(value)
        except ValueError:
            logger.warning("Read unknown PskKeyExchangeMode: %d", value)
            raise ParseError(
                ParseError.INVALID_DATA, f"unknown psk key exchange mode {value}"
            ) from None

    def encode(self, buf: CryptoBuffer) -> None:
        try:
            buf.push(int(self))
        except InsufficientSpaceError as exc:
            raise EncodeError("no room for psk key exchange mode") from exc


@dataclass
class PskKeyExchangeModes:
    modes: list[PskKeyExchangeMode] = field(default_factory=list)

    @classmethod
    def parse(
        cls, buf: ParseBuffer, capacity: int | None = None
    ) -> PskKeyExchangeModes:
        data_length = buf.read_u8()
        return cls(buf.read_list(data_length, PskKeyExchangeMode.parse, capacity))

    def encode(self, buf: CryptoBuffer) -> None:
        with buf.u8_length():
            for mode in self.modes:
                mode.encode(buf)