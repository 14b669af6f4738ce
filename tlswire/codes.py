"""Record content types, cipher suite codes and ChangeCipherSpec."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from tlswire.buffer import (
    CryptoBuffer,
    EncodeError,
    InsufficientSpaceError,
    ParseBuffer,
    ParseError,
)


class ContentType(IntEnum):
    INVALID = 0
    CHANGE_CIPHER_SPEC = 20
    ALERT = 21
    HANDSHAKE = 22
    APPLICATION_DATA = 23

    @classmethod
    def of(cls, num: int) -> ContentType | None:
        try:
            return cls(num)
        except ValueError:
            return None


class CipherSuite(IntEnum):
    TLS_AES_128_GCM_SHA256 = 0x1301
    TLS_AES_256_GCM_SHA384 = 0x1302
    TLS_CHACHA20_POLY1305_SHA256 = 0x1303
    TLS_AES_128_CCM_SHA256 = 0x1304
    TLS_AES_128_CCM_8_SHA256 = 0x1305
    TLS_PSK_AES_128_GCM_SHA256 = 0x00A8

    @classmethod
    def parse(cls, buf: ParseBuffer) -> CipherSuite:
        value = buf.read_u16()
        try:
            return cls(value)
        except ValueError:
            raise ParseError(
                ParseError.INVALID_DATA, f"unknown cipher suite 0x{value:04x}"
            ) from None


@dataclass(frozen=True)
class ChangeCipherSpec:
    """The ChangeCipherSpec message; its body carries no information."""

    @classmethod
    def read(cls, data: bytes) -> ChangeCipherSpec:
        return cls()

    @classmethod
    def parse(cls, buf: ParseBuffer) -> ChangeCipherSpec:
        return cls()

    def encode(self, buf: CryptoBuffer) -> None:
        try:
            buf.push(1)
        except InsufficientSpaceError as exc:
            raise EncodeError("no room for change cipher spec") from exc