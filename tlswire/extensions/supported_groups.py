"""The supported_groups extension and the named groups it lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from tlswire.buffer import (
    CryptoBuffer,
    EncodeError,
    InsufficientSpaceError,
    ParseBuffer,
    ParseError,
)


class NamedGroup(IntEnum):
    # Elliptic curve groups (ECDHE)
    SECP256R1 = 0x0017
    SECP384R1 = 0x0018
    SECP521R1 = 0x0019
    X25519 = 0x001D
    X448 = 0x001E

    # Finite field groups (DHE)
    FFDHE2048 = 0x0100
    FFDHE3072 = 0x0101
    FFDHE4096 = 0x0102
    FFDHE6144 = 0x0103
    FFDHE8192 = 0x0104

    # Post-quantum hybrid groups
    SECP256R1_MLKEM768 = 0x11EB
    X25519_MLKEM768 = 0x11EC
    SECP384R1_MLKEM1024 = 0x11ED

    @classmethod
    def parse(cls, buf: ParseBuffer) -> NamedGroup:
        value = buf.read_u16()
        try:
            return cls(value)
        except ValueError:
            raise ParseError(
                ParseError.INVALID_DATA, f"unknown named group 0x{value:04x}"
            ) from None

    def encode(self, buf: CryptoBuffer) -> None:
        try:
            buf.push_u16(int(self))
        except InsufficientSpaceError as exc:
            raise EncodeError("no room for named group") from exc


@dataclass
class SupportedGroups:
    supported_groups: list[NamedGroup] = field(default_factory=list)

    @classmethod
    def parse(cls, buf: ParseBuffer, capacity: int | None = None) -> SupportedGroups:
        data_length = buf.read_u16()
        return cls(buf.read_list(data_length, NamedGroup.parse, capacity))

    def encode(self, buf: CryptoBuffer) -> None:
        with buf.u16_length():
            for group in self.supported_groups:
                group.encode(buf)