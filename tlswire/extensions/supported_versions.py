"""The supported_versions extension."""

from __future__ import annotations

from dataclasses import dataclass, field

from tlswire.buffer import (
    CryptoBuffer,
    EncodeError,
    InsufficientSpaceError,
    ParseBuffer,
)


@dataclass(frozen=True)
class ProtocolVersion:
    value: int

    @classmethod
    def parse(cls, buf: ParseBuffer) -> ProtocolVersion:
        return cls(buf.read_u16())

    def encode(self, buf: CryptoBuffer) -> None:
        try:
            buf.push_u16(self.value)
        except InsufficientSpaceError as exc:
            raise EncodeError("no room for protocol version") from exc


TLS13 = ProtocolVersion(0x0304)


@dataclass
class SupportedVersionsClientHello:
    versions: list[ProtocolVersion] = field(default_factory=list)

    @classmethod
    def parse(
        cls, buf: ParseBuffer, capacity: int | None = None
    ) -> SupportedVersionsClientHello:
        data_length = buf.read_u8()
        return cls(buf.read_list(data_length, ProtocolVersion.parse, capacity))

    def encode(self, buf: CryptoBuffer) -> None:
        with buf.u8_length():
            for version in self.versions:
                version.encode(buf)


@dataclass(frozen=True)
class SupportedVersionsServerHello:
    selected_version: ProtocolVersion

    @classmethod
    def parse(cls, buf: ParseBuffer) -> SupportedVersionsServerHello:
        return cls(ProtocolVersion.parse(buf))

    def encode(self, buf: CryptoBuffer) -> None:
        self.selected_version.encode(buf)