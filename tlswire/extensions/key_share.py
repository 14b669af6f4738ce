"""The key_share extension in its ClientHello, ServerHello and retry forms."""

from __future__ import annotations

from dataclasses import dataclass, field

from tlswire.buffer import CryptoBuffer, EncodeError, ParseBuffer, TlsError
from tlswire.extensions.supported_groups import NamedGroup


@dataclass(frozen=True)
class KeyShareEntry:
    group: NamedGroup
    opaque: bytes

    @classmethod
    def parse(cls, buf: ParseBuffer) -> KeyShareEntry:
        group = NamedGroup.parse(buf)
        opaque_len = buf.read_u16()
        opaque = buf.slice(opaque_len)
        return cls(group, opaque.as_bytes())

    def encode(self, buf: CryptoBuffer) -> None:
        self.group.encode(buf)
        try:
            with buf.u16_length():
                buf.extend_from_slice(self.opaque)
        except TlsError as exc:
            raise EncodeError("no room for key share") from exc


@dataclass(frozen=True)
class KeyShareServerHello:
    entry: KeyShareEntry

    @classmethod
    def parse(cls, buf: ParseBuffer) -> KeyShareServerHello:
        return cls(KeyShareEntry.parse(buf))

    def encode(self, buf: CryptoBuffer) -> None:
        self.entry.encode(buf)


@dataclass
class KeyShareClientHello:
    client_shares: list[KeyShareEntry] = field(default_factory=list)

    @classmethod
    def parse(
        cls, buf: ParseBuffer, capacity: int | None = None
    ) -> KeyShareClientHello:
        length = buf.read_u16()
        return cls(buf.read_list(length, KeyShareEntry.parse, capacity))

    def encode(self, buf: CryptoBuffer) -> None:
        with buf.u16_length():
            for share in self.client_shares:
                share.encode(buf)


@dataclass(frozen=True)
class KeyShareHelloRetryRequest:
    selected_group: NamedGroup

    @classmethod
    def parse(cls, buf: ParseBuffer) -> KeyShareHelloRetryRequest:
        return cls(NamedGroup.parse(buf))

    def encode(self, buf: CryptoBuffer) -> None:
        self.selected_group.encode(buf)