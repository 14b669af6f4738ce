"""The pre_shared_key extension."""

from __future__ import annotations

from dataclasses import dataclass, field

from tlswire.buffer import (
    CryptoBuffer,
    EncodeError,
    InsufficientSpaceError,
    ParseBuffer,
    TlsError,
)


@dataclass
class PreSharedKeyClientHello:
    """Offered PSK identities.

    Binders are written as zero placeholders of the right size; they are
    filled in once the transcript hash is known.
    """

    identities: list[bytes] = field(default_factory=list)
    hash_size: int = 0

    def encode(self, buf: CryptoBuffer) -> None:
        try:
            with buf.u16_length():
                for identity in self.identities:
                    with buf.u16_length():
                        buf.extend_from_slice(identity)
                    # Ticket age is not supported; zero as the RFC recommends.
                    buf.push_u32(0)
        except TlsError as exc:
            raise EncodeError("no room for psk identities") from exc

        binders_len = (1 + self.hash_size) * len(self.identities)
        try:
            buf.push_u16(binders_len)
            buf.extend_from_slice(bytes(binders_len))
        except InsufficientSpaceError as exc:
            raise EncodeError("no room for psk binders") from exc


@dataclass(frozen=True)
class PreSharedKeyServerHello:
    selected_identity: int

    @classmethod
    def parse(cls, buf: ParseBuffer) -> PreSharedKeyServerHello:
        return cls(buf.read_u16())

    def encode(self, buf: CryptoBuffer) -> None:
        try:
            buf.push_u16(self.selected_identity)
        except InsufficientSpaceError as exc:
            raise EncodeError("no room for selected identity") from exc