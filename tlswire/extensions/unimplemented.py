"""Opaque holder for extensions whose contents are not interpreted."""

from __future__ import annotations

from dataclasses import dataclass

from tlswire.buffer import CryptoBuffer, ParseBuffer


@dataclass(frozen=True)
class Unimplemented:
    data: bytes

    @classmethod
    def parse(cls, buf: ParseBuffer) -> Unimplemented:
        """Capture the unread bytes of ``buf`` without consuming them."""
        return cls(buf.as_bytes())

    def encode(self, buf: CryptoBuffer) -> None:
        buf.extend_from_slice(self.data)