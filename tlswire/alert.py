"""TLS alert messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from tlswire.buffer import (
    CryptoBuffer,
    DecodeError,
    EncodeError,
    InsufficientSpaceError,
    ParseBuffer,
    TlsError,
)


class AlertLevel(IntEnum):
    WARNING = 1
    FATAL = 2

    @classmethod
    def of(cls, num: int) -> AlertLevel | None:
        """The level with code ``num``, or ``None`` if there is none."""
        try:
            return cls(num)
        except ValueError:
            return None


class AlertDescription(IntEnum):
    CLOSE_NOTIFY = 0
    UNEXPECTED_MESSAGE = 10
    BAD_RECORD_MAC = 20
    RECORD_OVERFLOW = 22
    HANDSHAKE_FAILURE = 40
    BAD_CERTIFICATE = 42
    UNSUPPORTED_CERTIFICATE = 43
    CERTIFICATE_REVOKED = 44
    CERTIFICATE_EXPIRED = 45
    CERTIFICATE_UNKNOWN = 46
    ILLEGAL_PARAMETER = 47
    UNKNOWN_CA = 48
    ACCESS_DENIED = 49
    DECODE_ERROR = 50
    DECRYPT_ERROR = 51
    PROTOCOL_VERSION = 70
    INSUFFICIENT_SECURITY = 71
    INTERNAL_ERROR = 80
    INAPPROPRIATE_FALLBACK = 86
    USER_CANCELED = 90
    MISSING_EXTENSION = 109
    UNSUPPORTED_EXTENSION = 110
    UNRECOGNIZED_NAME = 112
    BAD_CERTIFICATE_STATUS_RESPONSE = 113
    UNKNOWN_PSK_IDENTITY = 115
    CERTIFICATE_REQUIRED = 116
    NO_APPLICATION_PROTOCOL = 120

    @classmethod
    def of(cls, num: int) -> AlertDescription | None:
        """The description with code ``num``, or ``None`` if there is none."""
        try:
            return cls(num)
        except ValueError:
            return None


@dataclass(frozen=True)
class Alert:
    level: AlertLevel
    description: AlertDescription

    @classmethod
    def parse(cls, buf: ParseBuffer) -> Alert:
        level = buf.read_u8()
        desc = buf.read_u8()
        parsed_level = AlertLevel.of(level)
        if parsed_level is None:
            raise DecodeError(f"unknown alert level {level}")
        parsed_desc = AlertDescription.of(desc)
        if parsed_desc is None:
            raise DecodeError(f"unknown alert description {desc}")
        return cls(parsed_level, parsed_desc)

    def encode(self, buf: CryptoBuffer) -> None:
        try:
            buf.push(int(self.level))
            buf.push(int(self.description))
        except InsufficientSpaceError as exc:
            raise EncodeError("no room for alert") from exc


class AbortHandshake(TlsError):
    """The handshake must stop and the given alert be sent to the peer."""

    def __init__(self, level: AlertLevel, description: AlertDescription) -> None:
        super().__init__(f"abort handshake: {level.name} {description.name}")
        self.level = level
        self.description = description