"""RTP packet header and RFC 2833 telephone event header encoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass

HEADER_SIZE = 12
EVENT_HEADER_SIZE = 4
VERSION = 2

_HEADER = struct.Struct("!BBHII")
_EVENT = struct.Struct("!BBH")


class RTPError(ValueError):
    """Raised when an RTP packet cannot be decoded."""


class BadVersionError(RTPError):
    def __init__(self) -> None:
        super().__init__("bad rtp version header")


class TruncatedPacketError(RTPError):
    def __init__(self) -> None:
        super().__init__("truncated rtp packet")


class ExtendedHeadersNotSupportedError(RTPError):
    def __init__(self) -> None:
        super().__init__("rtp extended headers not supported")


@dataclass
class Header:
    """The fixed header at the start of every RTP packet."""

    pad: bool = False  # used for secure RTP
    mark: bool = False  # used for RFC 2833
    pt: int = 0  # payload type from SDP
    seq: int = 0  # sequence number for reordering
    ts: int = 0  # timestamp in samples
    ssrc: int = 0  # random session identifier

    def to_bytes(self) -> bytes:
        """Encode the header into its 12-byte wire form."""
        b0 = VERSION << 6
        if self.pad:
            b0 |= 1 << 5
        b1 = self.pt & 0x7F
        if self.mark:
            b1 |= 1 << 7
        return _HEADER.pack(
            b0, b1, self.seq & 0xFFFF, self.ts & 0xFFFFFFFF, self.ssrc & 0xFFFFFFFF
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Header:
        """Decode a header from the start of a packet."""
        if len(data) < HEADER_SIZE:
            raise TruncatedPacketError()
        b0, b1, seq, ts, ssrc = _HEADER.unpack_from(data)
        if b0 >> 6 != VERSION:
            raise BadVersionError()
        if (b0 >> 4) & 1:
            raise ExtendedHeadersNotSupportedError()
        return cls(
            pad=bool((b0 >> 5) & 1),
            mark=bool((b1 >> 7) & 1),
            pt=b1 & 0x7F,
            seq=seq,
            ts=ts,
            ssrc=ssrc,
        )


@dataclass
class EventHeader:
    """A telephone event (such as a DTMF digit) carried after the RTP header.

    ``volume`` is the tone power in -dBm0 (0 to 63); ``duration`` is in
    timestamp units, with zero reserved for events that last until updated.
    """

    event: int = 0
    end: bool = False
    reserved: bool = False
    volume: int = 0
    duration: int = 0

    def to_bytes(self) -> bytes:
        """Encode the event into its 4-byte wire form."""
        b1 = self.volume & 63
        if self.reserved:
            b1 |= 1 << 6
        if self.end:
            b1 |= 1 << 7
        return _EVENT.pack(self.event & 0xFF, b1, self.duration & 0xFFFF)

    @classmethod
    def from_bytes(cls, data: bytes) -> EventHeader:
        """Decode an event from the start of a payload."""
        if len(data) < EVENT_HEADER_SIZE:
            raise TruncatedPacketError()
        event, b1, duration = _EVENT.unpack_from(data)
        return cls(
            event=event,
            end=bool(b1 >> 7),
            reserved=bool((b1 >> 6) & 1),
            volume=b1 & 63,
            duration=duration,
        )