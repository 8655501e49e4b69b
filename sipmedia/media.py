"""The m= line of an SDP together with its codec attributes."""

from __future__ import annotations

from dataclasses import dataclass, field

from sipmedia.codec import Codec


@dataclass
class Media:
    """One kind of media (audio or video) offered in an SDP."""

    proto: str = ""  # RTP/AVP, SRTP, UDP, TCP, ...
    port: int = 0
    codecs: list[Codec] = field(default_factory=list)

    def format(self, kind: str) -> str:
        """Render the ``m=`` line of the given kind followed by codec lines."""
        proto = self.proto or "RTP/AVP"
        pts = "".join(f" {codec.pt}" for codec in self.codecs)
        lines = [f"m={kind} {self.port} {proto}{pts}\r\n"]
        lines.extend(codec.format() for codec in self.codecs)
        return "".join(lines)