"""RTP codec descriptions and the IANA static payload type table."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Codec:
    """One codec offered in an SDP media description.

    For well-known codecs with a payload type below 96 the rtpmap may be
    omitted from an SDP; their details are then taken from
    ``STANDARD_CODECS``.
    """

    pt: int  # 7-bit payload type carried in RTP packets
    name: str  # e.g. PCMU, G729, telephone-event
    rate: int  # clock rate in hertz, usually 8000
    param: str = ""  # sometimes the number of channels
    fmtp: str = ""  # extra format info, e.g. "0-16" for DTMF

    def format(self) -> str:
        """Render the ``a=rtpmap`` line and, if present, the ``a=fmtp`` line."""
        line = f"a=rtpmap:{self.pt} {self.name}/{self.rate}"
        if self.param:
            line += f"/{self.param}"
        line += "\r\n"
        if self.fmtp:
            line += f"a=fmtp:{self.pt} {self.fmtp}\r\n"
        return line


ULAW_CODEC = Codec(pt=0, name="PCMU", rate=8000)
DTMF_CODEC = Codec(pt=101, name="telephone-event", rate=8000, fmtp="0-16")
OPUS = Codec(pt=111, name="opus", rate=48000, param="2")

STANDARD_CODECS: dict[int, Codec] = {
    codec.pt: codec
    for codec in (
        ULAW_CODEC,
        Codec(3, "GSM", 8000),
        Codec(4, "G723", 8000),
        Codec(5, "DVI4", 8000),
        Codec(6, "DVI4", 16000),
        Codec(7, "LPC", 8000),
        Codec(8, "PCMA", 8000),
        Codec(9, "G722", 8000),  # the real clock is 16 kHz, but 8000 is advertised
        Codec(10, "L16", 44100, param="2"),
        Codec(11, "L16", 44100),
        Codec(12, "QCELP", 8000),
        Codec(13, "CN", 8000),  # RFC 3389 comfort noise
        Codec(14, "MPA", 90000),
        Codec(15, "G728", 8000),
        Codec(16, "DVI4", 11025),
        Codec(17, "DVI4", 22050),
        Codec(18, "G729", 8000),
        Codec(25, "CelB", 90000),
        Codec(26, "JPEG", 90000),
        Codec(28, "nv", 90000),
        Codec(31, "H261", 90000),
        Codec(32, "MPV", 90000),
        Codec(33, "MP2T", 90000),
        Codec(34, "H263", 90000),
    )
}