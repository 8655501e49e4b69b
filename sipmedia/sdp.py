"""Session Description Protocol payloads: parsing and formatting.

An SDP tells the other side of a SIP call where and how to send media,
for example::

    v=0
    o=root 31589 31589 IN IP4 10.0.0.38
    s=session
    c=IN IP4 10.0.0.38
    t=0 0
    m=audio 30126 RTP/AVP 0 101
    a=rtpmap:0 PCMU/8000
    a=rtpmap:101 telephone-event/8000
    a=fmtp:101 0-16
    a=ptime:20
    a=sendrecv
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass, field

from sipmedia.codec import STANDARD_CODECS, Codec
from sipmedia.media import Media
from sipmedia.origin import Origin, generate_origin_id, is_ipv6

log = logging.getLogger(__name__)

CONTENT_TYPE = "application/sdp"
MAX_LENGTH = 1450

_FALLBACK_ADDR = "69.28.157.198"
_DEFAULT_SESSION_NAME = "my people call themselves dark angels"
_PARSED_SESSION_DEFAULT = "pokémon"
_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"[0-9]+")


class SDPError(ValueError):
    """Raised when an SDP payload cannot be parsed."""


def _atoi(s: str) -> int | None:
    if _SIGNED_INT.fullmatch(s) is None:
        return None
    return int(s)


def _parse_uint(s: str, limit: int) -> int | None:
    if _UNSIGNED_INT.fullmatch(s) is None:
        return None
    value = int(s)
    return value if value <= limit else None


@dataclass
class SDP:
    """A Session Description Protocol payload of a SIP message."""

    origin: Origin = field(default_factory=Origin)
    addr: str = ""  # connect to this IP (from c=)
    audio: Media | None = None
    video: Media | None = None
    session: str = ""  # s= session name
    time: str = ""  # t= active time
    ptime: int = 0  # milliseconds per frame; 0 means unspecified
    send_only: bool = False
    recv_only: bool = False
    attrs: list[tuple[str, str]] = field(default_factory=list)  # unknown a= lines
    other: list[tuple[str, str]] = field(default_factory=list)  # unknown lines

    content_type = CONTENT_TYPE

    @classmethod
    def new(cls, host: str, port: int, *args: Codec) -> SDP:
        """Create an everyday VoIP SDP offering audio on host:port.

        The remaining positional arguments are the codecs, in order of
        preference.
        """
        origin_id = generate_origin_id()
        return cls(
            origin=Origin(id=origin_id, version=origin_id, addr=host),
            addr=host,
            audio=Media(proto="RTP/AVP", port=port, codecs=list(args)),
        )

    def data(self) -> bytes:
        """Return the formatted SDP as UTF-8 bytes."""
        return self.format().encode("utf-8")

    def format(self) -> str:
        """Render the SDP text, filling in defaults for blank fields."""
        parts = ["v=0\r\n", self.origin.format()]
        parts.append(f"s={self.session or _DEFAULT_SESSION_NAME}\r\n")
        net = "IP6" if is_ipv6(self.addr) else "IP4"
        parts.append(f"c=IN {net} {self.addr or _FALLBACK_ADDR}\r\n")
        parts.append(f"t={self.time or '0 0'}\r\n")
        if self.audio is not None:
            parts.append(self.audio.format("audio"))
        if self.video is not None:
            parts.append(self.video.format("video"))
        for name, value in self.attrs:
            parts.append(f"a={name}:{value}\r\n" if value else f"a={name}\r\n")
        if self.ptime > 0:
            parts.append(f"a=ptime:{self.ptime}\r\n")
        if self.send_only:
            parts.append("a=sendonly\r\n")
        elif self.recv_only:
            parts.append("a=recvonly\r\n")
        else:
            parts.append("a=sendrecv\r\n")
        parts.extend(f"{name}={value}\r\n" for name, value in self.other)
        return "".join(parts)

    def __str__(self) -> str:
        return self.format()


def parse(s: str) -> SDP:
    """Parse SDP text into an :class:`SDP`; raise SDPError if it is invalid."""
    if not s.startswith("v=0\r\n"):
        raise SDPError("sdp must start with v=0\\r\\n")
    lines = s[5:].split("\r\n")
    if len(lines) < 2:
        raise SDPError("too few lines in sdp")

    sdp = SDP(session=_PARSED_SESSION_DEFAULT, time="0 0")
    audioinfo = ""
    videoinfo = ""
    rtpmaps: list[str] = []
    fmtps: list[str] = []
    ok_origin = False
    ok_conn = False

    for line in lines:
        if line == "":
            continue
        if len(line) < 3 or line[1] != "=":
            log.info("Bad line in SDP: %s", line)
            continue
        kind, body = line[0], line[2:]
        if kind == "m":
            if body.startswith("audio "):
                audioinfo = body[6:]
            elif body.startswith("video "):
                videoinfo = body[6:]
            else:
                log.info("Unsupported SDP media line: %s", body)
        elif kind == "s":
            sdp.session = body
        elif kind == "t":
            sdp.time = body
        elif kind == "c":
            if ok_conn:
                log.info("Dropping extra c= line in sdp: %s", line)
                continue
            sdp.addr = _parse_conn_line(line)
            ok_conn = True
        elif kind == "o":
            sdp.origin = _parse_origin_line(line)
            ok_origin = True
        elif kind == "a":
            _parse_attribute(sdp, body, rtpmaps, fmtps)
        else:
            sdp.other.append((kind, body))

    if not ok_conn or not ok_origin:
        raise SDPError("sdp missing mandatory information")

    if audioinfo:
        sdp.audio = _build_media(audioinfo, rtpmaps, fmtps)
    if videoinfo:
        sdp.video = _build_media(videoinfo, rtpmaps, fmtps)
    if sdp.audio is None and sdp.video is None:
        raise SDPError("sdp has no audio or video information")
    return sdp


def _parse_attribute(sdp: SDP, line: str, rtpmaps: list[str], fmtps: list[str]) -> None:
    if line.startswith("rtpmap:"):
        rtpmaps.append(line[7:])
    elif line.startswith("fmtp:"):
        fmtps.append(line[5:])
    elif line.startswith("ptime:"):
        ptime = _atoi(line[6:])
        if ptime is not None and ptime > 0:
            sdp.ptime = ptime
        else:
            log.info("Invalid SDP Ptime value %s", line[6:])
    elif line == "sendrecv":
        pass
    elif line == "sendonly":
        sdp.send_only = True
    elif line == "recvonly":
        sdp.recv_only = True
    else:
        name, colon, value = line.partition(":")
        if colon and not name:
            log.info("Evil SDP attribute: %s", line)
        else:
            sdp.attrs.append((name, value))


def _build_media(info: str, rtpmaps: list[str], fmtps: list[str]) -> Media:
    port, proto, pts = _parse_media_info(info)
    return Media(proto=proto, port=port, codecs=_populate_codecs(pts, rtpmaps, fmtps))


def _populate_codecs(pts: list[int], rtpmaps: list[str], fmtps: list[str]) -> list[Codec]:
    """Turn payload types from an m= line into codecs.

    Static payload types without an rtpmap are filled in from the IANA table.
    """
    codecs = []
    for pt in pts:
        prefix = f"{pt} "
        codec = Codec(pt=pt, name="", rate=0)
        rtpmap = next((r for r in rtpmaps if r.startswith(prefix)), None)
        if rtpmap is not None:
            codec = _parse_rtpmap_info(pt, rtpmap[len(prefix):])
        if not codec.name:
            if pt >= 96:
                raise SDPError("dynamic codec missing rtpmap")
            try:
                codec = STANDARD_CODECS[pt]
            except KeyError:
                raise SDPError(f"unknown iana codec id: {pt}") from None
        fmtp = next((f for f in fmtps if f.startswith(prefix)), None)
        if fmtp is not None:
            codec = dataclasses.replace(codec, fmtp=fmtp[len(prefix):])
        codecs.append(codec)
    return codecs


def _parse_rtpmap_info(pt: int, s: str) -> Codec:
    """Parse the part of an rtpmap such as ``PCMU/8000`` or ``L16/16000/2``."""
    toks = s.split("/")
    if len(toks) < 2:
        raise SDPError("invalid rtpmap")
    rate = _atoi(toks[1])
    if rate is None:
        raise SDPError("invalid rtpmap rate")
    param = toks[2] if len(toks) >= 3 else ""
    return Codec(pt=pt, name=toks[0], rate=rate, param=param)


def _parse_media_info(s: str) -> tuple[int, str, list[int]]:
    """Parse the part of an m= line such as ``30126 RTP/AVP 0 101``."""
    toks = s.split(" ")
    if len(toks) < 3:
        raise SDPError("invalid m= line")
    port_s = toks[0]
    slash = port_s.find("/")
    if slash > 0:
        port_s = port_s[:slash]
    port = _parse_uint(port_s, 0xFFFF)
    if port is None:
        raise SDPError("invalid m= port")
    pts = []
    for tok in toks[2:]:
        pt = _parse_uint(tok, 0xFF)
        if pt is None:
            raise SDPError("invalid pt in m= line")
        pts.append(pt)
    return port, toks[1], pts


def _parse_conn_line(line: str) -> str:
    """Parse a line such as ``c=IN IP4 10.0.0.38`` into its address."""
    toks = line[2:].split(" ")
    if len(toks) != 3:
        raise SDPError("invalid conn line")
    if toks[0] != "IN" or toks[1] not in ("IP4", "IP6"):
        raise SDPError("unsupported conn net type")
    if "/" in toks[2]:
        raise SDPError("multicast address in c= line D:")
    return toks[2]


def _parse_origin_line(line: str) -> Origin:
    """Parse a line such as ``o=root 31589 31589 IN IP4 10.0.0.38``."""
    toks = line[2:].split(" ")
    if len(toks) != 6:
        raise SDPError("invalid origin line")
    if toks[3] != "IN" or toks[4] not in ("IP4", "IP6"):
        raise SDPError("unsupported origin net type")
    if "/" in toks[5]:
        raise SDPError("multicast address in o= line D:")
    return Origin(user=toks[0], id=toks[1], version=toks[2], addr=toks[5])