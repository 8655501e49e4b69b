"""A mu-law RTP session over UDP for one SIP media stream."""

from __future__ import annotations

import errno
import logging
import random
import socket
import time
from collections.abc import Sequence

from sipmedia.audio import linear_to_ulaw, ulaw_to_linear
from sipmedia.codec import DTMF_CODEC, ULAW_CODEC
from sipmedia.dtmf import char_to_dtmf
from sipmedia.rtp import HEADER_SIZE, EventHeader, Header, RTPError

log = logging.getLogger(__name__)

FRAME_SAMPLES = 160
_BIND_MAX_ATTEMPTS = 10
_BIND_PORT_MIN = 16384
_BIND_PORT_MAX = 32768
_DTMF_VOLUME = 6
_DTMF_DURATION = 400
_DTMF_INTERVAL = 100


def _bind(host: str, port: int) -> socket.socket:
    if not host:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.bind(("", port))
        except OSError:
            sock.close()
            raise
        return sock
    family, socktype, proto, _, addr = socket.getaddrinfo(
        host, port, type=socket.SOCK_DGRAM, flags=socket.AI_PASSIVE
    )[0]
    sock = socket.socket(family, socktype, proto)
    try:
        sock.bind(addr)
    except OSError:
        sock.close()
        raise
    return sock


def listen(host: str) -> socket.socket:
    """Open a UDP socket for RTP.

    If ``host`` has the form ``host:port`` it is bound as given. Otherwise a
    random even port in [16384, 32768] is chosen, retrying a few times if the
    port is already in use.
    """
    if ":" in host:
        name, _, port = host.rpartition(":")
        return _bind(name.strip("[]"), int(port))
    error: OSError | None = None
    for _ in range(_BIND_MAX_ATTEMPTS):
        port = random.randint(_BIND_PORT_MIN, _BIND_PORT_MAX)
        port -= port % 2
        try:
            return _bind(host, port)
        except OSError as exc:
            if exc.errno != errno.EADDRINUSE:
                raise
            error = exc
            log.info("RTP listen congestion: %s:%d", host, port)
    assert error is not None
    raise error


class Session:
    """Sends and receives 160-sample linear frames encoded as mu-law RTP.

    ``peer`` is the remote (host, port); while it is None outgoing packets
    are dropped. No RTCP is provided.
    """

    def __init__(self, host: str = "") -> None:
        self.sock: socket.socket | None = listen(host)
        self.peer: tuple[str, int] | None = None
        self.header = Header(seq=666, ts=0, ssrc=random.getrandbits(32))

    @property
    def _active(self) -> bool:
        return self.sock is not None and self.peer is not None

    def _transmit(self, payload: bytes) -> None:
        assert self.sock is not None and self.peer is not None
        self.sock.sendto(self.header.to_bytes() + payload, self.peer)

    def _advance(self, samps: int) -> None:
        self.header.ts = (self.header.ts + samps) & 0xFFFFFFFF
        self.header.seq = (self.header.seq + 1) & 0xFFFF

    def send(self, frame: Sequence[int]) -> None:
        """Send one frame of 160 signed 16-bit samples as mu-law."""
        if len(frame) != FRAME_SAMPLES:
            raise ValueError(f"frame must hold {FRAME_SAMPLES} samples")
        if not self._active:
            return
        self.header.pt = ULAW_CODEC.pt
        self._transmit(bytes(linear_to_ulaw(s) for s in frame))
        self._advance(FRAME_SAMPLES)

    def send_raw(self, pt: int, data: bytes, samps: int) -> None:
        """Send an already encoded payload that spans ``samps`` samples."""
        if not self._active:
            return
        self.header.pt = pt
        self._transmit(bytes(data))
        self._advance(samps)

    def send_dtmf(self, digit: str) -> None:
        """Send a DTMF digit as a sequence of RFC 2833 event packets."""
        code = char_to_dtmf(digit)
        if not self._active:
            return
        self.header.pt = DTMF_CODEC.pt
        self.header.mark = True
        event = EventHeader(event=code, volume=_DTMF_VOLUME, duration=1)
        while True:
            self._transmit(event.to_bytes())
            self.header.seq = (self.header.seq + 1) & 0xFFFF
            self.header.mark = False
            event.duration += _DTMF_INTERVAL
            if event.duration >= _DTMF_DURATION:
                break
        event.end = True
        event.duration = _DTMF_DURATION
        for _ in range(3):
            self._transmit(event.to_bytes())
            self.header.seq = (self.header.seq + 1) & 0xFFFF

    def receive(self, timeout: float | None = None) -> list[int]:
        """Wait for the next mu-law frame and return its decoded samples.

        Packets that are malformed, of another payload type or of the wrong
        size are skipped. Raises TimeoutError if no frame arrives in time.
        """
        if self.sock is None:
            raise OSError("session is closed")
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError("no RTP frame received")
                self.sock.settimeout(remaining)
            else:
                self.sock.settimeout(None)
            try:
                packet, _ = self.sock.recvfrom(2048)
            except socket.timeout:
                raise TimeoutError("no RTP frame received") from None
            try:
                header = Header.from_bytes(packet)
            except RTPError:
                continue
            if header.pt != ULAW_CODEC.pt:
                continue
            if len(packet) != HEADER_SIZE + FRAME_SAMPLES:
                continue
            return [ulaw_to_linear(b) for b in packet[HEADER_SIZE:]]

    def close(self) -> None:
        """Close the socket; later sends are dropped."""
        if self.sock is not None:
            self.sock.close()
            self.sock = None

    def __enter__(self) -> Session:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()