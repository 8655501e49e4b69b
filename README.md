# sipmedia

Building blocks for the media side of a VoIP phone call, in pure Python with no
third-party dependencies.

- `sipmedia.audio`: G.711 μ-law and A-law companding (`linear_to_ulaw`,
  `ulaw_to_linear`, `linear_to_alaw`, `alaw_to_linear`) and in-place
  saturating mixing of 16-bit samples (`sadd`). Out-of-range inputs raise
  `ValueError`.
- `sipmedia.awgn`: `AWGN`, a deterministic additive white Gaussian noise
  generator for comfort noise. `AWGN(volume)` uses a fixed seed;
  `AWGN.from_dbm0` and `AWGN.from_dbov` take a seed and a level. Samples come
  from `get()` or by iterating the generator.
- `sipmedia.dtmf`: mapping between RFC 2833 telephone events and keypad
  characters (`dtmf_to_char`, `char_to_dtmf`); unknown values raise
  `ValueError`.
- `sipmedia.rtp`: RTP `Header` and telephone-event `EventHeader`, each with
  `to_bytes()` and `from_bytes()`. Malformed packets raise `RTPError` or one of
  its subclasses `BadVersionError`, `TruncatedPacketError` and
  `ExtendedHeadersNotSupportedError`.
- `sipmedia.rtp_session`: `Session`, a UDP RTP session that sends 160-sample
  frames as μ-law (`send`), raw payloads (`send_raw`) and DTMF digits
  (`send_dtmf`), and receives decoded frames (`receive`, which raises
  `TimeoutError` when its timeout runs out). Packets are only sent while
  `session.peer` is set. `listen` binds a UDP socket, on a random even port in
  16384–32768 unless a `host:port` is given.
- `sipmedia.codec`: the `Codec` dataclass, `ULAW_CODEC`, `DTMF_CODEC`, `OPUS`
  and the IANA static payload type table `STANDARD_CODECS`.
- `sipmedia.media`, `sipmedia.origin`, `sipmedia.sdp`: Session Description
  Protocol objects (`Media`, `Origin`, `SDP`), with `parse` to read an SDP body
  (raising `SDPError` when it is invalid), `SDP.new` to build a basic audio
  offer and `SDP.format` to write one.

## Installation

```
pip install .
```

## Examples

Companding:

```python
from sipmedia.audio import linear_to_ulaw, ulaw_to_linear

assert linear_to_ulaw(0) == 255
assert linear_to_ulaw(-100) == 114
assert ulaw_to_linear(255) == 0
```

Comfort noise:

```python
from sipmedia.awgn import AWGN

noise = AWGN(-50.0)
frame = [noise.get() for _ in range(160)]
```

Parsing and building an SDP:

```python
from sipmedia.codec import DTMF_CODEC, ULAW_CODEC
from sipmedia.sdp import SDP, parse

sdp = parse(
    "v=0\r\n"
    "o=- 3366701332 3366701332 IN IP4 1.2.3.4\r\n"
    "s=-\r\n"
    "c=IN IP4 1.2.3.4\r\n"
    "t=0 0\r\n"
    "m=audio 32898 RTP/AVP 0 101\r\n"
    "a=rtpmap:101 telephone-event/8000\r\n"
)
print(sdp.addr, sdp.audio.port, [codec.name for codec in sdp.audio.codecs])

offer = SDP.new("10.0.0.1", 20000, ULAW_CODEC, DTMF_CODEC)
print(offer.format())
```

Sending audio over RTP:

```python
from sipmedia.rtp_session import Session

with Session("127.0.0.1") as session:
    session.peer = ("127.0.0.1", 20000)
    session.send([0] * 160)
    session.send_dtmf("5")
```

## What it does not do

This package covers media only. It has no SIP signalling: it does not build,
parse or send SIP messages, manage call dialogs or resolve SIP routes. There is
no RTCP, no jitter buffer or packet reordering, no audio device input or
output, and no command-line program.

## Tests

```
pip install ".[test]"
pytest
```