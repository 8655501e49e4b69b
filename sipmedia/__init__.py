"""Media plumbing for VoIP calls: G.711, comfort noise, RTP, DTMF and SDP."""

__version__ = "0.1.0"

__all__ = [
    "audio",
    "awgn",
    "codec",
    "dtmf",
    "media",
    "origin",
    "rtp",
    "rtp_session",
    "sdp",
]