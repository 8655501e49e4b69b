"""Conversion between RFC 2833 telephone events and DTMF characters."""

from __future__ import annotations

_EVENTS = "0123456789*#ABCD!"
_CODES = {ch: code for code, ch in enumerate(_EVENTS)}
_CODES.update({ch.lower(): code for code, ch in enumerate(_EVENTS)})


def dtmf_to_char(event: int) -> str:
    """Turn a telephone event number into its DTMF character."""
    if not isinstance(event, int) or not 0 <= event < len(_EVENTS):
        raise ValueError(f"bad tel event: {event}")
    return _EVENTS[event]


def char_to_dtmf(ch: str) -> int:
    """Turn a DTMF character into its telephone event number."""
    try:
        return _CODES[ch]
    except (KeyError, TypeError):
        raise ValueError(f"bad dtmf char:{ch}") from None