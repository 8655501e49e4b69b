"""G.711 companding and saturating mixing of 16-bit PCM audio."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

_ULAW_BIAS = 0x84
_INT16_MIN = -0x8000
_INT16_MAX = 0x7FFF


def _check_int16(value: int) -> None:
    if not _INT16_MIN <= value <= _INT16_MAX:
        raise ValueError(f"sample out of 16-bit range: {value}")


def _check_byte(value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value out of byte range: {value}")


def linear_to_ulaw(linear: int) -> int:
    """Compress a signed 16-bit PCM sample into a G.711 mu-law byte."""
    _check_int16(linear)
    if linear >= 0:
        sample = linear + _ULAW_BIAS
        mask = 0xFF
    else:
        sample = _ULAW_BIAS - linear
        mask = 0x7F

    segment = (sample | 0xFF).bit_length() - 1 - 7
    if segment >= 8:
        return mask ^ 0x7F

    mantissa = (sample >> (segment + 3)) & 0x0F
    return (mask ^ ((segment << 4) | mantissa)) & 0xFF


def ulaw_to_linear(ulaw: int) -> int:
    """Expand a G.711 mu-law byte into a signed 16-bit PCM sample."""
    _check_byte(ulaw)
    u = ~ulaw & 0xFF
    sample = ((u & 0x0F) << 3) + _ULAW_BIAS
    sample <<= (u & 0x70) >> 4
    if u & 0x80:
        return _ULAW_BIAS - sample
    return sample - _ULAW_BIAS


def linear_to_alaw(linear: int) -> int:
    """Compress a signed 16-bit PCM sample into a G.711 A-law byte."""
    _check_int16(linear)
    if linear >= 0:
        sign = 0x80
        sample = linear >> 3
    else:
        sign = 0x00
        sample = (~linear) >> 3
    sample = min(sample, 4095)

    if sample < 32:
        alaw = sample >> 1
    else:
        segment = sample.bit_length() - 1 - 4
        mantissa = (sample >> segment) & 0x0F
        alaw = (segment << 4) | mantissa

    return ((alaw | sign) ^ 0x55) & 0xFF


def alaw_to_linear(alaw: int) -> int:
    """Expand a G.711 A-law byte into a signed 16-bit PCM sample."""
    _check_byte(alaw)
    a = alaw ^ 0x55
    segment = (a >> 4) & 0x07
    mantissa = a & 0x0F

    if segment == 0:
        sample = (mantissa << 1) | 1
    else:
        sample = ((mantissa | 0x10) << segment) | (1 << (segment - 1))
    sample <<= 3

    if a & 0x80:
        return sample
    return -sample


def sadd(dst: MutableSequence[int], src: Sequence[int]) -> None:
    """Mix ``src`` into ``dst`` in place with saturating 16-bit addition.

    Only the overlapping prefix of the two sequences is mixed. To mix into a
    part of a buffer, pass a writable view such as a ``memoryview`` slice of
    an ``array('h')``.
    """
    for i, (a, b) in enumerate(zip(dst, src)):
        dst[i] = max(_INT16_MIN, min(_INT16_MAX, a + b))