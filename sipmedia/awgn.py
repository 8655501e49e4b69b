"""Additive white Gaussian noise generator for comfort noise."""

from __future__ import annotations

import math
from collections.abc import Iterator

_M1 = 259200
_IA1 = 7141
_IC1 = 54773
_RM1 = 1.0 / _M1
_M2 = 134456
_IA2 = 8121
_IC2 = 28411
_RM2 = 1.0 / _M2
_M3 = 243000
_IA3 = 4561
_IC3 = 51349
_DBM0_MAX_POWER = 3.14 + 3.02
_DEFAULT_SEED = 7162534


def _saturate(amp: float) -> int:
    if amp > 32767.0:
        return 32767
    if amp < -32768.0:
        return -32768
    return int(amp)


class AWGN:
    """Deterministic white noise source yielding signed 16-bit samples.

    ``volume`` is in decibels; -50.0 is a good value, and the closer it gets
    to 0.0 the louder the noise becomes.
    """

    def __init__(self, volume: float) -> None:
        self._seed(_DEFAULT_SEED, volume - _DBM0_MAX_POWER)

    @classmethod
    def from_dbm0(cls, idum: int, level: float) -> AWGN:
        """Create a generator with the given seed and level in dBm0."""
        return cls.from_dbov(idum, level - _DBM0_MAX_POWER)

    @classmethod
    def from_dbov(cls, idum: int, level: float) -> AWGN:
        """Create a generator with the given seed and level in dBov."""
        obj = cls.__new__(cls)
        obj._seed(idum, level)
        return obj

    def _seed(self, idum: int, level: float) -> None:
        idum = abs(int(idum))
        self._rms = math.pow(10.0, level / 20.0) * 32768.0
        ix1 = (_IC1 + idum) % _M1
        ix1 = (_IA1 * ix1 + _IC1) % _M1
        ix2 = ix1 % _M2
        ix1 = (_IA1 * ix1 + _IC1) % _M1
        self._ix3 = ix1 % _M3
        self._r = [0.0] * 98
        for j in range(1, 98):
            ix1 = (_IA1 * ix1 + _IC1) % _M1
            ix2 = (_IA2 * ix2 + _IC2) % _M2
            self._r[j] = (float(ix1) + float(ix2) * _RM2) * _RM1
        self._ix1 = ix1
        self._ix2 = ix2
        self._gset = 0.0
        self._have_spare = False

    def _ran1(self) -> float:
        self._ix1 = (_IA1 * self._ix1 + _IC1) % _M1
        self._ix2 = (_IA2 * self._ix2 + _IC2) % _M2
        self._ix3 = (_IA3 * self._ix3 + _IC3) % _M3
        j = 1 + (97 * self._ix3) // _M3
        if not 1 <= j <= 97:
            return -1.0
        res = self._r[j]
        self._r[j] = (float(self._ix1) + float(self._ix2) * _RM2) * _RM1
        return res

    def get(self) -> int:
        """Return the next noise sample."""
        if not self._have_spare:
            while True:
                v1 = 2.0 * self._ran1() - 1.0
                v2 = 2.0 * self._ran1() - 1.0
                r = v1 * v1 + v2 * v2
                if r < 1.0:
                    break
            fac = math.sqrt(-2.0 * math.log(r) / r)
            self._gset = v1 * fac
            self._have_spare = True
            amp = v2 * fac * self._rms
        else:
            self._have_spare = False
            amp = self._gset * self._rms
        return _saturate(amp)

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.get()