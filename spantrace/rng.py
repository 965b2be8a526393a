"""Fast pseudo-random numbers for span and trace identifiers."""

from __future__ import annotations

import os
import struct
import threading
from typing import Iterator, List, Sequence

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _seed_sequence(values: Sequence[int], n: int) -> List[int]:
    """Spread seed values over ``n`` 32-bit words, as a standard seed sequence does."""
    if n == 0:
        return []
    s = len(values)
    out = [0x8B8B8B8B] * n
    if n >= 623:
        t = 11
    elif n >= 68:
        t = 7
    elif n >= 39:
        t = 5
    elif n >= 7:
        t = 3
    else:
        t = (n - 1) // 2
    p = (n - t) // 2
    q = p + t
    m = max(s + 1, n)

    def mix(x: int) -> int:
        return x ^ (x >> 27)

    for k in range(m):
        r1 = (1664525 * mix(out[k % n] ^ out[(k + p) % n] ^ out[(k - 1) % n])) & _MASK32
        if k == 0:
            r2 = r1 + s
        elif k <= s:
            r2 = r1 + k % n + values[k - 1]
        else:
            r2 = r1 + k % n
        r2 &= _MASK32
        out[(k + p) % n] = (out[(k + p) % n] + r1) & _MASK32
        out[(k + q) % n] = (out[(k + q) % n] + r2) & _MASK32
        out[k % n] = r2
    for k in range(m, m + n):
        total = (out[k % n] + out[(k + p) % n] + out[(k - 1) % n]) & _MASK32
        r3 = (1566083941 * mix(total)) & _MASK32
        r4 = (r3 - k % n) & _MASK32
        out[(k + p) % n] ^= r3
        out[(k + q) % n] ^= r4
        out[k % n] = r4
    return out


class FastRandomNumberGenerator:
    """An xorshift128+ generator of unsigned 64-bit numbers.

    Unseeded, its state is all zeros and it yields only zeros.
    """

    MIN = 0
    MAX = _MASK64

    def __init__(self, *args: int) -> None:
        self._a = 0
        self._b = 0
        if args:
            self.seed(*args)

    def seed(self, *args: int) -> None:
        """Seed the state from integer seed values."""
        words = _seed_sequence([value & _MASK32 for value in args], 4)
        self._a = words[0] | (words[1] << 32)
        self._b = words[2] | (words[3] << 32)

    def __call__(self) -> int:
        t = self._a
        s = self._b
        self._a = s
        t ^= (t << 23) & _MASK64
        t ^= t >> 17
        t ^= s ^ (s >> 26)
        self._b = t
        return (t + s) & _MASK64

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self()


_local = threading.local()


def _entropy() -> tuple:
    return struct.unpack("<4I", os.urandom(16))


def _engine() -> FastRandomNumberGenerator:
    engine = getattr(_local, "engine", None)
    if engine is None:
        engine = FastRandomNumberGenerator(*_entropy())
        _local.engine = engine
    return engine


def _reseed_after_fork() -> None:
    engine = getattr(_local, "engine", None)
    if engine is not None:
        engine.seed(*_entropy())


if hasattr(os, "register_at_fork"):
    os.register_at_fork(after_in_child=_reseed_after_fork)


def generate_random64() -> int:
    """Return a random unsigned 64-bit number from the thread's generator."""
    return _engine()()


def generate_random_bytes(size: int) -> bytes:
    """Return ``size`` random bytes."""
    if size < 0:
        raise ValueError("size must not be negative")
    engine = _engine()
    chunks = (engine().to_bytes(8, "little") for _ in range((size + 7) // 8))
    return b"".join(chunks)[:size]