"""Domain-separated deterministic RNG using xxhash.

Formula: RNG_Value = Hash(Seed, Domain, Key, Counter)

Generation and placement draw from ``RngStream`` objects, which advance a
private counter over the stateless hash. Anything exposing the
``RandomSource`` methods (``random.Random`` included) can be injected in
their place, e.g. by tests that need an exact sequence.
"""

from __future__ import annotations

import struct
from typing import Protocol, Sequence, TypeVar

import xxhash

from alien_maze.core.enums import Domain

T = TypeVar("T")


class RandomSource(Protocol):
    """The random capability consumed by maze generation and placement."""

    def choice(self, seq: Sequence[T]) -> T: ...


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, key, counter).
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, counter: int) -> int:
        payload = struct.pack("<qiqi", self._seed, domain.value, key, counter)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, counter: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, counter) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, counter: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, counter)
        return low + int(f * (high - low + 1))

    def stream(self, domain: Domain, key: int = 0) -> RngStream:
        return RngStream(self, domain, key)


class RngStream:
    """Sequential ``RandomSource`` view over one (domain, key) of a DeterministicRNG."""

    __slots__ = ("_rng", "_domain", "_key", "_counter")

    def __init__(self, rng: DeterministicRNG, domain: Domain, key: int = 0) -> None:
        self._rng = rng
        self._domain = domain
        self._key = key
        self._counter = 0

    def random(self) -> float:
        value = self._rng.next_float(self._domain, self._key, self._counter)
        self._counter += 1
        return value

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise ValueError(f"empty range for randrange({stop})")
        return min(int(self.random() * stop), stop - 1)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.randrange(len(seq))]
