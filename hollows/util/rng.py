"""Seeded random streams for cave generation.

A generation run owns one ``RNGProvider`` built from its master seed. Every
stage that needs randomness asks the provider for a stream by domain name
("map.cave.noise", "map.cave.spawn") and gets a ``Random`` seeded from the
pair (master seed, domain). Stages therefore never share a sequence: drawing
more noise values cannot move the spawn point of the same seed.

Usage:
    provider = RNGProvider("test-1")
    noise = provider.get("map.cave.noise")
    is_solid = noise.randrange(100) < fill_percent
"""

from __future__ import annotations

import zlib
from collections.abc import Sequence
from random import Random
from typing import TypeAlias, TypeVar

T = TypeVar("T")


def derive_seed(master_seed: int | str, domain: str) -> int:
    """Combine a master seed and a domain name into a 32-bit stream seed.

    crc32 rather than hash(): str hashing is salted per interpreter
    (PYTHONHASHSEED), so hash() would give a different cave every session.
    """
    return zlib.crc32(f"{master_seed}:{domain}".encode())


class RNGStream:
    """The random sequence of one generation domain.

    Counts draws so a debug log can show how much randomness each stage
    consumed for a given seed.
    """

    def __init__(self, master_seed: int | str, domain: str) -> None:
        self.domain = domain
        self.draws = 0
        self._random = Random(derive_seed(master_seed, domain))

    def random(self) -> float:
        self.draws += 1
        return self._random.random()

    def randint(self, a: int, b: int) -> int:
        self.draws += 1
        return self._random.randint(a, b)

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        self.draws += 1
        return self._random.randrange(start, stop, step)

    def choice(self, seq: Sequence[T]) -> T:
        self.draws += 1
        return self._random.choice(seq)

    def getrandbits(self, k: int) -> int:
        self.draws += 1
        return self._random.getrandbits(k)

    def __repr__(self) -> str:
        return f"RNGStream({self.domain!r}, draws={self.draws})"


# Anything that can drive a random decision: a plain Random (tests, callers
# with their own generator) or a provider stream.
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Hands out one stream per domain, all derived from ``master_seed``.

    The seed must already be resolved; see ``fresh_seed`` for runs that
    were not given one.
    """

    def __init__(self, master_seed: int | str) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, RNGStream] = {}

    @property
    def master_seed(self) -> int | str:
        return self._master_seed

    def get(self, domain: str) -> RNGStream:
        """Return the stream for ``domain``, creating it on first use.

        Repeated calls return the same stream, so its sequence continues
        rather than restarting.
        """
        stream = self._streams.get(domain)
        if stream is None:
            stream = RNGStream(self._master_seed, domain)
            self._streams[domain] = stream
        return stream

    def draw_counts(self) -> dict[str, int]:
        """Draws taken so far from each stream, in creation order."""
        return {domain: stream.draws for domain, stream in self._streams.items()}


def fresh_seed() -> str:
    """Return a new seed drawn from system entropy.

    The seed is a short hex string so it can be logged, copied into a bug
    report, and passed back in to reproduce the same cave.
    """
    return f"{Random().getrandbits(32):08x}"
