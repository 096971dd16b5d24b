"""
Secret code generation.

Two sources behind one small interface:
- SeededSource: deterministic xorshift64* generator, same seed -> same code
- SystemSource: OS entropy via `secrets`, used when no seed is given

make_source() picks one at construction time so callers never branch on seeds.
"""

from abc import ABC, abstractmethod
from secrets import randbelow
from typing import List, Optional

from .types import Code, DigitRange

_MASK64 = (1 << 64) - 1


class SecretSource(ABC):
    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Uniform integer in [0, n)."""


class SystemSource(SecretSource):
    def randbelow(self, n: int) -> int:
        return randbelow(n)


class SeededSource(SecretSource):
    """
    xorshift64* bit mixer.
    Bounded draws use multiply-shift and reject the short low band,
    so every value in [0, n) is equally likely.
    """

    MULTIPLIER = 2685821657736338717

    def __init__(self, seed: int):
        seed &= _MASK64
        self._state = seed if seed != 0 else 0xDEADBEEF

    def next64(self) -> int:
        x = self._state
        x ^= x >> 12
        x ^= (x << 25) & _MASK64
        x ^= x >> 27
        self._state = x
        return (x * self.MULTIPLIER) & _MASK64

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be positive")
        product = self.next64() * n
        low = product & _MASK64
        if low < n:
            threshold = (-n) % (1 << 64) % n
            while low < threshold:
                product = self.next64() * n
                low = product & _MASK64
        return product >> 64


def make_source(seed: Optional[int] = None) -> SecretSource:
    if seed is None:
        return SystemSource()
    return SeededSource(seed)


def generate(
    length: int,
    digit_range: DigitRange,
    seed: Optional[int] = None,
    distinct: bool = False,
) -> Code:
    """
    Draw `length` digits uniformly from the inclusive `digit_range`.
    With distinct=True digits are drawn without replacement.
    """
    low, high = digit_range
    if high < low:
        raise ValueError(f"Empty digit range {low}..{high}.")
    source = make_source(seed)

    if not distinct:
        return [low + source.randbelow(high - low + 1) for _ in range(length)]

    pool: List[int] = list(range(low, high + 1))
    if length > len(pool):
        raise ValueError(f"Cannot draw {length} distinct digits from {low}..{high}.")
    digits = []
    for _ in range(length):
        digits.append(pool.pop(source.randbelow(len(pool))))
    return digits
