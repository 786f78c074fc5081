from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence, TypeVar

T = TypeVar("T")


class Sampler(ABC):
    """Randomness source injected into the resolver and synthesizer."""

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Integer in ``[low, high]`` (both inclusive)."""
        raise NotImplementedError

    @abstractmethod
    def choice(self, items: Sequence[T]) -> T:
        raise NotImplementedError

    @abstractmethod
    def weighted_choice(self, weights: Mapping[T, float]) -> T:
        raise NotImplementedError

    @abstractmethod
    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        raise NotImplementedError


class RandomSampler(Sampler):
    """``random.Random`` backed sampler; pass a seed for reproducible batches."""

    def __init__(self, seed: Optional[int] = None, *, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def choice(self, items: Sequence[T]) -> T:
        return self._rng.choice(list(items))

    def weighted_choice(self, weights: Mapping[T, float]) -> T:
        keys = list(weights.keys())
        return self._rng.choices(keys, weights=[weights[k] for k in keys], k=1)[0]

    def chance(self, probability: float) -> bool:
        return self._rng.random() < probability

    def spawn(self, n: int) -> list["RandomSampler"]:
        """Independent child samplers, one per worker, seeded from this one."""
        return [RandomSampler(self._rng.getrandbits(64)) for _ in range(n)]
