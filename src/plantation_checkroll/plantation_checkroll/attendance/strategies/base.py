from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import DayType
from ...core.exceptions import ConfigurationError
from ..sampling import Sampler


class AmountStrategy(ABC):
    """Strategy Pattern: encapsulate how much output a job type collects in a day."""

    @abstractmethod
    def sample_amount(self, *, sampler: Sampler, day_type: DayType) -> int:
        raise NotImplementedError


def check_range(amount_range: tuple[int, int]) -> tuple[int, int]:
    low, high = amount_range
    if low < 0 or high < low:
        raise ConfigurationError(f"Invalid amount range: {amount_range!r}")
    return int(low), int(high)
