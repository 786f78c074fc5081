from __future__ import annotations

from ...core.constants import OTHER_WORK_AMOUNT_RANGE
from ...core.enums import DayType
from ..sampling import Sampler
from .base import AmountStrategy, check_range


class OtherWorkAmountStrategy(AmountStrategy):
    """Other (non-holiday) work."""

    def __init__(self, amount_range=OTHER_WORK_AMOUNT_RANGE):
        self.amount_range = check_range(amount_range)

    def sample_amount(self, *, sampler: Sampler, day_type: DayType) -> int:
        return sampler.randint(*self.amount_range)
