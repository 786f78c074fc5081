from __future__ import annotations

from ...core.constants import FIXED_CREDIT_AMOUNT_RANGE
from ...core.enums import DayType
from ..sampling import Sampler
from .base import AmountStrategy, check_range


class FixedCreditAmountStrategy(AmountStrategy):
    """Sundry and tapping: a small amount with no relation to the norm."""

    def __init__(self, amount_range=FIXED_CREDIT_AMOUNT_RANGE):
        self.amount_range = check_range(amount_range)

    def sample_amount(self, *, sampler: Sampler, day_type: DayType) -> int:
        return sampler.randint(*self.amount_range)
