from __future__ import annotations

from ...core.constants import FULL_DAY_AMOUNT_RANGE, HALF_DAY_AMOUNT_RANGE
from ...core.enums import DayType
from ...core.exceptions import UnsupportedDayType
from ..sampling import Sampler
from .base import AmountStrategy, check_range


class NormWorkAmountStrategy(AmountStrategy):
    """Plucking work: full days mostly reach the norm, half days the half norm."""

    def __init__(self, full_day_range=FULL_DAY_AMOUNT_RANGE, half_day_range=HALF_DAY_AMOUNT_RANGE):
        self.full_day_range = check_range(full_day_range)
        self.half_day_range = check_range(half_day_range)

    def sample_amount(self, *, sampler: Sampler, day_type: DayType) -> int:
        if day_type is DayType.FULL_DAY:
            return sampler.randint(*self.full_day_range)
        if day_type is DayType.HALF_DAY:
            return sampler.randint(*self.half_day_range)
        raise UnsupportedDayType(None, int(day_type), "Norm based work cannot be non-quota")
