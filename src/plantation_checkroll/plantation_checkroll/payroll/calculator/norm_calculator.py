from __future__ import annotations

from typing import Iterable, Optional

from ...common.validators import require_quantity
from ...core.constants import FIXED_CREDIT, FULL_DAY_CREDIT, HALF_DAY_CREDIT, HOLIDAY_MULTIPLIER, NO_CREDIT
from ...core.enums import DayType, JobType
from ...core.exceptions import InvalidJobType, UnsupportedDayType
from .base import PayrollCalculator


class NormPayrollCalculator(PayrollCalculator):
    """Norm (daily quota) rule for plucking estates.

    - Plucking work earns over kilo above the norm and a full day (half day)
      credit once the norm (half norm) is reached; holidays pay 1.5x.
    - Sundry and tapping ignore the norm: no over kilo, one day credit.
    - Other work earns over kilo but always exactly one day credit.

    Over kilo uses a strict ``>``, day credit thresholds an inclusive ``>=``.
    """

    def __init__(self, job_type_ids: Optional[Iterable[int]] = None):
        self._allowed = frozenset(int(x) for x in job_type_ids) if job_type_ids is not None else None

    def _job_type(self, job_type_id) -> JobType:
        job_type = JobType.parse(job_type_id)
        if self._allowed is not None and int(job_type) not in self._allowed:
            raise InvalidJobType(job_type_id, f"Job type {job_type_id!r} is not configured for this estate")
        return job_type

    def over_kilo(self, amount: float, norm_value: float, job_type_id) -> float:
        require_quantity(amount, "amount")
        require_quantity(norm_value, "norm_value")
        job_type = self._job_type(job_type_id)

        if not job_type.earns_over_kilo:
            return 0
        if amount > norm_value:
            return amount - norm_value
        return 0

    def man_days(self, amount: float, norm_value: float, job_type_id, day_type, is_holiday: bool) -> float:
        require_quantity(amount, "amount")
        require_quantity(norm_value, "norm_value")
        job_type = self._job_type(job_type_id)
        try:
            day = DayType.parse(day_type)
        except UnsupportedDayType:
            raise UnsupportedDayType(job_type_id, day_type) from None

        if job_type.is_norm_based:
            if day is DayType.FULL_DAY:
                if amount >= norm_value:
                    return FULL_DAY_CREDIT * HOLIDAY_MULTIPLIER if is_holiday else FULL_DAY_CREDIT
                return NO_CREDIT
            if day is DayType.HALF_DAY:
                if amount >= norm_value / 2:
                    return HALF_DAY_CREDIT * HOLIDAY_MULTIPLIER if is_holiday else HALF_DAY_CREDIT
                return NO_CREDIT
            raise UnsupportedDayType(job_type_id, day_type)

        if day is not DayType.NON_QUOTA:
            raise UnsupportedDayType(job_type_id, day_type)
        return FIXED_CREDIT
