"""Pure rule functions over the default norm calculator."""
from __future__ import annotations

from .calculator.norm_calculator import NormPayrollCalculator

_DEFAULT = NormPayrollCalculator()


def compute_over_kilo(amount: float, norm_value: float, job_type_id) -> float:
    return _DEFAULT.over_kilo(amount, norm_value, job_type_id)


def compute_man_days(amount: float, norm_value: float, job_type_id, day_type, is_holiday: bool) -> float:
    return _DEFAULT.man_days(amount, norm_value, job_type_id, day_type, is_holiday)
