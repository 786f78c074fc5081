from __future__ import annotations

from abc import ABC, abstractmethod


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for checkroll payroll)."""

    @abstractmethod
    def over_kilo(self, amount: float, norm_value: float, job_type_id) -> float:
        raise NotImplementedError

    @abstractmethod
    def man_days(self, amount: float, norm_value: float, job_type_id, day_type, is_holiday: bool) -> float:
        raise NotImplementedError
