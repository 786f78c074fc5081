from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import JobCategory, JobType
from .strategies.base import AmountStrategy
from .strategies.fixed_credit_strategy import FixedCreditAmountStrategy
from .strategies.norm_strategy import NormWorkAmountStrategy
from .strategies.other_work_strategy import OtherWorkAmountStrategy


@dataclass
class AmountStrategyFactory:
    """Factory Pattern: choose the amount strategy for a job type."""

    norm_work: AmountStrategy = field(default_factory=NormWorkAmountStrategy)
    fixed_credit: AmountStrategy = field(default_factory=FixedCreditAmountStrategy)
    other_work: AmountStrategy = field(default_factory=OtherWorkAmountStrategy)

    def for_job_type(self, job_type: JobType) -> AmountStrategy:
        category = job_type.category
        if category is JobCategory.NORM_BASED:
            return self.norm_work
        if category is JobCategory.FIXED_CREDIT:
            return self.fixed_credit
        return self.other_work
