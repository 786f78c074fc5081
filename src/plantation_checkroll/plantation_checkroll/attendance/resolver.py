from __future__ import annotations

from typing import Optional

from ..classification.tables import ClassificationTables
from ..core.enums import DayType, JobType
from .sampling import Sampler


class ConstraintResolver:
    """Picks the legal day type and holiday flag for a job type.

    Norm-based work runs on full or half days; every other job type is
    non-quota work. Only norm-based work can fall on a holiday.
    """

    def __init__(self, tables: ClassificationTables, sampler: Sampler):
        self._tables = tables
        self._sampler = sampler

    def resolve_day_type(self, job_type_id) -> DayType:
        options = legal_day_types(self._tables.require_job_type(job_type_id))
        if len(options) == 1:
            return options[0]
        return self._sampler.choice(options)

    def resolve_is_holiday(self, job_type_id, day_type, requested: Optional[bool] = None) -> bool:
        job_type = self._tables.require_job_type(job_type_id)
        if not job_type.allows_holiday:
            return False
        if job_type.is_fixed_credit and DayType.parse(day_type) is DayType.NON_QUOTA:
            return False
        if requested is not None:
            return bool(requested)
        return self._sampler.chance(self._tables.holiday_probability)


def legal_day_types(job_type: JobType) -> tuple[DayType, ...]:
    if job_type.requires_non_quota_day:
        return (DayType.NON_QUOTA,)
    return (DayType.FULL_DAY, DayType.HALF_DAY)
