from __future__ import annotations

from enum import Enum, IntEnum

from .exceptions import InvalidJobType, UnsupportedDayType


def _is_integral(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer()
    # Identifiers are numbers on the wire; "3" is not job type 3.
    return isinstance(value, int)


class DayType(IntEnum):
    """Shift classification of an attendance row."""

    FULL_DAY = 1
    HALF_DAY = 2
    NON_QUOTA = 3

    @classmethod
    def parse(cls, value) -> "DayType":
        if not _is_integral(value):
            raise UnsupportedDayType(None, value, f"Unknown day type: {value!r}")
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise UnsupportedDayType(None, value, f"Unknown day type: {value!r}") from None


class JobType(IntEnum):
    """Work category. Every member must be listed in exactly one ``_CATEGORIES`` entry."""

    PLUCKING = 3
    SUNDRY = 5
    OTHER_PLUCKING = 6
    TAPPING = 7
    OTHER = 8

    @classmethod
    def parse(cls, value) -> "JobType":
        if not _is_integral(value):
            raise InvalidJobType(value)
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise InvalidJobType(value) from None

    @property
    def category(self) -> "JobCategory":
        for category, members in _CATEGORIES.items():
            if self in members:
                return category
        raise InvalidJobType(int(self), f"Job type {int(self)} has no category")

    @property
    def is_norm_based(self) -> bool:
        return self.category is JobCategory.NORM_BASED

    @property
    def is_fixed_credit(self) -> bool:
        return self.category is JobCategory.FIXED_CREDIT

    @property
    def is_other_work(self) -> bool:
        return self.category is JobCategory.OTHER_WORK

    @property
    def earns_over_kilo(self) -> bool:
        return not self.is_fixed_credit

    @property
    def allows_holiday(self) -> bool:
        return not self.is_other_work

    @property
    def requires_non_quota_day(self) -> bool:
        return not self.is_norm_based


class JobCategory(str, Enum):
    """How a job type is paid."""

    NORM_BASED = "NORM_BASED"
    FIXED_CREDIT = "FIXED_CREDIT"
    OTHER_WORK = "OTHER_WORK"


_CATEGORIES: dict[JobCategory, frozenset[JobType]] = {
    JobCategory.NORM_BASED: frozenset({JobType.PLUCKING, JobType.OTHER_PLUCKING}),
    JobCategory.FIXED_CREDIT: frozenset({JobType.SUNDRY, JobType.TAPPING}),
    JobCategory.OTHER_WORK: frozenset({JobType.OTHER}),
}


class ViolationCode(str, Enum):
    """Business rule violations reported by the validator."""

    OVER_KILO_EXEMPT = "OVER_KILO_EXEMPT"
    OVER_KILO_MISMATCH = "OVER_KILO_MISMATCH"
    MAN_DAYS_FULL_DAY = "MAN_DAYS_FULL_DAY"
    MAN_DAYS_HALF_DAY = "MAN_DAYS_HALF_DAY"
    MAN_DAYS_BELOW_NORM = "MAN_DAYS_BELOW_NORM"
    MAN_DAYS_FIXED_CREDIT = "MAN_DAYS_FIXED_CREDIT"
    OTHER_WORK_RESTRICTION = "OTHER_WORK_RESTRICTION"
    QUOTA_DAY_TYPE = "QUOTA_DAY_TYPE"
    NON_QUOTA_DAY_TYPE = "NON_QUOTA_DAY_TYPE"
    OVERTIME_NOT_ALLOWED = "OVERTIME_NOT_ALLOWED"
    UNKNOWN_JOB_TYPE = "UNKNOWN_JOB_TYPE"
    UNKNOWN_DAY_TYPE = "UNKNOWN_DAY_TYPE"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    MALFORMED_RECORD = "MALFORMED_RECORD"
