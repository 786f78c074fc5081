from __future__ import annotations

import pytest

from src.plantation_checkroll.plantation_checkroll.attendance.resolver import ConstraintResolver
from src.plantation_checkroll.plantation_checkroll.attendance.sampling import Sampler
from src.plantation_checkroll.plantation_checkroll.core.enums import DayType
from src.plantation_checkroll.plantation_checkroll.core.exceptions import InvalidJobType


class ScriptedSampler(Sampler):
    """Always picks the last option and answers ``chance`` with a fixed flag."""

    def __init__(self, *, holiday: bool = True):
        self.holiday = holiday
        self.chance_calls: list[float] = []

    def randint(self, low, high):
        return high

    def choice(self, items):
        return list(items)[-1]

    def weighted_choice(self, weights):
        return list(weights)[-1]

    def chance(self, probability):
        self.chance_calls.append(probability)
        return self.holiday


@pytest.mark.parametrize("job_type", [5, 7, 8])
def test_non_quota_jobs_get_non_quota_day(tables, job_type):
    resolver = ConstraintResolver(tables, ScriptedSampler())
    assert resolver.resolve_day_type(job_type) is DayType.NON_QUOTA


@pytest.mark.parametrize("job_type", [3, 6])
def test_quota_jobs_get_full_or_half_day(tables, sampler, job_type):
    resolver = ConstraintResolver(tables, sampler)
    seen = {resolver.resolve_day_type(job_type) for _ in range(50)}
    assert seen == {DayType.FULL_DAY, DayType.HALF_DAY}


def test_unknown_job_type_fails(tables):
    resolver = ConstraintResolver(tables, ScriptedSampler())
    with pytest.raises(InvalidJobType):
        resolver.resolve_day_type(4)
    with pytest.raises(InvalidJobType):
        resolver.resolve_is_holiday(4, DayType.FULL_DAY)


def test_other_work_is_never_a_holiday(tables):
    sampler = ScriptedSampler(holiday=True)
    resolver = ConstraintResolver(tables, sampler)
    assert resolver.resolve_is_holiday(8, DayType.NON_QUOTA) is False
    assert resolver.resolve_is_holiday(8, DayType.NON_QUOTA, requested=True) is False
    assert sampler.chance_calls == []


@pytest.mark.parametrize("job_type", [5, 7])
def test_fixed_credit_non_quota_day_is_never_a_holiday(tables, job_type):
    resolver = ConstraintResolver(tables, ScriptedSampler(holiday=True))
    assert resolver.resolve_is_holiday(job_type, DayType.NON_QUOTA) is False


def test_quota_job_holiday_uses_configured_probability(tables):
    sampler = ScriptedSampler(holiday=True)
    resolver = ConstraintResolver(tables, sampler)
    assert resolver.resolve_is_holiday(3, DayType.FULL_DAY) is True
    assert sampler.chance_calls == [0.2]


def test_quota_job_holiday_honours_requested_value(tables):
    sampler = ScriptedSampler(holiday=True)
    resolver = ConstraintResolver(tables, sampler)
    assert resolver.resolve_is_holiday(6, DayType.HALF_DAY, requested=False) is False
    assert sampler.chance_calls == []
