import pytest

from src.plantation_checkroll.plantation_checkroll.attendance.factory import AmountStrategyFactory
from src.plantation_checkroll.plantation_checkroll.attendance.sampling import RandomSampler
from src.plantation_checkroll.plantation_checkroll.attendance.strategies.fixed_credit_strategy import FixedCreditAmountStrategy
from src.plantation_checkroll.plantation_checkroll.attendance.strategies.norm_strategy import NormWorkAmountStrategy
from src.plantation_checkroll.plantation_checkroll.attendance.strategies.other_work_strategy import OtherWorkAmountStrategy
from src.plantation_checkroll.plantation_checkroll.core.enums import DayType, JobType
from src.plantation_checkroll.plantation_checkroll.core.exceptions import ConfigurationError, UnsupportedDayType


def test_factory_picks_norm_strategy_for_plucking():
    factory = AmountStrategyFactory()
    assert isinstance(factory.for_job_type(JobType.PLUCKING), NormWorkAmountStrategy)
    assert isinstance(factory.for_job_type(JobType.OTHER_PLUCKING), NormWorkAmountStrategy)


def test_factory_picks_flat_strategies_for_other_jobs():
    factory = AmountStrategyFactory()
    assert isinstance(factory.for_job_type(JobType.SUNDRY), FixedCreditAmountStrategy)
    assert isinstance(factory.for_job_type(JobType.TAPPING), FixedCreditAmountStrategy)
    assert isinstance(factory.for_job_type(JobType.OTHER), OtherWorkAmountStrategy)


def test_norm_strategy_ranges_follow_day_type():
    strategy = NormWorkAmountStrategy(full_day_range=(18, 28), half_day_range=(10, 15))
    sampler = RandomSampler(1)
    full = [strategy.sample_amount(sampler=sampler, day_type=DayType.FULL_DAY) for _ in range(200)]
    half = [strategy.sample_amount(sampler=sampler, day_type=DayType.HALF_DAY) for _ in range(200)]
    assert min(full) >= 18 and max(full) <= 28
    assert min(half) >= 10 and max(half) <= 15


def test_norm_strategy_has_no_non_quota_amount():
    with pytest.raises(UnsupportedDayType):
        NormWorkAmountStrategy().sample_amount(sampler=RandomSampler(1), day_type=DayType.NON_QUOTA)


def test_custom_range_is_used():
    strategy = OtherWorkAmountStrategy(amount_range=(7, 7))
    assert strategy.sample_amount(sampler=RandomSampler(1), day_type=DayType.NON_QUOTA) == 7


def test_inverted_range_is_rejected():
    with pytest.raises(ConfigurationError):
        FixedCreditAmountStrategy(amount_range=(5, 0))
