from __future__ import annotations

import pytest

from src.plantation_checkroll.plantation_checkroll.attendance.resolver import ConstraintResolver
from src.plantation_checkroll.plantation_checkroll.attendance.sampling import RandomSampler
from src.plantation_checkroll.plantation_checkroll.attendance.service import RecordSynthesizer
from src.plantation_checkroll.plantation_checkroll.classification.tables import ClassificationTables
from src.plantation_checkroll.plantation_checkroll.payroll.calculator.norm_calculator import NormPayrollCalculator
from src.plantation_checkroll.plantation_checkroll.validation.service import BusinessRuleValidator


@pytest.fixture
def master_data() -> dict:
    return {
        "groupID": 1112,
        "estateID": 4224,
        "normValue": 20,
        "minNormValue": 18,
        "noam": 20,
        "divisionIDs": [13, 17],
        "fieldIDs": [156, 157, 158, 159, 160, 161, 162, 163, 164, 165],
        "jobTypeIDs": [3, 5, 6, 7, 8],
        "employeeTypeID": 3,
        "genderIDs": [1, 2],
    }


@pytest.fixture
def tables(master_data) -> ClassificationTables:
    return ClassificationTables.from_mapping(master_data)


@pytest.fixture
def sampler() -> RandomSampler:
    return RandomSampler(42)


@pytest.fixture
def calculator(tables) -> NormPayrollCalculator:
    return NormPayrollCalculator(tables.job_type_ids)


@pytest.fixture
def resolver(tables, sampler) -> ConstraintResolver:
    return ConstraintResolver(tables, sampler)


@pytest.fixture
def synthesizer(tables, resolver, calculator, sampler) -> RecordSynthesizer:
    return RecordSynthesizer(tables, resolver, calculator, sampler)


@pytest.fixture
def validator(tables, calculator) -> BusinessRuleValidator:
    return BusinessRuleValidator(tables, calculator)
