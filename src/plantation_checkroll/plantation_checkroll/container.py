from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.factory import AmountStrategyFactory
from .attendance.resolver import ConstraintResolver
from .attendance.sampling import RandomSampler, Sampler
from .attendance.service import RecordSynthesizer
from .classification.tables import ClassificationTables
from .payroll.calculator.norm_calculator import NormPayrollCalculator
from .payroll.service import CheckrollSummaryService
from .validation.service import BusinessRuleValidator


@dataclass(frozen=True)
class Container:
    tables: ClassificationTables
    sampler: Sampler

    resolver: ConstraintResolver
    calculator: NormPayrollCalculator

    synthesizer: RecordSynthesizer
    validator: BusinessRuleValidator
    summary_service: CheckrollSummaryService


def build_container(
    *,
    master_data: Mapping[str, Any],
    seed: Optional[int] = None,
    sampler: Optional[Sampler] = None,
    strategy_factory: Optional[AmountStrategyFactory] = None,
) -> Container:
    tables = ClassificationTables.from_mapping(master_data)
    sampler = sampler or RandomSampler(seed)

    resolver = ConstraintResolver(tables, sampler)
    calculator = NormPayrollCalculator(tables.job_type_ids)

    synthesizer = RecordSynthesizer(
        tables,
        resolver,
        calculator,
        sampler,
        strategy_factory=strategy_factory or AmountStrategyFactory(),
    )
    validator = BusinessRuleValidator(tables, calculator)
    summary_service = CheckrollSummaryService()

    return Container(
        tables=tables,
        sampler=sampler,
        resolver=resolver,
        calculator=calculator,
        synthesizer=synthesizer,
        validator=validator,
        summary_service=summary_service,
    )
