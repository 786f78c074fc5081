from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..classification.tables import ClassificationTables
from ..common import datetime_utils
from ..common.validators import require_count, require_quantity
from ..core.constants import (
    EMPLOYEE_ID_RANGE,
    EMPLOYEE_NUMBER_RANGE,
    ERROR_MESSAGE_PLACEHOLDER,
    REALISTIC_EMPLOYEE_ID_START,
    REALISTIC_EMPLOYEE_NUMBER_START,
)
from ..core.enums import DayType
from ..core.exceptions import DomainError, InvalidArgument, RecordGenerationError, UnsupportedDayType
from ..payroll.calculator.base import PayrollCalculator
from .factory import AmountStrategyFactory
from .model import AttendanceRecord, JSON_FIELD_NAMES, PYTHON_FIELD_NAMES
from .resolver import ConstraintResolver, legal_day_types
from .sampling import Sampler
from .scenarios import STANDARD_SCENARIOS

logger = logging.getLogger(__name__)

DERIVED_FIELDS = frozenset({"over_kilo", "man_days"})
OVERTIME_FIELDS = frozenset({"day_ot", "night_ot"})


class RecordSynthesizer:
    """Builds synthetic checkroll rows that satisfy every business rule.

    Day type and holiday come from the constraint resolver, over kilo and
    man days from the payroll calculator; they are never filled in here.
    """

    def __init__(
        self,
        tables: ClassificationTables,
        resolver: ConstraintResolver,
        calculator: PayrollCalculator,
        sampler: Sampler,
        *,
        strategy_factory: AmountStrategyFactory | None = None,
    ):
        self._tables = tables
        self._resolver = resolver
        self._calculator = calculator
        self._sampler = sampler
        self._factory = strategy_factory or AmountStrategyFactory()

    def generate_record(self, overrides: Optional[Mapping[str, Any]] = None) -> AttendanceRecord:
        context: dict[str, Any] = {}
        try:
            return self._generate(self._normalize_overrides(overrides), context)
        except DomainError as exc:
            logger.warning("Attendance record generation failed: %s", exc, extra=context)
            raise

    def generate_batch(self, count: int, overrides: Optional[Mapping[str, Any]] = None) -> list[AttendanceRecord]:
        """``count`` independent records; fails as a whole if any record fails."""
        require_count(count)
        normalized = self._normalize_overrides(overrides)
        records = [self._generate_at(index, normalized) for index in range(count)]
        logger.debug("Generated %d attendance records", len(records), extra={"record_count": len(records)})
        return records

    def generate_realistic_batch(self, employee_count: int, collected_date: str | None = None) -> list[AttendanceRecord]:
        """One record per employee with job types drawn from the estate's distribution."""
        require_count(employee_count, "employee_count")
        collected_date = collected_date or datetime_utils.now_iso()

        records = []
        for index in range(employee_count):
            employee_number = str(REALISTIC_EMPLOYEE_NUMBER_START + index)
            overrides = {
                "employee_number": employee_number,
                "registration_number": employee_number,
                "employee_id": REALISTIC_EMPLOYEE_ID_START + index,
                "employee_name": f"Employee_{employee_number}",
                "collected_date": collected_date,
                "job_type_id": self._sampler.weighted_choice(self._tables.job_type_weights),
            }
            records.append(self._generate_at(index, overrides))

        logger.debug("Generated %d realistic attendance records", len(records), extra={"record_count": len(records)})
        return records

    def generate_test_scenarios(self) -> list[AttendanceRecord]:
        return [self.generate_record(s.overrides()) for s in STANDARD_SCENARIOS]

    def _generate_at(self, index: int, overrides: dict[str, Any]) -> AttendanceRecord:
        context: dict[str, Any] = {}
        try:
            return self._generate(overrides, context)
        except DomainError as exc:
            logger.warning("Batch aborted at record #%d: %s", index, exc, extra=context)
            raise RecordGenerationError(
                index=index,
                job_type_id=context.get("job_type_id"),
                day_type=context.get("day_type"),
                amount=context.get("amount"),
                reason=str(exc),
            ) from exc

    def _normalize_overrides(self, overrides: Optional[Mapping[str, Any]]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, value in (overrides or {}).items():
            name = PYTHON_FIELD_NAMES.get(key, key)
            if name not in JSON_FIELD_NAMES:
                raise InvalidArgument(f"Unknown attendance field: {key!r}")
            if name in DERIVED_FIELDS:
                raise InvalidArgument(f"{JSON_FIELD_NAMES[name]} is derived and cannot be overridden")
            if name in OVERTIME_FIELDS and value != 0:
                raise InvalidArgument(f"{JSON_FIELD_NAMES[name]} must be 0, overtime is not paid")
            out[name] = value
        return out

    def _generate(self, o: dict[str, Any], context: dict[str, Any]) -> AttendanceRecord:
        tables = self._tables
        sampler = self._sampler

        job_type_id = o["job_type_id"] if "job_type_id" in o else sampler.choice(tables.job_type_ids)
        context["job_type_id"] = job_type_id
        job_type = tables.require_job_type(job_type_id)

        if "day_type" in o:
            context["day_type"] = o["day_type"]
            try:
                day_type = DayType.parse(o["day_type"])
            except UnsupportedDayType:
                raise UnsupportedDayType(job_type_id, o["day_type"]) from None
            if day_type not in legal_day_types(job_type):
                raise UnsupportedDayType(job_type_id, int(day_type))
        else:
            day_type = self._resolver.resolve_day_type(job_type)
        context["day_type"] = int(day_type)

        requested_holiday = o.get("is_holiday")
        is_holiday = self._resolver.resolve_is_holiday(job_type, day_type, requested=requested_holiday)
        if requested_holiday is not None and bool(requested_holiday) != is_holiday:
            raise InvalidArgument(f"Job type {int(job_type)} on day type {int(day_type)} cannot be a holiday")

        if "amount" in o:
            amount = o["amount"]
        else:
            amount = self._factory.for_job_type(job_type).sample_amount(sampler=sampler, day_type=day_type)
        context["amount"] = amount
        require_quantity(amount, "amount")

        norm_value = o.get("norm_value", tables.norm_value)
        over_kilo = self._calculator.over_kilo(amount, norm_value, job_type)
        man_days = self._calculator.man_days(amount, norm_value, job_type, day_type, is_holiday)

        employee_number = str(o["employee_number"]) if "employee_number" in o else str(sampler.randint(*EMPLOYEE_NUMBER_RANGE))
        division_id = o["division_id"] if "division_id" in o else sampler.choice(tables.division_ids)

        values: dict[str, Any] = {
            "employee_attendance_id": 0,
            "group_id": tables.group_id,
            "amount": amount,
            "collected_date": datetime_utils.now_iso(),
            "division_id": division_id,
            "employee_number": employee_number,
            "employee_type_id": tables.employee_type_id,
            "estate_id": tables.estate_id,
            "field_id": sampler.choice(tables.field_ids),
            "gang_id": 0,
            "job_type_id": int(job_type),
            "session_id": 0,
            "work_type_id": 0,
            "day_type": int(day_type),
            "day_ot": 0,
            "night_ot": 0,
            "noam": tables.noam,
            "created_by": 1,
            "is_active": True,
            "is_holiday": is_holiday,
            "muster_chit_id": 1,
            "main_division_id": division_id,
            "operator_id": 0,
            "employee_id": sampler.randint(*EMPLOYEE_ID_RANGE),
            "registration_number": employee_number,
            "employee_name": f"Employee_{employee_number}",
            "gender_id": sampler.choice(tables.gender_ids),
            "norm_value": norm_value,
            "min_norm_value": tables.min_norm_value,
            "error_message": ERROR_MESSAGE_PLACEHOLDER,
        }
        values.update({k: v for k, v in o.items() if k not in ("job_type_id", "day_type", "is_holiday")})
        values["over_kilo"] = over_kilo
        values["man_days"] = man_days
        return AttendanceRecord(**values)
