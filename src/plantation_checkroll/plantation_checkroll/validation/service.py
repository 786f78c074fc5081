from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping, Optional, Union

from ..attendance.model import AttendanceRecord
from ..attendance.resolver import legal_day_types
from ..classification.tables import ClassificationTables
from ..core.enums import DayType, JobType, ViolationCode
from ..core.exceptions import DomainError, InvalidJobType, UnsupportedDayType, ValidationError
from ..payroll.calculator.base import PayrollCalculator
from .model import BatchFailure, BatchValidationReport, ValidationReport, ViolationReport

logger = logging.getLogger(__name__)

RecordLike = Union[AttendanceRecord, Mapping[str, Any]]


def _is_number(value) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, float)) and math.isfinite(value)


def _same(actual, expected) -> bool:
    return _is_number(actual) and math.isclose(actual, expected, rel_tol=0.0, abs_tol=1e-9)


class BusinessRuleValidator:
    """Re-derives over kilo / man days for any row and lists every broken rule.

    Works on rows of any origin (synthesized or uploaded fixtures) and never
    raises for row content: problems are returned as ``ViolationReport`` data.
    """

    def __init__(self, tables: ClassificationTables, calculator: PayrollCalculator):
        self._tables = tables
        self._calculator = calculator

    def validate(self, record: RecordLike) -> ValidationReport:
        if isinstance(record, Mapping):
            try:
                record = AttendanceRecord.from_dict(record)
            except (ValidationError, TypeError) as exc:
                return ValidationReport((ViolationReport(ViolationCode.MALFORMED_RECORD, str(exc)),))
        elif not isinstance(record, AttendanceRecord):
            return ValidationReport(
                (ViolationReport(ViolationCode.MALFORMED_RECORD, f"Not an attendance record: {type(record).__name__}"),)
            )

        violations: list[ViolationReport] = []

        job_type: Optional[JobType] = None
        try:
            job_type = self._tables.require_job_type(record.job_type_id)
        except InvalidJobType as exc:
            violations.append(ViolationReport(ViolationCode.UNKNOWN_JOB_TYPE, str(exc), actual=record.job_type_id))

        day_type: Optional[DayType] = None
        try:
            day_type = DayType.parse(record.day_type)
        except UnsupportedDayType:
            violations.append(
                ViolationReport(ViolationCode.UNKNOWN_DAY_TYPE, f"Unknown day type {record.day_type!r}", actual=record.day_type)
            )

        inputs_ok = True
        if not _is_number(record.amount) or record.amount < 0:
            inputs_ok = False
            violations.append(
                ViolationReport(
                    ViolationCode.NEGATIVE_AMOUNT,
                    f"Amount must be a non-negative number, got {record.amount!r}",
                    actual=record.amount,
                )
            )
        if not _is_number(record.norm_value) or record.norm_value < 0:
            inputs_ok = False
            violations.append(
                ViolationReport(
                    ViolationCode.MALFORMED_RECORD,
                    f"NormValue must be a non-negative number, got {record.norm_value!r}",
                    actual=record.norm_value,
                )
            )

        if job_type is not None:
            if inputs_ok:
                violations.extend(self._check_derived(record, job_type, day_type))
            violations.extend(self._check_fields(record, job_type, day_type))

        if record.day_ot != 0 or record.night_ot != 0:
            violations.append(
                ViolationReport(
                    ViolationCode.OVERTIME_NOT_ALLOWED,
                    f"No OT allowed (dayOT={record.day_ot}, nightOT={record.night_ot})",
                    expected=0,
                    actual={"dayOT": record.day_ot, "nightOT": record.night_ot},
                )
            )

        report = ValidationReport(tuple(violations))
        if not report.compliant:
            logger.debug(
                "Record %s violates %s", record.employee_name, ", ".join(c.value for c in report.codes)
            )
        return report

    def validate_batch(self, records: Iterable[RecordLike]) -> BatchValidationReport:
        total = 0
        failures = []
        for index, record in enumerate(records):
            total += 1
            report = self.validate(record)
            if not report.compliant:
                name = record.get("employeeName") if isinstance(record, Mapping) else getattr(record, "employee_name", None)
                failures.append(BatchFailure(index=index, employee_name=name, report=report))
        return BatchValidationReport(total=total, failures=tuple(failures))

    def _check_derived(self, record: AttendanceRecord, job_type: JobType, day_type: Optional[DayType]) -> list[ViolationReport]:
        violations: list[ViolationReport] = []
        amount, norm = record.amount, record.norm_value

        if not job_type.earns_over_kilo:
            if not _same(record.over_kilo, 0):
                violations.append(
                    ViolationReport(
                        ViolationCode.OVER_KILO_EXEMPT,
                        f"JobType {int(job_type)} should have OverKilo=0, got {record.over_kilo}",
                        expected=0,
                        actual=record.over_kilo,
                    )
                )
        else:
            expected = self._calculator.over_kilo(amount, norm, job_type)
            if not _same(record.over_kilo, expected):
                violations.append(
                    ViolationReport(
                        ViolationCode.OVER_KILO_MISMATCH,
                        f"Expected OverKilo={expected}, got {record.over_kilo}",
                        expected=expected,
                        actual=record.over_kilo,
                    )
                )

        # Norm based day credit is only defined on full and half days.
        if job_type.is_norm_based and day_type is not None and day_type in legal_day_types(job_type):
            try:
                expected = self._calculator.man_days(amount, norm, job_type, day_type, bool(record.is_holiday))
            except DomainError as exc:
                violations.append(ViolationReport(ViolationCode.MALFORMED_RECORD, str(exc)))
                return violations
            if not _same(record.man_days, expected):
                if expected == 0:
                    code = ViolationCode.MAN_DAYS_BELOW_NORM
                elif day_type is DayType.FULL_DAY:
                    code = ViolationCode.MAN_DAYS_FULL_DAY
                else:
                    code = ViolationCode.MAN_DAYS_HALF_DAY
                violations.append(
                    ViolationReport(code, f"Expected ManDays={expected}, got {record.man_days}", expected=expected, actual=record.man_days)
                )

        if job_type.is_fixed_credit and not _same(record.man_days, 1):
            violations.append(
                ViolationReport(
                    ViolationCode.MAN_DAYS_FIXED_CREDIT,
                    f"JobType {int(job_type)} always earns ManDays=1, got {record.man_days}",
                    expected=1,
                    actual=record.man_days,
                )
            )
        return violations

    def _check_fields(self, record: AttendanceRecord, job_type: JobType, day_type: Optional[DayType]) -> list[ViolationReport]:
        violations: list[ViolationReport] = []

        if job_type.is_other_work:
            problems = []
            if record.is_holiday:
                problems.append("cannot be IsHoliday=true")
            if not _same(record.man_days, 1):
                problems.append(f"must have ManDays=1, got {record.man_days}")
            if problems:
                violations.append(
                    ViolationReport(
                        ViolationCode.OTHER_WORK_RESTRICTION,
                        f"JobType {int(job_type)} " + " and ".join(problems),
                        expected={"isHoliday": False, "manDays": 1},
                        actual={"isHoliday": record.is_holiday, "manDays": record.man_days},
                    )
                )

        if day_type is None:
            return violations

        if job_type.is_norm_based and day_type is DayType.NON_QUOTA:
            violations.append(
                ViolationReport(
                    ViolationCode.QUOTA_DAY_TYPE,
                    f"JobType {int(job_type)} cannot have DayType=3",
                    actual=int(day_type),
                )
            )
        if job_type.requires_non_quota_day and day_type is not DayType.NON_QUOTA:
            violations.append(
                ViolationReport(
                    ViolationCode.NON_QUOTA_DAY_TYPE,
                    f"JobType {int(job_type)} must have DayType=3, got {int(day_type)}",
                    expected=int(DayType.NON_QUOTA),
                    actual=int(day_type),
                )
            )
        return violations
