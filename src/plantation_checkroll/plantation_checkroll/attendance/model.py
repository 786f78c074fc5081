from __future__ import annotations

import json
from dataclasses import dataclass, fields
from typing import Any, Mapping

from ..core.enums import DayType, JobType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one checkroll attendance row as posted to the bulk upload endpoint.

    ``job_type_id`` and ``day_type`` stay plain ints so that externally supplied
    rows breaking the business rules can still be represented and validated.
    """

    employee_attendance_id: int
    group_id: int
    amount: float
    collected_date: str
    division_id: int
    employee_number: str
    employee_type_id: int
    estate_id: int
    field_id: int
    gang_id: int
    job_type_id: int
    session_id: int
    work_type_id: int
    day_type: int
    day_ot: float
    night_ot: float
    noam: float
    created_by: int
    is_active: bool
    is_holiday: bool
    muster_chit_id: int
    main_division_id: int
    over_kilo: float
    operator_id: int
    man_days: float
    employee_id: int
    registration_number: str
    employee_name: str
    gender_id: int
    norm_value: float
    min_norm_value: float
    error_message: str

    @property
    def job_type(self) -> JobType:
        return JobType.parse(self.job_type_id)

    @property
    def day_type_enum(self) -> DayType:
        return DayType.parse(self.day_type)

    def to_dict(self) -> dict[str, Any]:
        return {JSON_FIELD_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        unknown = set(data) - set(PYTHON_FIELD_NAMES)
        if unknown:
            raise ValidationError(f"Unknown attendance fields: {sorted(unknown)}")
        missing = set(PYTHON_FIELD_NAMES) - set(data)
        if missing:
            raise ValidationError(f"Missing attendance fields: {sorted(missing)}")
        return cls(**{PYTHON_FIELD_NAMES[k]: v for k, v in data.items()})

    @classmethod
    def from_json(cls, payload: str) -> "AttendanceRecord":
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Attendance payload is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ValidationError("Attendance payload must be a JSON object")
        return cls.from_dict(data)


# Python attribute -> JSON key of the bulk upload body.
JSON_FIELD_NAMES: dict[str, str] = {
    "employee_attendance_id": "employeeAttendanceID",
    "group_id": "groupID",
    "amount": "amount",
    "collected_date": "collectedDate",
    "division_id": "divisionID",
    "employee_number": "employeeNumber",
    "employee_type_id": "employeeTypeID",
    "estate_id": "estateID",
    "field_id": "fieldID",
    "gang_id": "gangID",
    "job_type_id": "jobTypeID",
    "session_id": "sessionID",
    "work_type_id": "workTypeID",
    "day_type": "dayType",
    "day_ot": "dayOT",
    "night_ot": "nightOT",
    "noam": "noam",
    "created_by": "createdBy",
    "is_active": "isActive",
    "is_holiday": "isHoliday",
    "muster_chit_id": "musterChitID",
    "main_division_id": "mainDivisionID",
    "over_kilo": "overKilo",
    "operator_id": "operatorID",
    "man_days": "manDays",
    "employee_id": "employeeID",
    "registration_number": "registrationNumber",
    "employee_name": "employeeName",
    "gender_id": "genderID",
    "norm_value": "normValue",
    "min_norm_value": "minNormValue",
    "error_message": "errorMessage",
}

PYTHON_FIELD_NAMES: dict[str, str] = {v: k for k, v in JSON_FIELD_NAMES.items()}
