import json

import pytest

from src.plantation_checkroll.plantation_checkroll.attendance.model import AttendanceRecord, JSON_FIELD_NAMES
from src.plantation_checkroll.plantation_checkroll.core.enums import DayType, JobType
from src.plantation_checkroll.plantation_checkroll.core.exceptions import InvalidJobType, ValidationError


def test_json_body_uses_bulk_upload_field_names(synthesizer):
    record = synthesizer.generate_record({"jobTypeID": 3, "dayType": 2, "isHoliday": False, "amount": 12})
    body = json.loads(record.to_json())

    assert set(body) == set(JSON_FIELD_NAMES.values())
    assert body["jobTypeID"] == 3
    assert body["dayType"] == 2
    assert body["manDays"] == 0.5
    assert body["dayOT"] == 0 and body["nightOT"] == 0
    assert body["mainDivisionID"] == body["divisionID"]
    assert body["errorMessage"] == "string"


def test_from_json_restores_the_same_record(synthesizer):
    record = synthesizer.generate_record()
    assert AttendanceRecord.from_json(record.to_json()) == record


def test_from_dict_rejects_unknown_and_missing_fields(synthesizer):
    data = synthesizer.generate_record().to_dict()
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict({**data, "extra": 1})

    del data["amount"]
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict(data)


def test_from_json_rejects_non_objects():
    with pytest.raises(ValidationError):
        AttendanceRecord.from_json("[1, 2]")
    with pytest.raises(ValidationError):
        AttendanceRecord.from_json("{not json")


def test_enum_accessors(synthesizer):
    record = synthesizer.generate_record({"jobTypeID": 5})
    assert record.job_type is JobType.SUNDRY
    assert record.day_type_enum is DayType.NON_QUOTA


def test_external_record_keeps_unknown_job_type(synthesizer):
    data = synthesizer.generate_record().to_dict()
    data["jobTypeID"] = 4
    record = AttendanceRecord.from_dict(data)
    assert record.job_type_id == 4
    with pytest.raises(InvalidJobType):
        record.job_type
