import json
import os


def int_list(name: str, default: list[int]) -> list[int]:
    raw = os.environ.get(name)
    if not raw:
        return list(default)
    return [int(x) for x in raw.split(",") if x.strip()]


def optional_int(name: str):
    raw = os.environ.get(name)
    return int(raw) if raw not in (None, "") else None


def build_master_data() -> dict:
    """Estate master data (AgriGen checkroll), overridable per variable."""
    master_data = {
        "groupID": int(os.environ.get("GROUP_ID", "1112")),
        "estateID": int(os.environ.get("ESTATE_ID", "4224")),
        "normValue": float(os.environ.get("NORM_VALUE", "20")),
        "minNormValue": float(os.environ.get("MIN_NORM_VALUE", "18")),
        "noam": float(os.environ.get("NOAM", "20")),
        "divisionIDs": int_list("DIVISION_IDS", [13, 17]),
        "fieldIDs": int_list("FIELD_IDS", list(range(156, 166))),
        "jobTypeIDs": int_list("JOB_TYPE_IDS", [3, 5, 6, 7, 8]),
        "employeeTypeID": int(os.environ.get("EMPLOYEE_TYPE_ID", "3")),
        "genderIDs": int_list("GENDER_IDS", [1, 2]),
        "holidayProbability": float(os.environ.get("HOLIDAY_PROBABILITY", "0.2")),
    }
    # e.g. JOB_TYPE_WEIGHTS='{"3": 0.5, "6": 0.2, "5": 0.15, "7": 0.1, "8": 0.05}'
    weights = os.environ.get("JOB_TYPE_WEIGHTS")
    if weights:
        master_data["jobTypeWeights"] = {int(k): float(v) for k, v in json.loads(weights).items()}
    return master_data

