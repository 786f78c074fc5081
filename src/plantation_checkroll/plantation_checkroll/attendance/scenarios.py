from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckrollScenario:
    """A hand-picked attendance row with its expected derived values."""

    name: str
    employee_number: str
    employee_id: int
    job_type_id: int
    day_type: int
    is_holiday: bool
    amount: float
    expected_over_kilo: float
    expected_man_days: float

    def overrides(self) -> dict:
        return {
            "employee_number": self.employee_number,
            "employee_id": self.employee_id,
            "employee_name": self.name,
            "job_type_id": self.job_type_id,
            "day_type": self.day_type,
            "is_holiday": self.is_holiday,
            "amount": self.amount,
        }


# Expected values assume the standard norm of 20.
STANDARD_SCENARIOS: tuple[CheckrollScenario, ...] = (
    CheckrollScenario("Test_FullDay_Holiday_MeetsNorm", "1001", 10001, 3, 1, True, 22, 2, 1.5),
    CheckrollScenario("Test_FullDay_NoHoliday_MeetsNorm", "1002", 10002, 3, 1, False, 21, 1, 1.0),
    CheckrollScenario("Test_HalfDay_Holiday_MeetsHalfNorm", "1003", 10003, 6, 2, True, 12, 0, 0.75),
    CheckrollScenario("Test_HalfDay_NoHoliday_MeetsHalfNorm", "1004", 10004, 6, 2, False, 11, 0, 0.5),
    CheckrollScenario("Test_Sundry_NoOverKilo", "1005", 10005, 5, 3, False, 2, 0, 1.0),
    CheckrollScenario("Test_Tapping_NoOverKilo", "1006", 10006, 7, 3, False, 3, 0, 1.0),
    CheckrollScenario("Test_Other_NoHoliday", "1007", 10007, 8, 3, False, 5, 0, 1.0),
)
