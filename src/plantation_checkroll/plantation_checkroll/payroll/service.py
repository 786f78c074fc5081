from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from ..attendance.model import AttendanceRecord


@dataclass(frozen=True)
class DistributionRow:
    key: int
    count: int
    percentage: float


@dataclass(frozen=True)
class CheckrollSummary:
    total_records: int
    job_types: list[DistributionRow]
    day_types: list[DistributionRow]
    holiday_count: int
    holiday_percentage: float
    total_man_days: float
    total_over_kilo: float

    def to_dict(self) -> dict:
        return {
            "totalRecords": self.total_records,
            "jobTypes": [{"jobTypeID": r.key, "count": r.count, "percentage": r.percentage} for r in self.job_types],
            "dayTypes": [{"dayType": r.key, "count": r.count, "percentage": r.percentage} for r in self.day_types],
            "holidayCount": self.holiday_count,
            "holidayPercentage": self.holiday_percentage,
            "totalManDays": self.total_man_days,
            "totalOverKilo": self.total_over_kilo,
        }


def _percentage(count: int, total: int) -> float:
    return round(count / total * 100, 1) if total else 0.0


class CheckrollSummaryService:
    """Distribution report over a batch (job types, day types, holidays, totals)."""

    def build_summary(self, records: Iterable[AttendanceRecord]) -> CheckrollSummary:
        job_counts: Counter = Counter()
        day_counts: Counter = Counter()
        holiday_count = 0
        total_man_days = 0.0
        total_over_kilo = 0.0
        total = 0

        for r in records:
            total += 1
            job_counts[r.job_type_id] += 1
            day_counts[r.day_type] += 1
            if r.is_holiday:
                holiday_count += 1
            total_man_days += r.man_days
            total_over_kilo += r.over_kilo

        return CheckrollSummary(
            total_records=total,
            job_types=[DistributionRow(k, c, _percentage(c, total)) for k, c in sorted(job_counts.items())],
            day_types=[DistributionRow(k, c, _percentage(c, total)) for k, c in sorted(day_counts.items())],
            holiday_count=holiday_count,
            holiday_percentage=_percentage(holiday_count, total),
            total_man_days=round(total_man_days, 2),
            total_over_kilo=round(total_over_kilo, 2),
        )
