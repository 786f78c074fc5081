from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from ..core.constants import DEFAULT_HOLIDAY_PROBABILITY, DEFAULT_JOB_TYPE_WEIGHTS
from ..core.enums import JobType
from ..core.exceptions import ConfigurationError, InvalidJobType


@dataclass(frozen=True)
class ClassificationTables:
    """Master data of an estate: norms, reference lists and job type weights.

    Read-only input supplied by configuration; the engine never hardcodes it.
    """

    group_id: int
    estate_id: int
    norm_value: float
    min_norm_value: float
    noam: float
    division_ids: tuple[int, ...]
    field_ids: tuple[int, ...]
    job_type_ids: tuple[int, ...]
    employee_type_id: int
    gender_ids: tuple[int, ...]
    job_type_weights: Mapping[int, float] = field(default_factory=lambda: dict(DEFAULT_JOB_TYPE_WEIGHTS))
    holiday_probability: float = DEFAULT_HOLIDAY_PROBABILITY

    def __post_init__(self):
        for name in ("norm_value", "min_norm_value", "noam"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive number, got {value!r}")
        if self.min_norm_value > self.norm_value:
            raise ConfigurationError("min_norm_value must not exceed norm_value")

        for name in ("division_ids", "field_ids", "job_type_ids", "gender_ids"):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} must not be empty")

        for job_type_id in self.job_type_ids:
            try:
                JobType.parse(job_type_id)
            except InvalidJobType:
                raise ConfigurationError(f"Unknown job type in configuration: {job_type_id!r}") from None

        weights = dict(self.job_type_weights)
        unknown = set(weights) - set(self.job_type_ids)
        if unknown:
            raise ConfigurationError(f"Weights given for job types outside the configured set: {sorted(unknown)}")
        if any(w < 0 for w in weights.values()) or sum(weights.values()) <= 0:
            raise ConfigurationError("job_type_weights must be non-negative with a positive total")

        if not 0.0 <= self.holiday_probability <= 1.0:
            raise ConfigurationError(f"holiday_probability must be within [0, 1], got {self.holiday_probability!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ClassificationTables":
        """Build from the camelCase master data mapping used by the settings modules."""
        try:
            weights = data.get("jobTypeWeights", DEFAULT_JOB_TYPE_WEIGHTS)
            return cls(
                group_id=int(data["groupID"]),
                estate_id=int(data["estateID"]),
                norm_value=data["normValue"],
                min_norm_value=data["minNormValue"],
                noam=data["noam"],
                division_ids=tuple(int(x) for x in data["divisionIDs"]),
                field_ids=tuple(int(x) for x in data["fieldIDs"]),
                job_type_ids=tuple(int(x) for x in data["jobTypeIDs"]),
                employee_type_id=int(data["employeeTypeID"]),
                gender_ids=tuple(int(x) for x in data["genderIDs"]),
                job_type_weights={int(k): float(v) for k, v in weights.items()},
                holiday_probability=float(data.get("holidayProbability", DEFAULT_HOLIDAY_PROBABILITY)),
            )
        except KeyError as exc:
            raise ConfigurationError(f"Master data is missing {exc.args[0]!r}") from exc
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Master data is malformed: {exc}") from exc

    def to_mapping(self) -> dict[str, Any]:
        return {
            "groupID": self.group_id,
            "estateID": self.estate_id,
            "normValue": self.norm_value,
            "minNormValue": self.min_norm_value,
            "noam": self.noam,
            "divisionIDs": list(self.division_ids),
            "fieldIDs": list(self.field_ids),
            "jobTypeIDs": list(self.job_type_ids),
            "employeeTypeID": self.employee_type_id,
            "genderIDs": list(self.gender_ids),
            "jobTypeWeights": dict(self.job_type_weights),
            "holidayProbability": self.holiday_probability,
        }

    @property
    def job_types(self) -> tuple[JobType, ...]:
        return tuple(JobType.parse(x) for x in self.job_type_ids)

    def require_job_type(self, job_type_id) -> JobType:
        """Parse ``job_type_id`` and make sure this estate uses it."""
        job_type = JobType.parse(job_type_id)
        if int(job_type) not in self.job_type_ids:
            raise InvalidJobType(job_type_id, f"Job type {job_type_id!r} is not configured for this estate")
        return job_type

    def is_configured(self, job_type_id) -> bool:
        try:
            self.require_job_type(job_type_id)
        except InvalidJobType:
            return False
        return True
