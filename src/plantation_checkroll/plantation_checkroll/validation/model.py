from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.enums import ViolationCode


@dataclass(frozen=True)
class ViolationReport:
    code: ViolationCode
    message: str
    expected: Optional[Any] = None
    actual: Optional[Any] = None

    def to_dict(self) -> dict:
        return {"code": self.code.value, "message": self.message, "expected": self.expected, "actual": self.actual}


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of validating one record; ``compliant`` iff there are no violations."""

    violations: tuple[ViolationReport, ...] = ()

    @property
    def compliant(self) -> bool:
        return not self.violations

    @property
    def codes(self) -> list[ViolationCode]:
        return [v.code for v in self.violations]

    def to_dict(self) -> dict:
        return {"compliant": self.compliant, "violations": [v.to_dict() for v in self.violations]}


@dataclass(frozen=True)
class BatchFailure:
    index: int
    employee_name: Optional[str]
    report: ValidationReport


@dataclass(frozen=True)
class BatchValidationReport:
    total: int
    failures: tuple[BatchFailure, ...] = field(default_factory=tuple)

    @property
    def invalid(self) -> int:
        return len(self.failures)

    @property
    def valid(self) -> int:
        return self.total - self.invalid

    @property
    def all_valid(self) -> bool:
        return not self.failures

    @property
    def valid_ratio(self) -> float:
        return self.valid / self.total if self.total else 1.0
