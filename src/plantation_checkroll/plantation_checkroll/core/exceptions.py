class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised when classification tables or settings are inconsistent."""


class InvalidJobType(ValidationError):
    """Raised when a job type is outside the configured classification set."""

    def __init__(self, job_type_id, message: str | None = None):
        self.job_type_id = job_type_id
        super().__init__(message or f"Invalid job type: {job_type_id!r}")


class UnsupportedDayType(ValidationError):
    """Raised when a (job type, day type) pair is forbidden for the rule engine."""

    def __init__(self, job_type_id, day_type, message: str | None = None):
        self.job_type_id = job_type_id
        self.day_type = day_type
        super().__init__(message or f"Day type {day_type!r} is not allowed for job type {job_type_id!r}")


class InvalidArgument(ValidationError):
    """Raised for negative or non-finite counts/amounts and illegal overrides."""


class RecordGenerationError(DomainError):
    """Raised when one record of a batch cannot be generated.

    Carries the offending input so the embedding pipeline can report it.
    """

    def __init__(self, *, index: int, job_type_id=None, day_type=None, amount=None, reason: str = ""):
        self.index = index
        self.job_type_id = job_type_id
        self.day_type = day_type
        self.amount = amount
        super().__init__(
            f"Record #{index} failed (jobTypeID={job_type_id!r}, dayType={day_type!r}, amount={amount!r}): {reason}"
        )
