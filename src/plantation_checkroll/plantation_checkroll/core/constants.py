"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Master data (norms, divisions, fields) is configuration, see ``config/``.
"""

DEFAULT_HOLIDAY_PROBABILITY = 0.2

# Realistic job type distribution: plucking, other plucking, sundry, tapping, other.
DEFAULT_JOB_TYPE_WEIGHTS = {3: 0.50, 6: 0.20, 5: 0.15, 7: 0.10, 8: 0.05}

FULL_DAY_CREDIT = 1.0
HALF_DAY_CREDIT = 0.5
HOLIDAY_MULTIPLIER = 1.5
FIXED_CREDIT = 1.0
NO_CREDIT = 0.0

MAN_DAYS_DOMAIN = frozenset({0.0, 0.5, 0.75, 1.0, 1.5})

# Amount ranges (inclusive) used by the synthesizer.
FULL_DAY_AMOUNT_RANGE = (18, 28)
HALF_DAY_AMOUNT_RANGE = (10, 15)
FIXED_CREDIT_AMOUNT_RANGE = (0, 5)
OTHER_WORK_AMOUNT_RANGE = (0, 10)

EMPLOYEE_NUMBER_RANGE = (1000, 9999)
EMPLOYEE_ID_RANGE = (10000, 15000)

REALISTIC_EMPLOYEE_NUMBER_START = 1000
REALISTIC_EMPLOYEE_ID_START = 10000

# Placeholder the bulk upload endpoint expects in every row.
ERROR_MESSAGE_PLACEHOLDER = "string"
