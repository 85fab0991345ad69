"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Settings modules under ``config/`` may override the tunable ones.
"""

# Super-save gate: minimum number of marked days in a month.
MIN_MARKED_DAYS = 26

# Presence needed for full-month pay, before subtracting applicable holidays.
REQUIRED_DAYS_LONG_MONTH = 27
REQUIRED_DAYS_DEFAULT = 26

# Single ESI eligibility threshold on monthly salary (inclusive).
# The legacy screens disagreed (21000 vs 21500); 21000 is used until payroll confirms.
ESI_SALARY_THRESHOLD = 21000.0
ESI_RATE = 0.0075

PF_RATE = 0.12
DEFAULT_OT_RATE = 70.0

ALL_DEPARTMENTS = "All"
# Sunday work for these departments is paid as overtime instead of a present day.
WORKER_DEPARTMENTS = frozenset({"Worker", "Other Workers"})
# Sunday presence counts as a present day only for these departments.
SUNDAY_CREDIT_DEPARTMENTS = frozenset({"Staff"})

DEFAULT_REVISION_REASON = "Salary revision"
ABSENT_WITH_PUNCHES_NOTE = "Absent with check-in/out times"
DEFAULT_HOLIDAY_NOTE = "Holiday"

HOURS_PRECISION = 4
MONEY_PRECISION = 2
