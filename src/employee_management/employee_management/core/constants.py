"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_MAX_AGE_SECONDS = 24 * 60 * 60
TOKEN_SALT = "employee-management-auth"
MIN_PAYROLL_YEAR = 1900
MAX_PAYROLL_YEAR = 9999
REPORT_CSV_FILENAME = "attendance_report.csv"

# salaries money columns are DECIMAL(12, 2)
MONEY_DECIMAL_PLACES = 2
MAX_MONEY_AMOUNT = 10**10
