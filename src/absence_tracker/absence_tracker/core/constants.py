"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Codes starting with this prefix are partial-day absences and carry minutes.
TIME_CODE_PREFIX = "T"

JSON_INDENT = 2
CSV_LINE_TERMINATOR = "\r\n"

CELL_CODE_SEPARATOR = "|"
CELL_COMMENT_SEPARATOR = "; "

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
