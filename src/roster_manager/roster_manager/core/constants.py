"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

EXPORT_FILENAME = "attendance.csv"
EXPORT_MIMETYPE = "text/csv"
CSV_HEADER = "Id,Name,Status"

DEFAULT_FIRST_ID = 1

DEMO_STUDENT_NAMES = (
    "Alice Johnson",
    "Bob Martinez",
    "Carla Singh",
    "Daniel Kim",
    "Eve Zhao",
)
