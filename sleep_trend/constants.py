"""
Constants for Sleep vs Stress Trend.

Centralises the required CSV column names, the bin width, the accepted
grouping attributes, export layout settings, and the group colour
tables consumed by presentation adapters.
"""

# ── Required CSV columns (looked up by header name, never by position) ──
COL_SLEEP = "Sleep_Hours_per_Night"
COL_STRESS = "Stress_Level (1-10)"
COL_GRADE = "Grade"
COL_GENDER = "Gender"
COL_DEPARTMENT = "Department"

REQUIRED_COLUMNS = (
    COL_SLEEP, COL_STRESS, COL_GRADE, COL_GENDER, COL_DEPARTMENT,
)
NUMERIC_COLUMNS = (COL_SLEEP, COL_STRESS)

CSV_DELIMITER = ","

# Files larger than this trigger a warning when loaded from disk
LARGE_FILE_BYTES = 100 * 1024 * 1024

# ── Binning ──────────────────────────────────────────────────────────────
BIN_SIZE = 0.5

# ── Grouping attributes → Record field ───────────────────────────────────
GROUP_ATTRIBUTES = {
    COL_GRADE: "grade",
    COL_GENDER: "gender",
    COL_DEPARTMENT: "department",
}
DEFAULT_GROUP_ATTRIBUTE = COL_GRADE

# ── Text export layout ───────────────────────────────────────────────────
EXPORT_TITLE = "=== Chart Export ==="
EXPORT_BLOCK_PREFIX = "Dataset: "
EXPORT_COLUMNS = ("Avg Sleep", "Avg Stress")
EXPORT_COLUMN_WIDTH = 12
EXPORT_DECIMALS = 2
EXPORT_SEPARATOR = ","
EXPORT_FILENAME_TEMPLATE = "sleep_stress_by_{attribute}.txt"

# ── Group colour tables ──────────────────────────────────────────────────
GROUP_COLORS = {
    COL_GRADE: {
        'F': '#e74c3c',   # red
        'D': '#e67e22',   # orange
        'C': '#f1c40f',   # yellow
        'B': '#27ae60',   # light green
        'A': '#2ecc71',   # green
    },
    COL_GENDER: {
        'Female': '#e74c3c',
        'Male':   '#3498db',
    },
    COL_DEPARTMENT: {
        'Engineering': '#2ecc71',
        'Business':    '#3498db',
        'CS':          '#e74c3c',
        'Mathematics': '#f1c40f',
    },
}
GROUP_FALLBACK_COLORS = {
    COL_GRADE: '#9b59b6',
    COL_GENDER: '#9b59b6',
    COL_DEPARTMENT: '#e67e22',
}
DEFAULT_GROUP_COLOR = '#95a5a6'


def group_color(attribute: str, key: str) -> str:
    """Return the hex colour used for group *key* under *attribute*.

    Examples
    --------
    >>> group_color("Grade", "A")
    '#2ecc71'
    >>> group_color("Gender", "Other")
    '#9b59b6'
    >>> group_color("Shoe Size", "42")
    '#95a5a6'
    """
    if attribute not in GROUP_COLORS:
        return DEFAULT_GROUP_COLOR
    return GROUP_COLORS[attribute].get(key, GROUP_FALLBACK_COLORS[attribute])
