"""Calendar constants for the appointment scheduling engine."""

# Time grid resolution
SLOT_MINUTES = ["00", "15", "30", "45"]
HOURS_PER_DAY = 24

# Clock periods
AM = "am"
PM = "pm"

# Default appointment window (12-hour labels)
DEFAULT_START_TIME = "12:00am"
DEFAULT_END_TIME = "1:00am"

# Suggested duration for new appointments (in grid slots)
SUGGESTED_DURATION_SLOTS = 4  # one hour at 15-minute resolution
SUGGESTED_FALLBACK_SLOTS = 3

# Month view layout
MONTH_GRID_WEEKS = 5
DAYS_PER_WEEK = 7

# Calendar view types
VIEW_TYPE_DAY = "day"
VIEW_TYPE_MONTH = "month"
VIEW_TYPES = [VIEW_TYPE_DAY, VIEW_TYPE_MONTH]

# Validation flags
TIME_MISMATCH = "time_mismatch"
TIME_ORDER = "time_order"

# Appointment form fields that must not be blank
REQUIRED_FORM_FIELDS = ["title", "start", "end", "description"]

# Maximum lengths for free-text appointment fields
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000
