"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Normalization thresholds (minutes)
DEFAULT_DUPLICATE_THRESHOLD_MINUTES = 5
DEFAULT_BREAK_MERGE_THRESHOLD_MINUTES = 20
DEFAULT_NOISE_THRESHOLD_MINUTES = 10
MAX_PUNCH_PAIRS = 3

# Labor warnings (minutes)
MAX_SHIFT_MINUTES = 12 * 60
MAX_BREAK_MINUTES = 150
LUNCH_REQUIRED_AFTER_MINUTES = 6 * 60
MIN_LUNCH_MINUTES = 60

MINUTES_PER_DAY = 24 * 60

# Premium percentages shown next to the overtime totals
DEFAULT_PERCENT_NORMAL = 50
DEFAULT_PERCENT_SPECIAL = 100

# Weekday index 0=Sunday..6=Saturday
SUNDAY = 0
DAYS_OF_WEEK = ("Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb")
DEFAULT_SCHEDULE = {0: "00:00", 1: "08:00", 2: "08:00", 3: "08:00", 4: "08:00", 5: "08:00", 6: "00:00"}

PUNCH_COLUMNS = ("entry1", "exit1", "entry2", "exit2", "entry3", "exit3")
UNCERTAIN_MARKER = "[?]"
DAY_OFF_LABELS = ("FOLGA",)
ABSENCE_LABELS = ("FALTA", "FALTOU")
