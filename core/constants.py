# core/constants.py
import re

CSV_COLUMNS = ["Habit ID", "Habit Name", "Month", "Day", "Status"]
MONTH_KEY_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}$")
MAX_IMPORT_DAY = 31

STREAK_WINDOW = 7

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
