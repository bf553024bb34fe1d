# core/config.py
import os

APP_TITLE = os.getenv("APP_TITLE", "Habit Grid")
PAGE_ICON = os.getenv("PAGE_ICON", "🟡")

HABIT_STORE_PATH = os.getenv("HABIT_STORE_PATH", "data/habits.json")
# pytz zone name used to resolve "today"; empty means the host's local date
HABIT_TZ = os.getenv("HABIT_TZ", "").strip()

LOG_FILE = os.getenv("LOG_FILE", "logs/habit_grid.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_HABITS = [
    n.strip() for n in os.getenv("DEFAULT_HABITS", "Exercise,Reading").split(",") if n.strip()
]
