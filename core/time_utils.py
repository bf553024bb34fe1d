# core/time_utils.py
from datetime import MAXYEAR, MINYEAR, date, datetime
from typing import Optional, Tuple
import pytz

from core.config import HABIT_TZ

def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def days_in_month(year: int, month: int) -> int:
    """Days in a month; ``month`` is zero-indexed (0 = January)."""
    year, month = add_months(year, month, 0)
    if month == 1:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (3, 5, 8, 10) else 31

def month_key(year: int, month: int) -> str:
    return f"{year}-{month + 1:02d}"

def add_months(year: int, month: int, delta: int) -> Tuple[int, int]:
    carry, m = divmod(month + delta, 12)
    return year + carry, m

def parse_month_key(key: str) -> Tuple[int, int]:
    y, m = key.split("-")
    return int(y), int(m) - 1

def entry_date(key: str, day: int) -> Optional[date]:
    """Calendar date for a stored (month key, day) pair, or None if it is not a real date."""
    try:
        y, m = parse_month_key(key)
    except ValueError:
        return None
    if not 0 <= m <= 11 or not MINYEAR <= y <= MAXYEAR:
        return None
    if not 1 <= int(day) <= days_in_month(y, m):
        return None
    return date(y, m + 1, int(day))

def today_local() -> date:
    if HABIT_TZ:
        return datetime.now(pytz.timezone(HABIT_TZ)).date()
    return date.today()

def current_month(today: Optional[date] = None) -> Tuple[int, int]:
    today = today or today_local()
    return today.year, today.month - 1
