# services/automark_service.py
import logging
from datetime import date
from typing import List

from core.models import HabitId, Mark, Snapshot
from core.time_utils import month_key
from services.records_service import get_mark, set_mark_explicit

logger = logging.getLogger(__name__)

def auto_mark_key(snapshot: Snapshot, today: date) -> str:
    """Identifies the "habits loaded + today" condition the rule runs once for."""
    return f"{today.isoformat()}|{','.join(snapshot.habit_ids())}"

def auto_mark_patch(snapshot: Snapshot, viewed_year: int, viewed_month: int, today: date) -> List[HabitId]:
    """Habits whose entry for today is unset, when the viewed month is today's month."""
    if (viewed_year, viewed_month) != (today.year, today.month - 1):
        return []
    mk = month_key(today.year, today.month - 1)
    return [h.id for h in snapshot.habits if get_mark(snapshot, h.id, mk, today.day) is Mark.UNSET]

def apply_auto_mark(snapshot: Snapshot, viewed_year: int, viewed_month: int, today: date) -> int:
    patch = auto_mark_patch(snapshot, viewed_year, viewed_month, today)
    mk = month_key(today.year, today.month - 1)
    for hid in patch:
        set_mark_explicit(snapshot, hid, mk, today.day, Mark.DONE)
    if patch:
        logger.info("auto-marked %d habit(s) done for %s", len(patch), today.isoformat())
    return len(patch)
