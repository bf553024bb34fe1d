# services/streak_service.py
import logging
from datetime import date
from typing import Dict, List, Tuple

from core.constants import STREAK_WINDOW
from core.models import HabitId, HabitSummary, Mark, RecordStore, Snapshot
from core.time_utils import entry_date

logger = logging.getLogger(__name__)

def habit_entries(habit_id: HabitId, records: RecordStore) -> List[Tuple[date, Mark]]:
    """All stored (date, mark) pairs of a habit, oldest first. Impossible dates are skipped."""
    out = []
    for mk, month in records.items():
        for day, mark in (month.get(habit_id) or {}).items():
            d = entry_date(mk, day)
            if d is None:
                logger.debug("skipping impossible date %s/%s for habit %s", mk, day, habit_id)
                continue
            out.append((d, mark))
    out.sort(key=lambda e: e[0])
    return out

def habit_summary(habit_id: HabitId, records: RecordStore) -> HabitSummary:
    entries = habit_entries(habit_id, records)
    marks = [m for _, m in entries]

    last_missed = max((i for i, m in enumerate(marks) if m is Mark.MISSED), default=-1)
    streak = sum(1 for m in marks[last_missed + 1:] if m is Mark.DONE)

    # broken: the recent window has a miss that no later done has made up for
    recent = marks[-STREAK_WINDOW:]
    is_broken = bool(recent) and recent[-1] is Mark.MISSED
    return HabitSummary(current_streak=0 if is_broken else streak, is_broken=is_broken)

def summaries(snapshot: Snapshot) -> Dict[HabitId, HabitSummary]:
    return {h.id: habit_summary(h.id, snapshot.records) for h in snapshot.habits}
