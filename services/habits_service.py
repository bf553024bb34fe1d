# services/habits_service.py
import logging
import uuid
from typing import Iterable, List, Optional

from core.models import Habit, HabitId, Snapshot

logger = logging.getLogger(__name__)

def new_habit_id() -> HabitId:
    return uuid.uuid4().hex[:12]

def get_habit(snapshot: Snapshot, habit_id: HabitId) -> Optional[Habit]:
    return next((h for h in snapshot.habits if h.id == habit_id), None)

def add_habit(snapshot: Snapshot, name: Optional[str]) -> Optional[Habit]:
    trimmed = (name or "").strip()
    if not trimmed:
        return None
    habit = Habit(id=new_habit_id(), name=trimmed)
    snapshot.habits = [*snapshot.habits, habit]
    logger.info("added habit %s (%r)", habit.id, habit.name)
    return habit

def rename_habit(snapshot: Snapshot, habit_id: HabitId, new_name: Optional[str]) -> None:
    trimmed = (new_name or "").strip()
    if not trimmed or get_habit(snapshot, habit_id) is None:
        return
    snapshot.habits = [Habit(h.id, trimmed) if h.id == habit_id else h for h in snapshot.habits]

def remove_habit(snapshot: Snapshot, habit_id: HabitId) -> None:
    """Drop the habit and every record it owns, in every month."""
    snapshot.habits = [h for h in snapshot.habits if h.id != habit_id]
    records = {}
    for mk, month in snapshot.records.items():
        rest = {hid: days for hid, days in month.items() if hid != habit_id}
        if rest:
            records[mk] = rest
    snapshot.records = records
    logger.info("removed habit %s", habit_id)

def seed_default_habits(snapshot: Snapshot, names: Iterable[str]) -> List[Habit]:
    return [h for h in (add_habit(snapshot, n) for n in names) if h is not None]
