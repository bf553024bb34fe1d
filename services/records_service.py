# services/records_service.py
import logging
import math

from core.models import CompletionRate, DayMarks, HabitId, Mark, MonthKey, Snapshot
from core.time_utils import days_in_month, parse_month_key
from services.habits_service import get_habit

logger = logging.getLogger(__name__)

_CYCLE = {Mark.UNSET: Mark.DONE, Mark.DONE: Mark.MISSED, Mark.MISSED: Mark.UNSET}

def next_mark(mark: Mark) -> Mark:
    return _CYCLE[mark]

def day_marks(snapshot: Snapshot, habit_id: HabitId, mk: MonthKey) -> DayMarks:
    return snapshot.records.get(mk, {}).get(habit_id, {})

def get_mark(snapshot: Snapshot, habit_id: HabitId, mk: MonthKey, day: int) -> Mark:
    return day_marks(snapshot, habit_id, mk).get(day, Mark.UNSET)

def _writable(snapshot: Snapshot, habit_id: HabitId, mk: MonthKey, day: int) -> bool:
    if get_habit(snapshot, habit_id) is None:
        return False
    try:
        year, month = parse_month_key(mk)
    except ValueError:
        return False
    return 0 <= month <= 11 and 1 <= day <= days_in_month(year, month)

def _write(snapshot: Snapshot, habit_id: HabitId, mk: MonthKey, day: int, mark: Mark) -> None:
    days = dict(day_marks(snapshot, habit_id, mk))
    if mark is Mark.UNSET:
        days.pop(day, None)
    else:
        days[day] = mark
    month = dict(snapshot.records.get(mk, {}))
    if days:
        month[habit_id] = days
    else:
        month.pop(habit_id, None)
    records = dict(snapshot.records)
    if month:
        records[mk] = month
    else:
        records.pop(mk, None)
    snapshot.records = records

def set_mark_explicit(snapshot: Snapshot, habit_id: HabitId, mk: MonthKey, day: int, mark: Mark) -> None:
    if not _writable(snapshot, habit_id, mk, day):
        return
    _write(snapshot, habit_id, mk, day, mark)

def cycle_mark(snapshot: Snapshot, habit_id: HabitId, mk: MonthKey, day: int) -> Mark:
    if not _writable(snapshot, habit_id, mk, day):
        return Mark.UNSET
    nxt = next_mark(get_mark(snapshot, habit_id, mk, day))
    _write(snapshot, habit_id, mk, day, nxt)
    return nxt

def clear_month(snapshot: Snapshot, mk: MonthKey) -> None:
    if mk in snapshot.records:
        snapshot.records = {k: v for k, v in snapshot.records.items() if k != mk}
        logger.info("cleared month %s", mk)

def completion_rate(snapshot: Snapshot, habit_id: HabitId, mk: MonthKey) -> CompletionRate:
    marks = list(day_marks(snapshot, habit_id, mk).values())
    done = marks.count(Mark.DONE)
    missed = marks.count(Mark.MISSED)
    total = done + missed
    # half-up, not banker's rounding
    pct = int(math.floor(done / total * 100 + 0.5)) if total else 0
    return CompletionRate(done=done, missed=missed, total_marked=total, pct=pct)
