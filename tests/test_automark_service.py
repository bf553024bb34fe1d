from datetime import date

from core.models import Mark, Snapshot
from services.automark_service import apply_auto_mark, auto_mark_key, auto_mark_patch
from services.habits_service import add_habit
from services.records_service import get_mark, set_mark_explicit

TODAY = date(2025, 3, 14)
MK = "2025-03"


def _snap():
    snap = Snapshot()
    for name in ("Read", "Run", "Sleep"):
        add_habit(snap, name)
    return snap


def test_marks_unset_entries_done_without_touching_existing():
    snap = _snap()
    read, run, sleep = snap.habits
    set_mark_explicit(snap, run.id, MK, 14, Mark.MISSED)
    set_mark_explicit(snap, sleep.id, MK, 14, Mark.DONE)

    assert auto_mark_patch(snap, 2025, 2, TODAY) == [read.id]
    assert apply_auto_mark(snap, 2025, 2, TODAY) == 1
    assert get_mark(snap, read.id, MK, 14) is Mark.DONE
    assert get_mark(snap, run.id, MK, 14) is Mark.MISSED


def test_second_run_is_a_noop():
    snap = _snap()
    assert apply_auto_mark(snap, 2025, 2, TODAY) == 3
    before = {mk: {h: dict(d) for h, d in m.items()} for mk, m in snap.records.items()}
    assert apply_auto_mark(snap, 2025, 2, TODAY) == 0
    assert snap.records == before


def test_other_month_in_view_does_nothing():
    snap = _snap()
    assert auto_mark_patch(snap, 2025, 1, TODAY) == []
    assert apply_auto_mark(snap, 2024, 2, TODAY) == 0
    assert snap.records == {}


def test_key_changes_with_habits_and_day():
    snap = _snap()
    key = auto_mark_key(snap, TODAY)
    assert auto_mark_key(snap, TODAY) == key
    assert auto_mark_key(snap, date(2025, 3, 15)) != key
    add_habit(snap, "Stretch")
    assert auto_mark_key(snap, TODAY) != key
