from core.models import Mark
from services.streak_service import habit_entries, habit_summary

D, M = Mark.DONE, Mark.MISSED


def test_streak_counts_done_after_last_miss():
    records = {"2025-01": {"h": {1: D, 2: D, 3: M, 4: D, 5: D}}}
    s = habit_summary("h", records)
    assert s.current_streak == 2
    assert s.is_broken is False


def test_recent_misses_without_done_break_the_habit():
    records = {"2025-01": {"h": {1: D, 2: M, 3: M}}}
    s = habit_summary("h", records)
    assert s.is_broken is True
    assert s.current_streak == 0


def test_no_miss_counts_everything():
    records = {"2024-12": {"h": {31: D}}, "2025-01": {"h": {1: D, 2: D}}}
    assert habit_summary("h", records).current_streak == 3


def test_entries_are_sorted_across_months_regardless_of_key_order():
    records = {
        "2025-02": {"h": {1: D, 2: D}},
        "2024-12": {"h": {30: M}},
        "2025-01": {"h": {15: D, 2: M}},
    }
    dates = [d.isoformat() for d, _ in habit_entries("h", records)]
    assert dates == ["2024-12-30", "2025-01-02", "2025-01-15", "2025-02-01", "2025-02-02"]
    assert habit_summary("h", records).current_streak == 3


def test_old_done_outside_window_does_not_save_a_broken_habit():
    records = {"2025-01": {"h": {1: D, 2: M, 3: M, 4: M, 5: M, 6: M, 7: M, 8: M}}}
    s = habit_summary("h", records)
    assert s.is_broken is True
    assert s.current_streak == 0


def test_impossible_dates_are_skipped():
    records = {"2025-02": {"h": {27: D, 28: D, 30: M}}}
    s = habit_summary("h", records)
    assert s.current_streak == 2
    assert len(habit_entries("h", records)) == 2


def test_no_entries():
    s = habit_summary("h", {})
    assert (s.current_streak, s.is_broken) == (0, False)


def test_done_after_misses_is_not_broken():
    records = {"2025-01": {"h": {1: M, 2: M, 3: D}}}
    s = habit_summary("h", records)
    assert (s.current_streak, s.is_broken) == (1, False)


def test_latest_miss_breaks_even_with_dones_in_window():
    records = {"2025-01": {"h": {1: D, 2: D, 3: D, 4: M}}}
    s = habit_summary("h", records)
    assert (s.current_streak, s.is_broken) == (0, True)


def test_out_of_range_years_are_skipped():
    records = {"10000-01": {"h": {1: M}}, "0000-01": {"h": {1: M}}, "2025-01": {"h": {1: D}}}
    s = habit_summary("h", records)
    assert (s.current_streak, s.is_broken) == (1, False)
