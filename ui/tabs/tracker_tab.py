# ui/tabs/tracker_tab.py
from datetime import date

import streamlit as st

from core.constants import MONTH_NAMES
from core.models import Mark, Snapshot
from core.time_utils import days_in_month, month_key
from services.records_service import completion_rate, cycle_mark, get_mark, set_mark_explicit
from services.streak_service import summaries
from ui.components.session import save_snapshot

TOKENS = {Mark.DONE: "✅", Mark.MISSED: "❌", Mark.UNSET: "·"}

def render_tracker_tab(snapshot: Snapshot, year: int, month: int, today: date):
    st.header(f"🟡 {MONTH_NAMES[month]} {year}")
    st.caption("Click a cell to cycle: empty → ✅ done → ❌ missed → empty.")

    if not snapshot.habits:
        st.info("No habits yet. Add one in the Habits tab.")
        return

    mk = month_key(year, month)
    n_days = days_in_month(year, month)
    is_current = (year, month) == (today.year, today.month - 1)
    streaks = summaries(snapshot)
    widths = [3] + [1] * n_days + [2]

    head = st.columns(widths)
    head[0].markdown("**Habit**")
    for day in range(1, n_days + 1):
        label = f"**{day}**" if is_current and day == today.day else str(day)
        head[day].markdown(label)
    head[-1].markdown("**Rate**")

    for habit in snapshot.habits:
        cols = st.columns(widths)
        s = streaks[habit.id]
        flame = "💔" if s.is_broken else f"🔥{s.current_streak}"
        cols[0].markdown(f"{habit.name} · {flame}")
        for day in range(1, n_days + 1):
            mark = get_mark(snapshot, habit.id, mk, day)
            if cols[day].button(TOKENS[mark], key=f"cell|{habit.id}|{mk}|{day}"):
                cycle_mark(snapshot, habit.id, mk, day)
                save_snapshot(snapshot)
                st.rerun()
        rate = completion_rate(snapshot, habit.id, mk)
        cols[-1].markdown(f"{rate.pct}% ({rate.done}/{rate.total_marked})")

    st.divider()
    with st.expander("🧹 Clear a single cell", expanded=False):
        names = {h.id: h.name for h in snapshot.habits}
        c1, c2, c3 = st.columns([2, 1, 1])
        hid = c1.selectbox("Habit", list(names), format_func=names.get, key="clear_cell_habit")
        day = c2.number_input("Day", min_value=1, max_value=n_days,
                              value=today.day if is_current else 1, key="clear_cell_day")
        if c3.button("Clear", use_container_width=True):
            set_mark_explicit(snapshot, hid, mk, int(day), Mark.UNSET)
            save_snapshot(snapshot)
            st.rerun()
