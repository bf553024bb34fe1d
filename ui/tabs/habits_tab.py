# ui/tabs/habits_tab.py
import streamlit as st

from core.models import Snapshot
from services.habits_service import add_habit, remove_habit, rename_habit
from ui.components.session import save_snapshot

def render_habits_tab(snapshot: Snapshot):
    st.header("📝 Habits")

    with st.form("add_habit", clear_on_submit=True):
        name = st.text_input("New habit", placeholder="e.g. Read 20 pages")
        if st.form_submit_button("➕ Add habit"):
            if add_habit(snapshot, name):
                save_snapshot(snapshot)
                st.rerun()
            else:
                st.warning("Habit name can't be empty.")

    if not snapshot.habits:
        st.info("No habits yet.")
        return

    st.divider()
    for habit in list(snapshot.habits):
        c1, c2, c3 = st.columns([3, 1, 1])
        new_name = c1.text_input("Name", value=habit.name, key=f"name|{habit.id}", label_visibility="collapsed")
        if c2.button("💾 Rename", key=f"rename|{habit.id}", use_container_width=True):
            rename_habit(snapshot, habit.id, new_name)
            save_snapshot(snapshot)
            st.rerun()
        with c3.popover("🗑️ Remove", use_container_width=True):
            st.write(f"Remove **{habit.name}** and all of its history?")
            if st.button("Yes, remove", key=f"remove|{habit.id}", type="primary"):
                remove_habit(snapshot, habit.id)
                save_snapshot(snapshot)
                st.rerun()
