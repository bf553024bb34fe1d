# app.py
import streamlit as st

from core.config import APP_TITLE, PAGE_ICON, HABIT_STORE_PATH
from core.constants import MONTH_NAMES
from core.logger import setup_logger
from core.time_utils import month_key, today_local
from services.automark_service import apply_auto_mark, auto_mark_key
from ui.components.session import (
    get_snapshot, save_snapshot, viewed_month, shift_viewed_month, reset_viewed_month
)
from ui.tabs.tracker_tab import render_tracker_tab
from ui.tabs.habits_tab import render_habits_tab
from ui.tabs.insights_tab import render_insights_tab
from ui.tabs.data_tab import render_data_tab

st.set_page_config(page_title=APP_TITLE, page_icon=PAGE_ICON, layout="wide")
setup_logger()

snapshot = get_snapshot()
today = today_local()

# Sidebar
st.sidebar.header("📅 Month")
colP, colT, colN = st.sidebar.columns(3)
if colP.button("◀", use_container_width=True, help="Previous month"):
    shift_viewed_month(-1)
if colT.button("Today", use_container_width=True):
    reset_viewed_month()
if colN.button("▶", use_container_width=True, help="Next month"):
    shift_viewed_month(1)

year, month = viewed_month()
mk = month_key(year, month)
st.sidebar.subheader(f"{MONTH_NAMES[month]} {year}")
st.sidebar.caption(f"Today: **{today.isoformat()}** • Data file: `{HABIT_STORE_PATH}`")

# Auto-mark today's unset entries once per "habits + today" condition
am_key = auto_mark_key(snapshot, today)
if st.session_state.get("auto_mark_key") != am_key and (year, month) == (today.year, today.month - 1):
    marked = apply_auto_mark(snapshot, year, month, today)
    st.session_state["auto_mark_key"] = am_key
    if marked:
        save_snapshot(snapshot)
        st.toast(f"✅ Marked {marked} habit(s) done for today")

st.title(f"{PAGE_ICON} {APP_TITLE}")

# Tabs
tab1, tab2, tab3, tab4 = st.tabs(["🟡 Tracker", "📝 Habits", "📊 Insights", "💾 Data"])

with tab1:
    render_tracker_tab(snapshot, year, month, today)

with tab2:
    render_habits_tab(snapshot)

with tab3:
    render_insights_tab(snapshot, mk)

with tab4:
    render_data_tab(snapshot, mk, today)
