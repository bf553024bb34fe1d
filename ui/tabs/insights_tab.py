# ui/tabs/insights_tab.py
import pandas as pd
import plotly.express as px
import streamlit as st

from core.models import Snapshot
from services.records_service import completion_rate
from services.streak_service import summaries

def insights_frame(snapshot: Snapshot, mk: str) -> pd.DataFrame:
    streaks = summaries(snapshot)
    rows = []
    for h in snapshot.habits:
        rate = completion_rate(snapshot, h.id, mk)
        s = streaks[h.id]
        rows.append({
            "Habit": h.name, "Done": rate.done, "Missed": rate.missed,
            "Marked": rate.total_marked, "Completion %": rate.pct,
            "Streak": s.current_streak, "Status": "💔 Broken" if s.is_broken else "🔥 Active",
        })
    return pd.DataFrame(rows, columns=["Habit", "Done", "Missed", "Marked", "Completion %", "Streak", "Status"])

def render_insights_tab(snapshot: Snapshot, mk: str):
    st.header("📊 Progress")
    st.caption(f"Completion for **{mk}** • streaks across all months")

    df = insights_frame(snapshot, mk)
    if df.empty:
        st.info("No habits yet.")
        return

    total_done, total_marked = int(df["Done"].sum()), int(df["Marked"].sum())
    c1, c2, c3 = st.columns(3)
    with c1: st.metric("✅ Done this month", total_done)
    with c2: st.metric("❌ Missed this month", int(df["Missed"].sum()))
    with c3: st.metric("🏆 Best streak", int(df["Streak"].max()))

    st.dataframe(df, use_container_width=True, hide_index=True)

    if total_marked:
        fig = px.bar(df, x="Habit", y="Completion %", color="Status", range_y=[0, 100],
                     title=f"Completion rate ({mk})")
        fig.update_layout(title_x=0.5)
        st.plotly_chart(fig, use_container_width=True)
