# ui/components/session.py
import logging
from typing import Tuple

import streamlit as st

from core.config import DEFAULT_HABITS, HABIT_STORE_PATH
from core.models import Snapshot
from core.time_utils import add_months, current_month
from data_access.snapshot_repo import read_store, write_store
from services.habits_service import seed_default_habits

logger = logging.getLogger(__name__)

def get_snapshot() -> Snapshot:
    """The session's snapshot, loaded from the store file on first access."""
    if "snapshot" not in st.session_state:
        snap = read_store(HABIT_STORE_PATH)
        if snap is None:
            snap = Snapshot()
            seed_default_habits(snap, DEFAULT_HABITS)
            save_snapshot(snap)
        st.session_state["snapshot"] = snap
    return st.session_state["snapshot"]

def replace_snapshot(snap: Snapshot) -> None:
    st.session_state["snapshot"] = snap
    save_snapshot(snap)

def save_snapshot(snap: Snapshot) -> None:
    try:
        write_store(HABIT_STORE_PATH, snap)
    except OSError as e:
        logger.error("could not save %s: %s", HABIT_STORE_PATH, e)
        st.error(f"❌ Could not save your data: {e}")

def viewed_month() -> Tuple[int, int]:
    if "view" not in st.session_state:
        st.session_state["view"] = current_month()
    return st.session_state["view"]

def shift_viewed_month(delta: int) -> None:
    y, m = viewed_month()
    st.session_state["view"] = add_months(y, m, delta)

def reset_viewed_month() -> None:
    st.session_state["view"] = current_month()
