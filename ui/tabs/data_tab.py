# ui/tabs/data_tab.py
from datetime import date

import streamlit as st

from core.errors import HabitImportError
from core.models import Snapshot
from services.csv_codec import export_csv, import_csv
from services.records_service import clear_month
from ui.components.session import replace_snapshot, save_snapshot

def render_data_tab(snapshot: Snapshot, mk: str, today: date):
    st.header("💾 Data")

    st.subheader("⬇️ Export")
    st.download_button("Export all records (CSV)",
        export_csv(snapshot).encode("utf-8"),
        file_name=f"habits_{today.isoformat()}.csv",
        mime="text/csv")

    st.divider()
    st.subheader("⬆️ Import")
    st.caption("Importing **replaces** all current habits and records.")
    upload = st.file_uploader("CSV file", type=["csv"])
    if upload is not None:
        try:
            result = import_csv(upload.getvalue().decode("utf-8-sig"))
        except UnicodeDecodeError:
            st.error("❌ The file is not valid UTF-8 text.")
        except HabitImportError as e:
            st.error(f"❌ {e}")
        else:
            st.info(f"{result.valid_rows} valid row(s), {result.invalid_rows} skipped, "
                    f"{len(result.snapshot.habits)} habit(s).")
            sure = st.checkbox("I understand my current data will be overwritten", key="confirm_import")
            if st.button("Replace my data", type="primary", disabled=not sure):
                result.snapshot.extras = dict(snapshot.extras)
                replace_snapshot(result.snapshot)
                st.session_state.pop("auto_mark_key", None)
                st.toast("✅ Import complete")
                st.rerun()

    st.divider()
    st.subheader(f"🧹 Clear {mk}")
    sure = st.checkbox(f"Delete every mark in {mk}", key="confirm_clear")
    if st.button("Clear month", disabled=not sure):
        clear_month(snapshot, mk)
        save_snapshot(snapshot)
        st.rerun()
