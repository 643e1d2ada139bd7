"""Streamlit UI for DeskLayout with CSV preview and validation."""
from __future__ import annotations

# Add src to sys.path so desk_layout can be found without installing
import sys
import os
import io
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from desk_layout.config import load_settings
from desk_layout.csv_loader import layout_frame, missing_columns, people_from_frame
from desk_layout.desk_map import generate_desk_line_map
from desk_layout.logging_setup import setup_logging
from desk_layout.models import UnsetPolicy
from desk_layout.solver import DeskLayoutModel, adjacent_conflicts

settings = load_settings()
setup_logging(settings.log_level)

# -----------------------------
# Helpers
# -----------------------------

def uploadedfile_to_df(uploaded_file) -> pd.DataFrame | None:
    """Read a Streamlit UploadedFile or file-like object into a DataFrame."""
    if uploaded_file is None:
        return None
    if hasattr(uploaded_file, "read"):
        uploaded_file.seek(0)
        return pd.read_csv(
            io.StringIO(uploaded_file.read().decode("utf-8")),
            dtype={"id": str, "team_id": str},
        )
    return pd.read_csv(uploaded_file, dtype={"id": str, "team_id": str})

def validate_columns(df: pd.DataFrame, file_label: str) -> bool:
    """Check required columns and show an error if any are missing."""
    missing = missing_columns(df)
    if missing:
        st.error(f"Error in {file_label}: missing columns: {', '.join(missing)}")
        return False
    return True

# -----------------------------
# Sidebar options
# -----------------------------

st.sidebar.header("Layout Options")
policies = [p.value for p in UnsetPolicy]
unset_policy = st.sidebar.selectbox(
    "People without a dog status",
    policies,
    index=policies.index(settings.unset_policy.value),
    help="buffer: seat them like dog lovers. drop: leave them out. raise: refuse to lay out.",
)

# -----------------------------
# Main UI and previews
# -----------------------------

st.title("Desk Layout")

_people_file = st.file_uploader("People CSV", type="csv")

people_df = None
people_valid = False

if _people_file is not None:
    people_df = uploadedfile_to_df(_people_file)
    st.subheader("People preview")
    st.dataframe(people_df, use_container_width=True)
    people_valid = validate_columns(people_df, "people.csv")

run_disabled = not (_people_file and people_valid)
run_clicked = st.button("Lay out desks", disabled=run_disabled, key="run_layout_button")

# -----------------------------
# Solve
# -----------------------------

if run_clicked and not run_disabled:
    try:
        model = DeskLayoutModel(unset_policy=unset_policy)
        model.build(people_from_frame(people_df))
        blocks = model.blocks()
        layout = [person for block in blocks for person in block.members]

        result_df = layout_frame(layout)
        st.subheader("Desk order")
        st.dataframe(result_df, use_container_width=True)

        team_df = pd.DataFrame(
            {
                "team": [b.name for b in blocks],
                "category": [b.category.value for b in blocks],
                "members": [", ".join(p.name for p in b.members) for b in blocks],
            }
        )
        st.subheader("Team blocks")
        st.dataframe(team_df, use_container_width=True)

        conflicts = adjacent_conflicts(layout)
        if conflicts:
            st.warning(
                "Dog avoiders seated next to dog owners: "
                + "; ".join(f"{a.name} / {b.name}" for a, b in conflicts)
            )

        csv_bytes = result_df.to_csv(index=False).encode("utf-8")
        st.download_button(
            "Download layout as CSV",
            csv_bytes,
            file_name="desk_layout.csv",
        )

        st.subheader("Desk row")
        components.html(generate_desk_line_map(layout), height=420, scrolling=True)

    except ValueError as e:
        st.error(f"Input validation error: {e}")
        st.stop()
