"""Program recommendation & phase explorer — Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

from datetime import date

import streamlit as st

from program_engine.catalog.defaults import DEFAULT_CATALOG
from program_engine.exceptions import ProgramEngineError
from program_engine.phase.calculator import calculate_phase_state
from program_engine.phase.calendar import build_phase_calendar, phase_boundaries
from program_engine.scoring.recommender import recommend_programs

from helpers import (
    BACKGROUND_OPTIONS,
    EQUIPMENT_OPTIONS,
    FORMAT_OPTIONS,
    GOAL_OPTIONS,
    PHASE_COLORS,
    answers_from_form,
    describe_state,
    format_score,
    modifications_table,
    ranking_table,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Program Engine",
    page_icon="🏋️",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Sidebar — Assessment
# ---------------------------------------------------------------------------

st.sidebar.title("Fitness Assessment")

with st.sidebar.expander("Experience", expanded=True):
    events = st.number_input("HYROX events completed", 0, 50, 0)
    fitness_years = st.number_input("Years of general fitness", 0.0, 40.0, 2.0, step=0.5)
    background = st.selectbox("Primary training background", BACKGROUND_OPTIONS)

with st.sidebar.expander("Schedule", expanded=True):
    weekly_days = st.number_input("Training days per week", 0, 7, 4)
    session_hours = st.number_input("Average session length (h)", 0.0, 4.0, 1.0, step=0.25)
    competition_format = st.selectbox("Competition format", FORMAT_OPTIONS)

with st.sidebar.expander("Health & Equipment"):
    age = st.number_input("Age", 16, 99, 35)
    injury_history = st.checkbox("Injury history")
    injury_recent = st.checkbox("Recent injury")
    equipment = st.selectbox("Equipment access", EQUIPMENT_OPTIONS)

goals = st.sidebar.multiselect("Goals", GOAL_OPTIONS, default=["first-hyrox"])
event_date = st.sidebar.date_input("Target event date (optional)", value=None)
today = st.sidebar.date_input("Today", value=date.today())

answers = answers_from_form(
    events=int(events),
    fitness_years=float(fitness_years),
    background=background,
    weekly_days=int(weekly_days),
    session_hours=float(session_hours),
    competition_format=competition_format,
    age=int(age),
    injury_history=injury_history,
    injury_recent=injury_recent,
    goals=goals,
    equipment=equipment,
)

tab_rank, tab_phase = st.tabs(["Recommendation", "Phase & Calendar"])

result = recommend_programs(answers, DEFAULT_CATALOG)
top = result.top_program

# ---------------------------------------------------------------------------
# Tab 1: Recommendation
# ---------------------------------------------------------------------------

with tab_rank:
    st.header(top.program.name)
    st.markdown(result.reasoning_explanation)

    c1, c2, c3 = st.columns(3)
    c1.metric("Fit score", format_score(top.total_score))
    c2.metric("Sessions / week", top.metadata.weekly_frequency)
    c3.metric("Confidence", format_score(result.user_profile.difficulty_confidence))

    st.subheader("Ranked programs")
    st.dataframe(ranking_table(result), hide_index=True, use_container_width=True)

    if result.modifications:
        st.subheader("Suggested modifications")
        st.dataframe(modifications_table(result), hide_index=True, use_container_width=True)

    if result.assessment_summary is not None:
        summary = result.assessment_summary
        st.caption(
            f"{summary.experience_level} · {summary.training_background} · "
            f"{summary.time_availability} time · {summary.special_category}"
        )

# ---------------------------------------------------------------------------
# Tab 2: Phase & Calendar
# ---------------------------------------------------------------------------

with tab_phase:
    total_weeks = top.metadata.total_weeks
    try:
        state = calculate_phase_state(top.program.program_id, event_date, total_weeks, today)
    except ProgramEngineError as e:
        st.error(f"Cannot place user in program: {e}")
        st.stop()

    cols = st.columns(4)
    for col, (label, value) in zip(cols * 2, describe_state(state).items()):
        col.metric(label, value)

    horizon = st.slider("Calendar days", 7, 365, 120, step=7)
    calendar = build_phase_calendar(
        top.program.program_id, event_date, total_weeks, today, horizon
    )
    st.subheader("Phase changes")
    st.dataframe(phase_boundaries(calendar), hide_index=True)

    st.subheader("Calendar")
    st.dataframe(
        calendar.style.apply(
            lambda row: [f"background-color: {PHASE_COLORS[row['phase']]}"] * len(row),
            axis=1,
        ),
        hide_index=True,
        use_container_width=True,
    )
