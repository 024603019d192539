"""Streamlit front-end for the ability score roller."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import altair as alt
import numpy as np
import pandas as pd
import streamlit as st

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from stat_core import (
    DEFAULT_AVERAGE_TRIALS,
    DEFAULT_SIMULATION_SEED,
    MAX_AVERAGE_TRIALS,
    MAX_SCORE,
    STAT_LABELS,
    STRATEGY_DESCRIPTIONS,
    STRATEGY_LABELS,
    AverageComputationResult,
    Outcome,
    Strategy,
    compute_averages,
    dice_per_trial,
    roll_outcome,
)


def reset_results() -> None:
    """Clear cached results so the page reflects new inputs."""

    st.session_state.roll_result = None
    st.session_state.average_result = None
    st.session_state.roll_error = None


def ensure_session_state_defaults() -> None:
    """Populate Streamlit session state with expected default entries."""

    st.session_state.setdefault("strategy_input", Strategy.TRADITIONAL.value)
    st.session_state.setdefault("trials_input", DEFAULT_AVERAGE_TRIALS)
    st.session_state.setdefault("seed_input", DEFAULT_SIMULATION_SEED)
    st.session_state.setdefault("use_seed", False)
    st.session_state.setdefault("roll_result", None)
    st.session_state.setdefault("average_result", None)
    st.session_state.setdefault("roll_error", None)


def format_strategy_label(value: str) -> str:
    strategy = Strategy(value)
    return f"{STRATEGY_LABELS[strategy]} ({STRATEGY_DESCRIPTIONS[strategy]})"


def selected_seed() -> int | None:
    if not st.session_state.use_seed:
        return None
    return int(st.session_state.seed_input)


def render_configuration() -> tuple[bool, bool]:
    """Render strategy and simulation inputs; return (roll, average) button states."""

    with st.container(border=True):
        st.caption("Strategy")
        st.selectbox(
            "Strategy",
            options=[member.value for member in Strategy],
            format_func=format_strategy_label,
            key="strategy_input",
            label_visibility="collapsed",
            on_change=reset_results,
        )
        strategy = Strategy(st.session_state.strategy_input)
        st.caption(f"Each trial rolls {dice_per_trial(strategy)} dice.")

        sim_col1, sim_col2 = st.columns(2)
        with sim_col1:
            st.caption("Trials to average")
            st.number_input(
                "Trials",
                min_value=1,
                max_value=MAX_AVERAGE_TRIALS,
                step=1000,
                key="trials_input",
                label_visibility="collapsed",
            )
        with sim_col2:
            st.caption("Random seed")
            st.number_input(
                "Random seed",
                min_value=0,
                step=1,
                key="seed_input",
                label_visibility="collapsed",
                disabled=not st.session_state.use_seed,
            )
        st.checkbox("Use a fixed seed", key="use_seed")

        roll_col, average_col = st.columns(2)
        roll_clicked = roll_col.button("Roll once", type="primary")
        average_clicked = average_col.button("Average trials", type="secondary")
    return roll_clicked, average_clicked


def roll_once() -> None:
    st.session_state.roll_error = None
    try:
        st.session_state.roll_result = roll_outcome(
            st.session_state.strategy_input,
            seed=selected_seed(),
        )
    except Exception as exc:  # surface any core failure to the user
        st.session_state.roll_error = str(exc)


def average_trials() -> None:
    st.session_state.roll_error = None
    st.session_state.average_result = None
    try:
        with st.spinner("Rolling trials…"):
            st.session_state.average_result = compute_averages(
                st.session_state.strategy_input,
                int(st.session_state.trials_input),
                seed=selected_seed(),
            )
    except Exception as exc:  # surface any core failure to the user
        st.session_state.roll_error = str(exc)


def render_outcome(outcome: Outcome) -> None:
    with st.container(border=True):
        st.markdown("**Rolled scores**")
        columns = st.columns(len(outcome))
        for column, label, score in zip(columns, STAT_LABELS, outcome):
            column.metric(label, score)
        st.caption(str(outcome))


def build_means_frame(means: Sequence[float]) -> pd.DataFrame:
    """Return a table of per-position means ready for display and charting."""

    values = np.asarray(means, dtype=float)
    return pd.DataFrame(
        {
            "position": STAT_LABELS[: len(values)],
            "mean": values.round(2),
        }
    )


def render_average_summary(result: AverageComputationResult) -> None:
    """Render per-position means as metrics, a table, and a bar chart."""

    with st.container(border=True):
        st.markdown(f"**Averages over {result.trials:,} trials**")
        st.caption(
            f"{format_strategy_label(result.strategy.value)} · computed in "
            f"{result.compute_seconds:.2f} seconds"
        )
        frame = build_means_frame(result.means)
        metric_cols = st.columns(len(frame))
        for column, row in zip(metric_cols, frame.itertuples(index=False)):
            column.metric(row.position, f"{row.mean:.2f}")

        chart = alt.Chart(frame).mark_bar(
            color="#6366f1",
            opacity=0.9,
            cornerRadiusTopLeft=2,
            cornerRadiusTopRight=2,
        ).encode(
            x=alt.X(
                "position:N",
                title="Sorted position",
                sort=STAT_LABELS,
                axis=alt.Axis(labelAngle=0, labelFontSize=11, titleFontSize=12),
            ),
            y=alt.Y(
                "mean:Q",
                title="Mean score",
                scale=alt.Scale(domain=(0, MAX_SCORE)),
                axis=alt.Axis(format=".0f", labelFontSize=11, titleFontSize=12),
            ),
            tooltip=[
                alt.Tooltip("position:N", title="Position"),
                alt.Tooltip("mean:Q", title="Mean", format=".2f"),
            ],
        ).properties(height=240)
        chart = chart.configure_view(strokeOpacity=0)
        chart = chart.configure_axis(gridColor="#e2e8f0")
        st.altair_chart(chart, use_container_width=True)
        st.caption(result.format_means())


def main() -> None:
    """Entry point used by Streamlit."""

    st.set_page_config(page_title="Ability Score Roller", layout="centered")
    ensure_session_state_defaults()
    st.title("Ability Score Roller")

    roll_clicked, average_clicked = render_configuration()
    if roll_clicked:
        roll_once()
    if average_clicked:
        average_trials()

    if st.session_state.roll_error:
        st.error(f"Rolling failed: {st.session_state.roll_error}")
    if isinstance(st.session_state.roll_result, Outcome):
        render_outcome(st.session_state.roll_result)
    if isinstance(st.session_state.average_result, AverageComputationResult):
        render_average_summary(st.session_state.average_result)


if __name__ == "__main__":
    main()
