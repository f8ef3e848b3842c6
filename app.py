"""
Drill Pipe Tension-Torque Capacity Web App
Combined tension and torsion yield envelope of the drill pipe body

Select pipe size, nominal weight, grade and safety factor; the app plots
the maximum allowable tension against applied torque with and without
the safety factor, in the selected display units.
"""

from typing import Any, Dict

import plotly.graph_objects as go
import streamlit as st

import config
from analyzer import (
    InputValidationError,
    PipeSelection,
    TensionCapacityAnalyzer,
    TORQUE_COLUMN,
    RAW_TENSION_COLUMN,
    DERATED_TENSION_COLUMN,
)
from calculations.calcs_units import TORQUE_UNITS, TENSION_UNITS, torque_unit_label, tension_unit_label
from logging_config import configure_logging, get_logger
from reference_data import drill_pipe_specs

logger = get_logger(__name__)


def status_pill(text: str, positive: bool) -> str:
    color = config.COLOR_SUCCESS if positive else config.COLOR_ALERT
    return f"<span style='background:{color}; color:#ffffff; padding:6px 12px; border-radius:999px; font-weight:700;'>{text}</span>"


def render_hero():
    st.markdown(
        f"""
        <div style='background:{config.COLOR_PRIMARY}; border-radius:18px; padding:1.2rem; color:#e2e8f0;'>
            <div style='font-size:2.2rem; font-weight:800; color:#ffffff;'>Drill Pipe Tension-Torque Capacity</div>
            <div style='color:#cbd5e1;'>Maximum allowable tension vs. applied torque, pipe body yield envelope</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def initialize_state():
    """Initialize session state with the first pipe size and its lightest weight"""
    first_size = next(iter(drill_pipe_specs.PIPE_SPECS))
    for key, value in {
        "pipe_size": first_size,
        "nominal_weight": drill_pipe_specs.get_nominal_weights(first_size)[0],
        "grade": config.DEFAULT_GRADE,
        "safety_factor_percent": config.DEFAULT_SAFETY_FACTOR_PERCENT,
        "torque_unit": config.DEFAULT_TORQUE_UNIT,
        "tension_unit": config.DEFAULT_TENSION_UNIT,
        "last_selection": None,
        "last_result": None,
    }.items():
        st.session_state.setdefault(key, value)


def on_pipe_size_change():
    # Nominal weight list follows the pipe size; select its first entry
    st.session_state.nominal_weight = drill_pipe_specs.get_nominal_weights(st.session_state.pipe_size)[0]


def render_input_sections():
    st.subheader("Pipe Selection")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.selectbox("Pipe Size", list(drill_pipe_specs.PIPE_SPECS.keys()), key="pipe_size", on_change=on_pipe_size_change)
    with col2:
        st.selectbox(
            "Nominal Weight",
            drill_pipe_specs.get_nominal_weights(st.session_state.pipe_size),
            key="nominal_weight",
            format_func=lambda w: f"{w:.2f} lb/ft",
        )
    with col3:
        st.selectbox("Grade", list(drill_pipe_specs.GRADE_PROPERTIES.keys()), key="grade")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.selectbox("Safety Factor (%)", config.SAFETY_FACTOR_OPTIONS, key="safety_factor_percent")
    with col2:
        st.selectbox("Torque Unit", list(TORQUE_UNITS.keys()), key="torque_unit", format_func=torque_unit_label)
    with col3:
        st.selectbox("Tension Unit", list(TENSION_UNITS.keys()), key="tension_unit", format_func=tension_unit_label)


def build_selection() -> PipeSelection:
    """Build the pipe selection from session state"""
    return PipeSelection(
        pipe_size=st.session_state.pipe_size,
        nominal_weight=st.session_state.nominal_weight,
        grade=st.session_state.grade,
        safety_factor_percent=st.session_state.safety_factor_percent,
        torque_unit=st.session_state.torque_unit,
        tension_unit=st.session_state.tension_unit,
    )


def build_chart(result: Dict[str, Any]) -> go.Figure:
    sel = result['selection']
    table = result['table']

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=table[TORQUE_COLUMN], y=table[RAW_TENSION_COLUMN],
        mode='lines', line=dict(color=config.COLOR_RAW_CURVE, width=2, shape='spline'),
        name="Max Allowable Tension (No SF)",
    ))
    fig.add_trace(go.Scatter(
        x=table[TORQUE_COLUMN], y=table[DERATED_TENSION_COLUMN],
        mode='lines', line=dict(color=config.COLOR_DERATED_CURVE, width=2, shape='spline'),
        name=f"Max Allowable Tension ({sel['safety_factor_percent']}% SF)",
    ))
    fig.update_layout(
        height=520,
        legend=dict(orientation='h', yanchor='bottom', y=1.02, x=0),
        margin=dict(l=20, r=20, t=40, b=20),
    )
    fig.update_xaxes(title_text=f"Torque ({torque_unit_label(sel['torque_unit'])})")
    fig.update_yaxes(title_text=f"Tension ({tension_unit_label(sel['tension_unit'])})")
    return fig


def render_results(result: Dict[str, Any]):
    sel = result['selection']
    section = result['section']

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("OD / ID", f"{result['od']:.3f} / {section.inside_diameter:.3f} in")
    with col2:
        st.metric("Area", f"{section.area:.3f} in²")
    with col3:
        st.metric("Yield Strength", f"{result['yield_psi']:,.0f} psi")
    with col4:
        st.metric("Pure Tension Capacity", f"{result['pure_tension_capacity'] / 1000:,.1f} klb")

    st.plotly_chart(build_chart(result), use_container_width=True)

    if result['infeasible_samples']:
        st.caption(
            f"{result['infeasible_samples']} torque sample(s) above the pure torsional capacity are not plotted."
        )

    table = result['table'].rename(columns={
        TORQUE_COLUMN: f"{TORQUE_COLUMN} ({torque_unit_label(sel['torque_unit'])})",
        RAW_TENSION_COLUMN: f"{RAW_TENSION_COLUMN} ({tension_unit_label(sel['tension_unit'])})",
        DERATED_TENSION_COLUMN: f"Max Tension ({sel['safety_factor_percent']}% SF) ({tension_unit_label(sel['tension_unit'])})",
    })
    with st.expander("Capacity Table"):
        st.dataframe(table.round(2), use_container_width=True, hide_index=True)


def main():
    configure_logging(config.LOG_LEVEL, format_json=config.LOG_JSON)
    st.set_page_config(page_title="Tension-Torque Capacity", layout="wide")
    render_hero()
    initialize_state()

    render_input_sections()

    selection = build_selection()
    up_to_date = st.session_state.last_selection == selection

    col1, col2 = st.columns([1, 3])
    with col1:
        calculate = st.button("Calculate", type="primary", disabled=up_to_date, use_container_width=True)
    with col2:
        if up_to_date:
            st.markdown(status_pill("Calculations up to date", True), unsafe_allow_html=True)
        else:
            st.markdown(status_pill("Calculations NOT up to date", False), unsafe_allow_html=True)

    if calculate:
        try:
            result = TensionCapacityAnalyzer(selection).run()
        except InputValidationError as e:
            logger.warning("invalid_selection", field=e.field, error=str(e))
            st.error(str(e))
        else:
            st.session_state.last_selection = selection
            st.session_state.last_result = result
            st.rerun()

    if st.session_state.last_result is not None:
        render_results(st.session_state.last_result)
    else:
        st.info("Select a pipe, grade and safety factor, then click Calculate.")

    st.markdown("---")
    st.caption(
        f"Torque range 0 - {config.DEFAULT_MAX_TORQUE_FTLB:,} ft-lb in {config.DEFAULT_TORQUE_STEP_FTLB} ft-lb steps | "
        f"Pipe body yield only, tool joints not checked"
    )


if __name__ == "__main__":
    main()
