import logging

import streamlit as st

from calclite import (
    CalculatorError,
    CalculatorSession,
    setup_logging,
)
from calclite.charts import make_chain_chart
from calclite.constants import OPERATION_SYMBOLS
from calclite.presets import PRESETS, register_preset

st.set_page_config(page_title="CalcLite", layout="wide")

if 'startup_initialized' not in st.session_state:
    setup_logging(logging.INFO)
    st.session_state['session'] = CalculatorSession()
    st.session_state['chain_steps'] = []
    st.session_state['startup_initialized'] = True

session: CalculatorSession = st.session_state['session']
calc = session.calculator

st.sidebar.title("CalcLite")
# Custom operations come from fixed presets (no free-form expressions)
with st.sidebar.expander("Custom operations", expanded=True):
    available = [name for name in PRESETS if name not in calc.registry]
    if available:
        preset = st.selectbox(
            "Preset",
            available,
            format_func=lambda n: f"{n}: {PRESETS[n][0]}",
            key="preset_sel",
        )
        if st.button("Register", key="register_btn"):
            try:
                register_preset(calc, preset)
                st.success(f"Registered {preset}")
                st.rerun()
            except CalculatorError as exc:
                st.error(str(exc))
    else:
        st.caption("All presets registered.")
    st.write("Available:", ", ".join(calc.operations()))


def _fmt(name: str) -> str:
    sym = OPERATION_SYMBOLS.get(name)
    return f"{name} ({sym})" if sym else name


tab_single, tab_chain, tab_history = st.tabs(["Calculate", "Chain", "History"])

with tab_single:
    cols = st.columns([2, 2, 2])
    with cols[0]:
        a = st.number_input("a", value=0.0, format="%.6f", key="single_a")
    with cols[1]:
        op = st.selectbox("Operation", calc.operations(), format_func=_fmt, key="single_op")
    with cols[2]:
        b = st.number_input("b", value=0.0, format="%.6f", key="single_b")
    if st.button("=", key="calc_btn"):
        try:
            result = session.calculate(op, a, b)
            st.metric("Result", str(result))
        except CalculatorError as exc:
            st.error(str(exc))

with tab_chain:
    initial = st.number_input("Initial value", value=0.0, format="%.6f", key="chain_initial")
    cols = st.columns([3, 3, 1])
    with cols[0]:
        step_op = st.selectbox("Operation", calc.operations(), format_func=_fmt, key="chain_op")
    with cols[1]:
        step_operand = st.number_input("Operand", value=0.0, format="%.6f", key="chain_operand")
    with cols[2]:
        if st.button("Add step", key="add_step_btn"):
            st.session_state['chain_steps'].append(
                {"op": step_op, "operand": step_operand}
            )
    steps = st.session_state['chain_steps']
    if steps:
        st.table([
            {"#": i, "op": _fmt(s["op"]), "operand": s["operand"]}
            for i, s in enumerate(steps, start=1)
        ])
        c1, c2 = st.columns([1, 1])
        with c1:
            run = st.button("Run chain", key="run_chain_btn")
        with c2:
            if st.button("Clear steps", key="clear_steps_btn"):
                st.session_state['chain_steps'] = []
                st.rerun()
        if run:
            ops = [s["op"] for s in steps]
            operands = [s["operand"] for s in steps]
            try:
                trace = session.trace_chain(initial, ops, operands)
                session.log_trace(trace)
            except CalculatorError as exc:
                st.error(str(exc))
            else:
                st.metric("Result", str(trace[-1]["result"]))
                frame = session.trace_frame(trace)
                st.plotly_chart(
                    make_chain_chart(frame, initial=initial, title="Running value"),
                    use_container_width=True,
                )

with tab_history:
    hist = session.to_frame()
    if hist.empty:
        st.info("No calculations yet.")
    else:
        st.dataframe(hist.astype(str), use_container_width=True)
        if st.button("Clear history", key="clear_hist_btn"):
            session.clear()
            st.rerun()
