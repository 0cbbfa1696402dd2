from typing import Optional
import pandas as pd
import plotly.express as px

from .constants import CHART_TEMPLATE, OPERATION_SYMBOLS

REQUIRED_TRACE_COLUMNS = {"step", "op", "operand", "value"}


def make_chain_chart(
    trace: pd.DataFrame,
    initial=None,
    title: Optional[str] = None,
    template: str = CHART_TEMPLATE,
):
    """Line chart of the running value of a chain, one point per step.

    *trace* is the frame built by ``CalculatorSession.trace_frame``. When
    *initial* is given it is drawn as step 0.
    """
    missing = REQUIRED_TRACE_COLUMNS - set(trace.columns)
    if missing:
        raise ValueError(f"Trace is missing columns: {', '.join(sorted(missing))}")
    df = trace.copy()
    df["label"] = [
        f"{OPERATION_SYMBOLS.get(op, op)} {operand}"
        for op, operand in zip(df["op"], df["operand"])
    ]
    if initial is not None:
        start = pd.DataFrame(
            {"step": [0], "op": [""], "operand": [None], "value": [float(initial)], "label": ["start"]}
        )
        df = pd.concat([start, df], ignore_index=True)
    return px.line(
        df,
        x="step",
        y="value",
        text="label",
        markers=True,
        title=title,
        template=template,
    )


__all__ = ["make_chain_chart", "REQUIRED_TRACE_COLUMNS"]
