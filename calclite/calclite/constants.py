"""Central constants & numeric policy."""
from decimal import ROUND_HALF_UP

BUILTIN_OPERATIONS = ["ADD", "SUBTRACT", "MULTIPLY", "DIVIDE"]

# Division results carry exactly this many fractional digits
DIVISION_SCALE = 5
ROUNDING = ROUND_HALF_UP

OPERATION_SYMBOLS = {
    "ADD": "+",
    "SUBTRACT": "-",
    "MULTIPLY": "*",
    "DIVIDE": "/",
}

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)-25s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"

CHART_TEMPLATE = "plotly"

__all__ = [
    "BUILTIN_OPERATIONS",
    "DIVISION_SCALE",
    "ROUNDING",
    "OPERATION_SYMBOLS",
    "LOG_FORMAT",
    "LOG_DATEFMT",
    "CHART_TEMPLATE",
]
