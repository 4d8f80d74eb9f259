"""Display strings handed to the presentation layer"""

from typing import Optional

TAEG_PLACEHOLDER = "--- %"
BPS_PLACEHOLDER = "--- bps"


def format_taeg(taeg: Optional[float]) -> str:
    """0.1234 -> "12.34 %" """
    if taeg is None:
        return TAEG_PLACEHOLDER
    return f"{taeg * 100:.2f} %"


def format_bps(bps: Optional[int]) -> str:
    if bps is None:
        return BPS_PLACEHOLDER
    return f"{bps} bps"
