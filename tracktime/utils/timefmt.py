"""Time label formatting for the pointer readout and status messages."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

__all__ = ["format_time"]


def format_time(seconds: float, *, millis: bool = True) -> str:
    """Format a time value as ``mm:ss.mmm``, or ``h:mm:ss.mmm`` past one hour.

    Milliseconds round half-up (1.2345 -> 1.235). Negative input clamps to zero.
    """
    if seconds < 0:
        seconds = 0.0
    ms_total = int(
        (Decimal(str(seconds)) * 1000).to_integral_value(rounding=ROUND_HALF_UP)
    )
    h, rem = divmod(ms_total, 3_600_000)
    m, rem = divmod(rem, 60_000)
    s, ms = divmod(rem, 1000)
    text = f"{h}:{m:02d}:{s:02d}" if h else f"{m:02d}:{s:02d}"
    return f"{text}.{ms:03d}" if millis else text
