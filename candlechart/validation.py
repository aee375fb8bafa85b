"""OHLC consistency checks.

Inconsistent points are reported, never corrected: the chart draws them
as given, which shows up as inverted wicks or bodies outside the wick.
"""

from typing import Sequence

from pydantic import BaseModel, Field

from candlechart.models import CandlestickPoint


class OhlcIssue(BaseModel):
    """A single consistency problem found in a series."""

    index: int = Field(..., ge=0, description="Position of the point in the series")
    time: str = Field(..., description="Time label of the point")
    message: str = Field(..., description="Description of the problem")

    model_config = {"frozen": True}


def check_point(point: CandlestickPoint) -> list[str]:
    """Return the consistency problems of a single point."""
    problems = []
    if point.high < point.low:
        problems.append(f"high {point.high} is below low {point.low}")
    if point.high < max(point.open, point.close):
        problems.append(f"high {point.high} is below open/close")
    if point.low > min(point.open, point.close):
        problems.append(f"low {point.low} is above open/close")
    return problems


def check_ohlc(series: Sequence[CandlestickPoint]) -> list[OhlcIssue]:
    """Check ``low <= open, close <= high`` for every point.

    Returns:
        One OhlcIssue per problem, in series order. Empty when consistent.
    """
    issues = []
    for index, point in enumerate(series):
        for message in check_point(point):
            issues.append(OhlcIssue(index=index, time=point.time, message=message))
    return issues
