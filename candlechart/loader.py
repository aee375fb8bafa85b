"""Read OHLCV series from CSV or JSON files."""

from pathlib import Path

import pandas as pd

from candlechart.models import CandlestickPoint


REQUIRED_COLUMNS = ["time", "open", "high", "low", "close", "volume"]


def _read_frame(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype={"time": str})
    if suffix == ".json":
        return pd.read_json(path, orient="records", dtype={"time": str}, convert_dates=False)
    raise ValueError(f"Unsupported file type: {path.suffix or path.name}. Use .csv or .json")


def load_series(path: Path | str) -> list[CandlestickPoint]:
    """Load candles from a file, keeping the file's row order.

    Args:
        path: CSV file with a header row, or JSON array of objects, with
            columns time, open, high, low, close and volume.

    Returns:
        List of CandlestickPoint in file order.

    Raises:
        ValueError: If the file type is unsupported or columns are missing.
        pydantic.ValidationError: If a row holds invalid values.
    """
    path = Path(path)
    df = _read_frame(path)

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is missing columns: {', '.join(missing)}")

    return [
        CandlestickPoint(
            time=str(row["time"]),
            open=float(row["open"]),
            high=float(row["high"]),
            low=float(row["low"]),
            close=float(row["close"]),
            volume=float(row["volume"]),
        )
        for _, row in df[REQUIRED_COLUMNS].iterrows()
    ]
