from __future__ import annotations

from collections.abc import Sequence
import datetime as dt
from decimal import Decimal
from typing import Any

import numpy as np

from gnuplot_session.errors import SeriesDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_values(values: Any, *, label: str = "y") -> tuple[float, ...]:
    arr = _coerce_numeric(values, label=label)
    if arr.ndim != 1:
        raise SeriesDataError(f"{label} must be 1-D")
    return tuple(float(v) for v in arr.tolist())


def normalize_pairs(pairs: Any, *, label: str = "xy") -> tuple[tuple[float, float], ...]:
    arr = _coerce_numeric(pairs, label=label)
    if arr.size == 0:
        return ()
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise SeriesDataError(f"{label} must be a sequence of (x, y) pairs")
    return tuple((float(x), float(y)) for x, y in arr.tolist())


def normalize_time_pairs(pairs: Any, *, label: str = "timey") -> tuple[tuple[float, float], ...]:
    if pd is not None and isinstance(pairs, pd.Series):
        pairs = list(zip(pairs.index, pairs.to_list()))
    rows = _coerce_rows(pairs, label=label)
    out: list[tuple[float, float]] = []
    for i, row in enumerate(rows):
        if len(row) != 2:
            raise SeriesDataError(f"{label} entry {i} must be a (time, y) pair")
        out.append((to_posix_seconds(row[0], label=label, index=i), _coerce_scalar(row[1], label=label, index=i)))
    return tuple(out)


def normalize_candles(rows: Any, *, label: str = "candlesticks") -> tuple[tuple[float, float, float, float, float], ...]:
    """Flatten ``(time, (open, high, low, close))`` rows to five floats each."""
    out: list[tuple[float, float, float, float, float]] = []
    for i, row in enumerate(_coerce_rows(rows, label=label)):
        if len(row) == 2 and isinstance(row[1], (Sequence, np.ndarray)) and not isinstance(row[1], str):
            ts, prices = row
        elif len(row) == 5:
            ts, prices = row[0], row[1:]
        else:
            raise SeriesDataError(f"{label} entry {i} must be (time, (open, high, low, close))")
        if len(prices) != 4:
            raise SeriesDataError(f"{label} entry {i} must carry exactly four prices")
        o, h, lo, c = (_coerce_scalar(p, label=label, index=i) for p in prices)
        out.append((to_posix_seconds(ts, label=label, index=i), o, h, lo, c))
    return tuple(out)


def to_posix_seconds(value: Any, *, label: str = "time", index: int = 0) -> float:
    """Timestamps become POSIX seconds; naive datetimes are read as UTC."""
    if pd is not None and isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    if isinstance(value, np.datetime64):
        return float(value.astype("datetime64[ns]").astype(np.int64)) / 1e9
    if isinstance(value, dt.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=dt.timezone.utc)
        return value.timestamp()
    if isinstance(value, dt.date):
        return dt.datetime(value.year, value.month, value.day, tzinfo=dt.timezone.utc).timestamp()
    return _coerce_scalar(value, label=label, index=index)


def _coerce_rows(value: Any, *, label: str) -> list[Sequence[Any]]:
    if isinstance(value, np.ndarray):
        return [tuple(row) for row in value.tolist()]
    if pd is not None and isinstance(value, pd.DataFrame):
        return [tuple(row) for row in value.itertuples(index=False, name=None)]
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        rows: list[Sequence[Any]] = []
        for i, row in enumerate(value):
            if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
                raise SeriesDataError(f"{label} entry {i} must be a tuple, got {row!r}")
            rows.append(row)
        return rows
    raise SeriesDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, (pd.Series, pd.DataFrame)):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise SeriesDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape, dtype=np.float64)
    for idx, raw in np.ndenumerate(arr):
        out[idx] = _coerce_scalar(raw, label=label, index=idx[0] if idx else 0)
    return out


def _coerce_scalar(raw: Any, *, label: str, index: int) -> float:
    if raw is None:
        return float("nan")
    if isinstance(raw, Decimal):
        return float(raw)
    if isinstance(raw, (str, bytes)):
        raise SeriesDataError(f"{label} contains non-numeric value at index {index}: {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise SeriesDataError(f"{label} contains non-numeric value at index {index}: {raw!r}") from exc
