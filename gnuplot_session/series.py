from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Sequence

from gnuplot_session.adapters.normalize import (
    normalize_candles,
    normalize_pairs,
    normalize_time_pairs,
    normalize_values,
)
from gnuplot_session.values import Color, Filling, coerce_color


PlotKind = Literal["lines", "points", "steps", "histogram", "candlesticks"]
PayloadShape = Literal["y", "xy", "timey", "candles", "func"]

ColorLike = Color | str | Sequence[int]


@dataclass(frozen=True)
class Series:
    """One data trace and its styling.

    ``rows`` holds the inline payload already flattened to floats: one column
    for ``y``, two for ``xy``/``timey`` (time as POSIX seconds) and five for
    ``candles``. Expression series carry ``expression`` and no rows.
    """

    kind: PlotKind
    shape: PayloadShape
    rows: tuple[tuple[float, ...], ...] = ()
    expression: str | None = None
    title: str | None = None
    color: Color | None = None
    weight: int | None = None
    fill: Filling | None = None

    @property
    def is_inline(self) -> bool:
        return self.shape != "func"

    @property
    def is_time(self) -> bool:
        return self.shape in ("timey", "candles")

    def __len__(self) -> int:
        return len(self.rows)


def _build(
    kind: PlotKind,
    shape: PayloadShape,
    *,
    rows: tuple[tuple[float, ...], ...] = (),
    expression: str | None = None,
    title: str | None,
    color: ColorLike | None,
    weight: int | None,
    fill: Filling | None = None,
) -> Series:
    return Series(
        kind=kind,
        shape=shape,
        rows=rows,
        expression=expression,
        title=title,
        color=None if color is None else coerce_color(color),
        weight=weight,
        fill=fill,
    )


def _y_rows(data: Any) -> tuple[tuple[float, ...], ...]:
    return tuple((y,) for y in normalize_values(data))


def lines(data: Any, *, title: str | None = None, color: ColorLike | None = None, weight: int | None = None) -> Series:
    """Line plot of Y values against their index."""
    return _build("lines", "y", rows=_y_rows(data), title=title, color=color, weight=weight)


def lines_xy(data: Any, *, title: str | None = None, color: ColorLike | None = None, weight: int | None = None) -> Series:
    return _build("lines", "xy", rows=normalize_pairs(data), title=title, color=color, weight=weight)


def lines_timey(data: Any, *, title: str | None = None, color: ColorLike | None = None, weight: int | None = None) -> Series:
    return _build("lines", "timey", rows=normalize_time_pairs(data), title=title, color=color, weight=weight)


def lines_func(
    expression: str, *, title: str | None = None, color: ColorLike | None = None, weight: int | None = None
) -> Series:
    """Line plot of a gnuplot expression such as ``sin(x)``; X comes from the plot range."""
    return _build("lines", "func", expression=expression, title=title, color=color, weight=weight)


def points(data: Any, *, title: str | None = None, color: ColorLike | None = None, weight: int | None = None) -> Series:
    return _build("points", "y", rows=_y_rows(data), title=title, color=color, weight=weight)


def points_xy(data: Any, *, title: str | None = None, color: ColorLike | None = None, weight: int | None = None) -> Series:
    return _build("points", "xy", rows=normalize_pairs(data), title=title, color=color, weight=weight)


def points_timey(data: Any, *, title: str | None = None, color: ColorLike | None = None, weight: int | None = None) -> Series:
    return _build("points", "timey", rows=normalize_time_pairs(data), title=title, color=color, weight=weight)


def points_func(
    expression: str, *, title: str | None = None, color: ColorLike | None = None, weight: int | None = None
) -> Series:
    return _build("points", "func", expression=expression, title=title, color=color, weight=weight)


def steps(data: Any, *, title: str | None = None, color: ColorLike | None = None, weight: int | None = None) -> Series:
    return _build("steps", "y", rows=_y_rows(data), title=title, color=color, weight=weight)


def steps_xy(data: Any, *, title: str | None = None, color: ColorLike | None = None, weight: int | None = None) -> Series:
    return _build("steps", "xy", rows=normalize_pairs(data), title=title, color=color, weight=weight)


def steps_timey(data: Any, *, title: str | None = None, color: ColorLike | None = None, weight: int | None = None) -> Series:
    return _build("steps", "timey", rows=normalize_time_pairs(data), title=title, color=color, weight=weight)


def histogram(
    data: Any,
    *,
    title: str | None = None,
    color: ColorLike | None = None,
    weight: int | None = None,
    fill: Filling | None = None,
) -> Series:
    return _build("histogram", "y", rows=_y_rows(data), title=title, color=color, weight=weight, fill=fill)


def candlesticks(
    data: Any,
    *,
    title: str | None = None,
    color: ColorLike | None = None,
    weight: int | None = None,
    fill: Filling | None = None,
) -> Series:
    """Candlestick chart from ``(time, (open, high, low, close))`` rows."""
    return _build(
        "candlesticks", "candles", rows=normalize_candles(data), title=title, color=color, weight=weight, fill=fill
    )
