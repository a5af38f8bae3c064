"""Pure translation of configuration values and series into gnuplot script text.

Every function here is deterministic: the same inputs always produce the same
text. Each supplied option renders to at most one directive line (several
gnuplot commands on one option are joined with ``; ``) and an omitted option
renders nothing.
"""

from __future__ import annotations

import math
from typing import Sequence

from gnuplot_session.errors import InvalidValueError
from gnuplot_session.series import Series
from gnuplot_session.values import (
    Color,
    Eps,
    Filling,
    Labels,
    NamedColor,
    Output,
    Pattern,
    Png,
    Qt,
    Range,
    Rgb,
    Solid,
    TerminalKind,
    Titles,
    Wxt,
    X11,
    XRange,
    XYRange,
    YRange,
)


DATA_SENTINEL = "e"
TIME_AXIS_DIRECTIVE = "set xdata time; set timefmt '%s'"
NUMERIC_AXIS_DIRECTIVE = "set xdata"

PLOT_STYLES = {
    "lines": "lines",
    "points": "points",
    "steps": "steps",
    "histogram": "histograms",
    "candlesticks": "candlesticks",
}

USING_COLUMNS = {
    "y": "1",
    "xy": "1:2",
    "timey": "1:2",
    "candles": "1:2:3:4:5",
}


def quote(text: str) -> str:
    """Single-quote ``text`` for gnuplot; quotes are doubled and line breaks flattened."""
    flat = text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
    return "'" + flat.replace("'", "''") + "'"


def format_number(value: float) -> str:
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    return repr(value)


def render_color(color: Color) -> str:
    if isinstance(color, NamedColor):
        return quote(color.name)
    if isinstance(color, Rgb):
        return quote(f"#{color.r:02x}{color.g:02x}{color.b:02x}")
    raise TypeError(f"unsupported color: {color!r}")


def _font_suffix(font: str | None) -> str:
    return "" if font is None else f" font {quote(font)}"


def _terminal(kind: TerminalKind, font: str | None) -> str:
    font_part = _font_suffix(font)
    if isinstance(kind, Wxt):
        return f"set terminal wxt persist{font_part}; unset output"
    if isinstance(kind, X11):
        return f"set terminal x11 persist{font_part}; unset output"
    if isinstance(kind, Qt):
        return f"set terminal qt persist{font_part}; unset output"
    if isinstance(kind, Png):
        return f"set terminal pngcairo{font_part}; set output {quote(kind.path)}"
    if isinstance(kind, Eps):
        return f"set terminal postscript eps enhanced color{font_part}; set output {quote(kind.path)}"
    raise TypeError(f"unsupported terminal kind: {kind!r}")


def render_output(output: Output) -> str:
    return _terminal(output.kind, output.font)


def render_fill(fill: Filling) -> str:
    if isinstance(fill, Solid):
        return "set style fill solid"
    if isinstance(fill, Pattern):
        return f"set style fill pattern {fill.index}"
    raise TypeError(f"unsupported filling: {fill!r}")


def _span(lo: float, hi: float) -> str:
    return f"[{format_number(lo)}:{format_number(hi)}]"


def render_range(range_: Range) -> str:
    if isinstance(range_, XRange):
        return f"set xrange {_span(range_.min, range_.max)}"
    if isinstance(range_, YRange):
        return f"set yrange {_span(range_.min, range_.max)}"
    if isinstance(range_, XYRange):
        return f"set xrange {_span(range_.xmin, range_.xmax)}; set yrange {_span(range_.ymin, range_.ymax)}"
    raise TypeError(f"unsupported range: {range_!r}")


def render_labels(labels: Labels) -> str | None:
    parts = []
    if labels.x is not None:
        parts.append(f"set xlabel {quote(labels.x)}")
    if labels.y is not None:
        parts.append(f"set ylabel {quote(labels.y)}")
    return "; ".join(parts) or None


def _tics(axis: str, names: tuple[str, ...] | None, rotate: int | None) -> str | None:
    if names is None and rotate is None:
        return None
    cmd = f"set {axis}tics"
    if names is not None:
        cmd += " (" + ", ".join(f"{quote(name)} {i}" for i, name in enumerate(names)) + ")"
    if rotate is not None:
        cmd += f" rotate by {rotate}"
    return cmd


def render_titles(titles: Titles) -> str | None:
    parts = [
        p
        for p in (_tics("x", titles.x, titles.xrotate), _tics("y", titles.y, titles.yrotate))
        if p is not None
    ]
    return "; ".join(parts) or None


def render_options(
    *,
    output: Output | None = None,
    title: str | None = None,
    use_grid: bool | None = None,
    fill: Filling | None = None,
    range: Range | None = None,
    labels: Labels | None = None,
    titles: Titles | None = None,
) -> list[str]:
    lines: list[str | None] = []
    if output is not None:
        lines.append(render_output(output))
    if title is not None:
        lines.append(f"set title {quote(title)}")
    if use_grid is not None:
        lines.append("set grid" if use_grid else "unset grid")
    if fill is not None:
        lines.append(render_fill(fill))
    if range is not None:
        lines.append(render_range(range))
    if labels is not None:
        lines.append(render_labels(labels))
    if titles is not None:
        lines.append(render_titles(titles))
    return [line for line in lines if line is not None]


def render_reset(
    *,
    fill: Filling | None = None,
    range: Range | None = None,
    labels: Labels | None = None,
    titles: Titles | None = None,
) -> list[str]:
    """Default-restoring directives for each dimension passed.

    Labels and titles reset only the axes they mention; an empty value resets both.
    """
    lines: list[str] = []
    if fill is not None:
        lines.append("set style fill empty")
    if range is not None:
        if isinstance(range, XRange):
            lines.append("set autoscale x")
        elif isinstance(range, YRange):
            lines.append("set autoscale y")
        elif isinstance(range, XYRange):
            lines.append("set autoscale xy")
        else:
            raise TypeError(f"unsupported range: {range!r}")
    if labels is not None:
        both = labels.x is None and labels.y is None
        parts = []
        if both or labels.x is not None:
            parts.append("unset xlabel")
        if both or labels.y is not None:
            parts.append("unset ylabel")
        lines.append("; ".join(parts))
    if titles is not None:
        x_set = titles.x is not None or titles.xrotate is not None
        y_set = titles.y is not None or titles.yrotate is not None
        both = not x_set and not y_set
        parts = []
        if both or x_set:
            parts.append("set xtics auto norotate")
        if both or y_set:
            parts.append("set ytics auto norotate")
        lines.append("; ".join(parts))
    return lines


def render_clause(series: Series) -> str:
    if series.is_inline:
        parts = [f"'-' using {USING_COLUMNS[series.shape]}"]
    else:
        if series.expression is None:
            raise TypeError("expression series requires an expression")
        parts = [series.expression]
    parts.append(f"with {PLOT_STYLES[series.kind]}")
    parts.append("notitle" if series.title is None else f"title {quote(series.title)}")
    if series.weight is not None:
        parts.append(f"lw {series.weight}")
    if series.color is not None:
        parts.append(f"lc rgb {render_color(series.color)}")
    if series.fill is not None:
        if isinstance(series.fill, Solid):
            parts.append("fs solid")
        elif isinstance(series.fill, Pattern):
            parts.append(f"fs pattern {series.fill.index}")
        else:
            raise TypeError(f"unsupported filling: {series.fill!r}")
    return " ".join(parts)


def render_data_block(series: Series) -> list[str]:
    if not series.is_inline:
        return []
    lines = []
    for row in series.rows:
        if series.shape == "candles":
            # gnuplot reads candlesticks as date:open:low:high:close
            ts, open_, high, low, close = row
            row = (ts, open_, low, high, close)
        lines.append(" ".join(format_number(v) for v in row))
    lines.append(DATA_SENTINEL)
    return lines


def render_plot(series_list: Sequence[Series], *, reset_time_axis: bool = False) -> list[str]:
    """Plot directive plus inline blocks.

    ``reset_time_axis`` restores a numeric x axis when an earlier plot on the
    same gnuplot process switched it to time.
    """
    if not series_list:
        raise ValueError("at least one series is required")
    lines = []
    if any(s.is_time for s in series_list):
        lines.append(TIME_AXIS_DIRECTIVE)
    elif reset_time_axis:
        lines.append(NUMERIC_AXIS_DIRECTIVE)
    lines.append("plot " + ", ".join(render_clause(s) for s in series_list))
    for s in series_list:
        lines.extend(render_data_block(s))
    return lines


def _join(lines: list[str]) -> str:
    return "".join(line + "\n" for line in lines)


def render_set_script(**options) -> str:
    return _join(render_options(**options))


def render_unset_script(**dimensions) -> str:
    return _join(render_reset(**dimensions))


def render_script(series_list: Sequence[Series], *, reset_time_axis: bool = False, **options) -> str:
    """Full self-contained plot script: per-call options, then the plot directive and data."""
    return _join(render_options(**options) + render_plot(series_list, reset_time_axis=reset_time_axis))


def validate_color(color: Color) -> None:
    if isinstance(color, Rgb):
        for name, value in (("r", color.r), ("g", color.g), ("b", color.b)):
            if not 0 <= value <= 255:
                raise InvalidValueError(f"rgb component {name}={value} outside 0..255")


def validate_range(range_: Range) -> None:
    if isinstance(range_, (XRange, YRange)):
        spans = [("range", range_.min, range_.max)]
    elif isinstance(range_, XYRange):
        spans = [("xrange", range_.xmin, range_.xmax), ("yrange", range_.ymin, range_.ymax)]
    else:
        raise InvalidValueError(f"unsupported range: {range_!r}")
    for name, lo, hi in spans:
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise InvalidValueError(f"{name} bounds must be finite: [{lo}:{hi}]")
        if lo >= hi:
            raise InvalidValueError(f"{name} min must be below max: [{lo}:{hi}]")


def validate_fill(fill: Filling) -> None:
    if isinstance(fill, Pattern) and fill.index < 0:
        raise InvalidValueError(f"fill pattern index must be >= 0, got {fill.index}")


def validate_options(
    *,
    output: Output | None = None,
    title: str | None = None,
    use_grid: bool | None = None,
    fill: Filling | None = None,
    range: Range | None = None,
    labels: Labels | None = None,
    titles: Titles | None = None,
) -> None:
    if fill is not None:
        validate_fill(fill)
    if range is not None:
        validate_range(range)


def validate_series(series: Series) -> None:
    if series.weight is not None and series.weight < 0:
        raise InvalidValueError(f"series weight must be >= 0, got {series.weight}")
    if series.color is not None:
        validate_color(series.color)
    if series.fill is not None:
        validate_fill(series.fill)
