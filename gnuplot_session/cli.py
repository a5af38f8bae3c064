from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Sequence

import numpy as np

from . import series as series_mod
from .config import SessionConfig, load_session_config
from .errors import GnuplotSessionError
from .render import render_script, validate_options, validate_series
from .series import Series
from .session import Session
from .transcript import JsonlTranscriptSink
from .values import Eps, Labels, Output, Png, XRange, XYRange, YRange

LOGGER = logging.getLogger(__name__)

_STYLE_BUILDERS = {
    "lines": (series_mod.lines, series_mod.lines_xy, series_mod.lines_func),
    "points": (series_mod.points, series_mod.points_xy, series_mod.points_func),
    "steps": (series_mod.steps, series_mod.steps_xy, None),
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        series_list = _build_series(args)
        options = _build_options(args)
        config = _resolve_config(args)
        if args.dry_run:
            if config.strict:
                validate_options(**options)
                for s in series_list:
                    validate_series(s)
            sys.stdout.write(render_script(series_list, **options))
            return 0
        transcript = None if config.transcript_path is None else JsonlTranscriptSink(config.transcript_path)
        with Session.create(
            verbose=config.verbose,
            path=config.path,
            args=config.args,
            strict=config.strict,
            transcript=transcript,
        ) as session:
            session.plot_many(series_list, **options)
    except (GnuplotSessionError, ValueError, OSError) as exc:
        LOGGER.error("%s", exc)
        return 1
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gnuplot-session", description="Plot expressions or data files with gnuplot.")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    func = sub.add_parser("func", help="Plot one or more gnuplot expressions, e.g. 'sin(x)'.")
    func.add_argument("expressions", nargs="+")
    _add_shared_arguments(func)

    data = sub.add_parser("data", help="Plot numeric columns of a text file (first column is X when there are several).")
    data.add_argument("file", type=Path)
    data.add_argument("--delimiter", default=None, help="Column delimiter. Default: any whitespace.")
    _add_shared_arguments(data)
    return parser


def _add_shared_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--style", choices=sorted(_STYLE_BUILDERS), default="lines")
    parser.add_argument("--title", default=None)
    parser.add_argument("--xrange", default=None, metavar="MIN:MAX")
    parser.add_argument("--yrange", default=None, metavar="MIN:MAX")
    parser.add_argument("--xlabel", default=None)
    parser.add_argument("--ylabel", default=None)
    parser.add_argument("--grid", action="store_true")
    parser.add_argument(
        "--output",
        default="wxt",
        help="Terminal: wxt, x11, qt, png:PATH or eps:PATH. Default: a persistent wxt window.",
    )
    parser.add_argument("--font", default=None)
    parser.add_argument("--gnuplot", default=None, help="gnuplot executable. Default: gnuplot on PATH.")
    parser.add_argument("--config", type=Path, default=None, help="TOML session config file.")
    parser.add_argument("--dry-run", action="store_true", help="Print the script instead of running gnuplot.")
    parser.add_argument("--verbose", action="store_true", help="Echo every script sent to gnuplot.")
    parser.add_argument("--strict", action="store_true", help="Reject out-of-range colors, ranges and weights.")


def _resolve_config(args: argparse.Namespace) -> SessionConfig:
    config = load_session_config(args.config) if args.config is not None else SessionConfig()
    return SessionConfig(
        path=args.gnuplot or config.path,
        args=config.args,
        verbose=args.verbose or config.verbose,
        strict=args.strict or config.strict,
        transcript_path=config.transcript_path,
    )


def _build_series(args: argparse.Namespace) -> list[Series]:
    y_builder, xy_builder, func_builder = _STYLE_BUILDERS[args.style]
    if args.command == "func":
        if func_builder is None:
            raise ValueError(f"style {args.style!r} cannot plot expressions")
        return [func_builder(expr, title=expr) for expr in args.expressions]

    table = np.loadtxt(args.file, delimiter=args.delimiter, ndmin=2, dtype=np.float64)
    if table.shape[0] == 0:
        raise ValueError(f"no data rows in {args.file}")
    if table.shape[1] == 1:
        return [y_builder(table[:, 0], title=args.file.name)]
    x = table[:, 0]
    return [
        xy_builder(np.column_stack([x, table[:, col]]), title=f"column {col + 1}")
        for col in range(1, table.shape[1])
    ]


def _build_options(args: argparse.Namespace) -> dict[str, object]:
    options: dict[str, object] = {}
    options["output"] = _parse_output(args.output, args.font)
    if args.title is not None:
        options["title"] = args.title
    if args.grid:
        options["use_grid"] = True
    xr = None if args.xrange is None else _parse_span(args.xrange, "xrange")
    yr = None if args.yrange is None else _parse_span(args.yrange, "yrange")
    if xr is not None and yr is not None:
        options["range"] = XYRange(xr[0], xr[1], yr[0], yr[1])
    elif xr is not None:
        options["range"] = XRange(*xr)
    elif yr is not None:
        options["range"] = YRange(*yr)
    if args.xlabel is not None or args.ylabel is not None:
        options["labels"] = Labels.create(x=args.xlabel, y=args.ylabel)
    return options


def _parse_output(value: str, font: str | None) -> Output:
    kind, sep, path = value.partition(":")
    kind = kind.strip().lower()
    if kind in ("png", "eps"):
        if not sep or not path:
            raise ValueError(f"--output {kind} needs a path, e.g. {kind}:chart.{kind}")
        return Output.create(Png(path) if kind == "png" else Eps(path), font=font)
    return Output.create(kind, font=font)


def _parse_span(value: str, name: str) -> tuple[float, float]:
    lo, sep, hi = value.partition(":")
    if not sep:
        raise ValueError(f"--{name} must look like MIN:MAX")
    try:
        return float(lo), float(hi)
    except ValueError as exc:
        raise ValueError(f"--{name} bounds must be numbers: {value!r}") from exc


if __name__ == "__main__":
    raise SystemExit(main())
