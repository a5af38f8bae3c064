from __future__ import annotations

import argparse
import datetime as dt
import math

from gnuplot_session import BLUE, GREEN, RED, SOLID, Labels, Output, Session, Titles, XYRange, series


def main() -> None:
    parser = argparse.ArgumentParser(description="Draw a few gnuplot charts through one session.")
    parser.add_argument("--gnuplot", default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    start = dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc)
    candles = []
    price = 100.0
    for day in range(20):
        open_ = price
        close = price + math.sin(day) * 3.0
        candles.append((start + dt.timedelta(days=day), (open_, max(open_, close) + 1.0, min(open_, close) - 1.0, close)))
        price = close

    with Session.create(verbose=args.verbose, path=args.gnuplot) as gp:
        gp.plot_many(
            [
                series.lines_func("sin(x)", title="Plot a line", color=BLUE),
                series.points_func("cos(x)", title="Plot points", color=GREEN),
            ],
            output=Output.create("wxt"),
            range=XYRange(-10, 10, -1.5, 1.5),
        )
        gp.set(title="Weekly counts", use_grid=True, labels=Labels.create(x="day", y="count"))
        gp.plot(
            series.histogram([3, 5, 2, 8, 6], title="counts", color=RED, fill=SOLID),
            titles=Titles.create(x=["mon", "tue", "wed", "thu", "fri"], xrotate=45),
        )
        gp.unset(labels=Labels.create(), titles=Titles.create())
        gp.plot(series.candlesticks(candles, title="price", fill=SOLID), title="Daily candles")


if __name__ == "__main__":
    main()
