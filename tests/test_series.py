from __future__ import annotations

import dataclasses
import datetime as dt
from decimal import Decimal
import unittest

import numpy as np

from gnuplot_session import series
from gnuplot_session.adapters.normalize import (
    normalize_candles,
    normalize_pairs,
    normalize_time_pairs,
    normalize_values,
    to_posix_seconds,
)
from gnuplot_session.errors import SeriesDataError
from gnuplot_session.values import BLUE, SOLID, NamedColor, Pattern, Rgb


class SeriesConstructorTests(unittest.TestCase):
    def test_every_constructor_sets_kind_and_shape(self) -> None:
        t0 = dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc)
        cases = [
            (series.lines([1.0]), "lines", "y"),
            (series.lines_xy([(1.0, 2.0)]), "lines", "xy"),
            (series.lines_timey([(t0, 2.0)]), "lines", "timey"),
            (series.lines_func("sin(x)"), "lines", "func"),
            (series.points([1.0]), "points", "y"),
            (series.points_xy([(1.0, 2.0)]), "points", "xy"),
            (series.points_timey([(t0, 2.0)]), "points", "timey"),
            (series.points_func("cos(x)"), "points", "func"),
            (series.steps([1.0]), "steps", "y"),
            (series.steps_xy([(1.0, 2.0)]), "steps", "xy"),
            (series.steps_timey([(t0, 2.0)]), "steps", "timey"),
            (series.histogram([1.0]), "histogram", "y"),
            (series.candlesticks([(t0, (1.0, 2.0, 0.5, 1.5))]), "candlesticks", "candles"),
        ]
        for s, kind, shape in cases:
            with self.subTest(kind=kind, shape=shape):
                self.assertEqual(s.kind, kind)
                self.assertEqual(s.shape, shape)
                self.assertEqual(s.is_inline, shape != "func")

    def test_styling_fields(self) -> None:
        s = series.histogram([1, 2], title="h", color=BLUE, weight=3, fill=Pattern(2))
        self.assertEqual(s.title, "h")
        self.assertEqual(s.color, BLUE)
        self.assertEqual(s.weight, 3)
        self.assertEqual(s.fill, Pattern(2))
        self.assertIsNone(series.lines([1.0]).fill)

    def test_color_shorthands(self) -> None:
        self.assertEqual(series.lines([1.0], color="Red").color, NamedColor("red"))
        self.assertEqual(series.lines([1.0], color=(1, 2, 3)).color, Rgb(1, 2, 3))
        with self.assertRaises(ValueError):
            series.lines([1.0], color="chartreuse")

    def test_series_is_immutable(self) -> None:
        s = series.lines([1.0, 2.0])
        with self.assertRaises(dataclasses.FrozenInstanceError):
            s.title = "changed"  # type: ignore[misc]

    def test_payload_is_copied_at_construction(self) -> None:
        data = [1.0, 2.0]
        s = series.points(data)
        data.append(3.0)
        self.assertEqual(len(s), 2)

    def test_expression_series_has_no_rows(self) -> None:
        s = series.points_func("x**2", title="square")
        self.assertEqual(s.expression, "x**2")
        self.assertEqual(s.rows, ())
        self.assertFalse(s.is_time)

    def test_candlesticks_accept_flat_rows_and_fill(self) -> None:
        s = series.candlesticks([(0, 1.0, 2.0, 0.5, 1.5)], fill=SOLID)
        self.assertEqual(s.rows, ((0.0, 1.0, 2.0, 0.5, 1.5),))
        self.assertTrue(s.is_time)


class NormalizeTests(unittest.TestCase):
    def test_values_from_numpy_and_decimal(self) -> None:
        self.assertEqual(normalize_values(np.asarray([1, 2, 3], dtype=np.int32)), (1.0, 2.0, 3.0))
        self.assertEqual(normalize_values([Decimal("1.5"), 2]), (1.5, 2.0))

    def test_values_reject_text(self) -> None:
        with self.assertRaises(SeriesDataError):
            normalize_values([1.0, "two"])
        with self.assertRaises(SeriesDataError):
            normalize_values("123")

    def test_values_reject_2d(self) -> None:
        with self.assertRaises(SeriesDataError):
            normalize_values(np.zeros((2, 2)))

    def test_pairs_from_ndarray(self) -> None:
        arr = np.asarray([[1.0, 2.0], [3.0, 4.0]])
        self.assertEqual(normalize_pairs(arr), ((1.0, 2.0), (3.0, 4.0)))
        self.assertEqual(normalize_pairs([]), ())

    def test_pairs_reject_wrong_width(self) -> None:
        with self.assertRaises(SeriesDataError):
            normalize_pairs([(1.0, 2.0, 3.0)])
        with self.assertRaises(SeriesDataError):
            normalize_pairs([1.0, 2.0])

    def test_time_conversions(self) -> None:
        self.assertEqual(to_posix_seconds(dt.datetime(1970, 1, 2)), 86400.0)
        self.assertEqual(to_posix_seconds(dt.date(1970, 1, 2)), 86400.0)
        self.assertEqual(to_posix_seconds(np.datetime64("1970-01-01T00:01:00")), 60.0)
        self.assertEqual(to_posix_seconds(12.5), 12.5)
        tz = dt.timezone(dt.timedelta(hours=1))
        self.assertEqual(to_posix_seconds(dt.datetime(1970, 1, 1, 1, tzinfo=tz)), 0.0)

    def test_time_pairs_require_pairs(self) -> None:
        self.assertEqual(normalize_time_pairs([(dt.date(1970, 1, 1), 3)]), ((0.0, 3.0),))
        with self.assertRaises(SeriesDataError):
            normalize_time_pairs([(0, 1, 2)])
        with self.assertRaises(SeriesDataError):
            normalize_time_pairs([5.0])

    def test_candles_require_four_prices(self) -> None:
        with self.assertRaises(SeriesDataError):
            normalize_candles([(0, (1.0, 2.0, 3.0))])
        self.assertEqual(normalize_candles([(60, [1, 2, 0, 1])]), ((60.0, 1.0, 2.0, 0.0, 1.0),))


if __name__ == "__main__":
    unittest.main()
