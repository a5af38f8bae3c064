from __future__ import annotations

import dataclasses
import unittest

from gnuplot_session.values import (
    BLUE,
    Eps,
    Labels,
    NamedColor,
    Output,
    Png,
    Rgb,
    Titles,
    Wxt,
    X11,
    coerce_color,
    coerce_terminal_kind,
)


class ValueTypeTests(unittest.TestCase):
    def test_output_create_accepts_names_and_kinds(self) -> None:
        self.assertEqual(Output.create("WXT"), Output(kind=Wxt()))
        self.assertEqual(Output.create("x11", font="Mono").font, "Mono")
        self.assertEqual(Output.create(Png("a.png")).kind, Png("a.png"))
        self.assertEqual(coerce_terminal_kind(Eps("b.eps")), Eps("b.eps"))
        self.assertEqual(coerce_terminal_kind("x11"), X11())

    def test_file_terminals_need_a_path(self) -> None:
        with self.assertRaises(ValueError):
            Output.create("png")
        with self.assertRaises(TypeError):
            Output.create(42)  # type: ignore[arg-type]

    def test_labels_and_titles_default_to_unset(self) -> None:
        self.assertEqual(Labels.create(), Labels(x=None, y=None))
        titles = Titles.create()
        self.assertIsNone(titles.x)
        self.assertIsNone(titles.xrotate)
        self.assertIsNone(titles.y)
        self.assertIsNone(titles.yrotate)

    def test_titles_freeze_tick_lists(self) -> None:
        names = ["mon", "tue"]
        titles = Titles.create(x=names, xrotate=90)
        names.append("wed")
        self.assertEqual(titles.x, ("mon", "tue"))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            titles.xrotate = 0  # type: ignore[misc]

    def test_single_string_is_one_tick_label(self) -> None:
        titles = Titles.create(x="Jan", y=["lo", "hi"])
        self.assertEqual(titles.x, ("Jan",))
        self.assertEqual(titles.y, ("lo", "hi"))

    def test_coerce_color(self) -> None:
        self.assertIs(coerce_color(BLUE), BLUE)
        self.assertEqual(coerce_color(" Cyan "), NamedColor("cyan"))
        self.assertEqual(coerce_color([10, 20, 30]), Rgb(10, 20, 30))
        self.assertEqual(coerce_color((256, -1, 0)), Rgb(256, -1, 0))
        with self.assertRaises(TypeError):
            coerce_color(1.5)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
