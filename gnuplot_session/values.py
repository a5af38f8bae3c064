from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence


ColorName = Literal["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]
COLOR_NAMES: tuple[str, ...] = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


@dataclass(frozen=True)
class NamedColor:
    name: ColorName


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int


Color = NamedColor | Rgb

BLACK = NamedColor("black")
RED = NamedColor("red")
GREEN = NamedColor("green")
YELLOW = NamedColor("yellow")
BLUE = NamedColor("blue")
MAGENTA = NamedColor("magenta")
CYAN = NamedColor("cyan")
WHITE = NamedColor("white")


def coerce_color(value: Color | str | Sequence[int]) -> Color:
    """Accept a Color, a color name, or an ``(r, g, b)`` triple."""
    if isinstance(value, (NamedColor, Rgb)):
        return value
    if isinstance(value, str):
        name = value.strip().lower()
        if name not in COLOR_NAMES:
            raise ValueError(f"unknown color name: {value!r}")
        return NamedColor(name)  # type: ignore[arg-type]
    if isinstance(value, Sequence) and len(value) == 3:
        r, g, b = value
        return Rgb(int(r), int(g), int(b))
    raise TypeError(f"unsupported color value: {value!r}")


@dataclass(frozen=True)
class XRange:
    min: float
    max: float


@dataclass(frozen=True)
class YRange:
    min: float
    max: float


@dataclass(frozen=True)
class XYRange:
    xmin: float
    xmax: float
    ymin: float
    ymax: float


Range = XRange | YRange | XYRange


@dataclass(frozen=True)
class Solid:
    pass


@dataclass(frozen=True)
class Pattern:
    index: int


Filling = Solid | Pattern

SOLID = Solid()


@dataclass(frozen=True)
class Wxt:
    pass


@dataclass(frozen=True)
class X11:
    pass


@dataclass(frozen=True)
class Qt:
    pass


@dataclass(frozen=True)
class Png:
    path: str


@dataclass(frozen=True)
class Eps:
    path: str


TerminalKind = Wxt | X11 | Qt | Png | Eps

_INTERACTIVE_KINDS: dict[str, TerminalKind] = {"wxt": Wxt(), "x11": X11(), "qt": Qt()}


def coerce_terminal_kind(value: TerminalKind | str) -> TerminalKind:
    if isinstance(value, (Wxt, X11, Qt, Png, Eps)):
        return value
    if isinstance(value, str):
        kind = _INTERACTIVE_KINDS.get(value.strip().lower())
        if kind is None:
            raise ValueError(f"unknown terminal kind: {value!r} (file terminals need Png(path) or Eps(path))")
        return kind
    raise TypeError(f"unsupported terminal kind: {value!r}")


@dataclass(frozen=True)
class Output:
    kind: TerminalKind
    font: str | None = None

    @classmethod
    def create(cls, kind: TerminalKind | str, font: str | None = None) -> "Output":
        return cls(kind=coerce_terminal_kind(kind), font=font)


@dataclass(frozen=True)
class Labels:
    x: str | None = None
    y: str | None = None

    @classmethod
    def create(cls, x: str | None = None, y: str | None = None) -> "Labels":
        return cls(x=x, y=y)


@dataclass(frozen=True)
class Titles:
    """Tick labels for the X and Y axes, placed at positions 0, 1, 2, ..."""

    x: tuple[str, ...] | None = None
    xrotate: int | None = None
    y: tuple[str, ...] | None = None
    yrotate: int | None = None

    @classmethod
    def create(
        cls,
        x: Sequence[str] | None = None,
        xrotate: int | None = None,
        y: Sequence[str] | None = None,
        yrotate: int | None = None,
    ) -> "Titles":
        return cls(x=_tick_names(x), xrotate=xrotate, y=_tick_names(y), yrotate=yrotate)


def _tick_names(names: Sequence[str] | str | None) -> tuple[str, ...] | None:
    if names is None:
        return None
    if isinstance(names, str):
        return (names,)
    return tuple(names)
