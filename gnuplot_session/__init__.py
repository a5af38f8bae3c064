from gnuplot_session import series
from gnuplot_session.channel import Channel, MemoryChannel, ProcessChannel
from gnuplot_session.config import SessionConfig, load_session_config
from gnuplot_session.errors import (
    EmptySeriesList,
    GnuplotSessionError,
    InvalidValueError,
    LaunchError,
    SeriesDataError,
    SessionClosed,
    WriteFailure,
)
from gnuplot_session.series import Series
from gnuplot_session.session import Session
from gnuplot_session.transcript import JsonlTranscriptSink
from gnuplot_session.values import (
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    MAGENTA,
    RED,
    SOLID,
    WHITE,
    YELLOW,
    Eps,
    Labels,
    NamedColor,
    Output,
    Pattern,
    Png,
    Qt,
    Rgb,
    Solid,
    Titles,
    Wxt,
    X11,
    XRange,
    XYRange,
    YRange,
)

__all__ = [
    "BLACK",
    "BLUE",
    "CYAN",
    "Channel",
    "EmptySeriesList",
    "Eps",
    "GREEN",
    "GnuplotSessionError",
    "InvalidValueError",
    "JsonlTranscriptSink",
    "Labels",
    "LaunchError",
    "MAGENTA",
    "MemoryChannel",
    "NamedColor",
    "Output",
    "Pattern",
    "Png",
    "ProcessChannel",
    "Qt",
    "RED",
    "Rgb",
    "SOLID",
    "Series",
    "SeriesDataError",
    "Session",
    "SessionClosed",
    "SessionConfig",
    "Solid",
    "Titles",
    "WHITE",
    "WriteFailure",
    "Wxt",
    "X11",
    "XRange",
    "XYRange",
    "YELLOW",
    "YRange",
    "load_session_config",
    "series",
]
