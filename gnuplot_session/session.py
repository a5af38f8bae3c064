from __future__ import annotations

import logging
import sys
import time
from typing import Any, Callable, Sequence, TextIO

from .channel import Channel, ProcessChannel
from .config import SessionConfig
from .errors import EmptySeriesList, SessionClosed, WriteFailure
from .render import (
    render_script,
    render_set_script,
    render_unset_script,
    validate_options,
    validate_series,
)
from .series import Series, lines_func
from .transcript import JsonlTranscriptSink
from .values import Filling, Labels, Output, Range, Titles

LOGGER = logging.getLogger(__name__)

TranscriptLogger = Callable[[dict[str, Any]], None]


class Session:
    """Owner of one channel to a gnuplot process.

    Every operation renders its complete script first and then hands it to the
    channel in a single write; nothing is read back. Not safe for concurrent
    use: create one session per thread.
    """

    def __init__(
        self,
        channel: Channel,
        *,
        verbose: bool = False,
        strict: bool = False,
        echo: TextIO | None = None,
        transcript: TranscriptLogger | None = None,
    ) -> None:
        self._channel = channel
        self._verbose = verbose
        self._strict = strict
        self._echo = echo
        self._transcript = transcript
        self._closed = False
        self._failure: WriteFailure | None = None
        self._last_script: str | None = None
        self._time_axis = False

    @classmethod
    def create(
        cls,
        verbose: bool = False,
        path: str | None = None,
        *,
        args: Sequence[str] = (),
        strict: bool = False,
        echo: TextIO | None = None,
        transcript: TranscriptLogger | None = None,
    ) -> "Session":
        channel = ProcessChannel.spawn(path, args)
        return cls(channel, verbose=verbose, strict=strict, echo=echo, transcript=transcript)

    @classmethod
    def from_config(cls, config: SessionConfig, *, echo: TextIO | None = None) -> "Session":
        transcript = None if config.transcript_path is None else JsonlTranscriptSink(config.transcript_path)
        return cls.create(
            verbose=config.verbose,
            path=config.path,
            args=config.args,
            strict=config.strict,
            echo=echo,
            transcript=transcript,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def last_script(self) -> str | None:
        return self._last_script

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        LOGGER.debug("closing gnuplot session")
        self._channel.close()

    def set(
        self,
        *,
        output: Output | None = None,
        title: str | None = None,
        use_grid: bool | None = None,
        fill: Filling | None = None,
        range: Range | None = None,
        labels: Labels | None = None,
        titles: Titles | None = None,
    ) -> None:
        self._require_open()
        options = dict(output=output, title=title, use_grid=use_grid, fill=fill, range=range, labels=labels, titles=titles)
        if self._strict:
            validate_options(**options)
        self._send("set", render_set_script(**options))

    def unset(
        self,
        *,
        fill: Filling | None = None,
        range: Range | None = None,
        labels: Labels | None = None,
        titles: Titles | None = None,
    ) -> None:
        self._require_open()
        self._send("unset", render_unset_script(fill=fill, range=range, labels=labels, titles=titles))

    def plot(
        self,
        series: Series,
        *,
        output: Output | None = None,
        title: str | None = None,
        use_grid: bool | None = None,
        fill: Filling | None = None,
        range: Range | None = None,
        labels: Labels | None = None,
        titles: Titles | None = None,
    ) -> None:
        self._plot(
            "plot",
            [series],
            dict(output=output, title=title, use_grid=use_grid, fill=fill, range=range, labels=labels, titles=titles),
        )

    def plot_many(
        self,
        series_list: Sequence[Series],
        *,
        output: Output | None = None,
        title: str | None = None,
        use_grid: bool | None = None,
        fill: Filling | None = None,
        range: Range | None = None,
        labels: Labels | None = None,
        titles: Titles | None = None,
    ) -> None:
        self._plot(
            "plot_many",
            list(series_list),
            dict(output=output, title=title, use_grid=use_grid, fill=fill, range=range, labels=labels, titles=titles),
        )

    def plot_func(
        self,
        expression: str,
        *,
        output: Output | None = None,
        title: str | None = None,
        use_grid: bool | None = None,
        fill: Filling | None = None,
        range: Range | None = None,
        labels: Labels | None = None,
        titles: Titles | None = None,
    ) -> None:
        self._plot(
            "plot_func",
            [lines_func(expression)],
            dict(output=output, title=title, use_grid=use_grid, fill=fill, range=range, labels=labels, titles=titles),
        )

    def _plot(self, operation: str, series_list: list[Series], options: dict[str, Any]) -> None:
        self._require_open()
        if not series_list:
            raise EmptySeriesList(f"{operation} requires at least one series")
        if self._strict:
            validate_options(**options)
            for series in series_list:
                validate_series(series)
        time_axis = any(s.is_time for s in series_list)
        self._send(operation, render_script(series_list, reset_time_axis=self._time_axis, **options))
        self._time_axis = time_axis

    def _send(self, operation: str, script: str) -> None:
        if not script:
            LOGGER.debug("%s rendered no directives; nothing written", operation)
            return
        if self._verbose:
            echo = self._echo if self._echo is not None else sys.stdout
            echo.write(script)
            echo.flush()
        data = script.encode("utf-8")
        try:
            self._channel.write(data)
        except (WriteFailure, OSError) as exc:
            LOGGER.warning("gnuplot %s write failed: %s", operation, exc)
            if isinstance(exc, WriteFailure):
                self._failure = exc
                raise
            self._failure = WriteFailure(f"write to gnuplot channel failed: {exc}")
            raise self._failure from exc
        self._last_script = script
        LOGGER.debug("gnuplot %s wrote %d bytes", operation, len(data))
        if self._transcript is not None:
            self._transcript({"ts_ns": time.time_ns(), "operation": operation, "bytes": len(data), "script": script})

    def _require_open(self) -> None:
        if self._closed:
            raise SessionClosed("gnuplot session is closed")
        if self._failure is not None:
            raise WriteFailure(f"gnuplot session unusable after failed write: {self._failure}") from self._failure
