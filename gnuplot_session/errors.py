from __future__ import annotations


class GnuplotSessionError(Exception):
    """Base class for every error raised by gnuplot_session."""


class LaunchError(GnuplotSessionError):
    """The gnuplot subprocess could not be started."""


class SessionClosed(GnuplotSessionError):
    """An operation was attempted on a session after `close()`."""


class EmptySeriesList(GnuplotSessionError, ValueError):
    """`plot_many` was called without any series."""


class WriteFailure(GnuplotSessionError):
    """The channel rejected a write; the session is unusable afterwards."""


class InvalidValueError(GnuplotSessionError, ValueError):
    """A configuration or series value failed strict-mode validation."""


class SeriesDataError(GnuplotSessionError, ValueError):
    """A series payload could not be coerced to numbers."""
