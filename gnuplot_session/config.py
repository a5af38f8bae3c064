from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import tomllib

from .channel import DEFAULT_GNUPLOT_PATH

_KNOWN_FIELDS = {"path", "args", "verbose", "strict", "transcript_path"}


@dataclass(frozen=True)
class SessionConfig:
    path: str = DEFAULT_GNUPLOT_PATH
    args: tuple[str, ...] = ()
    verbose: bool = False
    strict: bool = False
    transcript_path: str | None = None


def load_session_config(path: str | Path) -> SessionConfig:
    """Read session settings from a TOML file.

    Settings may live at the top level or under a ``[session]`` table, e.g.::

        [session]
        path = "/usr/local/bin/gnuplot"
        args = ["-persist"]
        verbose = true
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"session config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    return parse_session_config(raw)


def parse_session_config(raw: dict[str, object]) -> SessionConfig:
    table = raw.get("session", raw)
    if not isinstance(table, dict):
        raise ValueError("session must be a table")
    unknown = sorted(set(table) - _KNOWN_FIELDS)
    if unknown:
        raise ValueError(f"unknown session config fields: {', '.join(unknown)}")
    return SessionConfig(
        path=_coerce_optional_str(table.get("path"), "path") or DEFAULT_GNUPLOT_PATH,
        args=tuple(_coerce_string_list(table.get("args", []), "args")),
        verbose=_coerce_bool(table.get("verbose", False), "verbose"),
        strict=_coerce_bool(table.get("strict", False), "strict"),
        transcript_path=_coerce_optional_str(table.get("transcript_path"), "transcript_path"),
    )


def _coerce_string_list(value: object, field_name: str) -> list[str]:
    if not isinstance(value, list):
        raise ValueError(f"{field_name} must be a list")
    out: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"{field_name} entries must be strings")
        out.append(item)
    return out


def _coerce_optional_str(value: object, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string if provided")
    return value


def _coerce_bool(value: object, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{field_name} must be a boolean")
    return value
