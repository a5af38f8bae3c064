from .normalize import normalize_candles, normalize_pairs, normalize_time_pairs, normalize_values, to_posix_seconds

__all__ = [
    "normalize_candles",
    "normalize_pairs",
    "normalize_time_pairs",
    "normalize_values",
    "to_posix_seconds",
]
