from __future__ import annotations

import json
from pathlib import Path
import threading
from typing import Any


def _encode(entry: dict[str, Any]) -> str:
    return json.dumps(entry, separators=(",", ":"), sort_keys=True) + "\n"


class JsonlTranscriptSink:
    """Append-only JSONL record of every script a session hands to gnuplot."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def __call__(self, entry: dict[str, Any]) -> None:
        self.log(entry)

    def log(self, entry: dict[str, Any]) -> None:
        line = _encode(entry)
        with self._lock, self.path.open("a", encoding="utf-8") as f:
            f.write(line)

    def entries(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        out: list[dict[str, Any]] = []
        with self.path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    row = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if isinstance(row, dict):
                    out.append(row)
        return out

    def summarize(self) -> dict[str, Any]:
        by_operation: dict[str, int] = {}
        total_bytes = 0
        rows = self.entries()
        for row in rows:
            op = str(row.get("operation", ""))
            by_operation[op] = by_operation.get(op, 0) + 1
            total_bytes += int(row.get("bytes", 0))
        return {"total": len(rows), "bytes": total_bytes, "by_operation": by_operation}

    def prune(self, *, max_rows: int | None = None) -> int:
        """Keep only the newest ``max_rows`` scripts; unreadable lines are dropped too."""
        if max_rows is None or max_rows <= 0:
            return 0
        with self._lock:
            rows = self.entries()
            if len(rows) <= max_rows:
                return 0
            self.path.write_text("".join(_encode(row) for row in rows[-max_rows:]), encoding="utf-8")
        return len(rows) - max_rows
