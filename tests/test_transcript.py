from __future__ import annotations

import json
from pathlib import Path
import tempfile
import unittest

from gnuplot_session.channel import MemoryChannel
from gnuplot_session.session import Session
from gnuplot_session.transcript import JsonlTranscriptSink


class TranscriptSinkTests(unittest.TestCase):
    def test_jsonl_sink_persists_entry(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "nested" / "transcript.jsonl"
            sink = JsonlTranscriptSink(path)
            sink.log({"ts_ns": 1, "operation": "plot", "bytes": 7, "script": "plot x\n"})
            rows = path.read_text(encoding="utf-8").strip().splitlines()
            self.assertEqual(len(rows), 1)
            self.assertEqual(json.loads(rows[0])["operation"], "plot")

    def test_session_writes_transcript(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            sink = JsonlTranscriptSink(Path(td) / "t.jsonl")
            with Session(MemoryChannel(), transcript=sink) as session:
                session.set(title="x")
                session.plot_func("sin(x)")
                session.plot_func("cos(x)")
            summary = sink.summarize()
            self.assertEqual(summary["total"], 3)
            self.assertEqual(summary["by_operation"], {"set": 1, "plot_func": 2})
            self.assertEqual(sink.entries()[1]["script"], "plot sin(x) with lines notitle\n")

    def test_summarize_and_prune(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            sink = JsonlTranscriptSink(Path(td) / "t.jsonl")
            self.assertEqual(sink.summarize()["total"], 0)
            for i in range(3):
                sink.log({"ts_ns": i, "operation": "plot", "bytes": 10, "script": "plot x\n"})
            self.assertEqual(sink.summarize()["bytes"], 30)
            self.assertEqual(sink.prune(max_rows=2), 1)
            self.assertEqual([e["ts_ns"] for e in sink.entries()], [1, 2])
            self.assertEqual(sink.prune(max_rows=5), 0)

    def test_prune_drops_unreadable_lines(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "t.jsonl"
            sink = JsonlTranscriptSink(path)
            sink.log({"ts_ns": 1, "operation": "set"})
            with path.open("a", encoding="utf-8") as f:
                f.write("not json\n")
            sink.log({"ts_ns": 2, "operation": "plot"})
            sink.log({"ts_ns": 3, "operation": "plot"})
            self.assertEqual(sink.prune(max_rows=2), 1)
            self.assertEqual(len(path.read_text(encoding="utf-8").splitlines()), 2)
            self.assertEqual([e["ts_ns"] for e in sink.entries()], [2, 3])


if __name__ == "__main__":
    unittest.main()
