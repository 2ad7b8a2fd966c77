import csv
from pathlib import Path

import pytest

from seymour.protocol.commands import MarkRead, User
from seymour.protocol.responses import Entry
from seymour.reporting.logger import CSV_COLUMNS, TraceEvent, TraceLogger, message_to_dict, read_trace_jsonl


def test_message_to_dict():
    assert message_to_dict(MarkRead(id=3)) == {"type": "MarkRead", "id": 3}
    e = Entry(id=1, feed_id=2, feed_url="f", title="t t", url="u")
    assert message_to_dict(e) == {"type": "Entry", "id": 1, "feed_id": 2, "feed_url": "f", "title": "t t", "url": "u"}
    with pytest.raises(TypeError):
        message_to_dict("USER a")


def test_logger_appends_jsonl_and_csv(tmp_path: Path):
    logger = TraceLogger(tmp_path)
    logger.log(TraceEvent.make(session="s1", direction="send", line="USER a", message=User(username="a")))
    logger.log(TraceEvent.make(session="s1", direction="send", line="FOO", error='unknown type "FOO"'))

    # a second logger on the same dir must not rewrite the header
    TraceLogger(tmp_path).log(TraceEvent.make(session="s2", direction="recv", line="28", error=None))

    rows = read_trace_jsonl(tmp_path / "trace.jsonl")
    assert [r["line"] for r in rows] == ["USER a", "FOO", "28"]
    assert rows[0]["ok"] and rows[0]["message_type"] == "User"
    assert not rows[1]["ok"] and rows[1]["data"] == {}

    with (tmp_path / "trace.csv").open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        assert reader.fieldnames == CSV_COLUMNS
        csv_rows = list(reader)
    assert len(csv_rows) == 3
    assert "data" not in csv_rows[0]


def test_read_missing_trace(tmp_path: Path):
    assert read_trace_jsonl(tmp_path / "nope.jsonl") == []
