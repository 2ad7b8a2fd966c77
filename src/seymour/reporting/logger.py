from __future__ import annotations

import csv
import json
from dataclasses import asdict, dataclass, fields, is_dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


TRACE_SCHEMA_VERSION = 1

# Stable CSV column order (append-only evolution: only add new columns at the end)
CSV_COLUMNS: List[str] = [
    "schema_version",
    "timestamp",
    "session",
    "direction",
    "line",
    "ok",
    "message_type",
    "error",
]


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def message_to_dict(message: Any) -> Dict[str, Any]:
    """{"type": <variant name>, **fields} for a command or response."""
    if not is_dataclass(message) or isinstance(message, type):
        raise TypeError(f"not a protocol message: {message!r}")
    d: Dict[str, Any] = {"type": type(message).__name__}
    d.update({f.name: getattr(message, f.name) for f in fields(message)})
    return d


@dataclass(frozen=True)
class TraceEvent:
    schema_version: int
    timestamp: str
    session: str
    direction: str  # "send" | "recv"
    line: str

    # Outcome
    ok: bool
    message_type: Optional[str]
    error: Optional[str]

    # Decoded fields (kept in JSONL only)
    data: Dict[str, Any]

    @staticmethod
    def make(
        *,
        session: str,
        direction: str,
        line: str,
        message: Any = None,
        error: Optional[str] = None,
    ) -> "TraceEvent":
        data = message_to_dict(message) if message is not None else {}
        return TraceEvent(
            schema_version=TRACE_SCHEMA_VERSION,
            timestamp=_utc_now_iso(),
            session=session,
            direction=direction,
            line=line,
            ok=error is None,
            message_type=data.get("type"),
            error=error,
            data=data,
        )

    def to_jsonl_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_csv_row(self) -> Dict[str, Any]:
        d = asdict(self)
        d.pop("data", None)  # CSV is flat
        return d


class TraceLogger:
    """Append-only protocol trace: one JSONL row per line + mirrored CSV row."""

    def __init__(self, trace_dir: Path) -> None:
        self.trace_dir = trace_dir
        self.trace_dir.mkdir(parents=True, exist_ok=True)
        self.jsonl_path = self.trace_dir / "trace.jsonl"
        self.csv_path = self.trace_dir / "trace.csv"

        if not self.csv_path.exists():
            with self.csv_path.open("w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
                writer.writeheader()

    def log(self, ev: TraceEvent) -> None:
        with self.jsonl_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(ev.to_jsonl_dict(), ensure_ascii=False) + "\n")

        with self.csv_path.open("a", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
            row = ev.to_csv_row()
            writer.writerow({k: row.get(k, "") for k in CSV_COLUMNS})


def read_trace_jsonl(path: Path) -> List[Dict[str, Any]]:
    """Read trace.jsonl back into a list of dicts."""
    rows: List[Dict[str, Any]] = []
    if not path.exists():
        return rows
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            rows.append(json.loads(line))
    return rows
