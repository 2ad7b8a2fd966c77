from __future__ import annotations

import argparse
import json
from pathlib import Path

import yaml

from seymour.config import load_settings
from seymour.reporting.logger import TraceLogger
from seymour.transcript.checker import check_transcript
from seymour.transcript.loader import load_transcript


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Replay a Seymour session transcript through the codec.")
    p.add_argument("transcript", help="Path to transcript YAML")
    p.add_argument("--lenient", action="store_true", help="Accept non-canonical lines")
    p.add_argument("--trace-dir", default="", help="Override SEYMOUR_TRACE_DIR")
    args = p.parse_args(argv)

    s = load_settings()
    trace_dir = Path(args.trace_dir) if args.trace_dir else s.trace_dir
    strict = s.strict_canonical and not args.lenient

    try:
        transcript = load_transcript(Path(args.transcript))
    except (ValueError, yaml.YAMLError, OSError) as e:
        print(f"[seymour] {e}")
        raise SystemExit(2)

    logger = TraceLogger(trace_dir)
    report = check_transcript(transcript, strict_canonical=strict, logger=logger, session=s.session)

    print(f"[seymour] {report.name}: {report.lines_checked} lines, {len(report.failures)} failures")
    for f in report.failures:
        print(json.dumps(f))
    print(f"[seymour] trace written under: {trace_dir}")

    raise SystemExit(0 if report.passed else 1)


if __name__ == "__main__":
    main()
