from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    trace_dir: Path
    strict_canonical: bool
    session: str


def load_settings() -> Settings:
    load_dotenv(override=False)

    trace_dir = Path(os.getenv("SEYMOUR_TRACE_DIR", "traces"))
    strict_canonical = os.getenv("SEYMOUR_STRICT_CANONICAL", "1").strip().lower() not in _FALSE
    session = os.getenv("SEYMOUR_SESSION", "cli")

    return Settings(
        trace_dir=trace_dir,
        strict_canonical=strict_canonical,
        session=session,
    )
