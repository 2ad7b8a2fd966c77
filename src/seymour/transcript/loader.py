from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from seymour.transcript.schema import Transcript


def load_transcript(path: Path) -> Transcript:
    """Load + validate a session transcript YAML.

    Example:

        name: read one entry
        exchanges:
          - send: USER alice
            expect: ["20 1"]
          - send: MARKREAD 7
            expect: ["28"]
    """
    raw: Dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    try:
        return Transcript.model_validate(raw)
    except ValidationError as e:
        # Re-raise with a cleaner message for CLI usage
        raise ValueError(f"Invalid transcript YAML: {path}\n{e}") from e
