from __future__ import annotations

import argparse
import json
from typing import Any, Dict

from seymour.protocol.commands import COMMAND_TYPES
from seymour.protocol.responses import RESPONSE_TYPES

_INT_FIELDS = {"id", "feed_id"}


def build_message(direction: str, payload: Dict[str, Any]) -> Any:
    """Construct a command/response from {"type": ..., fields...}."""
    if not isinstance(payload, dict):
        raise ValueError(f"message must be a JSON object, got {type(payload).__name__}")

    types = COMMAND_TYPES if direction == "command" else RESPONSE_TYPES
    by_name = {t.__name__: t for t in types}

    d = dict(payload)
    name = d.pop("type", None)
    if name not in by_name:
        raise ValueError(f"unknown {direction} type: {name!r}. Expected one of: {sorted(by_name)}")

    for fname, value in d.items():
        if fname in _INT_FIELDS:
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name}.{fname} must be an integer, got {value!r}")
        elif not isinstance(value, str):
            raise ValueError(f"{name}.{fname} must be a string, got {type(value).__name__}")

    try:
        return by_name[name](**d)
    except TypeError as e:
        raise ValueError(f"bad fields for {name}: {e}") from e


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Render a Seymour protocol message from JSON.")
    p.add_argument("direction", choices=["command", "response"])
    p.add_argument("message")
    args = p.parse_args(argv)

    try:
        msg = build_message(args.direction, json.loads(args.message))
    except ValueError as e:
        print(f"[seymour] {e}")
        raise SystemExit(2)

    print(msg.to_line())


if __name__ == "__main__":
    main()
