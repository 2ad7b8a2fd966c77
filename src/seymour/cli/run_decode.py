from __future__ import annotations

import argparse
import json

from seymour.protocol.commands import parse_command
from seymour.protocol.errors import ParseMessageError
from seymour.protocol.responses import parse_response, response_from_error
from seymour.reporting.logger import message_to_dict


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Decode one Seymour protocol line.")
    p.add_argument("direction", choices=["command", "response"])
    p.add_argument("line")
    args = p.parse_args(argv)

    parse = parse_command if args.direction == "command" else parse_response
    try:
        msg = parse(args.line)
    except ParseMessageError as e:
        print(f"[seymour] {type(e).__name__}: {e}")
        if args.direction == "command":
            # what a server replies to the sender
            print(response_from_error(e).to_line())
        raise SystemExit(1)

    print(json.dumps(message_to_dict(msg)))


if __name__ == "__main__":
    main()
