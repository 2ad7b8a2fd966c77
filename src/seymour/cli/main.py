from __future__ import annotations

import argparse


def main() -> None:
    p = argparse.ArgumentParser(prog="seymour", description="Seymour feed-subscription protocol tools")
    sub = p.add_subparsers(dest="cmd", required=True)

    # decode
    p_dec = sub.add_parser("decode", help="Decode one wire line and print it as JSON")
    p_dec.add_argument("direction", choices=["command", "response"])
    p_dec.add_argument("line")
    p_dec.set_defaults(_entry="seymour.cli.run_decode")

    # render
    p_ren = sub.add_parser("render", help="Render a JSON message as one wire line")
    p_ren.add_argument("direction", choices=["command", "response"])
    p_ren.add_argument("message", help='e.g. \'{"type": "MarkRead", "id": 42}\'')
    p_ren.set_defaults(_entry="seymour.cli.run_render")

    # check
    p_chk = sub.add_parser("check", help="Replay a session transcript through the codec")
    p_chk.add_argument("transcript", help="Path to transcript YAML")
    p_chk.add_argument("--lenient", action="store_true", help="Accept non-canonical lines")
    p_chk.add_argument("--trace-dir", default="", help="Override SEYMOUR_TRACE_DIR")
    p_chk.set_defaults(_entry="seymour.cli.run_check")

    args = p.parse_args()

    if args._entry == "seymour.cli.run_decode":
        from seymour.cli.run_decode import main as _m

        _m([args.direction, args.line])
        return

    if args._entry == "seymour.cli.run_render":
        from seymour.cli.run_render import main as _m

        _m([args.direction, args.message])
        return

    if args._entry == "seymour.cli.run_check":
        from seymour.cli.run_check import main as _m

        argv = [args.transcript]
        if args.lenient:
            argv += ["--lenient"]
        if args.trace_dir:
            argv += ["--trace-dir", args.trace_dir]
        _m(argv)
        return

    raise SystemExit(2)
