from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys
from typing import List, Optional


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: List[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_info(info, fmt: Optional[str]) -> None:
    from khmercal.format import render_lunar

    print(render_lunar(info, fmt or "full"))
    print(f"  gregorian : {info.instant.date().isoformat()}")
    print(f"  lunar     : day={info.lunar.day} month={info.lunar.month.name} "
          f"month_start={info.lunar.month_start.isoformat()}")
    print(f"  be_year   : {info.be_year}")
    print(f"  js_year   : {info.jolak_sakaraj_year}")
    print(f"  animal    : {info.animal_year}")
    print(f"  era       : {info.era_year}")
    for name, value in (info.attributes or {}).items():
        print(f"  {name:<10}: {value}")
    for name, value in (info.debug or {}).items():
        print(f"  [{name}] {value}")


def cmd_day(argv: List[str]) -> int:
    import khmercal

    p = argparse.ArgumentParser(prog="khmercal day", description="Gregorian -> Khmer lunar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--format", dest="fmt", default=None, help="full | medium | short | token template")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = khmercal.day_info(_parse_ymd(args.date), attributes=tuple(args.attr), debug=args.debug)
    _print_info(info, args.fmt)
    return 0


def cmd_new_year(argv: List[str]) -> int:
    import khmercal
    from khmercal.format import format_date, format_time

    p = argparse.ArgumentParser(prog="khmercal new-year", description="Moment of Khmer New Year")
    p.add_argument("year", type=int, help="Gregorian year")
    p.add_argument("--details", action="store_true", help="Also print the Lerng Sak intermediate values.")
    args = p.parse_args(argv)

    moment = khmercal.new_year_moment(args.year)
    print(moment.strftime("%Y-%m-%d %H:%M"))
    print(f"{format_date(moment)} {format_time(moment)}")
    if args.details:
        info = khmercal.soriyatra_lerng_sak(khmercal.jolak_sakaraj_year(moment))
        for name, value in vars(info).items():
            print(f"  {name}: {value}")
    return 0


def cmd_be_year(argv: List[str]) -> int:
    import khmercal

    p = argparse.ArgumentParser(prog="khmercal be-year", description="Buddhist Era year of a date")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    print(khmercal.be_year(_parse_ymd(args.date)))
    return 0


def cmd_visakha(argv: List[str]) -> int:
    import khmercal

    p = argparse.ArgumentParser(prog="khmercal visakha", description="Visakha Bochea day of a year")
    p.add_argument("year", type=int, help="Gregorian year")
    args = p.parse_args(argv)

    print(khmercal.visakha_bochea(args.year).date().isoformat())
    return 0


_COMMANDS = {
    "day": cmd_day,
    "new-year": cmd_new_year,
    "be-year": cmd_be_year,
    "visakha": cmd_visakha,
}


def _dispatch(argv: List[str]) -> int:
    # Shortcut: `khmercal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="khmercal", description="Khmer lunisolar calendar CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Khmer lunar day label", add_help=False)
    sub.add_parser("new-year", help="Moment of Khmer New Year for a Gregorian year", add_help=False)
    sub.add_parser("be-year", help="Buddhist Era year of a date", add_help=False)
    sub.add_parser("visakha", help="Visakha Bochea day of a Gregorian year", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/Gregorian month calendars (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print New Year table (diagnostics)", add_help=False)
    sub.add_parser("leap-years", help="Leap classification table or barcode plot (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd in _COMMANDS:
        return _COMMANDS[args.cmd](rest)

    if args.cmd == "pretty-month":
        return _run_module_main("khmercal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("khmercal.diagnostics.new_years_table", rest)

    if args.cmd == "leap-years":
        return _run_module_main("khmercal.diagnostics.leap_years", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "khmercal.diagnostics.round_trip",
            "new-year-scatter": "khmercal.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: Optional[List[str]] = None) -> int:
    from khmercal.core.errors import KhmerCalError

    if argv is None:
        argv = sys.argv[1:]

    # --log-level is global and may appear anywhere
    pre = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    pre.add_argument("--log-level", type=str.upper, choices=_LOG_LEVELS, default="WARNING")
    opts, argv = pre.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, opts.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        return _dispatch(argv)
    except KhmerCalError as e:
        print(f"khmercal: error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
