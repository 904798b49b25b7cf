#!/usr/bin/env python3
"""rtval CLI - Compare runtime values written as literals.

Usage:
    rtval eq 5 5u 6                  # Equality against candidates
    rtval eq-any '"a"' '"b"' '"a"'   # Equality reduced to true/false
    rtval has '[1, 2, 3]' 1 2        # All values are members
    rtval has-any '"hello"' '"xyz"' '"ell"'
    rtval truth 0 '""' '[1]'         # Truth of each value
    rtval coalesce 0 '""' nil '"x"'  # First true value
    rtval print '&"text"' '<func>'   # Text rendering of each value
"""

import argparse
import logging
import os
import sys

import rtval
from rtval._colorize import paint, should_use_color

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


def _boolean(flag):
    return r"\-g-true\-n-" if flag else r"\-r-false\-n-"


def run_eq(values):
    if not values:
        return [r"\-y-fail:\-n- eq requires a value"], 2
    matched, failure = rtval.equals(values[0], values[1:])
    if failure is not None:
        return [rf"\-y-fail:\-n- {failure.message}"], 1
    return [_boolean(matched)], 0


def run_eq_any(values):
    if not values:
        return [r"\-y-fail:\-n- eq-any requires a value"], 2
    return [_boolean(rtval.equal_any(values[0], *values[1:]))], 0


def run_has(values):
    if not values:
        return [r"\-y-fail:\-n- has requires a collection"], 2
    return [_boolean(rtval.has(values[0], *values[1:]))], 0


def run_has_any(values):
    if not values:
        return [r"\-y-fail:\-n- has-any requires a collection"], 2
    return [_boolean(rtval.has_any(values[0], *values[1:]))], 0


def run_truth(values):
    return [_boolean(rtval.is_true(value)) for value in values], 0


def run_coalesce(values):
    return [rtval.render_text(rtval.coalesce(*values))], 0


def run_print(values):
    return [rtval.render_text(value) for value in values], 0


COMMANDS = {
    "eq": (run_eq, "Compare the first value against the others"),
    "eq-any": (run_eq_any, "Report if the first value equals any other"),
    "has": (run_has, "Report if all values are in the first collection"),
    "has-any": (run_has_any, "Report if any value is in the first collection"),
    "truth": (run_truth, "Report the truth of each value"),
    "coalesce": (run_coalesce, "Show the first true value"),
    "print": (run_print, "Show the text rendering of each value"),
}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="rtval",
        description="Compare runtime values written as literals")
    parser.add_argument("--log-level", choices=LOG_LEVELS,
        default=os.environ.get("RTVAL_LOG_LEVEL", "warning").lower(),
        help="Logging level (default from RTVAL_LOG_LEVEL, else warning)")
    parser.add_argument("--no-color", action="store_true",
        help="Disable colored output")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_func, help_text) in COMMANDS.items():
        command = commands.add_parser(name, help=help_text)
        command.add_argument("values", nargs="*",
            help="Value literals like 5, 5u, \"text\", [1, 2], nil")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s")
    color = not args.no_color and should_use_color(sys.stdout)

    values = []
    for text in args.values:
        try:
            values.append(rtval.parse_value(text))
        except rtval.ParseError as e:
            print(paint(rf"\-r-error:\-n- cannot read {text!r}", color), file=sys.stderr)
            print(e.message, file=sys.stderr)
            return 2

    func, _help = COMMANDS[args.command]
    lines, status = func(values)
    for line in lines:
        print(paint(line, color))
    return status


if __name__ == "__main__":
    sys.exit(main())
