"""
chestmeta — CLI for reading and rewriting tagged container names
"""

import argparse
import json
import sys

from chestmeta import config
from chestmeta._utils import _parse_int32
from chestmeta.commands import (
    cmd_compose,
    cmd_group,
    cmd_inspect,
    cmd_parse,
    cmd_tags,
    cmd_update,
)
from chestmeta.exceptions import CliError

HELP_TEXT = """\
Usage: chestmeta <command> [args...]

Global flags:
  --format table          Output as readable text instead of JSON (default: json)
  --quiet, -q             Suppress warnings
  --verbose, -v           Log discarded and overridden tags to stderr
  --version               Show version number

Tag syntax (inside a container name):
  |<integer>|             Manual sort order (32-bit)
  |ignore|                Hide from normal listings
  |cat:<text>|            Category (groups the container instead of its location)

Commands:
  parse <raw_name>        - Decode a raw container name
    --location <name>       Location containing the container
    --default-name <name>   Name to use if the container was never renamed
  group <raw_name>        - Show the display group (category, else location)
    --location <name>
    --default-name <name>
  inspect <raw_name>      - List every tag group and whether it applied
    --location <name>
    --default-name <name>
  compose <name>          - Build a raw name from fields
    --category <text>       Category (omit for none)
    --order <n>             Manual sort order (omit for none)
    --ignored               Mark as ignored
  update <raw_name>       - Replace a raw name's metadata (all fields replaced)
    --name <text>           New display name (omit to keep the current one)
    --category <text>       Category (omit to clear)
    --order <n>             Manual sort order (omit to clear)
    --ignored               Mark as ignored (omit to clear)
    --location <name>
    --default-name <name>
  tags [name]             - List recognized tag kinds (or show one)
  version                 - Show version number
"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so --format works after subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, quiet, verbose, remaining_argv).
    Handles --version directly.
    """
    fmt = "json"
    quiet = False
    verbose = False
    remaining = []
    i = 0
    while i < len(argv):
        if argv[i] == "--version":
            print(f"chestmeta {config.VERSION}")
            sys.exit(0)
        elif argv[i] in ("--quiet", "-q"):
            quiet = True
            i += 1
            continue
        elif argv[i] in ("--verbose", "-v"):
            verbose = True
            i += 1
            continue
        elif argv[i] == "--format" and i + 1 < len(argv):
            fmt = argv[i + 1]
            if fmt not in config.VALID_FORMATS:
                raise CliError(f"[ERROR] Invalid format '{fmt}'. Use: json, table")
            i += 2
            continue
        else:
            remaining.append(argv[i])
        i += 1
    if quiet and verbose:
        raise CliError("[ERROR] --quiet and --verbose are mutually exclusive.")
    return fmt, quiet, verbose, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises CliError instead of printing full help text."""

    def error(self, message):
        raise CliError(f"[ERROR] {message}")


def _order_value(value):
    parsed = _parse_int32(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(
            f"must be an integer between {config.ORDER_MIN} and {config.ORDER_MAX}"
        )
    return parsed


def _add_location_args(p):
    p.add_argument("--location")
    p.add_argument("--default-name", dest="default_name")


def build_parser():
    parser = _SubcommandParser(
        prog="chestmeta",
        description="Read and rewrite tagged container names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    # --- parse / group / inspect ---
    for name, func in (("parse", cmd_parse), ("group", cmd_group), ("inspect", cmd_inspect)):
        p = sub.add_parser(name)
        p.add_argument("raw_name")
        _add_location_args(p)
        p.set_defaults(func=func)

    # --- compose ---
    p = sub.add_parser("compose")
    p.add_argument("name")
    p.add_argument("--category")
    p.add_argument("--order", type=_order_value)
    p.add_argument("--ignored", action="store_true")
    p.set_defaults(func=cmd_compose)

    # --- update ---
    p = sub.add_parser("update")
    p.add_argument("raw_name")
    p.add_argument("--name")
    p.add_argument("--category")
    p.add_argument("--order", type=_order_value)
    p.add_argument("--ignored", action="store_true")
    _add_location_args(p)
    p.set_defaults(func=cmd_update)

    # --- tags ---
    p = sub.add_parser("tags")
    p.add_argument("name", nargs="?")
    p.set_defaults(func=cmd_tags)

    # --- version (bare word) ---
    sub.add_parser("version").set_defaults(func=None)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _error_type_from_message(message):
    if message.startswith("[SETUP_NEEDED]"):
        return "setup_needed"
    if message.startswith("[ERROR]"):
        return "error"
    return "cli_error"


def _emit_cli_error(err, fmt):
    msg = str(err)
    if fmt == "json":
        payload = {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "error": {
                "type": _error_type_from_message(msg),
                "message": msg,
                "exit_code": getattr(err, "exit_code", 1),
            },
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    print(msg, file=sys.stderr)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print(HELP_TEXT)
        sys.exit(0)

    fmt = "json"
    try:
        # Extract global flags from anywhere in argv
        fmt, quiet, verbose, remaining_argv = _extract_global_flags(argv)
        config.RUNTIME_QUIET = quiet
        config.RUNTIME_VERBOSE = verbose

        if not remaining_argv:
            print(HELP_TEXT)
            sys.exit(0)

        config.check_config()

        parser = build_parser()
        ns = parser.parse_args(remaining_argv)
        ns.format = fmt  # inject global format flag

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        if ns.command == "version":
            print(f"chestmeta {config.VERSION}")
            sys.exit(0)

        handler = getattr(ns, "func", None)
        if handler:
            handler(ns)
        else:
            raise CliError(f"[ERROR] Unknown command: {ns.command}")

    except CliError as e:
        _emit_cli_error(e, fmt)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
