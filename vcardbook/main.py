from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from .commands import App
from .config import load_config, render_config_error
from .errors import ConfigError, VCardBookError
from .export import EXPORT_FORMATS
from .logging_config import setup_logging

log = logging.getLogger(__name__)

COMMANDS = ("list", "email", "phone", "birthday", "addressbooks", "export", "version")


def get_version() -> str:
    try:
        return version("vcardbook")
    except PackageNotFoundError:
        return "dev"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vcardbook",
        description="List, search and export contacts from directories of vCard files.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", metavar="PATH", help="Path to the TOML configuration file")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    def add(name: str, help_text: str, reverse: bool = True, filter_: bool = True):
        p = sub.add_parser(name, help=help_text)
        if reverse:
            p.add_argument("-r", "--reverse", action="store_true", help="Reverse sort order")
        if filter_:
            p.add_argument("filter", nargs="*", help="Filter contacts by string (case insensitive)")
        return p

    p = add("list", "List all contacts")
    p.add_argument("-l", "--long", action="store_true", help="Show notes and addresses")
    p = add("email", "List only email entries")
    p.add_argument(
        "-p", "--parsable", action="store_true", help="Output email<tab>name<tab>type without header"
    )
    add("phone", "List only phone entries")
    add("birthday", "List contacts with birthdays")
    add("addressbooks", "List configured address books", reverse=False, filter_=False)
    p = add("export", "Export contacts to CSV or JSON", reverse=False)
    p.add_argument("--format", default="csv", help="Export format (%s)" % ", ".join(EXPORT_FORMATS))
    p.add_argument("--delimiter", default=",", help="CSV delimiter character")
    p.add_argument("--output", metavar="PATH", help="Output file path (default: stdout)")
    add("version", "Show version information", reverse=False, filter_=False)
    return parser


def _with_default_command(argv: list[str]) -> list[str]:
    """Treat ``vcardbook [opts] foo`` as ``vcardbook [opts] list foo``."""
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--config":
            i += 2
        elif arg == "--debug" or arg.startswith("--config="):
            i += 1
        else:
            break
    if i < len(argv) and (argv[i] in COMMANDS or argv[i] in ("-h", "--help")):
        return argv
    return argv[:i] + ["list"] + argv[i:]


def run(args: argparse.Namespace) -> None:
    if args.command == "version":
        print(f"vcardbook {get_version()}")
        return

    app = App(load_config(args.config))
    if args.command == "list":
        app.list_contacts(args.long, args.reverse, args.filter)
    elif args.command == "email":
        app.list_emails(args.parsable, args.reverse, args.filter)
    elif args.command == "phone":
        app.list_phones(args.reverse, args.filter)
    elif args.command == "birthday":
        app.print_birthdays(args.reverse, args.filter)
    elif args.command == "addressbooks":
        app.list_address_books()
    elif args.command == "export":
        app.export(args.format, args.delimiter, args.output, args.filter)
    else:
        raise VCardBookError(f"unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(_with_default_command(argv))
    setup_logging(args.debug)

    try:
        run(args)
    except ConfigError as exc:
        log.debug("Configuration failed", exc_info=True)
        sys.stderr.write(render_config_error(exc))
        return 1
    except VCardBookError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
