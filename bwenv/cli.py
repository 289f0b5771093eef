"""
bwenv CLI — manage notes stored in the rbw vault.

Usage:
    bwenv list              # Names in the bwenv folder
    bwenv get NAME          # Print the notes of NAME
    bwenv put NAME          # Create or replace NAME from stdin (or --file)
    bwenv rm NAME           # Delete NAME
    bwenv version           # Show version
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bwenv",
        description="bwenv — keep notes in your Bitwarden vault via rbw.",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("--folder", help="Vault folder (default: $BWENV_FOLDER or 'bwenv')")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # list
    subparsers.add_parser("list", help="List names in the folder")

    # get
    get_parser = subparsers.add_parser("get", help="Print the notes of an entry")
    get_parser.add_argument("name", help="Entry name")

    # put
    put_parser = subparsers.add_parser("put", help="Create or replace an entry")
    put_parser.add_argument("name", help="Entry name")
    put_parser.add_argument("--file", type=Path, help="Read notes from a file instead of stdin")

    # rm
    rm_parser = subparsers.add_parser("rm", help="Delete an entry")
    rm_parser.add_argument("name", help="Entry name")

    # version
    subparsers.add_parser("version", help="Show version")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.version or args.command == "version":
        from bwenv import __version__

        print(f"bwenv {__version__}")
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    from bwenv.rbw import RbwError

    try:
        if args.command == "list":
            return _cmd_list(args)
        elif args.command == "get":
            return _cmd_get(args)
        elif args.command == "put":
            return _cmd_put(args)
        elif args.command == "rm":
            return _cmd_rm(args)
    except RbwError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


def _folder(args: argparse.Namespace) -> str:
    from bwenv.config import get_config

    return args.folder if args.folder is not None else get_config().folder


def _cmd_list(args: argparse.Namespace) -> int:
    from bwenv.rbw import default_client

    for name in default_client().list_namespaces(_folder(args)):
        print(name)
    return 0


def _cmd_get(args: argparse.Namespace) -> int:
    from bwenv.rbw import default_client

    folder = _folder(args)
    item = default_client().get_item(args.name, folder)
    if item is None:
        print(f"Error: no entry '{args.name}' in folder '{folder}'", file=sys.stderr)
        return 1
    notes = item.notes or ""
    sys.stdout.write(notes if notes.endswith("\n") or not notes else notes + "\n")
    return 0


def _cmd_put(args: argparse.Namespace) -> int:
    from bwenv.rbw import default_client

    if args.file is not None:
        try:
            notes = args.file.read_text()
        except OSError as e:
            print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
            return 1
    else:
        notes = sys.stdin.read()
    # The payload formatting adds the trailing newline back.
    notes = notes.removesuffix("\n")

    folder = _folder(args)
    created = default_client().save_item(args.name, folder, notes)
    logger.info("%s '%s' in folder '%s'", "Created" if created else "Updated", args.name, folder)
    print(f"{'Created' if created else 'Updated'} '{args.name}'", file=sys.stderr)
    return 0


def _cmd_rm(args: argparse.Namespace) -> int:
    from bwenv.rbw import default_client

    folder = _folder(args)
    default_client().delete_item(args.name, folder)
    print(f"Deleted '{args.name}'", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
