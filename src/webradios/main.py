"""Command line access to the webradio favorites catalog."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .catalog import Catalog
from .config import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    LOG_FORMAT,
    LOG_LEVEL,
    LOG_LEVELS,
    WORKDIR,
)
from .errors import CatalogError
from .models import WebradioEntry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webradios",
        description="Manage webradio favorites stored as playlist files.",
    )
    parser.add_argument(
        "--workdir",
        type=Path,
        default=WORKDIR,
        help=f"working directory holding the webradios folder (default: {WORKDIR})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=LOG_LEVEL,
        help="logging level",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="list favorites ordered by title")
    list_cmd.add_argument("--search", default="", help="case-insensitive title filter")
    list_cmd.add_argument("--offset", type=int, default=DEFAULT_OFFSET)
    list_cmd.add_argument("--limit", type=int, default=DEFAULT_LIMIT)

    get_cmd = commands.add_parser("get", help="show a favorite by filename")
    get_cmd.add_argument("filename")

    find_cmd = commands.add_parser("find", help="show the favorite for a stream uri")
    find_cmd.add_argument("uri")

    save_cmd = commands.add_parser("save", help="create, update or rename a favorite")
    save_cmd.add_argument("--uri", required=True, help="stream uri")
    save_cmd.add_argument("--name", required=True)
    save_cmd.add_argument("--uri-old", default="", help="previous stream uri when renaming")
    save_cmd.add_argument("--genre", default="")
    save_cmd.add_argument("--picture", default="")
    save_cmd.add_argument("--homepage", default="")
    save_cmd.add_argument("--country", default="")
    save_cmd.add_argument("--language", default="")
    save_cmd.add_argument("--codec", default="")
    save_cmd.add_argument("--bitrate", type=int, default=0)
    save_cmd.add_argument("--description", default="")

    delete_cmd = commands.add_parser("delete", help="remove a favorite by filename")
    delete_cmd.add_argument("filename")

    return parser


def run(catalog: Catalog, args: argparse.Namespace) -> Dict[str, Any]:
    """
    Execute one command.

    Returns:
        JSON serializable result

    Raises:
        CatalogError: for failed lookups and listings
        ValueError: for invalid paging arguments
    """
    if args.command == "list":
        return catalog.list(args.search, args.offset, args.limit).to_dict()

    if args.command == "get":
        return catalog.get(args.filename).to_dict()

    if args.command == "find":
        entry = catalog.find(args.uri)
        return entry.to_dict() if entry else {}

    if args.command == "save":
        entry = WebradioEntry(
            uri=args.uri,
            name=args.name,
            genre=args.genre,
            picture=args.picture,
            homepage=args.homepage,
            country=args.country,
            language=args.language,
            codec=args.codec,
            bitrate=args.bitrate,
            description=args.description,
        )
        return catalog.save(entry, args.uri_old).to_dict()

    if args.command == "delete":
        return catalog.delete(args.filename).to_dict()

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Prints the result as JSON and returns the exit status."""
    args = build_parser().parse_args(argv)

    # Results go to stdout, logging to stderr. JSON is ASCII-escaped so
    # undecodable command line bytes can still be printed.
    logging.basicConfig(
        level=args.log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    catalog = Catalog(args.workdir)
    try:
        result = run(catalog, args)
    except (CatalogError, ValueError) as e:
        logger.error(str(e))
        print(json.dumps({"ok": False, "error": str(e)}, ensure_ascii=True))
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=True))
    if result.get("ok") is False:
        return 1
    if args.command == "find" and not result:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
