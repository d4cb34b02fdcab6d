from __future__ import annotations

"""Command line access to the connector using environment configuration.

Connection settings and credentials come from ``COUCHDB_*`` variables (see
``config.Settings``). The response body is printed; the exit status is 0 for
a successful result and 1 for an error result.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from . import reader, storage, writer
from .config import get_settings
from .models import Result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="couchdb-connector", description=__doc__)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for request tracing (default: WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    get_cmd = commands.add_parser("get", help="Fetch a document")
    get_cmd.add_argument("doc_id")

    uuid_cmd = commands.add_parser("uuid", help="Fetch server-generated uuids")
    uuid_cmd.add_argument("--count", type=int, default=1)

    create_cmd = commands.add_parser("create", help="Create a document from JSON")
    create_cmd.add_argument("json_text")
    create_cmd.add_argument("--id", dest="doc_id", help="Document id (generated when omitted)")

    update_cmd = commands.add_parser("update", help="Store a new document revision")
    update_cmd.add_argument("json_text")
    update_cmd.add_argument("--id", dest="doc_id", help="Document id (read from _id when omitted)")

    delete_cmd = commands.add_parser("delete", help="Delete a document revision")
    delete_cmd.add_argument("doc_id")
    delete_cmd.add_argument("rev")

    commands.add_parser("db-up", help="Create the configured database")
    commands.add_parser("db-down", help="Delete the configured database")
    return parser


def run(args: argparse.Namespace) -> Result:
    """Dispatch parsed arguments to the matching connector operation."""

    settings = get_settings()
    db_props = settings.db_properties()
    auth = settings.basic_auth()

    if args.command == "get":
        return reader.get(db_props, args.doc_id, auth)
    if args.command == "uuid":
        return reader.fetch_uuid(db_props, args.count)
    if args.command == "create":
        if args.doc_id is None:
            return writer.create_generate(db_props, args.json_text, auth)
        return writer.create(db_props, args.json_text, args.doc_id, auth)
    if args.command == "update":
        return writer.update(db_props, args.json_text, args.doc_id, auth)
    if args.command == "delete":
        return writer.destroy(db_props, args.doc_id, args.rev, auth)
    if args.command == "db-up":
        return storage.storage_up(db_props, auth)
    if args.command == "db-down":
        return storage.storage_down(db_props, auth)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    result = run(args)
    stream = sys.stdout if result.ok else sys.stderr
    stream.write(result.body if result.body.endswith("\n") else f"{result.body}\n")
    return 0 if result.ok else 1


if __name__ == "__main__":
    """Run the command line tool."""

    sys.exit(main())
