"""Command line entry point: send CSV rows to a collection as update commands."""

from __future__ import annotations

import argparse
import csv
import io
import sys
import urllib.error
from collections.abc import Sequence
from typing import IO, Optional

from solrinplace.builder import UpdateBatchBuilder
from solrinplace.client import SolrClient
from solrinplace.document import Document, Field
from solrinplace.encode import EncodeError

PROG = "solr-inplace-poc"


class _UsageError(Exception):
    """Bad command line arguments."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def parse_csv(stream: IO[str]) -> list[Document]:
    """Read documents from CSV text whose header names an ``id`` column.

    The id column is matched without regard to case; if several match, the
    last one is used.  Every other column becomes a string field.
    """
    reader = csv.reader(stream, strict=True)
    rows = (row for row in reader if row)

    header = next(rows, None)
    if header is None:
        raise ValueError("csv has no header")

    id_index: Optional[int] = None
    for index, name in enumerate(header):
        if name.upper() == "ID":
            id_index = index
    if id_index is None:
        raise ValueError("csv should contains id field")

    docs = []
    for record in rows:
        if len(record) != len(header):
            raise ValueError(f"record on line {reader.line_num}: wrong number of fields")
        doc = Document(id=record[id_index])
        doc.fields.extend(
            Field(key=key, value=value)
            for index, (key, value) in enumerate(zip(header, record))
            if index != id_index
        )
        docs.append(doc)
    return docs


def open_file(file_name: str) -> IO[str]:
    """Open a CSV source: ``-`` is standard input, anything else is read whole."""
    if file_name == "-":
        return sys.stdin
    with open(file_name, encoding="utf-8", newline="") as handle:
        return io.StringIO(handle.read())


def _string_list(values: Optional[list[str]]) -> Optional[list[str]]:
    if values is None:
        return None
    result: list[str] = []
    for value in values:
        if value:
            result.extend(next(csv.reader([value])))
    return result


def _format_list(values: Optional[Sequence[str]]) -> str:
    return "[" + " ".join(values or ()) + "]"


def _build_parser() -> _Parser:
    parser = _Parser(prog=PROG)
    commands = parser.add_subparsers(dest="command", parser_class=_Parser)
    update = commands.add_parser("update")
    update.add_argument("--host", default="localhost:8983", help="solr host")
    update.add_argument("--collection", default="test", help="solr collection")
    update.add_argument("--csv", default="-", help="csv file")
    update.add_argument("--old-csv", default="", help="old csv file")
    update.add_argument(
        "-a", "--allowed-fields", action="append", default=None, help="allowed fields"
    )
    update.add_argument(
        "-i", "--inplace-fields", action="append", default=None, help="inplace fields"
    )
    return parser


def _run_update(args: argparse.Namespace) -> None:
    client = SolrClient(args.host, args.collection)

    if args.csv == "":
        raise ValueError("csv file is empty")

    docs = parse_csv(open_file(args.csv))

    allowed_fields = _string_list(args.allowed_fields)
    inplace_fields = _string_list(args.inplace_fields)
    print(f"allowed fields: {_format_list(allowed_fields)}")
    print(f"inplace fields: {_format_list(inplace_fields)}")

    builder = UpdateBatchBuilder(allowed_fields, inplace_fields)
    builder.add(*docs)

    if args.old_csv:
        builder.add_old(*parse_csv(open_file(args.old_csv)))

    body = builder.build()
    print(body)
    print()

    with client.update(body) as response:
        sys.stdout.write(response.read().decode("utf-8", errors="replace"))
    sys.stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as err:
        print(f"Error: {err}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    if args.command is None:
        parser.print_help()
        return 0

    try:
        _run_update(args)
    except (OSError, ValueError, csv.Error, EncodeError, urllib.error.URLError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())