"""CLI helpers for merging PDF files."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import OperationKind, TransformRequest
from . import read_inputs


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("merge", help="Merge PDF files in the given order")
    parser.add_argument("output", help="Destination PDF path")
    parser.add_argument("inputs", nargs="+", help="PDF files to merge")
    parser.add_argument(
        "--bookmarks",
        action="store_true",
        help="Add an outline entry for each merged file",
    )
    parser.set_defaults(build_request=_build_request)


def _build_request(args) -> TransformRequest:
    inputs = read_inputs(args.inputs)
    bookmarks = [item.filename.rsplit(".", 1)[0] for item in inputs] if args.bookmarks else None
    return TransformRequest(OperationKind.MERGE, inputs=inputs, params={"bookmarks": bookmarks})
