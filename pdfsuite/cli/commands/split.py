"""CLI helpers for extracting page ranges."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import OperationKind, TransformRequest
from . import read_inputs


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("split", help="Extract page ranges into a new PDF")
    parser.add_argument("input", help="Input PDF path")
    parser.add_argument("output", help="Destination PDF path")
    parser.add_argument("--ranges", required=True, help="Page ranges, e.g. '1-3,5,7-9'")
    parser.set_defaults(build_request=_build_request)


def _build_request(args) -> TransformRequest:
    return TransformRequest(
        OperationKind.SPLIT,
        inputs=read_inputs([args.input]),
        params={"ranges": args.ranges},
    )
