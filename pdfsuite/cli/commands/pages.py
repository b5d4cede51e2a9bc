"""CLI helpers for page-wide edits: rotation and watermarking."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import OperationKind, TransformRequest
from . import read_inputs


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    rotate = subparsers.add_parser("rotate", help="Rotate every page")
    rotate.add_argument("input", help="Input PDF path")
    rotate.add_argument("output", help="Destination PDF path")
    rotate.add_argument(
        "--angle",
        type=int,
        required=True,
        help="Degrees to add to each page rotation (multiple of 90, may be negative)",
    )
    rotate.set_defaults(build_request=_build_rotate_request)

    watermark = subparsers.add_parser("watermark", help="Stamp centred text on every page")
    watermark.add_argument("input", help="Input PDF path")
    watermark.add_argument("output", help="Destination PDF path")
    watermark.add_argument("--text", required=True, help="Watermark text")
    watermark.set_defaults(build_request=_build_watermark_request)


def _build_rotate_request(args) -> TransformRequest:
    return TransformRequest(
        OperationKind.ROTATE,
        inputs=read_inputs([args.input]),
        params={"angle": args.angle},
    )


def _build_watermark_request(args) -> TransformRequest:
    return TransformRequest(
        OperationKind.WATERMARK,
        inputs=read_inputs([args.input]),
        params={"text": args.text},
    )
