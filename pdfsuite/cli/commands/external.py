"""CLI helpers for Ghostscript compression and LibreOffice conversion."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import OperationKind, TransformRequest
from . import read_inputs


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    compress = subparsers.add_parser("compress", help="Compress a PDF with Ghostscript")
    compress.add_argument("input", help="Input PDF file")
    compress.add_argument("output", help="Destination for compressed PDF")
    compress.set_defaults(build_request=_build_compress_request)

    convert = subparsers.add_parser("convert", help="Convert a document with LibreOffice")
    convert.add_argument("input", help="Input document")
    convert.add_argument("output", help="Destination directory for the converted file")
    convert.add_argument("--format", required=True, help="Target format, e.g. 'pdf' or 'docx'")
    convert.set_defaults(build_request=_build_convert_request, output_is_dir=True)


def _build_compress_request(args) -> TransformRequest:
    return TransformRequest(OperationKind.COMPRESS, inputs=read_inputs([args.input]))


def _build_convert_request(args) -> TransformRequest:
    return TransformRequest(
        OperationKind.CONVERT,
        inputs=read_inputs([args.input]),
        params={"target_format": args.format},
    )
