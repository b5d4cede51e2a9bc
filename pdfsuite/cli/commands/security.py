"""CLI helpers for PDF password protection and unlocking."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import OperationKind, TransformRequest
from . import read_inputs


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    protect = subparsers.add_parser("protect", help="Encrypt a PDF with a password")
    protect.add_argument("input", help="Input PDF path")
    protect.add_argument("output", help="Destination PDF path")
    protect.add_argument("--password", required=True, help="User and owner password")
    protect.set_defaults(build_request=_build_request, operation=OperationKind.PROTECT)

    unlock = subparsers.add_parser("unlock", help="Remove encryption from a PDF")
    unlock.add_argument("input", help="Input PDF path")
    unlock.add_argument("output", help="Destination PDF path")
    unlock.add_argument("--password", help="Password of the encrypted PDF")
    unlock.set_defaults(build_request=_build_request, operation=OperationKind.UNLOCK)


def _build_request(args) -> TransformRequest:
    return TransformRequest(
        args.operation,
        inputs=read_inputs([args.input]),
        params={"password": args.password},
    )
