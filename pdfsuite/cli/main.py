"""Command line interface for the pdfsuite toolkit."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from ..config import get_settings
from ..core.utils import configure_logging, get_logger
from ..exceptions import (
    AuthError,
    PdfSuiteError,
    ResourceError,
    StructuralError,
    SubprocessError,
    ValidationError,
)
from ..tools import load_builtin_plugins
from ..tools.common.pipeline import run_transform
from .commands import external, merge, pages, security, split

COMMAND_MODULES = [merge, split, pages, security, external]

LOGGER = get_logger("pdfsuite.cli")

EXIT_CODES: dict[type[PdfSuiteError], int] = {
    ValidationError: 2,
    AuthError: 3,
    StructuralError: 4,
    SubprocessError: 5,
    ResourceError: 6,
}


def exit_code_for(error: PdfSuiteError) -> int:
    for error_type, code in EXIT_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pdfsuite", description="pdfsuite CLI")
    parser.add_argument("--log-level", default=None, help="Override PDFSUITE_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    return parser


def _write_output(args, filename: str, data: bytes) -> Path:
    destination = Path(args.output).expanduser()
    if getattr(args, "output_is_dir", False):
        destination.mkdir(parents=True, exist_ok=True)
        destination = destination / filename
    else:
        destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(data)
    return destination


def main(argv: Sequence[str] | None = None) -> Path:
    """Parse ``argv``, run the requested operation and write its result."""

    load_builtin_plugins()
    parser = _create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)

    request = args.build_request(args)
    result = run_transform(request)
    destination = _write_output(args, result.filename, result.data)
    LOGGER.info("Wrote %s", destination)
    return destination


def run(argv: Sequence[str] | None = None) -> int:
    """Console entry point mapping pdfsuite errors to exit codes."""

    try:
        main(argv)
    except PdfSuiteError as exc:
        print(f"pdfsuite: {exc}", file=sys.stderr)
        return exit_code_for(exc)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(run())
