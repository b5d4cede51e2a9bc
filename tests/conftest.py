from __future__ import annotations

import sys
from io import BytesIO
from pathlib import Path
from typing import Callable, Sequence

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdfsuite import Settings  # noqa: E402

PdfFactory = Callable[..., bytes]


def build_pdf(
    widths: Sequence[int],
    *,
    rotations: Sequence[int] | None = None,
    title: str | None = None,
) -> bytes:
    """Return a PDF whose pages are identified by their widths."""

    writer = PdfWriter()
    for index, width in enumerate(widths):
        page = writer.add_blank_page(width=width, height=200)
        if rotations is not None:
            page.rotation = rotations[index]
    if title is not None:
        writer.add_metadata({"/Title": title})
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def page_widths(data: bytes, password: str | None = None) -> list[int]:
    reader = PdfReader(BytesIO(data))
    if password is not None:
        reader.decrypt(password)
    return [int(float(page.mediabox.width)) for page in reader.pages]


def page_rotations(data: bytes) -> list[int]:
    reader = PdfReader(BytesIO(data))
    return [int(page.rotation) % 360 for page in reader.pages]


@pytest.fixture()
def pdf_factory() -> PdfFactory:
    return build_pdf


@pytest.fixture()
def sample_pdf() -> bytes:
    return build_pdf([101, 102, 103, 104, 105], title="Sample")


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(temp_dir=tmp_path / "artifacts")


def write_script(directory: Path, name: str, body: str) -> Path:
    """Write an executable Python script standing in for an external tool."""

    path = directory / name
    path.write_text(f"#!{sys.executable}\nimport sys\n{body}\n", encoding="utf-8")
    path.chmod(0o755)
    return path


FAKE_GHOSTSCRIPT = """
from pathlib import Path
Path({record!r}).write_text("\\n".join(sys.argv[1:]), encoding="utf-8")
output = next(arg.split("=", 1)[1] for arg in sys.argv if arg.startswith("-sOutputFile="))
data = Path(sys.argv[-1]).read_bytes()
Path(output).write_bytes(data[: len(data) // 2])
"""

FAKE_SOFFICE = """
from pathlib import Path
Path({record!r}).write_text("\\n".join(sys.argv[1:]), encoding="utf-8")
args = sys.argv[1:]
outdir = Path(args[args.index("--outdir") + 1])
extension = args[args.index("--convert-to") + 1].split(":", 1)[0]
source = Path(args[-1])
(outdir / f"{{source.stem}}.{{extension}}").write_bytes(b"converted:" + source.read_bytes())
"""


@pytest.fixture()
def tool_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "bin"
    directory.mkdir()
    return directory


@pytest.fixture()
def fake_ghostscript(tool_dir: Path) -> Path:
    return write_script(tool_dir, "gs", FAKE_GHOSTSCRIPT.format(record=str(tool_dir / "gs.args")))


@pytest.fixture()
def fake_soffice(tool_dir: Path) -> Path:
    return write_script(tool_dir, "soffice", FAKE_SOFFICE.format(record=str(tool_dir / "soffice.args")))


@pytest.fixture()
def failing_tool(tool_dir: Path) -> Path:
    return write_script(tool_dir, "broken", "sys.stderr.write('boom')\nsys.exit(1)")


@pytest.fixture()
def silent_tool(tool_dir: Path) -> Path:
    return write_script(tool_dir, "silent", "sys.exit(0)")
