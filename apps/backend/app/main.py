"""FastAPI application exposing pdfsuite transforms over HTTP."""

from __future__ import annotations

from dataclasses import asdict
from typing import List
from urllib.parse import quote

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from pdfsuite import (
    AuthError,
    InputFile,
    OperationKind,
    PdfSuiteError,
    ResourceError,
    StructuralError,
    SubprocessError,
    TransformRequest,
    TransformResult,
    ValidationError,
    describe_document,
    get_settings,
    run_transform,
)
from pdfsuite.core.utils import configure_logging, get_logger, safe_filename

settings = get_settings()
configure_logging(settings.log_level)
LOGGER = get_logger("pdfsuite.backend")

app = FastAPI(title="pdfsuite API", version="0.1.0")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
API_PREFIX = "/api"

STATUS_BY_ERROR: dict[type[PdfSuiteError], int] = {
    ValidationError: 400,
    AuthError: 401,
    StructuralError: 422,
    SubprocessError: 500,
    ResourceError: 500,
}

FAILURE_MESSAGES: dict[OperationKind, str] = {
    OperationKind.MERGE: "An error occurred while merging the PDFs.",
    OperationKind.SPLIT: "An error occurred while splitting the PDF.",
    OperationKind.ROTATE: "An error occurred while rotating the PDF.",
    OperationKind.PROTECT: "An error occurred while protecting the PDF.",
    OperationKind.UNLOCK: "An error occurred while unlocking the PDF.",
    OperationKind.WATERMARK: "An error occurred while adding the watermark.",
    OperationKind.COMPRESS: "PDF compression failed.",
    OperationKind.CONVERT: "File conversion failed.",
}


def _status_for(error: PdfSuiteError) -> int:
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return status_code
    return 500


def _content_disposition(filename: str) -> str:
    """Return an attachment header, using the RFC 5987 form for non-ASCII names."""

    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


async def _read_upload(upload: UploadFile) -> InputFile:
    """Read ``upload`` into memory, enforcing the configured size limit."""

    contents = await upload.read()
    if not contents:
        raise HTTPException(status_code=400, detail=f"File '{upload.filename}' is empty.")
    if len(contents) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail=f"File '{upload.filename}' is too large.")
    return InputFile(data=contents, filename=safe_filename(upload.filename, "document.pdf"))


async def _execute(request: TransformRequest) -> Response:
    """Run ``request`` on a worker thread and turn the outcome into a response."""

    try:
        result: TransformResult = await run_in_threadpool(run_transform, request)
    except PdfSuiteError as exc:
        status_code = _status_for(exc)
        if status_code >= 500:
            LOGGER.error("%s failed: %s", request.operation.value, exc)
            detail = FAILURE_MESSAGES[request.operation]
        else:
            detail = str(exc)
        raise HTTPException(status_code=status_code, detail=detail) from exc

    return Response(
        content=result.data,
        media_type=result.media_type,
        headers={"Content-Disposition": _content_disposition(result.filename)},
    )


@app.get("/health", response_class=JSONResponse)
async def health() -> dict[str, str]:
    """Lightweight health endpoint for uptime checks."""
    return {"status": "ok"}


@app.post(f"{API_PREFIX}/merge")
async def merge_endpoint(
    files: List[UploadFile] | None = File(None, description="PDF files to merge, in order"),
    bookmarks: bool = Form(False, description="Add an outline entry for each merged file."),
) -> Response:
    """Merge two or more PDF uploads into a single document."""

    if not files or len(files) < 2:
        raise HTTPException(status_code=400, detail="At least two PDF files must be uploaded.")
    inputs = [await _read_upload(upload) for upload in files]

    titles = [item.filename.rsplit(".", 1)[0] for item in inputs] if bookmarks else None
    return await _execute(
        TransformRequest(OperationKind.MERGE, inputs=inputs, params={"bookmarks": titles})
    )


@app.post(f"{API_PREFIX}/split")
async def split_endpoint(
    file: UploadFile = File(..., description="Source PDF."),
    ranges: str | None = Form(None, description="Comma separated page ranges, e.g. '1-3,5,7-9'."),
) -> Response:
    """Extract the pages named by ``ranges`` into a new PDF."""

    if not ranges or not ranges.strip():
        raise HTTPException(status_code=400, detail="No page ranges provided.")
    source = await _read_upload(file)
    return await _execute(
        TransformRequest(OperationKind.SPLIT, inputs=[source], params={"ranges": ranges})
    )


@app.post(f"{API_PREFIX}/rotate")
async def rotate_endpoint(
    file: UploadFile = File(..., description="Source PDF."),
    angle: str | None = Form(None, description="Degrees to rotate every page by."),
) -> Response:
    """Rotate every page by ``angle`` degrees."""

    if angle is None or not angle.strip():
        raise HTTPException(status_code=400, detail="No rotation angle provided.")
    source = await _read_upload(file)
    return await _execute(
        TransformRequest(OperationKind.ROTATE, inputs=[source], params={"angle": angle})
    )


@app.post(f"{API_PREFIX}/protect")
async def protect_endpoint(
    file: UploadFile = File(..., description="Source PDF."),
    password: str | None = Form(None, description="Password used to open and administer the PDF."),
) -> Response:
    """Encrypt the uploaded PDF with ``password``."""

    if not password:
        raise HTTPException(status_code=400, detail="No password provided.")
    source = await _read_upload(file)
    return await _execute(
        TransformRequest(OperationKind.PROTECT, inputs=[source], params={"password": password})
    )


@app.post(f"{API_PREFIX}/unlock")
async def unlock_endpoint(
    file: UploadFile = File(..., description="Encrypted PDF."),
    password: str | None = Form(None, description="Password of the encrypted PDF."),
) -> Response:
    """Remove encryption from the uploaded PDF."""

    source = await _read_upload(file)
    return await _execute(
        TransformRequest(OperationKind.UNLOCK, inputs=[source], params={"password": password or None})
    )


@app.post(f"{API_PREFIX}/watermark")
async def watermark_endpoint(
    file: UploadFile = File(..., description="Source PDF."),
    text: str | None = Form(None, description="Watermark text."),
) -> Response:
    """Stamp ``text`` centred on every page."""

    if text is None or not text.strip():
        raise HTTPException(status_code=400, detail="No watermark text provided.")
    source = await _read_upload(file)
    return await _execute(
        TransformRequest(OperationKind.WATERMARK, inputs=[source], params={"text": text})
    )


@app.post(f"{API_PREFIX}/compress")
async def compress_endpoint(file: UploadFile = File(..., description="Source PDF.")) -> Response:
    """Re-encode the uploaded PDF with Ghostscript."""

    source = await _read_upload(file)
    return await _execute(TransformRequest(OperationKind.COMPRESS, inputs=[source]))


@app.post(f"{API_PREFIX}/convert-office")
async def convert_office_endpoint(
    file: UploadFile = File(..., description="Document to convert."),
    outputFormat: str | None = Form(None, description="Target format, e.g. 'pdf' or 'docx'."),
) -> Response:
    """Convert the uploaded document with LibreOffice."""

    if not outputFormat or not outputFormat.strip():
        raise HTTPException(status_code=400, detail="No output format specified.")
    source = await _read_upload(file)
    return await _execute(
        TransformRequest(
            OperationKind.CONVERT, inputs=[source], params={"target_format": outputFormat}
        )
    )


@app.post(f"{API_PREFIX}/info", response_class=JSONResponse)
async def info_endpoint(
    file: UploadFile = File(..., description="PDF to inspect."),
    password: str | None = Form(None, description="Password of an encrypted PDF."),
) -> dict[str, object]:
    """Report page count, encryption state, rotations and metadata."""

    source = await _read_upload(file)
    try:
        info = await run_in_threadpool(describe_document, source.data, password=password or None)
    except PdfSuiteError as exc:
        raise HTTPException(status_code=_status_for(exc), detail=str(exc)) from exc
    return asdict(info)


__all__ = ["app"]
