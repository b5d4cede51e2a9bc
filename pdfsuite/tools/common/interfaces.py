"""Request, result and tool base types shared by pdfsuite tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ...config import Settings, get_settings
from ...core.document import PdfDocument
from ...exceptions import ValidationError

PDF_MEDIA_TYPE = "application/pdf"


class OperationKind(str, Enum):
    """Operations a :class:`TransformRequest` can ask for."""

    MERGE = "merge"
    SPLIT = "split"
    ROTATE = "rotate"
    PROTECT = "protect"
    UNLOCK = "unlock"
    WATERMARK = "watermark"
    COMPRESS = "compress"
    CONVERT = "convert"


@dataclass
class InputFile:
    """Raw bytes of one uploaded document and the name it was uploaded under."""

    data: bytes
    filename: str | None = None


@dataclass
class TransformRequest:
    """Holds everything a tool needs to perform one operation."""

    operation: OperationKind
    inputs: list[InputFile] = field(default_factory=list)
    params: dict[str, Any] = field(default_factory=dict)
    settings: Settings | None = None

    def __post_init__(self) -> None:
        self.operation = OperationKind(self.operation)

    def resolved_settings(self) -> Settings:
        return self.settings or get_settings()

    def single_input(self) -> InputFile:
        if not self.inputs:
            raise ValidationError("No file uploaded")
        if len(self.inputs) > 1:
            raise ValidationError(f"'{self.operation.value}' accepts exactly one file")
        return self.inputs[0]

    def load_document(self, *, password: str | None = None) -> PdfDocument:
        return PdfDocument.from_bytes(self.single_input().data, password=password)


@dataclass
class TransformResult:
    """Output bytes of a successful transform and the suggested download name."""

    data: bytes
    filename: str
    media_type: str = PDF_MEDIA_TYPE


class BaseTool:
    """Base class for all pluggable pdfsuite tools."""

    name: str

    def __init__(self, request: TransformRequest) -> None:
        self.request = request

    def run(self) -> TransformResult:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError

