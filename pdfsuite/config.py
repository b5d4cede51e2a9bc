"""Runtime configuration for :mod:`pdfsuite` loaded from the environment."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class WatermarkStyle:
    """Font and colour used when stamping watermark text onto pages."""

    font_name: str = "Helvetica-Bold"
    font_size: float = 50
    color: tuple[float, float, float] = (0.5, 0.5, 0.5)
    opacity: float = 0.3


class Settings(BaseSettings):
    """Application configuration loaded from ``PDFSUITE_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="PDFSUITE_", env_file=".env", extra="ignore")

    log_level: str = "INFO"

    temp_dir: Path = Path(tempfile.gettempdir()) / "pdfsuite"
    max_upload_bytes: int = 50 * 1024 * 1024

    ghostscript_executables: tuple[str, ...] = ("gs", "gswin64c", "gswin32c")
    soffice_executables: tuple[str, ...] = ("soffice", "libreoffice")
    subprocess_timeout_seconds: float = 120.0
    compress_preset: str = "/ebook"
    compatibility_level: str = "1.4"

    watermark_font: str = "Helvetica-Bold"
    watermark_font_size: float = 50
    watermark_color: tuple[float, float, float] = (0.5, 0.5, 0.5)
    watermark_opacity: float = 0.3

    def watermark_style(self) -> WatermarkStyle:
        return WatermarkStyle(
            font_name=self.watermark_font,
            font_size=self.watermark_font_size,
            color=self.watermark_color,
            opacity=self.watermark_opacity,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide :class:`Settings` instance."""

    return Settings()


__all__ = ["Settings", "WatermarkStyle", "get_settings"]
