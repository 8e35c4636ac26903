"""
Runtime settings resolved once by the application factory.

Components receive a ``Settings`` instance instead of reading the
environment themselves.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Tuple


ALLOWED_MIME_TYPES: Tuple[str, ...] = (
    "application/pdf",
    "image/jpeg",
    "image/jpg",
    "image/png",
)


@dataclass(frozen=True)
class Settings:
    upload_dir: str
    upload_field: str = "document"
    max_upload_bytes: int = 10 * 1024 * 1024
    allowed_mime_types: Tuple[str, ...] = ALLOWED_MIME_TYPES

    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = ""
    generation_timeout: int = 60

    summary_char_limit: int = 8000
    ocr_language: str = "eng"
    ocr_timeout: int = 0

    database_url: str = ""

    @property
    def gemini_configured(self) -> bool:
        return bool(self.gemini_api_key.strip())

    @property
    def persistence_enabled(self) -> bool:
        return bool(self.database_url.strip())

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "Settings":
        return cls(
            upload_dir=cfg["UPLOAD_DIR"],
            upload_field=cfg.get("UPLOAD_FIELD", "document"),
            max_upload_bytes=int(cfg.get("MAX_UPLOAD_BYTES", 10 * 1024 * 1024)),
            gemini_api_key=(cfg.get("GEMINI_API_KEY") or "").strip(),
            gemini_model=cfg.get("GEMINI_MODEL") or "gemini-1.5-flash",
            gemini_base_url=cfg.get("GEMINI_BASE_URL") or "",
            generation_timeout=int(cfg.get("GENERATION_TIMEOUT") or 60),
            summary_char_limit=int(cfg.get("SUMMARY_CHAR_LIMIT") or 8000),
            ocr_language=cfg.get("OCR_LANGUAGE") or "eng",
            ocr_timeout=int(cfg.get("OCR_TIMEOUT") or 0),
            database_url=(cfg.get("DATABASE_URL") or "").strip(),
        )
