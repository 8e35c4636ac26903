"""
Text extraction for staged uploads.

PDFs go through PyPDF2, images through Tesseract via pytesseract.
"""
from __future__ import annotations

import logging
import os
import shutil
from typing import List, Optional, Tuple

import PyPDF2
import pytesseract
from PIL import Image

from docscan.errors import EmptyContentError, ExtractionError
from docscan.intake import UploadedFile

logger = logging.getLogger(__name__)

# Ensure pytesseract can find the tesseract binary
if shutil.which("tesseract") is None:
    for cand in ("/usr/bin/tesseract", "/usr/local/bin/tesseract", "/opt/homebrew/bin/tesseract"):
        if os.path.exists(cand):
            pytesseract.pytesseract.tesseract_cmd = cand
            break


def extract_pdf_text(path: str) -> str:
    with open(path, "rb") as f:
        reader = PyPDF2.PdfReader(f)
        parts: List[str] = []
        for page in reader.pages:
            parts.append(page.extract_text() or "")
    return "\n".join(parts)


def extract_image_text(path: str, language: str = "eng", timeout: int = 0) -> str:
    with Image.open(path) as img:
        return pytesseract.image_to_string(img, lang=language, timeout=timeout) or ""


def ocr_ready() -> Tuple[bool, str]:
    try:
        _ = pytesseract.get_tesseract_version()
    except Exception as e:
        return False, f"tesseract not available: {e}"
    return True, ""


def extract_text(uploaded: UploadedFile, ocr_language: str = "eng", ocr_timeout: Optional[int] = None) -> str:
    """Return the plain text of ``uploaded``.

    Raises ExtractionError when the underlying tool fails and
    EmptyContentError when it succeeds but finds nothing.
    """
    mime = uploaded.mime_type
    try:
        if mime == "application/pdf":
            text = extract_pdf_text(uploaded.storage_path)
        elif mime.startswith("image/"):
            text = extract_image_text(uploaded.storage_path, ocr_language, ocr_timeout or 0)
        else:
            raise ExtractionError("Unsupported file type")
    except ExtractionError:
        raise
    except Exception as e:
        raise ExtractionError(f"Text extraction failed: {type(e).__name__}: {e}") from e

    if not text.strip():
        raise EmptyContentError("No text found")

    logger.info("Extracted %d characters from %s", len(text), uploaded.filename)
    return text
