"""
File intake: validate one uploaded file and stage it in scratch storage.
"""
from __future__ import annotations

import logging
import os
import re
import time
from dataclasses import dataclass
from typing import Any, Mapping

from docscan.errors import ValidationError
from docscan.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    storage_path: str
    filename: str
    original_name: str
    mime_type: str
    size_bytes: int


def _stream_size(file_storage) -> int:
    stream = file_storage.stream
    pos = stream.tell()
    try:
        stream.seek(0, os.SEEK_END)
        return stream.tell()
    finally:
        stream.seek(pos)


def scratch_name(original_name: str) -> str:
    ext = os.path.splitext((original_name or "").strip())[1].lower()
    ext = re.sub(r"[^a-z0-9.]", "", ext)
    return f"document-{int(time.time() * 1000)}-{os.urandom(6).hex()}{ext}"


def accept_upload(files: Mapping[str, Any], settings: Settings) -> UploadedFile:
    """Validate the upload under ``settings.upload_field`` and save it.

    Type and size are checked before any content is read, so a rejected
    upload never touches scratch storage.
    """
    file = files.get(settings.upload_field)
    if file is None or not (getattr(file, "filename", "") or "").strip():
        raise ValidationError("No file uploaded")

    mime_type = (file.mimetype or "").strip().lower()
    if mime_type not in settings.allowed_mime_types:
        raise ValidationError("Invalid file type")

    declared = file.content_length or 0
    if declared > settings.max_upload_bytes:
        raise ValidationError("File too large")
    size = _stream_size(file)
    if size > settings.max_upload_bytes:
        raise ValidationError("File too large")

    os.makedirs(settings.upload_dir, exist_ok=True)
    name = scratch_name(file.filename)
    path = os.path.join(settings.upload_dir, name)
    try:
        file.save(path)
    except Exception:
        _remove(path)
        raise

    logger.info("Accepted upload %s (%s, %d bytes) as %s", file.filename, mime_type, size, name)
    return UploadedFile(
        storage_path=path,
        filename=name,
        original_name=file.filename,
        mime_type=mime_type,
        size_bytes=size,
    )


def _remove(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove scratch file %s: %s", path, e)


def discard_upload(uploaded: UploadedFile) -> None:
    """Delete the scratch file behind ``uploaded``; safe to call twice."""
    _remove(uploaded.storage_path)
