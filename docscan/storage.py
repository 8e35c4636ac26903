"""
Best-effort persistence for processed documents.

The store reports whether the database is reachable and never lets a
database error escape ``save``; callers only see an id or ``None``.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy import text

from docscan import db
from docscan.models import Document

logger = logging.getLogger(__name__)


class DocumentStore:
    def __init__(self, enabled: bool):
        self.enabled = enabled

    def is_available(self) -> bool:
        if not self.enabled:
            return False
        try:
            db.session.execute(text('SELECT 1'))
            return True
        except Exception as e:
            db.session.rollback()
            logger.warning("Database unavailable: %s", e)
            return False

    def save(self, document) -> Optional[int]:
        try:
            row = Document(
                filename=document.filename,
                original_name=document.original_name,
                mime_type=document.mime_type,
                extracted_text=document.extracted_text,
                summaries=document.summaries.to_dict(),
                key_points=list(document.key_points),
                created_at=document.created_at,
            )
            db.session.add(row)
            db.session.commit()
            return row.id
        except Exception:
            db.session.rollback()
            logger.exception("Failed to persist document %s", document.filename)
            return None

    def get(self, document_id: int) -> Optional[Dict[str, Any]]:
        if not self.enabled:
            return None
        try:
            row = db.session.get(Document, document_id)
        except Exception:
            db.session.rollback()
            logger.exception("Failed to load document %s", document_id)
            return None
        return row.to_dict() if row else None
