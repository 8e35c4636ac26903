"""
Upload pipeline: intake -> extraction -> summarization -> assembly.

The scratch file created by intake is removed on every exit path.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from docscan.extraction import extract_text
from docscan.intake import accept_upload, discard_upload
from docscan.settings import Settings
from docscan.storage import DocumentStore
from docscan.summarizer import SummarySet, Summarizer

logger = logging.getLogger(__name__)


@dataclass
class ProcessedDocument:
    filename: str
    original_name: str
    mime_type: str
    extracted_text: str
    summaries: SummarySet
    key_points: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "filename": self.filename,
            "originalName": self.original_name,
            "mimeType": self.mime_type,
            "extractedText": self.extracted_text,
            "summaries": self.summaries.to_dict(),
            "keyPoints": list(self.key_points),
            "createdAt": self.created_at.isoformat(),
        }
        if self.id is not None:
            result["id"] = self.id
        return result


def process_upload(
    files: Mapping[str, Any],
    settings: Settings,
    store: DocumentStore,
    summarizer: Summarizer,
) -> ProcessedDocument:
    uploaded = accept_upload(files, settings)
    try:
        extracted = extract_text(uploaded, settings.ocr_language, settings.ocr_timeout)
        result = summarizer.summarize(extracted)

        document = ProcessedDocument(
            filename=uploaded.filename,
            original_name=uploaded.original_name,
            mime_type=uploaded.mime_type,
            extracted_text=extracted,
            summaries=result.summaries,
            key_points=result.key_points,
        )

        if store.is_available():
            document.id = store.save(document)
        else:
            logger.debug("Persistence unavailable; %s not stored", uploaded.filename)
        return document
    finally:
        discard_upload(uploaded)
