"""
Database Models

- Document: one processed upload (extracted text, summaries, key points)
"""
from datetime import datetime, timezone

from docscan import db


class Document(db.Model):
    __tablename__ = 'documents'

    id = db.Column(db.Integer, primary_key=True)
    filename = db.Column(db.String(255), nullable=False)  # Scratch name
    original_name = db.Column(db.String(255))
    mime_type = db.Column(db.String(100))
    extracted_text = db.Column(db.Text, nullable=False)

    # Results (JSON)
    summaries = db.Column(db.JSON)  # {short, medium, long}
    key_points = db.Column(db.JSON)

    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        """Convert document to the API response shape"""
        result = {
            'id': self.id,
            'filename': self.filename,
            'originalName': self.original_name,
            'mimeType': self.mime_type,
            'extractedText': self.extracted_text,
            'summaries': self.summaries or {},
            'keyPoints': self.key_points or [],
        }
        if self.created_at:
            result['createdAt'] = self.created_at.isoformat()
        return result
