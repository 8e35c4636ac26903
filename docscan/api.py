"""
API Blueprint

POST /api/upload            - extract, summarize and return one document
GET  /api/health            - liveness and configuration probe
GET  /api/documents/<id>    - fetch a persisted document
"""
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from docscan.errors import DocScanError
from docscan.extraction import ocr_ready
from docscan.pipeline import process_upload

api_bp = Blueprint('api', __name__)


def _component(name):
    return current_app.extensions['docscan'][name]


def now_utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@api_bp.errorhandler(DocScanError)
def handle_docscan_error(e):
    if e.status_code >= 500:
        current_app.logger.error(f'Upload failed: {e.message}')
    return jsonify(e.to_dict()), e.status_code


@api_bp.errorhandler(RequestEntityTooLarge)
def handle_too_large(e):
    return jsonify({"error": "File too large"}), 400


@api_bp.errorhandler(HTTPException)
def handle_http_error(e):
    return jsonify({"error": e.description or e.name}), e.code


@api_bp.route("/upload", methods=["POST"])
def upload():
    try:
        document = process_upload(
            request.files,
            _component('settings'),
            _component('store'),
            _component('summarizer'),
        )
    except (DocScanError, HTTPException):
        raise
    except Exception as e:
        current_app.logger.exception("Unexpected error while processing upload")
        return jsonify({"error": str(e) or type(e).__name__}), 500

    return jsonify(document.to_dict()), 200


@api_bp.route("/health", methods=["GET"])
def health():
    settings = _component('settings')
    ocr_ok, _ = ocr_ready()
    return jsonify({
        "status": "ok",
        "timestamp": now_utc_iso(),
        "database": "connected" if _component('store').is_available() else "disconnected",
        "gemini": "configured" if settings.gemini_configured else "not configured",
        "ocr": "available" if ocr_ok else "unavailable",
        "version": current_app.config.get("APP_VERSION", ""),
    }), 200


@api_bp.route("/documents/<int:document_id>", methods=["GET"])
def get_document(document_id):
    doc = _component('store').get(document_id)
    if not doc:
        return jsonify({"error": "Document not found"}), 404
    return jsonify(doc), 200
