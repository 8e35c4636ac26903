"""
Error taxonomy for the upload pipeline.

Each error carries the HTTP status the API reports for it.
"""


class DocScanError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message}


class ValidationError(DocScanError):
    """Bad upload: no file, wrong type, oversized."""
    status_code = 400


class EmptyContentError(DocScanError):
    """Extraction ran but produced no usable text."""
    status_code = 400


class ExtractionError(DocScanError):
    status_code = 500


class GenerationError(DocScanError):
    status_code = 500


class ConfigurationError(DocScanError):
    status_code = 500
