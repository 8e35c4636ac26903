"""
DocScan Configuration
Values come from the environment (a local .env file is honoured)
"""
import os
import tempfile

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _database_url() -> str:
    url = (os.environ.get("DATABASE_URL") or "").strip()
    # Fix Render's postgres:// URL
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


class Config:
    """Base configuration"""
    # Flask
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-in-production")

    # Database (optional - empty disables persistence)
    DATABASE_URL = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # Gemini (OpenAI-compatible endpoint)
    GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY", "")
    GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-1.5-flash")
    GEMINI_BASE_URL = os.environ.get(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/"
    )
    GENERATION_TIMEOUT = _env_int("GENERATION_TIMEOUT", 60)

    # File uploads
    UPLOAD_DIR = os.environ.get("UPLOAD_DIR") or os.path.join(tempfile.gettempdir(), "docscan_uploads")
    UPLOAD_FIELD = "document"
    MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB
    MAX_CONTENT_LENGTH = MAX_UPLOAD_BYTES + 1024 * 1024  # multipart overhead

    # Extraction / summarization
    SUMMARY_CHAR_LIMIT = 8000
    OCR_LANGUAGE = os.environ.get("OCR_LANGUAGE", "eng")
    OCR_TIMEOUT = _env_int("OCR_TIMEOUT", 120)

    # Server
    PORT = _env_int("PORT", 5000)
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # App Version
    APP_VERSION = os.environ.get("APP_VERSION", "2026.10")


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    DATABASE_URL = "sqlite:///:memory:"
    GEMINI_API_KEY = "test-key"


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
