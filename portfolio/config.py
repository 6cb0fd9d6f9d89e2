"""
Portfolio Generator Configuration
Values come from the environment; secrets are read per request, never at import.
"""
import os
import tempfile
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash-preview-05-20"
DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


class Config:
    """Base configuration"""
    # Server
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "8080"))

    # Uploads
    MAX_CONTENT_LENGTH = 32 * 1024 * 1024  # 32 MiB
    UPLOAD_TMP_DIR = os.environ.get("UPLOAD_TMP_DIR") or tempfile.gettempdir()

    # Gemini
    GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY", "")
    GEMINI_MODEL = os.environ.get("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)
    GEMINI_API_BASE = os.environ.get("GEMINI_API_BASE", DEFAULT_GEMINI_API_BASE)
    UPSTREAM_TIMEOUT = float(os.environ.get("UPSTREAM_TIMEOUT", "60"))

    # App Version
    APP_VERSION = os.environ.get("APP_VERSION", "0.1.0")
    BUILD_TIME = os.environ.get("BUILD_TIME", "")
    GIT_COMMIT = os.environ.get("GIT_COMMIT", "")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    GEMINI_API_KEY = "test-key"
    GEMINI_API_BASE = "https://gemini.test/v1beta"


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": ProductionConfig,
}


@lru_cache()
def get_config(env: str = None):
    """Get configuration class by environment name"""
    env = env or os.environ.get("FLASK_ENV", "production")
    return config.get(env, config["default"])
