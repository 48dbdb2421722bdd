"""Configuration for the Flask application."""

import os
from pathlib import Path


class Config:
    """Flask configuration."""

    # Flask settings
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"

    # CORS settings
    CORS_ORIGINS = "*"

    # Request size (element lists are short)
    MAX_CONTENT_LENGTH = 64 * 1024

    # Graphviz layout engine name
    GRAPHVIZ_ENGINE = os.environ.get("GRAPHVIZ_ENGINE", "dot")

    # Diagram defaults
    DEFAULT_ELEMENTS = "a,b,c,d"
    DEFAULT_SPACING = float(os.environ.get("DEFAULT_SPACING", "0.8"))
    DEFAULT_FORMAT = os.environ.get("DEFAULT_FORMAT", "png")
    # Upper bound on elements per request: 2**N subsets are enumerated
    MAX_ELEMENTS = int(os.environ.get("MAX_ELEMENTS", "10"))

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_DIR = Path(os.environ.get("LOG_DIR", "logs"))
