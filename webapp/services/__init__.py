"""
Webapp services package.

- logging_config: Application logging configuration
- diagram_service: Diagram building, rendering and decoding for routes
"""

from webapp.services.logging_config import configure_logging

__all__ = ["configure_logging"]
