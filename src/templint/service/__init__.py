"""Document discovery and analysis services."""

from templint.service.analyzer import TemplateAnalyzer
from templint.service.discovery import DocumentNotFoundError, discover

__all__ = [
    "DocumentNotFoundError",
    "TemplateAnalyzer",
    "discover",
]
