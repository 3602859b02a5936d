"""MCP server for the Pinpoint recruiting API."""

from .client import PinpointAPIError, PinpointClient
from .config import ConfigError, PinpointConfig
from .models import ApplicationData, ApplicationFilters, JobFilters
from .pdf import PDF_PARSE_ERROR, PdfDownloadError, extract_text_from_pdf, parse_pdf_from_url
from .server import create_server, main_sync

__all__ = [
    "ApplicationData",
    "ApplicationFilters",
    "ConfigError",
    "JobFilters",
    "PDF_PARSE_ERROR",
    "PdfDownloadError",
    "PinpointAPIError",
    "PinpointClient",
    "PinpointConfig",
    "create_server",
    "extract_text_from_pdf",
    "main_sync",
    "parse_pdf_from_url",
]
