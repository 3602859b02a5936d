"""
PDF text extraction for candidate CVs.

A PDF that cannot be parsed is a content problem and yields the
``PDF_PARSE_ERROR`` sentinel text. A PDF that cannot be downloaded is an
operational problem and raises ``PdfDownloadError``.
"""

import asyncio
import io
import logging
from typing import Iterator, List, Optional

import aiohttp
import pdfplumber

logger = logging.getLogger(__name__)

PDF_PARSE_ERROR = "Error extracting text from PDF"


class PdfDownloadError(Exception):
    """The PDF could not be fetched"""


async def download_pdf(url: str, session: aiohttp.ClientSession) -> bytes:
    """Download a PDF and return its raw bytes"""
    logger.info(f"Downloading PDF from: {url}")

    async with session.get(url) as response:
        if not 200 <= response.status < 300:
            logger.error(f"Failed to download PDF: {response.status}")
            raise PdfDownloadError(f"HTTP {response.status} {response.reason or ''}".strip())
        return await response.read()


def _iter_text_fragments(pdf: "pdfplumber.PDF") -> Iterator[str]:
    for page in pdf.pages:
        for word in page.extract_words():
            text = word.get("text")
            if text:
                yield text


def extract_text_from_pdf(content: bytes) -> str:
    """
    Extract the text of a PDF held in memory.

    Text fragments are joined with a single space. Parser failures return
    ``PDF_PARSE_ERROR`` instead of raising.
    """
    fragments: List[str] = []
    try:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            fragments.extend(_iter_text_fragments(pdf))
    except Exception as e:
        logger.error(f"PDF parsing error: {e}")
        return PDF_PARSE_ERROR

    logger.info(f"Extracted {len(fragments)} text fragments from PDF")
    return " ".join(fragments)


async def parse_pdf_from_url(url: str, session: Optional[aiohttp.ClientSession] = None) -> str:
    """
    Fetch a PDF from a URL and extract its text content

    Args:
        url: Direct URL to the PDF file
        session: HTTP session to download with; a temporary one is used if omitted

    Returns:
        The raw text content of the PDF, or ``PDF_PARSE_ERROR``

    Raises:
        PdfDownloadError: on non-2xx responses, connection failures and timeouts
    """
    try:
        if session is None:
            async with aiohttp.ClientSession() as temp_session:
                content = await download_pdf(url, temp_session)
        else:
            content = await download_pdf(url, session)
    except (PdfDownloadError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        message = str(e) or type(e).__name__
        logger.error(f"Error processing PDF: {message}")
        raise PdfDownloadError(f"Failed to process PDF from URL: {message}") from e

    return await asyncio.to_thread(extract_text_from_pdf, content)
