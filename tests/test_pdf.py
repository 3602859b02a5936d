from __future__ import annotations

import asyncio
from typing import Any

import aiohttp
import pytest

from pinpoint_mcp import pdf
from pinpoint_mcp.pdf import (
    PDF_PARSE_ERROR,
    PdfDownloadError,
    extract_text_from_pdf,
    parse_pdf_from_url,
)

from .conftest import FakeResponse, FakeSession

CV_URL = "https://files.example.com/cv.pdf"


class _FakePage:
    def __init__(self, words: list[str]) -> None:
        self._words = words

    def extract_words(self) -> list[dict[str, Any]]:
        return [{"text": word, "x0": 0.0, "top": 0.0} for word in self._words]


class _FakePDF:
    def __init__(self, pages: list[list[str]]) -> None:
        self.pages = [_FakePage(words) for words in pages]

    def __enter__(self) -> "_FakePDF":
        return self

    def __exit__(self, *exc_info: Any) -> bool:
        return False


@pytest.fixture()
def fake_pdfplumber(monkeypatch: Any) -> dict[str, Any]:
    opened: dict[str, Any] = {}

    def fake_open(stream: Any) -> _FakePDF:
        opened["content"] = stream.read()
        return _FakePDF([["Ada", "Lovelace"], ["Analytical", "", "Engine"]])

    monkeypatch.setattr(pdf.pdfplumber, "open", fake_open)
    return opened


def test_extract_joins_fragments_with_spaces(fake_pdfplumber: dict[str, Any]) -> None:
    text = extract_text_from_pdf(b"%PDF-fake")
    assert text == "Ada Lovelace Analytical Engine"
    assert fake_pdfplumber["content"] == b"%PDF-fake"


def test_extract_returns_sentinel_on_parser_error() -> None:
    assert extract_text_from_pdf(b"this is not a pdf") == PDF_PARSE_ERROR


def test_extract_returns_sentinel_when_parser_raises_mid_stream(monkeypatch: Any) -> None:
    class _BrokenPage:
        def extract_words(self) -> list[dict[str, Any]]:
            raise RuntimeError("bad content stream")

    broken = _FakePDF([])
    broken.pages = [_BrokenPage()]  # type: ignore[list-item]
    monkeypatch.setattr(pdf.pdfplumber, "open", lambda stream: broken)

    assert extract_text_from_pdf(b"%PDF-fake") == PDF_PARSE_ERROR


def test_parse_pdf_from_url_downloads_and_extracts(fake_pdfplumber: dict[str, Any]) -> None:
    session = FakeSession()
    session.add("GET", CV_URL, FakeResponse(body=b"%PDF-1.7 bytes"))

    text = asyncio.run(parse_pdf_from_url(CV_URL, session=session))  # type: ignore[arg-type]

    assert text == "Ada Lovelace Analytical Engine"
    assert fake_pdfplumber["content"] == b"%PDF-1.7 bytes"


def test_parse_pdf_from_url_resolves_with_sentinel_for_bad_content() -> None:
    session = FakeSession()
    session.add("GET", CV_URL, FakeResponse(body=b"<html>not a pdf</html>"))

    text = asyncio.run(parse_pdf_from_url(CV_URL, session=session))  # type: ignore[arg-type]

    assert text == PDF_PARSE_ERROR


def test_parse_pdf_from_url_raises_on_404() -> None:
    session = FakeSession()
    session.add("GET", CV_URL, FakeResponse(status=404, reason="Not Found"))

    with pytest.raises(PdfDownloadError) as excinfo:
        asyncio.run(parse_pdf_from_url(CV_URL, session=session))  # type: ignore[arg-type]

    message = str(excinfo.value)
    assert message.startswith("Failed to process PDF from URL:")
    assert "HTTP 404 Not Found" in message


def test_parse_pdf_from_url_raises_on_network_error() -> None:
    session = FakeSession()
    session.add("GET", CV_URL, aiohttp.ClientConnectionError("Cannot connect to host files.example.com"))

    with pytest.raises(PdfDownloadError, match="Cannot connect to host files.example.com"):
        asyncio.run(parse_pdf_from_url(CV_URL, session=session))  # type: ignore[arg-type]


def test_parse_pdf_from_url_raises_on_timeout() -> None:
    session = FakeSession()
    session.add("GET", CV_URL, asyncio.TimeoutError())

    with pytest.raises(PdfDownloadError, match="TimeoutError"):
        asyncio.run(parse_pdf_from_url(CV_URL, session=session))  # type: ignore[arg-type]
