#!/usr/bin/env python3
"""
CV PDF to Markdown Extractor

Downloads a PDF (typically a CV attached to an application) and saves its
text to a markdown file.
"""

import asyncio
import os
import sys
from datetime import datetime
from typing import List, Optional
from urllib.parse import unquote, urlparse

from .pdf import PDF_PARSE_ERROR, PdfDownloadError, parse_pdf_from_url


def _document_name(url: str) -> str:
    name = os.path.basename(unquote(urlparse(url).path))
    return os.path.splitext(name)[0] or "document"


def default_output_file(url: str) -> str:
    """``<pdf basename>_extracted.md`` for the file named in the URL path"""
    return f"{_document_name(url)}_extracted.md"


def render_markdown(url: str, text: str, extracted_at: Optional[datetime] = None) -> str:
    extracted_at = extracted_at or datetime.now()
    title = _document_name(url)
    char_count = len(text)
    word_count = len(text.split())

    return f"""# {title}

**Extracted:** {extracted_at.strftime('%Y-%m-%d %H:%M:%S')}
**Source:** {url}
**Stats:** {char_count:,} characters, {word_count:,} words

---

{text}
"""


async def pdf_to_markdown(url: str, output_file: Optional[str] = None) -> Optional[str]:
    """
    Extract text from a PDF URL and save it to a markdown file

    Args:
        url: URL of the PDF file
        output_file: Output markdown file (optional, auto-generated if not provided)

    Returns:
        The path written, or None when nothing was written
    """
    output_file = output_file or default_output_file(url)

    print(f"🔍 Extracting text from: {url}")
    print(f"📄 Output file: {output_file}")

    try:
        text = await parse_pdf_from_url(url)
    except PdfDownloadError as e:
        print(f"❌ Error: {e}")
        return None

    if text == PDF_PARSE_ERROR:
        print(f"❌ Extraction failed: {text}")
        return None

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(render_markdown(url, text))

    file_size = os.path.getsize(output_file)
    print(f"💾 Saved to: {output_file} ({file_size:,} bytes)")
    return output_file


def main(argv: Optional[List[str]] = None) -> int:
    """Main function with command line interface"""
    args = sys.argv[1:] if argv is None else argv

    if not args:
        print("Usage: pinpoint-pdf-to-markdown <pdf_url> [output_file]")
        print("")
        print("Examples:")
        print("  pinpoint-pdf-to-markdown https://example.com/cv.pdf")
        print("  pinpoint-pdf-to-markdown https://example.com/cv.pdf extracted.md")
        return 1

    url = args[0]
    output_file = args[1] if len(args) > 1 else None

    written = asyncio.run(pdf_to_markdown(url, output_file))
    return 0 if written else 1


if __name__ == "__main__":
    sys.exit(main())
