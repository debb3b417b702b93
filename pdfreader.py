from pypdf import PdfReader
import logging
import os
import re
from typing import List, Optional

from config import PDF_EXTENSION, PAGE_SEPARATOR

logger = logging.getLogger("documents")


def _normalize(text: str) -> str:
    return re.sub(r'\s+', ' ', text).strip()


def parse_pdf_to_pages_text(file_path: str) -> Optional[List[str]]:
    """
    parses a PDF file and extracts text from each page.
    returns a list of strings, where each string is the text of a page.
    """
    pages_text_content = []
    try:
        reader = PdfReader(file_path)
        num_pages = len(reader.pages)
        logger.info(f"Extracting text from '{file_path}' ({num_pages} pages)")
        for i, page in enumerate(reader.pages):
            text = page.extract_text()

            if text:
                pages_text_content.append(_normalize(text))
            else:
                # Handle cases where a page might have no extractable text (e.g., image-only page)
                logger.warning(f"No text extracted from page {i + 1} of '{file_path}'")
                pages_text_content.append(f"[Page {i+1} - No text extracted or image-only page]")

    except FileNotFoundError:
        logger.error(f"PDF document not found at {file_path}")
        return None
    except Exception as e:
        logger.error(f"Error parsing PDF document '{file_path}': {e}")
        return None
    return pages_text_content


def read_text_file_pages(file_path: str) -> Optional[List[str]]:
    """
    Reads a plain text file and splits it into pages on form feed characters.
    Whitespace inside each page is kept as is so offsets line up with the file.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        logger.error(f"Text document not found at {file_path}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading text document '{file_path}': {e}")
        return None

    pages = content.split(PAGE_SEPARATOR)
    logger.info(f"Read '{file_path}' ({len(pages)} pages)")
    return pages


def read_document_pages(file_path: str) -> Optional[List[str]]:
    """Extract the pages of a PDF or plain text document, chosen by file extension."""
    if file_path.lower().endswith(PDF_EXTENSION):
        return parse_pdf_to_pages_text(file_path)
    return read_text_file_pages(file_path)


def get_document_title(file_path: str) -> str:
    """
    Gets the title from the document file name.
    """
    # Handle both separators, paths may come from a different platform
    return os.path.basename(file_path.replace('\\', '/'))
