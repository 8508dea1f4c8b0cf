"""Text extraction from uploaded supporting documents (CV, job posting, instructions)."""

import io
import logging

import pdfplumber
from docx import Document

from ..config import settings

logger = logging.getLogger(__name__)

PDF_TYPE = "application/pdf"
DOC_TYPE = "application/msword"
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
ALLOWED_TYPES = {PDF_TYPE, DOCX_TYPE}


class DocumentError(ValueError):
    """Upload rejected or unreadable."""


def _kind(filename: str, content_type: str) -> str:
    name = (filename or "").lower()
    if content_type == PDF_TYPE or name.endswith(".pdf"):
        return "pdf"
    if content_type == DOCX_TYPE or name.endswith(".docx"):
        return "docx"
    if content_type == DOC_TYPE or name.endswith(".doc"):
        return "doc"
    return ""


def _pdf_text(data: bytes) -> str:
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        return "\n".join((page.extract_text() or "") for page in pdf.pages)


def _docx_text(data: bytes) -> str:
    doc = Document(io.BytesIO(data))
    return "\n".join(p.text for p in doc.paragraphs)


def extract_text(filename: str, content_type: str, data: bytes, max_bytes: int | None = None) -> str:
    """Plain text of a PDF or Word upload, whitespace-normalised per line."""
    max_bytes = settings.max_upload_bytes if max_bytes is None else max_bytes
    kind = _kind(filename, content_type)
    # python-docx only reads the OOXML format
    if kind == "doc":
        raise DocumentError("Legacy .doc files cannot be read; save as DOCX or PDF")
    if content_type not in ALLOWED_TYPES and not _kind(filename, ""):
        raise DocumentError("Only PDF or DOCX up to 5 MB")
    if len(data) > max_bytes:
        raise DocumentError(f"File larger than {max_bytes // 1_048_576} MB")

    try:
        raw = _pdf_text(data) if kind == "pdf" else _docx_text(data)
    except Exception as exc:
        # pdfminer and python-docx raise a wide range of parser errors
        logger.warning("Document extraction failed for %r: %s", filename, exc)
        raise DocumentError("Could not read the document") from exc

    lines = [" ".join(line.split()) for line in raw.splitlines()]
    text = "\n".join(line for line in lines if line)
    if not text:
        raise DocumentError("No text found in the document")
    return text
