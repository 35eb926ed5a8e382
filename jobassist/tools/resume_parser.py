"""
Resume text extraction.

Extracts plain text from PDF (pypdf), DOCX (python-docx) and TXT uploads.
"""

from io import BytesIO
from pathlib import Path

from docx import Document
from pypdf import PdfReader

PDF_TYPE = "application/pdf"
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_TYPE = "text/plain"

_TYPES_BY_SUFFIX = {
    ".pdf": PDF_TYPE,
    ".docx": DOCX_TYPE,
    ".txt": TEXT_TYPE,
}

MAX_UPLOAD_SIZE = 5 * 1024 * 1024  # 5 MB


class UnsupportedDocumentError(ValueError):
    def __init__(self, content_type: str | None):
        self.content_type = content_type
        super().__init__(f"Unsupported file type: {content_type}. Please upload PDF, DOCX, or TXT.")


def parse_pdf(content: bytes) -> str:
    """
    Extract text from a PDF file.

    Args:
        content: Raw bytes of the PDF file

    Returns:
        Extracted text content from all pages
    """
    reader = PdfReader(BytesIO(content))
    text_parts = []

    for page in reader.pages:
        page_text = page.extract_text()
        if page_text:
            text_parts.append(page_text)

    return "\n\n".join(text_parts)


def parse_docx(content: bytes) -> str:
    """Extract paragraph text from a DOCX file."""
    document = Document(BytesIO(content))
    return "\n".join(p.text for p in document.paragraphs)


def parse_txt(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")


def detect_content_type(filename: str | None, content_type: str | None) -> str | None:
    """Trust the declared type when it is one we handle, else go by extension."""
    if content_type in (PDF_TYPE, DOCX_TYPE, TEXT_TYPE):
        return content_type
    if filename:
        return _TYPES_BY_SUFFIX.get(Path(filename).suffix.lower(), content_type)
    return content_type


def extract_resume_text(content: bytes, filename: str | None, content_type: str | None = None) -> str:
    """
    Extract plain text from an uploaded resume.

    Raises:
        UnsupportedDocumentError: not a PDF, DOCX or TXT file
    """
    kind = detect_content_type(filename, content_type)
    if kind == PDF_TYPE:
        return parse_pdf(content)
    if kind == DOCX_TYPE:
        return parse_docx(content)
    if kind == TEXT_TYPE:
        return parse_txt(content)
    raise UnsupportedDocumentError(content_type or kind)


def parse_resume_from_path(file_path: str) -> str:
    """
    Extract text from a resume file path.

    Args:
        file_path: Path to a PDF, DOCX or TXT file

    Returns:
        Extracted text content
    """
    path = Path(file_path)
    return extract_resume_text(path.read_bytes(), path.name)
