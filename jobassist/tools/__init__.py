"""
Tools for the Job Search Assistant.

- resume_parser: Extract text from PDF, DOCX and TXT resumes
"""

from jobassist.tools.resume_parser import (
    UnsupportedDocumentError,
    extract_resume_text,
    parse_resume_from_path,
)

__all__ = ["UnsupportedDocumentError", "extract_resume_text", "parse_resume_from_path"]
