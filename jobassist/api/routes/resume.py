"""Resume upload endpoint."""

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from jobassist.api.schemas import ErrorResponse, ParsedResumeResponse
from jobassist.tools.resume_parser import MAX_UPLOAD_SIZE, UnsupportedDocumentError, extract_resume_text

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/parse-resume",
    response_model=ParsedResumeResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}},
)
async def parse_resume(resume_file: UploadFile | None = File(default=None, alias="resumeFile")):
    """Extract plain text from an uploaded PDF, DOCX or TXT resume."""
    if resume_file is None:
        raise HTTPException(status_code=400, detail="No file uploaded.")
    if not resume_file.filename:
        raise HTTPException(status_code=400, detail="Invalid file data received.")

    content = await resume_file.read()
    if len(content) > MAX_UPLOAD_SIZE:
        raise HTTPException(status_code=413, detail="File too large. Maximum size is 5 MB.")

    logger.info(f"Processing file: {resume_file.filename}, type: {resume_file.content_type}")

    try:
        text = extract_resume_text(content, resume_file.filename, resume_file.content_type)
    except UnsupportedDocumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error parsing resume {resume_file.filename}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to parse resume file: {e}")

    logger.info(f"Successfully parsed: {resume_file.filename}")
    return ParsedResumeResponse(text=text, file_name=resume_file.filename)
