"""Generation endpoints: cover letter, interview questions, resume keywords."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from jobassist.api.deps import get_gemini_client, get_settings
from jobassist.api.schemas import (
    CoverLetterResponse,
    ErrorResponse,
    GenerationRequest,
    InterviewQuestionsResponse,
    KeywordRequest,
)
from jobassist.config import Settings
from jobassist.generation import (
    GeminiClient,
    GeminiNotConfiguredError,
    GenerationError,
    JobDetails,
    ResumeKeywords,
    extract_resume_keywords,
    generate_cover_letter,
    generate_interview_questions,
)

logger = logging.getLogger(__name__)

router = APIRouter(responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})


def _require_gemini(gemini: GeminiClient, endpoint: str) -> None:
    if not gemini.is_configured:
        logger.error(f"[{endpoint}] Gemini API key not configured.")
        raise HTTPException(status_code=500, detail=str(GeminiNotConfiguredError()))


def _require_job_and_resume(data: GenerationRequest, detail: str) -> JobDetails:
    job = data.job_details
    if job is None or not job.is_complete or not data.resume_text.strip():
        raise HTTPException(status_code=400, detail=detail)
    return job


@router.post("/generate-cover-letter", response_model=CoverLetterResponse)
async def cover_letter(data: GenerationRequest, gemini: GeminiClient = Depends(get_gemini_client)):
    """Write a cover letter tailored to one job."""
    _require_gemini(gemini, "generate-cover-letter")
    job = _require_job_and_resume(
        data, "Missing required fields: jobDetails (title, company, description) and resumeText."
    )

    try:
        letter = await generate_cover_letter(gemini, job, data.resume_text)
    except GenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.exception(f"[generate-cover-letter] Error generating with Gemini: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate cover letter with Gemini.")

    return CoverLetterResponse(cover_letter=letter)


@router.post("/generate-interview-questions", response_model=InterviewQuestionsResponse)
async def interview_questions(data: GenerationRequest, gemini: GeminiClient = Depends(get_gemini_client)):
    """Suggest 5-7 interview questions for one job."""
    _require_gemini(gemini, "generate-interview-questions")
    job = _require_job_and_resume(data, "Missing required fields: jobDetails and resumeText.")

    try:
        questions = await generate_interview_questions(gemini, job, data.resume_text)
    except GenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.exception(f"[generate-interview-questions] Error generating with Gemini: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate interview questions.")

    return InterviewQuestionsResponse(questions=questions)


@router.post("/extract-resume-keywords", response_model=ResumeKeywords)
async def resume_keywords(
    data: KeywordRequest,
    gemini: GeminiClient = Depends(get_gemini_client),
    app_settings: Settings = Depends(get_settings),
):
    """Suggest search form values (titles, skills, location) from resume text."""
    _require_gemini(gemini, "extract-resume-keywords")
    if not data.resume_text.strip():
        raise HTTPException(status_code=400, detail="Missing required field: resumeText.")

    try:
        return await extract_resume_keywords(gemini, data.resume_text, app_settings.default_resume_location)
    except GenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.exception(f"[extract-resume-keywords] Error extracting with Gemini: {e}")
        raise HTTPException(status_code=500, detail="Failed to extract keywords from resume.")
