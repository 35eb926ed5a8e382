"""
Text generation on top of Gemini.

- gemini: REST client and generation errors
- cover_letter: tailored cover letters
- interview_questions: interview preparation questions
- resume_keywords: search form suggestions from a resume
"""

from jobassist.generation.cover_letter import generate_cover_letter
from jobassist.generation.gemini import (
    ContentBlockedError,
    EmptyGenerationError,
    GeminiClient,
    GeminiNotConfiguredError,
    GenerationError,
    GenerationSettings,
    MalformedOutputError,
)
from jobassist.generation.interview_questions import generate_interview_questions
from jobassist.generation.resume_keywords import extract_resume_keywords
from jobassist.generation.schemas import JobDetails, ResumeKeywords

__all__ = [
    "ContentBlockedError",
    "EmptyGenerationError",
    "GeminiClient",
    "GeminiNotConfiguredError",
    "GenerationError",
    "GenerationSettings",
    "JobDetails",
    "MalformedOutputError",
    "ResumeKeywords",
    "extract_resume_keywords",
    "generate_cover_letter",
    "generate_interview_questions",
]
