"""API request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jobassist.generation.schemas import JobDetails


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    message: str


# Search schemas
class SearchRequest(BaseModel):
    keywords: str | None = None
    location: str | None = None
    skills: str | None = None
    page: int | None = Field(default=None, ge=1, description="Upstream page, defaults to 1")


# Generation schemas
class GenerationRequest(CamelModel):
    job_details: JobDetails | None = None
    resume_text: str = ""


class CoverLetterResponse(CamelModel):
    cover_letter: str


class InterviewQuestionsResponse(BaseModel):
    questions: str


class KeywordRequest(CamelModel):
    resume_text: str = ""


# Resume upload
class ParsedResumeResponse(CamelModel):
    text: str
    file_name: str
