"""
JSearch source (RapidAPI).

GET https://{host}/search with a free-text query of the form
"<keywords> <skills> in <location>".
"""

import httpx
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jobassist.config import Settings
from jobassist.sources.base import NOT_AVAILABLE, JobListing, JobSource, SearchParams, make_id, make_snippet

NO_DESCRIPTION = "No description available."


class JSearchHighlights(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    snippets: list[str] = Field(default_factory=list, alias="Snippets")
    description: str | None = None


class JSearchJob(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    job_id: str | None = None
    job_title: str | None = None
    employer_name: str | None = None
    employer_website: str | None = None
    job_city: str | None = None
    job_state: str | None = None
    job_country: str | None = None
    job_description: str | None = None
    job_highlights: JSearchHighlights | None = None
    job_apply_link: str | None = None
    job_posted_at_datetime_utc: str | None = None


class JSearchResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[Any] | None = None


class JSearchSource(JobSource):
    """Job search aggregator covering LinkedIn, Indeed, Glassdoor and others."""

    name = "JSearch"
    id_prefix = "jsearch"

    @classmethod
    def from_settings(cls, settings: Settings) -> "JSearchSource":
        return cls(settings.rapidapi_key, settings.rapidapi_jsearch_host)

    def build_request(self, params: SearchParams, client: httpx.AsyncClient) -> httpx.Request:
        query = f"{params.terms} in {params.location}".strip()
        return client.build_request(
            "GET",
            f"https://{self.host}/search",
            params={"query": query, "page": str(params.page), "num_pages": "1"},
            headers=self.headers,
        )

    def parse(self, payload) -> list[JobListing]:
        response = JSearchResponse.model_validate(payload)
        return [self._to_listing(job) for job in self.validate_items(JSearchJob, response.data or [])]

    def _to_listing(self, job: JSearchJob) -> JobListing:
        description = job.job_description or NO_DESCRIPTION

        snippet = None
        if job.job_highlights:
            snippet = next(iter(job.job_highlights.snippets), None) or job.job_highlights.description
        if not snippet and description != NO_DESCRIPTION:
            snippet = make_snippet(description)

        return JobListing(
            id=make_id(self.id_prefix, job.job_id),
            source_api=self.name,
            title=job.job_title or NOT_AVAILABLE,
            company=job.employer_name or NOT_AVAILABLE,
            location=job.job_city or job.job_state or job.job_country or NOT_AVAILABLE,
            description=description,
            snippet=snippet,
            url=job.job_apply_link or job.employer_website,
            date_posted=job.job_posted_at_datetime_utc,
        )
