"""
LinkedIn Jobs Search source (RapidAPI, POST endpoint).

Descriptions come back as HTML; snippets are built from the tag-stripped text
while the description itself is passed through untouched.
"""

import re

import httpx
from typing import Any

from pydantic import BaseModel, ConfigDict, RootModel

from jobassist.config import Settings
from jobassist.sources.base import NOT_AVAILABLE, JobListing, JobSource, SearchParams, make_id, make_snippet

NO_DESCRIPTION = "No description provided."

_TAG_RE = re.compile(r"<[^>]+>")


def html_to_text(html: str) -> str:
    """Drop tags and collapse whitespace."""
    return " ".join(_TAG_RE.sub(" ", html).split())


class LinkedInJob(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    linkedin_job_id: str | None = None
    job_id: str | None = None
    job_title: str | None = None
    company_name: str | None = None
    job_location: str | None = None
    job_description: str | None = None
    linkedin_job_url: str | None = None
    job_url: str | None = None
    posted_date: str | None = None
    job_posted_date: str | None = None


class LinkedInResponse(RootModel[list[Any]]):
    pass


class LinkedInPostSource(JobSource):
    """LinkedIn job search via a JSON POST body."""

    name = "LinkedInPostSearch"
    id_prefix = "linkedinpost"

    @classmethod
    def from_settings(cls, settings: Settings) -> "LinkedInPostSource":
        return cls(settings.rapidapi_key, settings.rapidapi_linkedinpost_host)

    def build_request(self, params: SearchParams, client: httpx.AsyncClient) -> httpx.Request:
        body = {
            "search_terms": params.terms,
            "location": params.location,
            "page": str(params.page),
        }
        return client.build_request(
            "POST",
            f"https://{self.host}/",
            json=body,
            headers={"Content-Type": "application/json", **self.headers},
        )

    def parse(self, payload) -> list[JobListing]:
        response = LinkedInResponse.model_validate(payload)
        return [self._to_listing(job) for job in self.validate_items(LinkedInJob, response.root)]

    def _to_listing(self, job: LinkedInJob) -> JobListing:
        description = job.job_description or NO_DESCRIPTION
        snippet = None
        if description != NO_DESCRIPTION:
            snippet = make_snippet(html_to_text(description))

        return JobListing(
            id=make_id(self.id_prefix, job.linkedin_job_id or job.job_id),
            source_api=self.name,
            title=job.job_title or NOT_AVAILABLE,
            company=job.company_name or NOT_AVAILABLE,
            location=job.job_location or NOT_AVAILABLE,
            description=description,
            snippet=snippet,
            url=job.linkedin_job_url or job.job_url,
            date_posted=job.posted_date or job.job_posted_date,
        )
