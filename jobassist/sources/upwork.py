"""
Upwork Jobs source (RapidAPI, upwork-jobs.p).

The response shape below is provisional: it has not been checked against
live data. The endpoint is known to return either a bare array or an object
wrapping the array under ``jobs`` or ``results``; an object with neither
yields no listings.
"""

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, model_validator

from jobassist.config import Settings
from jobassist.sources.base import NOT_AVAILABLE, JobListing, JobSource, SearchParams, make_id, make_snippet

NO_DESCRIPTION = "No description available."
DEFAULT_CLIENT = "Freelance Client"
DEFAULT_LOCATION = "Remote"


class UpworkClientLocation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    country: str | None = None


class UpworkClient(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    location: UpworkClientLocation | None = None


class UpworkBudget(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    amount: str | None = None
    currency: str | None = None


class UpworkRate(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    amount: str | None = None
    period: str | None = None


class UpworkJob(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str | None = None
    uid: str | None = None
    title: str | None = None
    description: str | None = None
    snippet: str | None = None
    client: UpworkClient | None = None
    company_name: str | None = None
    location: str | None = None
    url: str | None = None
    link: str | None = None
    date_created: str | None = None
    posted_time: str | None = None
    date_posted: str | None = None
    budget: UpworkBudget | None = None
    rate: UpworkRate | None = None

    @property
    def salary(self) -> str | None:
        if self.budget and self.budget.amount:
            return f"{self.budget.amount} {self.budget.currency or ''}".strip()
        if self.rate and self.rate.amount:
            return f"{self.rate.amount}/{self.rate.period or 'hr'}"
        return None


class UpworkResponse(BaseModel):
    jobs: list[Any] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _unwrap(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"jobs": data}
        if isinstance(data, dict) and isinstance(data.get("results"), list) and not isinstance(data.get("jobs"), list):
            return {"jobs": data["results"]}
        return data


class UpworkJobsSource(JobSource):
    """Freelance gigs from Upwork. Location is not part of the query."""

    name = "UpworkJobsP"
    id_prefix = "upwork-jobs-p"

    @classmethod
    def from_settings(cls, settings: Settings) -> "UpworkJobsSource":
        return cls(settings.rapidapi_key, settings.rapidapi_upwork_jobs_p_host)

    def build_request(self, params: SearchParams, client: httpx.AsyncClient) -> httpx.Request:
        query: dict[str, str] = {"page": str(params.page)}
        if params.terms:
            query["query"] = params.terms
        return client.build_request(
            "GET",
            f"https://{self.host}/jobs",
            params=query,
            headers=self.headers,
        )

    def parse(self, payload) -> list[JobListing]:
        response = UpworkResponse.model_validate(payload)
        return [self._to_listing(job) for job in self.validate_items(UpworkJob, response.jobs)]

    def _to_listing(self, job: UpworkJob) -> JobListing:
        description = job.description or job.snippet or NO_DESCRIPTION
        snippet = job.snippet
        if not snippet and description != NO_DESCRIPTION:
            snippet = make_snippet(description)

        client = job.client or UpworkClient()
        country = client.location.country if client.location else None

        return JobListing(
            id=make_id(self.id_prefix, job.id or job.uid),
            source_api=self.name,
            title=job.title or NOT_AVAILABLE,
            company=client.name or job.company_name or DEFAULT_CLIENT,
            location=country or job.location or DEFAULT_LOCATION,
            description=description,
            snippet=snippet,
            url=job.url or job.link,
            date_posted=job.date_created or job.posted_time or job.date_posted,
            salary=job.salary,
        )
