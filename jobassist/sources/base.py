"""
Shared types for job listing sources.

Every provider adapter turns SearchParams into a provider request and maps
the provider's JSON into JobListing records.
"""

import logging
import uuid
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from jobassist.config import Settings

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
SNIPPET_LENGTH = 150

ItemT = TypeVar("ItemT", bound=BaseModel)


class SearchParams(BaseModel):
    """Normalized search parameters, fixed for the lifetime of a request."""

    model_config = ConfigDict(frozen=True)

    keywords: str
    location: str
    skills: str | None = None
    page: int = Field(default=1, ge=1)

    @property
    def terms(self) -> str:
        """Keywords and skills as one whitespace-collapsed search string."""
        return " ".join(f"{self.keywords} {self.skills or ''}".split())


class JobListing(BaseModel):
    """A job posting normalized to the common shape shared by all sources."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    source_api: str
    title: str
    company: str
    location: str
    description: str = ""
    snippet: str | None = None
    url: str | None = None
    date_posted: str | None = None
    salary: str | None = None


def make_snippet(text: str | None, max_chars: int = SNIPPET_LENGTH) -> str | None:
    """Truncate text to max_chars, adding an ellipsis when something was cut."""
    if not text:
        return None
    if len(text) > max_chars:
        return text[:max_chars] + "..."
    return text


def make_id(prefix: str, native_id: Any = None) -> str:
    """Source-prefixed id; a random uuid stands in when the provider has none."""
    if native_id in (None, ""):
        native_id = uuid.uuid4()
    return f"{prefix}-{native_id}"


class JobSource:
    """
    Base class for a job listing provider reached through RapidAPI.

    Subclasses set ``name``/``id_prefix``, pick their host from settings and
    implement ``build_request`` and ``parse``. ``fetch`` never raises: a
    missing configuration, transport error or unexpected payload all yield
    an empty list.
    """

    name: str = ""
    id_prefix: str = ""

    def __init__(self, api_key: str, host: str):
        self.api_key = api_key
        self.host = host

    @classmethod
    def from_settings(cls, settings: Settings) -> "JobSource":
        raise NotImplementedError

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.host)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.host,
        }

    def build_request(self, params: SearchParams, client: httpx.AsyncClient) -> httpx.Request:
        raise NotImplementedError

    def parse(self, payload: Any) -> list[JobListing]:
        raise NotImplementedError

    def validate_items(self, model: type[ItemT], items: list[Any]) -> list[ItemT]:
        """Validate records one by one, skipping the ones that do not fit the schema."""
        valid = []
        for index, item in enumerate(items):
            try:
                valid.append(model.model_validate(item))
            except ValidationError as e:
                logger.warning(f"[{self.name}] Skipping malformed record #{index}: {e.error_count()} validation errors")
        return valid

    async def fetch(self, params: SearchParams, client: httpx.AsyncClient) -> list[JobListing]:
        """Search this provider and return normalized listings."""
        if not self.is_configured:
            logger.warning(f"{self.name} API not configured. Skipping.")
            return []

        try:
            response = await client.send(self.build_request(params, client))
            response.raise_for_status()
            jobs = self.parse(response.json())
        except httpx.HTTPStatusError as e:
            logger.error(f"[{self.name}] HTTP error: {e.response.status_code} {_error_message(e.response)}")
            return []
        except Exception as e:
            logger.error(f"[{self.name}] Search failed: {e}")
            return []

        logger.info(f"[{self.name}] {len(jobs)} jobs for page {params.page}")
        return jobs


def _error_message(response: httpx.Response) -> str:
    """Best-effort ``message`` field from an error response body."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return ""
