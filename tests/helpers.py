import json

import httpx

from jobassist.config import Settings
from jobassist.sources import JobListing

JSEARCH_HOST = "jsearch.test"
UPWORK_HOST = "upwork.test"
LINKEDIN_HOST = "linkedin.test"
GEMINI_HOST = "generativelanguage.googleapis.com"


def make_settings(**overrides) -> Settings:
    values = {
        "rapidapi_key": "rapid-key",
        "rapidapi_jsearch_host": JSEARCH_HOST,
        "rapidapi_upwork_jobs_p_host": UPWORK_HOST,
        "rapidapi_linkedinpost_host": LINKEDIN_HOST,
        "gemini_api_key": "gemini-key",
        "gemini_model": "gemini-test",
        "search_timeout": 5.0,
        "default_resume_location": "India",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def listing(title="Engineer", company="Acme", location="NYC", source="JSearch", **extra) -> JobListing:
    job_id = extra.pop("id", f"{source.lower()}-{title}-{company}-{location}")
    return JobListing(id=job_id, source_api=source, title=title, company=company, location=location, **extra)


def gemini_text(text: str, finish_reason: str = "STOP") -> dict:
    return {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": text}]}, "finishReason": finish_reason}
        ]
    }


class FakeUpstream:
    """Routes requests by host to canned responses and records what was sent."""

    def __init__(self):
        self.routes: dict[str, object] = {}
        self.requests: list[httpx.Request] = []

    def on(self, host: str, response) -> "FakeUpstream":
        """``response`` is an httpx.Response, a JSON-able object, an exception or a callable."""
        self.routes[host] = response
        return self

    def requests_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.host)
        if route is None:
            return httpx.Response(404, json={"message": "no route"})
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return httpx.Response(route.status_code, content=route.content, headers=route.headers)
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content)
