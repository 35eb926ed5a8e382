"""FastAPI dependencies.

Settings and the shared HTTP client are resolved here so tests can swap them
through ``app.dependency_overrides``.
"""

import httpx
from fastapi import Depends, Request

from jobassist.config import Settings, settings
from jobassist.generation import GeminiClient
from jobassist.search import JobAggregator


def get_settings() -> Settings:
    return settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    """The AsyncClient opened by the app lifespan."""
    return request.app.state.http_client


def get_aggregator(app_settings: Settings = Depends(get_settings)) -> JobAggregator:
    return JobAggregator.from_settings(app_settings)


def get_gemini_client(
    app_settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> GeminiClient:
    return GeminiClient.from_settings(app_settings, http_client=http_client)


__all__ = ["get_settings", "get_http_client", "get_aggregator", "get_gemini_client"]
