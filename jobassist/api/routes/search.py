"""Job search endpoint."""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException

from jobassist.api.deps import get_aggregator, get_http_client
from jobassist.api.schemas import ErrorResponse, SearchRequest
from jobassist.search import JobAggregator
from jobassist.sources import JobListing, SearchParams

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/search-jobs",
    response_model=list[JobListing],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search_jobs(
    data: SearchRequest,
    aggregator: JobAggregator = Depends(get_aggregator),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Search every configured provider and return de-duplicated listings."""
    keywords = (data.keywords or "").strip()
    location = (data.location or "").strip()
    if not keywords or not location:
        raise HTTPException(status_code=400, detail="Keywords and Location are required.")

    params = SearchParams(
        keywords=keywords,
        location=location,
        skills=(data.skills or "").strip() or None,
        page=data.page or 1,
    )

    try:
        return await aggregator.search(params, client)
    except Exception as e:
        logger.exception(f"Error in job search handler: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch jobs.")
