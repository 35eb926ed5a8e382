"""
Multi-source job search.

Fans a search out to every configured source at once, waits for all of them
to settle, and merges what came back. A failing source never blocks or aborts
the others; it simply contributes nothing.
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import httpx

from jobassist.config import Settings
from jobassist.search.dedupe import deduplicate_jobs
from jobassist.sources import JobListing, JobSource, SearchParams, build_sources

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchOutcome:
    """What one source produced for a search: listings, or why it failed."""

    source: str
    jobs: list[JobListing] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class JobAggregator:
    """Concurrent fan-out over a fixed, ordered set of sources."""

    def __init__(self, sources: Sequence[JobSource], timeout: float = 30.0):
        self.sources = list(sources)
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "JobAggregator":
        return cls(build_sources(settings), timeout=settings.search_timeout)

    @property
    def configured_sources(self) -> list[JobSource]:
        return [s for s in self.sources if s.is_configured]

    async def _run(self, source: JobSource, params: SearchParams, client: httpx.AsyncClient) -> FetchOutcome:
        try:
            jobs = await source.fetch(params, client)
        except Exception as e:
            logger.error(f"[{source.name}] Fetch raised: {e}")
            return FetchOutcome(source=source.name, error=str(e) or type(e).__name__)
        return FetchOutcome(source=source.name, jobs=list(jobs))

    async def gather(self, params: SearchParams, client: httpx.AsyncClient | None = None) -> list[FetchOutcome]:
        """Run every configured source and return one outcome per source, in order."""
        sources = self.configured_sources
        if not sources:
            logger.warning("No job search APIs are configured. Returning empty results.")
            return []

        if client is None:
            async with httpx.AsyncClient(timeout=self.timeout) as own_client:
                return await self._gather(sources, params, own_client)
        return await self._gather(sources, params, client)

    async def _gather(
        self, sources: list[JobSource], params: SearchParams, client: httpx.AsyncClient
    ) -> list[FetchOutcome]:
        # _run never raises, so gather always waits for every source
        return list(await asyncio.gather(*(self._run(s, params, client) for s in sources)))

    async def collect(self, params: SearchParams, client: httpx.AsyncClient | None = None) -> list[JobListing]:
        """All listings from successful sources, concatenated in registration order."""
        outcomes = await self.gather(params, client)
        jobs: list[JobListing] = []
        for outcome in outcomes:
            if outcome.ok:
                jobs.extend(outcome.jobs)
        failed = [o.source for o in outcomes if not o.ok]
        if failed:
            logger.warning(f"Sources failed: {', '.join(failed)}")
        return jobs

    async def search(self, params: SearchParams, client: httpx.AsyncClient | None = None) -> list[JobListing]:
        """Search all configured sources and return de-duplicated listings."""
        jobs = await self.collect(params, client)
        if not jobs:
            return []

        unique = deduplicate_jobs(jobs)
        logger.info(f"Search '{params.keywords}' in '{params.location}': {len(jobs)} jobs, {len(unique)} unique")
        return unique
