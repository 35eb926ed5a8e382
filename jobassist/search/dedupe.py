"""
De-duplication of listings returned by several providers.

Two listings are the same job when their normalized title, company and
location prefix match. The first one seen wins. Matching is approximate:
slightly different titles across providers are kept as separate jobs.
"""

import re
from collections.abc import Iterable

from jobassist.sources.base import JobListing

KEY_SEPARATOR = "|"

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")


def _collapse(value: str | None) -> str:
    """Lowercase, trim and collapse runs of whitespace."""
    return " ".join((value or "").lower().split())


def location_key(location: str | None) -> str:
    """First comma segment of the location, alphanumerics and spaces only."""
    loc = (location or "").lower().strip()
    if "," in loc:
        loc = loc.split(",")[0]
    return _collapse(_NON_ALNUM_RE.sub("", loc))


def dedup_key(job: JobListing) -> str:
    return KEY_SEPARATOR.join((_collapse(job.title), _collapse(job.company), location_key(job.location)))


def deduplicate_jobs(jobs: Iterable[JobListing]) -> list[JobListing]:
    """Drop near-duplicate listings, keeping first occurrences in order."""
    seen: dict[str, JobListing] = {}
    for job in jobs:
        seen.setdefault(dedup_key(job), job)
    return list(seen.values())
