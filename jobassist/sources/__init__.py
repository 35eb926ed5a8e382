"""
Job listing sources.

- jsearch: JSearch aggregator (GET /search)
- upwork: Upwork freelance jobs (GET /jobs)
- linkedin: LinkedIn Jobs Search (POST /)
"""

from jobassist.config import Settings
from jobassist.sources.base import JobListing, JobSource, SearchParams
from jobassist.sources.jsearch import JSearchSource
from jobassist.sources.linkedin import LinkedInPostSource
from jobassist.sources.upwork import UpworkJobsSource

# Registration order is the order results are concatenated in
SOURCE_TYPES: tuple[type[JobSource], ...] = (JSearchSource, UpworkJobsSource, LinkedInPostSource)


def build_sources(settings: Settings) -> list[JobSource]:
    """Instantiate every known source from settings, configured or not."""
    return [source_type.from_settings(settings) for source_type in SOURCE_TYPES]


__all__ = [
    "JobListing",
    "JobSource",
    "SearchParams",
    "JSearchSource",
    "UpworkJobsSource",
    "LinkedInPostSource",
    "SOURCE_TYPES",
    "build_sources",
]
