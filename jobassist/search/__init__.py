"""
Job search across providers.

- aggregator: concurrent fan-out and merge
- dedupe: near-duplicate removal
"""

from jobassist.search.aggregator import FetchOutcome, JobAggregator
from jobassist.search.dedupe import dedup_key, deduplicate_jobs

__all__ = ["FetchOutcome", "JobAggregator", "dedup_key", "deduplicate_jobs"]
