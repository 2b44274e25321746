"""Application facade exports for stable use-case API."""

from podsum.application.pod_health_summary_use_case import (
    execute_pod_health_summary,
)
from podsum.application.pod_source import FetchError, ResolutionError
from podsum.application.run_writer import RunResult

__all__ = [
    "execute_pod_health_summary",
    "FetchError",
    "ResolutionError",
    "RunResult",
]
