"""Aggregate pod category counters."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields

from podsum.domain.pod_classification import Category, PodSnapshot, classify

CATEGORY_ORDER: tuple[Category, ...] = tuple(Category)


@dataclass
class PodTotals:
    """Category counters for one namespace or the whole cluster.

    ``total`` is the raw number of pods seen; the other counters overlap
    and do not sum up to it.
    """

    total: int = 0
    pending: int = 0
    running: int = 0
    ready: int = 0
    running_not_ready: int = 0
    unscheduled: int = 0
    uninitialized: int = 0
    containers_not_ready: int = 0

    def increment(self, category: Category, amount: int = 1) -> None:
        """Add ``amount`` to the counter of ``category``."""
        setattr(self, category.value, getattr(self, category.value) + amount)

    def merge(self, other: PodTotals) -> PodTotals:
        """Add every counter of ``other`` into this record."""
        for item in fields(self):
            current = getattr(self, item.name)
            setattr(self, item.name, current + getattr(other, item.name))
        return self

    def as_dict(self) -> dict[str, int]:
        """Return counters keyed by category name, in report order."""
        return {
            category.value: getattr(self, category.value) for category in CATEGORY_ORDER
        }


def fold_namespace(totals: PodTotals, pods: Iterable[PodSnapshot]) -> PodTotals:
    """Classify the pods of one namespace into ``totals`` and return it."""
    pods = list(pods)
    totals.total += len(pods)
    for pod in pods:
        for category in classify(pod):
            totals.increment(category)
    return totals


def render_totals_lines(totals: PodTotals) -> list[str]:
    """Render totals as ``<category>:<count>`` lines in report order."""
    return [f"{name}:{count}" for name, count in totals.as_dict().items()]
