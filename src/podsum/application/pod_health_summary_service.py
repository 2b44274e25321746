"""Pod health summary across one or all namespaces."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from podsum.application.pod_source import (
    NamespaceResult,
    fetch_namespace,
    resolve_namespaces,
)
from podsum.domain.pod_totals import PodTotals, fold_namespace


@dataclass
class PodHealthSummary:
    """Cluster totals plus per-namespace breakdown of a single run."""

    totals: PodTotals = field(default_factory=PodTotals)
    by_namespace: dict[str, PodTotals] = field(default_factory=dict)
    failures: list[NamespaceResult] = field(default_factory=list)

    @property
    def namespaces(self) -> tuple[str, ...]:
        """Namespaces that contributed to the totals."""
        return tuple(self.by_namespace)

    @property
    def partial(self) -> bool:
        """Return whether any namespace failed to list its pods."""
        return bool(self.failures)


def aggregate(results: Iterable[NamespaceResult]) -> PodHealthSummary:
    """Fold namespace results into a summary, skipping failed namespaces."""
    summary = PodHealthSummary()
    for result in results:
        if not result.ok:
            summary.failures.append(result)
            continue
        ns_totals = fold_namespace(PodTotals(), result.pods)
        summary.by_namespace[result.namespace] = ns_totals
        summary.totals.merge(ns_totals)
    return summary


def summarize_pod_health(
    namespace: str | None = None,
    *,
    kubeconfig: Path | None = None,
) -> PodHealthSummary:
    """Resolve namespaces, list their pods and aggregate category counts.

    A failure to resolve namespaces propagates as ``ResolutionError``. A
    failure to list pods in one namespace is printed and that namespace is
    left out of the totals.
    """
    namespaces = resolve_namespaces(namespace, kubeconfig=kubeconfig)
    print(f"Summarizing pods in {len(namespaces)} namespace(s)")

    results: list[NamespaceResult] = []
    for ns in namespaces:
        result = fetch_namespace(ns, kubeconfig=kubeconfig)
        if not result.ok:
            print(f"❌ {result.error}")
        results.append(result)

    summary = aggregate(results)
    if summary.partial:
        print(f"⚠️  {len(summary.failures)} namespace(s) skipped")
    return summary
