"""Pod snapshot model and health category classification."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class PodPhase(StrEnum):
    """Coarse pod lifecycle phase as reported by the API server."""

    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class ConditionKind(StrEnum):
    """Pod condition types that take part in classification.

    Values are the condition ``type`` strings found in pod manifests.
    """

    POD_SCHEDULED = "PodScheduled"
    POD_INITIALIZED = "Initialized"
    CONTAINERS_READY = "ContainersReady"
    POD_READY = "Ready"


class Category(StrEnum):
    """Health buckets, declared in report order."""

    TOTAL = "total"
    PENDING = "pending"
    RUNNING = "running"
    READY = "ready"
    RUNNING_NOT_READY = "running_not_ready"
    UNSCHEDULED = "unscheduled"
    UNINITIALIZED = "uninitialized"
    CONTAINERS_NOT_READY = "containers_not_ready"


_CONDITION_KINDS = {kind.value: kind for kind in ConditionKind}


@dataclass(frozen=True)
class PodSnapshot:
    """Point-in-time phase and condition set of a single pod."""

    phase: str
    conditions: Mapping[ConditionKind, bool] = field(default_factory=dict)
    name: str = ""
    namespace: str = ""

    def condition(self, kind: ConditionKind) -> bool:
        """Return condition status; an absent condition counts as false."""
        return bool(self.conditions.get(kind, False))


def classify(snapshot: PodSnapshot) -> tuple[Category, ...]:
    """Return the categories a pod contributes to, in emission order.

    A ready pod counts as ready and running and nothing else. Otherwise the
    phase may add running/running_not_ready or pending, and then only the
    earliest blocking condition among scheduling, initialization and
    container readiness is reported.
    """
    if snapshot.condition(ConditionKind.POD_READY):
        return (Category.READY, Category.RUNNING)

    categories: list[Category] = []
    if snapshot.phase == PodPhase.RUNNING:
        categories.extend((Category.RUNNING, Category.RUNNING_NOT_READY))
    elif snapshot.phase == PodPhase.PENDING:
        categories.append(Category.PENDING)

    if not snapshot.condition(ConditionKind.POD_SCHEDULED):
        categories.append(Category.UNSCHEDULED)
    elif not snapshot.condition(ConditionKind.POD_INITIALIZED):
        categories.append(Category.UNINITIALIZED)
    elif not snapshot.condition(ConditionKind.CONTAINERS_READY):
        categories.append(Category.CONTAINERS_NOT_READY)

    return tuple(categories)


def snapshot_from_manifest(pod: dict[str, Any]) -> PodSnapshot:
    """Build a PodSnapshot from a pod object of ``kubectl get pods -o json``."""
    metadata = pod.get("metadata") or {}
    status = pod.get("status") or {}

    conditions: dict[ConditionKind, bool] = {}
    for condition in status.get("conditions") or []:
        kind = _CONDITION_KINDS.get(condition.get("type", ""))
        if kind is None:
            continue
        # "Unknown" is folded into false
        conditions[kind] = condition.get("status") == "True"

    return PodSnapshot(
        phase=str(status.get("phase", "")),
        conditions=conditions,
        name=metadata.get("name", ""),
        namespace=metadata.get("namespace", ""),
    )
