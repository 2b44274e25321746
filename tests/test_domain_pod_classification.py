"""Tests for pod health classification."""

from __future__ import annotations

from itertools import product

import pytest

from podsum.domain.pod_classification import (
    Category,
    ConditionKind,
    PodPhase,
    PodSnapshot,
    classify,
    snapshot_from_manifest,
)

ALL_PHASES = [*PodPhase, "Evicted", ""]


def _snapshot(phase: str, **flags: bool) -> PodSnapshot:
    kinds = {
        "scheduled": ConditionKind.POD_SCHEDULED,
        "initialized": ConditionKind.POD_INITIALIZED,
        "containers_ready": ConditionKind.CONTAINERS_READY,
        "ready": ConditionKind.POD_READY,
    }
    return PodSnapshot(
        phase=phase,
        conditions={kinds[key]: value for key, value in flags.items()},
    )


def _all_condition_sets() -> list[dict[str, bool]]:
    keys = ("scheduled", "initialized", "containers_ready", "ready")
    return [dict(zip(keys, values)) for values in product((True, False), repeat=4)]


def test_ready_running_pod() -> None:
    pod = _snapshot(
        PodPhase.RUNNING,
        ready=True,
        containers_ready=True,
        initialized=True,
        scheduled=True,
    )
    assert classify(pod) == (Category.READY, Category.RUNNING)


def test_pending_unscheduled_pod() -> None:
    pod = _snapshot(PodPhase.PENDING, scheduled=False)
    assert set(classify(pod)) == {Category.PENDING, Category.UNSCHEDULED}


def test_running_containers_not_ready() -> None:
    pod = _snapshot(
        PodPhase.RUNNING,
        scheduled=True,
        initialized=True,
        containers_ready=False,
        ready=False,
    )
    assert classify(pod) == (
        Category.RUNNING,
        Category.RUNNING_NOT_READY,
        Category.CONTAINERS_NOT_READY,
    )


def test_succeeded_without_conditions_is_unscheduled() -> None:
    assert classify(PodSnapshot(phase=PodPhase.SUCCEEDED)) == (Category.UNSCHEDULED,)


def test_pending_with_all_conditions_but_ready_emits_only_pending() -> None:
    pod = _snapshot(
        PodPhase.PENDING,
        scheduled=True,
        initialized=True,
        containers_ready=True,
        ready=False,
    )
    assert classify(pod) == (Category.PENDING,)


def test_uninitialized_pod() -> None:
    pod = _snapshot(PodPhase.PENDING, scheduled=True, initialized=False)
    assert classify(pod) == (Category.PENDING, Category.UNINITIALIZED)


@pytest.mark.parametrize("phase", ALL_PHASES)
def test_ready_short_circuits_for_every_phase(phase: str) -> None:
    for flags in _all_condition_sets():
        if not flags["ready"]:
            continue
        assert classify(_snapshot(phase, **flags)) == (
            Category.READY,
            Category.RUNNING,
        )


@pytest.mark.parametrize("phase", ALL_PHASES)
def test_only_earliest_blocking_condition_is_reported(phase: str) -> None:
    for flags in _all_condition_sets():
        if flags["ready"]:
            continue
        result = set(classify(_snapshot(phase, **flags)))
        if not flags["scheduled"]:
            assert Category.UNSCHEDULED in result
            assert Category.UNINITIALIZED not in result
            assert Category.CONTAINERS_NOT_READY not in result
        elif not flags["initialized"]:
            assert Category.UNINITIALIZED in result
            assert Category.CONTAINERS_NOT_READY not in result
            assert Category.UNSCHEDULED not in result


@pytest.mark.parametrize("phase", ["Failed", "Unknown", "Evicted"])
def test_other_phases_emit_no_phase_category(phase: str) -> None:
    pod = _snapshot(phase, scheduled=True, initialized=True, containers_ready=False)
    assert classify(pod) == (Category.CONTAINERS_NOT_READY,)


def test_classify_never_emits_total() -> None:
    for phase in ALL_PHASES:
        for flags in _all_condition_sets():
            assert Category.TOTAL not in classify(_snapshot(phase, **flags))


def test_snapshot_from_manifest_maps_condition_types() -> None:
    pod = {
        "metadata": {"name": "web-0", "namespace": "shop"},
        "status": {
            "phase": "Running",
            "conditions": [
                {"type": "PodScheduled", "status": "True"},
                {"type": "Initialized", "status": "True"},
                {"type": "ContainersReady", "status": "False"},
                {"type": "Ready", "status": "Unknown"},
                {"type": "PodReadyToStartContainers", "status": "True"},
            ],
        },
    }
    snapshot = snapshot_from_manifest(pod)

    assert snapshot.name == "web-0"
    assert snapshot.namespace == "shop"
    assert snapshot.phase == PodPhase.RUNNING
    assert snapshot.conditions == {
        ConditionKind.POD_SCHEDULED: True,
        ConditionKind.POD_INITIALIZED: True,
        ConditionKind.CONTAINERS_READY: False,
        ConditionKind.POD_READY: False,
    }


def test_snapshot_from_manifest_last_condition_wins() -> None:
    pod = {
        "status": {
            "phase": "Pending",
            "conditions": [
                {"type": "PodScheduled", "status": "False"},
                {"type": "PodScheduled", "status": "True"},
            ],
        },
    }
    snapshot = snapshot_from_manifest(pod)
    assert snapshot.condition(ConditionKind.POD_SCHEDULED)


def test_snapshot_from_manifest_without_status() -> None:
    snapshot = snapshot_from_manifest({"metadata": {"name": "orphan"}})
    assert snapshot.phase == ""
    assert snapshot.conditions == {}
    assert classify(snapshot) == (Category.UNSCHEDULED,)
