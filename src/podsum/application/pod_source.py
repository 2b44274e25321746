"""Namespace resolution and pod enumeration backed by kubectl."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from podsum.domain.pod_classification import PodSnapshot, snapshot_from_manifest
from podsum.infrastructure.kubectl_client import KubectlError, kubectl_json


class ResolutionError(RuntimeError):
    """Raised when the target namespaces cannot be determined."""


class FetchError(RuntimeError):
    """Raised when pods of a single namespace cannot be listed."""


@dataclass(frozen=True)
class NamespaceResult:
    """Outcome of listing pods in one namespace."""

    namespace: str
    pods: tuple[PodSnapshot, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return whether pods were fetched successfully."""
        return self.error is None


def resolve_namespaces(
    namespace: str | None = None,
    *,
    kubeconfig: Path | None = None,
) -> list[str]:
    """Return ``[namespace]`` if it exists, or every namespace in the cluster."""
    if namespace:
        try:
            payload = kubectl_json(
                ["get", "namespace", namespace], kubeconfig=kubeconfig
            )
        except KubectlError as exc:
            raise ResolutionError(f"get namespace {namespace} failed: {exc}") from exc
        name = (payload.get("metadata") or {}).get("name")
        if not name:
            raise ResolutionError(f"namespace {namespace} returned no metadata")
        return [name]

    try:
        payload = kubectl_json(["get", "namespaces"], kubeconfig=kubeconfig)
    except KubectlError as exc:
        raise ResolutionError(f"list namespaces failed: {exc}") from exc

    names: list[str] = []
    for item in payload.get("items", []):
        name = (item.get("metadata") or {}).get("name")
        if name:
            names.append(name)
    return names


def list_pod_snapshots(
    namespace: str,
    *,
    kubeconfig: Path | None = None,
) -> list[PodSnapshot]:
    """List the pods of ``namespace`` as snapshots."""
    try:
        payload = kubectl_json(
            ["get", "pods", "-n", namespace], kubeconfig=kubeconfig
        )
    except KubectlError as exc:
        raise FetchError(f"list pods in namespace {namespace} failed: {exc}") from exc
    return [snapshot_from_manifest(pod) for pod in payload.get("items", [])]


def fetch_namespace(
    namespace: str,
    *,
    kubeconfig: Path | None = None,
) -> NamespaceResult:
    """List pods of ``namespace`` and wrap the outcome in a NamespaceResult."""
    try:
        pods = list_pod_snapshots(namespace, kubeconfig=kubeconfig)
    except FetchError as exc:
        return NamespaceResult(namespace=namespace, error=str(exc))
    return NamespaceResult(namespace=namespace, pods=tuple(pods))
