"""Pod and namespace manifest builders for kubectl fakes."""

from __future__ import annotations

from typing import Any


def pod(
    name: str,
    phase: str,
    **conditions: bool,
) -> dict[str, Any]:
    """Build a minimal pod manifest; condition kwargs use API type names."""
    return {
        "metadata": {"name": name},
        "status": {
            "phase": phase,
            "conditions": [
                {"type": kind, "status": "True" if value else "False"}
                for kind, value in conditions.items()
            ],
        },
    }


def namespace_list(*names: str) -> dict[str, Any]:
    return {"items": [{"metadata": {"name": name}} for name in names]}
