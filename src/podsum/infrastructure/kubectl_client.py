"""kubectl execution helpers."""

import json
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any, cast


class KubectlError(RuntimeError):
    """Raised when kubectl command execution fails."""


def _build_args(command: Sequence[str], *, kubeconfig: Path | None) -> list[str]:
    args = ["kubectl"]
    if kubeconfig is not None:
        args.extend(["--kubeconfig", str(kubeconfig)])
    args.extend(command)
    args.extend(["-o", "json"])
    return args


def kubectl_json(
    command: Sequence[str], *, kubeconfig: Path | None = None
) -> dict[str, Any]:
    """Execute kubectl with argv ``command`` and parse JSON output."""
    args = _build_args(command, kubeconfig=kubeconfig)
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as exc:
        raise KubectlError("kubectl executable not found in PATH") from exc
    except subprocess.CalledProcessError as exc:
        stderr = exc.stderr.strip() if exc.stderr else str(exc)
        raise KubectlError(f"kubectl command failed: {stderr}") from exc

    try:
        payload = json.loads(result.stdout) if result.stdout else {}
    except json.JSONDecodeError as exc:
        raise KubectlError(f"kubectl returned invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise KubectlError("kubectl returned a non-object JSON payload")
    return cast(dict[str, Any], payload)
