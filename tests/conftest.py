"""Shared fixtures: a fake kubectl keyed by command line."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable
from typing import Any

import pytest

KubectlResponses = dict[str, dict[str, Any] | str]


def _command_of(args: list[str]) -> str:
    """Strip binary, --kubeconfig and output flags from a kubectl argv."""
    rest = list(args[1:])
    if rest[:1] == ["--kubeconfig"]:
        rest = rest[2:]
    if rest[-2:] == ["-o", "json"]:
        rest = rest[:-2]
    return " ".join(rest)



@pytest.fixture
def fake_kubectl(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[KubectlResponses], list[list[str]]]:
    """Install a fake ``subprocess.run``; string responses become failures."""

    def install(responses: KubectlResponses) -> list[list[str]]:
        calls: list[list[str]] = []

        def _run(args: list[str], **_: Any) -> subprocess.CompletedProcess[str]:
            calls.append(list(args))
            command = _command_of(args)
            response = responses.get(command, f"unexpected command: {command}")
            if isinstance(response, str):
                raise subprocess.CalledProcessError(1, args, stderr=response)
            return subprocess.CompletedProcess(
                args=args, returncode=0, stdout=json.dumps(response), stderr=""
            )

        monkeypatch.setattr(
            "podsum.infrastructure.kubectl_client.subprocess.run", _run
        )
        return calls

    return install
