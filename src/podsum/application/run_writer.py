"""Run directory, summary and manifest writer for report mode."""

import json
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Literal
from uuid import uuid4

RunStatus = Literal["success", "partial"]


@dataclass(frozen=True)
class RunResult:
    """Files produced by a persisted run."""

    run_id: str
    capability: str
    output_dir: Path
    manifest_path: Path
    summary_path: Path
    output_files: tuple[Path, ...]


@dataclass(frozen=True)
class RunContext:
    """Context of an in-progress run."""

    run_id: str
    capability: str
    output_dir: Path
    started_at: str
    inputs: dict[str, Any]


@dataclass(frozen=True)
class SummaryContent:
    """Payload rendered into summary.md."""

    title: str
    key_findings: list[str] | None = None
    warnings: list[str] | None = None


def _utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()


def create_run(
    capability: str,
    *,
    inputs: dict[str, Any],
    reports_root: str = "reports",
) -> RunContext:
    """Create ``<reports_root>/<capability>/<run_id>`` and return its context."""
    run_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{uuid4().hex[:6]}"
    output_dir = Path(reports_root) / capability / run_id
    output_dir.mkdir(parents=True)
    return RunContext(
        run_id=run_id,
        capability=capability,
        output_dir=output_dir,
        started_at=_utc_now_iso(),
        inputs=inputs,
    )


def list_output_files(output_dir: Path) -> tuple[Path, ...]:
    """List report artifacts under output directory."""
    return tuple(sorted(p for p in output_dir.rglob("*") if p.is_file()))


def build_summary_lines(
    content: SummaryContent,
    *,
    inputs: dict[str, Any],
    output_files: tuple[Path, ...],
) -> list[str]:
    """Build summary markdown lines."""
    lines = [f"# {content.title}", "", "## Inputs"]
    if inputs:
        lines.extend(f"- `{key}`: `{inputs[key]}`" for key in sorted(inputs))
    else:
        lines.append("- (none)")

    lines.extend(["", "## Artifacts"])
    if output_files:
        lines.extend(f"- `{p.name}`" for p in output_files)
    else:
        lines.append("- (none)")

    lines.extend(["", "## Key Findings"])
    if content.key_findings:
        lines.extend(f"- {item}" for item in content.key_findings)
    else:
        lines.append("- No findings were recorded.")

    lines.extend(["", "## Warnings"])
    if content.warnings:
        lines.extend(f"- {item}" for item in content.warnings)
    else:
        lines.append("- None.")

    return lines


def finalize_run(
    ctx: RunContext,
    *,
    status: RunStatus,
    content: SummaryContent,
) -> RunResult:
    """Write summary.md and manifest.json next to the run artifacts."""
    output_files = list_output_files(ctx.output_dir)

    summary_path = ctx.output_dir / "summary.md"
    summary_lines = build_summary_lines(
        content, inputs=ctx.inputs, output_files=output_files
    )
    summary_path.write_text("\n".join(summary_lines) + "\n", encoding="utf-8")

    manifest_path = ctx.output_dir / "manifest.json"
    all_outputs = output_files + (summary_path,)
    manifest_payload = {
        "run_id": ctx.run_id,
        "capability": ctx.capability,
        "started_at": ctx.started_at,
        "finished_at": _utc_now_iso(),
        "status": status,
        "inputs": ctx.inputs,
        "outputs": [str(p.relative_to(ctx.output_dir)) for p in all_outputs]
        + ["manifest.json"],
        "warnings": content.warnings or [],
    }
    manifest_path.write_text(
        json.dumps(manifest_payload, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )

    return RunResult(
        run_id=ctx.run_id,
        capability=ctx.capability,
        output_dir=ctx.output_dir,
        manifest_path=manifest_path,
        summary_path=summary_path,
        output_files=all_outputs + (manifest_path,),
    )
