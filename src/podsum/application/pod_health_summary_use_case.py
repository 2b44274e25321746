"""Pod health summary use-case."""

from __future__ import annotations

import sys
from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path

import pandas as pd

from podsum.application.pod_health_summary_service import (
    PodHealthSummary,
    summarize_pod_health,
)
from podsum.application.run_writer import (
    RunResult,
    SummaryContent,
    create_run,
    finalize_run,
)
from podsum.application.stdout_renderer import render_stdout_report
from podsum.domain.pod_totals import PodTotals, render_totals_lines

CAPABILITY = "pod-health-summary"
TITLE = "Pod Health Summary"
TOTALS_FILE = "pod_health_totals.csv"
CLUSTER_ROW = "(cluster)"


def _totals_frame(summary: PodHealthSummary) -> pd.DataFrame:
    rows: list[tuple[str, PodTotals]] = sorted(summary.by_namespace.items())
    rows.append((CLUSTER_ROW, summary.totals))
    return pd.DataFrame(
        [{"namespace": name, **totals.as_dict()} for name, totals in rows]
    )


def _write_report(
    summary: PodHealthSummary,
    *,
    reports_root: str,
    inputs: dict[str, str],
) -> RunResult:
    ctx = create_run(CAPABILITY, inputs=inputs, reports_root=reports_root)
    _totals_frame(summary).to_csv(ctx.output_dir / TOTALS_FILE, index=False)
    content = SummaryContent(
        title=TITLE,
        key_findings=render_totals_lines(summary.totals),
        warnings=[failure.error or failure.namespace for failure in summary.failures],
    )
    return finalize_run(
        ctx,
        status="partial" if summary.partial else "success",
        content=content,
    )


def execute_pod_health_summary(
    *,
    namespace: str | None = None,
    kubeconfig: Path | None = None,
    reports_root: str | None = None,
    plain: bool = False,
) -> RunResult | None:
    """Execute pod health summary.

    Prints a rich preview by default, or bare ``<category>:<count>`` lines
    when ``plain`` is set. With ``reports_root`` the run is also persisted
    and its RunResult returned.
    """
    if plain:
        with redirect_stdout(sys.stderr):
            summary = summarize_pod_health(namespace, kubeconfig=kubeconfig)
        for line in render_totals_lines(summary.totals):
            print(line)
    else:
        buffer = StringIO()
        with redirect_stdout(buffer):
            summary = summarize_pod_health(namespace, kubeconfig=kubeconfig)
        render_stdout_report(
            title=TITLE,
            captured_stdout=buffer.getvalue(),
            totals=summary.totals,
        )

    if reports_root is None:
        return None

    inputs = {
        "namespace": namespace or "(all)",
        "kubeconfig": str(kubeconfig) if kubeconfig else "(default)",
    }
    return _write_report(summary, reports_root=reports_root, inputs=inputs)


__all__ = ["execute_pod_health_summary"]
