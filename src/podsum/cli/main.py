"""CLI entrypoint for the pod health summary."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from podsum.application import execute_pod_health_summary
from podsum.config import load_config

app = typer.Typer(
    name="podsum",
    help="Point-in-time pod health summary for a Kubernetes cluster",
    no_args_is_help=True,
    add_completion=False,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def _resolve_version() -> str:
    """Return installed package version or local fallback."""
    try:
        return package_version("pod-health-summary")
    except PackageNotFoundError:
        return "0.1.0"


@app.callback()
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
    ),
) -> None:
    """Handle global CLI options."""
    if version:
        console.print(f"pod-health-summary {_resolve_version()}")
        raise typer.Exit(code=0)
    if ctx.invoked_subcommand is None:
        raise typer.Exit(code=0)


def _handle_error(exc: Exception) -> None:
    """Convert domain exceptions to CLI exit codes."""
    if isinstance(exc, ValueError):
        console.print(f"[red]ERROR:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    if isinstance(exc, RuntimeError):
        console.print(f"[red]ERROR:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    raise exc


@app.command("pod-health")
def pod_health_command(
    namespace: str | None = typer.Option(
        None,
        "--namespace",
        "-n",
        help="Namespace to summarize. Defaults to all namespaces.",
    ),
    kubeconfig: Path | None = typer.Option(
        None,
        "--kubeconfig",
        help="Path to the kubeconfig file. Defaults to kubectl's own lookup.",
    ),
    report: str | None = typer.Option(
        None,
        "--report",
        "-r",
        help=(
            "Persist report files under this directory. "
            "If omitted, prints stdout preview only."
        ),
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print bare '<category>:<count>' lines instead of rich output.",
    ),
) -> None:
    """Count pods per health category.

    Categories overlap: ready pods also count as running, and only the
    earliest blocking condition (unscheduled, uninitialized, containers
    not ready) is counted for a pod that is not ready.
    """
    config = load_config()
    try:
        run = execute_pod_health_summary(
            namespace=namespace or config.namespace,
            kubeconfig=kubeconfig or config.kubeconfig,
            reports_root=report or config.reports_root,
            plain=plain,
        )
        if run is not None:
            console.print(f"[green]Run:[/green] {run.output_dir}")
    except (ValueError, RuntimeError) as exc:
        _handle_error(exc)


def main() -> None:
    """Project entrypoint for `podsum` script."""
    app()


app.command("pods", hidden=True)(pod_health_command)


if __name__ == "__main__":
    main()
