"""Application configuration and environment loading."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class SummaryConfig:
    """Defaults for pod health summary runs."""

    kubeconfig: Path | None = None
    namespace: str | None = None
    reports_root: str | None = None


def _single_kubeconfig(raw: str | None) -> Path | None:
    # kubectl merges multi-file KUBECONFIG values itself
    if not raw or os.pathsep in raw:
        return None
    return Path(raw)


def load_config(env_path: Path = Path(".env")) -> SummaryConfig:
    """Load config from environment and optional .env file."""
    load_dotenv(env_path, override=False)
    return SummaryConfig(
        kubeconfig=_single_kubeconfig(os.getenv("KUBECONFIG")),
        namespace=os.getenv("PODSUM_NAMESPACE") or None,
        reports_root=os.getenv("PODSUM_REPORTS_DIR") or None,
    )
