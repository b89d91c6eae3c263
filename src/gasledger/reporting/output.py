"""Machine-readable ledger output for CI consumers."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import GasReporterConfig
from ..ledger.models import LedgerSnapshot

logger = logging.getLogger(__name__)

OUTPUT_NAMESPACE = "ethGasReporter"
CI_OUTPUT_FILE = Path("gasReporterOutput.json")


def build_output(snapshot: LedgerSnapshot, config: GasReporterConfig) -> Dict[str, Any]:
    return {
        "namespace": OUTPUT_NAMESPACE,
        "config": config.to_output_dict(),
        "info": snapshot.model_dump(mode="json"),
    }


def resolve_output_path(config: GasReporterConfig) -> Optional[Path]:
    """Configured output file, or the CI default when running under CI."""
    if config.output_file:
        return Path(config.output_file)
    if os.getenv("CI"):
        return CI_OUTPUT_FILE
    return None


def save_json_snapshot(snapshot: LedgerSnapshot, config: GasReporterConfig, output_path: Path) -> Path:
    """
    Write the finalized ledger and the config it was produced with as JSON.

    Args:
        snapshot: Finalized ledger statistics
        config: Reporter configuration
        output_path: Destination file; parent directories are created

    Returns:
        The path written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(build_output(snapshot, config), f, indent=2)
    logger.info(f"Saved gas ledger snapshot to {output_path}")
    return output_path
