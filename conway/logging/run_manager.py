"""
Run Manager for the Game of Life.

Manages output directories for headless runs:
  - Creates timestamped run directories under a base output path
  - Copies the config used for the run
  - Collects per-generation metrics and a final summary

Grid contents are never written; only run metadata and metrics are.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from conway.core.config import LifeConfig, save_config
from conway.logging.csv_logger import CSVLogger


class RunManager:
    """
    Manages a single run's output directory.

    Directory structure:
        {base_dir}/{run_name}/
            config.json          copy of the run config
            metrics.csv          per-generation KPIs
            summary.json         written by finalize()

    Attributes:
        run_dir: Path to this run's output directory.
        csv_logger: CSVLogger instance for metrics.
    """

    def __init__(
        self,
        config: LifeConfig,
        base_dir: Optional[str | Path] = None,
        run_name: Optional[str] = None,
    ):
        """
        Initialize a run manager and create the output directory.

        Args:
            config: Configuration (saved as config.json).
            base_dir: Base output directory. None = use config.run.output_dir.
            run_name: Name for this run's subdirectory. None = timestamp.
        """
        if base_dir is None:
            base_dir = config.run.output_dir

        if run_name is None:
            run_name = datetime.now().strftime("%Y%m%d_%H%M%S")

        self.run_dir = Path(base_dir) / run_name
        self.run_dir.mkdir(parents=True, exist_ok=True)

        self._config_path = self.run_dir / "config.json"
        save_config(config, self._config_path)

        self.csv_logger = CSVLogger(self.run_dir / "metrics.csv")

    @property
    def config_path(self) -> Path:
        """Path to the saved config file."""
        return self._config_path

    @property
    def metrics_path(self) -> Path:
        """Path to the metrics CSV file."""
        return self.csv_logger.file_path

    @property
    def summary_path(self) -> Path:
        return self.run_dir / "summary.json"

    def log_generation(self, kpi_dict: dict) -> None:
        """Log a generation's KPIs to CSV."""
        self.csv_logger.log_row(kpi_dict)

    def finalize(self, summary: Optional[dict] = None) -> None:
        """
        Finalize the run (write summary file if provided).

        Args:
            summary: Optional summary dict to save as summary.json.
        """
        if summary is not None:
            with open(self.summary_path, "w", encoding="utf-8") as f:
                json.dump(summary, f, indent=2, ensure_ascii=False)

    @staticmethod
    def list_runs(base_dir: str | Path) -> list[str]:
        """
        List all run directories under the base directory.

        Returns:
            Sorted list of run directory names.
        """
        base = Path(base_dir)
        if not base.exists():
            return []
        return sorted(
            d.name for d in base.iterdir()
            if d.is_dir() and (d / "config.json").exists()
        )

    def __repr__(self) -> str:
        return f"RunManager(run_dir='{self.run_dir}')"
