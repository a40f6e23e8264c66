"""Filesystem configuration for BiteX Analytics.

This module provides the single configuration class used by the dataset
loader, the exporters and the command-line pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from bitex_analytics.exceptions import ConfigError


@dataclass
class DataPaths:
    """All filesystem paths used by the pipeline.

    Attributes:
        data_root: Root directory for datasets and exports.
        dataset_json: Path to the dataset JSON file ({orders, menuItems, customers}).
        exports_dir: Optional override for the CSV export directory.

    Directory Structure:
        data_root/
        ├── dataset.json     # input snapshot (orders, menu items, customers)
        └── exports/         # CSV downloads (bitex_orders_*.csv, bitex_metrics_*.csv)
    """

    data_root: Path
    dataset_json: Path
    exports_dir: Path | None = None

    @classmethod
    def from_root(
        cls,
        data_root: str | Path,
        dataset_json: str | Path | None = None,
        exports_dir: str | Path | None = None,
    ) -> DataPaths:
        """Create DataPaths from a root directory and an optional dataset file.

        Args:
            data_root: Root directory for data.
            dataset_json: Path to the dataset JSON. Defaults to data_root/dataset.json.
            exports_dir: Export directory. Defaults to data_root/exports.

        Returns:
            DataPaths instance.

        Examples:
            >>> paths = DataPaths.from_root("data")
            >>> paths.dataset_json
            PosixPath('data/dataset.json')
        """
        if isinstance(data_root, str):
            data_root = Path(data_root)
        if dataset_json is None:
            dataset_json = data_root / "dataset.json"
        elif isinstance(dataset_json, str):
            dataset_json = Path(dataset_json)
        if isinstance(exports_dir, str):
            exports_dir = Path(exports_dir)

        return cls(data_root=data_root, dataset_json=dataset_json, exports_dir=exports_dir)

    @property
    def exports(self) -> Path:
        """CSV export directory."""
        if self.exports_dir is not None:
            return self.exports_dir
        return self.data_root / "exports"

    def ensure_dirs(self) -> None:
        """Create all directories in the data structure."""
        if self.data_root.exists() and not self.data_root.is_dir():
            raise ConfigError(f"data_root is not a directory: {self.data_root}")
        for path in [self.data_root, self.exports]:
            path.mkdir(parents=True, exist_ok=True)
