"""Mutator configuration for a Move project."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from movemutant.cli import CLIOptions
from movemutant.coverage import Coverage


@dataclass
class Configuration:
    """The project options, the project path and the optional coverage data."""

    project: CLIOptions = field(default_factory=CLIOptions)
    project_path: Optional[Path] = None
    coverage: Coverage = field(default_factory=Coverage)

    def __post_init__(self) -> None:
        if self.project_path is not None:
            self.project_path = Path(self.project_path)