"""Options of the specification test tool and their conversion to mutator options."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from movemutant.cli import CLIOptions, FunctionFilter, ModuleFilter, resolve_package_path

PathLike = Union[str, Path]


@dataclass
class SpecTestOptions:
    """Options for checking specifications against generated mutants."""

    move_sources: list[Path] = field(default_factory=list)
    mutate_modules: ModuleFilter = field(default_factory=ModuleFilter)
    mutate_functions: FunctionFilter = field(default_factory=FunctionFilter)
    mutator_conf: Optional[Path] = None
    prover_conf: Optional[Path] = None
    output: Optional[Path] = None
    use_generated_mutants: Optional[Path] = None
    verify_mutants: bool = False
    extra_prover_args: Optional[list[str]] = None
    downsampling_ratio_percentage: Optional[int] = None

    def __post_init__(self) -> None:
        self.move_sources = [Path(p) for p in self.move_sources]
        for name in ("mutator_conf", "prover_conf", "output", "use_generated_mutants"):
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, Path(value))
        if self.extra_prover_args is not None:
            self.extra_prover_args = list(self.extra_prover_args)
        if self.use_generated_mutants is not None:
            conflicting = [
                name
                for name, is_set in (
                    ("mutate_modules", not self.mutate_modules.is_all),
                    ("mutate_functions", not self.mutate_functions.is_all),
                    ("mutator_conf", self.mutator_conf is not None),
                    ("verify_mutants", self.verify_mutants),
                    (
                        "downsampling_ratio_percentage",
                        self.downsampling_ratio_percentage is not None,
                    ),
                )
                if is_set
            ]
            if conflicting:
                raise ValueError(
                    f"{', '.join(conflicting)} cannot be used with use_generated_mutants"
                )

    def resolve(self, package_path: Optional[PathLike]) -> Path:
        """Return the package path after checking it against ``move_sources``."""
        return resolve_package_path(self.move_sources, package_path)


def create_mutator_options(options: SpecTestOptions) -> CLIOptions:
    """Build mutator options from specification test options."""
    return CLIOptions(
        move_sources=list(options.move_sources),
        mutate_modules=options.mutate_modules,
        mutate_functions=options.mutate_functions,
        verify_mutants=options.verify_mutants,
        downsampling_ratio_percentage=options.downsampling_ratio_percentage,
    )