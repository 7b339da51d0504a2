"""Options of the mutation test tool and their conversion to mutator options."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from movemutant.cli import CLIOptions, FunctionFilter, ModuleFilter


@dataclass
class MutationTestOptions:
    """Options for running unit tests against generated mutants."""

    mutate_modules: ModuleFilter = field(default_factory=ModuleFilter)
    mutate_functions: FunctionFilter = field(default_factory=FunctionFilter)
    output: Optional[Path] = None
    use_generated_mutants: Optional[Path] = None
    downsampling_ratio_percentage: Optional[int] = None

    def __post_init__(self) -> None:
        if self.output is not None:
            self.output = Path(self.output)
        if self.use_generated_mutants is not None:
            self.use_generated_mutants = Path(self.use_generated_mutants)
            conflicting = []
            if not self.mutate_modules.is_all:
                conflicting.append("mutate_modules")
            if not self.mutate_functions.is_all:
                conflicting.append("mutate_functions")
            if self.downsampling_ratio_percentage is not None:
                conflicting.append("downsampling_ratio_percentage")
            if conflicting:
                raise ValueError(
                    f"{', '.join(conflicting)} cannot be used with use_generated_mutants"
                )


def create_mutator_options(
    options: MutationTestOptions, apply_coverage: bool
) -> CLIOptions:
    """Build mutator options from mutation test options.

    Mutants are always verified, since tests can only run on code that compiles.
    """
    return CLIOptions(
        mutate_functions=options.mutate_functions,
        mutate_modules=options.mutate_modules,
        downsampling_ratio_percentage=options.downsampling_ratio_percentage,
        apply_coverage=apply_coverage,
        verify_mutants=True,
    )