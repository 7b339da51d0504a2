"""Command line options and name filters for the mutator."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

DEFAULT_OUTPUT_DIR = "mutants_output"

_NAME_SEPARATORS = re.compile(r"[;\-,]")

PathLike = Union[str, Path]


def _split_names(text: str) -> tuple[str, ...]:
    return tuple(_NAME_SEPARATORS.split(text))


@dataclass(frozen=True)
class ModuleFilter:
    """Selects the modules to mutate; ``selected is None`` means all of them."""

    selected: Optional[tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if self.selected is not None:
            object.__setattr__(self, "selected", tuple(self.selected))

    @property
    def is_all(self) -> bool:
        return self.selected is None

    @classmethod
    def parse(cls, text: str) -> "ModuleFilter":
        """Parse ``all`` or a list of names separated by ``;``, ``-`` or ``,``."""
        if text == "all":
            return cls()
        return cls(_split_names(text))

    def includes(self, name: str) -> bool:
        """Whether the module called ``name`` should be mutated."""
        return self.selected is None or name in self.selected


@dataclass(frozen=True)
class FunctionFilter:
    """Selects the functions to mutate; ``selected is None`` means all of them."""

    selected: Optional[tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if self.selected is not None:
            object.__setattr__(self, "selected", tuple(self.selected))

    @property
    def is_all(self) -> bool:
        return self.selected is None

    @classmethod
    def parse(cls, text: str) -> "FunctionFilter":
        """Parse ``all`` or a list of names separated by ``;``, ``-`` or ``,``."""
        if text == "all":
            return cls()
        return cls(_split_names(text))

    def includes(self, name: str) -> bool:
        """Whether the function called ``name`` should be mutated.

        An empty selection places no restriction on functions.
        """
        return not self.selected or name in self.selected


def resolve_package_path(
    move_sources: Sequence[PathLike], package_path: Optional[PathLike]
) -> Path:
    """Return the package path, refusing to combine it with explicit sources."""
    if package_path is not None:
        if move_sources:
            raise ValueError(
                "the '--move-sources <MOVE_SOURCES>' is not compatible with the "
                "'--package_path <PACKAGE_PATH>' argument"
            )
        return Path(package_path)
    return Path(".")


@dataclass
class CLIOptions:
    """Options that drive a mutator run."""

    move_sources: list[Path] = field(default_factory=list)
    mutate_modules: ModuleFilter = field(default_factory=ModuleFilter)
    mutate_functions: FunctionFilter = field(default_factory=FunctionFilter)
    out_mutant_dir: Optional[Path] = Path(DEFAULT_OUTPUT_DIR)
    verify_mutants: bool = False
    no_overwrite: bool = False
    downsampling_ratio_percentage: Optional[int] = None
    apply_coverage: bool = False

    def __post_init__(self) -> None:
        self.move_sources = [Path(p) for p in self._as_iterable(self.move_sources)]
        if self.out_mutant_dir is not None:
            self.out_mutant_dir = Path(self.out_mutant_dir)

    @staticmethod
    def _as_iterable(value: Iterable[PathLike]) -> Iterable[PathLike]:
        if isinstance(value, (str, Path)):
            return [value]
        return value

    def resolve(self, package_path: Optional[PathLike]) -> Path:
        """Return the package path after checking it against ``move_sources``."""
        return resolve_package_path(self.move_sources, package_path)