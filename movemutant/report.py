"""Reports describing generated mutants."""

from __future__ import annotations

import difflib
import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

_LINE = re.compile(r"[^\n]*\n|[^\n]+\Z")
_NO_NEWLINE = "\\ No newline at end of file\n"


def _split_lines(text: str) -> list[str]:
    return _LINE.findall(text)


def make_patch(original: str, modified: str) -> str:
    """Return a unified diff between two sources."""
    parts = ["--- original\n", "+++ modified\n"]
    diff = difflib.unified_diff(
        _split_lines(original),
        _split_lines(modified),
        fromfile="original",
        tofile="modified",
        n=3,
    )
    for index, line in enumerate(diff):
        if index < 2:
            continue
        if not line.endswith("\n"):
            line = line + "\n" + _NO_NEWLINE
        parts.append(line)
    return "".join(parts)


@dataclass(frozen=True)
class Range:
    """A byte range inside a source file."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            raise ValueError(f"invalid range {self.start}..{self.end}")

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Range":
        return cls(int(data["start"]), int(data["end"]))


@dataclass(frozen=True)
class Mutation:
    """A single modification applied to a file."""

    changed_place: Range
    operator_name: str
    old_value: str
    new_value: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "changed_place": self.changed_place.to_dict(),
            "operator_name": self.operator_name,
            "old_value": self.old_value,
            "new_value": self.new_value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Mutation":
        return cls(
            Range.from_dict(data["changed_place"]),
            data["operator_name"],
            data["old_value"],
            data["new_value"],
        )


@dataclass
class MutationReport:
    """Information about one mutant written to disk."""

    mutant_path: Path
    original_file: Path
    module_name: str
    function_name: str
    mutations: list[Mutation] = field(default_factory=list)
    diff: str = ""

    def __post_init__(self) -> None:
        self.mutant_path = Path(self.mutant_path)
        self.original_file = Path(self.original_file)

    @classmethod
    def create(
        cls,
        mutant_path: PathLike,
        original_file: PathLike,
        module_name: str,
        function_name: str,
        mutated_source: str,
        original_source: str,
    ) -> "MutationReport":
        """Build an entry, computing the diff between the two sources."""
        return cls(
            Path(mutant_path),
            Path(original_file),
            module_name,
            function_name,
            [],
            make_patch(original_source, mutated_source),
        )

    def add_modification(self, modification: Mutation) -> None:
        log.debug("Adding modification to report: %r", modification)
        self.mutations.append(modification)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mutant_path": str(self.mutant_path),
            "original_file": str(self.original_file),
            "module_name": self.module_name,
            "function_name": self.function_name,
            "mutations": [m.to_dict() for m in self.mutations],
            "diff": self.diff,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MutationReport":
        return cls(
            Path(data["mutant_path"]),
            Path(data["original_file"]),
            data["module_name"],
            data["function_name"],
            [Mutation.from_dict(m) for m in data["mutations"]],
            data["diff"],
        )


@dataclass
class Report:
    """A collection of mutant entries."""

    mutants: list[MutationReport] = field(default_factory=list)

    def add_entry(self, entry: MutationReport) -> None:
        log.debug("Adding a mutant to the report: %r", entry)
        self.mutants.append(entry)

    def to_dict(self) -> dict[str, Any]:
        return {"mutants": [m.to_dict() for m in self.mutants]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Report":
        return cls([MutationReport.from_dict(m) for m in data["mutants"]])

    def to_json(self) -> str:
        """Return the report as pretty-printed JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def save_to_json_file(self, path: PathLike) -> None:
        path = Path(path)
        log.info("Saving report to %s", path)
        path.write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load_from_json_file(cls, path: PathLike) -> "Report":
        path = Path(path)
        log.info("Reading report from %s", path)
        with path.open(encoding="utf-8") as handle:
            return cls.from_dict(json.load(handle))

    def save_to_text_file(self, path: PathLike) -> None:
        path = Path(path)
        with path.open("w", encoding="utf-8") as out:
            log.info("Saving report to %s", path)
            for entry in self.mutants:
                out.write(f"Mutant path: {entry.mutant_path}\n")
                out.write(f"Original file: {entry.original_file}\n")
                out.write(f"Module name: {entry.module_name}\n")
                out.write(f"Function name: {entry.function_name}\n")
                out.write("Mutations:\n")
                for modification in entry.mutations:
                    place = modification.changed_place
                    out.write(f"  Operator: {modification.operator_name}\n")
                    out.write(f"  Old value: {modification.old_value}\n")
                    out.write(f"  New value: {modification.new_value}\n")
                    out.write(f"  Changed place: {place.start}-{place.end}\n")
                out.write("Diff:\n")
                out.write(f"{entry.diff}\n")
                out.write("----------------------------------------\n")
        log.debug("Report saved to %s", path)