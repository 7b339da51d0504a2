"""The mutant result type and the interface every mutation operator follows."""

from __future__ import annotations

import hashlib
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from movemutant.report import Mutation


@dataclass(frozen=True)
class MutantInfo:
    """A mutated source listing together with the modification that produced it."""

    mutated_source: str
    mutation: Mutation

    def unique_id(self) -> int:
        """Return a stable 64-bit identifier derived from the mutant's content."""
        canonical = json.dumps(
            {"mutated_source": self.mutated_source, "mutation": self.mutation.to_dict()},
            sort_keys=True,
            ensure_ascii=False,
        )
        digest = hashlib.blake2b(canonical.encode("utf-8"), digest_size=8).digest()
        return int.from_bytes(digest, "big")


class MutationOperator(ABC):
    """Base class for operators that produce mutated versions of a source."""

    name: ClassVar[str] = ""

    @abstractmethod
    def apply(self, source: str) -> list[MutantInfo]:
        """Return every mutated variant of ``source`` this operator produces."""

    @property
    @abstractmethod
    def file_id(self) -> int:
        """The identifier of the file the operator works on."""