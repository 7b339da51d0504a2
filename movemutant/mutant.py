"""A mutant: a mutation operator bound to the function and module it came from."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from movemutant.operator import MutantInfo, MutationOperator

log = logging.getLogger(__name__)


@dataclass
class Mutant:
    """A place in the code where a mutation operator can be applied.

    The module and function names are usually unknown when the mutant is
    created and are filled in later by the code traversing the module.
    """

    operator: MutationOperator
    module_name: Optional[str] = None
    function_name: Optional[str] = None

    @property
    def file_id(self) -> int:
        """The identifier of the file this mutant is in."""
        return self.operator.file_id

    def apply(self, source: str) -> list[MutantInfo]:
        """Return the differently mutated listings of ``source``."""
        log.debug("Applying mutation operator: %s", self.operator)
        return self.operator.apply(source)

    def __str__(self) -> str:
        return f"Mutant: {self.operator}"