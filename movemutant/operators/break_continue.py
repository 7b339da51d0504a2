"""Replacement of ``break`` and ``continue`` statements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from movemutant.operator import MutantInfo, MutationOperator
from movemutant.operators.common import MOVE_BREAK, MOVE_CONTINUE, MOVE_EMPTY_STMT, Loc
from movemutant.report import Mutation, Range

OPERATOR_NAME = "break_continue_replacement"

_REPLACEMENTS = {
    MOVE_BREAK: (MOVE_CONTINUE, MOVE_EMPTY_STMT),
    MOVE_CONTINUE: (MOVE_BREAK, MOVE_EMPTY_STMT),
}


@dataclass(frozen=True)
class BreakContinue(MutationOperator):
    """Swaps ``break`` and ``continue`` with each other or deletes them."""

    loc: Loc

    name: ClassVar[str] = OPERATOR_NAME

    @property
    def file_id(self) -> int:
        return self.loc.file_id

    def apply(self, source: str) -> list[MutantInfo]:
        start, end = self.loc.span.start, self.loc.span.end
        cur_op = source[start:end]
        return [
            MutantInfo(
                source[:start] + op + source[end:],
                Mutation(Range(start, end), OPERATOR_NAME, cur_op, op),
            )
            for op in _REPLACEMENTS.get(cur_op, ())
        ]

    def __str__(self) -> str:
        return (
            f"BreakContinueOperator(location: file id: FileId({self.loc.file_id}), "
            f"index start: {self.loc.span.start}, index stop: {self.loc.span.end})"
        )