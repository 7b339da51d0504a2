"""Deletion of statements that can be removed while still compiling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from movemutant.operator import MutantInfo, MutationOperator
from movemutant.operators.common import MOVE_EMPTY_STMT, Exp, Loc
from movemutant.report import Mutation, Range

OPERATOR_NAME = "delete_statement"


@dataclass(frozen=True)
class DeleteStmt(MutationOperator):
    """Replaces a statement with an empty block."""

    operation: Exp
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
            for op in (MOVE_EMPTY_STMT,)
        ]

    def __str__(self) -> str:
        return (
            f"DeleteStmtOperator({self.operation!r}, location: file hash: "
            f"FileId({self.loc.file_id}), index start: {self.loc.span.start}, "
            f"index stop: {self.loc.span.end})"
        )