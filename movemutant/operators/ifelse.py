"""Replacement of if/else conditions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from movemutant.operator import MutantInfo, MutationOperator
from movemutant.operators.common import ExpLoc
from movemutant.report import Mutation, Range

OPERATOR_NAME = "if_else_replacement"


@dataclass(frozen=True)
class IfElse(MutationOperator):
    """Replaces the condition of an if/else with literals or its negation."""

    cond: ExpLoc
    ifexpr: ExpLoc
    elseexpr: ExpLoc

    name: ClassVar[str] = OPERATOR_NAME

    @property
    def file_id(self) -> int:
        return self.cond.loc.file_id

    def apply(self, source: str) -> list[MutantInfo]:
        start, end = self.cond.loc.span.start, self.cond.loc.span.end
        cur_op = source[start:end]
        return [
            MutantInfo(
                source[:start] + op + source[end:],
                Mutation(Range(start, end), OPERATOR_NAME, cur_op, op),
            )
            for op in ("true", "false", f"!({cur_op})")
        ]

    def __str__(self) -> str:
        span = self.cond.loc.span
        return (
            f"IfElseOperator(location: file id: FileId({self.cond.loc.file_id}), "
            f"index start: {span.start}, index stop: {span.end})"
        )