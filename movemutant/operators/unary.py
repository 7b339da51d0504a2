"""Removal of a unary operator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from movemutant.operator import MutantInfo, MutationOperator
from movemutant.operators.common import ExpLoc, Loc, Operation
from movemutant.report import Mutation, Range

log = logging.getLogger(__name__)

OPERATOR_NAME = "unary_operator_replacement"


@dataclass(frozen=True)
class Unary(MutationOperator):
    """Replaces a unary operator expression with a single space."""

    operation: Operation
    loc: Loc
    exps: tuple[ExpLoc, ...] = ()

    name: ClassVar[str] = OPERATOR_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "exps", tuple(self.exps))

    @property
    def file_id(self) -> int:
        return self.loc.file_id

    def apply(self, source: str) -> list[MutantInfo]:
        if len(self.exps) != 1:
            log.warning(
                "UnaryOperator: Expected exactly one expression, got %d", len(self.exps)
            )
            return []

        start = self.loc.span.start
        rest = source[start:]
        stripped = rest.lstrip()
        if stripped:
            start += len(rest) - len(stripped)
        end = self.loc.span.end
        cur_op = source[start:end]

        replacement = " "
        mutated = source[:start] + replacement + source[end:]
        return [
            MutantInfo(
                mutated,
                Mutation(Range(start, end), OPERATOR_NAME, cur_op, replacement),
            )
        ]

    def __str__(self) -> str:
        return (
            f"UnaryOperator({self.operation}, location: file id: FileId({self.loc.file_id}), "
            f"index start: {self.loc.span.start}, index stop: {self.loc.span.end})"
        )