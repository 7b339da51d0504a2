"""Replacement of a binary operator with another one from the same group."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from movemutant.operator import MutantInfo, MutationOperator
from movemutant.operators.common import ExpLoc, Loc, Operation
from movemutant.report import Mutation, Range

log = logging.getLogger(__name__)

OPERATOR_NAME = "binary_operator_replacement"

_ARITHMETIC = (Operation.ADD, Operation.SUB, Operation.MUL, Operation.DIV, Operation.MOD)
_BITWISE = (Operation.BIT_OR, Operation.BIT_AND, Operation.XOR)
_SHIFT = (Operation.SHL, Operation.SHR)
_LOGICAL = (Operation.OR, Operation.AND)
_COMPARISON = (
    Operation.EQ,
    Operation.NEQ,
    Operation.LT,
    Operation.GT,
    Operation.LE,
    Operation.GE,
)

_GROUPS = {
    op: group
    for group in (_ARITHMETIC, _BITWISE, _SHIFT, _LOGICAL, _COMPARISON)
    for op in group
}

_COMPOUND_PREFIXES = {
    Operation.ADD: "+=",
    Operation.SUB: "-=",
    Operation.MUL: "*=",
    Operation.DIV: "/=",
    Operation.MOD: "%=",
    Operation.BIT_OR: "|=",
    Operation.BIT_AND: "&=",
    Operation.XOR: "^=",
    Operation.SHL: "<<=",
    Operation.SHR: ">>=",
}


def _skip_whitespace_forward(source: str, start: int) -> int:
    rest = source[start:]
    stripped = rest.lstrip()
    if not stripped:
        return start
    return start + len(rest) - len(stripped)


def _trim_whitespace_backward(source: str, end: int) -> int:
    stripped = source[:end].rstrip()
    if not stripped:
        return end
    return len(stripped)


@dataclass(frozen=True)
class Binary(MutationOperator):
    """Swaps a binary operator for the other operators of its group."""

    operation: Operation
    loc: Loc
    exps: tuple[ExpLoc, ...] = ()

    name: ClassVar[str] = OPERATOR_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "exps", tuple(self.exps))

    @property
    def file_id(self) -> int:
        return self.loc.file_id

    def _is_equivalent(self, candidate: Operation, left_zero: bool, right_zero: bool) -> bool:
        # These replacements give the same logic for unsigned integers.
        op = self.operation
        return (
            (op is Operation.EQ and right_zero and candidate is Operation.LE)
            or (op is Operation.EQ and left_zero and candidate is Operation.GE)
            or (op is Operation.NEQ and right_zero and candidate is Operation.GT)
            or (op is Operation.NEQ and left_zero and candidate is Operation.LT)
            or (op is Operation.GT and right_zero and candidate is Operation.NEQ)
            or (op is Operation.LT and left_zero and candidate is Operation.NEQ)
        )

    def apply(self, source: str) -> list[MutantInfo]:
        if len(self.exps) != 2:
            log.warning(
                "BinaryOperator: Expected exactly two expressions, got %d", len(self.exps)
            )
            return []

        left_exp, right_exp = self.exps
        left, right = left_exp.loc, right_exp.loc

        # Loop increments generated by the compiler have no source of their own.
        if left == right:
            return []

        start = _skip_whitespace_forward(source, left.span.end)
        end = _trim_whitespace_backward(source, right.span.start)
        cur_op = source[start:end]

        prefix = _COMPOUND_PREFIXES.get(self.operation)
        is_compound = prefix is not None and cur_op.startswith(prefix)

        left_zero = left_exp.exp.is_zero_number()
        right_zero = right_exp.exp.is_zero_number()

        results = []
        for candidate in _GROUPS.get(self.operation, ()):
            if candidate is self.operation:
                continue
            if self._is_equivalent(candidate, left_zero, right_zero):
                continue
            symbol = candidate.binop_symbol()
            if symbol is None:
                raise ValueError(f"{candidate} is not a binary operation")
            new_op = symbol + "=" if is_compound else symbol
            mutated = source[:start] + new_op + source[end:]
            results.append(
                MutantInfo(
                    mutated,
                    Mutation(Range(start, end), OPERATOR_NAME, cur_op, new_op),
                )
            )
        return results

    def __str__(self) -> str:
        return (
            f"BinaryOperator({self.operation}, location: file id: FileId({self.loc.file_id}), "
            f"index start: {self.loc.span.start}, index stop: {self.loc.span.end})"
        )