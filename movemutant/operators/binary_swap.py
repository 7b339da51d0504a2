"""Swapping of the operands around a binary operator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from movemutant.operator import MutantInfo, MutationOperator
from movemutant.operators.common import Exp, ExpKind, ExpLoc, Loc, Operation
from movemutant.report import Mutation, Range

log = logging.getLogger(__name__)

OPERATOR_NAME = "binary_operator_swap"

_COMMUTATIVE = frozenset(
    {
        Operation.ADD,
        Operation.MUL,
        Operation.EQ,
        Operation.NEQ,
        Operation.BIT_OR,
        Operation.BIT_AND,
        Operation.OR,
        Operation.AND,
        Operation.XOR,
    }
)


def _calls_function(exp: Exp) -> bool:
    if exp.kind is ExpKind.CALL and exp.operation is Operation.MOVE_FUNCTION:
        return True
    return exp.kind in (ExpKind.LAMBDA, ExpKind.INVOKE)


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
class BinarySwap(MutationOperator):
    """Exchanges the left and right operands of a binary expression."""

    operation: Operation
    loc: Loc
    exps: tuple[ExpLoc, ...] = ()

    name: ClassVar[str] = OPERATOR_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "exps", tuple(self.exps))

    @property
    def file_id(self) -> int:
        return self.loc.file_id

    def is_commutative(self) -> bool:
        """True unless the operation is commutative and an operand calls a function,
        a lambda or a closure, where operand order might matter."""
        if self.operation in _COMMUTATIVE:
            if any(item.exp.any(_calls_function) for item in self.exps):
                return False
        return True

    def apply(self, source: str) -> list[MutantInfo]:
        if len(self.exps) != 2:
            log.warning(
                "BinarySwapOperator: Expected exactly two expressions, got %d",
                len(self.exps),
            )
            return []

        if self.is_commutative():
            return []

        left = self.exps[0].loc.span
        right = self.exps[1].loc.span

        op_start = _skip_whitespace_forward(source, left.end)
        op_end = _trim_whitespace_backward(source, right.start)
        binop = source[op_start:op_end]

        start, end = left.start, right.end
        cur_op = source[start:end]
        left_str = source[left.start:left.end]
        right_str = source[right.start:right.end]

        new_op = f"{right_str} {binop} {left_str}"
        mutated = source[:start] + new_op + source[end:]
        return [
            MutantInfo(
                mutated,
                Mutation(Range(start, end), OPERATOR_NAME, cur_op, new_op),
            )
        ]

    def __str__(self) -> str:
        return (
            f"BinarySwapOperator(location: file id: FileId({self.loc.file_id}), "
            f"index start: {self.exps[0].loc.span.start}, "
            f"index stop: {self.exps[1].loc.span.end})"
        )