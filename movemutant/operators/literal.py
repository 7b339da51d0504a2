"""Replacement of literals with other values of the same type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from movemutant.operator import MutantInfo, MutationOperator
from movemutant.operators.common import (
    MOVE_ADDR_MAX,
    MOVE_ADDR_ZERO,
    MOVE_FALSE,
    MOVE_MAX_INFERRED_NUM,
    MOVE_MAX_U256,
    MOVE_TRUE,
    MOVE_ZERO_U256,
    Loc,
    PrimitiveType,
    Value,
)
from movemutant.report import Mutation, Range

OPERATOR_NAME = "literal_replacement"

_INTEGER_BITS = {
    PrimitiveType.U8: 8,
    PrimitiveType.U16: 16,
    PrimitiveType.U32: 32,
    PrimitiveType.U64: 64,
    PrimitiveType.U128: 128,
}

_FIXED_REPLACEMENTS = {
    PrimitiveType.ADDRESS: (MOVE_ADDR_ZERO, MOVE_ADDR_MAX),
    PrimitiveType.BOOL: (MOVE_TRUE, MOVE_FALSE),
    PrimitiveType.U256: (MOVE_ZERO_U256, MOVE_MAX_U256),
    PrimitiveType.NUM: ("0", MOVE_MAX_INFERRED_NUM),
}


def _integer_replacements(value: Value, bits: int, type_name: str) -> tuple[str, ...]:
    if not value.is_number:
        return ()
    maximum = (1 << bits) - 1
    number = value.data
    if not 0 <= number <= maximum:
        raise ValueError(f"Invalid {type_name} value")
    return (
        "0",
        str(maximum),
        str(min(number + 1, maximum)),
        str(max(number - 1, 0)),
    )


@dataclass(frozen=True)
class Literal(MutationOperator):
    """Replaces a literal with boundary and neighbouring values of its type.

    ``optype`` is ``None`` for a type that is not primitive.
    """

    operation: Value
    optype: Optional[PrimitiveType]
    loc: Loc

    name: ClassVar[str] = OPERATOR_NAME

    @property
    def file_id(self) -> int:
        return self.loc.file_id

    def _candidates(self) -> tuple[str, ...]:
        if self.optype in _FIXED_REPLACEMENTS:
            return _FIXED_REPLACEMENTS[self.optype]
        bits = _INTEGER_BITS.get(self.optype)  # type: ignore[arg-type]
        if bits is None:
            return ()
        return _integer_replacements(self.operation, bits, self.optype.value.lower())

    def apply(self, source: str) -> list[MutantInfo]:
        start, end = self.loc.span.start, self.loc.span.end
        cur_op = source[start:end]
        return [
            MutantInfo(
                source[:start] + op + source[end:],
                Mutation(Range(start, end), OPERATOR_NAME, cur_op, op),
            )
            for op in self._candidates()
            if op != cur_op
        ]

    def __str__(self) -> str:
        return (
            f"LiteralOperator({self.operation}, location: file id: FileId({self.loc.file_id}), "
            f"index start: {self.loc.span.start}, index stop: {self.loc.span.end})"
        )