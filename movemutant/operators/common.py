"""Source locations, expression model and Move constants shared by operators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

MOVE_EMPTY_STMT = "{}"
MOVE_CONTINUE = "continue"
MOVE_BREAK = "break"
MOVE_TRUE = "true"
MOVE_FALSE = "false"
MOVE_ZERO_U256 = "0u256"
MOVE_MAX_U256 = (
    "115792089237316195423570985008687907853269984665640564039457584007913129639935u256"
)
MOVE_MAX_INFERRED_NUM = (
    "115792089237316195423570985008687907853269984665640564039457584007913129639935"
)
MOVE_ADDR_ZERO = "0x0"
MOVE_ADDR_MAX = "0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF"


@dataclass(frozen=True, order=True)
class Span:
    """A half-open byte range ``[start, end)`` in a file."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            raise ValueError(f"invalid span {self.start}..{self.end}")

    def merge(self, other: "Span") -> "Span":
        """Return the smallest span covering both spans."""
        return Span(min(self.start, other.start), max(self.end, other.end))


@dataclass(frozen=True)
class Loc:
    """A span inside a particular file."""

    file_id: int
    span: Span


class Operation(Enum):
    """Operations that can appear in a call expression."""

    MOVE_TO = "MoveTo"
    ABORT = "Abort"
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    MOD = "Mod"
    AND = "And"
    OR = "Or"
    EQ = "Eq"
    NEQ = "Neq"
    GE = "Ge"
    GT = "Gt"
    LE = "Le"
    LT = "Lt"
    BIT_AND = "BitAnd"
    BIT_OR = "BitOr"
    SHL = "Shl"
    SHR = "Shr"
    XOR = "Xor"
    NOT = "Not"
    MOVE_FUNCTION = "MoveFunction"

    def __str__(self) -> str:
        return self.value

    def binop_symbol(self) -> Optional[str]:
        """Return the source symbol of a binary operation, or None otherwise."""
        return _BINOP_SYMBOLS.get(self)


_BINOP_SYMBOLS = {
    Operation.ADD: "+",
    Operation.SUB: "-",
    Operation.MUL: "*",
    Operation.DIV: "/",
    Operation.MOD: "%",
    Operation.AND: "&&",
    Operation.OR: "||",
    Operation.EQ: "==",
    Operation.NEQ: "!=",
    Operation.GE: ">=",
    Operation.GT: ">",
    Operation.LE: "<=",
    Operation.LT: "<",
    Operation.BIT_AND: "&",
    Operation.BIT_OR: "|",
    Operation.SHL: "<<",
    Operation.SHR: ">>",
    Operation.XOR: "^",
}


class PrimitiveType(Enum):
    """Primitive types a literal can have."""

    ADDRESS = "Address"
    BOOL = "Bool"
    U8 = "U8"
    U16 = "U16"
    U32 = "U32"
    U64 = "U64"
    U128 = "U128"
    U256 = "U256"
    NUM = "Num"
    SIGNER = "Signer"


class ValueKind(Enum):
    BOOL = "Bool"
    NUMBER = "Number"
    ADDRESS = "Address"


@dataclass(frozen=True)
class Value:
    """A literal value."""

    kind: ValueKind
    data: Union[bool, int]

    def __post_init__(self) -> None:
        if self.kind is ValueKind.BOOL:
            if not isinstance(self.data, bool):
                raise TypeError("a boolean value needs a bool")
        elif isinstance(self.data, bool) or not isinstance(self.data, int):
            raise TypeError(f"a {self.kind.value.lower()} value needs an int")

    @classmethod
    def boolean(cls, flag: bool) -> "Value":
        return cls(ValueKind.BOOL, flag)

    @classmethod
    def number(cls, number: int) -> "Value":
        return cls(ValueKind.NUMBER, number)

    @classmethod
    def address(cls, address: int) -> "Value":
        return cls(ValueKind.ADDRESS, address)

    @property
    def is_number(self) -> bool:
        return self.kind is ValueKind.NUMBER

    def __str__(self) -> str:
        if self.kind is ValueKind.BOOL:
            rendered = "true" if self.data else "false"
        elif self.kind is ValueKind.ADDRESS:
            rendered = f"0x{self.data:x}"
        else:
            rendered = str(self.data)
        return f"{self.kind.value}({rendered})"


class ExpKind(Enum):
    """Kinds of expression nodes."""

    CALL = "Call"
    VALUE = "Value"
    IF_ELSE = "IfElse"
    LOOP_CONT = "LoopCont"
    LAMBDA = "Lambda"
    INVOKE = "Invoke"
    SPEC_BLOCK = "SpecBlock"
    BLOCK = "Block"
    SEQUENCE = "Sequence"
    RETURN = "Return"
    LOCAL_VAR = "LocalVar"
    TEMPORARY = "Temporary"
    ASSIGN = "Assign"
    MUTATE = "Mutate"
    LOOP = "Loop"
    QUANT = "Quant"
    MATCH = "Match"
    INVALID = "Invalid"


@dataclass(frozen=True)
class Exp:
    """An expression node with its operation, value and sub-expressions."""

    kind: ExpKind
    node_id: int = 0
    operation: Optional[Operation] = None
    value: Optional[Value] = None
    args: tuple["Exp", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def any(self, predicate: Callable[["Exp"], bool]) -> bool:
        """Whether this node or any node below it satisfies ``predicate``."""
        if predicate(self):
            return True
        return any(arg.any(predicate) for arg in self.args)

    def is_zero_number(self) -> bool:
        """Whether this is a numeric literal equal to zero."""
        return (
            self.kind is ExpKind.VALUE
            and self.value is not None
            and self.value.is_number
            and self.value.data == 0
        )


@dataclass(frozen=True)
class ExpLoc:
    """An expression paired with its source location."""

    exp: Exp
    loc: Loc