from movemutant.operators.binary_swap import BinarySwap
from movemutant.operators.common import Exp, ExpKind, ExpLoc, Loc, Operation, Span
from movemutant.report import Range


def _call(node_id, start, end):
    return ExpLoc(
        Exp(ExpKind.CALL, node_id, operation=Operation.MOVE_FUNCTION), Loc(1, Span(start, end))
    )


def _var(node_id, start, end):
    return ExpLoc(Exp(ExpKind.LOCAL_VAR, node_id), Loc(1, Span(start, end)))


def test_get_file_id():
    operator = BinarySwap(Operation.ADD, Loc(1, Span(0, 0)), [])
    assert operator.file_id == 1


def test_wrong_number_of_expressions_gives_nothing():
    operator = BinarySwap(Operation.ADD, Loc(1, Span(0, 7)), [_call(1, 0, 3)])
    assert operator.apply("f() + x") == []


def test_commutative_pure_operands_are_not_swapped():
    operator = BinarySwap(Operation.ADD, Loc(1, Span(0, 5)), [_var(1, 0, 1), _var(2, 4, 5)])
    assert operator.is_commutative() is True
    assert operator.apply("a + b") == []


def test_non_commutative_operation_is_not_swapped():
    operator = BinarySwap(Operation.SUB, Loc(1, Span(0, 7)), [_call(1, 0, 3), _var(2, 6, 7)])
    assert operator.is_commutative() is True
    assert operator.apply("f() - x") == []


def test_commutative_with_function_call_is_swapped():
    operator = BinarySwap(Operation.ADD, Loc(1, Span(0, 7)), [_call(1, 0, 3), _var(2, 6, 7)])
    assert operator.is_commutative() is False
    result = operator.apply("f() + x")
    assert len(result) == 1
    info = result[0]
    assert info.mutated_source == "x + f()"
    assert info.mutation.changed_place == Range(0, 7)
    assert info.mutation.old_value == "f() + x"
    assert info.mutation.new_value == "x + f()"
    assert info.mutation.operator_name == "binary_operator_swap"


def test_nested_lambda_blocks_commutativity():
    nested = Exp(ExpKind.BLOCK, 3, args=[Exp(ExpKind.LAMBDA, 4)])
    left = ExpLoc(nested, Loc(1, Span(0, 1)))
    operator = BinarySwap(Operation.MUL, Loc(1, Span(0, 5)), [left, _var(2, 4, 5)])
    assert operator.is_commutative() is False
    assert [r.mutated_source for r in operator.apply("a * b;")] == ["b * a;"]


def test_display():
    operator = BinarySwap(Operation.ADD, Loc(1, Span(0, 7)), [_call(1, 0, 3), _var(2, 6, 7)])
    assert str(operator) == (
        "BinarySwapOperator(location: file id: FileId(1), index start: 0, index stop: 7)"
    )