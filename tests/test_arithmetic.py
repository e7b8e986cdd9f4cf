import pytest
from hypothesis import given, assume, strategies as st

from kflisp.interpreter import Interpreter
from kflisp.evaluation.builtins import builtin_op, trunc_div, trunc_mod
from kflisp.types.operator import Operator
from kflisp.types.value import Number, Error, Symbol, Expression, INT64_MIN, INT64_MAX

int64 = st.integers(min_value=INT64_MIN, max_value=INT64_MAX)
nonzero_int64 = int64.filter(lambda b: b != 0)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(- 10 3 2)", "5"),
        ("(* 2 3 4)", "24"),
        ("(/ 12 3)", "4"),
        ("(- 7)", "-7"),
        ("(- -7)", "7"),
        ("(+ 5)", "5"),
        ("(* 5)", "5"),
        ("(/ 5)", "5"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(/ (+ 20 10) (* 2 5))", "3"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(+ -1 5 -3)", "1"),
        ("+ 1 2", "3"),
        ("* 10 (- 20 5) 2", "300"),
        # truncation toward zero
        ("(/ 7 2)", "3"),
        ("(/ -7 2)", "-3"),
        ("(/ 7 -2)", "-3"),
        ("(/ -7 -2)", "3"),
        ("(% 7 2)", "1"),
        ("(% -7 2)", "-1"),
        ("(% 7 -2)", "1"),
        ("(% -7 -2)", "-1"),
        ("(% 100 7 3)", "2"),
        # exponentiation
        ("(^ 2 10)", "1024"),
        ("(^ 2 3 2)", "64"),
        ("(^ -3 3)", "-27"),
        ("(^ 7 0)", "1"),
        ("(^ 0 0)", "1"),
        ("(^ 0 5)", "0"),
    ],
)
def test_arithmetic(rep, source, expected):
    assert rep(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 9223372036854775807 1)", "-9223372036854775808"),
        ("(- -9223372036854775808 1)", "9223372036854775807"),
        ("(* 4611686018427387904 2)", "-9223372036854775808"),
        ("(- -9223372036854775808)", "-9223372036854775808"),
        ("(/ -9223372036854775808 -1)", "-9223372036854775808"),
        ("(% -9223372036854775808 -1)", "0"),
        ("(^ 2 63)", "-9223372036854775808"),
        ("(^ 2 64)", "0"),
        ("(^ 2 1000000000000)", "0"),
        ("(^ -1 1000000000001)", "-1"),
    ],
)
def test_overflow_wraps_around(rep, source, expected):
    assert rep(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(/ 1 0)", "Error: Division by zero!"),
        ("(/ 10 2 0 5)", "Error: Division by zero!"),
        ("(% 1 0)", "Error: Modulo by zero!"),
        ("(% 0 0)", "Error: Modulo by zero!"),
        ("(^ 2 -1)", "Error: Negative exponent!"),
        ("(^ 2 3 -1)", "Error: Negative exponent!"),
    ],
)
def test_domain_errors(rep, source, expected):
    assert rep(source) == expected


def test_division_by_zero_stops_the_fold():
    assert builtin_op(Operator.DIV, [Number(8), Number(0), Number(2)]) == Error("Division by zero!")


def test_non_number_operand_rejects_whole_list():
    assert builtin_op(Operator.ADD, [Number(1), Symbol("+")]) == Error("Cannot operate on non-number")
    assert builtin_op(Operator.SUB, [Expression([])]) == Error("Cannot operate on non-number")
    assert builtin_op(Operator.DIV, [Number(1), Number(0), Error("x")]) == Error("Cannot operate on non-number")


def test_builtin_op_accepts_operator_names():
    assert builtin_op("*", [Number(6), Number(7)]) == Number(42)


def test_builtin_op_unknown_operator():
    assert builtin_op("max", [Number(1), Number(2)]) == Error("Unknown operator!")


def test_builtin_op_without_operands():
    assert builtin_op(Operator.ADD, []) == Error("Operator needs at least one operand!")


@given(a=int64, b=nonzero_int64)
def test_div_truncates_toward_zero(a, b):
    interp = Interpreter()
    assume(not (a == INT64_MIN and b == -1))
    q = interp.eval(f"(/ {a} {b})")
    r = interp.eval(f"(% {a} {b})")
    assert isinstance(q, Number) and isinstance(r, Number)
    assert a == b * q.value + r.value
    assert abs(r.value) < abs(b)
    assert r.value == 0 or (r.value < 0) == (a < 0)
    assert abs(q.value) == abs(a) // abs(b)


@given(a=int64)
def test_div_and_mod_by_zero(a):
    interp = Interpreter()
    assert interp.eval(f"(/ {a} 0)") == Error("Division by zero!")
    assert interp.eval(f"(% {a} 0)") == Error("Modulo by zero!")


@given(a=int64, b=int64)
def test_add_sub_mul_wrap_consistently(a, b):
    interp = Interpreter()
    for op, exact in (("+", a + b), ("-", a - b), ("*", a * b)):
        v = interp.eval(f"({op} {a} {b})")
        assert isinstance(v, Number)
        assert (exact - v.value) % 2 ** 64 == 0


@given(a=st.integers(-10 ** 6, 10 ** 6), b=st.integers(-10 ** 6, 10 ** 6).filter(bool))
def test_trunc_helpers_match_float_division_for_small_values(a, b):
    assert trunc_div(a, b) == int(a / b)
    assert trunc_mod(a, b) == a - b * int(a / b)
