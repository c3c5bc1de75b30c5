import io

import pytest

from dsakit.expressions import (
    evaluate_infix,
    evaluate_postfix,
    infix_to_numeric_postfix,
    infix_to_postfix,
    main,
)


def test_char_postfix_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_char_postfix_parentheses():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


@pytest.mark.parametrize("infix", ["a+b-c", "A*(B+C)/D", "x^y^z", "1+2*3-4", "((p))"])
def test_char_postfix_keeps_operands_in_order(infix):
    postfix = infix_to_postfix(infix)
    operands = [c for c in infix if c.isalnum()]
    assert [c for c in postfix if c.isalnum()] == operands
    assert "(" not in postfix and ")" not in postfix
    assert len(postfix) == len([c for c in infix if c not in "()"])


def test_char_postfix_ignores_other_characters():
    assert infix_to_postfix("a + b") == infix_to_postfix("a+b")


@pytest.mark.parametrize("infix", ["a+b)", "(a+b", ")"])
def test_char_postfix_unbalanced(infix):
    with pytest.raises(ValueError):
        infix_to_postfix(infix)


def test_numeric_postfix_multi_digit():
    assert infix_to_numeric_postfix("12+3") == "12 3 +"


def test_numeric_postfix_spaces_ignored():
    assert infix_to_numeric_postfix("12 + 3") == infix_to_numeric_postfix("12+3")


def test_numeric_postfix_empty():
    assert infix_to_numeric_postfix("") == ""


@pytest.mark.parametrize("infix", ["(1+2", "1+2)"])
def test_numeric_postfix_unbalanced(infix):
    with pytest.raises(ValueError):
        infix_to_numeric_postfix(infix)


@pytest.mark.parametrize(
    "infix, expected",
    [
        ("2+3*4", 2 + 3 * 4),
        ("(2+3)*4", (2 + 3) * 4),
        ("100-20-30", 100 - 20 - 30),
        ("2^3", 2**3),
        ("84/4/3", 84 // 4 // 3),
        ("10*(6-1)", 10 * (6 - 1)),
    ],
)
def test_evaluate_infix(infix, expected):
    assert evaluate_infix(infix) == expected


def test_power_is_left_associative():
    assert evaluate_infix("2^3^2") == (2**3) ** 2


def test_division_truncates_toward_zero():
    assert evaluate_infix("(1-8)/2") == -(7 // 2)


def test_power_with_zero_exponent():
    assert evaluate_infix("5^0") == 1
    assert evaluate_infix("5^(1-3)") == 1


def test_evaluate_postfix_matches_infix():
    infix = "(15+5)*3-40/8"
    assert evaluate_postfix(infix_to_numeric_postfix(infix)) == evaluate_infix(infix)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_infix("4/0")


@pytest.mark.parametrize("postfix", ["", "1 +", "1 2", "+"])
def test_malformed_postfix(postfix):
    with pytest.raises(ValueError):
        evaluate_postfix(postfix)


def test_main_with_argument(capsys):
    assert main(["(2+3)*4"]) == 0
    out = capsys.readouterr().out
    assert f"Postfix expression: {infix_to_numeric_postfix('(2+3)*4')}" in out
    assert f"Result of evaluation: {(2 + 3) * 4}" in out


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("7-2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"Result of evaluation: {7 - 2}" in out


def test_main_reports_error(capsys):
    assert main(["1/0"]) == 1
    assert "error" in capsys.readouterr().err