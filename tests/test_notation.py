import pytest

from dsakit.notation import infix_to_postfix, infix_to_prefix
from dsakit.stack import is_operator

EXPRESSIONS = ["a+b*c", "(a+b)*c", "a*(b-c)/d", "a^b+c", "((a))", "x", "a+b-c*d/e^f"]


def _operands(text):
    return [c for c in text if c not in "()" and not is_operator(c) and not c.isspace()]


def _operators(text):
    return sorted(c for c in text if is_operator(c))


def test_postfix_respects_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_postfix_respects_parentheses():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_prefix_respects_precedence():
    assert infix_to_prefix("a+b*c") == "+a*bc"


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_postfix_keeps_operand_order_and_operators(expression):
    result = infix_to_postfix(expression)
    assert "(" not in result and ")" not in result
    assert _operands(result) == _operands(expression)
    assert _operators(result) == _operators(expression)


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_prefix_keeps_operand_order_and_operators(expression):
    result = infix_to_prefix(expression)
    assert "(" not in result and ")" not in result
    assert _operands(result) == _operands(expression)
    assert _operators(result) == _operators(expression)


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_postfix_ends_and_prefix_starts_with_operator(expression):
    postfix = infix_to_postfix(expression)
    prefix = infix_to_prefix(expression)
    if _operators(expression):
        assert is_operator(postfix[-1])
        assert is_operator(prefix[0])
    else:
        assert postfix == prefix == "".join(_operands(expression))


def test_whitespace_ignored():
    assert infix_to_postfix(" a + b * c ") == infix_to_postfix("a+b*c")


@pytest.mark.parametrize("expression", ["a+b)", "(a+b", ")"])
def test_unbalanced_parentheses_raise(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)
    with pytest.raises(ValueError):
        infix_to_prefix(expression)


def test_empty_expression():
    assert infix_to_postfix("") == ""
    assert infix_to_prefix("") == ""