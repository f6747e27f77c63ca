"""Conversion of infix expressions to postfix and prefix notation."""

from __future__ import annotations

from dsakit.stack import Stack, StackUnderflowError, is_operator, precedence

_SWAP_PARENS = str.maketrans("()", ")(")


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence are popped before pushing, so all operators,
    including ``^``, group left to right. Whitespace is ignored.
    """
    operators: Stack[str] = Stack()
    output: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if is_operator(char):
            while not operators.is_empty() and precedence(operators.peek()) >= precedence(char):
                output.append(operators.pop())
            operators.push(char)
        elif char == "(":
            operators.push(char)
        elif char == ")":
            try:
                while operators.peek() != "(":
                    output.append(operators.pop())
                operators.pop()
            except StackUnderflowError:
                raise ValueError("unbalanced parentheses: unmatched ')'") from None
        else:
            output.append(char)
    while not operators.is_empty():
        top = operators.pop()
        if top == "(":
            raise ValueError("unbalanced parentheses: unmatched '('")
        output.append(top)
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix.

    The expression is reversed with its parentheses swapped, converted to
    postfix, and the result reversed.
    """
    mirrored = expression[::-1].translate(_SWAP_PARENS)
    return infix_to_postfix(mirrored)[::-1]